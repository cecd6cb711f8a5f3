"""
Command-line interface for modv.

This module reads dependency records from a pipe (or a file), builds the
module graph and writes it to stdout as a Graphviz DOT description. Status
and error messages go to stderr so that the graph output can be piped
straight into ``dot``.
"""

import argparse
import platform
import sys
from typing import Optional, TextIO

from colorama import Fore, Style, init

from modv import __version__
from modv.exceptions import ModvError, SerializationSinkError
from modv.graph.dot_renderer import DotRenderer, write_text
from modv.graph.exporters import to_json, to_table
from modv.graph.module_graph import ModuleGraph
from modv.models.config import OutputFormat, ParseOptions, RenderOptions

USE_COLOR = True


def print_success(msg: str) -> None:
    """Print success message."""
    if USE_COLOR:
        print(f"{Fore.GREEN}{msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(f"[OK] {msg}", file=sys.stderr)


def print_error(msg: str) -> None:
    """Print error message."""
    if USE_COLOR:
        print(f"{Fore.RED}{msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(f"[ERROR] {msg}", file=sys.stderr)


def print_warning(msg: str) -> None:
    """Print warning message."""
    if USE_COLOR:
        print(f"{Fore.YELLOW}{msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(f"[WARN] {msg}", file=sys.stderr)


def print_info(msg: str) -> None:
    """Print info message."""
    if USE_COLOR:
        print(f"{Fore.CYAN}{msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(msg, file=sys.stderr)


def usage_example(system: Optional[str] = None) -> str:
    """Return a shell pipeline showing how to render the graph on this OS.

    Args:
        system: Name as returned by platform.system(); detected if None.
    """
    system = system or platform.system()
    if system == "Darwin":
        return "go mod graph | modv | dot -T svg | open -f -a /System/Applications/Preview.app"
    if system == "Windows":
        return "go mod graph | modv | dot -T png -o graph.png; start graph.png"
    return "go mod graph | modv | dot -T svg -o /tmp/modv.svg && xdg-open /tmp/modv.svg"


def print_usage() -> None:
    """Print the usage pipeline to stderr."""
    print(f"\nUsage:\n\n\t{usage_example()}\n", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="modv",
        description="Go module dependency graph visualizer - v" + __version__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Render the dependency graph of the current module
  {usage_example()}

  # One node per module regardless of version
  go mod graph | %(prog)s --ignore-version

  # Leave some modules out
  go mod graph | %(prog)s --ignore-modules golang.org/x/sys,golang.org/x/text

  # Inspect the module table instead of rendering
  go mod graph | %(prog)s --format table
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # === Input parameters ===
    input_group = parser.add_argument_group("Input Options")
    input_group.add_argument(
        "input",
        nargs="?",
        help="File of '<parent> <child>' records (default: read from a pipe on stdin)",
    )

    # === Parse parameters ===
    parse_group = parser.add_argument_group("Parse Options")
    parse_group.add_argument(
        "--ignore-version",
        action="store_true",
        help="Treat all versions of the same module as one",
    )
    parse_group.add_argument(
        "--ignore-modules",
        metavar="LIST",
        default="",
        help="Comma-separated modules to leave out, including path (e.g. golang.org/x/sys)",
    )
    parse_group.add_argument(
        "--ignore-indirect",
        action="store_true",
        help="Keep only records whose parent is the root module",
    )

    # === Render parameters ===
    render_group = parser.add_argument_group("Render Options")
    render_group.add_argument(
        "--hide-path",
        action="store_true",
        help="Do not show module paths in node labels",
    )
    version_toggle = render_group.add_mutually_exclusive_group()
    version_toggle.add_argument(
        "--hide-version",
        dest="hide_version",
        action="store_const",
        const=True,
        default=None,
        help="Do not show module versions (default with --ignore-version)",
    )
    version_toggle.add_argument(
        "--show-version",
        dest="hide_version",
        action="store_const",
        const=False,
        help="Show module versions even with --ignore-version",
    )

    # === Output parameters ===
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--format",
        "-f",
        choices=OutputFormat.values(),
        default=OutputFormat.DOT.value,
        help="Output format (default: dot)",
    )
    output_group.add_argument(
        "--output", "-o", metavar="FILE", help="Write output to FILE instead of stdout"
    )
    output_group.add_argument(
        "--no-color", action="store_true", help="Disable colored messages"
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Report statistics and skipped records on stderr",
    )
    return parser


def is_interactive(stream: TextIO) -> bool:
    """Return True if the stream is attached to a terminal."""
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def render_output(graph: ModuleGraph, output_format: str, render_options: RenderOptions) -> str:
    """Render the graph in the requested output format."""
    fmt = OutputFormat(output_format)
    if fmt is OutputFormat.JSON:
        return to_json(graph)
    if fmt is OutputFormat.TABLE:
        return to_table(graph)
    return DotRenderer(render_options).render(graph)


def show_warnings(graph: ModuleGraph) -> None:
    """Show statistics and dropped-record notes."""
    stats = graph.get_statistics()
    print_info(
        f"{stats['records_read']} record(s) read, "
        f"{stats['total_modules']} module(s), {stats['total_edges']} edge(s)"
    )
    warnings = graph.warnings.get_all()
    if warnings:
        print_warning(f"{len(warnings)} note(s):")
        for i, warning in enumerate(warnings, 1):
            context = f" [{warning.context}]" if warning.context else ""
            print(f"  {i}. {warning.level}: {warning.message}{context}", file=sys.stderr)


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI main entry point.

    Supported commands:
        go mod graph | modv
        go mod graph | modv --ignore-version --hide-path
        go mod graph | modv --ignore-modules golang.org/x/sys
        modv graph.txt --format json
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    global USE_COLOR
    if args.no_color:
        USE_COLOR = False
    else:
        init()

    parse_options = ParseOptions.from_exclusion_list(
        args.ignore_modules,
        fold_versions=args.ignore_version,
        indirect_only=args.ignore_indirect,
    )
    render_options = RenderOptions.for_parse_options(
        parse_options,
        hide_path=args.hide_path,
        hide_version=args.hide_version,
    )

    try:
        graph = ModuleGraph(parse_options)

        # 1. Read records
        if args.input:
            if args.verbose:
                print_info(f"Reading records from: {args.input}")
            try:
                with open(args.input, encoding="utf-8") as f:
                    graph.parse(f)
            except FileNotFoundError:
                print_error(f"File not found: {args.input}")
                sys.exit(1)
            except (OSError, UnicodeDecodeError) as e:
                print_error(f"Cannot read {args.input}: {e}")
                sys.exit(1)
        else:
            if is_interactive(sys.stdin):
                print_error("modv is intended to work with pipes.")
                print_usage()
                sys.exit(1)
            graph.parse(sys.stdin)

        # 2. Render
        text = render_output(graph, args.format, render_options)

        # 3. Write
        if args.output:
            try:
                with open(args.output, "w", encoding="utf-8") as f:
                    write_text(text, f)
            except OSError as e:
                raise SerializationSinkError(
                    f"Cannot write to {args.output}: {e}", cause=e
                ) from e
            if args.verbose:
                print_success(f"Graph written to {args.output}")
        else:
            write_text(text, sys.stdout)

        if args.verbose:
            show_warnings(graph)

    except ModvError as e:
        print_error(f"modv failed: {e}")
        print_usage()
        sys.exit(1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
