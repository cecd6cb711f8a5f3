"""
Tests for the edge record reader.
"""

import io

import pytest

from modv import EdgeRecord, MalformedRecordError, read_records
from modv.parser.record_reader import parse_record


class TestRecordReader:
    """Tests for reading "<parent> <child>" records."""

    def test_reads_stream(self):
        """Test reading records from a text stream."""
        stream = io.StringIO("a b\na c\n")
        records = list(read_records(stream))

        assert records == [
            EdgeRecord(line_number=1, parent="a", child="b"),
            EdgeRecord(line_number=2, parent="a", child="c"),
        ]

    def test_trims_whitespace(self):
        """Test that surrounding whitespace is ignored."""
        record = parse_record("  a   b \r\n", 1)
        assert (record.parent, record.child) == ("a", "b")

    def test_extra_tokens_ignored(self):
        """Test that tokens after the second are ignored."""
        record = parse_record("a b c", 1)
        assert (record.parent, record.child) == ("a", "b")

    def test_blank_lines_skipped(self):
        """Test that blank lines do not produce records."""
        records = list(read_records(["a b\n", "\n", "   \n", "c d"]))
        assert [r.line_number for r in records] == [1, 4]

    def test_malformed_line(self):
        """Test that a one-token line raises MalformedRecordError."""
        with pytest.raises(MalformedRecordError) as exc_info:
            list(read_records(["a b\n", "onlyonetoken\n"]))

        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "onlyonetoken"
        assert "onlyonetoken" in str(exc_info.value)

    def test_empty_stream(self):
        """Test that an empty stream yields nothing."""
        assert list(read_records(io.StringIO(""))) == []
