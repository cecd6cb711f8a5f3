"""
Custom exception classes for modv.

This module defines the exceptions raised while reading dependency records
and writing the resulting graph description. Both are terminal for the
current invocation: the core never retries or recovers from them.
"""

from typing import Optional


class ModvError(Exception):
    """Base exception class for all modv errors.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a ModvError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class MalformedRecordError(ModvError):
    """Exception raised when an input line is not a "<parent> <child>" record.

    Records parsed before the offending line remain in the graph; nothing
    after it is read.

    Attributes:
        message: Error message describing the malformed record.
        line_number: 1-based position of the line in the input stream.
        line: The offending line, whitespace-trimmed.

    Example:
        >>> err = MalformedRecordError(3, "onlyonetoken")
        >>> err.line_number
        3
    """

    def __init__(
        self,
        line_number: int,
        line: str,
        message: Optional[str] = None,
    ) -> None:
        """Initialize a MalformedRecordError.

        Args:
            line_number: 1-based line number of the malformed record.
            line: The offending line.
            message: Optional override for the default message.
        """
        self.line_number = line_number
        self.line = line
        if message is None:
            message = (
                f"Malformed record on line {line_number}: {line!r}. "
                f"Expected '<parent> <child>'"
            )
        super().__init__(message)


class SerializationSinkError(ModvError):
    """Exception raised when the output sink rejects a write.

    Attributes:
        message: Error message describing the failure.
        cause: The underlying exception raised by the sink.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
