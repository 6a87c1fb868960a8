"""csv2json exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class Csv2JsonError(Exception):
    """Base exception for all csv2json failures."""


class Csv2JsonConfigError(Csv2JsonError):
    """Raised for invalid arguments, settings, or input paths."""


class Csv2JsonReadError(Csv2JsonError):
    """Raised when the input table cannot be opened or tokenized."""


class FieldCountMismatchError(Csv2JsonError):
    """Raised when a data row and the header row differ in length.

    Row-level and recoverable: the reader skips the row and continues.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Line doesn't match headers format: expected {expected} fields, "
            f"got {actual}. Skipping"
        )
        self.expected = expected
        self.actual = actual


class Csv2JsonWriteError(Csv2JsonError):
    """Raised when the output document cannot be created or written."""


class ChannelClosedError(Csv2JsonError):
    """Raised on receive from a drained, closed channel or send after close."""


class ChannelAbortedError(Csv2JsonError):
    """Raised on either side of a channel after a peer stage failed."""
