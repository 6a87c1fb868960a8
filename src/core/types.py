"""Shared typed models.

This module defines immutable data models passed between the reader,
writer, pipeline, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from core.constants import (
    DEFAULT_ENCODING,
    DEFAULT_SEPARATOR,
    SEPARATOR_DELIMITERS,
)
from core.errors import Csv2JsonConfigError

Record = dict[str, str]


class FormattingMode(Enum):
    """JSON rendering choice, fixed for a whole conversion."""

    COMPACT = "compact"
    INDENTED = "indented"

    @classmethod
    def from_pretty(cls, pretty: bool) -> "FormattingMode":
        """Map the boolean pretty flag onto a formatting mode."""
        return cls.INDENTED if pretty else cls.COMPACT


@dataclass(frozen=True)
class ConversionOptions:
    """Settings for one CSV to JSON conversion.

    Attributes:
        input_path: Path of the CSV table to convert.
        separator: Column separator name, ``comma`` or ``semicolon``.
        pretty: Emit indented, multi-line JSON when true.
        encoding: Text encoding of the input table.
    """

    input_path: Path
    separator: str = DEFAULT_SEPARATOR
    pretty: bool = False
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if self.separator not in SEPARATOR_DELIMITERS:
            raise Csv2JsonConfigError(
                f"Invalid separator '{self.separator}': "
                f"expected one of {sorted(SEPARATOR_DELIMITERS)}. "
                "Only comma or semicolon separators are allowed."
            )

    @property
    def delimiter(self) -> str:
        """Single-character field delimiter for the tokenizer."""
        return SEPARATOR_DELIMITERS[self.separator]

    @property
    def formatting_mode(self) -> FormattingMode:
        return FormattingMode.from_pretty(self.pretty)


@dataclass(frozen=True)
class SkippedRow:
    """Data row dropped for not matching the header row.

    Attributes:
        line_number: One-based line number where the row ended.
        row: Raw field values of the row.
        reason: Human-readable error message.
    """

    line_number: int
    row: tuple[str, ...]
    reason: str


@dataclass(frozen=True)
class ReadSummary:
    """Outcome of one Row Reader run."""

    headers: tuple[str, ...]
    records_sent: int
    rows_skipped: tuple[SkippedRow, ...]


@dataclass(frozen=True)
class WriteSummary:
    """Outcome of one Stream Writer run."""

    output_path: Path
    records_written: int


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a completed conversion.

    Attributes:
        input_path: Converted CSV table.
        output_path: Written JSON document.
        records_written: Number of objects in the JSON array.
        rows_skipped: Rows dropped for field-count mismatches, in input order.
    """

    input_path: Path
    output_path: Path
    records_written: int
    rows_skipped: tuple[SkippedRow, ...]
