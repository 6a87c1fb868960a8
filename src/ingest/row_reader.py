"""CSV row reader stage.

This module tokenizes the input table, builds one record per data row,
and publishes records onto the handoff channel in input order.
"""

from __future__ import annotations

import csv
from typing import Any, Iterator

from core.errors import Csv2JsonReadError, FieldCountMismatchError
from core.logging_config import get_logger
from core.types import ConversionOptions, ReadSummary, Record, SkippedRow
from ingest.handoff_channel import HandoffChannel
from ingest.record_builder import build_record

_LOGGER = get_logger(__name__)


class RowReader:
    """Producer stage that owns the input stream for one conversion."""

    def __init__(self, options: ConversionOptions) -> None:
        self._options = options

    def run(self, channel: HandoffChannel[Record]) -> ReadSummary:
        """Read every data row and send valid records on the channel.

        The channel is closed only after a clean end of input. Fatal errors
        propagate with the channel left open for the caller to abort.

        Args:
            channel: Handoff channel shared with the writer stage.

        Returns:
            Header row, sent record count, and skipped rows.

        Raises:
            Csv2JsonReadError: If the input cannot be opened or tokenized.
        """
        input_path = self._options.input_path
        try:
            input_file = input_path.open("r", encoding=self._options.encoding, newline="")
        except (OSError, LookupError) as error:
            raise Csv2JsonReadError(
                f"Failed to open input table {input_path}: {error}. "
                "Check that the file exists, is readable, and the encoding is valid."
            ) from error
        with input_file:
            reader = csv.reader(input_file, delimiter=self._options.delimiter, strict=True)
            rows = _iter_rows(reader, str(input_path))
            headers = _read_headers(rows, str(input_path))
            records_sent = 0
            skipped_rows: list[SkippedRow] = []
            for line_number, row in rows:
                try:
                    record = build_record(headers, row)
                except FieldCountMismatchError as error:
                    skipped_rows.append(_report_skipped_row(line_number, row, error))
                    continue
                channel.send(record)
                records_sent += 1
        channel.close()
        return ReadSummary(
            headers=headers,
            records_sent=records_sent,
            rows_skipped=tuple(skipped_rows),
        )


def _iter_rows(reader: Any, source: str) -> Iterator[tuple[int, list[str]]]:
    """Yield non-blank rows with the line number where each ended.

    Raises:
        Csv2JsonReadError: On tokenizer or decoding failures.
    """
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except (csv.Error, UnicodeDecodeError) as error:
            raise Csv2JsonReadError(
                f"Failed to parse {source} near line {reader.line_num}: {error}. "
                "Fix the malformed row or the file encoding and retry."
            ) from error
        if not row:
            continue
        yield reader.line_num, row


def _read_headers(rows: Iterator[tuple[int, list[str]]], source: str) -> tuple[str, ...]:
    """Consume the first row as the header set.

    Raises:
        Csv2JsonReadError: If the input holds no rows at all.
    """
    first_row = next(rows, None)
    if first_row is None:
        raise Csv2JsonReadError(
            f"Failed to read header row from {source}: file is empty. "
            "Add a header row naming each column."
        )
    _, headers = first_row
    return tuple(headers)


def _report_skipped_row(
    line_number: int,
    row: list[str],
    error: FieldCountMismatchError,
) -> SkippedRow:
    """Log a dropped row and return its record."""
    _LOGGER.warning("row_skipped", line_number=line_number, row=row, error=str(error))
    return SkippedRow(line_number=line_number, row=tuple(row), reason=str(error))
