"""JSON array writer stage.

This module consumes records from the handoff channel and writes them
incrementally as one JSON array document beside the input table.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from core.constants import JSON_FILE_EXTENSION
from core.errors import Csv2JsonWriteError
from core.logging_config import get_logger
from core.types import ConversionOptions, Record, WriteSummary
from ingest.handoff_channel import HandoffChannel
from store.json_formatter import JsonFormatter, build_json_formatter

_LOGGER = get_logger(__name__)


def derive_output_path(input_path: Path) -> Path:
    """Return the JSON path in the input directory with the same base name.

    Args:
        input_path: CSV table path.

    Returns:
        Path whose table extension is replaced by ``.json``.
    """
    return input_path.with_suffix(JSON_FILE_EXTENSION)


class StreamWriter:
    """Consumer stage that owns the output stream for one conversion."""

    def __init__(self, options: ConversionOptions) -> None:
        self._output_path = derive_output_path(options.input_path)
        self._formatter = build_json_formatter(options.formatting_mode)

    @property
    def output_path(self) -> Path:
        return self._output_path

    def run(self, channel: HandoffChannel[Record]) -> WriteSummary:
        """Write every received record, then close the array envelope.

        The returned summary is the completion signal: it exists only once
        the closing bracket is written and the file is closed.

        Args:
            channel: Handoff channel shared with the reader stage.

        Returns:
            Output path and the number of written records.

        Raises:
            Csv2JsonWriteError: If the output cannot be created or written.
        """
        try:
            output_file = self._output_path.open("w", encoding="utf-8", newline="")
        except OSError as error:
            raise Csv2JsonWriteError(
                f"Failed to create output file {self._output_path}: {error}. "
                "Check directory permissions and free disk space."
            ) from error
        _LOGGER.info("stream_writer_opened", output_path=str(self._output_path))
        try:
            with output_file:
                records_written = _write_envelope(output_file, channel, self._formatter)
        except OSError as error:
            raise Csv2JsonWriteError(
                f"Failed to write JSON output to {self._output_path}: {error}. "
                "The partial file was left in place."
            ) from error
        return WriteSummary(output_path=self._output_path, records_written=records_written)


def _write_envelope(
    output_file: TextIO,
    channel: HandoffChannel[Record],
    formatter: JsonFormatter,
) -> int:
    """Write brackets, separators, and records until the channel closes."""
    output_file.write("[" + formatter.line_break)
    records_written = 0
    for record in channel:
        if records_written:
            output_file.write(formatter.element_separator)
        output_file.write(formatter.serialize(record))
        records_written += 1
    closing = formatter.line_break + "]" if records_written else "]"
    output_file.write(closing)
    return records_written
