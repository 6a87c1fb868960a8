"""Conversion orchestration for the streaming CSV to JSON pipeline.

This module wires the row reader and stream writer together through an
unbuffered handoff channel and blocks until the writer completes.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, TypeVar

from core.errors import ChannelAbortedError
from core.logging_config import get_logger
from core.types import ConversionOptions, ConversionResult, Record
from ingest.handoff_channel import HandoffChannel
from ingest.row_reader import RowReader
from store.stream_writer import StreamWriter

_LOGGER = get_logger(__name__)

_STAGE_COUNT = 2

_T = TypeVar("_T")


class ConversionPipelineRunner:
    """Runner for one reader/writer conversion."""

    def __init__(self, options: ConversionOptions) -> None:
        self._options = options
        self._channel: HandoffChannel[Record] = HandoffChannel()
        self._reader = RowReader(options)
        self._writer = StreamWriter(options)

    def run(self) -> ConversionResult:
        """Execute both stages and return the conversion outcome."""
        _LOGGER.info(
            "conversion_started",
            input_path=str(self._options.input_path),
            output_path=str(self._writer.output_path),
            separator=self._options.separator,
            formatting_mode=self._options.formatting_mode.value,
        )
        with ThreadPoolExecutor(
            max_workers=_STAGE_COUNT, thread_name_prefix="csv2json"
        ) as executor:
            reader_future = executor.submit(self._run_stage, self._reader.run)
            writer_future = executor.submit(self._run_stage, self._writer.run)
            # The writer's future is the one-shot completion signal.
            writer_error = writer_future.exception()
            reader_error = reader_future.exception()
        _raise_root_failure(reader_error, writer_error)
        read_summary = reader_future.result()
        write_summary = writer_future.result()
        result = ConversionResult(
            input_path=self._options.input_path,
            output_path=write_summary.output_path,
            records_written=write_summary.records_written,
            rows_skipped=read_summary.rows_skipped,
        )
        _log_conversion_completion(result)
        return result

    def _run_stage(self, stage: Callable[[HandoffChannel[Record]], _T]) -> _T:
        """Run one stage, aborting the channel if it fails."""
        try:
            return stage(self._channel)
        except BaseException as error:
            self._channel.abort(error)
            raise


def convert_csv_to_json(options: ConversionOptions) -> ConversionResult:
    """Convert a CSV table into a JSON array file beside it.

    Args:
        options: Conversion settings.

    Returns:
        Output location, written record count, and skipped rows.

    Raises:
        Csv2JsonReadError: If the input cannot be opened or tokenized.
        Csv2JsonWriteError: If the output cannot be created or written.
    """
    runner = ConversionPipelineRunner(options)
    return runner.run()


def _raise_root_failure(
    reader_error: BaseException | None,
    writer_error: BaseException | None,
) -> None:
    """Re-raise the failure that stopped the pipeline, if any.

    A stage that failed only because its peer aborted the channel reports
    a ChannelAbortedError; the peer's own error is preferred.
    """
    failures = [error for error in (reader_error, writer_error) if error is not None]
    if not failures:
        return
    for error in failures:
        if not isinstance(error, ChannelAbortedError):
            raise error
    raise failures[0]


def _log_conversion_completion(result: ConversionResult) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "conversion_completed",
        input_path=str(result.input_path),
        output_path=str(result.output_path),
        records_written=result.records_written,
        rows_skipped=len(result.rows_skipped),
    )
