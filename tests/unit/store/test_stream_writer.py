"""Unit tests for the JSON array stream writer."""

from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from core.errors import ChannelAbortedError, Csv2JsonWriteError
from core.types import ConversionOptions, Record, WriteSummary
from ingest.handoff_channel import HandoffChannel
from store.stream_writer import StreamWriter, derive_output_path


def _write_records(options: ConversionOptions, records: list[Record]) -> WriteSummary:
    """Feed records to a writer from a producer thread."""
    channel: HandoffChannel[Record] = HandoffChannel()

    def produce() -> None:
        for record in records:
            channel.send(record)
        channel.close()

    producer = threading.Thread(target=produce, daemon=True)
    producer.start()
    summary = StreamWriter(options).run(channel)
    producer.join(timeout=5)
    return summary


def test_derive_output_path_replaces_extension() -> None:
    """Output should sit beside the input with a .json extension."""
    assert derive_output_path(Path("/data/in/people.csv")) == Path("/data/in/people.json")


def test_writer_emits_compact_array(tmp_path: Path) -> None:
    """Compact output should be one line with comma separators."""
    options = ConversionOptions(input_path=tmp_path / "people.csv")
    records = [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "41"}]

    summary = _write_records(options, records)

    assert summary.output_path.read_text(encoding="utf-8") == (
        '[{"name":"Alice","age":"30"},{"name":"Bob","age":"41"}]'
    )
    assert summary.records_written == 2


def test_writer_emits_indented_array(tmp_path: Path) -> None:
    """Indented output should put brackets and objects on their own lines."""
    options = ConversionOptions(input_path=tmp_path / "people.csv", pretty=True)

    summary = _write_records(options, [{"name": "Alice"}, {"name": "Bob"}])

    assert summary.output_path.read_text(encoding="utf-8") == (
        '[\n   {\n      "name": "Alice"\n   },\n   {\n      "name": "Bob"\n   }\n]'
    )


@pytest.mark.parametrize(("pretty", "expected"), [(False, "[]"), (True, "[\n]")])
def test_writer_emits_empty_array(tmp_path: Path, pretty: bool, expected: str) -> None:
    """A closed channel with no records should still yield a valid array."""
    options = ConversionOptions(input_path=tmp_path / "empty.csv", pretty=pretty)

    summary = _write_records(options, [])
    content = summary.output_path.read_text(encoding="utf-8")

    assert content == expected and json.loads(content) == []


def test_writer_raises_when_output_cannot_be_created(tmp_path: Path) -> None:
    """A missing output directory should be fatal."""
    options = ConversionOptions(input_path=tmp_path / "missing-dir" / "people.csv")

    with pytest.raises(Csv2JsonWriteError, match="Failed to create output file"):
        StreamWriter(options).run(HandoffChannel())


def test_writer_propagates_channel_abort(tmp_path: Path) -> None:
    """A reader failure should stop the writer instead of closing the array."""
    options = ConversionOptions(input_path=tmp_path / "people.csv")
    channel: HandoffChannel[Record] = HandoffChannel()
    channel.abort(RuntimeError("reader failed"))

    with pytest.raises(ChannelAbortedError):
        StreamWriter(options).run(channel)

    assert (tmp_path / "people.json").read_text(encoding="utf-8") == "["
