"""Public SDK surface for csv2json.

This module provides a stable import path for library users.
It re-exports the conversion entry point and typed option models.
"""

from __future__ import annotations

from core.config import ConverterConfig
from core.errors import (
    Csv2JsonConfigError,
    Csv2JsonError,
    Csv2JsonReadError,
    Csv2JsonWriteError,
    FieldCountMismatchError,
)
from core.types import ConversionOptions, ConversionResult, FormattingMode, SkippedRow
from ingest.pipeline import convert_csv_to_json
from ingest.record_builder import build_record
from store.json_formatter import build_json_formatter
from store.stream_writer import derive_output_path

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "ConverterConfig",
    "Csv2JsonConfigError",
    "Csv2JsonError",
    "Csv2JsonReadError",
    "Csv2JsonWriteError",
    "FieldCountMismatchError",
    "FormattingMode",
    "SkippedRow",
    "build_json_formatter",
    "build_record",
    "convert_csv_to_json",
    "derive_output_path",
]
