"""JSON rendering of records for the array envelope.

This module selects a record serializer and the separator policy for a
formatting mode. Compact output is a single line; indented output places
every object one level under the array.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import textwrap
from typing import Callable

from core.constants import COMPACT_ITEM_SEPARATORS, INDENT_UNIT
from core.errors import Csv2JsonWriteError
from core.types import FormattingMode, Record


@dataclass(frozen=True)
class JsonFormatter:
    """Serializer plus line-break policy for one formatting mode.

    Attributes:
        serialize: Renders one record as a JSON object.
        line_break: Text written after the opening bracket, between
            elements, and before the closing bracket.
    """

    serialize: Callable[[Record], str]
    line_break: str

    @property
    def element_separator(self) -> str:
        """Text written between two successive array elements."""
        return "," + self.line_break


def build_json_formatter(mode: FormattingMode) -> JsonFormatter:
    """Return the formatter for a formatting mode.

    Args:
        mode: Compact or indented rendering.

    Returns:
        Reusable serializer and separator policy.
    """
    if mode is FormattingMode.INDENTED:
        return JsonFormatter(serialize=_serialize_indented, line_break="\n")
    return JsonFormatter(serialize=_serialize_compact, line_break="")


def _serialize_compact(record: Record) -> str:
    return _dumps(record, separators=COMPACT_ITEM_SEPARATORS)


def _serialize_indented(record: Record) -> str:
    rendered = _dumps(record, indent=INDENT_UNIT)
    return textwrap.indent(rendered, INDENT_UNIT)


def _dumps(record: Record, **kwargs: object) -> str:
    """Encode a record, keeping non-ASCII text as-is.

    Raises:
        Csv2JsonWriteError: If a value is not JSON serializable.
    """
    try:
        return json.dumps(record, ensure_ascii=False, **kwargs)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise Csv2JsonWriteError(
            f"Failed to serialize record as JSON: {error}. "
            "Records must map text column names to text values."
        ) from error
