"""Record construction from one header row and one data row."""

from __future__ import annotations

from typing import Sequence

from core.errors import FieldCountMismatchError
from core.types import Record


def build_record(headers: Sequence[str], row: Sequence[str]) -> Record:
    """Pair each header with the cell at the same position.

    Values are kept as raw text; nothing is trimmed or coerced.

    Args:
        headers: Column names from the header row.
        row: Field values of one data row.

    Returns:
        Record whose key order follows the header order.

    Raises:
        FieldCountMismatchError: If the row and headers differ in length.
    """
    if len(row) != len(headers):
        raise FieldCountMismatchError(expected=len(headers), actual=len(row))
    return dict(zip(headers, row))
