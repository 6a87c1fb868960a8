"""Input path checks run before the pipeline starts."""

from __future__ import annotations

from pathlib import Path

from core.constants import SUPPORTED_TABLE_EXTENSIONS
from core.errors import Csv2JsonConfigError


def validate_input_path(raw_path: str) -> Path:
    """Resolve and validate the CSV path given on the command line.

    Args:
        raw_path: Positional path argument.

    Returns:
        Expanded input path.

    Raises:
        Csv2JsonConfigError: If the extension is unsupported or the file is missing.
    """
    input_path = Path(raw_path).expanduser()
    if input_path.suffix.lower() not in SUPPORTED_TABLE_EXTENSIONS:
        raise Csv2JsonConfigError(f"File {raw_path} is not CSV")
    if not input_path.is_file():
        raise Csv2JsonConfigError(f"File {raw_path} does not exist")
    return input_path
