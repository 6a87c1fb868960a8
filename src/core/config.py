"""Runtime configuration model for csv2json.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_ENCODING,
    DEFAULT_SEPARATOR,
    FALSY_ENV_VALUES,
    SEPARATOR_DELIMITERS,
    TRUTHY_ENV_VALUES,
)
from core.errors import Csv2JsonConfigError


@dataclass(frozen=True)
class ConverterConfig:
    """Validated runtime defaults for conversions.

    Attributes:
        separator: Default column separator name.
        pretty: Whether indented output is the default.
        encoding: Text encoding of input tables.
    """

    separator: str = DEFAULT_SEPARATOR
    pretty: bool = False
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            Csv2JsonConfigError: If environment values are invalid.
        """
        separator = _parse_separator(os.getenv("CSV2JSON_SEPARATOR", DEFAULT_SEPARATOR))
        pretty = _parse_pretty(os.getenv("CSV2JSON_PRETTY", ""))
        encoding = os.getenv("CSV2JSON_ENCODING", DEFAULT_ENCODING)
        return cls(separator=separator, pretty=pretty, encoding=encoding)


def _parse_separator(raw_value: str) -> str:
    """Validate the separator environment value."""
    separator = raw_value.strip().lower()
    if separator not in SEPARATOR_DELIMITERS:
        raise Csv2JsonConfigError(
            "Invalid CSV2JSON_SEPARATOR value: "
            f"expected one of {sorted(SEPARATOR_DELIMITERS)}, got '{raw_value}'. "
            "Only comma or semicolon separators are allowed."
        )
    return separator


def _parse_pretty(raw_value: str) -> bool:
    """Parse the pretty-output environment flag.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean flag.

    Raises:
        Csv2JsonConfigError: If value is not a recognized boolean.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUTHY_ENV_VALUES:
        return True
    if normalized in FALSY_ENV_VALUES:
        return False
    raise Csv2JsonConfigError(
        "Invalid CSV2JSON_PRETTY value: "
        f"expected a boolean, got '{raw_value}'. "
        "Set CSV2JSON_PRETTY to 1/0, true/false, yes/no, or on/off."
    )
