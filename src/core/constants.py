"""Core constants used across csv2json modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

SEPARATOR_DELIMITERS = {"comma": ",", "semicolon": ";"}
DEFAULT_SEPARATOR = "comma"
DEFAULT_ENCODING = "utf-8"
SUPPORTED_TABLE_EXTENSIONS = (".csv",)
JSON_FILE_EXTENSION = ".json"
INDENT_UNIT = "   "
COMPACT_ITEM_SEPARATORS = (",", ":")
TRUTHY_ENV_VALUES = ("1", "true", "yes", "on")
FALSY_ENV_VALUES = ("", "0", "false", "no", "off")
