"""Unit tests for CLI command handling."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import write_table


def test_cli_converts_file_and_prints_notices(tmp_path: Path, capsys) -> None:
    """CLI should write the JSON file and print start and completion notices."""
    table = write_table(tmp_path, "people.csv", "name,age\nAlice,30\n")

    exit_code = main([str(table)])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Writing JSON file..." in output and "Completed!" in output
    assert json.loads((tmp_path / "people.json").read_text(encoding="utf-8")) == [
        {"name": "Alice", "age": "30"}
    ]


def test_cli_pretty_semicolon_flags(tmp_path: Path) -> None:
    """Flags should select the semicolon separator and indented output."""
    table = write_table(tmp_path, "prices.csv", "item;price\nwidget;1,50\n")

    exit_code = main(["--separator", "semicolon", "--pretty", str(table)])
    content = (tmp_path / "prices.json").read_text(encoding="utf-8")

    assert exit_code == 0 and "\n" in content
    assert json.loads(content) == [{"item": "widget", "price": "1,50"}]


def test_cli_env_pretty_default_can_be_disabled(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """--no-pretty should override a pretty default from the environment."""
    monkeypatch.setenv("CSV2JSON_PRETTY", "true")
    table = write_table(tmp_path, "people.csv", "name\nAlice\n")

    exit_code = main(["--no-pretty", str(table)])

    assert exit_code == 0
    assert (tmp_path / "people.json").read_text(encoding="utf-8") == '[{"name":"Alice"}]'


def test_cli_rejects_non_csv_extension(tmp_path: Path, capsys) -> None:
    """Wrong extensions should fail before the pipeline starts."""
    table = write_table(tmp_path, "people.txt", "name\nAlice\n")

    exit_code = main([str(table)])
    captured = capsys.readouterr()

    assert exit_code == 1 and "is not CSV" in captured.err
    assert "Writing JSON file" not in captured.out


def test_cli_rejects_missing_file(tmp_path: Path, capsys) -> None:
    """Missing inputs should be reported on stderr."""
    exit_code = main([str(tmp_path / "absent.csv")])

    assert exit_code == 1 and "does not exist" in capsys.readouterr().err


def test_cli_rejects_invalid_separator(tmp_path: Path) -> None:
    """Argparse should reject separators outside the allowed choices."""
    table = write_table(tmp_path, "people.csv", "name\nAlice\n")

    with pytest.raises(SystemExit) as raised:
        main(["--separator", "tab", str(table)])

    assert raised.value.code == 2


def test_cli_requires_path_argument() -> None:
    """The CSV path is a required positional argument."""
    with pytest.raises(SystemExit) as raised:
        main([])

    assert raised.value.code == 2


def test_cli_reports_structural_parse_error(tmp_path: Path, capsys) -> None:
    """Malformed rows should exit non-zero with an error message."""
    table = write_table(tmp_path, "broken.csv", 'name,age\n"Alice"x,30\n')

    exit_code = main([str(table)])

    assert exit_code == 1 and capsys.readouterr().err.startswith("error: Failed to parse")


def test_cli_reports_invalid_env_config(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """Invalid environment defaults should be reported like other config errors."""
    monkeypatch.setenv("CSV2JSON_SEPARATOR", "pipe")

    exit_code = main(["people.csv"])

    assert exit_code == 1 and "CSV2JSON_SEPARATOR" in capsys.readouterr().err
