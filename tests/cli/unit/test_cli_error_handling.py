"""CLI error-handling tests."""

from __future__ import annotations

import json
from pathlib import Path

from jetstream_schema_docs.cli import main


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["render", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_provider_returns_error_without_output(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "schema.json"
    schema_path.write_text(json.dumps({"provider_schemas": {"other": {}}}), encoding="utf-8")

    exit_code = main(["render", "--input", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert "Provider 'jetstream' not found" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_json_input_returns_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "schema.json"
    schema_path.write_text("terraform: command not found", encoding="utf-8")

    exit_code = main(["render", "--input", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Invalid provider schema JSON" in captured.err


def test_input_that_is_not_utf8_returns_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "schema.json"
    schema_path.write_bytes(b'{"provider_schemas": {"jetstream": \xff}}')

    exit_code = main(["render", "--input", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Invalid provider schema JSON" in captured.err
    assert "Traceback" not in captured.err


def test_missing_input_file_returns_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["render", "--input", str(tmp_path / "missing.json")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "missing.json" in captured.err


def test_invalid_configuration_returns_error(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "schema-docs.yaml"
    config_path.write_text("provider: 3\n", encoding="utf-8")

    exit_code = main(["render", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "provider must be a string" in captured.err


def test_configuration_directory_returns_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["render", "--config", str(tmp_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read configuration file" in captured.err
    assert "Traceback" not in captured.err
