import json
from pathlib import Path

import yaml
from typer.testing import CliRunner

from doctokens.cli import app
from doctokens.models import records_to_dicts
from tests.utils import make_records

runner = CliRunner()


def _write_records(path: Path, pieces, text=None) -> Path:
    records = records_to_dicts(make_records(pieces))
    payload = records if text is None else {"text": text, "tokens": records}
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_inspect_outputs_summary(tmp_path: Path):
    """inspect rebuilds the text and lists sentence spans."""
    input_path = _write_records(
        tmp_path / "doc.json",
        [("The", " ", True), ("cat", " ", False), ("sat", "", False)],
    )
    result = runner.invoke(app, ["inspect", "--input-path", str(input_path)])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["text"] == "The cat sat"
    assert payload["size"] == 3
    assert payload["start_char"] == 0
    assert payload["end_char"] == 8
    assert payload["sentences"] == [{"start": 0, "end": 3, "text": "The cat sat"}]


def test_cli_inspect_implicit_sentence_start(tmp_path: Path):
    input_path = _write_records(
        tmp_path / "doc.json", [("no", " ", False), ("flags", "", False)]
    )

    plain = runner.invoke(app, ["inspect", "--input-path", str(input_path)])
    implicit = runner.invoke(
        app,
        ["inspect", "--input-path", str(input_path), "--implicit-sentence-start"],
    )

    assert json.loads(plain.stdout)["sentences"] == []
    assert json.loads(implicit.stdout)["sentences"] == [
        {"start": 0, "end": 2, "text": "no flags"}
    ]


def test_cli_inspect_validate_reports_mismatch(tmp_path: Path):
    """--validate turns a text/token mismatch into a usage error."""
    input_path = _write_records(
        tmp_path / "doc.json", [("a", " ", True), ("b", "", False)], text="a  b"
    )

    trusted = runner.invoke(app, ["inspect", "--input-path", str(input_path)])
    strict = runner.invoke(
        app, ["inspect", "--input-path", str(input_path), "--validate"]
    )

    assert trusted.exit_code == 0
    assert json.loads(trusted.stdout)["text"] == "a  b"
    assert strict.exit_code != 0


def test_cli_inspect_uses_config_file(tmp_path: Path):
    input_path = _write_records(
        tmp_path / "doc.json", [("a", " ", True), ("b", "", False)], text="nope"
    )
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump({"validate_text": True}), encoding="utf-8")

    result = runner.invoke(
        app, ["inspect", "--input-path", str(input_path), "--config", str(config_path)]
    )

    assert result.exit_code != 0


def test_cli_inspect_rejects_malformed_records(tmp_path: Path):
    input_path = tmp_path / "bad.json"
    input_path.write_text(json.dumps([{"text": "missing offsets"}]), encoding="utf-8")

    result = runner.invoke(app, ["inspect", "--input-path", str(input_path)])

    assert result.exit_code != 0


def test_cli_inspect_rejects_wrongly_typed_fields(tmp_path: Path):
    """A null whitespace field is reported as a usage error, not a crash."""
    input_path = tmp_path / "null.json"
    input_path.write_text(
        json.dumps(
            [{"index": 0, "begin_offset": 0, "text": "a", "whitespace_after": None}]
        ),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["inspect", "--input-path", str(input_path)])

    assert result.exit_code == 2
    assert not isinstance(result.exception, TypeError)


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])

    assert result.exit_code == 0
    assert "validate_text" in result.stdout
