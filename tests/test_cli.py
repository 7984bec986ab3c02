"""Smoke tests for the Typer CLI router."""
import json

import pytest
from typer.testing import CliRunner

from srcset_parser.cli.main import app
from srcset_parser.config import reset_settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in ("SRCSET_PARSER_CONFIG_FILE", "SRCSET_PARSER_FIELD", "SRCSET_PARSER_FAIL_FAST", "SRCSET_PARSER_LOG_PATH"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_help_shows_commands() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("parse", "batch", "config"):
        assert command in result.stdout


def test_version_option() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "srcset-parser" in result.stdout


def test_parse_prints_candidates() -> None:
    result = runner.invoke(app, ["parse", "a.png 1x, b.png 2x", "--indent", "0"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"source": {"value": "a.png", "startOffset": 0}, "density": {"value": 1.0}},
        {"source": {"value": "b.png", "startOffset": 10}, "density": {"value": 2.0}},
    ]


@pytest.mark.parametrize(
    "value, kind",
    [
        (" , ", "empty_candidate_set"),
        ("a.png 1w 1x", "invalid_descriptor"),
    ],
)
def test_parse_reports_errors(value: str, kind: str) -> None:
    result = runner.invoke(app, ["parse", value])
    assert result.exit_code == 1
    assert kind in result.output


def _write_jsonl(path, rows) -> None:
    with path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(json.dumps(row) + "\n")


def test_batch_writes_results_and_logs(tmp_path) -> None:
    dataset = tmp_path / "values.jsonl"
    _write_jsonl(
        dataset,
        [
            {"srcset": "a.png 480w, b.png 960w"},
            {"srcset": "a.png 0w"},
            "c.png 2x",
            {"other": "d.png"},
        ],
    )
    output = tmp_path / "out" / "parsed.jsonl"
    log_file = tmp_path / "events.jsonl"

    result = runner.invoke(
        app,
        ["batch", "--input", str(dataset), "--output", str(output), "--log-file", str(log_file), "--no-progress"],
    )

    assert result.exit_code == 0
    rows = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    assert [row["index"] for row in rows] == [0, 1, 2, 3]
    assert [candidate["width"]["value"] for candidate in rows[0]["candidates"]] == [480, 960]
    assert rows[1]["error"]["kind"] == "invalid_descriptor"
    assert rows[2]["candidates"][0]["density"] == {"value": 2.0}
    assert rows[3]["error"]["kind"] == "missing_field"

    events = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert events[0]["event"] == "batch.start"
    assert events[-1]["event"] == "batch.completed"
    assert events[-1]["num_valid"] == 2
    assert events[-1]["num_invalid"] == 2
    assert sum(event["event"] == "batch.record.invalid" for event in events) == 2


def test_batch_custom_field(tmp_path) -> None:
    dataset = tmp_path / "values.jsonl"
    _write_jsonl(dataset, [{"sources": "a.png 1x"}])
    output = tmp_path / "parsed.jsonl"

    result = runner.invoke(
        app,
        ["batch", "--input", str(dataset), "--output", str(output), "--field", "sources", "--no-progress"],
    )

    assert result.exit_code == 0
    [row] = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    assert row["candidates"][0]["source"]["value"] == "a.png"


def test_batch_fail_fast_aborts(tmp_path) -> None:
    dataset = tmp_path / "values.jsonl"
    _write_jsonl(dataset, [{"srcset": "a.png 1x"}, {"srcset": ","}, {"srcset": "b.png 2x"}])
    output = tmp_path / "parsed.jsonl"

    result = runner.invoke(
        app,
        ["batch", "--input", str(dataset), "--output", str(output), "--fail-fast", "--no-progress"],
    )

    assert result.exit_code == 1
    assert "record 1" in result.output
    lines = output.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1


def test_config_show_uses_file(tmp_path) -> None:
    config_file = tmp_path / "srcset.toml"
    config_file.write_text('[batch]\nfield = "images"\n', encoding="utf-8")

    result = runner.invoke(app, ["config", "show", "--config-file", str(config_file)])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["srcset_field"] == "images"
    assert payload["config_source"] == str(config_file.resolve())


def test_batch_records_oversized_width_as_invalid(tmp_path) -> None:
    dataset = tmp_path / "values.jsonl"
    _write_jsonl(dataset, [{"srcset": "a.png " + "9" * 5000 + "w"}, {"srcset": "b.png 2x"}])
    output = tmp_path / "parsed.jsonl"

    result = runner.invoke(app, ["batch", "--input", str(dataset), "--output", str(output), "--no-progress"])

    assert result.exit_code == 0
    rows = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    assert rows[0]["error"]["kind"] == "invalid_descriptor"
    assert rows[1]["candidates"][0]["density"] == {"value": 2.0}


def test_batch_rejects_malformed_jsonl(tmp_path) -> None:
    dataset = tmp_path / "values.jsonl"
    dataset.write_text('{"srcset": "a.png 1x"}\n{"srcset": \n', encoding="utf-8")
    output = tmp_path / "parsed.jsonl"
    log_file = tmp_path / "events.jsonl"

    result = runner.invoke(
        app,
        ["batch", "--input", str(dataset), "--output", str(output), "--log-file", str(log_file), "--no-progress"],
    )

    assert result.exit_code == 2
    assert not output.exists()
    events = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert events[-1]["event"] == "batch.failed"
    assert events[-1]["line"] == 2
