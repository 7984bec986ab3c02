"""CLI entrypoints that parse single values and JSONL batches of ``srcset`` strings."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from tqdm import tqdm

from ..config import get_settings
from ..errors import SrcsetParseError
from ..parsers.srcset import parse_srcset
from ..payloads import dump_candidates
from ..utils.logging import configure_json_logger, flush_handlers, generate_trace_id, log_event

__all__ = ["batch_command", "parse_command"]


def parse_command(
    value: str = typer.Argument(..., help="Decoded srcset attribute value, e.g. 'a.png 1x, b.png 2x'"),
    indent: Optional[int] = typer.Option(None, "--indent", min=0, help="JSON indentation (default from config)"),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Alternative TOML/YAML configuration file",
    ),
) -> None:
    """Print the image candidates of VALUE as JSON."""

    settings = get_settings(config_file=config_file)
    try:
        candidates = parse_srcset(value)
    except SrcsetParseError as exc:
        typer.echo(f"error[{exc.kind}]: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    json_indent = settings.json_indent if indent is None else indent
    typer.echo(json.dumps(dump_candidates(candidates), indent=json_indent or None, ensure_ascii=False))


def _parse_record(record: Any, field: str) -> Dict[str, Any]:
    value = record.get(field) if isinstance(record, dict) else record
    if not isinstance(value, str):
        return {
            "srcset": value,
            "error": {"kind": "missing_field", "message": f"record has no string field '{field}'"},
        }
    try:
        candidates = parse_srcset(value)
    except SrcsetParseError as exc:
        return {"srcset": value, "error": {"kind": exc.kind, "message": str(exc)}}
    return {"srcset": value, "candidates": dump_candidates(candidates)}


def batch_command(
    input_path: Path = typer.Option(..., "--input", exists=True, dir_okay=False, help="JSONL with srcset records"),
    output_path: Path = typer.Option(..., "--output", dir_okay=False, help="Destination JSONL for parsed candidates"),
    field: Optional[str] = typer.Option(
        None, "--field", help="Record field holding the srcset value (default from config, 'srcset')"
    ),
    fail_fast: Optional[bool] = typer.Option(
        None, "--fail-fast/--no-fail-fast", help="Abort on the first invalid srcset value"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="Optional JSONL log path"),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show a progress bar on stderr"),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Alternative TOML/YAML configuration file",
    ),
) -> None:
    """Parse every record of a JSONL file and write one result line per record.

    Records are either JSON strings or objects carrying the value under
    ``--field``. Invalid values produce an ``error`` entry unless
    ``--fail-fast`` is set.
    """

    settings = get_settings(config_file=config_file)
    field = field or settings.srcset_field
    fail_fast = settings.fail_fast if fail_fast is None else fail_fast

    logger = configure_json_logger(log_file or settings.log_path, settings.log_level)
    trace_id = generate_trace_id()
    log_event(
        logger,
        "batch.start",
        trace_id=trace_id,
        input=str(input_path),
        output=str(output_path),
        field=field,
        fail_fast=fail_fast,
    )

    records = []
    with input_path.open("r", encoding="utf-8") as src:
        for line_no, line in enumerate(src, start=1):
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as exc:
                log_event(logger, "batch.failed", trace_id=trace_id, line=line_no, error=str(exc))
                flush_handlers(logger)
                raise typer.BadParameter(f"line {line_no} is not valid JSON: {exc}", param_hint="--input") from exc

    output_path.parent.mkdir(parents=True, exist_ok=True)
    num_valid = 0
    num_invalid = 0
    with output_path.open("w", encoding="utf-8") as dst:
        for idx, record in enumerate(tqdm(records, desc="Parsing srcset", unit="attr", disable=not progress)):
            result = {"index": idx, **_parse_record(record, field)}
            if "error" in result:
                num_invalid += 1
                log_event(
                    logger,
                    "batch.record.invalid",
                    trace_id=trace_id,
                    record_idx=idx,
                    kind=result["error"]["kind"],
                    error=result["error"]["message"],
                )
                if fail_fast:
                    flush_handlers(logger)
                    typer.echo(f"Error processing record {idx}: {result['error']['message']}", err=True)
                    raise typer.Exit(code=1)
            else:
                num_valid += 1
            dst.write(json.dumps(result, ensure_ascii=False) + "\n")

    summary = {
        "output": str(output_path),
        "num_records": len(records),
        "num_valid": num_valid,
        "num_invalid": num_invalid,
    }
    log_event(logger, "batch.completed", trace_id=trace_id, **summary)
    flush_handlers(logger)
    typer.echo(json.dumps(summary, indent=settings.json_indent or None, ensure_ascii=False))
