"""Commands to inspect the resolved srcset_parser configuration."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from ..config import get_settings

__all__ = ["app"]

app = typer.Typer(help="Inspect the resolved configuration.", add_completion=False)


@app.command("show")
def show_settings(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Alternative TOML/YAML configuration to use instead of the environment.",
    ),
    refresh: bool = typer.Option(
        False,
        "--refresh",
        help="Ignore the cache and rebuild the settings from environment variables or file.",
    ),
) -> None:
    """Print the settings resolved by :func:`get_settings` as JSON."""

    settings = get_settings(refresh=refresh, config_file=config_file)
    typer.echo(json.dumps(settings.as_dict(), indent=2, ensure_ascii=False))
