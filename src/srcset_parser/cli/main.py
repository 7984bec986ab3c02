import typer

from .._version import __version__
from .config import app as config_app
from .parse import batch_command, parse_command


__all__ = ["app", "run"]


app = typer.Typer(help="Parse HTML srcset attribute values into image candidates", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show srcset-parser version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"srcset-parser {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.command("parse", help="Parse one srcset value and print its candidates as JSON.")(parse_command)
app.command("batch", help="Parse a JSONL file of srcset values.")(batch_command)
app.add_typer(config_app, name="config")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
