"""confstore CLI entrypoint."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import typer

from confstore.core.errors import StoreError, UnknownFormatError
from confstore.core.store import ConfigStore
from confstore.core.utils.logging import get_logger
from .config import load_cli_config
from .errors import ConfigError

app = typer.Typer(add_completion=False, help="confstore CLI")


class Context:
    def __init__(self) -> None:
        self.config = load_cli_config()
        self.store = ConfigStore()
        self.logger = get_logger("confstore", self.config.level)


def _handle_exc(err: Exception, code: int = 1) -> None:
    """Print a concise error and exit non-zero."""
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=code)


def _load(context: Context, path: Path, target: Dict[str, Any]) -> Dict[str, Any]:
    try:
        return context.store.load(path, target)
    except UnknownFormatError as exc:
        _handle_exc(exc, code=2)
    except StoreError as exc:
        _handle_exc(exc)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
) -> None:
    if ctx.obj is None:
        try:
            ctx.obj = Context()
        except ConfigError as exc:
            _handle_exc(exc)
    if verbose:
        ctx.obj.logger.setLevel(logging.DEBUG)


@app.command()
def formats(ctx: typer.Context) -> None:
    """List registered file extensions."""
    context: Context = ctx.obj
    for ext in context.store.registry.extensions():
        typer.echo(ext)


@app.command()
def init(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Configuration file to create"),
) -> None:
    """Create PATH with an empty document unless it already exists."""
    context: Context = ctx.obj
    existed = path.exists()
    _load(context, path, {})
    if existed:
        typer.echo(f"{path} already exists")
    else:
        typer.echo(f"Created {path}")


@app.command()
def show(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Configuration file to print"),
) -> None:
    """Print PATH as JSON (creates an empty document when missing)."""
    context: Context = ctx.obj
    data = _load(context, path, {})
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))


if __name__ == "__main__":  # pragma: no cover
    app()
