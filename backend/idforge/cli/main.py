"""CLI entrypoint for idforge."""

from __future__ import annotations

import json
import logging
from typing import Callable, Optional

import typer
from pydantic import ValidationError

from idforge.core.config import get_settings
from idforge.core.logging import configure_logging
from idforge.utils import ids

app = typer.Typer(name="idf", help="Generate random and time-based identifiers")

logger = logging.getLogger(__name__)


@app.callback()
def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    configure_logging(settings)


def _resolve_count(override: Optional[int]) -> int:
    count = override if override is not None else get_settings().default_count
    if count < 1:
        typer.echo(f"--count must be at least 1, got {count}", err=True)
        raise typer.Exit(code=1)
    return count


def _emit(make: Callable[[], str], count: Optional[int], as_json: bool) -> None:
    values = [make() for _ in range(_resolve_count(count))]
    logger.debug("Generated %s identifiers", len(values))
    if as_json:
        typer.echo(json.dumps(values))
    else:
        for value in values:
            typer.echo(value)


@app.command()
def generate(
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Prefix joined with '_'"),
    count: Optional[int] = typer.Option(None, "--count", "-n", help="How many identifiers to print"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array"),
) -> None:
    """24-character hex identifier, optionally prefixed."""
    resolved = prefix if prefix is not None else get_settings().default_prefix
    _emit(lambda: ids.generate(resolved), count, as_json)


@app.command()
def short(
    count: Optional[int] = typer.Option(None, "--count", "-n", help="How many identifiers to print"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array"),
) -> None:
    """12-character hex code."""
    _emit(ids.short, count, as_json)


@app.command()
def uuid(
    count: Optional[int] = typer.Option(None, "--count", "-n", help="How many identifiers to print"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array"),
) -> None:
    """Version-4 UUID."""
    _emit(ids.uuid, count, as_json)


@app.command()
def timestamp(
    count: Optional[int] = typer.Option(None, "--count", "-n", help="How many identifiers to print"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array"),
) -> None:
    """Millisecond timestamp with a random hex suffix."""
    _emit(ids.timestamp, count, as_json)


@app.command()
def token(
    nbytes: int = typer.Option(..., "--bytes", "-b", help="Random bytes to draw"),
    prefix: str = typer.Option("", "--prefix", help="Prefix joined with '_'"),
    count: Optional[int] = typer.Option(None, "--count", "-n", help="How many identifiers to print"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array"),
) -> None:
    """Hex token of an arbitrary byte length."""
    if nbytes < 1:
        typer.echo(f"--bytes must be at least 1, got {nbytes}", err=True)
        raise typer.Exit(code=1)
    _emit(lambda: ids.token(nbytes, prefix), count, as_json)


if __name__ == "__main__":
    app()
