from __future__ import annotations

import logging
from typing import Annotated

import typer
from typer.main import get_command

from kovergate._meta import __version__, logger
from kovergate.cli import check
from kovergate.config import LOG_FORMAT


def _configure_logging(*, quiet: bool, verbose: bool) -> None:
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


def create_app() -> typer.Typer:
    app = typer.Typer(help="Gate code review changes on Kover/JaCoCo instruction coverage.")

    @app.callback(invoke_without_command=True)
    def _root(
        ctx: typer.Context,
        *,
        version: Annotated[
            bool,
            typer.Option("--version", help="Show version and exit"),
        ] = False,
        verbose: Annotated[
            bool,
            typer.Option("-v", "--verbose", help="Emit diagnostic logging"),
        ] = False,
        quiet: Annotated[
            bool,
            typer.Option("-q", "--quiet", help="Emit only errors"),
        ] = False,
    ) -> None:
        if version:
            typer.echo(f"kovergate {__version__}")
            raise typer.Exit
        _configure_logging(quiet=quiet, verbose=verbose)
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit

    check.register(app)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
