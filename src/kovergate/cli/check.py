from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from kovergate._meta import logger
from kovergate.cli.exit_codes import (
    EXIT_CONFIG,
    EXIT_DATAERR,
    EXIT_GATE_FAILED,
    EXIT_GENERIC,
    EXIT_NOINPUT,
    EXIT_OK,
)
from kovergate.config import Settings, load_settings
from kovergate.errors import (
    ChangedFilesError,
    ConfigError,
    CoverageReportError,
    EmptyPathError,
    ReportNotFoundError,
)
from kovergate.coverage.discover import read_report
from kovergate.io import write_output
from kovergate.pipeline import GateResult, check_report
from kovergate.sink import ConsoleSink, GitHubActionsSink, ReviewSink, dispatch
from kovergate.vcs import git_changed_files, read_changed_files


class SinkKind(StrEnum):
    CONSOLE = "console"
    GITHUB = "github"


def _fail(message: str, code: int) -> typer.Exit:
    typer.echo(f"ERROR: {message}", err=True)
    return typer.Exit(code=code)


def _make_sink(kind: SinkKind) -> ReviewSink:
    if kind is SinkKind.GITHUB:
        return GitHubActionsSink()
    return ConsoleSink()


def _resolve_settings(config: Path | None, overrides: dict[str, object]) -> Settings:
    try:
        return load_settings(config, overrides)
    except ConfigError as exc:
        raise _fail(str(exc), EXIT_CONFIG) from exc


def _resolve_changed(
    changed: list[str],
    changed_from: Path | None,
    git_base: str,
) -> tuple[str, ...]:
    try:
        if changed or changed_from is not None:
            listed = read_changed_files(changed_from) if changed_from is not None else ()
            return (*changed, *listed)
        return git_changed_files(git_base)
    except ChangedFilesError as exc:
        raise _fail(str(exc), EXIT_GENERIC) from exc


def _read(settings: Settings) -> bytes:
    try:
        return read_report(settings.report)
    except (EmptyPathError, ReportNotFoundError) as exc:
        raise _fail(str(exc), EXIT_NOINPUT) from exc


def _run(settings: Settings, raw: bytes, changed_files: tuple[str, ...]) -> GateResult:
    try:
        return check_report(
            raw,
            changed_files=changed_files,
            module_name=settings.module_name,
            policy=settings.policy(),
        )
    except CoverageReportError as exc:
        raise _fail(str(exc), EXIT_DATAERR) from exc


def check_cmd(
    report: Annotated[
        str | None,
        typer.Argument(help="Kover/JaCoCo XML report. Falls back to `report` in [tool.kovergate]."),
    ] = None,
    module: Annotated[
        str | None,
        typer.Option("-m", "--module", help="Display name of the project or module."),
    ] = None,
    total_threshold: Annotated[
        int | None,
        typer.Option("--total-threshold", help="Required project coverage % (default 90)."),
    ] = None,
    file_threshold: Annotated[
        int | None,
        typer.Option("--file-threshold", help="Required coverage % for each changed file (default 90)."),
    ] = None,
    fail: Annotated[
        bool,
        typer.Option("--fail", help="Fail the gate when under a threshold (default)."),
    ] = False,
    warn_only: Annotated[
        bool,
        typer.Option("--warn-only", help="Only warn when under a threshold."),
    ] = False,
    changed: Annotated[
        list[str] | None,
        typer.Option("-c", "--changed", help="Changed file path (repeatable)."),
    ] = None,
    changed_from: Annotated[
        Path | None,
        typer.Option("--changed-from", help="Read changed file paths from PATH ('-' for stdin)."),
    ] = None,
    git_base: Annotated[
        str,
        typer.Option("--git-base", help="Ref git diffs against when no changed files are given."),
    ] = "HEAD",
    sink: Annotated[
        SinkKind,
        typer.Option("--sink", help="Where to post the summary and annotations.", case_sensitive=False),
    ] = SinkKind.CONSOLE,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Also write the markdown summary to PATH ('-' adds nothing)."),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", help="pyproject.toml to read [tool.kovergate] from."),
    ] = None,
) -> None:
    """Report coverage of changed files and gate on the configured thresholds."""
    if fail and warn_only:
        raise typer.BadParameter("Cannot combine --fail and --warn-only", param_hint="--fail/--warn-only")

    settings = _resolve_settings(
        config,
        {
            "report": report,
            "module_name": module,
            "total_threshold": total_threshold,
            "file_threshold": file_threshold,
            "fail_under_threshold": True if fail else False if warn_only else None,
        },
    )
    raw = _read(settings)
    changed_files = _resolve_changed(changed or [], changed_from, git_base)
    logger.info("checking %d changed files against %s", len(changed_files), settings.report)

    result = _run(settings, raw, changed_files)
    dispatch(result.outcome, result.markdown, _make_sink(sink))
    if output is not None and output != Path("-"):
        write_output(result.markdown, output)

    raise typer.Exit(code=EXIT_GATE_FAILED if result.outcome.build_should_fail else EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("check")(check_cmd)


__all__ = ["SinkKind", "register"]
