from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kovergate._meta import logger
from kovergate.coverage.discover import read_report
from kovergate.coverage.parse import parse_report
from kovergate.model.matching import match_files
from kovergate.model.metrics import format_percent, percentage
from kovergate.model.policy import PolicyConfig, PolicyOutcome, evaluate
from kovergate.render.markdown import render_markdown

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from kovergate.model.matching import MatchResult


@dataclass(frozen=True, slots=True)
class GateResult:
    outcome: PolicyOutcome
    markdown: str
    match: MatchResult


def check_report(
    raw: bytes,
    *,
    changed_files: Iterable[str],
    module_name: str,
    policy: PolicyConfig | None = None,
) -> GateResult:
    """Parse, match, evaluate and render one report held in memory."""
    policy = policy or PolicyConfig()
    report = parse_report(raw)
    match = match_files(report, changed_files)

    logger.debug("files not found in coverage report: %s", list(match.unmatched))
    logger.debug(
        "changed file coverage: %s",
        {name: format_percent(percentage(counter)) for name, counter in match.matched},
    )

    outcome = evaluate(report, match.matched, match.unmatched, policy)
    return GateResult(outcome=outcome, markdown=render_markdown(module_name, outcome), match=match)


def run_gate(
    *,
    report_path: str | Path | None,
    changed_files: Iterable[str],
    module_name: str,
    policy: PolicyConfig | None = None,
) -> GateResult:
    """Read the report at *report_path* and run :func:`check_report` on it."""
    return check_report(
        read_report(report_path),
        changed_files=changed_files,
        module_name=module_name,
        policy=policy,
    )


__all__ = ["GateResult", "check_report", "run_gate"]
