"""Threshold policy: turn coverage percentages into pass/warn/fail verdicts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kovergate._meta import logger
from kovergate.model.metrics import percentage
from kovergate.model.types import Verdict

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kovergate.model.types import CoverageCounter, CoverageReport

DEFAULT_THRESHOLD = 90


@dataclass(frozen=True, slots=True)
class PolicyConfig:
    """Thresholds the gate enforces.

    Fields
    ------
    total_threshold:
        Minimum project-wide instruction coverage percentage.
    file_threshold:
        Minimum instruction coverage percentage for each changed file.
    strict:
        Fail the build when under a threshold; otherwise only warn.

    Values outside 0..100 are taken as given.
    """

    total_threshold: int = DEFAULT_THRESHOLD
    file_threshold: int = DEFAULT_THRESHOLD
    strict: bool = True


@dataclass(frozen=True, slots=True)
class FileCoverageResult:
    name: str
    percentage: float | None
    in_report: bool = True


@dataclass(frozen=True, slots=True)
class PolicyOutcome:
    """Full gate decision, independent of how it is rendered or signalled."""

    total_percentage: float | None
    total_verdict: Verdict
    file_results: tuple[tuple[FileCoverageResult, Verdict], ...]
    unreported_count: int
    build_should_fail: bool
    policy: PolicyConfig = PolicyConfig()


@dataclass(frozen=True, slots=True)
class Annotation:
    """One warn/fail message for the review host."""

    verdict: Verdict
    message: str


def verdict_for(value: float | None, threshold: float, *, strict: bool) -> Verdict:
    """Compare an unrounded percentage with *threshold* (strict ``<``)."""
    if value is None or value >= threshold:
        return Verdict.PASS
    return Verdict.FAIL if strict else Verdict.WARN


def evaluate(
    report: CoverageReport,
    matched: Sequence[tuple[str, CoverageCounter]],
    unmatched: Sequence[str],
    policy: PolicyConfig,
) -> PolicyOutcome:
    """Apply *policy* to the project total and every matched file.

    A total with no instrumented instructions passes without a threshold
    check. Unmatched files only contribute to ``unreported_count``.
    """
    total_pct = percentage(report.total)
    total_verdict = verdict_for(total_pct, policy.total_threshold, strict=policy.strict)

    file_results: list[tuple[FileCoverageResult, Verdict]] = []
    for name, counter in matched:
        pct = percentage(counter)
        verdict = verdict_for(pct, policy.file_threshold, strict=policy.strict)
        file_results.append((FileCoverageResult(name=name, percentage=pct), verdict))

    verdicts = [total_verdict, *(v for _, v in file_results)]
    build_should_fail = Verdict.FAIL in verdicts

    logger.debug(
        "total=%s verdict=%s files=%d unreported=%d fail=%s",
        total_pct,
        total_verdict,
        len(file_results),
        len(unmatched),
        build_should_fail,
    )
    return PolicyOutcome(
        total_percentage=total_pct,
        total_verdict=total_verdict,
        file_results=tuple(file_results),
        unreported_count=len(unmatched),
        build_should_fail=build_should_fail,
        policy=policy,
    )


def annotations(outcome: PolicyOutcome) -> tuple[Annotation, ...]:
    """Return one annotation per warned or failed check, total first."""
    out: list[Annotation] = []
    if outcome.total_verdict is not Verdict.PASS:
        msg = f"Oops! The project codebase is under {outcome.policy.total_threshold}% coverage."
        out.append(Annotation(verdict=outcome.total_verdict, message=msg))
    for result, verdict in outcome.file_results:
        if verdict is Verdict.PASS:
            continue
        msg = f"Uh oh! {result.name} is under {outcome.policy.file_threshold}% coverage!"
        out.append(Annotation(verdict=verdict, message=msg))
    return tuple(out)


__all__ = [
    "DEFAULT_THRESHOLD",
    "Annotation",
    "FileCoverageResult",
    "PolicyConfig",
    "PolicyOutcome",
    "annotations",
    "evaluate",
    "verdict_for",
]
