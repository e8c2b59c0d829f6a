from kovergate._meta import __version__, logger
from kovergate.coverage.parse import parse_report
from kovergate.model.matching import MatchResult, match_files
from kovergate.model.metrics import format_percent, percentage
from kovergate.model.policy import (
    Annotation,
    FileCoverageResult,
    PolicyConfig,
    PolicyOutcome,
    annotations,
    evaluate,
)
from kovergate.model.types import CoverageCounter, CoverageReport, Verdict
from kovergate.pipeline import GateResult, check_report, run_gate
from kovergate.render.markdown import render_markdown
from kovergate.sink import ReviewSink, dispatch

__all__ = [
    "Annotation",
    "CoverageCounter",
    "CoverageReport",
    "FileCoverageResult",
    "GateResult",
    "MatchResult",
    "PolicyConfig",
    "PolicyOutcome",
    "ReviewSink",
    "Verdict",
    "__version__",
    "annotations",
    "check_report",
    "dispatch",
    "evaluate",
    "format_percent",
    "logger",
    "match_files",
    "parse_report",
    "percentage",
    "render_markdown",
    "run_gate",
]
