"""Domain model for kovergate (pure types + policy; no IO)."""

from .matching import MatchResult, match_files
from .metrics import format_percent, percentage
from .policy import FileCoverageResult, PolicyConfig, PolicyOutcome, evaluate
from .types import CoverageCounter, CoverageReport, Verdict

__all__ = [
    "CoverageCounter",
    "CoverageReport",
    "FileCoverageResult",
    "MatchResult",
    "PolicyConfig",
    "PolicyOutcome",
    "Verdict",
    "evaluate",
    "format_percent",
    "match_files",
    "percentage",
]
