from __future__ import annotations

from typing import TYPE_CHECKING

from kovergate.model.types import FULL_COVERAGE

if TYPE_CHECKING:
    from kovergate.model.types import CoverageCounter

NOT_AVAILABLE = "N/A"


def percentage(counter: CoverageCounter) -> float | None:
    """Return the unrounded coverage percentage, or ``None`` when nothing was instrumented."""
    total = counter.total
    if total == 0:
        return None
    return (counter.covered / total) * FULL_COVERAGE


def format_percent(value: float | None) -> str:
    """Format *value* with two decimals (``N/A`` when undefined).

    Rounding follows ``format(value, ".2f")``, i.e. half-to-even on the exact
    binary value. Threshold checks never see the rounded text.
    """
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.2f}"


__all__ = ["NOT_AVAILABLE", "format_percent", "percentage"]
