"""Markdown summary posted as a review comment."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kovergate.model.metrics import NOT_AVAILABLE, format_percent

if TYPE_CHECKING:
    from kovergate.model.policy import PolicyOutcome

NOT_IN_REPORT = "The new and modified files are not part of the coverage report."
FOOTER = "Code coverage generated by kovergate"


def _pct_cell(value: float | None) -> str:
    text = format_percent(value)
    return text if text == NOT_AVAILABLE else f"{text}%"


def render_markdown(module_name: str, outcome: PolicyOutcome) -> str:
    """Render *outcome* as markdown. Verdicts are not included."""
    parts = [f"## 🎯 {module_name} Code Coverage: **`{_pct_cell(outcome.total_percentage)}`**"]

    if not outcome.file_results:
        parts.append(NOT_IN_REPORT)
    else:
        parts.append("### Coverage of Modified Files:")
        parts.append("File | Coverage")
        parts.append(":-----|:-----:")
        for result, _verdict in outcome.file_results:
            parts.append(f"`{result.name}` | **`{_pct_cell(result.percentage)}`**")
        parts.append("")

    parts.append(f"Number of files not found in coverage report: {outcome.unreported_count}")
    parts.append(FOOTER)
    return "\n".join(parts) + "\n"


__all__ = ["FOOTER", "NOT_IN_REPORT", "render_markdown"]
