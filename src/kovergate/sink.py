"""Review-annotation sinks: where the markdown and warn/fail messages go."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TextIO

from rich.console import Console
from rich.markup import escape

from kovergate._meta import logger
from kovergate.model.policy import annotations
from kovergate.model.types import Verdict

if TYPE_CHECKING:
    from kovergate.model.policy import PolicyOutcome


class ReviewSink(Protocol):
    def markdown(self, text: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def fail(self, message: str) -> None: ...


class ConsoleSink:
    """Print the summary to stdout and annotations to stderr."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)

    def markdown(self, text: str) -> None:
        self.console.print(text.rstrip("\n"), markup=False, emoji=False)

    def warn(self, message: str) -> None:
        self.err_console.print(f"[yellow]WARNING:[/yellow] {escape(message)}")

    def fail(self, message: str) -> None:
        self.err_console.print(f"[red]FAILURE:[/red] {escape(message)}")


class GitHubActionsSink:
    """Emit GitHub Actions workflow commands.

    The markdown goes to the job summary file named by ``GITHUB_STEP_SUMMARY``
    when it is set, otherwise to *stream*.
    """

    def __init__(self, stream: TextIO | None = None, summary_path: str | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        if summary_path is None:
            summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
        self.summary_path = summary_path

    def markdown(self, text: str) -> None:
        if self.summary_path:
            with Path(self.summary_path).open("a", encoding="utf-8") as fh:
                fh.write(text)
            logger.debug("appended summary to %s", self.summary_path)
            return
        self.stream.write(text)

    def warn(self, message: str) -> None:
        self.stream.write(f"::warning::{_escape_data(message)}\n")

    def fail(self, message: str) -> None:
        self.stream.write(f"::error::{_escape_data(message)}\n")


def _escape_data(message: str) -> str:
    # workflow command data escaping
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


@dataclass(slots=True)
class RecordingSink:
    """Collect every call, in order."""

    calls: list[tuple[str, str]] = field(default_factory=list)

    def markdown(self, text: str) -> None:
        self.calls.append(("markdown", text))

    def warn(self, message: str) -> None:
        self.calls.append(("warn", message))

    def fail(self, message: str) -> None:
        self.calls.append(("fail", message))


def dispatch(outcome: PolicyOutcome, text: str, sink: ReviewSink) -> None:
    """Post *text*, then one warn/fail call per non-passing check."""
    sink.markdown(text)
    for note in annotations(outcome):
        if note.verdict is Verdict.FAIL:
            sink.fail(note.message)
        else:
            sink.warn(note.message)


__all__ = [
    "ConsoleSink",
    "GitHubActionsSink",
    "RecordingSink",
    "ReviewSink",
    "dispatch",
]
