"""Correlate changed files with the per-file entries of a parsed report."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kovergate.model.types import CoverageCounter, CoverageReport


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Changed files split by whether the report knows about them.

    ``matched`` is sorted by basename; ``unmatched`` keeps the input order.
    """

    matched: tuple[tuple[str, CoverageCounter], ...]
    unmatched: tuple[str, ...]


def basename(path: str) -> str:
    """Return the file name component of *path* (either separator style)."""
    return PurePosixPath(path.replace("\\", "/")).name


def to_basenames(paths: Iterable[str]) -> tuple[str, ...]:
    return tuple(basename(p) for p in paths)


def match_files(report: CoverageReport, changed: Iterable[str]) -> MatchResult:
    """Partition *changed* into files present in and absent from *report*.

    Matching is by basename only: ``src/a/Foo.kt`` and ``src/b/Foo.kt`` both
    resolve to the report entry for ``Foo.kt``.
    """
    matched: list[tuple[str, CoverageCounter]] = []
    unmatched: list[str] = []
    for name in to_basenames(changed):
        counter = report.files.get(name)
        if counter is None:
            unmatched.append(name)
        else:
            matched.append((name, counter))
    matched.sort(key=operator.itemgetter(0))
    return MatchResult(matched=tuple(matched), unmatched=tuple(unmatched))


__all__ = ["MatchResult", "basename", "match_files", "to_basenames"]
