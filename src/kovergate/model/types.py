"""Value types shared across kovergate."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

from kovergate.errors import InvalidCounterValueError

if TYPE_CHECKING:
    from collections.abc import Mapping


class Verdict(StrEnum):
    """Outcome of comparing a measured percentage against a threshold."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


FULL_COVERAGE: int = 100


@dataclass(frozen=True, slots=True)
class CoverageCounter:
    """Missed/covered instruction counts."""

    missed: int = 0
    covered: int = 0

    def __post_init__(self) -> None:
        for name in ("missed", "covered"):
            value = getattr(self, name)
            if value < 0:
                msg = f"counter {name!r} must be non-negative, got {value}"
                raise InvalidCounterValueError(msg)

    @property
    def total(self) -> int:
        return self.missed + self.covered

    def __add__(self, other: CoverageCounter) -> CoverageCounter:
        if not isinstance(other, CoverageCounter):
            return NotImplemented
        return CoverageCounter(missed=self.missed + other.missed, covered=self.covered + other.covered)


@dataclass(frozen=True, slots=True)
class CoverageReport:
    """Parsed report: the project-wide counter plus one counter per source file.

    ``files`` is keyed by source file basename; counters of every class
    declared in the same source file are already summed.
    """

    total: CoverageCounter
    files: Mapping[str, CoverageCounter] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", MappingProxyType(dict(self.files)))


__all__ = [
    "FULL_COVERAGE",
    "CoverageCounter",
    "CoverageReport",
    "Verdict",
]
