from __future__ import annotations

import pytest

from kovergate.model.matching import basename, match_files
from kovergate.model.types import CoverageCounter, CoverageReport

FOO = CoverageCounter(missed=5, covered=5)
BAR = CoverageCounter(missed=0, covered=3)
ZED = CoverageCounter(missed=1, covered=1)


@pytest.fixture
def report() -> CoverageReport:
    return CoverageReport(
        total=CoverageCounter(missed=1, covered=1),
        files={"Foo.kt": FOO, "Bar.kt": BAR, "Zed.kt": ZED},
    )


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("Foo.kt", "Foo.kt"),
        ("app/src/main/kotlin/Foo.kt", "Foo.kt"),
        ("app\\src\\Foo.kt", "Foo.kt"),
        ("./Foo.kt", "Foo.kt"),
    ],
)
def test_basename(path: str, expected: str) -> None:
    assert basename(path) == expected


def test_match_files_partitions_and_sorts(report: CoverageReport) -> None:
    changed = ["src/Zed.kt", "README.md", "src/Foo.kt", "build.gradle.kts", "lib/Bar.kt"]
    result = match_files(report, changed)
    assert result.matched == (("Bar.kt", BAR), ("Foo.kt", FOO), ("Zed.kt", ZED))
    assert result.unmatched == ("README.md", "build.gradle.kts")
    assert len(result.matched) + len(result.unmatched) == len(changed)


def test_match_files_keeps_unmatched_input_order(report: CoverageReport) -> None:
    result = match_files(report, ["z.txt", "a.txt", "m.txt"])
    assert result.matched == ()
    assert result.unmatched == ("z.txt", "a.txt", "m.txt")


def test_match_files_is_basename_only(report: CoverageReport) -> None:
    # same file name in two directories both resolve to the single report entry
    result = match_files(report, ["feature/a/Foo.kt", "feature/b/Foo.kt"])
    assert result.matched == (("Foo.kt", FOO), ("Foo.kt", FOO))
    assert result.unmatched == ()


def test_match_files_is_case_sensitive(report: CoverageReport) -> None:
    result = match_files(report, ["foo.kt"])
    assert result.unmatched == ("foo.kt",)


def test_match_files_empty_input(report: CoverageReport) -> None:
    result = match_files(report, [])
    assert result.matched == ()
    assert result.unmatched == ()
