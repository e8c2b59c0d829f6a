"""End-to-end scenarios through parse, match, evaluate and render."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from kovergate.errors import EmptyPathError
from kovergate.model.policy import PolicyConfig
from kovergate.model.types import Verdict
from kovergate.pipeline import check_report, run_gate

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def test_total_at_threshold_passes(kover_xml_bytes: Callable[..., bytes]) -> None:
    result = check_report(
        kover_xml_bytes((10, 90), [("A", "A.kt", 0, 1)]),
        changed_files=["docs/README.md"],
        module_name="App",
        policy=PolicyConfig(90, 90, strict=True),
    )
    assert result.outcome.total_percentage == 90.0
    assert result.outcome.total_verdict is Verdict.PASS
    assert not result.outcome.build_should_fail
    assert result.markdown.startswith("## 🎯 App Code Coverage: **`90.00%`**\n")


def test_total_under_threshold_fails(kover_xml_bytes: Callable[..., bytes]) -> None:
    result = check_report(
        kover_xml_bytes((11, 89)),
        changed_files=[],
        module_name="App",
        policy=PolicyConfig(90, 90, strict=True),
    )
    assert result.outcome.total_verdict is Verdict.FAIL
    assert result.outcome.build_should_fail
    assert "**`89.00%`**" in result.markdown


def test_changed_file_under_file_threshold_fails(kover_xml_bytes: Callable[..., bytes]) -> None:
    result = check_report(
        kover_xml_bytes((5, 95), [("com/example/Foo", "Foo.kt", 5, 5)]),
        changed_files=["app/src/main/kotlin/com/example/Foo.kt"],
        module_name="App",
        policy=PolicyConfig(90, 70, strict=True),
    )
    ((file_result, verdict),) = result.outcome.file_results
    assert file_result.name == "Foo.kt"
    assert file_result.percentage == 50.0
    assert verdict is Verdict.FAIL
    assert result.outcome.total_verdict is Verdict.PASS
    assert result.outcome.build_should_fail
    assert result.markdown.splitlines()[0] == "## 🎯 App Code Coverage: **`95.00%`**"
    assert "`Foo.kt` | **`50.00%`**" in result.markdown


def test_changed_file_absent_from_report(kover_xml_bytes: Callable[..., bytes]) -> None:
    result = check_report(
        kover_xml_bytes((0, 100), [("com/example/Foo", "Foo.kt", 0, 10)]),
        changed_files=["app/Other.kt"],
        module_name="App",
    )
    assert result.match.unmatched == ("Other.kt",)
    assert result.outcome.file_results == ()
    assert result.outcome.unreported_count == 1
    assert not result.outcome.build_should_fail
    assert "Number of files not found in coverage report: 1" in result.markdown


def test_summed_classes_not_averaged(kover_xml_bytes: Callable[..., bytes]) -> None:
    # 9/10 and 1/90: average would be 45.5%, sum gives 10/100
    result = check_report(
        kover_xml_bytes((0, 1), [("Foo", "Foo.kt", 1, 9), ("Foo$Inner", "Foo.kt", 89, 1)]),
        changed_files=["Foo.kt"],
        module_name="App",
    )
    ((file_result, _),) = result.outcome.file_results
    assert file_result.percentage == pytest.approx(10.0)


def test_run_gate_reads_file(kover_xml_file: Callable[..., Path]) -> None:
    path = kover_xml_file((1, 3), [("A", "A.kt", 0, 4)])
    result = run_gate(report_path=path, changed_files=["A.kt"], module_name="M")
    assert result.outcome.total_percentage == 75.0
    assert result.outcome.build_should_fail


def test_run_gate_requires_path() -> None:
    with pytest.raises(EmptyPathError):
        run_gate(report_path="", changed_files=[], module_name="M")
