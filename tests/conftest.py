from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner

# (class name, sourcefilename, missed, covered)
ClassSpec = tuple[str, str, int, int]

_DOCTYPE = '<!DOCTYPE report PUBLIC "-//JACOCO//DTD Report 1.1//EN" "report.dtd">'


def kover_xml(
    total: tuple[int, int] = (10, 90),
    classes: Iterable[ClassSpec] = (),
    *,
    doctype: bool = True,
) -> str:
    """Build a Kover/JaCoCo XML report with instruction counters only."""
    class_xml = "".join(
        f'<class name="{name}" sourcefilename="{source}">'
        f'<method name="run" desc="()V" line="1">'
        f'<counter type="INSTRUCTION" missed="{missed}" covered="{covered}"/>'
        "</method>"
        f'<counter type="INSTRUCTION" missed="{missed}" covered="{covered}"/>'
        f'<counter type="LINE" missed="1" covered="1"/>'
        "</class>"
        for name, source, missed, covered in classes
    )
    head = f'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>{_DOCTYPE if doctype else ""}'
    return (
        f'{head}<report name="Intellij Coverage Report">'
        f'<package name="com/example">{class_xml}</package>'
        f'<counter type="LINE" missed="3" covered="7"/>'
        f'<counter type="INSTRUCTION" missed="{total[0]}" covered="{total[1]}"/>'
        "</report>"
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def kover_xml_bytes() -> Callable[..., bytes]:
    def build(total: tuple[int, int] = (10, 90), classes: Sequence[ClassSpec] = ()) -> bytes:
        return kover_xml(total, classes).encode("utf-8")

    return build


@pytest.fixture
def kover_xml_file(tmp_path: Path) -> Callable[..., Path]:
    def write(
        total: tuple[int, int] = (10, 90),
        classes: Sequence[ClassSpec] = (),
        *,
        filename: str = "report.xml",
    ) -> Path:
        xml_file = tmp_path / filename
        xml_file.write_text(kover_xml(total, classes), encoding="utf-8")
        return xml_file

    return write
