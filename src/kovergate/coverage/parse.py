"""Turn a Kover/JaCoCo XML report into a :class:`CoverageReport`.

Expected layout::

    <report name="...">
      <package name="...">
        <class name="com/example/Foo" sourcefilename="Foo.kt">
          <counter type="INSTRUCTION" missed="5" covered="5"/>
          ...
        </class>
      </package>
      <counter type="INSTRUCTION" missed="10" covered="90"/>
    </report>

Only ``INSTRUCTION`` counters are read. Classes declared in the same source
file are summed under its basename.
"""

from __future__ import annotations

import re
from collections import defaultdict
from typing import TYPE_CHECKING

from kovergate._meta import logger
from kovergate.coverage.xml_reader import local_name, read_root
from kovergate.errors import InvalidCounterValueError, MissingCounterError
from kovergate.model.types import CoverageCounter, CoverageReport

if TYPE_CHECKING:
    from collections.abc import Iterator
    from xml.etree.ElementTree import Element  # noqa: S405

INSTRUCTION = "INSTRUCTION"

_INT_RE = re.compile(r"^\s*[0-9]+\s*$")


def parse_count(raw: str | None, *, attribute: str, where: str) -> int:
    """Parse a counter attribute as a non-negative base-10 integer."""
    if raw is None:
        msg = f"{where}: counter is missing the {attribute!r} attribute"
        raise InvalidCounterValueError(msg)
    if not _INT_RE.match(raw):
        msg = f"{where}: counter attribute {attribute!r} is not a non-negative integer: {raw!r}"
        raise InvalidCounterValueError(msg)
    return int(raw)


def instruction_counter(elem: Element) -> Element | None:
    """Return the direct ``<counter type="INSTRUCTION">`` child of *elem*, if any."""
    for child in elem:
        if local_name(child.tag) == "counter" and child.get("type") == INSTRUCTION:
            return child
    return None


def read_counter(elem: Element, *, where: str) -> CoverageCounter:
    return CoverageCounter(
        missed=parse_count(elem.get("missed"), attribute="missed", where=where),
        covered=parse_count(elem.get("covered"), attribute="covered", where=where),
    )


def iter_class_counters(root: Element) -> Iterator[tuple[str, CoverageCounter]]:
    """Yield ``(sourcefilename, counter)`` for every class carrying an instruction counter."""
    for cls in root.iter():
        if local_name(cls.tag) != "class":
            continue
        source = cls.get("sourcefilename")
        if not source:
            continue
        counter = instruction_counter(cls)
        if counter is None:
            continue
        where = f"class {cls.get('name') or source!r}"
        yield source, read_counter(counter, where=where)


def parse_report(raw: bytes) -> CoverageReport:
    """Parse raw report bytes into a :class:`CoverageReport`."""
    root = read_root(raw)

    total_elem = instruction_counter(root)
    if total_elem is None:
        msg = "coverage report has no project-level INSTRUCTION counter"
        raise MissingCounterError(msg)
    total = read_counter(total_elem, where="report")

    files: defaultdict[str, CoverageCounter] = defaultdict(CoverageCounter)
    classes = 0
    for source, counter in iter_class_counters(root):
        files[source] += counter
        classes += 1

    logger.debug("read %d classes across %d source files", classes, len(files))
    return CoverageReport(total=total, files=files)


__all__ = [
    "INSTRUCTION",
    "iter_class_counters",
    "parse_count",
    "parse_report",
]
