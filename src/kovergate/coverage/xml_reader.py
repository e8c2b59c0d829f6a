from __future__ import annotations

from typing import TYPE_CHECKING

from defusedxml import DefusedXmlException, ElementTree

from kovergate.errors import MalformedReportError, MissingCounterError

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element  # noqa: S405

REPORT_TAG = "report"


def local_name(tag: str | None) -> str:
    """Return *tag* without any ``{namespace}`` prefix."""
    return (tag or "").split("}")[-1]


def read_root(raw: bytes) -> Element:
    """Parse a Kover/JaCoCo XML document and return the ``<report>`` element."""
    if not raw or not raw.strip():
        msg = "coverage report is empty"
        raise MalformedReportError(msg)
    try:
        root = ElementTree.fromstring(raw)
    except ElementTree.ParseError as exc:
        msg = f"coverage report is not well-formed XML: {exc}"
        raise MalformedReportError(msg) from exc
    except DefusedXmlException as exc:
        msg = f"coverage report uses forbidden XML constructs: {exc}"
        raise MalformedReportError(msg) from exc

    if local_name(root.tag) != REPORT_TAG:
        msg = f"unexpected root tag {root.tag!r}; expected <{REPORT_TAG}> with an INSTRUCTION counter"
        raise MissingCounterError(msg)
    return root


__all__ = ["REPORT_TAG", "local_name", "read_root"]
