from __future__ import annotations

from pathlib import Path

from kovergate._meta import logger
from kovergate.errors import EmptyPathError, ReportNotFoundError


def read_report(path: str | Path | None) -> bytes:
    """Return the raw bytes of the coverage report at *path*.

    Rules
    -----
    - An empty or missing path is rejected before touching the filesystem.
    - The path must resolve to a readable regular file.
    """
    if path is None or not str(path).strip():
        msg = "Please specify file name."
        raise EmptyPathError(msg)

    report = Path(path)
    if not report.is_file():
        msg = f"No Kover xml report found at {report}"
        raise ReportNotFoundError(msg)
    try:
        data = report.read_bytes()
    except OSError as exc:
        msg = f"could not read Kover xml report at {report}: {exc}"
        raise ReportNotFoundError(msg) from exc

    logger.debug("read %d bytes from %s", len(data), report)
    return data


__all__ = ["read_report"]
