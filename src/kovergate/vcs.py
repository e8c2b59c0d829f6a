"""Changed-file providers: git, or an explicit list on disk/stdin."""

from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from kovergate._meta import logger
from kovergate.errors import ChangedFilesError

if TYPE_CHECKING:
    from collections.abc import Iterable


def git_changed_files(base: str = "HEAD", *, cwd: Path | None = None) -> tuple[str, ...]:
    """Return files modified or added relative to *base*, as git reports them."""
    git = shutil.which("git")
    if git is None:
        msg = "git executable not found on PATH"
        raise ChangedFilesError(msg)

    cmd = [git, "diff", "--name-only", "--diff-filter=AM", base]
    proc = subprocess.run(  # noqa: S603
        cmd,
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )
    if proc.returncode != 0:
        lines = [ln.strip() for ln in proc.stderr.splitlines() if ln.strip()]
        detail = lines[0] if lines else f"exit code {proc.returncode}"
        msg = f"git diff against {base!r} failed: {detail}"
        raise ChangedFilesError(msg)

    files = parse_file_list(proc.stdout.splitlines())
    logger.debug("git reported %d changed files against %s", len(files), base)
    return files


def parse_file_list(lines: Iterable[str]) -> tuple[str, ...]:
    """Strip blank lines and ``#`` comments from a newline-separated file list."""
    out: list[str] = []
    for line in lines:
        item = line.strip()
        if not item or item.startswith("#"):
            continue
        out.append(item)
    return tuple(out)


def read_changed_files(source: Path) -> tuple[str, ...]:
    """Read a file list from *source* (``-`` for stdin)."""
    if source == Path("-"):
        return parse_file_list(sys.stdin.read().splitlines())
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"could not read changed-file list {source}: {exc}"
        raise ChangedFilesError(msg) from exc
    return parse_file_list(text.splitlines())


__all__ = ["git_changed_files", "parse_file_list", "read_changed_files"]
