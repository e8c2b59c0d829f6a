"""Settings for a gate run, resolved once from defaults, pyproject.toml and the CLI."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from kovergate._meta import logger
from kovergate.errors import ConfigError
from kovergate.model.policy import DEFAULT_THRESHOLD, PolicyConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

TOOL_TABLE = "kovergate"


@dataclass(frozen=True, slots=True)
class Settings:
    module_name: str = "Project"
    report: str | None = None
    total_threshold: int = DEFAULT_THRESHOLD
    file_threshold: int = DEFAULT_THRESHOLD
    fail_under_threshold: bool = True

    def policy(self) -> PolicyConfig:
        return PolicyConfig(
            total_threshold=self.total_threshold,
            file_threshold=self.file_threshold,
            strict=self.fail_under_threshold,
        )

    def merged(self, overrides: Mapping[str, Any]) -> Settings:
        """Return a copy with every non-``None`` value of *overrides* applied."""
        return replace(self, **_validate({k: v for k, v in overrides.items() if v is not None}))


_EXPECTED: dict[str, tuple[type, ...]] = {
    "module_name": (str,),
    "report": (str,),
    "total_threshold": (int,),
    "file_threshold": (int,),
    "fail_under_threshold": (bool,),
}


def _validate(values: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(Settings)}
    out: dict[str, Any] = {}
    for raw_key, value in values.items():
        key = raw_key.replace("-", "_")
        if key not in known:
            msg = f"unknown setting {raw_key!r}; expected one of {', '.join(sorted(known))}"
            raise ConfigError(msg)
        expected = _EXPECTED[key]
        # bool is a subclass of int; thresholds must be real integers
        if not isinstance(value, expected) or (bool not in expected and isinstance(value, bool)):
            msg = f"setting {raw_key!r} must be {expected[0].__name__}, got {type(value).__name__}"
            raise ConfigError(msg)
        out[key] = value
    return out


def read_pyproject(pyproject: Path) -> dict[str, Any]:
    """Return the ``[tool.kovergate]`` table of *pyproject*, or ``{}``."""
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", pyproject, e)
        return {}

    table = data.get("tool", {}).get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        msg = f"[tool.{TOOL_TABLE}] in {pyproject} must be a table"
        raise ConfigError(msg)
    return table


def load_settings(pyproject: Path | None = None, overrides: Mapping[str, Any] | None = None) -> Settings:
    """Resolve settings: defaults, then ``[tool.kovergate]``, then *overrides*."""
    settings = Settings()
    path = pyproject if pyproject is not None else Path("pyproject.toml")
    if path.exists():
        table = read_pyproject(path)
        if table:
            logger.info("Using settings from %s", path)
            settings = settings.merged(table)
    elif pyproject is not None:
        msg = f"config file not found: {pyproject}"
        raise ConfigError(msg)
    return settings.merged(overrides or {})


__all__ = ["LOG_FORMAT", "TOOL_TABLE", "Settings", "load_settings", "read_pyproject"]
