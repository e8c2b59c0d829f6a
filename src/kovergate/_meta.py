from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("kovergate")

logger = logging.getLogger("kovergate")

__all__ = ["__version__", "logger"]
