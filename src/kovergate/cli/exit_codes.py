# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_GATE_FAILED = 2  # Coverage under a threshold with --fail
EXIT_DATAERR = 65  # Input data was invalid (e.g., malformed XML)
EXIT_NOINPUT = 66  # Input file not found (e.g., report.xml missing)
EXIT_CONFIG = 78  # Invalid configuration (e.g., bad pyproject.toml)

__all__ = [
    "EXIT_CONFIG",
    "EXIT_DATAERR",
    "EXIT_GATE_FAILED",
    "EXIT_GENERIC",
    "EXIT_NOINPUT",
    "EXIT_OK",
]
