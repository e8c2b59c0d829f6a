"""Centralised exception hierarchy for kovergate."""

from __future__ import annotations


class KovergateError(Exception):
    """Base class for all custom kovergate exceptions."""


class CoverageReportError(KovergateError):
    """Base class for errors related to reading a coverage report."""


class EmptyPathError(CoverageReportError):
    """No coverage report path was given."""


class ReportNotFoundError(CoverageReportError):
    """Coverage report could not be located or read from disk."""


class MalformedReportError(CoverageReportError):
    """Coverage report is not well-formed XML."""


class MissingCounterError(CoverageReportError):
    """Coverage report has no project-level instruction counter."""


class InvalidCounterValueError(CoverageReportError):
    """A counter attribute is not a valid non-negative integer."""


class ConfigError(KovergateError):
    """Configuration values could not be resolved."""


class ChangedFilesError(KovergateError):
    """The set of changed files could not be determined."""


__all__ = [
    "ChangedFilesError",
    "ConfigError",
    "CoverageReportError",
    "EmptyPathError",
    "InvalidCounterValueError",
    "KovergateError",
    "MalformedReportError",
    "MissingCounterError",
    "ReportNotFoundError",
]
