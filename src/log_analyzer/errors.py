"""Error taxonomy for a single analysis run.

Every operational failure is a ``RuntimeError`` subclass carrying the
process exit code the CLI should return for it.
"""

from __future__ import annotations


class AnalyzerError(RuntimeError):
    """Base class for failures surfaced to the user as ``Error: ...``."""

    exit_code = 2


class ConfigInvalid(AnalyzerError):
    """A flag or environment value could not be accepted."""


class InputOpenFailed(AnalyzerError):
    """The named log file could not be opened."""


class ReadFailed(AnalyzerError):
    """The input stream reported an I/O error mid-stream."""


class ReadTooLong(AnalyzerError):
    """A single line exceeded the configured maximum line length."""


class SinkOpenFailed(AnalyzerError):
    """The report file could not be created.

    Raised after the console summary was printed, so it only fails the
    file sink.
    """

    exit_code = 1
