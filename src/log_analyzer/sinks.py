"""Report sinks: stdout and an optional report file.

The console summary is always printed first. When file output is
enabled the label lines are then written (without the header) to the
report file, and a confirmation is printed once the file is closed.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from .config import Config
from .errors import SinkOpenFailed
from .report import Report, format_console, format_labels


def print_text_report(report: Report, out: Optional[TextIO] = None) -> None:
    """Write the header and label lines to *out* (stdout by default)."""
    out = out or sys.stdout
    out.write(format_console(report))
    out.flush()


def write_report_file(report: Report, path: Path) -> None:
    """Create or truncate *path* and write the label lines to it.

    Raises:
        SinkOpenFailed: If the file cannot be created or written.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(format_labels(report))
    except OSError as e:
        raise SinkOpenFailed(f"cannot create report file: {e}") from e


def route_report(report: Report, config: Config, out: Optional[TextIO] = None) -> None:
    """Send *report* to the console and, if configured, to the report file."""
    out = out or sys.stdout
    print_text_report(report, out)

    if not config.emit_to_file:
        return

    path = config.resolved_report_path
    write_report_file(report, Path(path))
    out.write(f"Results written to {path}\n")
    out.flush()
