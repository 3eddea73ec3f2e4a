"""Analysis pipeline: announce, read, tally, report, route.

The driver moves through announce -> read -> report in order. Any error
stops the run where it happens; nothing is reported from a partial read.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .config import Config
from .report import Report, build_report
from .sinks import route_report
from .sources import open_input
from .tally import Tally, tally_stream


def announce(config: Config, out: TextIO) -> None:
    out.write("Analyzing...\n")
    if config.reads_stdin:
        out.write("Reading from standard input...\n")
    out.flush()


def read_tally(config: Config) -> Tally:
    """Open the configured input and tally it to end-of-stream."""
    with open_input(config) as stream:
        return tally_stream(stream, max_line_bytes=config.max_line_bytes)


def analyze(config: Config, out: Optional[TextIO] = None) -> Report:
    """Run one analysis described by *config* and return its report.

    Raises:
        ConfigInvalid: Before anything is printed.
        InputOpenFailed, ReadFailed, ReadTooLong: Before anything is reported.
        SinkOpenFailed: After the console summary was printed.
    """
    config.validate()
    out = out or sys.stdout
    announce(config, out)
    tally = read_tally(config)
    report = build_report(tally, config.threshold)
    route_report(report, config, out)
    return report
