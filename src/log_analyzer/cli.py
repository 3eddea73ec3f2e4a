"""CLI entry point for Log Analyzer.

Parses arguments, layers them over the environment into a ``Config``,
and runs the read -> tally -> report pipeline for the ``analyze``
subcommand.
"""

from __future__ import annotations

import argparse
import sys

from .config import load_config
from .core import analyze
from .errors import AnalyzerError


def _common_flags() -> argparse.ArgumentParser:
    """Flags shared by the root command and ``analyze``.

    Every default is suppressed so a flag the user did not pass is absent
    from the namespace and the environment can fill it in.
    """
    common = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
    common.add_argument("--log-file", help="Path to the log file (default: read standard input) [LOG_FILE]")
    common.add_argument("--log-level", help="Log analysis level: ERROR, WARNING, or INFO [LOG_LEVEL]")
    common.add_argument(
        "--output-to-file",
        action=argparse.BooleanOptionalAction,
        help="Also write results to the report file [OUTPUT_TO_FILE]",
    )
    common.add_argument("--report-file", help="Path to the report file (default: default_report.txt) [REPORT_PATH]")
    common.add_argument("--max-line-bytes", type=int, help="Longest accepted input line in bytes [MAX_LINE_BYTES]")
    return common


def build_parser() -> argparse.ArgumentParser:
    common = _common_flags()
    parser = argparse.ArgumentParser(
        prog="log-analyzer",
        description="Log Analyzer: count ERROR, WARNING and INFO lines in a log.",
        parents=[common],
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser(
        "analyze",
        parents=[common],
        help="Analyze log file or stdin",
        description="Analyze log file or stdin",
    )
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    """Build the argument parser and return parsed arguments."""
    return build_parser().parse_args(argv)


def main(argv=None) -> None:
    """Entry point: load config, analyze, and exit non-zero on failure."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    try:
        config = load_config(args)
        analyze(config)
    except AnalyzerError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
