"""Run configuration: CLI flags layered over environment variables.

Precedence is flag > environment > built-in default. An empty value, on
either layer, counts as not supplied. The resulting ``Config`` is frozen
and handed to the pipeline explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigInvalid
from .report import SEVERITY_RANK
from .tally import DEFAULT_MAX_LINE_BYTES

DEFAULT_REPORT = "default_report.txt"

TRUE_VALUES = ("1", "t", "T", "TRUE", "true", "True")
FALSE_VALUES = ("0", "f", "F", "FALSE", "false", "False")

# attribute name on the parsed args -> environment variable
ENV_VARS = {
    "log_file": "LOG_FILE",
    "log_level": "LOG_LEVEL",
    "output_to_file": "OUTPUT_TO_FILE",
    "report_file": "REPORT_PATH",
    "max_line_bytes": "MAX_LINE_BYTES",
}


@dataclass(frozen=True)
class Config:
    """Immutable settings for one analysis run.

    Attributes:
        input_path: Log file to read; ``None`` reads standard input.
        threshold: ``"ERROR"``, ``"WARNING"``, ``"INFO"``, or ``None`` for
            an empty report.
        emit_to_file: Also write the label lines to a report file.
        report_path: Report file path; ``None`` means ``default_report.txt``.
        max_line_bytes: Longest accepted input line, terminator excluded.
    """
    input_path: Optional[str] = None
    threshold: Optional[str] = None
    emit_to_file: bool = False
    report_path: Optional[str] = None
    max_line_bytes: int = DEFAULT_MAX_LINE_BYTES

    @property
    def resolved_report_path(self) -> str:
        return self.report_path or DEFAULT_REPORT

    @property
    def reads_stdin(self) -> bool:
        return not self.input_path

    def validate(self) -> None:
        """Raise ``ConfigInvalid`` if any setting is unusable."""
        if self.threshold and self.threshold not in SEVERITY_RANK:
            raise ConfigInvalid(
                f"invalid log level {self.threshold!r} (expected one of ERROR, WARNING, INFO)"
            )
        if self.max_line_bytes <= 0:
            raise ConfigInvalid(f"invalid max line bytes {self.max_line_bytes} (must be positive)")


def parse_bool(text: str, name: str = "value") -> bool:
    """Parse the textual booleans ``1/t/true/0/f/false`` (and case variants).

    Raises:
        ConfigInvalid: For anything else.
    """
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ConfigInvalid(f"invalid boolean for {name}: {text!r}")


def parse_int(text: str, name: str = "value") -> int:
    try:
        return int(text)
    except ValueError:
        raise ConfigInvalid(f"invalid integer for {name}: {text!r}")


def _supplied(args, attr: str) -> bool:
    return getattr(args, attr, None) not in (None, "")


def _layer(args, environ: Mapping[str, str], attr: str):
    """Return the flag value if supplied, else the env value, else ``None``."""
    if _supplied(args, attr):
        return getattr(args, attr)
    return environ.get(ENV_VARS[attr]) or None


def _source_name(args, attr: str) -> str:
    """Name the layer *attr* was taken from, for error messages."""
    if _supplied(args, attr):
        return "--" + attr.replace("_", "-")
    return ENV_VARS[attr]


def load_config(args, environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build and validate a ``Config`` from parsed *args* and *environ*.

    Flags absent from *args* (or empty) fall back to the environment
    variables in ``ENV_VARS``.
    """
    if environ is None:
        environ = os.environ

    emit = _layer(args, environ, "output_to_file")
    if isinstance(emit, str):
        emit = parse_bool(emit, _source_name(args, "output_to_file"))

    max_line = _layer(args, environ, "max_line_bytes")
    if isinstance(max_line, str):
        max_line = parse_int(max_line, _source_name(args, "max_line_bytes"))

    config = Config(
        input_path=_layer(args, environ, "log_file"),
        threshold=_layer(args, environ, "log_level"),
        emit_to_file=bool(emit),
        report_path=_layer(args, environ, "report_file"),
        max_line_bytes=DEFAULT_MAX_LINE_BYTES if max_line is None else max_line,
    )
    config.validate()
    return config
