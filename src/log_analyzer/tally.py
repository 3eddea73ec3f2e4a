"""Streaming line tallier.

Reads a binary stream line by line, classifies each line, and keeps one
running counter per reported category. Nothing is buffered beyond the
current line, so input size is bounded only by the per-line limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Dict

from .errors import ReadFailed, ReadTooLong
from .severity import Category, LABELS, classify

DEFAULT_MAX_LINE_BYTES = 1024 * 1024


@dataclass
class Tally:
    """Per-category counts for one run.

    Attributes:
        errors: Lines classified as ERROR.
        warnings: Lines classified as WARNING.
        infos: Lines classified as INFO.
        lines_seen: Every line read, matched or not.
    """
    errors: int = 0
    warnings: int = 0
    infos: int = 0
    lines_seen: int = 0

    def add(self, category: Category) -> None:
        self.lines_seen += 1
        if category is Category.ERROR:
            self.errors += 1
        elif category is Category.WARNING:
            self.warnings += 1
        elif category is Category.INFO:
            self.infos += 1

    def count(self, category: Category) -> int:
        """Return the counter for *category* (NONE is never counted)."""
        return {
            Category.ERROR: self.errors,
            Category.WARNING: self.warnings,
            Category.INFO: self.infos,
        }.get(category, 0)

    def as_dict(self) -> Dict[str, int]:
        """Label -> count, in report order."""
        return {label.value: self.count(label) for label in LABELS}


def split_line(raw: bytes) -> bytes:
    """Strip a trailing ``\\n`` or ``\\r\\n`` terminator from *raw*."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def tally_stream(stream: BinaryIO, max_line_bytes: int = DEFAULT_MAX_LINE_BYTES) -> Tally:
    """Classify every line of *stream* and return the finished tally.

    A trailing line without a terminator is still counted.

    Raises:
        ReadFailed: If the stream raises an I/O error while reading.
        ReadTooLong: If a line (terminator excluded) exceeds *max_line_bytes*.
    """
    tally = Tally()
    while True:
        try:
            # room for a \r\n terminator on a line of exactly max_line_bytes
            raw = stream.readline(max_line_bytes + 2)
        except OSError as e:
            raise ReadFailed(f"cannot read log input: {e}") from e
        if not raw:
            break

        line = split_line(raw)
        if len(line) > max_line_bytes:
            raise ReadTooLong(
                f"line {tally.lines_seen + 1} exceeds the maximum line length of {max_line_bytes} bytes"
            )
        tally.add(classify(line.decode("utf-8", errors="replace")))
    return tally
