"""Open a plain log file for streaming."""

from __future__ import annotations

from typing import BinaryIO

from ..errors import InputOpenFailed


def open_file(path: str) -> BinaryIO:
    """Open *path* read-only in binary mode.

    Raises:
        InputOpenFailed: If the file is missing, unreadable, or a directory.
    """
    try:
        return open(path, "rb")
    except OSError as e:
        raise InputOpenFailed(f"cannot open log file: {e}") from e
