"""Bind the process's standard input as a binary stream."""

from __future__ import annotations

import sys
from typing import BinaryIO

from ..errors import InputOpenFailed


def stdin_stream() -> BinaryIO:
    """Return the byte stream behind ``sys.stdin``.

    Raises:
        InputOpenFailed: If the process has no standard input (started
            with it closed) or it offers no byte stream.
    """
    stream = getattr(sys.stdin, "buffer", None)
    if stream is None:
        raise InputOpenFailed("standard input is not available")
    return stream
