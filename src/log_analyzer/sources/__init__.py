"""Log source dispatcher: named file or standard input."""

from __future__ import annotations

from contextlib import contextmanager
from typing import BinaryIO, Iterator

from .file import open_file
from .stdin import stdin_stream


@contextmanager
def open_input(config) -> Iterator[BinaryIO]:
    """Yield the input stream selected by *config*.

    A named file is closed on every exit path. Standard input is left
    open since it belongs to the process.

    Raises:
        InputOpenFailed: If ``config.input_path`` cannot be opened.
    """
    if config.reads_stdin:
        yield stdin_stream()
        return

    fh = open_file(config.input_path)
    try:
        yield fh
    finally:
        fh.close()
