"""Substring-based log severity classifier.

Scans a log line (case-sensitively) for the literal level names ``ERROR``,
``WARNING`` and ``INFO``, in that order. The first hit wins; lines with
none of them are ``NONE`` and are not counted.
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    NONE = "NONE"

    def __str__(self):
        return self.value


# Most severe first; also the order labels appear in a report.
LABELS = (Category.ERROR, Category.WARNING, Category.INFO)


def classify(line: str) -> Category:
    """Classify *line* as ERROR, WARNING, INFO, or NONE."""
    for category in LABELS:
        if category.value in line:
            return category
    return Category.NONE
