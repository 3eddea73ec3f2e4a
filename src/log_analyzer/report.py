"""Report data structures and text formatters.

A report is the tally projected through a threshold: the threshold picks
a prefix of the fixed label order ERROR, WARNING, INFO (every category at
least as severe as itself). No threshold means an empty report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ConfigInvalid
from .severity import LABELS
from .tally import Tally

HEADER = "Analysis Results:"

# Position in LABELS; lower is more severe
SEVERITY_RANK = {label.value: rank for rank, label in enumerate(LABELS)}


@dataclass
class ReportItem:
    """One ``LABEL: COUNT`` line."""
    label: str
    count: int

    def render(self) -> str:
        return f"{self.label}: {self.count}\n"


@dataclass
class Report:
    """Threshold-filtered view of a finished tally."""
    items: List[ReportItem] = field(default_factory=list)


def labels_for(threshold: Optional[str]) -> List[str]:
    """Return the labels a *threshold* selects, most severe first.

    Raises:
        ConfigInvalid: If *threshold* is not ERROR, WARNING, or INFO.
    """
    if not threshold:
        return []
    if threshold not in SEVERITY_RANK:
        raise ConfigInvalid(f"invalid log level {threshold!r} (expected one of ERROR, WARNING, INFO)")
    max_rank = SEVERITY_RANK[threshold]
    return [label.value for label in LABELS if SEVERITY_RANK[label.value] <= max_rank]


def build_report(tally: Tally, threshold: Optional[str]) -> Report:
    """Project *tally* through *threshold*.

    Zero counts are kept: every selected label gets a line.
    """
    counts = tally.as_dict()
    items = [ReportItem(label=label, count=counts[label]) for label in labels_for(threshold)]
    return Report(items=items)


def format_labels(report: Report) -> str:
    """Label lines only, as written to a report file."""
    return "".join(it.render() for it in report.items)


def format_console(report: Report) -> str:
    """Header followed by the label lines, as printed to stdout."""
    return f"{HEADER}\n" + format_labels(report)
