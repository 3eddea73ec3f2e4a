"""Shared pytest fixtures for the Log Analyzer test suite.

Provides sample log data, temporary log files, and factories for parsed
arguments and configs so individual test modules stay focused on
assertions rather than setup.
"""

from __future__ import annotations

import argparse
import io
import sys
from pathlib import Path

import pytest

from log_analyzer.config import ENV_VARS, Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove every variable ``load_config`` reads so the host environment
    never leaks into a test. Tests that need one set it explicitly."""
    for name in ENV_VARS.values():
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_lines() -> list[str]:
    """The five-line log used throughout the scenarios: one INFO, one
    WARNING, two ERROR lines and one line with no level at all."""
    return [
        "INFO starting up",
        "WARNING disk 80%",
        "ERROR connection refused",
        "ERROR timeout",
        "unrelated chatter",
    ]


@pytest.fixture
def sample_log(tmp_path: Path, sample_lines) -> Path:
    """Write ``sample_lines`` to a temporary log file and return its path."""
    p = tmp_path / "app.log"
    p.write_text("\n".join(sample_lines) + "\n")
    return p


@pytest.fixture
def fake_stdin(monkeypatch):
    """Factory that replaces ``sys.stdin`` with an in-memory text wrapper
    around *data*, exposing ``.buffer`` like the real stdin does.

    Example::

        fake_stdin(b"ERROR boom\\n")
    """

    def _install(data: bytes) -> None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _install


@pytest.fixture
def make_args():
    """Factory fixture that builds ``argparse.Namespace`` objects.

    Only the attributes passed in are set, matching what ``parse_args``
    produces when a flag is omitted (its default is suppressed).

    Example::

        args = make_args(log_file="/tmp/app.log", log_level="INFO")
    """

    def _make(**overrides) -> argparse.Namespace:
        return argparse.Namespace(command="analyze", **overrides)

    return _make


@pytest.fixture
def make_config():
    """Factory fixture for ``Config`` with keyword overrides."""

    def _make(**overrides) -> Config:
        return Config(**overrides)

    return _make
