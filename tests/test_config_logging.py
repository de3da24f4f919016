"""Tests for configuration and console logging helpers."""

import contextlib
import io

import pytest

from knights_journey.config import Config
from knights_journey.logging_utils import Color, colored, log_error, verbose_enabled
from knights_journey.session import JourneySession


def test_config_defaults_validate():
    Config.validate()
    assert "Solve Budget" in Config.display()


def test_config_rejects_non_positive_budget(monkeypatch):
    monkeypatch.setattr(Config, "SOLVE_BUDGET_SECONDS", 0.0)
    with pytest.raises(ValueError):
        Config.validate()


def test_session_uses_configured_budget(monkeypatch):
    monkeypatch.setattr(Config, "SOLVE_BUDGET_SECONDS", 0.75)
    assert JourneySession().time_budget == 0.75
    assert JourneySession(time_budget=3.0).time_budget == 3.0


def test_colored_respects_no_color(monkeypatch):
    monkeypatch.delenv("KNIGHTS_NO_COLOR", raising=False)
    assert colored("hi", Color.GREEN) == f"{Color.GREEN.value}hi{Color.RESET.value}"
    assert colored("hi", Color.RED, bold=True) == f"{Color.BOLD.value}{Color.RED.value}hi{Color.RESET.value}"

    monkeypatch.setenv("KNIGHTS_NO_COLOR", "1")
    assert colored("hi", Color.GREEN, bold=True) == "hi"


def test_verbose_flag(monkeypatch):
    monkeypatch.setenv("KNIGHTS_VERBOSE", "yes")
    assert verbose_enabled() is True
    monkeypatch.setenv("KNIGHTS_VERBOSE", "0")
    assert verbose_enabled() is False


def test_session_logs_illegal_moves_when_verbose(monkeypatch):
    monkeypatch.setenv("KNIGHTS_VERBOSE", "1")
    monkeypatch.setenv("KNIGHTS_NO_COLOR", "1")
    session = JourneySession()
    session.move(0)

    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        session.move(4)
        log_error("done")

    output = buffer.getvalue()
    assert "[!] [Session] Illegal move to #4" in output
    assert output.strip().endswith("done")


def test_display_reads_verbose_flag_at_call_time(monkeypatch):
    monkeypatch.setenv("KNIGHTS_VERBOSE", "true")
    assert "Verbose: True" in Config.display()
    monkeypatch.delenv("KNIGHTS_VERBOSE")
    assert "Verbose: False" in Config.display()
