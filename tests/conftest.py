"""Shared pytest fixtures for Timer Boss tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from timerboss.timer.engine import TimerEngine

from helpers import RecordingNotifier


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def engine(qapp, notifier):
    """Fresh TimerEngine (25 min, auto-restart ON) with a recording notifier."""
    return TimerEngine(parent=None, notifier=notifier)


@pytest.fixture
def engine_5min(qapp, notifier):
    """Fresh 5-minute TimerEngine."""
    return TimerEngine(parent=None, notifier=notifier, minutes=5)


@pytest.fixture
def engine_no_restart(qapp, notifier):
    """Fresh TimerEngine that stops at zero instead of restarting."""
    return TimerEngine(parent=None, notifier=notifier, minutes=1, auto_restart=False)
