"""Shared pytest fixtures for RingTimer tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from ringtimer.alarm.controller import AlarmController, AlarmMode
from ringtimer.controller import CountdownController
from ringtimer.database.store import open_database
from ringtimer.storage import MemoryStore
from ringtimer.timer.engine import TimerEngine

from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """A single Qt application instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(qapp, clock):
    """Fresh TimerEngine on a fake clock."""
    return TimerEngine(parent=None, clock=clock)


@pytest.fixture
def alarm(qapp, clock):
    """Fresh AlarmController in FAST mode on a fake clock."""
    return AlarmController(parent=None, mode=AlarmMode.FAST, clock=clock)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def controller(qapp, clock, store):
    return CountdownController(store, clock=clock)


@pytest.fixture
def db():
    """Fresh in-memory SQLite database with the preferences table."""
    engine = open_database("sqlite://")
    yield engine
    engine.dispose()
