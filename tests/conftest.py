"""Pytest fixtures for tests."""

import pytest

from oscgrid.core import GridSession
from oscgrid.models import Grid, GridConfig


@pytest.fixture
def grid():
    """Create a default 8-row x 16-column grid."""
    return Grid(rows=8, columns=16)


@pytest.fixture
def small_grid():
    """Create a 4-row x 5-column grid (not a multiple of 8 either way)."""
    return Grid(rows=4, columns=5)


@pytest.fixture
def quad():
    """64 levels in row-major order: rows alternate 0-7 and 8-15."""
    return [y % 2 * 8 + x for y in range(8) for x in range(8)]


@pytest.fixture
def session():
    """Create a session with the /monome prefix."""
    return GridSession(GridConfig(prefix="/monome"))


class RecordingObserver:
    """Session observer that records every callback."""

    def __init__(self):
        self.commands = []
        self.events = []

    def on_grid_changed(self, command):
        self.commands.append(command)

    def on_device_event(self, event, message):
        self.events.append((event, message))


@pytest.fixture
def observer():
    """Create a recording session observer."""
    return RecordingObserver()
