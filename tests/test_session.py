"""Tests for GridSession."""

import pytest

from oscgrid.commands import LevelSetCommand, StateSetAllCommand
from oscgrid.core import GridSession
from oscgrid.devices import ConnectEvent, KeyEvent
from oscgrid.exceptions import GridIndexError
from oscgrid.models import Grid, GridConfig, OscMessage


@pytest.mark.integration
class TestGridSession:
    """Test message handling, event emission and observers."""

    def test_default_session(self):
        """Test a session without config gets a default 8x16 grid."""
        session = GridSession()
        assert session.grid.shape == (16, 8)
        assert session.prefix is None

    def test_grid_from_config(self):
        session = GridSession(GridConfig(rows=16, columns=16))
        assert session.grid.shape == (16, 16)

    def test_explicit_grid(self):
        grid = Grid(rows=4, columns=4)
        assert GridSession(grid=grid).grid is grid

    def test_handle_applies_command(self, session):
        command = session.handle("/monome/grid/led/level/set", [3, 2, 9])
        assert command == LevelSetCommand(x=3, y=2, level=9)
        assert session.grid.get(3, 2) == 9

    def test_handle_message(self, session):
        session.handle_message(OscMessage(address="/monome/grid/led/all", arguments=[1]))
        assert session.grid.get(15, 7) == 15

    def test_parse_error_dropped(self, session, caplog):
        """Test a malformed message is logged, dropped and leaves the grid alone."""
        session.grid.set(0, 0, 4)

        with caplog.at_level("WARNING"):
            assert session.handle("/monome/grid/led/level/set", [0, 0]) is None

        assert session.grid.get(0, 0) == 4
        assert "Dropping message" in caplog.text

    def test_bounds_error_propagates(self, session):
        with pytest.raises(GridIndexError):
            session.handle("/monome/grid/led/level/set", [16, 0, 1])

    def test_observer_sees_commands(self, session, observer):
        session.register_observer(observer)
        session.handle("/monome/grid/led/all", [1])
        session.handle("/monome/grid/led/all", [1, 2])  # dropped

        assert observer.commands == [StateSetAllCommand(state=1)]

    def test_key_events(self, session, observer):
        """Test outbound messages carry the session prefix."""
        session.register_observer(observer)

        down = session.key_down(2, 5)
        up = session.key_up(2, 5)

        assert str(down) == "/monome/grid/key 2 5 1"
        assert str(up) == "/monome/grid/key 2 5 0"
        assert observer.events == [
            (KeyEvent.key_down(2, 5), down),
            (KeyEvent.key_up(2, 5), up),
        ]

    def test_connect(self, session, observer):
        session.register_observer(observer)
        message = session.connect()
        assert message.address == "/monome/sys/connect"
        assert observer.events == [(ConnectEvent(), message)]

    def test_unregister_observer(self, session, observer):
        session.register_observer(observer)
        session.unregister_observer(observer)
        session.handle("/monome/grid/led/all", [1])
        assert observer.commands == []

    def test_partial_observer(self, session):
        """Test observers only need the callbacks they care about."""

        class KeysOnly:
            def __init__(self):
                self.seen = []

            def on_device_event(self, event, message):
                self.seen.append(event)

        keys = KeysOnly()
        session.register_observer(keys)
        session.handle("/monome/grid/led/all", [1])
        session.key_down(0, 0)
        assert keys.seen == [KeyEvent.key_down(0, 0)]

    def test_failing_observer_isolated(self, session, observer):
        """Test an observer that raises does not stop the others."""

        class Broken:
            def on_grid_changed(self, command):
                raise RuntimeError("boom")

        session.register_observer(Broken())
        session.register_observer(observer)
        session.handle("/monome/grid/led/all", [0])
        assert len(observer.commands) == 1

    def test_snapshot(self, session):
        assert session.snapshot() == session.grid.to_display_string()
