"""Grid device session.

Owns one grid for the lifetime of a device connection: inbound protocol
messages are parsed and applied to it, outbound device events are rendered
into protocol messages, and observers hear about both.
"""

import logging
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from oscgrid.commands import Command, apply_command, parse_message
from oscgrid.devices import ConnectEvent, DeviceEvent, KeyEvent
from oscgrid.exceptions import ParseError
from oscgrid.models import Grid, GridConfig, OscMessage
from oscgrid.utils import ObserverManager

logger = logging.getLogger(__name__)


@runtime_checkable
class SessionObserver(Protocol):
    """
    Observer of a grid session.

    Both callbacks are optional; the session only calls the ones an
    observer defines.
    """

    def on_grid_changed(self, command: Command) -> None:
        """Called after ``command`` has been applied to the session grid."""
        ...

    def on_device_event(self, event: DeviceEvent, message: OscMessage) -> None:
        """Called with each device event and the message it was rendered to."""
        ...


class GridSession:
    """
    A single device session.

    Single-writer: the session does no locking of its own, so callers that
    feed it from several threads must serialize those calls.

    Example:
        ```python
        session = GridSession(GridConfig(prefix="/monome"))
        session.handle("/monome/grid/led/level/set", [3, 2, 9])
        outgoing = session.key_down(3, 2)  # /monome/grid/key 3 2 1
        ```
    """

    def __init__(self, config: GridConfig | None = None, grid: Grid | None = None):
        """
        Initialize a session.

        Args:
            config: Session configuration (defaults to GridConfig())
            grid: Grid to drive; created from ``config`` if not given
        """
        self.config = config or GridConfig()
        self.grid = grid if grid is not None else self.config.create_grid()
        self._observers = ObserverManager[SessionObserver](observer_type_name="session")

    @property
    def prefix(self) -> str | None:
        return self.config.prefix

    def register_observer(self, observer: SessionObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: SessionObserver) -> None:
        self._observers.unregister(observer)

    def handle_message(self, message: OscMessage) -> Command | None:
        """
        Parse ``message`` and apply it to the grid.

        Messages that fail to parse are logged and dropped.

        Returns:
            The applied command, or None if the message was dropped

        Raises:
            GridIndexError: If the command does not fit the grid
        """
        try:
            command = parse_message(message, prefix=self.prefix)
        except ParseError as e:
            logger.warning(f"Dropping message '{message}': {e.technical_message}")
            return None

        self.run(command)
        return command

    def handle(self, address: str, arguments: Sequence[Any] = ()) -> Command | None:
        """Convenience wrapper around ``handle_message``."""
        return self.handle_message(OscMessage(address=address, arguments=list(arguments)))

    def run(self, command: Command) -> None:
        """Apply an already-built command and notify observers."""
        apply_command(self.grid, command)
        self._observers.notify("on_grid_changed", command)

    def key_down(self, x: int, y: int) -> OscMessage:
        """Render a key press at (x, y) as an outgoing message."""
        return self.emit(KeyEvent.key_down(x, y))

    def key_up(self, x: int, y: int) -> OscMessage:
        """Render a key release at (x, y) as an outgoing message."""
        return self.emit(KeyEvent.key_up(x, y))

    def connect(self) -> OscMessage:
        """Render the connection event as an outgoing message."""
        return self.emit(ConnectEvent())

    def emit(self, event: DeviceEvent) -> OscMessage:
        """Render ``event`` with the session prefix and notify observers."""
        message = event.to_message(prefix=self.prefix)
        self._observers.notify("on_device_event", event, message)
        return message

    def snapshot(self) -> str:
        """Display string of the current grid state."""
        return self.grid.to_display_string()
