"""Device events (input from the hardware).

Events flow the other way from commands: the device reports key presses
and connection, and each event renders itself as a protocol message::

    /grid/key x y s      KeyEvent (s: 1 = down, 0 = up)
    /sys/connect         ConnectEvent
"""

import logging
from collections.abc import Sequence
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from oscgrid.commands.parser import expect_count, to_int
from oscgrid.exceptions import ParseError, UnrecognizedAddressError
from oscgrid.models.message import OscMessage, add_prefix, strip_prefix

logger = logging.getLogger(__name__)

KEY_UP = 0
KEY_DOWN = 1


class DeviceEvent(BaseModel):
    """Base for all device events."""

    model_config = ConfigDict(frozen=True)

    ADDRESS: ClassVar[str]

    @property
    def address(self) -> str:
        return self.ADDRESS

    def arguments(self) -> list[int]:
        """Protocol arguments in wire order."""
        return []

    def to_message(self, prefix: str | None = None) -> OscMessage:
        """Render this event as a protocol message, optionally address-prefixed."""
        message = OscMessage(address=add_prefix(self.ADDRESS, prefix), arguments=self.arguments())
        logger.debug(f"Encoded {message}")
        return message


class KeyEvent(DeviceEvent):
    """Key at (x, y) changed state (1: down, 0: up)."""

    ADDRESS: ClassVar[str] = "/grid/key"

    kind: Literal["key"] = "key"
    x: int
    y: int
    state: Literal[0, 1]

    @classmethod
    def key_down(cls, x: int, y: int) -> "KeyEvent":
        return cls(x=x, y=y, state=KEY_DOWN)

    @classmethod
    def key_up(cls, x: int, y: int) -> "KeyEvent":
        return cls(x=x, y=y, state=KEY_UP)

    @property
    def is_down(self) -> bool:
        return self.state == KEY_DOWN

    def arguments(self) -> list[int]:
        return [self.x, self.y, self.state]

    def __str__(self) -> str:
        return f"{self.ADDRESS} {self.x} {self.y} {self.state}"


class ConnectEvent(DeviceEvent):
    """The device connected."""

    ADDRESS: ClassVar[str] = "/sys/connect"

    kind: Literal["connect"] = "connect"

    def __str__(self) -> str:
        return self.ADDRESS


Event = Annotated[Union[KeyEvent, ConnectEvent], Field(discriminator="kind")]


def _parse_key(address: str, arguments: Sequence[Any]) -> KeyEvent:
    expect_count(address, arguments, 3)
    x = to_int(address, arguments, 0)
    y = to_int(address, arguments, 1)
    state = to_int(address, arguments, 2)
    if state not in (KEY_UP, KEY_DOWN):
        raise ParseError(f"expected key state 0 or 1, got: {state}", source=address)
    return KeyEvent(x=x, y=y, state=state)


def _parse_connect(address: str, arguments: Sequence[Any]) -> ConnectEvent:
    expect_count(address, arguments, 0)
    return ConnectEvent()


EVENT_TABLE = {
    KeyEvent.ADDRESS: _parse_key,
    ConnectEvent.ADDRESS: _parse_connect,
}


def parse_event(message: OscMessage, prefix: str | None = None) -> Event:
    """
    Decode a device-originated message back into an event.

    The inverse of ``DeviceEvent.to_message``: ``prefix`` is stripped the
    same way the command parser strips it.

    Raises:
        ParseError: If the message is not a well-formed key or connect event
    """
    address = strip_prefix(message.address, prefix)
    parse = EVENT_TABLE.get(address)
    if parse is None:
        raise UnrecognizedAddressError(address)
    return parse(address, message.arguments)
