"""Protocol message model.

The transport layer decodes the wire format and hands oscgrid an address
string plus an ordered list of scalar arguments; outbound events are
rendered into the same shape for the transport to encode.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OscMessage(BaseModel):
    """An address and its already-decoded arguments."""

    model_config = ConfigDict(frozen=True)

    address: str = Field(min_length=1, description="Slash-delimited address, e.g. /grid/led/set")
    arguments: list[Any] = Field(default_factory=list, description="Decoded scalar arguments")

    def __str__(self) -> str:
        return " ".join([self.address, *(str(arg) for arg in self.arguments)])


def add_prefix(address: str, prefix: str | None = None) -> str:
    """Prepend ``prefix`` (e.g. ``/monome``) to ``address`` if one is given."""
    return f"{prefix or ''}{address}"


def strip_prefix(address: str, prefix: str | None = None) -> str:
    """
    Remove ``prefix`` from the front of ``address``.

    If no prefix is given, or the address does not start with it, the
    address is returned unchanged.
    """
    if prefix and address.startswith(prefix):
        return address[len(prefix):]
    return address
