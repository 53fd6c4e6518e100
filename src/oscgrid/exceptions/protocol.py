"""Protocol parse errors.

Raised while turning an incoming message (address + arguments) into a grid
command or a device event. They never leave the grid mutated: validation
finishes before any command object exists.

- ParseError: Base class, carries an opaque ``detail`` payload
- UnrecognizedAddressError: No dispatch entry for the address
- ArgumentCountError: Fixed-arity message with the wrong argument count
- ArgumentTypeError: An argument that must be an int is not one
- ArgumentShapeError: Variable-length level list of the wrong size
"""

from .base import OscGridError


class ParseError(OscGridError):
    """A protocol message could not be turned into a command or event."""

    CATEGORY = "Parse Error"
    RECOVERABLE = True
    HINT = "Drop the message and check the sender's protocol revision."


class UnrecognizedAddressError(ParseError):
    """No command or event is registered for this address."""

    HINT = "Run 'oscgrid addresses' to list supported addresses."

    def __init__(self, address: str):
        super().__init__(f"Unrecognized command: {address}")
        self.address = address


class ArgumentCountError(ParseError):
    """A fixed-arity message carried the wrong number of arguments."""

    def __init__(self, address: str, expected: int | str, actual: int):
        super().__init__(f"expected {expected} arguments, got: {actual}", source=address)
        self.address = address
        self.expected = expected
        self.actual = actual


class ArgumentTypeError(ParseError):
    """An argument expected to be an int was something else."""

    def __init__(self, address: str, index: int, observed: str):
        super().__init__(f"expected int, got: {observed}", source=f"{address} argument {index}")
        self.address = address
        self.index = index
        self.observed = observed


class ArgumentShapeError(ParseError):
    """The trailing level list is not a multiple of 8 (row/col) or not 64 (map)."""

    def __init__(self, address: str, expected: str, actual: int):
        super().__init__(f"expected {expected} values, got: {actual}", source=address)
        self.address = address
        self.expected = expected
        self.actual = actual
