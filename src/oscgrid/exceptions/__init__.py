"""
Custom exception hierarchy for oscgrid.

```
OscGridError (base)
├── ParseError
│   ├── UnrecognizedAddressError
│   ├── ArgumentCountError
│   ├── ArgumentTypeError
│   └── ArgumentShapeError
├── GridIndexError (also an IndexError)
│   └── GridRangeError
├── GridValueError (also a ValueError)
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Parse errors are recoverable: the transport layer logs them and drops the
message. Grid index errors mean an offset does not fit the grid and are
fatal to the operation that raised them, as are levels too large for a
grid cell.
"""

from .base import OscGridError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .grid import GridIndexError, GridRangeError, GridValueError
from .handlers import ErrorCollector, collect_errors, format_error_for_display, wrap_pydantic_error
from .protocol import (
    ArgumentCountError,
    ArgumentShapeError,
    ArgumentTypeError,
    ParseError,
    UnrecognizedAddressError,
)

__all__ = [
    "ArgumentCountError",
    "ArgumentShapeError",
    "ArgumentTypeError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "ErrorCollector",
    "GridIndexError",
    "GridRangeError",
    "GridValueError",
    "OscGridError",
    "ParseError",
    "UnrecognizedAddressError",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
