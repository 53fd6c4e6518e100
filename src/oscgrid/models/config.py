"""Grid configuration model."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from oscgrid.utils.persistence import PydanticPersistence

from .grid import DEFAULT_COLUMNS, DEFAULT_ROWS, Grid

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".oscgrid" / "config.json"


class GridConfig(BaseModel):
    """Device session configuration."""

    rows: int = Field(default=DEFAULT_ROWS, ge=1, description="Number of rows (grid height)")
    columns: int = Field(default=DEFAULT_COLUMNS, ge=1, description="Number of columns (grid width)")
    prefix: str | None = Field(
        default=None,
        description=(
            "Address prefix, e.g. '/monome'. Stripped from inbound addresses "
            "and prepended to outbound ones."
        ),
    )

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str | None) -> str | None:
        """Ensure the prefix is a bare address fragment like '/monome'."""
        if v is None or v == "":
            return None
        if not v.startswith("/"):
            raise ValueError("prefix must start with '/'")
        if v.endswith("/"):
            raise ValueError("prefix must not end with '/'")
        return v

    def create_grid(self) -> Grid:
        """Create an empty grid with the configured dimensions."""
        return Grid(rows=self.rows, columns=self.columns)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "GridConfig":
        """
        Load config from file or return defaults if the file does not exist.

        Args:
            path: Path to config file. If None, uses ~/.oscgrid/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (with .bak backup of any previous file)."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
