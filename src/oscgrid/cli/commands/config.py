"""Configuration command implementations."""

import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from oscgrid.models import DEFAULT_CONFIG_PATH, GridConfig

from .grid import fail, load_config


@click.group(name="config")
def config_group():
    """Show or create the grid configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def show(ctx):
    """Display the current configuration."""
    config = load_config(ctx)
    path = (ctx.obj or {}).get("config_path") or DEFAULT_CONFIG_PATH
    click.echo(f"# {path}")
    click.echo(config.model_dump_json(indent=2))


@config_group.command(name="init")
@click.option("--rows", type=int, default=None, help="Number of rows (default: 8)")
@click.option("--columns", type=int, default=None, help="Number of columns (default: 16)")
@click.option("--prefix", "-p", default=None, help="Address prefix, e.g. /monome")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def init(ctx, rows: Optional[int], columns: Optional[int], prefix: Optional[str], force: bool):
    """Write a configuration file."""
    path: Path = (ctx.obj or {}).get("config_path") or DEFAULT_CONFIG_PATH
    if path.exists() and not force:
        click.echo(f"Config already exists: {path} (use --force to overwrite)", err=True)
        sys.exit(1)

    values = {"rows": rows, "columns": columns, "prefix": prefix}
    try:
        config = GridConfig(**{k: v for k, v in values.items() if v is not None})
    except ValidationError as e:
        fail(e)

    config.save(path)
    click.echo(f"Wrote {path}")
