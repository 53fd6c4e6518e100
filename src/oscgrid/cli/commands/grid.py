"""Grid command implementations."""

import logging
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

import click

from oscgrid.commands import COMMAND_TYPES, parse_message, supported_addresses
from oscgrid.core import GridSession
from oscgrid.devices import KeyEvent
from oscgrid.exceptions import OscGridError, collect_errors, format_error_for_display
from oscgrid.models import GridConfig, OscMessage

logger = logging.getLogger(__name__)

# Negative levels/offsets such as "-1" must reach the parser, not click
PASSTHROUGH = {"ignore_unknown_options": True}


def parse_token(token: str) -> Any:
    """Decode a command line token the way an OSC decoder would type it."""
    for convert in (int, float):
        try:
            return convert(token)
        except ValueError:
            pass
    return token


def parse_line(line: str) -> OscMessage:
    """Turn ``ADDRESS ARG ARG ...`` into a message."""
    address, *tokens = line.split()
    return OscMessage(address=address, arguments=[parse_token(t) for t in tokens])


def load_config(ctx: click.Context, prefix: Optional[str] = None) -> GridConfig:
    """Load the configured grid settings, with an optional prefix override."""
    config_path = (ctx.obj or {}).get("config_path")
    try:
        config = GridConfig.load_or_default(config_path)
        if prefix is not None:
            config = GridConfig(rows=config.rows, columns=config.columns, prefix=prefix)
    except (OscGridError, ValueError) as e:
        fail(e)
    return config


def fail(error: Exception) -> NoReturn:
    """Report ``error`` on stderr and exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)


@click.command(name="send", context_settings=PASSTHROUGH)
@click.argument("address")
@click.argument("arguments", nargs=-1)
@click.option("--prefix", "-p", default=None, help="Address prefix to strip, e.g. /monome")
@click.pass_context
def send(ctx, address: str, arguments: tuple[str, ...], prefix: Optional[str]):
    """
    Apply one message to an empty grid and print the result.

    \b
    Example:
      oscgrid send /grid/led/level/row 0 0 0 2 4 6 8 10 12 15
    """
    config = load_config(ctx, prefix)
    session = GridSession(config)
    message = OscMessage(address=address, arguments=[parse_token(a) for a in arguments])

    try:
        session.run(parse_message(message, prefix=session.prefix))
    except OscGridError as e:
        logger.error(f"Failed to apply '{message}': {e.technical_message}")
        fail(e)

    click.echo(session.snapshot(), nl=False)


@click.command(name="replay")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--prefix", "-p", default=None, help="Address prefix to strip, e.g. /monome")
@click.option("--strict", is_flag=True, help="Exit with status 1 if any message was dropped")
@click.pass_context
def replay(ctx, file: Path, prefix: Optional[str], strict: bool):
    """
    Apply a file of messages in order and print the final grid.

    Each non-blank line not starting with '#' is ``ADDRESS ARG...``.
    Messages that fail to parse or do not fit the grid are dropped and
    reported after the grid.
    """
    config = load_config(ctx, prefix)
    session = GridSession(config)
    collector = collect_errors(f"replay {file.name}")

    for lineno, raw in enumerate(file.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        with collector.try_operation(f"line {lineno}"):
            session.run(parse_message(parse_line(line), prefix=session.prefix))

    click.echo(session.snapshot(), nl=False)
    click.echo(f"Applied {collector.success_count} message(s), dropped {collector.error_count}")

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        if strict:
            sys.exit(1)


@click.command(name="key", context_settings=PASSTHROUGH)
@click.argument("x", type=int)
@click.argument("y", type=int)
@click.option("--up", is_flag=True, help="Render a key release instead of a press")
@click.option("--prefix", "-p", default=None, help="Address prefix to prepend, e.g. /monome")
@click.pass_context
def key(ctx, x: int, y: int, up: bool, prefix: Optional[str]):
    """Print the message a key press (or release) at X Y produces."""
    config = load_config(ctx, prefix)
    event = KeyEvent.key_up(x, y) if up else KeyEvent.key_down(x, y)
    click.echo(str(event.to_message(prefix=config.prefix)))


@click.command(name="addresses")
def addresses():
    """List the addresses the parser understands."""
    commands = {command_type.ADDRESS: command_type for command_type in COMMAND_TYPES}
    for address in supported_addresses():
        click.echo(f"  {address:<22} {commands[address].__name__}")
