"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from .commands import addresses, config_group, key, replay, send

logger = logging.getLogger(__name__)

# Handler installed by the last setup_logging call
_handler: Optional[logging.Handler] = None


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path]) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG regardless of verbosity
        log_file: Log to this file (rotating) instead of stderr
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    global _handler
    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
        _handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _handler = handler

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version="0.1.0", prog_name="oscgrid")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file path (default: ~/.oscgrid/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Log to a rotating file instead of stderr'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
):
    """
    oscgrid - LED grid state and protocol commands for grid controllers.

    Parses grid LED messages (/grid/led/...) into commands, applies them to
    an in-memory grid and renders the result. Device key events are rendered
    the other way, as /grid/key messages.

    \b
    Examples:
      # Light one led at full brightness
      oscgrid send /grid/led/set 3 2 1

    \b
      # Replay a file of messages, one "ADDRESS ARG..." per line
      oscgrid replay session.txt

    \b
      # Render a key press with a prefix
      oscgrid key 2 5 --prefix /monome

    \b
      # List supported addresses
      oscgrid addresses
    """
    setup_logging(verbose, debug, log_file)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(send)
cli.add_command(replay)
cli.add_command(key)
cli.add_command(addresses)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
