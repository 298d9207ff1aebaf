"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from remote25sl import __version__

from .commands import config_group, decode_command, midi_group

logger = logging.getLogger(__name__)

HANDLER_NAME = "remote25sl"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Without --debug or --log-file, records go to stderr. With either, they
    go to a rotating log file instead so they don't interleave with the
    decoded events printed on stdout.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if debug and not log_file:
        log_file = Path.cwd() / "remote25sl-debug.log"

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps the last 5 files, 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        handler = logging.StreamHandler()

    handler.set_name(HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            root_logger.removeHandler(existing)
            existing.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(
        f"Logging configured: level={logging.getLevelName(level)}, "
        f"file={log_file or '<stderr>'}"
    )


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="remote25sl")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file path (default: ~/.remote25sl/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./remote25sl-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    ReMOTE 25SL - typed events from the Novation ReMOTE 25SL controller.

    \b
    Examples:
      # Decode a message offline (dial 1 turned right by 3)
      remote25sl decode B 176 56 3

      # List MIDI input ports and their ReMOTE 25SL binding
      remote25sl midi list

      # Print decoded events until Ctrl+C
      remote25sl midi monitor

      # Show the current configuration
      remote25sl config show
    """
    setup_logging(verbose, debug, log_file, log_level)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(decode_command)
cli.add_command(midi_group)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
