"""Helpers shared by CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from remote25sl.exceptions import Remote25SLError, format_error_for_display
from remote25sl.models import AppConfig, default_config_path

logger = logging.getLogger(__name__)


class ByteParamType(click.ParamType):
    """A single MIDI byte, written in decimal (176) or hex (0xB0)."""

    name = "byte"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            number = value
        else:
            try:
                number = int(value, 0)
            except ValueError:
                self.fail(f"{value!r} is not a valid byte", param, ctx)

        if not 0 <= number <= 255:
            self.fail(f"{value!r} is out of range (0-255)", param, ctx)
        return number


BYTE = ByteParamType()


def config_path_from(ctx: click.Context) -> Path:
    """Config path given on the command line, or the default location."""
    path = (ctx.obj or {}).get("config_path")
    return path if path is not None else default_config_path()


def load_config(ctx: click.Context) -> AppConfig:
    """Load the config for a command, exiting with a readable error if it is invalid."""
    path = config_path_from(ctx)
    try:
        return AppConfig.load_or_default(path)
    except Remote25SLError as e:
        exit_with_error(e)


def exit_with_error(error: Exception) -> NoReturn:
    """Show an error without a traceback and exit with status 1."""
    logger.error(f"Command failed: {getattr(error, 'technical_message', error)}")

    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)
