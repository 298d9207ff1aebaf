"""Configuration commands."""

import click
from pydantic import ValidationError

from remote25sl.exceptions import ConfigurationError, wrap_pydantic_error
from remote25sl.models import AppConfig, PortNames

from .common import config_path_from, exit_with_error, load_config


@click.group(name="config")
def config_group():
    """Show and change remote25sl settings."""
    pass


@config_group.command(name="show")
@click.pass_context
def show_config(ctx):
    """Print the effective configuration as JSON."""
    config = load_config(ctx)
    click.echo(config.model_dump_json(indent=2))


@config_group.command(name="path")
@click.pass_context
def config_path(ctx):
    """Print the config file location."""
    click.echo(str(config_path_from(ctx)))


@config_group.command(name="reset")
@click.confirmation_option(prompt="Overwrite the config file with defaults?")
@click.pass_context
def reset_config(ctx):
    """Write the default configuration to the config file."""
    path = config_path_from(ctx)
    try:
        AppConfig().save(path)
    except OSError as e:
        exit_with_error(ConfigurationError(
            user_message=f"Failed to save configuration to {path}",
            technical_message=f"Failed to save AppConfig: {e}",
            recovery_hint="Check file permissions and disk space.",
        ))
    click.echo(f"Configuration reset: {path}")


@config_group.command(name="set-port")
@click.argument("port", type=click.Choice(["A", "B", "C"], case_sensitive=False))
@click.argument("name")
@click.pass_context
def set_port(ctx, port: str, name: str):
    """
    Bind controller input PORT to the MIDI port called NAME.

    The name must match what 'remote25sl midi list' shows, exactly.
    """
    path = config_path_from(ctx)
    config = load_config(ctx)

    names = config.port_names.model_dump()
    names[port.lower()] = name
    try:
        port_names = PortNames.model_validate(names)
    except ValidationError as e:
        exit_with_error(wrap_pydantic_error(e, str(path)))

    updated = config.model_copy(update={"port_names": port_names})
    try:
        updated.save(path)
    except OSError as e:
        exit_with_error(ConfigurationError(
            user_message=f"Failed to save configuration to {path}",
            technical_message=f"Failed to save AppConfig: {e}",
            recovery_hint="Check file permissions and disk space.",
        ))
    click.echo(f"Port {port.upper()} bound to: {name}")
