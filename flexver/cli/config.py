"""
Config CLI commands.

Shows and updates the flexver configuration file.
"""

import json

import click

from flexver.config import ConfigValidationError, ParserConfig

SETTABLE_KEYS = ("log_level", "big_integer", "output_format")


# ============================================================================
# Config Command Group
# ============================================================================


@click.group()
@click.pass_context
def config(ctx: click.Context) -> None:
    """
    Manage flexver configuration.

    Settings are stored in a YAML file in the platform config directory.
    Environment variables (FLEXVER_*) take precedence over the file.
    """
    ctx.ensure_object(dict)


@config.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """
    Display the effective configuration.

    Example:

        flexver config show
    """
    parser_config: ParserConfig = ctx.obj["config"]
    values = parser_config.to_dict()

    if as_json:
        click.echo(json.dumps({"config_path": str(parser_config.config_path), **values}, indent=2))
        return

    click.echo(f"Config file: {parser_config.config_path}")
    for key, value in values.items():
        click.echo(f"  {key}: {value}")


@config.command("set")
@click.argument("key", type=click.Choice(SETTABLE_KEYS))
@click.argument("value")
@click.pass_context
def set_value(ctx: click.Context, key: str, value: str) -> None:
    """
    Set a configuration value and save it.

    Example:

        flexver config set big_integer false
    """
    parser_config: ParserConfig = ctx.obj["config"]

    try:
        setattr(parser_config, key, value)
        parser_config.validate()
    except ConfigValidationError as e:
        click.echo(click.style("Error: ", fg="red", bold=True) + str(e), err=True)
        ctx.exit(1)
        return

    parser_config.save()
    click.echo(click.style("Configuration updated: ", fg="green") + f"{key} = {value}")
