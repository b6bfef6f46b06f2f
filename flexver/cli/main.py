"""
CLI entry point.

Main command group for the flexver CLI.
"""

import logging
from typing import Optional

import click

from flexver import __version__
from flexver.config import ConfigError, ParserConfig, VALID_LOG_LEVELS
from flexver.parser import FlexibleVersionParser


# ============================================================================
# Logging Setup
# ============================================================================


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Setup logging for the CLI.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("flexver.cli")


@click.group()
@click.version_option(version=__version__, prog_name="flexver")
@click.option(
    "--log-level",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """
    flexver - Best-effort version string parsing.

    Parses strings such as "1.2.3.4-beta3" into a version and reports what
    could not be parsed.

    Use 'flexver COMMAND --help' for more information on a command.
    """
    ctx.ensure_object(dict)

    try:
        config = ParserConfig()
        parser = FlexibleVersionParser.from_config(config)
    except ConfigError as e:
        click.echo(click.style("Error: ", fg="red", bold=True) + str(e), err=True)
        ctx.exit(1)
        return

    logger = setup_logging(log_level or config.log_level)
    logger.debug(f"Using configuration from {config.config_path}")

    ctx.obj["config"] = config
    ctx.obj["parser"] = parser


# Import and register subcommands
from flexver.cli.parse import parse  # noqa: E402
from flexver.cli.compare import compare  # noqa: E402
from flexver.cli.config import config  # noqa: E402

cli.add_command(parse)
cli.add_command(compare)
cli.add_command(config)


def main() -> None:
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
