"""
Compare CLI command.

Compares two loosely formatted version strings by their salvaged versions.
"""

import json

import click

from flexver.compare import UnparseableVersionError, compare_versions

SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@click.command("compare")
@click.argument("left")
@click.argument("right")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Output as JSON (also the default when output_format is json).",
)
@click.pass_context
def compare(ctx: click.Context, left: str, right: str, as_json: bool) -> None:
    """
    Compare two version strings.

    Suffixes and excess segments are ignored; only the salvaged versions
    are compared. Exits with status 2 if either input is unparseable.

    Example:

        flexver compare 1.2.3-beta 1.2.10
    """
    parser = ctx.obj["parser"]
    as_json = as_json or ctx.obj["config"].output_format == "json"

    try:
        result = compare_versions(left, right, parser=parser)
    except UnparseableVersionError as e:
        click.echo(click.style("Error: ", fg="red", bold=True) + str(e), err=True)
        ctx.exit(2)
        return

    if as_json:
        click.echo(
            json.dumps(
                {
                    "left": left,
                    "right": right,
                    "left_version": str(parser.parse(left).version),
                    "right_version": str(parser.parse(right).version),
                    "result": result,
                },
                indent=2,
            )
        )
    else:
        click.echo(f"{left} {SYMBOLS[result]} {right}")
