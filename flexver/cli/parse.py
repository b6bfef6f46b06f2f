"""
Parse CLI command.

Parses one or more version strings and reports, for each, the outcome,
the salvaged version and any leftovers.
"""

import json

import click

from flexver.parser import FlexibleVersionResult, ParseOutcome


def _outcome_style(outcome: ParseOutcome) -> str:
    if outcome is ParseOutcome.SUCCESS:
        return "green"
    if outcome is ParseOutcome.UNPARSEABLE:
        return "red"
    return "yellow"


def _echo_result(text: str, result: FlexibleVersionResult) -> None:
    """Print one parse result in human-readable form."""
    click.echo(click.style(text, bold=True))
    click.echo(
        "  Outcome:   "
        + click.style(
            f"{result.outcome.name} ({int(result.outcome)})",
            fg=_outcome_style(result.outcome),
        )
    )
    click.echo(f"  Version:   {result.version if result.version is not None else '(none)'}")

    leftovers = result.leftovers.non_empty()
    if leftovers:
        click.echo("  Leftovers:")
        for name, value in leftovers.items():
            click.echo(f"    {name}: {value!r}")


@click.command("parse")
@click.argument("texts", nargs=-1, required=True)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Output as JSON (also the default when output_format is json).",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 unless every input parses completely.",
)
@click.pass_context
def parse(ctx: click.Context, texts: tuple, as_json: bool, strict: bool) -> None:
    """
    Parse version strings.

    Each TEXT is parsed into the longest valid major.minor[.build[.revision]]
    prefix. Exits with status 1 if any input is unparseable.

    Example:

        flexver parse 1.2.3.4-beta3 1.2.3.4.5
    """
    parser = ctx.obj["parser"]
    as_json = as_json or ctx.obj["config"].output_format == "json"

    results = [(text, parser.parse(text)) for text in texts]

    if as_json:
        payload = [{"input": text, **result.to_dict()} for text, result in results]
        click.echo(json.dumps(payload, indent=2))
    else:
        for text, result in results:
            _echo_result(text, result)

    outcomes = [result.outcome for _, result in results]
    if ParseOutcome.UNPARSEABLE in outcomes:
        ctx.exit(1)
    if strict and any(outcome is not ParseOutcome.SUCCESS for outcome in outcomes):
        ctx.exit(1)
