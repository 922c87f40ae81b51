"""Command line entry point: print a parsed URL as JSON."""

from __future__ import annotations

import json
import logging

import click

from uriparser import UriParserError, parse
from uriparser.options import FIELD_NAMES, Option, option_for


@click.command()
@click.argument("url")
@click.option(
    "--only",
    "fields",
    multiple=True,
    type=click.Choice(FIELD_NAMES),
    help="Component to include (repeatable). Defaults to all of them.",
)
@click.option("--mask", type=int, default=None, help="Raw option bitmask, OR-ed with --only.")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation.")
@click.option("--verbose", "-v", is_flag=True, help="Log why a URL was rejected.")
def main(url: str, fields: tuple[str, ...], mask: int | None, indent: int, verbose: bool) -> None:
    """Split URL into its components and decode its query string."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options: int = Option.ALL
    if fields or mask is not None:
        options = mask or 0
        for name in fields:
            options |= option_for(name)

    try:
        result = parse(url, options)
    except UriParserError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(json.dumps(result.as_dict(), indent=indent or None))


if __name__ == "__main__":
    main()
