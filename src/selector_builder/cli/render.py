"""CLI command: selector-builder render -- render a JSON selector description."""

from __future__ import annotations

import sys
from functools import partial
from typing import IO

import click

from selector_builder.builder import css_selector_builder
from selector_builder.codec import decode, selector_from_dict
from selector_builder.errors import SelectorError


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--specificity", is_flag=True, help="Also print the selector's specificity.")
def render(source: IO[str], specificity: bool) -> None:
    """Render the selector described by the JSON file SOURCE ('-' for stdin).

    Simple selectors use the keys element, id, classes, attributes,
    pseudo_classes and pseudo_element; combined selectors use left,
    combinator and right.
    """
    try:
        selector = decode(partial(selector_from_dict, builder=css_selector_builder), source.read())
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
    if specificity:
        click.echo(f"Specificity: {selector.specificity}")
