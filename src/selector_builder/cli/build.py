"""CLI command: selector-builder build -- chain parts into one selector."""

from __future__ import annotations

import sys

import click

from selector_builder.builder import SelectorBuilder
from selector_builder.codec import encode
from selector_builder.config import BuilderConfig
from selector_builder.errors import SelectorError
from selector_builder.selector import SimpleSelector

# Step kind -> SimpleSelector method.
STEP_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def _parse_step(step: str) -> tuple[str, str]:
    kind, sep, value = step.partition("=")
    if not sep or kind not in STEP_METHODS:
        raise click.BadParameter(
            f"{step!r} is not KIND=VALUE with KIND one of: {', '.join(STEP_METHODS)}",
            param_hint="STEP",
        )
    return STEP_METHODS[kind], value


@click.command()
@click.argument("steps", nargs=-1, required=True, metavar="STEP...")
@click.option(
    "--permissive",
    is_flag=True,
    help="Accept parts in any order and render them canonically.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the JSON description instead.")
@click.option("--specificity", is_flag=True, help="Also print the selector's specificity.")
def build(steps: tuple[str, ...], permissive: bool, as_json: bool, specificity: bool) -> None:
    """Build a simple selector from KIND=VALUE steps, applied in order.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Example: build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    builder = SelectorBuilder(BuilderConfig(strict_order=not permissive))

    try:
        parsed = [_parse_step(step) for step in steps]
        first_method, first_value = parsed[0]
        selector: SimpleSelector = getattr(builder, first_method)(first_value)
        for method, value in parsed[1:]:
            selector = getattr(selector, method)(value)
    except (SelectorError, click.BadParameter) as exc:
        message = exc.format_message() if isinstance(exc, click.BadParameter) else str(exc)
        click.echo(f"Error: {message}", err=True)
        sys.exit(1)

    click.echo(encode(selector) if as_json else selector.stringify())
    if specificity:
        click.echo(f"Specificity: {selector.specificity}")
