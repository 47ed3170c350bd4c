"""CLI command: cssbuilder build -- assemble a selector from part tokens."""

from __future__ import annotations

import sys
from typing import Callable

import click

from cssbuilder.builder import builder
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.model import Rank, Selector

# Token kind -> (rank, appender), in grammar order.
PART_KINDS: dict[str, tuple[Rank, Callable[[Selector, str], Selector]]] = {
    "element": (Rank.ELEMENT, Selector.element),
    "id": (Rank.ID, Selector.id),
    "class": (Rank.CLASS, Selector.class_),
    "attr": (Rank.ATTRIBUTE, Selector.attr),
    "pseudo-class": (Rank.PSEUDO_CLASS, Selector.pseudo_class),
    "pseudo-element": (Rank.PSEUDO_ELEMENT, Selector.pseudo_element),
}


def build_selector(tokens: list[str], config: BuilderConfig) -> Selector:
    """Build a selector from CLI tokens.

    ``KIND:VALUE`` tokens append parts to the current compound selector in
    the order given.  Any other token is a combinator; it closes the current
    compound selector and the pieces are folded left with ``combine``.

    Raises :class:`click.BadParameter` for malformed token sequences and lets
    :class:`SelectorError` from the builder propagate.
    """
    combined: Selector | None = None
    combinator = ""
    current: Selector | None = None

    for token in tokens:
        kind, sep, value = token.partition(config.kind_separator)
        if sep:
            if kind not in PART_KINDS:
                raise click.BadParameter(
                    f"unknown part kind {kind!r} in {token!r}", param_hint="TOKENS"
                )
            _, append = PART_KINDS[kind]
            current = append(current if current is not None else Selector(), value)
            continue

        if current is None:
            raise click.BadParameter(
                f"combinator {token!r} must follow a selector part",
                param_hint="TOKENS",
            )
        combined = current if combined is None else builder.combine(
            combined, combinator, current
        )
        combinator = " " if token == config.descendant_alias else token
        current = None

    if current is None:
        raise click.BadParameter(
            "expected a selector part after the last combinator", param_hint="TOKENS"
        )
    if combined is None:
        return current
    return builder.combine(combined, combinator, current)


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def build(config: BuilderConfig | None, tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from KIND:VALUE parts and combinators.

    Kinds are element, id, class, attr, pseudo-class and pseudo-element.
    Combinators are >, + and ~; use _ for the descendant combinator.

    \b
    Example:
        cssbuilder build element:a 'attr:href$=".png"' pseudo-class:focus
    """
    config = config or BuilderConfig()
    try:
        selector = build_selector(list(tokens), config)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
