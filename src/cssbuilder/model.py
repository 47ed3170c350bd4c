"""Selector model: part ranks, the mutable Selector, and its parts snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from cssbuilder.errors import DuplicateError, OrderError

log = logging.getLogger("cssbuilder")


class Rank(IntEnum):
    """Grammar-order position of each selector part category."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


@dataclass(frozen=True)
class SelectorParts:
    """Read-only snapshot of a compound selector's parts, already prefixed.

    Attributes:
        element: Type selector token, or None when unset.
        id: ``#id`` token, or None when unset.
        classes: ``.class`` tokens in insertion order.
        attributes: ``[expr]`` tokens in insertion order.
        pseudo_classes: ``:name`` tokens in insertion order.
        pseudo_element: ``::name`` token, or None when unset.
    """

    element: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element: str | None = None


class Selector:
    """A compound or combined CSS selector under construction.

    Parts are appended through chainable methods and must arrive in grammar
    order: element, id, class, attribute, pseudo-class, pseudo-element.
    Element, id and pseudo-element may each be set once.  A failed append
    is not rolled back, so a selector that raised must be discarded.

    A selector produced by :meth:`combine` carries fixed text and ignores
    its parts when serialized.
    """

    def __init__(self) -> None:
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None
        self._combined_text: str | None = None
        self._last_rank: Rank | None = None

    # --- single-occurrence parts ---------------------------------------------

    def element(self, token: str) -> Selector:
        self._reject_duplicate(self._element, Rank.ELEMENT)
        self._element = token
        self._check_order(Rank.ELEMENT)
        return self

    def id(self, token: str) -> Selector:
        self._reject_duplicate(self._id, Rank.ID)
        self._id = f"#{token}"
        self._check_order(Rank.ID)
        return self

    def pseudo_element(self, token: str) -> Selector:
        self._reject_duplicate(self._pseudo_element, Rank.PSEUDO_ELEMENT)
        self._pseudo_element = f"::{token}"
        self._check_order(Rank.PSEUDO_ELEMENT)
        return self

    # --- repeatable parts ----------------------------------------------------

    def class_(self, token: str) -> Selector:
        self._classes.append(f".{token}")
        self._check_order(Rank.CLASS)
        return self

    def attr(self, token: str) -> Selector:
        """Append an attribute selector; *token* is the bracket-free expression."""
        self._attributes.append(f"[{token}]")
        self._check_order(Rank.ATTRIBUTE)
        return self

    def pseudo_class(self, token: str) -> Selector:
        self._pseudo_classes.append(f":{token}")
        self._check_order(Rank.PSEUDO_CLASS)
        return self

    # --- combination ---------------------------------------------------------

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Fix this selector's text to ``left combinator right``.

        The combinator is glued as given; *left* and *right* are only read.
        """
        log.debug(
            "combine: left=%r combinator=%r right=%r", left, combinator, right
        )
        self._combined_text = f"{left.stringify()} {combinator} {right.stringify()}"
        return self

    # --- serialization -------------------------------------------------------

    def stringify(self) -> str:
        """Return the canonical CSS text of this selector."""
        if self._combined_text is not None:
            return self._combined_text
        return (
            (self._element or "")
            + (self._id or "")
            + "".join(self._classes)
            + "".join(self._attributes)
            + "".join(self._pseudo_classes)
            + (self._pseudo_element or "")
        )

    @property
    def parts(self) -> SelectorParts:
        return SelectorParts(
            element=self._element,
            id=self._id,
            classes=tuple(self._classes),
            attributes=tuple(self._attributes),
            pseudo_classes=tuple(self._pseudo_classes),
            pseudo_element=self._pseudo_element,
        )

    @property
    def combined_text(self) -> str | None:
        return self._combined_text

    @property
    def is_combined(self) -> bool:
        return self._combined_text is not None

    @property
    def last_rank(self) -> Rank | None:
        """Rank of the most recently appended part, None before any append."""
        return self._last_rank

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"

    # --- guards --------------------------------------------------------------

    def _reject_duplicate(self, current: str | None, part: Rank) -> None:
        if current:
            log.debug("duplicate %s rejected in %r", part.label, self)
            raise DuplicateError(part)

    def _check_order(self, part: Rank) -> None:
        previous = self._last_rank
        if previous is not None and part < previous:
            log.debug(
                "%s appended after %s in %r", part.label, previous.label, self
            )
            raise OrderError(part, previous)
        self._last_rank = part
