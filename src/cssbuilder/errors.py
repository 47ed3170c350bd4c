"""Error hierarchy for selector construction."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.model import Rank

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base error for all misuse of the selector builder."""


class DuplicateError(SelectorError):
    """A single-occurrence part (element, id, pseudo-element) was set twice."""

    def __init__(self, part: Rank) -> None:
        super().__init__(DUPLICATE_MESSAGE)
        self.part = part


class OrderError(SelectorError):
    """A part was appended after a part that must follow it.

    The selector that raised is left holding the rejected part and must be
    discarded by the caller.
    """

    def __init__(self, part: Rank, previous: Rank) -> None:
        super().__init__(ORDER_MESSAGE)
        self.part = part
        self.previous = previous
