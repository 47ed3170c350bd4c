"""Stateless facade that starts selector chains."""

from __future__ import annotations

from cssbuilder.model import Selector

__all__ = ["SelectorBuilder", "builder"]


class SelectorBuilder:
    """Entry points for building selectors.

    Each method creates a fresh :class:`Selector` and appends the first part,
    so calls chain naturally::

        builder.element("a").attr('href$=".png"').pseudo_class("focus")

    The builder itself holds no state and can be shared freely.
    """

    def element(self, token: str) -> Selector:
        return Selector().element(token)

    def id(self, token: str) -> Selector:
        return Selector().id(token)

    def class_(self, token: str) -> Selector:
        return Selector().class_(token)

    def attr(self, token: str) -> Selector:
        return Selector().attr(token)

    def pseudo_class(self, token: str) -> Selector:
        return Selector().pseudo_class(token)

    def pseudo_element(self, token: str) -> Selector:
        return Selector().pseudo_element(token)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        return Selector().combine(left, combinator, right)


builder = SelectorBuilder()
