"""Tests for the SelectorBuilder facade and selector combination."""
from __future__ import annotations

import pytest

import cssbuilder
from cssbuilder import DuplicateError, OrderError, Selector, SelectorBuilder, builder


# ---------------------------------------------------------------------------
# Start operations
# ---------------------------------------------------------------------------


class TestStartOperations:
    @pytest.mark.parametrize(
        "method, token, expected",
        [
            ("element", "div", "div"),
            ("id", "main", "#main"),
            ("class_", "container", ".container"),
            ("attr", "data-x", "[data-x]"),
            ("pseudo_class", "hover", ":hover"),
            ("pseudo_element", "before", "::before"),
        ],
    )
    def test_start_each_kind(self, method: str, token: str, expected: str) -> None:
        sel = getattr(builder, method)(token)
        assert isinstance(sel, Selector)
        assert sel.stringify() == expected

    def test_each_call_returns_new_selector(self) -> None:
        assert builder.element("a") is not builder.element("a")

    def test_builder_is_stateless(self) -> None:
        builder.element("div")
        assert builder.element("span").stringify() == "span"

    def test_fresh_facade_instance(self) -> None:
        assert SelectorBuilder().id("x").class_("y").stringify() == "#x.y"

    def test_package_exports(self) -> None:
        assert cssbuilder.builder is builder
        assert isinstance(cssbuilder.__version__, str)


# ---------------------------------------------------------------------------
# Documented scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_id_and_classes(self) -> None:
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_link_to_png(self) -> None:
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_duplicate_element_in_chain(self) -> None:
        with pytest.raises(DuplicateError):
            builder.element("div").id("main").element("x")

    def test_class_then_element(self) -> None:
        with pytest.raises(OrderError):
            builder.class_("a").element("div")

    def test_pseudo_element_twice_from_facade(self) -> None:
        with pytest.raises(DuplicateError):
            builder.pseudo_element("after").pseudo_element("before")

    def test_id_after_pseudo_element_from_facade(self) -> None:
        with pytest.raises(OrderError):
            builder.pseudo_element("after").id("x")


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------


class TestCombine:
    def test_child_combinator(self) -> None:
        sel = builder.combine(builder.element("ul"), ">", builder.element("li"))
        assert sel.stringify() == "ul > li"

    def test_descendant_combinator(self) -> None:
        sel = builder.combine(builder.element("nav"), " ", builder.element("a"))
        assert sel.stringify() == "nav   a"

    def test_any_token_is_glued(self) -> None:
        sel = builder.combine(builder.element("a"), "||", builder.element("b"))
        assert sel.stringify() == "a || b"

    def test_not_commutative(self) -> None:
        a = builder.element("a")
        b = builder.class_("b")
        assert builder.combine(a, "+", b).stringify() == "a + .b"
        assert builder.combine(b, "+", a).stringify() == ".b + a"

    def test_same_operands_commute(self) -> None:
        a1 = builder.element("p")
        a2 = builder.element("p")
        assert (
            builder.combine(a1, "~", a2).stringify()
            == builder.combine(a2, "~", a1).stringify()
        )

    def test_operands_unchanged(self) -> None:
        left = builder.element("div").class_("x")
        right = builder.element("span")
        builder.combine(left, "~", right)
        assert left.stringify() == "div.x"
        assert right.stringify() == "span"

    def test_combined_operand_keeps_text(self) -> None:
        inner = builder.combine(builder.element("tr"), ">", builder.element("td"))
        outer = builder.combine(builder.element("table"), " ", inner)
        assert inner.stringify() == "tr > td"
        assert outer.stringify() == "table   tr > td"

    def test_nested_combination(self) -> None:
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_left_nested_combination(self) -> None:
        sel = builder.combine(
            builder.combine(builder.element("a"), ">", builder.element("b")),
            "+",
            builder.element("c"),
        )
        assert sel.stringify() == "a > b + c"

    def test_result_is_combined(self) -> None:
        sel = builder.combine(builder.element("a"), ">", builder.element("b"))
        assert sel.is_combined
        assert sel.combined_text == "a > b"
