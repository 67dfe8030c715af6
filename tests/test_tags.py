"""Tests for the built-in tags."""

import math

import pytest

from prosemirror_html.errors import RenderError
from prosemirror_html.tags import HeadingTag, SimpleTag, Tag, TextTag, format_attr_value


class TestSimpleTag:
    """SimpleTag renders a named element with inline attributes."""

    def test_no_attributes(self) -> None:
        tag = SimpleTag("p")
        assert tag.render_opening({}) == "<p>"
        assert tag.render_closing({}) == "</p>"

    def test_string_attributes_are_quoted(self) -> None:
        assert SimpleTag("a").render_opening({"href": "/docs", "target": "_blank"}) == (
            '<a href="/docs" target="_blank">'
        )

    def test_numbers_and_booleans_are_unquoted(self) -> None:
        opening = SimpleTag("ol").render_opening({"order": 3, "reversed": False})
        assert opening == "<ol order=3 reversed=false>"

    def test_integral_float_renders_as_integer(self) -> None:
        assert SimpleTag("img").render_opening({"width": 640.0}) == "<img width=640>"

    def test_fractional_float(self) -> None:
        assert SimpleTag("img").render_opening({"scale": 0.5}) == "<img scale=0.5>"

    def test_none_values_are_omitted(self) -> None:
        opening = SimpleTag("a").render_opening({"href": "/x", "title": None})
        assert opening == '<a href="/x">'

    def test_quoted_values_are_escaped(self) -> None:
        opening = SimpleTag("a").render_opening({"title": 'say "hi" & <bye>'})
        assert opening == '<a title="say &quot;hi&quot; &amp; &lt;bye&gt;">'

    def test_attribute_order_follows_mapping(self) -> None:
        assert SimpleTag("a").render_opening({"b": 1, "a": 2}) == "<a b=1 a=2>"

    def test_self_closing_has_empty_closing(self) -> None:
        tag = SimpleTag("br", self_closing=True)
        assert tag.render_opening({}) == "<br>"
        assert tag.render_closing({}) == ""

    def test_closing_ignores_attributes(self) -> None:
        assert SimpleTag("a").render_closing({"href": "/x"}) == "</a>"


class TestFormatAttrValue:
    """Value formatting rules shared by SimpleTag."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1, "1"),
            (-7, "-7"),
            (2.0, "2"),
            (1.25, "1.25"),
            (True, "true"),
            (False, "false"),
            ("x", '"x"'),
            ("", '""'),
            ([1, 2], '"[1, 2]"'),
            (None, None),
        ],
    )
    def test_formatting(self, value: object, expected: str | None) -> None:
        assert format_attr_value(value) == expected


class TestTextTag:
    def test_emits_nothing(self) -> None:
        tag = TextTag()
        assert tag.render_opening({"anything": 1}) == ""
        assert tag.render_closing({"anything": 1}) == ""


class TestHeadingTag:
    """HeadingTag reads the level attribute on both sides."""

    @pytest.mark.parametrize("level", [1, 2, 6, 3.0])
    def test_levels(self, level: float) -> None:
        tag = HeadingTag()
        assert tag.render_opening({"level": level}) == f"<h{int(level)}>"
        assert tag.render_closing({"level": level}) == f"</h{int(level)}>"

    def test_missing_level(self) -> None:
        with pytest.raises(RenderError, match="missing level") as exc_info:
            HeadingTag().render_opening({})
        assert exc_info.value.type_name == "heading"

    def test_missing_level_on_close(self) -> None:
        with pytest.raises(RenderError, match="missing level"):
            HeadingTag().render_closing({})

    def test_null_level_counts_as_missing(self) -> None:
        with pytest.raises(RenderError, match="missing level"):
            HeadingTag().render_opening({"level": None})

    @pytest.mark.parametrize("level", ["2", True, [2], math.nan])
    def test_non_numeric_level(self, level: object) -> None:
        with pytest.raises(RenderError, match="non-numeric level"):
            HeadingTag().render_opening({"level": level})


class TestTagProtocol:
    def test_builtins_satisfy_protocol(self) -> None:
        assert isinstance(SimpleTag("p"), Tag)
        assert isinstance(TextTag(), Tag)
        assert isinstance(HeadingTag(), Tag)

    def test_object_without_methods_does_not(self) -> None:
        assert not isinstance(object(), Tag)
