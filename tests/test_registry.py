"""Tests for TagRegistry and the default bindings."""

import logging

import pytest

from prosemirror_html import Renderer
from prosemirror_html.registry import TagRegistry, create_default_registry
from prosemirror_html.tags import HeadingTag, SimpleTag, TextTag

DEFAULT_NODES = {
    "text": (TextTag(),),
    "paragraph": (SimpleTag("p"),),
    "blockquote": (SimpleTag("blockquote"),),
    "bullet_list": (SimpleTag("ul"),),
    "heading": (HeadingTag(),),
    "hard_break": (SimpleTag("br", self_closing=True),),
    "image": (SimpleTag("img", self_closing=True),),
    "list_item": (SimpleTag("li"),),
    "ordered_list": (SimpleTag("ol"),),
    "table": (SimpleTag("table"), SimpleTag("tbody")),
    "table_cell": (SimpleTag("td"),),
    "table_header": (SimpleTag("th"),),
    "table_row": (SimpleTag("tr"),),
}

DEFAULT_MARKS = {
    "link": (SimpleTag("a"),),
    "bold": (SimpleTag("strong"),),
    "code": (SimpleTag("code"),),
    "italic": (SimpleTag("em"),),
    "strike": (SimpleTag("s"),),
    "subscript": (SimpleTag("sub"),),
    "superscript": (SimpleTag("sup"),),
    "underline": (SimpleTag("u"),),
}


class TestDefaultRegistry:
    """The default bindings must match the ProseMirror basic schema names."""

    def test_node_names(self) -> None:
        assert create_default_registry().node_names == frozenset(DEFAULT_NODES)

    def test_mark_names(self) -> None:
        assert create_default_registry().mark_names == frozenset(DEFAULT_MARKS)

    @pytest.mark.parametrize(("name", "tags"), list(DEFAULT_NODES.items()))
    def test_node_bindings(self, name: str, tags: tuple) -> None:
        assert create_default_registry().get_node(name) == tags

    @pytest.mark.parametrize(("name", "tags"), list(DEFAULT_MARKS.items()))
    def test_mark_bindings(self, name: str, tags: tuple) -> None:
        assert create_default_registry().get_mark(name) == tags

    def test_each_call_returns_fresh_registry(self) -> None:
        first = create_default_registry()
        second = create_default_registry()
        first.register_node("extra", SimpleTag("div"))
        assert not second.has_node("extra")


class TestTagRegistry:
    """Registration and lookup."""

    def test_empty_registry(self) -> None:
        registry = TagRegistry()
        assert registry.get_node("paragraph") is None
        assert registry.get_mark("bold") is None
        assert registry.node_names == frozenset()

    def test_register_replaces_binding(self) -> None:
        registry = TagRegistry()
        registry.register_node("quote", SimpleTag("q"))
        registry.register_node("quote", SimpleTag("blockquote"), SimpleTag("p"))
        assert registry.get_node("quote") == (SimpleTag("blockquote"), SimpleTag("p"))

    def test_register_is_chainable(self) -> None:
        registry = TagRegistry().register_node("a", SimpleTag("div")).register_mark("b", SimpleTag("b"))
        assert registry.has_node("a")
        assert registry.has_mark("b")

    def test_namespaces_are_independent(self) -> None:
        registry = TagRegistry().register_node("code", SimpleTag("pre"))
        assert registry.has_node("code")
        assert not registry.has_mark("code")

    def test_no_validation_at_registration(self) -> None:
        registry = TagRegistry().register_node("weird", "not a tag")  # type: ignore[arg-type]
        assert registry.get_node("weird") == ("not a tag",)

    def test_register_with_no_tags(self) -> None:
        registry = TagRegistry().register_mark("noop")
        assert registry.get_mark("noop") == ()

    def test_copy_is_independent(self) -> None:
        original = create_default_registry()
        clone = original.copy()
        clone.register_node("paragraph", SimpleTag("div"))
        assert original.get_node("paragraph") == (SimpleTag("p"),)
        assert clone.get_node("paragraph") == (SimpleTag("div"),)

    def test_override_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = create_default_registry()
        with caplog.at_level(logging.DEBUG, logger="prosemirror_html"):
            registry.register_mark("bold", SimpleTag("b"))
        assert any("Overriding mark type 'bold'" in r.getMessage() for r in caplog.records)


class TestRendererRegistryOwnership:
    """A renderer copies the registry it is given."""

    def test_renderer_copies_given_registry(self) -> None:
        registry = create_default_registry()
        renderer = Renderer(registry)
        registry.register_node("paragraph", SimpleTag("div"))
        assert renderer.registry.get_node("paragraph") == (SimpleTag("p"),)

    def test_renderer_registration_does_not_leak_back(self) -> None:
        registry = create_default_registry()
        renderer = Renderer(registry)
        renderer.register_node("callout", SimpleTag("aside"))
        assert not registry.has_node("callout")
