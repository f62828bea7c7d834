"""Testes da renderização de valores e das mensagens de fallback."""
from __future__ import annotations

from bs4 import BeautifulSoup

from garimpo.domain import Container, Leaf
from garimpo.extraction import empty_value_message, no_match_message, normalize_value, render
from garimpo.infrastructure import SoupNodeAccess

_NODES = SoupNodeAccess()


def _first(html: str, selector: str):
    return BeautifulSoup(html, "html.parser").select_one(selector)


def test_href_is_resolved_against_page_url() -> None:
    node = _first('<a href="/a/b">link</a>', "a")

    value = render(node, Leaf(selector="a", attribute="href"), "https://x.test/p", _NODES)

    assert value == "https://x.test/a/b"


def test_relative_href_without_leading_slash() -> None:
    node = _first('<a href="item?id=3">link</a>', "a")

    value = render(
        node, Leaf(selector="a", attribute="href"), "https://x.test/lista/", _NODES
    )

    assert value == "https://x.test/lista/item?id=3"


def test_other_attributes_are_not_resolved() -> None:
    node = _first('<img src="/img.png">', "img")

    value = render(node, Leaf(selector="img", attribute="src"), "https://x.test/p", _NODES)

    assert value == "/img.png"


def test_before_and_after_decorate_value() -> None:
    node = _first("<b>V</b>", "b")

    value = render(
        node, Leaf(selector="b", before="P:", after=";"), "https://x.test", _NODES
    )

    assert value == "P:V;"


def test_fallback_is_decorated_too() -> None:
    node = _first("<a>sem link</a>", "a")

    value = render(
        node,
        Leaf(selector="a", attribute="href", before="<", after=">"),
        "https://x.test",
        _NODES,
    )

    assert value == "<Could not get a value for a by href>"


def test_empty_attribute_uses_fallback() -> None:
    node = _first('<img alt="">', "img")

    value = render(node, Leaf(selector="img", attribute="alt"), "https://x.test", _NODES)

    assert value == "Could not get a value for img by alt"


def test_tabs_and_newlines_are_removed_inside_value() -> None:
    node = _first("<p>\n  linha\tum\n dois  </p>", "p")

    value = render(node, Leaf(selector="p"), "https://x.test", _NODES)

    assert value == "linhaum dois"


def test_multi_valued_attribute_is_joined() -> None:
    node = _first('<p class="a b">x</p>', "p")

    value = render(node, Leaf(selector="p", attribute="class"), "https://x.test", _NODES)

    assert value == "a b"


def test_normalize_value_keeps_absent_values() -> None:
    assert normalize_value(None) is None
    assert normalize_value(" \n\t ") is None
    assert normalize_value("  ok ") == "ok"


def test_fallback_messages() -> None:
    leaf = Leaf(selector=".preco", attribute="data-valor")
    container = Container(selector="ul", children=(Leaf(selector="li"),))

    assert no_match_message(leaf) == "Could not find by selector: .preco"
    assert no_match_message(container) == "Could not find by selector: ul"
    assert empty_value_message(leaf) == "Could not get a value for .preco by data-valor"
    assert (
        empty_value_message(Leaf(selector="h1"))
        == "Could not get a value for h1 by textContent"
    )


def test_malformed_href_is_kept_as_written() -> None:
    node = _first('<a href="http://[broken">x</a>', "a")

    value = render(
        node, Leaf(selector="a", attribute="href", before="["), "https://x.test/p", _NODES
    )

    assert value == "[http://[broken"
