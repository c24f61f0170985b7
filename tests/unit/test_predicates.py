"""Unit tests for element predicates."""

import inspect

import pytest

from htmlsieve.parser.extractor import Element
from htmlsieve.parser.predicates import (
    ByAttr,
    ByAttrValue,
    ByClass,
    ByID,
    ByTag,
    build_predicates,
)
from htmlsieve.parser.tokenizer import Attribute, NodeKind


def make_element(tag: str, *attributes: tuple[str, str], kind: NodeKind = NodeKind.ELEMENT) -> Element:
    return Element(kind=kind, tag=tag, attributes=tuple(Attribute(*pair) for pair in attributes))


@pytest.fixture
def home_link() -> Element:
    return make_element("a", ("href", "/"), ("class", "home link"), ("id", "nav-home"))


class TestByTag:
    """Test tag name matching."""

    def test_exact_match(self, home_link: Element) -> None:
        assert ByTag("a")(home_link)

    def test_no_partial_match(self, home_link: Element) -> None:
        """Test that tag names are compared whole."""
        assert not ByTag("abbr")(make_element("a"))
        assert not ByTag("")(home_link)

    def test_case_sensitive(self, home_link: Element) -> None:
        """Test that the name is not lower-cased for the caller."""
        assert not ByTag("A")(home_link)


class TestByClass:
    """Test class attribute matching."""

    def test_matches_one_of_several_classes(self, home_link: Element) -> None:
        assert ByClass("link")(home_link)
        assert ByClass("home")(home_link)

    def test_matches_substring_of_a_class(self) -> None:
        """Test that containment, not whole-token equality, is used."""
        assert ByClass("link")(make_element("div", ("class", "sidelinks")))

    def test_no_class_attribute(self) -> None:
        assert not ByClass("link")(make_element("a", ("href", "/link")))

    def test_any_of_duplicate_class_attributes(self) -> None:
        """Test that every class attribute is checked, not just the first."""
        element = make_element("p", ("class", "lead"), ("class", "note"))

        assert ByClass("note")(element)


class TestByID:
    """Test id attribute matching."""

    def test_substring_match(self, home_link: Element) -> None:
        assert ByID("home")(home_link)
        assert ByID("nav-home")(home_link)

    def test_no_match(self, home_link: Element) -> None:
        assert not ByID("footer")(home_link)

    def test_ignores_other_attributes(self) -> None:
        assert not ByID("title")(make_element("h1", ("class", "title")))


class TestByAttr:
    """Test attribute presence."""

    def test_present_with_any_value(self) -> None:
        assert ByAttr("disabled")(make_element("input", ("disabled", "")))

    def test_absent(self, home_link: Element) -> None:
        assert not ByAttr("src")(home_link)


class TestByAttrValue:
    """Test attribute value containment."""

    def test_matches_value_substring(self) -> None:
        element = make_element("a", ("rel", "noopener nofollow"))

        assert ByAttrValue("rel", "nofollow")(element)
        assert not ByAttrValue("rel", "sponsored")(element)

    def test_requires_the_key(self, home_link: Element) -> None:
        assert not ByAttrValue("title", "home")(home_link)


class TestNonElementKinds:
    """Test that predicates only accept element descriptors."""

    @pytest.mark.parametrize("kind", [NodeKind.TEXT, NodeKind.COMMENT, NodeKind.DOCTYPE, NodeKind.ERROR])
    def test_rejects_non_elements(self, kind: NodeKind) -> None:
        """Test every predicate refuses descriptors that are not elements."""
        node = make_element("a", ("href", "/"), ("class", "link"), ("id", "x"), kind=kind)

        for predicate in (ByTag("a"), ByClass("link"), ByID("x"), ByAttr("href"), ByAttrValue("href", "/")):
            assert not predicate(node)


class TestPredicateValues:
    """Test predicates behave as plain values."""

    def test_equality_and_hash(self) -> None:
        assert ByTag("a") == ByTag("a")
        assert ByTag("a") != ByClass("a")
        assert len({ByClass("x"), ByClass("x"), ByID("x")}) == 2

    def test_does_not_mutate_element(self, home_link: Element) -> None:
        before = (home_link.tag, home_link.attributes)

        ByClass("link")(home_link)
        ByAttr("href")(home_link)

        assert (home_link.tag, home_link.attributes) == before


class TestBuildPredicates:
    """Test building predicates from optional criteria."""

    def test_no_criteria(self) -> None:
        """Test that nothing given means nothing to filter on."""
        assert build_predicates() == []
        assert build_predicates(tag="", class_name="", element_id="", attr="") == []

    def test_defaults_are_empty_strings(self) -> None:
        """Test that every criterion defaults to the empty string."""
        defaults = {
            name: param.default
            for name, param in inspect.signature(build_predicates).parameters.items()
        }

        assert defaults == {"tag": "", "class_name": "", "element_id": "", "attr": ""}

    def test_only_given_criteria_apply(self) -> None:
        assert build_predicates(tag="a", attr="href") == [ByTag("a"), ByAttr("href")]

    def test_all_criteria(self) -> None:
        assert build_predicates(tag="h1", class_name="title", element_id="main", attr="data-x") == [
            ByTag("h1"),
            ByClass("title"),
            ByID("main"),
            ByAttr("data-x"),
        ]
