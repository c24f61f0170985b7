"""Element predicates.

Each predicate is a small immutable value that is called with one element
and answers True or False. Class and id matching use substring containment,
so ``ByClass("link")`` matches ``class="home link"`` and also
``class="sidelinks"``.
"""

from dataclasses import dataclass

from htmlsieve.parser.extractor import Element
from htmlsieve.parser.protocols import Predicate
from htmlsieve.parser.tokenizer import NodeKind


def _value_contains(element: Element, key: str, substr: str) -> bool:
    return any(
        attribute.key == key and substr in attribute.value
        for attribute in element.attributes
    )


@dataclass(frozen=True, slots=True)
class ByTag:
    """Match elements whose tag name equals ``name`` exactly."""

    name: str

    def __call__(self, element: Element) -> bool:
        return element.kind is NodeKind.ELEMENT and element.tag == self.name


@dataclass(frozen=True, slots=True)
class ByClass:
    """Match elements with a ``class`` attribute containing ``substr``."""

    substr: str

    def __call__(self, element: Element) -> bool:
        return element.kind is NodeKind.ELEMENT and _value_contains(element, "class", self.substr)


@dataclass(frozen=True, slots=True)
class ByID:
    """Match elements with an ``id`` attribute containing ``substr``."""

    substr: str

    def __call__(self, element: Element) -> bool:
        return element.kind is NodeKind.ELEMENT and _value_contains(element, "id", self.substr)


@dataclass(frozen=True, slots=True)
class ByAttr:
    """Match elements carrying attribute ``key``, whatever its value."""

    key: str

    def __call__(self, element: Element) -> bool:
        return element.kind is NodeKind.ELEMENT and element.has(self.key)


@dataclass(frozen=True, slots=True)
class ByAttrValue:
    """Match elements with a ``key`` attribute containing ``substr``."""

    key: str
    substr: str

    def __call__(self, element: Element) -> bool:
        return element.kind is NodeKind.ELEMENT and _value_contains(element, self.key, self.substr)


def build_predicates(
    tag: str = "",
    class_name: str = "",
    element_id: str = "",
    attr: str = "",
) -> list[Predicate]:
    """Build predicates from optional criteria.

    An empty or missing argument means "do not filter on this", not
    "match nothing".

    Args:
        tag: Exact tag name.
        class_name: Substring of the class attribute.
        element_id: Substring of the id attribute.
        attr: Attribute that must be present.

    Returns:
        The predicates for the criteria that were given.

    """
    predicates: list[Predicate] = []
    if tag:
        predicates.append(ByTag(tag))
    if class_name:
        predicates.append(ByClass(class_name))
    if element_id:
        predicates.append(ByID(element_id))
    if attr:
        predicates.append(ByAttr(attr))
    return predicates
