"""Link and image source extraction built on the filter pipeline."""

from htmlsieve.parser.filter import filter_elements
from htmlsieve.parser.predicates import ByAttr
from htmlsieve.parser.protocols import Predicate
from htmlsieve.parser.tokenizer import Source


def _first_values(source: Source, key: str, predicates: tuple[Predicate, ...]) -> list[str]:
    elements = filter_elements(source, ByAttr(key), *predicates)
    return [element.getall(key)[0] for element in elements]


def links(source: Source, *predicates: Predicate) -> list[str]:
    """Return the first ``href`` of every element that has one.

    Args:
        source: Raw markup bytes or a readable binary stream.
        *predicates: Extra predicates narrowing which elements count.

    Returns:
        Link targets in document order, empty if there are none.

    Raises:
        ParseError: If the markup cannot be tokenized.

    """
    return _first_values(source, "href", predicates)


def images(source: Source, *predicates: Predicate) -> list[str]:
    """Return the first ``src`` of every element that has one.

    Raises:
        ParseError: If the markup cannot be tokenized.

    """
    return _first_values(source, "src", predicates)
