"""Element filtering module."""

from collections.abc import Iterable

from htmlsieve.parser.extractor import Element, extract_elements
from htmlsieve.parser.protocols import Predicate
from htmlsieve.parser.tokenizer import Source
from htmlsieve.timing import timeit


def apply_predicates(elements: Iterable[Element], *predicates: Predicate) -> list[Element]:
    """Keep the elements every predicate accepts.

    Args:
        elements: Element descriptors in document order.
        *predicates: Predicates combined with logical AND.

    Returns:
        A new list of the accepted elements, in their original order. With no
        predicates, all elements.

    """
    if not predicates:
        return list(elements)
    return [element for element in elements if all(pred(element) for pred in predicates)]


@timeit("Element filtering")
def filter_elements(source: Source, *predicates: Predicate) -> list[Element]:
    """Extract the elements of a markup document and filter them.

    Args:
        source: Raw markup bytes or a readable binary stream.
        *predicates: Zero or more predicates; an element is kept when all of
            them accept it.

    Returns:
        Matching elements in document order.

    Raises:
        ParseError: If the markup cannot be tokenized.

    """
    return apply_predicates(extract_elements(source), *predicates)
