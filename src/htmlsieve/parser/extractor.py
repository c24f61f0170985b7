"""Element extraction: turns the token stream into element descriptors."""

from dataclasses import dataclass

from htmlsieve.logger import logger
from htmlsieve.parser.tokenizer import (
    Attribute,
    NodeKind,
    Source,
    Token,
    TokenType,
    iter_tokens,
    node_kind,
)

START_TAG_TYPES = frozenset({TokenType.START_TAG, TokenType.SELF_CLOSING_TAG})


@dataclass(frozen=True, slots=True)
class Element:
    """An opening (or self-closing) tag: its name and attributes.

    Attributes keep their source order. Duplicate keys from malformed markup
    are kept as they appear.
    """

    kind: NodeKind
    tag: str
    attributes: tuple[Attribute, ...] = ()

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value of the first attribute named ``key``."""
        for attribute in self.attributes:
            if attribute.key == key:
                return attribute.value
        return default

    def getall(self, key: str) -> list[str]:
        """Return every value of attributes named ``key``, in order."""
        return [attribute.value for attribute in self.attributes if attribute.key == key]

    def has(self, key: str) -> bool:
        return any(attribute.key == key for attribute in self.attributes)


def element_from_token(token: Token) -> Element:
    """Build an element descriptor from a start or self-closing tag token.

    Raises:
        ValueError: If the token is not a start or self-closing tag.

    """
    if token.type not in START_TAG_TYPES:
        msg = f"Cannot build an element from a {token.type.value} token"
        raise ValueError(msg)
    return Element(kind=node_kind(token.type), tag=token.data, attributes=token.attrs)


def extract_elements(source: Source) -> list[Element]:
    """Collect every start tag of the input, in document order.

    End tags, text, comments and doctypes are read but not kept.

    Args:
        source: Raw markup bytes or a readable binary stream.

    Returns:
        A new list of element descriptors.

    Raises:
        ParseError: If tokenizing fails.

    """
    elements = [
        element_from_token(token)
        for token in iter_tokens(source)
        if token.type in START_TAG_TYPES
    ]
    logger.debug("Extracted %d element(s)", len(elements))
    return elements
