"""Tokenizer adapter over the standard library's streaming HTML tokenizer.

Reads a byte stream in chunks, decodes it incrementally and feeds it to
``html.parser.HTMLParser`` (the tokenizer BeautifulSoup's ``"html.parser"``
builder runs on), turning its callbacks into a flat stream of tokens.
"""

import codecs
import io
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from html.parser import HTMLParser
from typing import BinaryIO, NamedTuple

from bs4.dammit import EncodingDetector

from htmlsieve.config import lookup_text_encoding, settings
from htmlsieve.exceptions import ParseError
from htmlsieve.logger import logger

Source = bytes | bytearray | memoryview | BinaryIO

_WIDE_UNICODE_PREFIXES = ("utf-16", "utf-32")


class TokenType(Enum):
    """Lexical token kinds reported by the tokenizer."""

    START_TAG = "start_tag"
    END_TAG = "end_tag"
    SELF_CLOSING_TAG = "self_closing_tag"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    OTHER = "other"


class NodeKind(Enum):
    """Kinds of node a token describes."""

    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    ERROR = "error"


class Attribute(NamedTuple):
    """A single ``key="value"`` pair of a tag."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical token: tag name, text, comment body or declaration."""

    type: TokenType
    data: str
    attrs: tuple[Attribute, ...] = ()


_NODE_KINDS = {
    TokenType.START_TAG: NodeKind.ELEMENT,
    TokenType.END_TAG: NodeKind.ELEMENT,
    TokenType.SELF_CLOSING_TAG: NodeKind.ELEMENT,
    TokenType.TEXT: NodeKind.TEXT,
    TokenType.COMMENT: NodeKind.COMMENT,
    TokenType.DOCTYPE: NodeKind.DOCTYPE,
}


def node_kind(token_type: TokenType) -> NodeKind:
    """Classify a token type into the node kind it describes."""
    return _NODE_KINDS.get(token_type, NodeKind.ERROR)


class _TokenCollector(HTMLParser):
    """HTMLParser that records every callback as a Token."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._pending: list[Token] = []

    def drain(self) -> list[Token]:
        """Return the tokens seen since the last drain."""
        tokens, self._pending = self._pending, []
        return tokens

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._pending.append(Token(TokenType.START_TAG, tag, _attributes(attrs)))

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._pending.append(Token(TokenType.SELF_CLOSING_TAG, tag, _attributes(attrs)))

    def handle_endtag(self, tag: str) -> None:
        self._pending.append(Token(TokenType.END_TAG, tag))

    def handle_data(self, data: str) -> None:
        self._pending.append(Token(TokenType.TEXT, data))

    def handle_comment(self, data: str) -> None:
        self._pending.append(Token(TokenType.COMMENT, data))

    def handle_decl(self, decl: str) -> None:
        token_type = TokenType.DOCTYPE if decl.lower().startswith("doctype") else TokenType.OTHER
        self._pending.append(Token(token_type, decl))

    def handle_pi(self, data: str) -> None:
        self._pending.append(Token(TokenType.OTHER, data))

    def unknown_decl(self, data: str) -> None:
        self._pending.append(Token(TokenType.OTHER, data))


def _attributes(attrs: list[tuple[str, str | None]]) -> tuple[Attribute, ...]:
    # Valueless attributes (<input disabled>) come through as None
    return tuple(Attribute(key, value or "") for key, value in attrs)


def _resolve_encoding(head: bytes) -> tuple[bytes, str]:
    """Pick the codec for the stream from its first chunk.

    Args:
        head: First chunk read from the stream.

    Returns:
        The chunk with any byte order mark stripped, and the codec name.

    """
    if settings.htmlsieve_encoding:
        return head, settings.htmlsieve_encoding

    head, bom_encoding = EncodingDetector.strip_byte_order_mark(head)
    if bom_encoding:
        return head, bom_encoding

    declared = EncodingDetector.find_declared_encoding(head, is_html=True)
    if declared:
        try:
            encoding = lookup_text_encoding(declared)
        except LookupError:
            logger.debug("Ignoring unusable declared encoding %r", declared)
        else:
            # A declared UTF-16/32 without a byte order mark is read as UTF-8
            if encoding.startswith(_WIDE_UNICODE_PREFIXES):
                return head, "utf-8"
            return head, encoding

    return head, settings.htmlsieve_default_encoding


def iter_tokens(source: Source) -> Iterator[Token]:
    """Yield tokens from a markup byte stream until end of input.

    Args:
        source: Raw markup bytes or a readable binary stream.

    Yields:
        Tokens in the order the tokenizer reports them.

    Raises:
        ParseError: If the stream cannot be read, decoded or tokenized.

    """
    stream = io.BytesIO(source) if isinstance(source, (bytes, bytearray, memoryview)) else source
    chunk_size = settings.htmlsieve_read_chunk_size
    collector = _TokenCollector()

    try:
        raw = stream.read(chunk_size)
        chunk, encoding = _resolve_encoding(raw)
        logger.debug("Tokenizing markup as %s", encoding)
        decoder = codecs.getincrementaldecoder(encoding)(errors=settings.htmlsieve_encoding_errors)

        while raw:
            collector.feed(decoder.decode(chunk))
            yield from collector.drain()
            raw = chunk = stream.read(chunk_size)

        collector.feed(decoder.decode(b"", final=True))
        collector.close()
    # html.parser signals malformed marked sections with AssertionError
    except (OSError, ValueError, AssertionError) as err:
        msg = f"while tokenizing: {err}"
        raise ParseError(msg) from err

    yield from collector.drain()


def tokenize(source: Source) -> list[Token]:
    """Tokenize the whole input.

    Nothing is returned when tokenizing fails part way: the error propagates
    and the tokens collected so far are dropped.

    Raises:
        ParseError: If the stream cannot be read, decoded or tokenized.

    """
    return list(iter_tokens(source))
