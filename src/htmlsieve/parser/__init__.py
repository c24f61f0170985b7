"""Parser package for markup tokenizing and element filtering.

This package provides a pipeline that turns a markup byte stream into
a flat list of element descriptors and filters it with predicates.
"""

from htmlsieve.exceptions import ParseError
from htmlsieve.parser.extractor import Element, element_from_token, extract_elements
from htmlsieve.parser.filter import apply_predicates, filter_elements
from htmlsieve.parser.predicates import (
    ByAttr,
    ByAttrValue,
    ByClass,
    ByID,
    ByTag,
    build_predicates,
)
from htmlsieve.parser.projections import images, links
from htmlsieve.parser.protocols import Predicate
from htmlsieve.parser.tokenizer import (
    Attribute,
    NodeKind,
    Token,
    TokenType,
    iter_tokens,
    node_kind,
    tokenize,
)

__all__ = [
    "Attribute",
    "ByAttr",
    "ByAttrValue",
    "ByClass",
    "ByID",
    "ByTag",
    "Element",
    "NodeKind",
    "ParseError",
    "Predicate",
    "Token",
    "TokenType",
    "apply_predicates",
    "build_predicates",
    "element_from_token",
    "extract_elements",
    "filter_elements",
    "images",
    "iter_tokens",
    "links",
    "node_kind",
    "tokenize",
]
