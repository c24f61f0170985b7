"""htmlsieve - flat element filtering for HTML documents.

Tokenizes a fetched page into start-tag descriptors, filters them with
composable predicates and extracts link and image targets.
"""

from htmlsieve.config import Settings, settings
from htmlsieve.exceptions import HTMLSieveError, ParseError
from htmlsieve.logger import setup_logging
from htmlsieve.parser import (
    ByAttr,
    ByAttrValue,
    ByClass,
    ByID,
    ByTag,
    Element,
    build_predicates,
    filter_elements,
    images,
    links,
)

__version__ = "0.1.0"

__all__ = [
    "ByAttr",
    "ByAttrValue",
    "ByClass",
    "ByID",
    "ByTag",
    "Element",
    "HTMLSieveError",
    "ParseError",
    "Settings",
    "__version__",
    "build_predicates",
    "filter_elements",
    "images",
    "links",
    "settings",
    "setup_logging",
]
