"""htmlsieve custom exceptions."""

class HTMLSieveError(Exception):
    """Base exception for all htmlsieve errors."""


class ParseError(HTMLSieveError):
    """Errors while tokenizing markup into element descriptors.

    Raised only when the input cannot be read or decoded to the end. The
    underlying error is chained as ``__cause__``.
    """
