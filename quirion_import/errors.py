"""
Errors raised while reading a quirion document.

Absence is not an error at lookup level (lookups return None). These are
raised only once a document can't produce a correct activity at all, and
they abort the whole document.
"""


class QuirionParseError(ValueError):
    """Base class for documents we refuse to turn into activities."""


class UnsupportedCurrencyError(QuirionParseError):
    """A statement line is booked in a currency other than the home currency."""


class MissingAnchorError(QuirionParseError):
    """A fragment the record can't be built without is not where it should be."""
