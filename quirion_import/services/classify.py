"""
Document classification.

A quirion PDF is recognized by page 1 alone:
- the bank's name, split by text extraction into
  "Quir" | "in Pr" | "ivatbank A" | "G"
- and either "Kontoauszug" (statement) or
  "Erträ" | "gnisabrec" | "hn" | "ung" (dividend notice).

All predicates return False instead of raising when a marker is missing.
"""

from typing import Sequence

from extraction.patterns import (
    BROKER_MARKER,
    DIVIDEND_NOTICE_MARKER,
    PDF_EXTENSION,
    STATEMENT_MARKER,
)
from quirion_import.util.fragments import has_cluttered_text


def is_quirin_document(content: Sequence[str]) -> bool:
    start_text, count, expected = BROKER_MARKER
    return has_cluttered_text(content, start_text, count, expected)


def is_document_statement(content: Sequence[str]) -> bool:
    return STATEMENT_MARKER in content


def is_document_dividend(content: Sequence[str]) -> bool:
    start_text, count, expected = DIVIDEND_NOTICE_MARKER
    return has_cluttered_text(content, start_text, count, expected)


def can_parse_document(pages: Sequence[Sequence[str]], extension: str) -> bool:
    """True for quirion statements and dividend notices; checks page 1 only."""
    if not pages or (extension or "").lower().lstrip(".") != PDF_EXTENSION:
        return False

    first_page = pages[0]
    return is_quirin_document(first_page) and (
        is_document_statement(first_page) or is_document_dividend(first_page)
    )
