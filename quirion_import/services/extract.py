# quirion_import/services/extract.py
"""
Entry point for quirion documents.

- can_parse_document(pages, extension): does page 1 belong to us?
- parse_pages(pages): classify on page 1, then run the matching extractor over
  all pages' fragments:
    * Kontoauszug          -> statement scanner (0..n activities)
    * Erträgnisabrechnung  -> dividend notice (exactly 1 activity)
    * anything else        -> nothing
  Status is STATUS_NO_ACTIVITIES when the result is empty, STATUS_OK otherwise.
- parsing_is_text_based(): we work on extracted text, not page images.

"Nothing recognized" is a status, never an exception. Unsupported currencies,
missing required anchors and schema violations do raise.
"""

from typing import List, Sequence

from quirion_import.models.schemas import (
    STATUS_NO_ACTIVITIES,
    STATUS_OK,
    Activity,
    ParseResult,
)
from quirion_import.services.classify import (
    can_parse_document,
    is_document_dividend,
    is_document_statement,
)
from quirion_import.services.dividend import create_activities_for_dividend
from quirion_import.services.statement import create_activities_for_statement
from quirion_import.util.fragments import flatten_pages
from quirion_import.util.logger import get_logger

__all__ = ["can_parse_document", "parse_pages", "parsing_is_text_based"]


def parse_data(first_page: Sequence[str], content: Sequence[str]) -> List[Activity]:
    if is_document_statement(first_page):
        return create_activities_for_statement(content)
    if is_document_dividend(first_page):
        return create_activities_for_dividend(content)
    return []


def parse_pages(pages: Sequence[Sequence[str]]) -> ParseResult:
    logger = get_logger()
    if not pages:
        return ParseResult(activities=[], status=STATUS_NO_ACTIVITIES)

    content = flatten_pages(pages)
    logger.info(f"Parsing {len(pages)} pages / {len(content)} fragments")
    activities = parse_data(pages[0], content)

    if not activities:
        logger.info("No activities found")
        return ParseResult(activities=[], status=STATUS_NO_ACTIVITIES)
    return ParseResult(activities=activities, status=STATUS_OK)


def parsing_is_text_based() -> bool:
    return True
