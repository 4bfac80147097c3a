"""
PDF -> pages of text fragments (parser adapter).

- Uses pdfplumber to walk pages and words.
- Emits one list of fragments per page, in text-flow order.
- Leaves all document knowledge to the extractors (this module just surfaces
  what the PDF actually contains).

Blank characters are kept inside words so runs the PDF prints as one piece
("Wertpapier Kauf", "EUR 0,2688 pro Anteil") stay one fragment.
"""

from typing import List

import pdfplumber

from quirion_import.util.logger import get_logger


def extract_pages(path: str) -> List[List[str]]:
    """
    Read a PDF and return its fragments page by page.

    Returns:
        List[List[str]]: one entry per page, each the page's fragments in
        reading order.
    """
    logger = get_logger()
    logger.info(f"Starting PDF parsing for: {path}")

    pages: List[List[str]] = []
    try:
        with pdfplumber.open(path) as pdf:
            logger.info(f"Opened PDF with {len(pdf.pages)} pages")
            for p_idx, page in enumerate(pdf.pages, start=1):
                words = page.extract_words(
                    use_text_flow=True,
                    keep_blank_chars=True,
                    x_tolerance=2,   # horizontal merge tolerance
                    y_tolerance=3    # vertical grouping tolerance
                ) or []
                fragments = [w["text"] for w in words if w["text"].strip()]
                logger.debug(f"Page {p_idx}: extracted {len(fragments)} fragments")
                pages.append(fragments)

        logger.info(f"Successfully parsed PDF: {sum(len(p) for p in pages)} fragments total")
        return pages

    except Exception as e:
        logger.error(f"Error parsing PDF {path}: {str(e)}")
        raise
