"""CLI entry point: quirion PDFs -> activities JSON."""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from quirion_import.services.extract import can_parse_document, parse_pages
from quirion_import.services.parse_pdf import extract_pages
from quirion_import.util.logger import get_logger, set_level


def process_file(pdf_path: Path) -> Optional[Dict[str, Any]]:
    """Extract one PDF; None when it isn't a quirion statement or dividend notice."""
    logger = get_logger()
    pages = extract_pages(str(pdf_path))
    if not can_parse_document(pages, pdf_path.suffix):
        logger.warning(f"Not a quirion document, skipping: {pdf_path}")
        return None

    result = parse_pages(pages)
    return {
        "file": str(pdf_path),
        **result.model_dump(mode="json"),
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Extract activities from quirion PDF documents.")
    parser.add_argument("pdf_paths", nargs="+", help="Kontoauszug / Erträgnisabrechnung PDFs")
    parser.add_argument("--output", "-o", default="-", help="JSON output path ('-' for stdout)")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logger = get_logger()
    if args.log_level:
        set_level(args.log_level)

    start = time.time()
    results: List[Dict[str, Any]] = []
    failed = False
    for raw_path in args.pdf_paths:
        pdf_path = Path(raw_path)
        if not pdf_path.exists():
            logger.error(f"File not found: {pdf_path}")
            failed = True
            continue
        try:
            result = process_file(pdf_path)
        except Exception:
            logger.exception(f"Extraction failed for {pdf_path}")
            failed = True
            continue
        if result is not None:
            results.append(result)

    blob = json.dumps(results, indent=2, ensure_ascii=False)
    if args.output == "-":
        print(blob)
    else:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(blob, encoding="utf-8")

    logger.info(f"Done: {len(results)} documents ({time.time() - start:.1f}s)")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
