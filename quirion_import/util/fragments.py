"""
Fragment sequence helpers (pure index/offset checks).

- flatten_pages(pages): per-page fragment lists -> one document-wide sequence.
- join_fragments(seq, start, count): glue N consecutive fragments back together.
- find_index(seq, text, partial, start): first fragment equal to / containing text.
- has_cluttered_text(seq, start_text, count, expected): "do exactly N fragments
  starting at start_text read as expected?"
- text_at_anchor(seq, text, offset, partial): fragment at a fixed offset from an anchor.

Keeps the offset arithmetic out of the extraction code.
"""

from typing import List, Optional, Sequence


def flatten_pages(pages: Sequence[Sequence[str]]) -> List[str]:
    return [fragment for page in pages for fragment in page]


def join_fragments(seq: Sequence[str], start: int, count: int) -> str:
    """Concatenate ``count`` fragments from ``start``; stops early at the end of ``seq``."""
    if start < 0:
        return ""
    return "".join(seq[start:start + count])


def find_index(seq: Sequence[str], text: str, partial: bool = False, start: int = 0) -> int:
    """Index of the first fragment equal to (or, with ``partial``, containing) ``text``; -1 if none."""
    for idx in range(max(start, 0), len(seq)):
        item = seq[idx]
        if (text in item) if partial else (item == text):
            return idx
    return -1


def has_cluttered_text(seq: Sequence[str], start_text: str, count: int, expected: str) -> bool:
    start = find_index(seq, start_text)
    if start == -1 or start + count > len(seq):
        return False
    return join_fragments(seq, start, count) == expected


def text_at_anchor(seq: Sequence[str], text: str, offset: int, partial: bool = False) -> Optional[str]:
    """
    Fragment ``offset`` positions away from the first anchor hit.

    Returns None when the anchor is missing or the offset falls outside the
    sequence (no wrap-around for negative positions).
    """
    idx = find_index(seq, text, partial=partial)
    if idx == -1:
        return None
    pos = idx + offset
    if pos < 0 or pos >= len(seq):
        return None
    return seq[pos]
