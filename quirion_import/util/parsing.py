"""
Value parsers shared by the extractors.

- parse_german_num: "1.234,56" -> Decimal("1234.56")
- parse_isin: fragment -> ISIN or None
- create_activity_datetime: "19.07.2021" -> ("2021-07-19", "2021-07-18T22:00:00.000Z")
- round_down: truncate a Decimal to N places

All pure; they raise ValueError on malformed input instead of guessing.
"""

import re
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from extraction.patterns import ISIN_REGEX, TIMEZONE

isin_pat = re.compile(ISIN_REGEX)
DATE_PAT = re.compile(r"^\s*(\d{1,2})\.(\d{1,2})\.(\d{4})\s*$")
TIME_PAT = re.compile(r"^\s*([0-2]?\d):([0-5]\d)(?::([0-5]\d))?\s*$")


def parse_german_num(text: str) -> Decimal:
    """'-984,92' -> Decimal('-984.92'); dots are thousands separators."""
    if text is None:
        raise ValueError("Cannot parse a number from None")
    s = text.strip().replace(".", "").replace(",", ".")
    if not s:
        raise ValueError(f"Cannot parse a number from {text!r}")
    try:
        value = Decimal(s)
    except InvalidOperation:
        raise ValueError(f"Cannot parse a number from {text!r}") from None
    if not value.is_finite():
        raise ValueError(f"Cannot parse a number from {text!r}")
    return value


def parse_isin(possible_isin: Optional[str]) -> Optional[str]:
    if not possible_isin:
        return None
    candidate = possible_isin.strip()
    return candidate if isin_pat.match(candidate) else None


def round_down(value: Decimal, places: int = 4) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_DOWN)


def create_activity_datetime(date_text: str, time_text: Optional[str] = None) -> Tuple[str, str]:
    """
    Turn a German booking date (and optional time) into the activity's
    ``date`` and ``datetime`` values.

    The date is read in Europe/Berlin. Without a usable time we take midnight
    local time so the same document always yields the same timestamp.

    Returns:
        (date, datetime): "YYYY-MM-DD" and a UTC ISO-8601 timestamp with
        millisecond precision and a trailing "Z".
    """
    m = DATE_PAT.match(date_text or "")
    if not m:
        raise ValueError(f"Not a DD.MM.YYYY date: {date_text!r}")
    day, month, year = (int(g) for g in m.groups())

    hour = minute = second = 0
    if time_text:
        t = TIME_PAT.match(time_text)
        if t:
            hour, minute = int(t.group(1)), int(t.group(2))
            second = int(t.group(3) or 0)

    local = datetime(year, month, day, hour, minute, second, tzinfo=ZoneInfo(TIMEZONE))
    utc = local.astimezone(ZoneInfo("UTC"))
    return local.date().isoformat(), utc.strftime("%Y-%m-%dT%H:%M:%S.000Z")
