"""
Statement (Kontoauszug) scanning.

A buy line in the flattened statement looks like:

    "-984,92",                    amount       anchor - 4
    "EUR",                        currency     anchor - 3
    "19.07.2021",                 valuta
    "15.07.2021",                 booking date anchor - 1
    "Wertpapier Kauf",            anchor
    ", Ref",
    ".: 227865486",
    "Am",                         company name, glued together ...
    "undi Inde",
    "x Solu.-A.PRIME GL.",
    "Nam.-Ant.UCI.ETF DR USD Dis",
    ".oN",
    "LU1931974692, ST 37,722",    ... until the "<ISIN>, ST <shares>" line

Sells use the two fragments "Wertpapier" "Verkauf" as anchor, dividends use
"Erträgnisabrechn" and are followed by a KEST block:

    "KEST",
    ": EUR -0,43, SOLI:",
    "EUR -0,02",

The scan is a fold over `scan_step`: each step finds the next anchor at or
after `ScanState.index`, reads one activity and returns the state just past
everything it consumed. Any malformed line aborts the whole statement.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from extraction.patterns import (
    BROKER_NAME,
    HOME_CURRENCY,
    SHARES_MARKER,
    SIGNED_DECIMAL_REGEX,
    STATEMENT_AMOUNT_OFFSET,
    STATEMENT_BUY,
    STATEMENT_CURRENCY_OFFSET,
    STATEMENT_DATE_OFFSET,
    STATEMENT_DIVIDEND,
    STATEMENT_SELL,
    STATEMENT_SKIP,
    STATEMENT_TAX_MARKER,
)
from quirion_import.errors import MissingAnchorError, UnsupportedCurrencyError
from quirion_import.models.schemas import Activity, ActivityType
from quirion_import.services.validate import validate_activity
from quirion_import.util.logger import get_logger
from quirion_import.util.parsing import (
    create_activity_datetime,
    parse_german_num,
    parse_isin,
    round_down,
)

signed_decimal_pat = re.compile(SIGNED_DECIMAL_REGEX)


@dataclass(frozen=True)
class ScanState:
    """Where the next anchor search starts; ``done`` once nothing is left."""

    index: int = 0
    done: bool = False


def find_next_anchor(content: Sequence[str], start: int) -> Optional[Tuple[int, ActivityType]]:
    """First transaction anchor at or after ``start`` as (index, type)."""
    sell_first, sell_second = STATEMENT_SELL
    for idx in range(max(start, 0), len(content)):
        item = content[idx]
        if item == STATEMENT_BUY:
            return idx, "Buy"
        if item == sell_first and idx + 1 < len(content) and content[idx + 1] == sell_second:
            return idx, "Sell"
        # the statement also lists dividends
        if item == STATEMENT_DIVIDEND:
            return idx, "Dividend"
    return None


def find_isin_and_shares_in_line(line: str) -> Optional[Tuple[str, Decimal]]:
    """'LU1931974692, ST 37,722' -> ('LU1931974692', Decimal('37.722')); None for name fragments."""
    possible_isin, _, remainder = line.partition(",")
    isin = parse_isin(possible_isin)
    if not isin:
        return None

    _, marker, shares_text = remainder.partition(SHARES_MARKER)
    if not marker:
        raise MissingAnchorError(f"No share count after ISIN {isin}: {line!r}")
    return isin, parse_german_num(shares_text)


def find_statement_dividend_tax(content: Sequence[str], index: int) -> Decimal:
    """
    Positive tax for the dividend line whose KEST block starts at ``index``.

    No KEST marker means nothing was withheld. There is no church tax in
    this layout, only Kapitalertragsteuer and Soli.
    """
    if index >= len(content) or content[index] != STATEMENT_TAX_MARKER:
        return Decimal(0)

    matches = [
        signed_decimal_pat.search(content[pos]) if pos < len(content) else None
        for pos in (index + 1, index + 2)
    ]
    if not all(matches):
        raise MissingAnchorError(f"KEST block at {index} without capital gains tax and soli")

    capital_gains_tax, soli = (parse_german_num(m.group(0)) for m in matches)
    # taxes are printed negative
    return -(capital_gains_tax + soli)


def read_transaction(content: Sequence[str], index: int, activity_type: ActivityType) -> Tuple[Activity, int]:
    """
    Build the activity for the anchor at ``index``.

    Returns:
        (activity, last_index): last_index is the last fragment the
        activity was read from (ISIN line, or KEST position for dividends).
    """
    if index + STATEMENT_AMOUNT_OFFSET < 0:
        raise MissingAnchorError(f"{activity_type} anchor at {index} has no amount/currency/date in front of it")

    amount = abs(parse_german_num(content[index + STATEMENT_AMOUNT_OFFSET]))

    currency = content[index + STATEMENT_CURRENCY_OFFSET]
    if currency != HOME_CURRENCY:
        raise UnsupportedCurrencyError(
            f"Statement line in {currency!r} at {index}; only {HOME_CURRENCY} statements are supported"
        )

    date, datetime = create_activity_datetime(content[index + STATEMENT_DATE_OFFSET])

    # skip the anchor, ", Ref" and ".: <ref number>"
    index += STATEMENT_SKIP[activity_type]

    partial_name: List[str] = []
    isin_and_shares = None
    while index < len(content):
        isin_and_shares = find_isin_and_shares_in_line(content[index])
        if isin_and_shares:
            break
        partial_name.append(content[index])
        index += 1
    if not isin_and_shares:
        raise MissingAnchorError(f"No ISIN line after {activity_type} anchor; statement ended")
    isin, shares = isin_and_shares

    tax = Decimal(0)
    if activity_type == "Dividend":
        index += 1  # now at KEST
        tax = find_statement_dividend_tax(content, index)
        # the statement books the dividend net of tax
        amount = abs(amount + tax)

    shares = abs(shares)
    activity = validate_activity({
        "broker": BROKER_NAME,
        "type": activity_type,
        "date": date,
        "datetime": datetime,
        "isin": isin,
        "company": "".join(partial_name),
        "shares": shares,
        # zero shares is rejected by validation below
        "price": round_down(amount / shares, 4) if shares else Decimal(0),
        "amount": amount,
        "fee": Decimal(0),
        "tax": tax,
    })
    return activity, index


def scan_step(content: Sequence[str], state: ScanState) -> Tuple[ScanState, Optional[Activity]]:
    """One anchor -> one activity. Returns a ``done`` state when no anchor is left."""
    if state.done or state.index >= len(content):
        return ScanState(index=len(content), done=True), None

    hit = find_next_anchor(content, state.index)
    if hit is None:
        return ScanState(index=len(content), done=True), None

    anchor_index, activity_type = hit
    get_logger().debug(f"{activity_type} anchor at fragment {anchor_index}")
    activity, last_index = read_transaction(content, anchor_index, activity_type)
    return ScanState(index=last_index + 1), activity


def create_activities_for_statement(content: Sequence[str]) -> List[Activity]:
    """All transactions of a statement in document order; [] if there are none."""
    activities: List[Activity] = []
    state = ScanState()
    while True:
        state, activity = scan_step(content, state)
        if state.done:
            break
        activities.append(activity)

    get_logger().info(f"Statement: extracted {len(activities)} activities from {len(content)} fragments")
    return activities
