"""
Dividend notice (Erträgnisabrechnung) extraction.

Unlike the statement there is exactly one payment per notice, so every field
is found on its own: search an anchor fragment, step a fixed number of
fragments away, convert. The layout knowledge lives in DIVIDEND_FIELDS
(one row per field) and `lookup_field` is the only place doing the
offset arithmetic.

Relevant fragments of a notice, in document order:

    "teilen wir nachstehende Abrechn", "ung:",
    "Xtr", ".II EUR H.Yield Corp.Bond Inhaber", "-Anteile 1D o.N.",   company
    "Wertpapierbez",
    "LU1109942653", "ISIN",
    "10,714 ST", "Nominal/Stüc",
    "EUR 0,2688 pro Anteil",
    "USD", "Währ", "ung",
    "30.09.2021", "Zahlungstag", "2,88",                              date, gross amount
    "-0,72", "EUR", "Kapitaler", "tragsteuer",
    "-0,03", "EUR", "Solidar", "itätszuschlag",
    "0,00", "EUR", "Kirchensteuer",
    "1,123100", "EUR/USD", "De", "visenkurs",                         foreign notices only

The WKN is printed too but deliberately not read: the same dividend also
appears in the statement, which has no WKN, and both copies should match.
"""

from decimal import Decimal
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence

from extraction.patterns import (
    BROKER_NAME,
    DIVIDEND_CAPITAL_GAINS_TAX,
    DIVIDEND_CHURCH_TAX,
    DIVIDEND_COMPANY_END,
    DIVIDEND_COMPANY_SKIP,
    DIVIDEND_COMPANY_START,
    DIVIDEND_CURRENCY,
    DIVIDEND_FX_RATE,
    DIVIDEND_ISIN,
    DIVIDEND_PAYMENT_DATE,
    DIVIDEND_PRICE,
    DIVIDEND_SHARES,
    DIVIDEND_SOLIDARITY_TAX,
    HOME_CURRENCY,
)
from quirion_import.errors import MissingAnchorError
from quirion_import.models.schemas import Activity
from quirion_import.services.validate import validate_activity
from quirion_import.util.fragments import find_index, text_at_anchor
from quirion_import.util.logger import get_logger
from quirion_import.util.parsing import (
    create_activity_datetime,
    parse_german_num,
    parse_isin,
    round_down,
)


class FieldSpec(NamedTuple):
    """Where a field sits relative to its anchor and how to read it."""

    anchor: str
    offset: int
    partial: bool = False
    convert: Callable[[str], Any] = str


def _shares_from_text(text: str) -> Decimal:
    # "10,714 ST"
    return parse_german_num(text.replace(" ST", ""))


def _price_from_line(line: str) -> Decimal:
    # "EUR 0,2688 pro Anteil"
    return parse_german_num(line.split(" ")[1])


DIVIDEND_FIELDS: Dict[str, FieldSpec] = {
    "isin": FieldSpec(DIVIDEND_ISIN, -1, convert=parse_isin),
    "shares": FieldSpec(DIVIDEND_SHARES, -1, partial=True, convert=_shares_from_text),
    "price": FieldSpec(DIVIDEND_PRICE, 0, partial=True, convert=_price_from_line),
    "dates": FieldSpec(DIVIDEND_PAYMENT_DATE, -1, convert=create_activity_datetime),
    # gross amount, taxes included
    "amount": FieldSpec(DIVIDEND_PAYMENT_DATE, 1, convert=parse_german_num),
    "currency": FieldSpec(DIVIDEND_CURRENCY, -1, partial=True),
}

# Kapitalertragsteuer, Solidaritätszuschlag, Kirchensteuer
TAX_FIELDS = (
    FieldSpec(DIVIDEND_CAPITAL_GAINS_TAX, -2, partial=True, convert=parse_german_num),
    FieldSpec(DIVIDEND_SOLIDARITY_TAX, -2, partial=True, convert=parse_german_num),
    FieldSpec(DIVIDEND_CHURCH_TAX, -2, partial=True, convert=parse_german_num),
)

FX_RATE_FIELD = FieldSpec(DIVIDEND_FX_RATE, -3, partial=True, convert=parse_german_num)


def lookup_field(content: Sequence[str], spec: FieldSpec) -> Optional[Any]:
    """Converted value at ``spec``'s offset, or None when the anchor isn't there."""
    text = text_at_anchor(content, spec.anchor, spec.offset, partial=spec.partial)
    if text is None:
        return None
    return spec.convert(text)


def find_dividend_company(content: Sequence[str]) -> Optional[str]:
    """Join everything between the Abrechnung intro and "Wertpapierbez"."""
    start = find_index(content, DIVIDEND_COMPANY_START)
    if start == -1:
        return None
    start += DIVIDEND_COMPANY_SKIP

    end = find_index(content, DIVIDEND_COMPANY_END, start=start)
    if end == -1:
        return None
    return "".join(content[start:end])


def find_dividend_tax(content: Sequence[str]) -> Decimal:
    """Sum of the three withheld taxes as a positive number; all three must be printed."""
    components = []
    for spec in TAX_FIELDS:
        value = lookup_field(content, spec)
        if value is None:
            raise MissingAnchorError(f"Dividend notice without {spec.anchor!r} tax line")
        components.append(value)
    # taxes are printed negative
    return -sum(components, Decimal(0))


def _to_home_currency(value: Optional[Decimal], fx_rate: Decimal) -> Optional[Decimal]:
    if value is None:
        return None
    return round_down(value / fx_rate, 4)


def create_activities_for_dividend(content: Sequence[str]) -> List[Activity]:
    """The single dividend of a notice, converted to EUR when paid in another currency."""
    logger = get_logger()
    fields = {name: lookup_field(content, spec) for name, spec in DIVIDEND_FIELDS.items()}
    logger.debug(f"Dividend notice fields: {fields}")

    date, datetime = fields["dates"] or (None, None)
    record: Dict[str, Any] = {
        "broker": BROKER_NAME,
        "type": "Dividend",
        "date": date,
        "datetime": datetime,
        "isin": fields["isin"],
        "company": find_dividend_company(content),
        "shares": fields["shares"],
        "price": fields["price"],
        "amount": fields["amount"],
        # no fee on an Erträgnisabrechnung
        "fee": Decimal(0),
        "tax": find_dividend_tax(content),
    }

    currency = fields["currency"]
    if currency is None:
        raise MissingAnchorError("Dividend notice without currency")

    if currency != HOME_CURRENCY:
        fx_rate = lookup_field(content, FX_RATE_FIELD)
        if not fx_rate or fx_rate < 0:
            raise MissingAnchorError(f"Dividend notice in {currency} without a usable exchange rate")

        logger.info(f"Converting {currency} dividend at rate {fx_rate}")
        record["foreign_currency"] = currency
        record["fx_rate"] = fx_rate
        for key in ("price", "tax", "amount"):
            record[key] = _to_home_currency(record[key], fx_rate)

    activity = validate_activity(record)
    logger.info(f"Dividend notice: extracted 1 activity for {activity.isin}")
    return [activity]
