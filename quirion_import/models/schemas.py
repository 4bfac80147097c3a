"""
Data shapes for the importer.

- Activity: one buy/sell/dividend as it ends up in the portfolio.
- ParseResult: per-document wrapper with the activities and a status code.

Money and share counts are Decimals all the way through; prices are derived
from amounts and must not pick up float noise.

If I need a new output column, I add it to `Activity` here first and then
populate it in `statement.py` / `dividend.py`.
"""

import datetime as dt
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from extraction.patterns import CURRENCY_REGEX, ISIN_REGEX

ActivityType = Literal["Buy", "Sell", "Dividend"]

STATUS_OK = 0
STATUS_NO_ACTIVITIES = 5


class Activity(BaseModel):
    """
    One extracted transaction.

    What ends up in CSV/JSON:
    - broker: always "quirion"
    - type: Buy / Sell / Dividend
    - date, datetime: booking (or payment) day as ISO date, UTC timestamp
    - isin, company: the security; company is glued together from fragments
    - shares, price, amount: amount is what the document states, price is
      amount / shares for statements and read directly for dividend notices
    - fee: quirion never shows one, so 0
    - tax: positive number, 0 when none was withheld
    - foreign_currency, fx_rate: only for dividend notices paid in e.g. USD
    """

    broker: str
    type: ActivityType
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    datetime: str
    isin: str = Field(pattern=ISIN_REGEX)
    company: str = Field(min_length=1)
    shares: Decimal = Field(gt=0)
    price: Decimal = Field(ge=0)
    amount: Decimal = Field(ge=0)
    fee: Decimal = Decimal(0)
    tax: Decimal

    foreign_currency: Optional[str] = Field(default=None, pattern=CURRENCY_REGEX)
    fx_rate: Optional[Decimal] = Field(default=None, gt=0)

    @field_validator("date")
    @classmethod
    def date_not_in_future(cls, value: str) -> str:
        if dt.date.fromisoformat(value) > dt.date.today():
            raise ValueError(f"activity date {value} lies in the future")
        return value


class ParseResult(BaseModel):
    """
    Final output for one document.

    - activities: in document order
    - status: STATUS_OK, or STATUS_NO_ACTIVITIES when nothing was recognized
    """

    activities: List[Activity] = Field(default_factory=list)
    status: int = STATUS_OK
