"""
Centralized anchors, patterns and constants for quirion documents.

- BROKER_NAME / HOME_CURRENCY / TIMEZONE: fixed facts about the broker.
- *_MARKER: phrases the classifier looks for on page 1.
- STATEMENT_*: anchors of the transaction lines inside a Kontoauszug.
- DIVIDEND_*: anchors of the single payment in an Erträgnisabrechnung.
- ISIN_REGEX / SIGNED_DECIMAL_REGEX: value shapes.

quirion's PDFs come out of text extraction as tiny partial strings
("Quir", "in Pr", "ivatbank A", "G"), so most anchors below are the exact
fragment as it shows up, not the word a human would read.
"""


BROKER_NAME = "quirion"
HOME_CURRENCY = "EUR"
TIMEZONE = "Europe/Berlin"

# File extension the page source must come from
PDF_EXTENSION = "pdf"

# ---------- classifier markers ----------

# (start fragment, number of fragments, joined text)
BROKER_MARKER = ("Quir", 4, "Quirin Privatbank AG")
DIVIDEND_NOTICE_MARKER = ("Erträ", 4, "Erträgnisabrechnung")
STATEMENT_MARKER = "Kontoauszug"

# ---------- statement (Kontoauszug) ----------

STATEMENT_BUY = "Wertpapier Kauf"
STATEMENT_SELL = ("Wertpapier", "Verkauf")
STATEMENT_DIVIDEND = "Erträgnisabrechn"

# Fixed offsets from the transaction anchor
STATEMENT_AMOUNT_OFFSET = -4
STATEMENT_CURRENCY_OFFSET = -3
STATEMENT_DATE_OFFSET = -1

# Anchor + ", Ref" + ".: <number>" ; the sell anchor is two fragments wide
STATEMENT_SKIP = {
    "Buy": 3,
    "Sell": 4,
    "Dividend": 3,
}

# "LU1931974692, ST 37,722"
SHARES_MARKER = " ST "

# KEST block after a dividend line: "KEST", ": EUR -0,43, SOLI:", "EUR -0,02"
STATEMENT_TAX_MARKER = "KEST"

# ---------- dividend notice (Erträgnisabrechnung) ----------

DIVIDEND_ISIN = "ISIN"
DIVIDEND_SHARES = "Nominal/Stüc"
DIVIDEND_PRICE = "pro Anteil"
DIVIDEND_PAYMENT_DATE = "Zahlungstag"
DIVIDEND_CAPITAL_GAINS_TAX = "Kapitaler"
DIVIDEND_SOLIDARITY_TAX = "Solidar"
DIVIDEND_CHURCH_TAX = "Kirchensteuer"
DIVIDEND_CURRENCY = "Währ"
DIVIDEND_FX_RATE = "visenkurs"
DIVIDEND_COMPANY_START = "teilen wir nachstehende Abrechn"
DIVIDEND_COMPANY_END = "Wertpapierbez"
# Skip the anchor itself and "ung:"
DIVIDEND_COMPANY_SKIP = 2

# ---------- value shapes ----------

# Two letter country code, nine alphanumerics, numeric check digit
ISIN_REGEX = r"^[A-Z]{2}[A-Z0-9]{9}\d$"

# German decimals with a sign, e.g. "-0,43" inside ": EUR -0,43, SOLI:"
SIGNED_DECIMAL_REGEX = r"-?\d+(?:\.\d{3})*,\d+"

# Three letter currency code
CURRENCY_REGEX = r"^[A-Z]{3}$"
