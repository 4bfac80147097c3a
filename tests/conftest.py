"""
Fragment sequences shaped like real quirion PDFs after text extraction.

Each fixture returns a fresh list so tests can mutate their copy.
"""

import pytest

QUIRIN = ["Quir", "in Pr", "ivatbank A", "G"]

BUY_LINE = [
    "-984,92",
    "EUR",
    "19.07.2021",
    "15.07.2021",
    "Wertpapier Kauf",
    ", Ref",
    ".: 227865486",
    "Am",
    "undi Inde",
    "x Solu.-A.PRIME GL.",
    "Nam.-Ant.UCI.ETF DR USD Dis",
    ".oN",
    "LU1931974692, ST 37,722",
]

SELL_LINE = [
    "1.034,50",
    "EUR",
    "23.07.2021",
    "21.07.2021",
    "Wertpapier",
    "Verkauf",
    ", Ref",
    ".: 228000001",
    "iShs-Core MSCI EM IMI U.ETF",
    "IE00BKM4GZ66, ST 32,5",
]

STATEMENT_DIVIDEND_LINE = [
    "2,43",
    "EUR",
    "01.10.2021",
    "30.09.2021",
    "Erträgnisabrechn",
    ", Ref",
    ".: 229000002",
    "Xtr",
    ".II EUR H.Yield Corp.Bond Inhaber",
    "-Anteile 1D o.N.",
    "LU1109942653, ST 10,714",
    "KEST",
    ": EUR -0,43, SOLI:",
    "EUR -0,02",
]

STATEMENT_HEADER = QUIRIN + ["Kontoauszug", "Nr. 7/2021", "Buchung", "Valuta", "Betrag"]

NOTICE_HEADER = QUIRIN + [
    "Erträ", "gnisabrec", "hn", "ung",
    "Sehr geehrte Kundin, sehr geehrter Kunde,",
    "teilen wir nachstehende Abrechn", "ung:",
    "Xtr", ".II EUR H.Yield Corp.Bond Inhaber", "-Anteile 1D o.N.",
    "Wertpapierbez", "eichnung",
    "LU1109942653", "ISIN",
    "DBX0PR", "WKN",
    "10,714 ST", "Nominal/Stüc", "k",
]

EUR_NOTICE_BODY = [
    "EUR 0,2688 pro Anteil", "Ausschüttung",
    "EUR", "Währ", "ung",
    "30.09.2021", "Zahlungstag", "2,88",
    "-0,43", "EUR", "Kapitaler", "tragsteuer",
    "-0,02", "EUR", "Solidar", "itätszuschlag",
    "0,00", "EUR", "Kirchensteuer",
]

USD_NOTICE_BODY = [
    "USD 0,3019 pro Anteil", "Ausschüttung",
    "USD", "Währ", "ung",
    "30.09.2021", "Zahlungstag", "3,24",
    "-0,48", "USD", "Kapitaler", "tragsteuer",
    "-0,02", "USD", "Solidar", "itätszuschlag",
    "0,00", "USD", "Kirchensteuer",
    "1,123100", "EUR/USD", "De", "visenkurs",
]


@pytest.fixture
def buy_line():
    return list(BUY_LINE)


@pytest.fixture
def sell_line():
    return list(SELL_LINE)


@pytest.fixture
def statement_dividend_line():
    return list(STATEMENT_DIVIDEND_LINE)


@pytest.fixture
def statement_pages():
    """Two-page statement: buy on page 1, sell and dividend on page 2."""
    return [
        STATEMENT_HEADER + BUY_LINE,
        ["Seite 2"] + SELL_LINE + STATEMENT_DIVIDEND_LINE + ["Endsaldo", "1.234,56"],
    ]


@pytest.fixture
def eur_notice():
    return NOTICE_HEADER + EUR_NOTICE_BODY


@pytest.fixture
def usd_notice():
    return NOTICE_HEADER + USD_NOTICE_BODY
