"""Integration tests for the parse_pages entry point."""

from decimal import Decimal

import pytest

from quirion_import.errors import UnsupportedCurrencyError
from quirion_import.models.schemas import STATUS_NO_ACTIVITIES, STATUS_OK
from quirion_import.services.extract import (
    can_parse_document,
    parse_pages,
    parsing_is_text_based,
)


class TestParsePages:
    """Test dispatch and status codes."""

    def test_statement_over_all_pages(self, statement_pages):
        """Test the scanner sees fragments from every page, not just page 1."""
        result = parse_pages(statement_pages)

        assert result.status == STATUS_OK
        assert [a.type for a in result.activities] == ["Buy", "Sell", "Dividend"]

    def test_buy_scenario(self, statement_pages):
        buy = parse_pages(statement_pages).activities[0]

        assert buy.amount == Decimal("984.92")
        assert buy.company == "Amundi Index Solu.-A.PRIME GL.Nam.-Ant.UCI.ETF DR USD Dis.oN"
        assert buy.isin == "LU1931974692"
        assert buy.shares == Decimal("37.722")
        assert buy.price == Decimal("26.1099")

    def test_dividend_notice(self, eur_notice):
        result = parse_pages([eur_notice[:20], eur_notice[20:]])

        assert result.status == STATUS_OK
        assert len(result.activities) == 1
        assert result.activities[0].amount == Decimal("2.88")

    def test_statement_without_transactions(self):
        pages = [["Quir", "in Pr", "ivatbank A", "G", "Kontoauszug", "Saldo", "0,00"]]
        result = parse_pages(pages)

        assert result.status == STATUS_NO_ACTIVITIES
        assert result.activities == []

    def test_unknown_document(self):
        result = parse_pages([["Depotübersicht"], ["Wertpapier Kauf"]])

        assert result.status == STATUS_NO_ACTIVITIES
        assert result.activities == []

    def test_no_pages(self):
        assert parse_pages([]).status == STATUS_NO_ACTIVITIES

    def test_foreign_currency_statement_raises(self, statement_pages):
        statement_pages[1][2] = "USD"  # currency of the sell line
        with pytest.raises(UnsupportedCurrencyError):
            parse_pages(statement_pages)

    def test_json_dump(self, statement_pages):
        """Test decimals survive serialization as exact strings."""
        dumped = parse_pages(statement_pages).model_dump(mode="json")

        assert dumped["status"] == 0
        assert dumped["activities"][0]["price"] == "26.1099"
        assert dumped["activities"][0]["date"] == "2021-07-15"


class TestPublicSurface:
    """Test the helpers the importer exposes next to parse_pages."""

    def test_text_based(self):
        assert parsing_is_text_based() is True

    def test_can_parse_reexported(self, statement_pages):
        assert can_parse_document(statement_pages, "pdf") is True
