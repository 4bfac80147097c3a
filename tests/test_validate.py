"""Unit tests for activity validation and de-duplication."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from quirion_import.services.dividend import create_activities_for_dividend
from quirion_import.services.statement import create_activities_for_statement
from quirion_import.services.validate import dedupe_activities, validate_activity


def make_record(**overrides):
    record = {
        "broker": "quirion",
        "type": "Buy",
        "date": "2021-07-15",
        "datetime": "2021-07-14T22:00:00.000Z",
        "isin": "LU1931974692",
        "company": "Amundi Index Solu.",
        "shares": Decimal("37.722"),
        "price": Decimal("26.1099"),
        "amount": Decimal("984.92"),
        "fee": Decimal(0),
        "tax": Decimal(0),
    }
    record.update(overrides)
    return record


class TestValidateActivity:
    """Test the validate_activity function."""

    def test_valid_record(self):
        activity = validate_activity(make_record())
        assert activity.isin == "LU1931974692"
        assert activity.foreign_currency is None

    def test_foreign_fields(self):
        activity = validate_activity(make_record(foreign_currency="USD", fx_rate=Decimal("1.1231")))
        assert activity.foreign_currency == "USD"

    @pytest.mark.parametrize("overrides", [
        {"type": "TransferIn"},
        {"shares": Decimal(0)},
        {"shares": Decimal("-1")},
        {"price": Decimal("-0.01")},
        {"amount": Decimal("-1")},
        {"isin": "LU193197469"},
        {"company": ""},
        {"company": None},
        {"date": None},
        {"date": "15.07.2021"},
        {"date": "2999-01-01"},
        {"foreign_currency": "usd"},
        {"fx_rate": Decimal(0)},
    ])
    def test_invalid_records(self, overrides):
        """Test every schema rule rejects a broken record."""
        with pytest.raises(ValidationError):
            validate_activity(make_record(**overrides))

    def test_missing_field(self):
        record = make_record()
        del record["tax"]
        with pytest.raises(ValidationError):
            validate_activity(record)


class TestDedupeActivities:
    """Test the dedupe_activities function."""

    def test_statement_and_notice_dividend_collapse(self, statement_dividend_line, eur_notice):
        """Test the same payment from both documents is kept once."""
        from_statement = create_activities_for_statement(statement_dividend_line)
        from_notice = create_activities_for_dividend(eur_notice)

        unique = dedupe_activities(from_statement + from_notice)

        assert len(unique) == 1
        assert unique[0] is from_statement[0]

    def test_different_activities_kept_in_order(self):
        first = validate_activity(make_record())
        second = validate_activity(make_record(type="Sell"))
        third = validate_activity(make_record(amount=Decimal("100")))

        assert dedupe_activities([first, second, first, third]) == [first, second, third]

    def test_empty(self):
        assert dedupe_activities([]) == []
