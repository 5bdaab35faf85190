"""
Tests for manual transaction and stock entry.
"""
from datetime import datetime
from decimal import Decimal

import pytest

from echobiz.core.manual_entry import InvalidManualInput, create_money_event, create_stock_event
from echobiz.storage.models import MoneyKind, StockAction


class TestCreateMoneyEvent:
    """Test manual credit/debit entry."""

    def test_valid_credit(self):
        """Test a well-formed credit entry."""
        now = datetime(2026, 1, 15, 9, 0, 0)
        event = create_money_event("credit", "750", "Ramesh", now=now)

        assert event.kind == MoneyKind.CREDIT
        assert event.amount == Decimal("750")
        assert event.counterparty == "Ramesh"
        assert event.occurred_at == now

    def test_enum_kind_and_numeric_amount(self):
        """Test passing enum and number values directly."""
        event = create_money_event(MoneyKind.DEBIT, 120.5, "Suresh")

        assert event.kind == MoneyKind.DEBIT
        assert event.amount == Decimal("120.5")

    def test_person_is_trimmed(self):
        """Test surrounding whitespace is removed from the name."""
        assert create_money_event("debit", 10, "  Mohan ").counterparty == "Mohan"

    @pytest.mark.parametrize("amount,person,field", [
        ("", "Ramesh", "amount"),
        (None, "Ramesh", "amount"),
        ("100", "", "person"),
        ("100", "   ", "person"),
        ("100", None, "person"),
    ])
    def test_missing_fields(self, amount, person, field):
        """Test that a partial form is refused."""
        with pytest.raises(InvalidManualInput) as exc_info:
            create_money_event("credit", amount, person)

        assert exc_info.value.title == "Missing Information"
        assert str(exc_info.value) == "Please enter both amount and person name"
        assert exc_info.value.field == field

    @pytest.mark.parametrize("amount", ["0", "-5", "abc", "nan", "inf", 0, -1])
    def test_invalid_amounts(self, amount):
        """Test that zero, negative and non-numeric amounts are refused."""
        with pytest.raises(InvalidManualInput) as exc_info:
            create_money_event("credit", amount, "Ramesh")

        assert exc_info.value.title == "Invalid Amount"
        assert str(exc_info.value) == "Please enter a valid amount"

    def test_unknown_kind(self):
        """Test that an unknown transaction type is refused."""
        with pytest.raises(InvalidManualInput) as exc_info:
            create_money_event("refund", "100", "Ramesh")

        assert exc_info.value.title == "Invalid Type"
        assert exc_info.value.field == "kind"

    def test_invalid_input_is_a_value_error(self):
        """Test callers can catch ValueError."""
        with pytest.raises(ValueError):
            create_money_event("credit", "0", "Ramesh")


class TestCreateStockEvent:
    """Test manual stock entry."""

    def test_valid_stock_added(self):
        """Test a well-formed stock entry."""
        event = create_stock_event("added", "Sugar", "5")

        assert event.action == StockAction.ADDED
        assert event.item_name == "Sugar"
        assert event.quantity == 5

    def test_item_name_kept_as_typed(self):
        """Test that manual item names are trimmed but not re-capitalized."""
        event = create_stock_event(StockAction.REDUCED, " chai patti ", 2)

        assert event.item_name == "chai patti"
        assert event.action == StockAction.REDUCED

    @pytest.mark.parametrize("item,quantity", [
        ("", "5"),
        ("Sugar", ""),
        (None, 5),
        ("Sugar", None),
    ])
    def test_missing_fields(self, item, quantity):
        """Test that a partial form is refused."""
        with pytest.raises(InvalidManualInput) as exc_info:
            create_stock_event("added", item, quantity)

        assert exc_info.value.title == "Missing Information"
        assert str(exc_info.value) == "Please enter both item name and quantity"

    @pytest.mark.parametrize("quantity", ["0", "-3", "2.5", "many", 0, True])
    def test_invalid_quantities(self, quantity):
        """Test that non-positive or non-integer quantities are refused."""
        with pytest.raises(InvalidManualInput) as exc_info:
            create_stock_event("added", "Sugar", quantity)

        assert exc_info.value.title == "Invalid Quantity"
        assert exc_info.value.field == "quantity"

    def test_unknown_action(self):
        """Test that an unknown stock action is refused."""
        with pytest.raises(InvalidManualInput) as exc_info:
            create_stock_event("moved", "Sugar", 1)

        assert exc_info.value.field == "action"
