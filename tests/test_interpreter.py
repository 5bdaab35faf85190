"""
Tests for end-to-end command interpretation.
"""
import time
from datetime import datetime
from decimal import Decimal

import pytest

from echobiz.config.loader import DefaultsConfig, EngineSettings
from echobiz.core.interpreter import Rejection, RejectionReason, interpret
from echobiz.storage.models import MoneyEvent, MoneyKind, StockAction, StockEvent

NOW = datetime(2026, 1, 15, 10, 30, 0)


class TestInterpretMoney:
    """Test credit and debit commands."""

    def test_english_credit(self):
        """Test 'I received 500 from Ramesh'."""
        event = interpret("I received 500 from Ramesh", now=NOW)

        assert isinstance(event, MoneyEvent)
        assert event.kind == MoneyKind.CREDIT
        assert event.amount == Decimal("500")
        assert event.counterparty == "Ramesh"
        assert event.occurred_at == NOW

    def test_hinglish_credit(self):
        """Test 'Maine 500 liya Ramesh se'."""
        event = interpret("Maine 500 liya Ramesh se")

        assert event.kind == MoneyKind.CREDIT
        assert event.amount == 500
        assert event.counterparty == "Ramesh"

    def test_hinglish_debit(self):
        """Test '500 diya Suresh ko'."""
        event = interpret("500 diya Suresh ko")

        assert event.kind == MoneyKind.DEBIT
        assert event.amount == 500
        assert event.counterparty == "Suresh"

    def test_amount_default(self):
        """Test that a missing amount falls back to 500."""
        event = interpret("got money from Ramesh")

        assert event.kind == MoneyKind.CREDIT
        assert event.amount == Decimal("500")

    def test_plural_credit_command(self):
        """Test 'Maine Ramesh se 500 liye'."""
        event = interpret("Maine Ramesh se 500 liye")

        assert event.kind == MoneyKind.CREDIT
        assert event.amount == 500
        assert event.counterparty == "Ramesh"

    def test_devanagari_money_command(self):
        """Test a Devanagari credit; the name is not captured."""
        event = interpret("मैंने 500 लिया रमेश से")

        assert event.kind == MoneyKind.CREDIT
        assert event.amount == 500
        assert event.counterparty == "Unknown"


class TestInterpretStock:
    """Test stock add/reduce commands."""

    def test_add_stock(self):
        """Test 'Add 10 atta to stock'."""
        event = interpret("Add 10 atta to stock", now=NOW)

        assert isinstance(event, StockEvent)
        assert event.action == StockAction.ADDED
        assert event.item_name == "Atta"
        assert event.quantity == 10
        assert event.occurred_at == NOW

    def test_reduce_stock(self):
        """Test '2 kg rice sold' skips the unit word."""
        event = interpret("2 kg rice sold")

        assert event.action == StockAction.REDUCED
        assert event.item_name == "Rice"
        assert event.quantity == 2

    def test_devanagari_stock_command(self):
        """Test '5 किलो चावल बेचा'."""
        event = interpret("5 किलो चावल बेचा")

        assert event.action == StockAction.REDUCED
        assert event.item_name == "चावल"
        assert event.quantity == 5

    def test_stock_wins_over_money_keywords(self):
        """Test that a stock keyword overrides co-occurring money keywords."""
        event = interpret("received 10 bags of atta and added to stock")

        assert isinstance(event, StockEvent)
        assert event.action == StockAction.ADDED
        assert event.quantity == 10

    def test_defaults_for_bare_command(self):
        """Test both stock defaults at once."""
        event = interpret("add karo")

        assert event.item_name == "Item"
        assert event.quantity == 1


class TestRejection:
    """Test unrecognized commands."""

    @pytest.mark.parametrize("transcript", ["hello there", "", None, "   "])
    def test_unrecognized(self, transcript):
        """Test that text without any intent keyword is rejected."""
        result = interpret(transcript)

        assert isinstance(result, Rejection)
        assert result.reason == RejectionReason.UNRECOGNIZED

    def test_rejection_keeps_transcript(self):
        """Test that the rejection carries the original text."""
        result = interpret("hello there")

        assert result.transcript == "hello there"
        assert result.to_dict() == {"reason": "unrecognized"}


class TestInterpretProperties:
    """Test guarantees that hold for every input."""

    @pytest.mark.parametrize("transcript", [
        "I received 500 from Ramesh",
        "500 diya Suresh ko",
        "Add 10 atta to stock",
        "2 kg rice sold",
    ])
    def test_deterministic_apart_from_id(self, transcript):
        """Test that the same text always produces the same event content."""
        first = interpret(transcript, now=NOW).to_dict()
        second = interpret(transcript, now=NOW).to_dict()

        assert first.pop("id") != second.pop("id")
        assert first == second

    @pytest.mark.parametrize("transcript", [
        "0 diya Suresh ko",
        "sold 0 soap",
        "received from",
        "stock",
        "paid to me",
        "becha 5 kg",
    ])
    def test_events_are_positive_and_named(self, transcript):
        """Test that every event has a positive quantity and a non-empty name."""
        event = interpret(transcript)

        if isinstance(event, MoneyEvent):
            assert event.amount > 0
            assert event.counterparty
        else:
            assert event.quantity > 0
            assert event.item_name

    def test_long_input_is_interpreted_quickly(self):
        """Test that a very long digit run is handled in linear time."""
        start = time.perf_counter()
        event = interpret("sold " + "1" * 10000)
        elapsed = time.perf_counter() - start

        assert isinstance(event, StockEvent)
        assert event.quantity > 0
        assert event.item_name == "Item"
        assert elapsed < 1.0

    def test_unique_ids(self):
        """Test that every event gets its own id."""
        ids = {interpret("Add 10 atta to stock").id for _ in range(20)}
        assert len(ids) == 20


class TestInterpretSettings:
    """Test interpretation with configured settings."""

    def test_configured_defaults(self):
        """Test overriding the fallback amount and person name."""
        settings = EngineSettings(
            defaults=DefaultsConfig(money_amount=Decimal("100"), person_name="Customer")
        )
        event = interpret("got money", settings)

        assert event.amount == Decimal("100")
        assert event.counterparty == "Customer"

    def test_configured_stock_defaults(self):
        """Test overriding the fallback quantity and item name."""
        settings = EngineSettings(
            defaults=DefaultsConfig(stock_quantity=2, item_name="Saman")
        )
        event = interpret("add karo", settings)

        assert event.quantity == 2
        assert event.item_name == "Saman"

    def test_configured_keywords(self):
        """Test that extra keywords change classification."""
        lexicon = EngineSettings().lexicon.extended(debit=["udhaar chukta"])
        settings = EngineSettings(lexicon=lexicon)

        assert isinstance(interpret("udhaar chukta 200", settings), MoneyEvent)
        assert isinstance(interpret("udhaar chukta 200"), Rejection)
