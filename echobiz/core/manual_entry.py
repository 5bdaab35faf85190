"""
Manual event entry.

Direct constructors for events typed into a form, bypassing the classifier.
Input is validated strictly; nothing is created from a partial form.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from echobiz.storage.models import MoneyEvent, MoneyKind, StockAction, StockEvent


class InvalidManualInput(ValueError):
    """Raised when a manual entry is missing a field or has a non-positive value."""
    def __init__(self, title: str, message: str, field: str):
        super().__init__(message)
        self.title = title
        self.field = field


def _parse_kind(kind: Union[MoneyKind, str]) -> MoneyKind:
    try:
        return kind if isinstance(kind, MoneyKind) else MoneyKind(str(kind).lower())
    except ValueError:
        raise InvalidManualInput("Invalid Type", f"Unknown transaction type: {kind}", "kind")


def _parse_action(action: Union[StockAction, str]) -> StockAction:
    try:
        return action if isinstance(action, StockAction) else StockAction(str(action).lower())
    except ValueError:
        raise InvalidManualInput("Invalid Type", f"Unknown stock action: {action}", "action")


def create_money_event(
    kind: Union[MoneyKind, str],
    amount: Union[Decimal, int, float, str, None],
    person: Optional[str],
    now: Optional[datetime] = None,
) -> MoneyEvent:
    """Create a credit or debit from manual input.

    Args:
        kind: MoneyKind or its value ("credit"/"debit")
        amount: Positive amount; strings are parsed
        person: Counterparty name
        now: Timestamp override

    Returns:
        New MoneyEvent

    Raises:
        InvalidManualInput: If a field is missing or the amount is not > 0
    """
    money_kind = _parse_kind(kind)
    if amount is None or not str(amount).strip():
        raise InvalidManualInput("Missing Information", "Please enter both amount and person name", "amount")
    if person is None or not str(person).strip():
        raise InvalidManualInput("Missing Information", "Please enter both amount and person name", "person")

    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation:
        raise InvalidManualInput("Invalid Amount", "Please enter a valid amount", "amount")
    if not value.is_finite() or value <= 0:
        raise InvalidManualInput("Invalid Amount", "Please enter a valid amount", "amount")

    return MoneyEvent(
        kind=money_kind,
        amount=value,
        counterparty=str(person).strip(),
        occurred_at=now or datetime.now(),
    )


def create_stock_event(
    action: Union[StockAction, str],
    item_name: Optional[str],
    quantity: Union[int, str, None],
    now: Optional[datetime] = None,
) -> StockEvent:
    """Create a stock change from manual input.

    Raises:
        InvalidManualInput: If a field is missing or the quantity is not a positive integer
    """
    stock_action = _parse_action(action)
    if item_name is None or not str(item_name).strip():
        raise InvalidManualInput("Missing Information", "Please enter both item name and quantity", "item_name")
    if quantity is None or not str(quantity).strip():
        raise InvalidManualInput("Missing Information", "Please enter both item name and quantity", "quantity")

    if isinstance(quantity, bool):
        raise InvalidManualInput("Invalid Quantity", "Please enter a valid quantity", "quantity")
    try:
        value = int(str(quantity).strip())
    except ValueError:
        raise InvalidManualInput("Invalid Quantity", "Please enter a valid quantity", "quantity")
    if value <= 0:
        raise InvalidManualInput("Invalid Quantity", "Please enter a valid quantity", "quantity")

    return StockEvent(
        item_name=str(item_name).strip(),
        quantity=value,
        action=stock_action,
        occurred_at=now or datetime.now(),
    )
