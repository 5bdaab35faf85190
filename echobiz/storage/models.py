"""
Data models for ledger and inventory events.

Defines the immutable records produced by voice commands and manual entry.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Union
from uuid import uuid4


class MoneyKind(Enum):
    """Direction of a money transfer."""
    CREDIT = "credit"
    DEBIT = "debit"


class StockAction(Enum):
    """Direction of a stock change."""
    ADDED = "added"
    REDUCED = "reduced"


def _new_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class MoneyEvent:
    """Immutable record of money received (credit) or paid (debit).

    Once created, these records must never be modified.
    """
    kind: MoneyKind
    amount: Decimal
    counterparty: str
    occurred_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "amount": float(self.amount),
            "counterparty": self.counterparty,
            "timestamp": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class StockEvent:
    """Immutable record of stock added to or reduced from inventory."""
    item_name: str
    quantity: int
    action: StockAction
    occurred_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "action": self.action.value,
            "item_name": self.item_name,
            "quantity": self.quantity,
            "timestamp": self.occurred_at.isoformat(),
        }


Event = Union[MoneyEvent, StockEvent]
