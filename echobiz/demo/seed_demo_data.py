# echobiz/demo/seed_demo_data.py

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from echobiz.storage.history import EventHistory
from echobiz.storage.models import MoneyEvent, MoneyKind


def seed_demo_history(history: EventHistory, now: Optional[datetime] = None) -> EventHistory:
    """Add the two sample transactions shown on a fresh home screen."""
    now = now or datetime.now()
    events = [
        MoneyEvent(
            kind=MoneyKind.DEBIT,
            amount=Decimal("300"),
            counterparty="Suresh",
            occurred_at=now - timedelta(hours=2),
        ),
        MoneyEvent(
            kind=MoneyKind.CREDIT,
            amount=Decimal("500"),
            counterparty="Ramesh",
            occurred_at=now - timedelta(hours=1),
        ),
    ]
    for e in events:
        history.record(e)
    return history


if __name__ == "__main__":
    seeded = seed_demo_history(EventHistory())
    for event in seeded:
        print(event.to_dict())
