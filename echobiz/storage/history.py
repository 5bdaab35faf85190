"""
In-memory event history.

Holds recorded events newest-first. The history is owned by the caller (CLI
session, host application); the interpretation engine never touches it.
"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, Iterator, List, Optional

from .models import Event, MoneyEvent, MoneyKind, StockAction, StockEvent

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50


class EventHistory:
    """Rolling, newest-first list of money and stock events.

    Events are only ever prepended; once ``limit`` is reached the oldest
    entry is dropped.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT, events: Optional[Iterable[Event]] = None):
        """Initialize the history.

        Args:
            limit: Maximum number of events retained
            events: Initial events, newest first
        """
        if limit <= 0:
            raise ValueError("history limit must be > 0")
        self.limit = limit
        self._events: List[Event] = list(events or [])[:limit]

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def record(self, event: Event) -> Event:
        """Prepend an event and return it."""
        self._events.insert(0, event)
        if len(self._events) > self.limit:
            dropped = self._events.pop()
            logger.debug(f"History full, dropped event {dropped.id}")
        return event

    def recent(self, count: int = 5) -> List[Event]:
        """Newest ``count`` events."""
        return self._events[:count]

    def money_events(self) -> List[MoneyEvent]:
        return [e for e in self._events if isinstance(e, MoneyEvent)]

    def stock_events(self) -> List[StockEvent]:
        return [e for e in self._events if isinstance(e, StockEvent)]

    def net_balance(self) -> Decimal:
        """Credits minus debits over the retained events."""
        total = Decimal("0")
        for event in self.money_events():
            if event.kind == MoneyKind.CREDIT:
                total += event.amount
            else:
                total -= event.amount
        return total

    def stock_levels(self) -> Dict[str, int]:
        """Net quantity per item name (added minus reduced)."""
        levels: Dict[str, int] = defaultdict(int)
        for event in self.stock_events():
            sign = 1 if event.action == StockAction.ADDED else -1
            levels[event.item_name] += sign * event.quantity
        return dict(levels)
