"""
Command interpretation.

Turns one transcript into a money event, a stock event, or a rejection.

Interpretation mirrors what the shopkeeper said with these guarantees:
1. No side effects (the caller decides whether to record the event)
2. No exceptions for malformed or empty text (a Rejection is returned)
3. Deterministic results for the same transcript, apart from id and timestamp
4. Every event carries a positive quantity and a non-empty name
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from .classifier import ClassificationResult, Intent, classify_transcript
from .names import extract_item_name, extract_person_name
from .quantity import QuantityKind, extract_quantity
from echobiz.config.loader import EngineSettings
from echobiz.storage.models import MoneyEvent, MoneyKind, StockAction, StockEvent

logger = logging.getLogger(__name__)


class RejectionReason(Enum):
    """Why a transcript produced no event."""
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Rejection:
    """No credit, debit or stock action was detected."""
    reason: RejectionReason
    transcript: str

    def to_dict(self) -> Dict[str, Any]:
        return {"reason": self.reason.value}


InterpretResult = Union[MoneyEvent, StockEvent, Rejection]

_MONEY_KINDS = {Intent.CREDIT: MoneyKind.CREDIT, Intent.DEBIT: MoneyKind.DEBIT}
_STOCK_ACTIONS = {Intent.STOCK_ADDED: StockAction.ADDED, Intent.STOCK_REDUCED: StockAction.REDUCED}


def interpret(
    transcript: Optional[str],
    settings: Optional[EngineSettings] = None,
    now: Optional[datetime] = None,
) -> InterpretResult:
    """Interpret a single command transcript.

    Args:
        transcript: Text of a spoken or typed command. None counts as empty.
        settings: Lexicon and defaults to use. None uses built-in settings.
        now: Timestamp for the event. Defaults to the current time.

    Returns:
        MoneyEvent for credit/debit, StockEvent for stock changes,
        Rejection(UNRECOGNIZED) when no intent keyword is present
    """
    settings = settings or EngineSettings()
    classification = classify_transcript(transcript, settings.lexicon)

    if classification.intent == Intent.UNRECOGNIZED:
        logger.info(f"No credit/debit/stock action detected in {classification.raw_transcript!r}")
        return Rejection(RejectionReason.UNRECOGNIZED, classification.raw_transcript)

    occurred_at = now or datetime.now()
    if classification.intent.is_stock:
        return _build_stock_event(classification, settings, occurred_at)
    return _build_money_event(classification, settings, occurred_at)


def _build_stock_event(
    classification: ClassificationResult,
    settings: EngineSettings,
    occurred_at: datetime,
) -> StockEvent:
    text = classification.raw_transcript
    event = StockEvent(
        item_name=extract_item_name(text, settings.lexicon, settings.defaults.item_name),
        quantity=extract_quantity(text, QuantityKind.STOCK, settings.defaults.stock_quantity),
        action=_STOCK_ACTIONS[classification.intent],
        occurred_at=occurred_at,
    )
    logger.debug(f"Stock event: {event.action.value} {event.quantity} {event.item_name}")
    return event


def _build_money_event(
    classification: ClassificationResult,
    settings: EngineSettings,
    occurred_at: datetime,
) -> MoneyEvent:
    text = classification.raw_transcript
    event = MoneyEvent(
        kind=_MONEY_KINDS[classification.intent],
        amount=extract_quantity(text, QuantityKind.MONEY, settings.defaults.money_amount),
        counterparty=extract_person_name(text, settings.defaults.person_name),
        occurred_at=occurred_at,
    )
    logger.debug(f"Money event: {event.kind.value} {event.amount} {event.counterparty}")
    return event
