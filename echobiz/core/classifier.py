"""
Intent classification for shop commands.

Decides whether a transcript records a credit, a debit, a stock addition or a
stock reduction.

Check Order:
1. Stock-add keywords - "kharida" and friends describe a purchase of stock
2. Stock-reduce keywords
3. Credit keywords
4. Debit keywords
The first category with a keyword contained in the transcript wins.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .lexicon import DEFAULT_LEXICON, Lexicon, contains_any

logger = logging.getLogger(__name__)


class Intent(Enum):
    """Purpose of an utterance."""
    CREDIT = "credit"
    DEBIT = "debit"
    STOCK_ADDED = "stock_added"
    STOCK_REDUCED = "stock_reduced"
    UNRECOGNIZED = "unrecognized"

    @property
    def is_stock(self) -> bool:
        return self in (Intent.STOCK_ADDED, Intent.STOCK_REDUCED)

    @property
    def is_money(self) -> bool:
        return self in (Intent.CREDIT, Intent.DEBIT)


@dataclass(frozen=True)
class ClassificationResult:
    """Intent paired with the transcript it was derived from."""
    intent: Intent
    raw_transcript: str


def classify(transcript: Optional[str], lexicon: Lexicon = DEFAULT_LEXICON) -> Intent:
    """Classify a transcript into exactly one intent.

    Args:
        transcript: Raw command text, any case or script. None counts as empty.
        lexicon: Keyword tables to match against

    Returns:
        The first matching Intent in check order, or Intent.UNRECOGNIZED
    """
    text = transcript or ""

    ordered_checks = (
        (Intent.STOCK_ADDED, lexicon.stock_added),
        (Intent.STOCK_REDUCED, lexicon.stock_reduced),
        (Intent.CREDIT, lexicon.credit),
        (Intent.DEBIT, lexicon.debit),
    )
    for intent, keywords in ordered_checks:
        if contains_any(text, keywords):
            logger.debug(f"Classified {text!r} as {intent.value}")
            return intent

    logger.debug(f"No intent keyword found in {text!r}")
    return Intent.UNRECOGNIZED


def classify_transcript(
    transcript: Optional[str],
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> ClassificationResult:
    """Classify and keep the raw transcript alongside the intent."""
    text = transcript or ""
    return ClassificationResult(intent=classify(text, lexicon), raw_transcript=text)
