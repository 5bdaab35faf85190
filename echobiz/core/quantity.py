"""
Numeric quantity extraction.

Pulls the first number out of a transcript. Money amounts may carry a single
decimal point; stock quantities are whole numbers.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_MONEY_AMOUNT = Decimal("500")
DEFAULT_STOCK_QUANTITY = 1

_MONEY_PATTERN = re.compile(r"\d+(?:\.\d+)?")
_STOCK_PATTERN = re.compile(r"\d+")


class QuantityKind(Enum):
    """What the extracted number measures."""
    MONEY = "money"
    STOCK = "stock"


def extract_quantity(
    transcript: Optional[str],
    kind: QuantityKind,
    default: Optional[Union[Decimal, int]] = None,
) -> Union[Decimal, int]:
    """Extract the first number in the transcript.

    Only the first digit run is used; "received 500 but paid 200" yields 500.
    A missing number, or one that parses to zero, gives the default.

    Args:
        transcript: Raw command text
        kind: MONEY returns a Decimal, STOCK returns an int
        default: Override for the fallback value (500 for money, 1 for stock)

    Returns:
        A strictly positive Decimal (money) or int (stock)
    """
    if kind == QuantityKind.MONEY:
        fallback = DEFAULT_MONEY_AMOUNT if default is None else Decimal(default)
        pattern = _MONEY_PATTERN
    else:
        fallback = DEFAULT_STOCK_QUANTITY if default is None else int(default)
        pattern = _STOCK_PATTERN

    match = pattern.search(transcript or "")
    if not match:
        logger.debug(f"No number in {transcript!r}, using default {fallback}")
        return fallback

    token = match.group(0)
    try:
        value = Decimal(token) if kind == QuantityKind.MONEY else int(token)
    except (InvalidOperation, ValueError):
        logger.debug(f"Unparseable number {token!r}, using default {fallback}")
        return fallback

    if value <= 0:
        logger.debug(f"Non-positive number {token!r}, using default {fallback}")
        return fallback
    return value
