"""
User-facing texts per language.

Greetings, example commands and the acknowledgement shown after each
command.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Union

from echobiz.storage.models import MoneyEvent, MoneyKind, StockAction, StockEvent


class Language(Enum):
    """Languages offered for voice commands."""
    HINDI = "hi"
    ENGLISH = "en"
    HINGLISH = "hinglish"


GREETINGS: Dict[Language, str] = {
    Language.HINDI: "नमस्ते! आज क्या काम है?",
    Language.HINGLISH: "Namaste! Aaj kya kaam hai?",
    Language.ENGLISH: "Hello! What would you like to do today?",
}

EXAMPLE_COMMANDS: Dict[Language, List[str]] = {
    Language.HINDI: [
        "मैंने 500 लिया रमेश से",
        "500 दिया सुरेश को",
        "5 किलो चावल बेचा",
    ],
    Language.HINGLISH: [
        "Maine 500 liya Ramesh se",
        "500 diya Suresh ko",
        "10 atta kharida",
    ],
    Language.ENGLISH: [
        "I received 500 from Ramesh",
        "I paid 500 to Suresh",
        "Add 10 atta to stock",
    ],
}


@dataclass(frozen=True)
class Acknowledgement:
    """Short notice shown to the user after a command."""
    title: str
    description: str


UNRECOGNIZED_ACK = Acknowledgement(
    title="Unknown Command",
    description="Could not detect credit, debit or stock action.",
)


def greeting(language: Language) -> str:
    return GREETINGS[language]


def example_commands(language: Language) -> List[str]:
    return list(EXAMPLE_COMMANDS[language])


def format_amount(amount: Decimal) -> str:
    """Rupee amount without trailing zeros after the decimal point."""
    text = f"{Decimal(str(amount)):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"₹{text}"


def acknowledge(event: Union[MoneyEvent, StockEvent]) -> Acknowledgement:
    """Build the acknowledgement for a recorded event."""
    if isinstance(event, MoneyEvent):
        amount = format_amount(event.amount)
        if event.kind == MoneyKind.CREDIT:
            return Acknowledgement("✅ Credit Added", f"{amount} received from {event.counterparty}")
        return Acknowledgement("💸 Payment Added", f"{amount} paid to {event.counterparty}")

    if event.action == StockAction.ADDED:
        return Acknowledgement("📦 Stock Added", f"{event.quantity} {event.item_name} added to stock")
    return Acknowledgement("📦 Stock Reduced", f"{event.quantity} {event.item_name} removed from stock")
