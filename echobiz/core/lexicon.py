"""
Keyword tables for command interpretation.

Static, case-folded word lists for English, Hindi (Devanagari) and Hinglish.
Matching against these tables is plain substring containment through
``contains_any``; a keyword inside a longer unrelated word counts as a hit.
"""

import unicodedata
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple


STOCK_ADD_KEYWORDS: Tuple[str, ...] = (
    # English
    "add", "stock", "buy", "bought", "purchase", "restock",
    # Hinglish
    "kharida", "kharidi", "kharide", "kharido", "jodo", "joda", "daala", "daalo", "mangaya",
    # Hindi
    "जोड़", "जोडा", "खरीद", "स्टॉक", "डाला", "मंगाया",
)

STOCK_REDUCE_KEYWORDS: Tuple[str, ...] = (
    # English
    "reduce", "sell", "sold", "remove", "used up",
    # Hinglish
    "becha", "bechi", "beche", "becho", "nikala", "nikali", "nikalo", "kam kiya", "kam karo",
    # Hindi
    "बेचा", "बेची", "बेचे", "निकाला", "निकाली", "कम किया", "कम करो",
)

CREDIT_KEYWORDS: Tuple[str, ...] = (
    # English
    "received", "got", "took", "credit",
    # Hinglish
    "liya", "liye", "mila", "mile", "paya", "aaya", "jama",
    # Hindi
    "लिया", "लिए", "मिला", "मिले", "पाया", "आया", "जमा", "प्राप्त",
)

DEBIT_KEYWORDS: Tuple[str, ...] = (
    # English
    "paid", "gave", "sent", "debit",
    # Hinglish
    "diya", "diye", "chukaya", "bheja",
    # Hindi
    "दिया", "दिए", "चुकाया", "भेजा", "भुगतान",
)

# Multi-word names come before their prefixes so the longer one wins the scan
COMMON_ITEMS: Tuple[str, ...] = (
    # English
    "rice", "sugar", "salt", "oil", "milk", "tea", "coffee", "soap", "biscuit",
    "bread", "butter", "egg", "flour", "onion", "potato", "tomato", "shampoo",
    "toothpaste", "detergent", "noodles",
    # Hinglish
    "atta", "chawal", "daal", "cheeni", "namak", "tel", "ghee", "doodh",
    "chai patti", "chai", "sabun", "maida", "besan", "haldi", "mirchi", "jeera",
    "pyaz", "aloo", "tamatar", "paneer", "dahi", "poha", "sooji", "maggi",
    # Hindi
    "आटा", "चावल", "दाल", "चीनी", "नमक", "तेल", "घी", "दूध", "चाय", "साबुन", "बिस्कुट",
)

UNIT_WORDS: FrozenSet[str] = frozenset({
    # English
    "kg", "kgs", "kilo", "kilos", "kilogram", "kilograms", "g", "gm", "gms", "gram", "grams",
    "l", "ltr", "litre", "litres", "liter", "liters", "ml",
    "packet", "packets", "pack", "packs", "bag", "bags", "piece", "pieces", "pc", "pcs",
    "bottle", "bottles", "box", "boxes", "dozen", "unit", "units",
    # Hinglish
    "dabba", "dibba", "bori", "botal", "darjan", "thaila", "paketi",
    # Hindi
    "किलो", "ग्राम", "लीटर", "पैकेट", "बोरी", "डिब्बा", "बोतल", "दर्जन", "थैला",
})

# Words a name pattern can syntactically capture but which never name anything
FILLER_WORDS: FrozenSet[str] = frozenset({
    "i", "me", "my", "some", "more", "we", "he", "she", "him", "her", "them", "you", "it",
    "the", "a", "an", "to", "from", "in", "into", "of", "and", "for", "on",
    "maine", "mujhe", "main", "mai", "humne", "hum", "mera", "meri", "usko", "use",
    "ka", "ki", "ke", "ko", "se", "ne", "mein", "hai", "tha", "karo", "kiya", "do",
    "rs", "rupee", "rupees", "rupaye", "rupay", "inr",
    "में", "को", "से", "का", "की", "के", "ने", "मैंने", "मुझे",
})


def fold(text: str) -> str:
    """Case-fold and NFC-normalise text so Devanagari nukta forms compare equal."""
    return unicodedata.normalize("NFC", text).casefold()


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Return True if any keyword occurs in ``text`` (case-insensitive substring)."""
    folded = fold(text)
    return any(fold(keyword) in folded for keyword in keywords)


def first_contained(text: str, candidates: Iterable[str]) -> str:
    """Return the first candidate occurring in ``text``, or an empty string."""
    folded = fold(text)
    for candidate in candidates:
        if fold(candidate) in folded:
            return candidate
    return ""


def _merge(base: Tuple[str, ...], extra: Iterable[str]) -> Tuple[str, ...]:
    merged = list(base)
    for word in extra:
        word = fold(word.strip())
        if word and word not in merged:
            merged.append(word)
    return tuple(merged)


@dataclass(frozen=True)
class Lexicon:
    """Complete set of keyword tables used by the classifier and extractors."""
    stock_added: Tuple[str, ...] = STOCK_ADD_KEYWORDS
    stock_reduced: Tuple[str, ...] = STOCK_REDUCE_KEYWORDS
    credit: Tuple[str, ...] = CREDIT_KEYWORDS
    debit: Tuple[str, ...] = DEBIT_KEYWORDS
    items: Tuple[str, ...] = COMMON_ITEMS
    units: FrozenSet[str] = field(default=UNIT_WORDS)

    def is_unit(self, word: str) -> bool:
        return fold(word) in self.units

    def extended(
        self,
        credit: Iterable[str] = (),
        debit: Iterable[str] = (),
        stock_added: Iterable[str] = (),
        stock_reduced: Iterable[str] = (),
        items: Iterable[str] = (),
        units: Iterable[str] = (),
    ) -> "Lexicon":
        """Return a copy with extra words appended after the built-in ones.

        Built-in entries keep their position so that first-match precedence
        is unchanged by configuration.
        """
        return Lexicon(
            stock_added=_merge(self.stock_added, stock_added),
            stock_reduced=_merge(self.stock_reduced, stock_reduced),
            credit=_merge(self.credit, credit),
            debit=_merge(self.debit, debit),
            items=_merge(self.items, items),
            units=self.units | frozenset(fold(u.strip()) for u in units if u.strip()),
        )


DEFAULT_LEXICON = Lexicon()
