"""
Name extraction for money and stock commands.

Both extractors run an ordered list of independent matchers and take the
first valid capture:
- Person names (money path) come from Latin-script words next to a
  preposition or verb ("from Ramesh", "Suresh ko", "maine diya Mohan").
- Item names (stock path) come from seven word-order templates, then a scan
  of common inventory items.

A capture that is a unit word ("kg") or a filler word ("to", "maine") is not
valid and the next matcher is tried.
"""

import logging
import re
from functools import lru_cache
from typing import Callable, List, Optional, Pattern, Tuple

from .lexicon import DEFAULT_LEXICON, FILLER_WORDS, Lexicon, first_contained, fold

logger = logging.getLogger(__name__)

DEFAULT_PERSON_NAME = "Unknown"
DEFAULT_ITEM_NAME = "Item"

Matcher = Callable[[str], Optional[str]]

_LATIN_NAME = r"([A-Za-z]+)"
# Devanagari block without the danda punctuation marks
_DEVANAGARI = r"\u0900-\u0963\u0966-\u097F"
_ITEM = r"([A-Za-z" + _DEVANAGARI + r"]+)"
_ITEM_START = r"(?<![A-Za-z" + _DEVANAGARI + r"])"
# Quantities start at the beginning of a digit run
_COUNT = r"(?<!\d)\d+"

# Verb and location keywords around item names. Longer forms first so that
# alternation does not stop at a prefix ("add" inside "added").
_LEADING_ADD = r"(?:purchased|purchase|kharido|bought|stock|jodo|add|buy)"
_LEADING_REDUCE = r"(?:reduce|remove|nikalo|nikala|becha|bechi|sell|sold)"
_TRAILING_VERB = (
    r"(?:purchased|kharida|kharidi|kharide|reduced|removed|bought|nikala|nikali"
    r"|added|becha|bechi|beche|stock|jodo|joda|sold|sell|add"
    r"|खरीदा|खरीदी|बेचा|बेची|निकाला)"
)
_WORD_END = r"(?![A-Za-z" + _DEVANAGARI + r"])"


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:].lower()


def _pattern_matcher(pattern: Pattern, is_valid: Callable[[str], bool]) -> Matcher:
    """Build a matcher returning the first valid capture of ``pattern``."""
    def match(text: str) -> Optional[str]:
        for found in pattern.finditer(text):
            candidate = found.group(1)
            if is_valid(candidate):
                return candidate
        return None
    return match


def _is_person_candidate(word: str) -> bool:
    return fold(word) not in FILLER_WORDS


PERSON_PATTERNS: List[Pattern] = [
    # Preposition before the name: "from Ramesh", "ko Suresh"
    re.compile(r"(?<!\S)(?:from|se|से)\s+" + _LATIN_NAME, re.IGNORECASE),
    re.compile(r"(?<!\S)(?:to|ko|को)\s+" + _LATIN_NAME, re.IGNORECASE),
    # Preposition after the name
    re.compile(r"(?<![A-Za-z])" + _LATIN_NAME + r"\s+(?:se|ko|से|को)(?!\S)", re.IGNORECASE),
    # "maine 500 diya Suresh"
    re.compile(r"(?<!\S)maine\s+(?:\d+\s+)?(?:liya|paya|diya)\s+" + _LATIN_NAME, re.IGNORECASE),
    # "Ramesh liya"
    re.compile(r"(?<![A-Za-z])" + _LATIN_NAME + r"\s+(?:liya|paya|diya|को|से)(?!\S)", re.IGNORECASE),
]

PERSON_MATCHERS: List[Matcher] = [
    _pattern_matcher(pattern, _is_person_candidate) for pattern in PERSON_PATTERNS
]


def extract_person_name(transcript: Optional[str], default: str = DEFAULT_PERSON_NAME) -> str:
    """Extract the counterparty of a money command.

    Args:
        transcript: Raw command text
        default: Name used when no matcher captures a valid name

    Returns:
        Capitalized Latin-script name, or ``default``
    """
    text = transcript or ""
    for index, matcher in enumerate(PERSON_MATCHERS, start=1):
        name = matcher(text)
        if name:
            logger.debug(f"Person rule {index} captured {name!r} from {text!r}")
            return _capitalize(name)
    return default


def _unit_alternation(lexicon: Lexicon) -> str:
    units = sorted(lexicon.units, key=len, reverse=True)
    return "(?:" + "|".join(re.escape(unit) for unit in units) + ")"


@lru_cache(maxsize=8)
def build_item_patterns(lexicon: Lexicon) -> Tuple[Pattern, ...]:
    """Compile the ordered item templates for a lexicon's unit words."""
    unit = _unit_alternation(lexicon)
    templates = [
        # 1. "add 10 atta"
        r"(?<![A-Za-z])" + _LEADING_ADD + r"\s+(?:" + _COUNT + r"\s+)?" + _ITEM,
        # 2. "atta 10 kharida"
        _ITEM_START + _ITEM + r"\s+" + _COUNT + r"\s+" + _TRAILING_VERB + _WORD_END,
        # 3. "stock me atta"
        r"(?<![A-Za-z])(?:inventory|stock)\s+(?:mein|me|में)\s+" + _ITEM,
        # 4. "2 kg atta"
        _COUNT + r"\s*" + unit + r"\s+" + _ITEM,
        # 5. "10 atta add"
        _COUNT + r"\s+" + _ITEM + r"\s+" + _TRAILING_VERB + _WORD_END,
        # 6. "sold 5 soap"
        r"(?<![A-Za-z])" + _LEADING_REDUCE + r"\s+(?:" + _COUNT + r"\s+)?" + _ITEM,
        # 7. "rice sold"
        _ITEM_START + _ITEM + r"\s+" + _TRAILING_VERB + _WORD_END,
    ]
    return tuple(re.compile(template, re.IGNORECASE) for template in templates)


def build_item_matchers(lexicon: Lexicon = DEFAULT_LEXICON) -> List[Matcher]:
    def is_valid(word: str) -> bool:
        folded = fold(word)
        return not lexicon.is_unit(folded) and folded not in FILLER_WORDS

    return [_pattern_matcher(pattern, is_valid) for pattern in build_item_patterns(lexicon)]


def clean_item_name(raw: str) -> str:
    """Strip punctuation (keeping Devanagari) and capitalize."""
    cleaned = re.sub(r"[^\w\s" + _DEVANAGARI + r"]", "", raw)
    cleaned = " ".join(cleaned.split())
    return _capitalize(cleaned)


def extract_item_name(
    transcript: Optional[str],
    lexicon: Lexicon = DEFAULT_LEXICON,
    default: str = DEFAULT_ITEM_NAME,
) -> str:
    """Extract the inventory item of a stock command.

    Pattern templates run first; if none yields a non-unit word, the
    transcript is scanned for a known item name.

    Args:
        transcript: Raw command text
        lexicon: Unit words and known items to use
        default: Name used when both stages fail

    Returns:
        Capitalized item name that is never a unit word, or ``default``
    """
    text = transcript or ""

    raw = None
    for index, matcher in enumerate(build_item_matchers(lexicon), start=1):
        raw = matcher(text)
        if raw:
            logger.debug(f"Item rule {index} captured {raw!r} from {text!r}")
            break

    if not raw:
        raw = first_contained(text, lexicon.items)
        if raw:
            logger.debug(f"Known item {raw!r} found in {text!r}")

    if not raw:
        return default

    name = clean_item_name(raw)
    if not name or lexicon.is_unit(name):
        return default
    return name
