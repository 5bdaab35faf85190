"""
Configuration management and loading.

Handles engine defaults, lexicon extensions and session settings.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from echobiz.core.lexicon import DEFAULT_LEXICON, Lexicon
from echobiz.core.messages import Language
from echobiz.core.names import DEFAULT_ITEM_NAME, DEFAULT_PERSON_NAME
from echobiz.core.quantity import DEFAULT_MONEY_AMOUNT, DEFAULT_STOCK_QUANTITY
from echobiz.storage.history import DEFAULT_HISTORY_LIMIT

KEYWORD_CATEGORIES = ("credit", "debit", "stock_added", "stock_reduced")


@dataclass(frozen=True)
class DefaultsConfig:
    """Fallback values used when a transcript lacks a number or a name."""
    money_amount: Decimal = DEFAULT_MONEY_AMOUNT
    stock_quantity: int = DEFAULT_STOCK_QUANTITY
    person_name: str = DEFAULT_PERSON_NAME
    item_name: str = DEFAULT_ITEM_NAME

    def __post_init__(self):
        """Validate defaults keep every event positive and named."""
        if self.money_amount <= 0:
            raise ValueError("money_amount must be > 0")
        if self.stock_quantity <= 0:
            raise ValueError("stock_quantity must be > 0")
        if not self.person_name.strip():
            raise ValueError("person_name cannot be empty")
        if not self.item_name.strip():
            raise ValueError("item_name cannot be empty")


@dataclass(frozen=True)
class EngineSettings:
    """Complete engine and session configuration."""
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    lexicon: Lexicon = DEFAULT_LEXICON
    history_limit: int = DEFAULT_HISTORY_LIMIT
    language: Language = Language.ENGLISH

    def __post_init__(self):
        if self.history_limit <= 0:
            raise ValueError("history limit must be > 0")


def load_settings(path: Optional[str] = None) -> EngineSettings:
    """Load and validate engine settings from a YAML file.

    Strict validation ensures a typo in the config never silently
    changes how commands are interpreted.

    Args:
        path: Path to YAML configuration file. None returns built-in settings.

    Returns:
        Validated EngineSettings object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If configuration is invalid
    """
    if path is None:
        return EngineSettings()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    if not raw_config:
        raise ValueError("Configuration file is empty")
    if not isinstance(raw_config, dict):
        raise ValueError("Configuration must be a dictionary")

    allowed_top_keys = {'defaults', 'keywords', 'items', 'units', 'history', 'language'}
    unknown_keys = set(raw_config.keys()) - allowed_top_keys
    if unknown_keys:
        raise ValueError(f"Unknown configuration keys: {unknown_keys}")

    defaults = _parse_defaults(raw_config.get('defaults', {}))

    keywords = _parse_keywords(raw_config.get('keywords', {}))
    items = _parse_word_list(raw_config.get('items', []), "items")
    units = _parse_word_list(raw_config.get('units', []), "units")
    lexicon = DEFAULT_LEXICON.extended(items=items, units=units, **keywords)

    history_limit = _parse_history(raw_config.get('history', {}))

    language_str = raw_config.get('language', Language.ENGLISH.value)
    if not isinstance(language_str, str):
        raise ValueError("'language' must be a string")
    try:
        language = Language(language_str.lower())
    except ValueError:
        valid_languages = [language.value for language in Language]
        raise ValueError(f"'language' must be one of: {valid_languages}")

    return EngineSettings(
        defaults=defaults,
        lexicon=lexicon,
        history_limit=history_limit,
        language=language,
    )


def _parse_defaults(data: Dict) -> DefaultsConfig:
    """Parse and validate the defaults section.

    Raises:
        ValueError: If the section is invalid
    """
    if not isinstance(data, dict):
        raise ValueError("'defaults' must be a dictionary")

    allowed_keys = {'money_amount', 'stock_quantity', 'person_name', 'item_name'}
    unknown_keys = set(data.keys()) - allowed_keys
    if unknown_keys:
        raise ValueError(f"Unknown keys in defaults: {unknown_keys}")

    money_amount = data.get('money_amount', DEFAULT_MONEY_AMOUNT)
    if isinstance(money_amount, bool) or not isinstance(money_amount, (int, float, str, Decimal)):
        raise ValueError("'money_amount' in defaults must be a number")
    try:
        money_amount = Decimal(str(money_amount))
    except InvalidOperation:
        raise ValueError("'money_amount' in defaults must be a number")
    if money_amount <= 0:
        raise ValueError("'money_amount' in defaults must be > 0")

    stock_quantity = data.get('stock_quantity', DEFAULT_STOCK_QUANTITY)
    if isinstance(stock_quantity, bool) or not isinstance(stock_quantity, int) or stock_quantity <= 0:
        raise ValueError("'stock_quantity' in defaults must be a positive integer")

    person_name = data.get('person_name', DEFAULT_PERSON_NAME)
    item_name = data.get('item_name', DEFAULT_ITEM_NAME)
    for key, value in (('person_name', person_name), ('item_name', item_name)):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"'{key}' in defaults must be a non-empty string")

    return DefaultsConfig(
        money_amount=money_amount,
        stock_quantity=stock_quantity,
        person_name=person_name.strip(),
        item_name=item_name.strip(),
    )


def _parse_keywords(data: Dict) -> Dict[str, List[str]]:
    """Parse extra keywords per intent category."""
    if not isinstance(data, dict):
        raise ValueError("'keywords' must be a dictionary")

    unknown_keys = set(data.keys()) - set(KEYWORD_CATEGORIES)
    if unknown_keys:
        raise ValueError(f"Unknown keyword categories: {unknown_keys}")

    return {
        category: _parse_word_list(words, f"keywords.{category}")
        for category, words in data.items()
    }


def _parse_word_list(data, path: str) -> List[str]:
    if not isinstance(data, list):
        raise ValueError(f"'{path}' must be a list")
    words = []
    for word in data:
        if not isinstance(word, str) or not word.strip():
            raise ValueError(f"'{path}' must contain only non-empty strings")
        words.append(word.strip())
    return words


def _parse_history(data: Dict) -> int:
    if not isinstance(data, dict):
        raise ValueError("'history' must be a dictionary")

    unknown_keys = set(data.keys()) - {'limit'}
    if unknown_keys:
        raise ValueError(f"Unknown keys in history: {unknown_keys}")

    limit = data.get('limit', DEFAULT_HISTORY_LIMIT)
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValueError("'limit' in history must be a positive integer")
    return limit
