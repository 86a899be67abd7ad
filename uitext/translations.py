import os
import json
import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

# Single source of truth for the Chinese UI strings
# Key: canonical English phrase (exact match)
# Value: Simplified Chinese translation
DEFAULT_TABLE_PATH = os.path.join(os.path.dirname(__file__), 'data', 'zh_CN.json')

# LANGUAGE=en switches every known phrase back to English
ENGLISH = 'en'


class TranslationTableError(ValueError):
    """Raised when a translation table file cannot be used."""


class DuplicateTranslationError(TranslationTableError):
    def __init__(self, key, first, second):
        super().__init__(f"Duplicate translation for '{key}': '{first}' vs '{second}'")
        self.key = key
        self.first = first
        self.second = second


class InvalidTranslationError(TranslationTableError):
    pass


def _unique_pairs(pairs):
    table = {}
    for key, value in pairs:
        if key in table:
            raise DuplicateTranslationError(key, table[key], value)
        table[key] = value
    return table


def load_table(path):
    """
    Load a flat JSON object of English -> Chinese phrases.
    Duplicate keys and empty values are rejected instead of last-write-wins.
    Returns a read-only mapping.
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f, object_pairs_hook=_unique_pairs)

    if not isinstance(data, dict):
        raise InvalidTranslationError(f"{path}: expected a JSON object, got {type(data).__name__}")

    for key, value in data.items():
        if not key:
            raise InvalidTranslationError(f"{path}: empty phrase used as a key")
        if not isinstance(value, str) or not value:
            raise InvalidTranslationError(f"{path}: translation for '{key}' must be a non-empty string")

    logger.info(f"Loaded {len(data)} translations from {os.path.basename(path)}")
    return MappingProxyType(data)


TRANSLATIONS = load_table(DEFAULT_TABLE_PATH)


def get_language_preference():
    """Current LANGUAGE value, read on every call."""
    return os.environ.get('LANGUAGE')


def is_english(language):
    return language == ENGLISH


def translate(english, language=None):
    """
    Translate a UI phrase. Unknown phrases come back unchanged.
    Known phrases stay English when the preference is 'en'.
    `language` overrides the LANGUAGE environment variable when given.
    """
    chinese = TRANSLATIONS.get(english)
    if chinese is None:
        return english

    if language is None:
        language = get_language_preference()
    if is_english(language):
        return english
    return chinese
