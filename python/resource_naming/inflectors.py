"""
Locale-bound inflectors: pluralization and CamelCase → snake_case conversion.

English is delegated to the `inflection` package. Other locales use a
RuleTableInflector built from the tables in constants.LOCALE_RULES; their
underscore() still comes from `inflection`, since casing rules do not vary
by language.
"""

import re
import threading
from functools import partial
from typing import Callable, Iterable, Optional, Protocol, runtime_checkable

import inflection

from .constants import DEFAULT_LOCALE, LOCALE_RULES
from .errors import InvalidInflectorError, UnknownLocaleError
from .logging_config import get_logger

logger = get_logger("inflectors")


@runtime_checkable
class Inflector(Protocol):
    """
    Capability consumed by naming strategies.

    Any object exposing these two methods can be injected, which lets tests
    substitute their own rule tables.
    """

    def pluralize(self, word: str) -> str:
        """Return the plural form of word (CamelCase input allowed)."""
        ...

    def underscore(self, word: str) -> str:
        """Convert CamelCase/camelCase to snake_case."""
        ...


class EnglishInflector:
    """English rules from the `inflection` package."""

    locale = "en"

    def pluralize(self, word: str) -> str:
        return inflection.pluralize(word)

    def underscore(self, word: str) -> str:
        return inflection.underscore(word)

    def __repr__(self) -> str:
        return "EnglishInflector()"


def _irregular_rule(singular: str, plural: str):
    """
    Compile an irregular pair into an end-anchored rule.

    The singular must start the word or start a CamelCase component, so
    "FacturaMes" → "FacturaMeses" but "Crimes" is left to the suffix rules.
    The case of the first letter is kept: "Mes" → "Meses", "mes" → "meses".
    """
    first, rest = singular[0].lower(), singular[1:]
    upper = first.upper()
    pattern = re.compile(
        f"(^[{re.escape(first)}{re.escape(upper)}]|{re.escape(upper)})"
        f"(?i:{re.escape(rest)})$"
    )

    def replace(match: re.Match) -> str:
        if match.group(1).isupper():
            return plural[0].upper() + plural[1:]
        return plural

    return pattern, replace


class RuleTableInflector:
    """
    Inflector driven by an ordered table of suffix rules.

    Resolution order for pluralize():
        1. Uncountable words are returned unchanged
        2. Irregular words are replaced, keeping the first letter's case
        3. The first rule whose pattern matches the end of the word is applied

    Irregulars and suffix rules match the end of the word, so CamelCase
    names pluralize their last component: "LineaPedido" → "LineaPedidos",
    "FacturaMes" → "FacturaMeses".
    """

    def __init__(
        self,
        locale: str,
        plurals: Iterable[tuple[str, str]],
        irregulars: Optional[dict[str, str]] = None,
        uncountables: Iterable[str] = (),
    ):
        self.locale = locale
        # Longest irregular first: "alemão" must win over "mão"
        irregular_pairs = sorted(
            (irregulars or {}).items(), key=lambda pair: len(pair[0]), reverse=True
        )
        self._rules = [_irregular_rule(s, p) for s, p in irregular_pairs]
        self._rules += [
            (re.compile(pattern, re.IGNORECASE), replacement)
            for pattern, replacement in plurals
        ]
        self._uncountables = frozenset(w.lower() for w in uncountables)

    @classmethod
    def from_table(cls, locale: str) -> "RuleTableInflector":
        """Build an inflector from the bundled rule table for locale."""
        table = LOCALE_RULES[locale]
        return cls(
            locale,
            plurals=table["plurals"],
            irregulars=table["irregulars"],
            uncountables=table["uncountables"],
        )

    def pluralize(self, word: str) -> str:
        if not word or word.lower() in self._uncountables:
            return word

        for pattern, replacement in self._rules:
            if pattern.search(word):
                return pattern.sub(replacement, word, count=1)

        return word

    def underscore(self, word: str) -> str:
        return inflection.underscore(word)

    def __repr__(self) -> str:
        return f"RuleTableInflector(locale={self.locale!r})"


InflectorFactory = Callable[[], Inflector]

_REGISTRY: dict[str, InflectorFactory] = {
    "en": EnglishInflector,
    **{locale: partial(RuleTableInflector.from_table, locale) for locale in LOCALE_RULES},
}
_REGISTRY_LOCK = threading.Lock()


def normalize_locale(locale: str) -> str:
    """
    Normalize a locale code for registry lookup.

    Examples:
        >>> normalize_locale("en-GB")
        "en_gb"

        >>> normalize_locale(" PT_br ")
        "pt_br"
    """
    return locale.strip().lower().replace("-", "_")


def _resolve_key(locale: str) -> Optional[str]:
    """Find the registry key for locale, falling back to its language part."""
    key = normalize_locale(locale)
    if key in _REGISTRY:
        return key
    language = key.split("_", 1)[0]
    if language in _REGISTRY:
        return language
    return None


def ensure_inflector(candidate: object) -> Inflector:
    """Return candidate if it satisfies the Inflector protocol, else raise."""
    if not isinstance(candidate, Inflector):
        raise InvalidInflectorError(
            f"{candidate!r} does not provide pluralize() and underscore()"
        )
    return candidate


def get_inflector(locale: str = DEFAULT_LOCALE) -> Inflector:
    """
    Create the inflector registered for locale.

    Region-qualified codes fall back to their language: "en_US" → "en",
    unless "en_us" itself was registered.

    Raises:
        UnknownLocaleError: No inflector is registered for locale
        InvalidInflectorError: The registered factory returned a non-inflector
    """
    with _REGISTRY_LOCK:
        key = _resolve_key(locale)
        if key is None:
            raise UnknownLocaleError(locale, list(_REGISTRY))
        factory = _REGISTRY[key]
    return ensure_inflector(factory())


def register_inflector(locale: str, factory: InflectorFactory) -> None:
    """
    Register (or replace) the inflector factory for locale.

    Only strategies constructed after registration see the new inflector.
    Safe to call from any thread.
    """
    if not callable(factory):
        raise InvalidInflectorError(f"Inflector factory for {locale!r} is not callable")
    key = normalize_locale(locale)
    if not key:
        raise ValueError("Locale must be a non-empty string")
    with _REGISTRY_LOCK:
        if key in _REGISTRY:
            logger.debug(f"Replacing inflector for locale {key!r}")
        _REGISTRY[key] = factory
    logger.debug(f"Registered inflector for locale {key!r}: {factory!r}")


def unregister_inflector(locale: str) -> None:
    """Remove a registered locale. Unknown locales raise UnknownLocaleError."""
    key = normalize_locale(locale)
    with _REGISTRY_LOCK:
        if key not in _REGISTRY:
            raise UnknownLocaleError(locale, list(_REGISTRY))
        del _REGISTRY[key]
    logger.debug(f"Unregistered inflector for locale {key!r}")


def available_locales() -> list[str]:
    """Return the registered locale codes, sorted."""
    with _REGISTRY_LOCK:
        return sorted(_REGISTRY)
