"""
Exceptions raised while binding a naming strategy to its inflector.
"""

from typing import Iterable


class NamingError(Exception):
    """Base class for resource_naming errors."""

    pass


class UnknownLocaleError(NamingError, LookupError):
    """Raised when no inflector is registered for a locale."""

    def __init__(self, locale: str, available: Iterable[str] = ()):
        self.locale = locale
        self.available = sorted(available)
        message = f"No inflector registered for locale {locale!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class InvalidInflectorError(NamingError, TypeError):
    """Raised when an inflector does not provide pluralize() and underscore()."""

    pass
