"""
resource_naming - table and column naming conventions for ORMs.

Derives database identifiers from an object model:

    >>> from resource_naming import ResourceNamingStrategy
    >>> naming = ResourceNamingStrategy()
    >>> naming.class_to_table_name("app.models.Category")
    'categories'
    >>> naming.join_column_name("author")
    'author_id'
"""

__version__ = "0.1.0"

from .errors import InvalidInflectorError, NamingError, UnknownLocaleError
from .inflectors import (
    EnglishInflector,
    Inflector,
    RuleTableInflector,
    available_locales,
    get_inflector,
    register_inflector,
    unregister_inflector,
)
from .parsers import strip_namespace
from .strategy import NamingStrategy, ResourceNamingStrategy

__all__ = [
    "NamingStrategy",
    "ResourceNamingStrategy",
    "Inflector",
    "EnglishInflector",
    "RuleTableInflector",
    "get_inflector",
    "register_inflector",
    "unregister_inflector",
    "available_locales",
    "strip_namespace",
    "NamingError",
    "UnknownLocaleError",
    "InvalidInflectorError",
]
