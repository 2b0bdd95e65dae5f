"""
Naming strategies: derive table and column names from an object model.

ResourceNamingStrategy produces "resource style" names:
- Tables are the pluralized, snake_cased class name (OrderItem → order_items)
- Columns are the snake_cased property name (firstName → first_name)
- Foreign keys are "<property>_id"
- Join tables are the two entity names, sorted, joined by "_" (group_user)
"""

from typing import Optional, Protocol, runtime_checkable

from .constants import DEFAULT_LOCALE, NAME_SEPARATOR, REFERENCE_COLUMN
from .inflectors import Inflector, ensure_inflector, get_inflector
from .logging_config import get_logger
from .parsers import strip_namespace

logger = get_logger("strategy")


@runtime_checkable
class NamingStrategy(Protocol):
    """
    Protocol an ORM's schema-mapping layer calls to name tables and columns.

    Optional class-name arguments are part of the calling convention and may
    be ignored by implementations. Every method returns a string.
    """

    def class_to_table_name(self, class_name: str) -> str:
        """Table name for an entity class (fully-qualified name allowed)."""
        ...

    def property_to_column_name(
        self, property_name: str, class_name: Optional[str] = None
    ) -> str:
        """Column name for a property."""
        ...

    def embedded_field_to_column_name(
        self,
        property_name: str,
        embedded_column_name: str,
        class_name: Optional[str] = None,
        embedded_class_name: Optional[str] = None,
    ) -> str:
        """Column name for a field of an embedded value object."""
        ...

    def reference_column_name(self) -> str:
        """Default primary key column of a referenced entity."""
        ...

    def join_column_name(
        self, property_name: str, class_name: Optional[str] = None
    ) -> str:
        """Foreign key column for an association property."""
        ...

    def join_table_name(
        self,
        source_entity: str,
        target_entity: str,
        property_name: Optional[str] = None,
    ) -> str:
        """Table name for a many-to-many association."""
        ...

    def join_key_column_name(
        self, entity_name: str, referenced_column_name: Optional[str] = None
    ) -> str:
        """Foreign key column inside a join table."""
        ...


class ResourceNamingStrategy:
    """
    Pluralized snake_case tables, snake_case columns, "<name>_id" keys.

    The strategy holds no state besides its inflector, which is never mutated,
    so one instance can be shared freely between threads. Registering a
    locale later does not affect existing instances.

    Args:
        locale: Language whose pluralization rules are used (default "en")
        inflector: Explicit inflector; overrides the registry lookup for locale

    Raises:
        UnknownLocaleError: No inflector is registered for locale
        InvalidInflectorError: inflector lacks pluralize() or underscore()

    Examples:
        >>> strategy = ResourceNamingStrategy()
        >>> strategy.class_to_table_name("App\\\\Models\\\\OrderItem")
        "order_items"

        >>> strategy.join_table_name("User", "Group")
        "group_user"
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, inflector: Optional[Inflector] = None):
        if inflector is None:
            inflector = get_inflector(locale)
        self._locale = locale
        self._inflector = ensure_inflector(inflector)
        logger.debug(f"Naming strategy bound to locale {locale!r} ({self._inflector!r})")

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def inflector(self) -> Inflector:
        return self._inflector

    def class_to_table_name(self, class_name: str) -> str:
        """
        Table name for an entity class.

        Strips the namespace, pluralizes, then snake_cases:
        "App\\\\Models\\\\OrderItem" → "OrderItems" → "order_items".
        """
        class_name = strip_namespace(class_name)
        table_name = self._inflector.pluralize(class_name)
        return self._inflector.underscore(table_name)

    def property_to_column_name(
        self, property_name: str, class_name: Optional[str] = None
    ) -> str:
        """Snake_case column name. Idempotent on snake_case input."""
        property_name = strip_namespace(property_name)
        return self._inflector.underscore(property_name)

    def embedded_field_to_column_name(
        self,
        property_name: str,
        embedded_column_name: str,
        class_name: Optional[str] = None,
        embedded_class_name: Optional[str] = None,
    ) -> str:
        """address + postCode → address_post_code"""
        return NAME_SEPARATOR.join(
            (
                self.property_to_column_name(property_name),
                self.property_to_column_name(embedded_column_name),
            )
        )

    def reference_column_name(self) -> str:
        return REFERENCE_COLUMN

    def join_column_name(
        self, property_name: str, class_name: Optional[str] = None
    ) -> str:
        """author → author_id"""
        return (
            self.property_to_column_name(property_name)
            + NAME_SEPARATOR
            + self.reference_column_name()
        )

    def join_table_name(
        self,
        source_entity: str,
        target_entity: str,
        property_name: Optional[str] = None,
    ) -> str:
        """
        Join table for a many-to-many association.

        Entity names are snake_cased but not pluralized, then sorted so that
        both owning sides produce the same name:
        ("User", "Group") and ("Group", "User") → "group_user".
        """
        names = sorted(
            [
                self.property_to_column_name(source_entity),
                self.property_to_column_name(target_entity),
            ]
        )
        return NAME_SEPARATOR.join(names)

    def join_key_column_name(
        self, entity_name: str, referenced_column_name: Optional[str] = None
    ) -> str:
        """
        Foreign key column inside a join table.

        ("Author") → "author_id"; ("Author", "uuid") → "author_uuid".
        An empty referenced_column_name falls back to the reference column.
        """
        return (
            self.property_to_column_name(entity_name)
            + NAME_SEPARATOR
            + (referenced_column_name or self.reference_column_name())
        )

    def __repr__(self) -> str:
        return f"ResourceNamingStrategy(locale={self._locale!r})"
