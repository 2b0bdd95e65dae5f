"""
Tests for qualified name parsing.
"""

from resource_naming import strip_namespace


class TestStripNamespace:
    """Only the last segment of a qualified name is kept."""

    def test_backslash(self):
        assert strip_namespace("App\\Models\\OrderItem") == "OrderItem"

    def test_dotted(self):
        assert strip_namespace("app.models.OrderItem") == "OrderItem"

    def test_double_colon(self):
        assert strip_namespace("Shop::Cart::LineItem") == "LineItem"

    def test_mixed_separators(self):
        assert strip_namespace("vendor.pkg\\Models::User") == "User"

    def test_unqualified(self):
        assert strip_namespace("firstName") == "firstName"

    def test_empty_string(self):
        assert strip_namespace("") == ""

    def test_trailing_separator(self):
        """Degenerate input yields an empty segment."""
        assert strip_namespace("App\\") == ""

