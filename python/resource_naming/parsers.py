"""
Qualified name parsing.
"""

import re

from .constants import NAMESPACE_SEPARATORS

_NAMESPACE_RE = re.compile("|".join(re.escape(sep) for sep in NAMESPACE_SEPARATORS))


def strip_namespace(name: str) -> str:
    r"""
    Return the final segment of a qualified name.

    Examples:
        >>> strip_namespace("App\\Models\\OrderItem")
        "OrderItem"

        >>> strip_namespace("app.models.OrderItem")
        "OrderItem"

        >>> strip_namespace("firstName")
        "firstName"

    Edge Cases:
        - Empty string: "" (unchanged)
        - Trailing separator: "App\\" → "" (degenerate, returned as-is)
    """
    return _NAMESPACE_RE.split(name)[-1]

