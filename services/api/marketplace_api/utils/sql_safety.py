"""
SQL Safety Utilities

Functions to prevent SQL-related security issues like pattern injection.
"""

import re

# Escape character used in every generated LIKE clause (ESCAPE '\')
LIKE_ESCAPE = "\\"


def escape_like_pattern(value: str) -> str:
    """
    Escape LIKE special characters to prevent pattern injection.

    SECURITY: User input in LIKE patterns can match unintended records
    if % and _ are not escaped.

    Args:
        value: User-provided search string

    Returns:
        Escaped string safe for use in LIKE patterns

    Example:
        >>> escape_like_pattern("test%string")
        'test\\\\%string'
        >>> escape_like_pattern("user_name")
        'user\\\\_name'
    """
    # Escape backslash first (it's the escape character), then LIKE wildcards
    return re.sub(r'([\\%_])', r'\\\1', value)


def like_contains(value: str) -> str:
    """Lowercased, escaped '%value%' pattern for a case-insensitive contains match."""
    return f"%{escape_like_pattern(value.lower())}%"
