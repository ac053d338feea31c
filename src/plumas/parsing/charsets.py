"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from plumas.parsing.charsets import ESCAPABLE

    if char in ESCAPABLE:  # O(1) lookup
        ...
"""

import unicodedata

# ASCII punctuation: every char a backslash can escape
ESCAPABLE: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# ASCII whitespace for basic checks
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")


def is_unicode_whitespace(char: str) -> bool:
    """Check if character is Unicode whitespace.

    Includes ASCII whitespace and Unicode category Zs (space separator).
    Also treats empty string as whitespace, so text boundaries count as
    whitespace in the emphasis flanking check.

    """
    if not char:
        return True  # Empty string counts as whitespace for boundary checks
    if char in WHITESPACE:
        return True
    cat = unicodedata.category(char)
    return cat == "Zs"  # Space separator (includes non-breaking space)


# Characters that may start a non-text inline production
INLINE_SPECIAL: frozenset[str] = frozenset("\\`[!~*_")

# Characters allowed on a table separator line besides whitespace
TABLE_SEPARATOR_CHARS: frozenset[str] = frozenset("|-:")
