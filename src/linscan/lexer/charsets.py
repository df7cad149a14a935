"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from linscan.lexer.charsets import RESERVED_CHARS

    if char in RESERVED_CHARS:  # O(1) lookup
        ...
"""

# ASCII whitespace: space, tab, newline, carriage return, form feed.
# Vertical tab is deliberately absent; it scans as a word character.
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f")

# Silently end a number, word or symbol without being consumed
LEGAL_EXIT_CHARS: frozenset[str] = frozenset("}")

# Only legal as the first character of a lexeme
RESERVED_CHARS: frozenset[str] = frozenset("'{")

DIGITS: frozenset[str] = frozenset("0123456789")

DECIMAL_POINT = "."

# Characters that start number recognition
NUMBER_START: frozenset[str] = DIGITS | frozenset(DECIMAL_POINT)

SYMBOL_PREFIX = "'"
STRING_DELIMITER = '"'
OPENING_BRACE = "{"
CLOSING_BRACE = "}"

EXPONENT_MARKERS: frozenset[str] = frozenset("eE")
SIGNS: frozenset[str] = frozenset("+-")

# Signed 64-bit integer bounds. Literals are unsigned; INT_MIN bounds
# deserialized INT values.
INT_MAX = 2**63 - 1
INT_MIN = -(2**63)
