"""Lexer for lin scripts.

This package provides a single-pass, fail-fast lexer with one character
of lookahead.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (cursor, dispatch loop, locations)
├── charsets.py          # Whitespace, reserved and legal-exit characters
└── scanners/            # Lexeme scanners
    ├── number.py        # INT / FLOAT literals
    ├── string.py        # "double quoted" strings
    └── name.py          # 'symbols and bare words

Usage:
    >>> from linscan.lexer import Lexer
    >>> for token in Lexer("'x 5 store").tokenize():
    ...     print(token)
Token(SYMBOL, 'x', 1:1)
Token(INT, 5, 1:4)
Token(FUNCTION, 'store', 1:6)
Token(EOF, 1:11)

"""

from linscan.lexer.core import Lexer

__all__ = ["Lexer"]
