"""
linscan: lexer for the lin stack language

Turns lin script source into a flat list of typed tokens: numbers,
strings, 'symbols, bare-word function calls and { } quotation braces.
Scanning is fail-fast: the first malformed lexeme raises a LexError.

Quick Start:
    >>> from linscan import tokenize
    >>> tokenize("{ 1 2 add }")
    [Token(OPENING_BRACE, 1:1), Token(INT, 1, 1:3), Token(INT, 2, 1:5),
     Token(FUNCTION, 'add', 1:7), Token(CLOSING_BRACE, 1:11), Token(EOF, 1:12)]

    >>> from linscan import LexError
    >>> try:
    ...     tokenize("1.2.3")
    ... except LexError as err:
    ...     print(err)
    1:1 invalid number

Command line:
    linscan examples/01.lin
"""

from linscan.errors import (
    InvalidNumber,
    InvalidSymbolName,
    InvalidToken,
    LexError,
    LinscanError,
    UnterminatedString,
)
from linscan.lexer import Lexer
from linscan.location import SourceLocation
from linscan.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(source: str, source_file: str | None = None) -> list[Token]:
    """Tokenize lin source text.

    Args:
        source: Script source text
        source_file: Optional file path used in error messages and locations

    Returns:
        Tokens in source order, ending with EOF.

    Raises:
        LexError: On the first malformed lexeme.
    """
    return Lexer(source, source_file=source_file).tokenize()


__all__ = [
    "InvalidNumber",
    "InvalidSymbolName",
    "InvalidToken",
    "LexError",
    "Lexer",
    "LinscanError",
    "SourceLocation",
    "Token",
    "TokenType",
    "UnterminatedString",
    "__version__",
    "tokenize",
]
