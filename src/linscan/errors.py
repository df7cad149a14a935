"""Exception classes for linscan.

The lexer is fail-fast: the first malformed lexeme raises one of the
LexError subclasses below and the whole scan is abandoned.
"""

from __future__ import annotations

from linscan.location import SourceLocation


class LinscanError(Exception):
    """Base exception for all linscan errors."""

    pass


class LexError(LinscanError):
    """Error during lexical analysis.

    Each subclass carries a fixed human-readable ``message``. The rendered
    error prefixes it with the location of the offending lexeme when known.
    """

    message = "lexical error"

    def __init__(
        self,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        lexeme: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            lineno: Line number where the lexeme started (1-indexed)
            col_offset: Column where the lexeme started (1-indexed)
            source_file: Path to source file (optional)
            lexeme: Text scanned before the error was detected (optional)
        """
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.lexeme = lexeme

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{self.message}")

    @property
    def location(self) -> SourceLocation | None:
        """Location of the offending lexeme, or None if unknown."""
        if self.lineno is None:
            return None
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset or 0,
            source_file=self.source_file,
        )


class InvalidNumber(LexError):
    """Malformed numeric literal.

    Raised for a second decimal point, a reserved character inside the
    literal, or text the integer/float grammar rejects (including i64
    overflow).
    """

    message = "invalid number"


class InvalidToken(LexError):
    """A non-ASCII character where a lexeme must start."""

    message = "invalid token"


class InvalidSymbolName(LexError):
    """A reserved character (``'`` or ``{``) inside a symbol or word."""

    message = "invalid symbol name"


class UnterminatedString(LexError):
    """Input ended before the closing double quote."""

    message = "unterminated string"


__all__ = [
    "InvalidNumber",
    "InvalidSymbolName",
    "InvalidToken",
    "LexError",
    "LinscanError",
    "UnterminatedString",
]
