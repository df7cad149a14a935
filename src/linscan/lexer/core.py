"""Single-pass, fail-fast lexer for lin scripts.

Walks the source one character at a time with one character of lookahead.
The leading character of each lexeme selects a scanner; the first
malformed lexeme raises a LexError and the scan is abandoned.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from linscan.errors import InvalidToken, LexError
from linscan.lexer.charsets import (
    CLOSING_BRACE,
    NUMBER_START,
    OPENING_BRACE,
    STRING_DELIMITER,
    SYMBOL_PREFIX,
    WHITESPACE,
)
from linscan.lexer.scanners import (
    NameScannerMixin,
    NumberScannerMixin,
    StringScannerMixin,
)
from linscan.tokens import Token, TokenType
from linscan.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    NumberScannerMixin,
    StringScannerMixin,
    NameScannerMixin,
):
    """Lexer for the lin stack language.

    Usage:
        >>> lexer = Lexer("{ 1 2 add }")
        >>> lexer.tokenize()
        [Token(OPENING_BRACE, 1:1), Token(INT, 1, 1:3), Token(INT, 2, 1:5),
         Token(FUNCTION, 'add', 1:7), Token(CLOSING_BRACE, 1:11), Token(EOF, 1:12)]

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Script source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file

        # Start of the lexeme being scanned
        self._saved_pos: int = 0
        self._saved_lineno: int = 1
        self._saved_col: int = 1

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            Every token in source order, ending with exactly one EOF.

        Raises:
            LexError: On the first malformed lexeme. No partial token
                list is returned.

        Complexity: O(n) where n = len(source)
        """
        logger.debug("Scanning %s (%d chars)", self._source_file or "<string>", self._source_len)
        try:
            tokens = list(self._scan())
        except LexError as err:
            logger.debug("Scan aborted at %s: %s", err.location, err.message)
            raise
        logger.debug("Scanned %d tokens", len(tokens))
        return tokens

    def _scan(self) -> Iterator[Token]:
        """Dispatch on the leading character of each lexeme.

        Yields:
            Token objects one at a time, EOF last.
        """
        while self._pos < self._source_len:
            self._save_location()
            char = self._advance()

            if char in WHITESPACE:
                continue
            if char in NUMBER_START:
                yield self._scan_number(char)
            elif char == SYMBOL_PREFIX:
                yield self._make_token(TokenType.SYMBOL, self._scan_name())
            elif char == STRING_DELIMITER:
                yield self._scan_string()
            elif char == OPENING_BRACE:
                yield self._make_token(TokenType.OPENING_BRACE)
            elif char == CLOSING_BRACE:
                yield self._make_token(TokenType.CLOSING_BRACE)
            elif char.isascii():
                yield self._make_token(TokenType.FUNCTION, self._scan_name(char))
            else:
                raise self._error(InvalidToken, char)

        self._save_location()
        yield self._make_token(TokenType.EOF)

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _commit_to(self, end: int) -> None:
        """Commit position to end, updating line/column tracking.

        Uses C-optimized str.count instead of a character-by-character loop.

        Args:
            end: Position to commit to.
        """
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")

        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl  # chars after last newline + 1
        else:
            self._col += len(segment)

        self._pos = end

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next lexeme."""
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(
        self,
        token_type: TokenType,
        value: str | int | float | None = None,
        *,
        end_pos: int | None = None,
    ) -> Token:
        """Create a Token with raw coordinates (lazy SourceLocation).

        Args:
            token_type: The token type.
            value: The token value.
            end_pos: Optional end position override (defaults to current).

        Returns:
            Token starting at the saved location.
        """
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=self._saved_pos,
            _end_offset=end_pos if end_pos is not None else self._pos,
            _source_file=self._source_file,
        )

    def _error(self, error_cls: type[LexError], lexeme: str | None = None) -> LexError:
        """Create a LexError located at the start of the current lexeme.

        Args:
            error_cls: LexError subclass to instantiate.
            lexeme: Text scanned before the error was detected.

        Returns:
            The error, for the caller to raise.
        """
        return error_cls(
            lineno=self._saved_lineno,
            col_offset=self._saved_col,
            source_file=self._source_file,
            lexeme=lexeme,
        )
