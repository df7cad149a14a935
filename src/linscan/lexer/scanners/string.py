"""String literal scanner mixin."""

from linscan.errors import LexError, UnterminatedString
from linscan.lexer.charsets import STRING_DELIMITER
from linscan.tokens import Token, TokenType


class StringScannerMixin:
    """Mixin providing double-quoted string scanning.

    Contents are taken verbatim up to the next double quote: no escape
    sequences, and strings may span lines.

    """

    # These will be set by the Lexer class
    _source: str
    _pos: int

    def _commit_to(self, end: int) -> None:
        """Commit position to end. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(
        self,
        token_type: TokenType,
        value: str | int | float | None = None,
        *,
        end_pos: int | None = None,
    ) -> Token:
        """Create token at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _error(self, error_cls: type[LexError], lexeme: str | None = None) -> LexError:
        """Build error at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_string(self) -> Token:
        """Scan string contents after the opening quote was consumed.

        Uses str.find for the closing quote (C implementation), then
        commits position past it in one step.

        Returns:
            STRING token holding the text between the quotes.

        Raises:
            UnterminatedString: End of input before a closing quote.
        """
        close = self._source.find(STRING_DELIMITER, self._pos)
        if close == -1:
            lexeme = STRING_DELIMITER + self._source[self._pos :]
            raise self._error(UnterminatedString, lexeme)

        value = self._source[self._pos : close]
        self._commit_to(close + 1)
        return self._make_token(TokenType.STRING, value)
