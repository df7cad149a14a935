"""Symbol and word scanner mixin.

Symbols (``'name``) and bare words (function calls) share one scanning
routine so both follow the same terminator and reserved-character rules.
"""

from linscan.errors import InvalidSymbolName, LexError
from linscan.lexer.charsets import LEGAL_EXIT_CHARS, RESERVED_CHARS, WHITESPACE


class NameScannerMixin:
    """Mixin providing symbol/word name scanning."""

    # These will be set by the Lexer class
    _source: str
    _pos: int

    def _peek(self) -> str:
        """Peek at current character. Implemented by Lexer."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume current character. Implemented by Lexer."""
        raise NotImplementedError

    def _error(self, error_cls: type[LexError], lexeme: str | None = None) -> LexError:
        """Build error at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_name(self, seed: str | None = None) -> str:
        """Scan a symbol or word name.

        Stops before ASCII whitespace, ``}`` or end of input. The name may
        be empty when called without a seed (a bare ``'``).

        Args:
            seed: First character of a word, already consumed. None for
                symbols, whose ``'`` prefix is not part of the name.

        Returns:
            The scanned name, seed included.

        Raises:
            InvalidSymbolName: ``'`` or ``{`` inside the name.
        """
        prefix = seed or ""
        start = self._pos

        while char := self._peek():
            if char in WHITESPACE or char in LEGAL_EXIT_CHARS:
                break
            if char in RESERVED_CHARS:
                raise self._error(InvalidSymbolName, prefix + self._source[start : self._pos])
            self._advance()

        return prefix + self._source[start : self._pos]
