"""Number literal scanner mixin."""

from linscan.errors import InvalidNumber, LexError
from linscan.lexer.charsets import (
    DECIMAL_POINT,
    DIGITS,
    EXPONENT_MARKERS,
    INT_MAX,
    LEGAL_EXIT_CHARS,
    RESERVED_CHARS,
    SIGNS,
    WHITESPACE,
)
from linscan.tokens import Token, TokenType


def _is_digits(text: str) -> bool:
    """Check that text is one or more ASCII digits."""
    return bool(text) and all(char in DIGITS for char in text)


def is_float_literal(text: str) -> bool:
    """Check text against the float literal grammar.

    Grammar (no sign, no inf/nan, exactly one decimal point)::

        mantissa := digits "." [digits] | [digits] "." digits
        float    := mantissa [("e" | "E") ["+" | "-"] digits]

    """
    mantissa, exponent = text, ""
    for i, char in enumerate(text):
        if char in EXPONENT_MARKERS:
            mantissa, exponent = text[:i], text[i + 1 :]
            break

    if mantissa.count(DECIMAL_POINT) != 1:
        return False
    whole, fraction = mantissa.split(DECIMAL_POINT)
    if not (whole or fraction):
        return False
    if whole and not _is_digits(whole):
        return False
    if fraction and not _is_digits(fraction):
        return False

    if len(mantissa) < len(text):
        if exponent[:1] in SIGNS:
            exponent = exponent[1:]
        return _is_digits(exponent)
    return True


def parse_int_literal(text: str) -> int | None:
    """Parse an unsigned decimal literal into the i64 range.

    Returns:
        The integer value, or None if text is not digits or overflows.
    """
    if not _is_digits(text):
        return None
    # Strip leading zeros so long zero-padded literals stay cheap to convert
    significant = text.lstrip("0") or "0"
    if len(significant) > len(str(INT_MAX)):
        return None
    value = int(significant)
    if value > INT_MAX:
        return None
    return value


class NumberScannerMixin:
    """Mixin providing number literal scanning.

    Accumulates characters after a digit or ``.`` until whitespace, ``}``
    or end of input, then parses the literal as INT (no decimal point)
    or FLOAT (exactly one decimal point).

    """

    # These will be set by the Lexer class
    _saved_pos: int

    def _peek(self) -> str:
        """Peek at current character. Implemented by Lexer."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume current character. Implemented by Lexer."""
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

    def _scan_number(self, first: str) -> Token:
        """Scan a number literal whose first character was already consumed.

        Args:
            first: The leading digit or decimal point.

        Returns:
            INT or FLOAT token.

        Raises:
            InvalidNumber: Second decimal point, reserved character inside
                the literal, or text the numeric grammar rejects.
        """
        has_dot = first == DECIMAL_POINT
        chars = [first]

        while char := self._peek():
            if char in LEGAL_EXIT_CHARS:
                break
            if char in RESERVED_CHARS:
                raise self._error(InvalidNumber, "".join(chars))

            self._advance()
            if char in WHITESPACE:
                break
            if char == DECIMAL_POINT:
                if has_dot:
                    raise self._error(InvalidNumber, "".join(chars))
                has_dot = True
            chars.append(char)

        literal = "".join(chars)
        end_pos = self._saved_pos + len(literal)

        if has_dot:
            if not is_float_literal(literal):
                raise self._error(InvalidNumber, literal)
            return self._make_token(TokenType.FLOAT, float(literal), end_pos=end_pos)

        value = parse_int_literal(literal)
        if value is None:
            raise self._error(InvalidNumber, literal)
        return self._make_token(TokenType.INT, value, end_pos=end_pos)
