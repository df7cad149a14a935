"""Token and TokenType definitions for the linscan lexer.

The lexer produces a list of Token objects for a downstream parser.
Each Token has a type, a value, and a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Coordinates are excluded from equality, so tokens compare by type and value.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linscan.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    EOF = auto()

    # Words and prefixed names
    FUNCTION = auto()  # add, dup, print
    SYMBOL = auto()  # 'name

    # Literals
    INT = auto()  # 42
    FLOAT = auto()  # 3.14, .5, 1.
    STRING = auto()  # "hello"

    # Quotations
    OPENING_BRACE = auto()  # {
    CLOSING_BRACE = auto()  # }


# Value type carried by each token type
VALUE_TYPES: dict[TokenType, type | None] = {
    TokenType.EOF: None,
    TokenType.FUNCTION: str,
    TokenType.SYMBOL: str,
    TokenType.INT: int,
    TokenType.FLOAT: float,
    TokenType.STRING: str,
    TokenType.OPENING_BRACE: None,
    TokenType.CLOSING_BRACE: None,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Scanned text for FUNCTION/SYMBOL/STRING, the parsed number
            for INT/FLOAT, None for EOF and braces
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str | int | float | None = None
    _lineno: int = field(default=0, compare=False)
    _col: int = field(default=0, compare=False)
    _start_offset: int = field(default=0, compare=False)
    _end_offset: int = field(default=0, compare=False)
    _source_file: str | None = field(default=None, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from linscan.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.value is None:
            return f"Token({self.type.name}, {self._lineno}:{self._col})"
        return f"Token({self.type.name}, {self.value!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
