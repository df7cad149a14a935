"""Token serialization: JSON round-trip and canonical source text.

Converts tokens to/from JSON-compatible dicts, and back into lin source
text. Useful for:
- Handing token streams to tools written in other languages
- Caching scan results
- Generating scripts programmatically

All JSON output is deterministic (sorted keys).

Example:
    from linscan import tokenize
    from linscan.serialization import detokenize, from_json, to_json

    tokens = tokenize("{ 1 2 add }")
    assert from_json(to_json(tokens)) == tokens
    assert tokenize(detokenize(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
import math
from typing import Any

from linscan.lexer.charsets import (
    CLOSING_BRACE,
    INT_MAX,
    INT_MIN,
    LEGAL_EXIT_CHARS,
    NUMBER_START,
    OPENING_BRACE,
    RESERVED_CHARS,
    STRING_DELIMITER,
    SYMBOL_PREFIX,
    WHITESPACE,
)
from linscan.tokens import VALUE_TYPES, Token, TokenType

_NAME_FORBIDDEN = WHITESPACE | RESERVED_CHARS | LEGAL_EXIT_CHARS


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Args:
        token: Any lexer token.

    Returns:
        Dict with ``type``, ``value`` and ``location`` keys.

    """
    loc = token.location
    return {
        "type": token.type.name,
        "value": token.value,
        "location": {
            "lineno": loc.lineno,
            "col_offset": loc.col_offset,
            "offset": loc.offset,
            "end_offset": loc.end_offset,
            "source_file": loc.source_file,
        },
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict.

    Args:
        data: Dict as produced by to_dict. ``location`` is optional.

    Returns:
        Token with the serialized type, value and coordinates.

    Raises:
        ValueError: If ``type`` is missing or unknown, or the value does
            not fit the token type.

    """
    if not isinstance(data, dict):
        msg = f"Serialized token must be an object, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("type")
    if type_name is None:
        msg = "Missing 'type' field in serialized token"
        raise ValueError(msg)
    if not isinstance(type_name, str):
        msg = f"Token type must be a string, got {type_name!r}"
        raise ValueError(msg)

    token_type = TokenType.__members__.get(type_name)
    if token_type is None:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)

    value = _deserialize_value(token_type, data.get("value"))
    loc = data.get("location") or {}
    if not isinstance(loc, dict):
        msg = f"Token location must be an object, got {loc!r}"
        raise ValueError(msg)
    return Token(
        type=token_type,
        value=value,
        _lineno=loc.get("lineno", 0),
        _col=loc.get("col_offset", 0),
        _start_offset=loc.get("offset", 0),
        _end_offset=loc.get("end_offset", 0),
        _source_file=loc.get("source_file"),
    )


def _deserialize_value(token_type: TokenType, value: Any) -> str | int | float | None:
    """Check a serialized value against the token type."""
    expected = VALUE_TYPES[token_type]
    if expected is None:
        if value is not None:
            msg = f"{token_type.name} tokens carry no value, got {value!r}"
            raise ValueError(msg)
        return None

    # JSON booleans are ints to Python; neither is a valid token value
    if isinstance(value, bool):
        msg = f"Invalid {token_type.name} value: {value!r}"
        raise ValueError(msg)
    if expected is float and isinstance(value, int):
        return float(value)
    if not isinstance(value, expected):
        msg = f"Invalid {token_type.name} value: {value!r}"
        raise ValueError(msg)
    if expected is int:
        _check_int_range(value)
    return value


def to_json(tokens: list[Token], *, indent: int | None = None) -> str:
    """Serialize a token list to a JSON array.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(token) for token in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token list from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of serialized tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]


def to_source(token: Token) -> str:
    """Render one token in its canonical source form.

    Lexing the result yields the same token.

    Raises:
        ValueError: If the token has no source form (negative, out of range or
            non-finite numbers, strings containing a double quote, names
            containing terminator or reserved characters).

    """
    match token.type:
        case TokenType.EOF:
            return ""
        case TokenType.OPENING_BRACE:
            return OPENING_BRACE
        case TokenType.CLOSING_BRACE:
            return CLOSING_BRACE
        case TokenType.INT:
            return _int_source(token.value)
        case TokenType.FLOAT:
            return _float_source(token.value)
        case TokenType.STRING:
            if STRING_DELIMITER in token.value:
                msg = f"String value cannot contain {STRING_DELIMITER}: {token.value!r}"
                raise ValueError(msg)
            return f"{STRING_DELIMITER}{token.value}{STRING_DELIMITER}"
        case TokenType.SYMBOL:
            _check_name(token.value)
            return f"{SYMBOL_PREFIX}{token.value}"
        case TokenType.FUNCTION:
            name = token.value
            _check_name(name)
            if not name or name[0] in NUMBER_START or name[0] == STRING_DELIMITER:
                msg = f"Word cannot start with {name[:1]!r}"
                raise ValueError(msg)
            if not name[0].isascii():
                msg = f"Word must start with an ASCII character: {name!r}"
                raise ValueError(msg)
            return name


def detokenize(tokens: list[Token]) -> str:
    """Join the source forms of tokens with single spaces.

    EOF tokens are skipped.
    """
    return " ".join(to_source(token) for token in tokens if token.type != TokenType.EOF)


def _int_source(value: int) -> str:
    _check_int_range(value)
    if value < 0:
        msg = f"Negative integers have no literal form: {value}"
        raise ValueError(msg)
    return str(value)


def _check_int_range(value: int) -> None:
    if not INT_MIN <= value <= INT_MAX:
        msg = f"Integer out of 64-bit range: {value}"
        raise ValueError(msg)


def _float_source(value: float) -> str:
    if not math.isfinite(value) or math.copysign(1.0, value) < 0:
        msg = f"Float has no literal form: {value!r}"
        raise ValueError(msg)
    text = repr(value)
    if "." in text:
        return text
    # repr drops the point for large/small magnitudes: 1e+20 -> 1.0e+20
    mantissa, _, exponent = text.partition("e")
    return f"{mantissa}.0e{exponent}"


def _check_name(name: str) -> None:
    for char in name:
        if char in _NAME_FORBIDDEN:
            msg = f"Name cannot contain {char!r}: {name!r}"
            raise ValueError(msg)
