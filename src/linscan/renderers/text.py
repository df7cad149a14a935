"""Plain-text token renderers.

DebugRenderer prints the whole list on one line, variant-style:

    >>> DebugRenderer().render(tokenize("{ 1 'x }"))
    '[OpeningBrace, Int(1), Symbol("x"), ClosingBrace, EOF]'

LineRenderer prints one token per line:

    >>> print(LineRenderer(show_locations=True).render(tokenize("'x 5")))
    1:1 SYMBOL "x"
    1:4 INT 5
    1:5 EOF

"""

import json

from linscan.tokens import Token, TokenType

_VARIANT_NAMES: dict[TokenType, str] = {
    TokenType.EOF: "EOF",
    TokenType.FUNCTION: "Function",
    TokenType.SYMBOL: "Symbol",
    TokenType.INT: "Int",
    TokenType.FLOAT: "Float",
    TokenType.STRING: "String",
    TokenType.OPENING_BRACE: "OpeningBrace",
    TokenType.CLOSING_BRACE: "ClosingBrace",
}


def format_value(value: str | int | float | None) -> str:
    """Format a token value: strings quoted and escaped, numbers as repr."""
    if value is None:
        return ""
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


class DebugRenderer:
    """Render a token list as a single bracketed line."""

    __slots__ = ()

    def render(self, tokens: list[Token]) -> str:
        parts = []
        for token in tokens:
            name = _VARIANT_NAMES[token.type]
            if token.value is None:
                parts.append(name)
            else:
                parts.append(f"{name}({format_value(token.value)})")
        return "[" + ", ".join(parts) + "]"


class LineRenderer:
    """Render one token per line as ``TYPE value``.

    With ``show_locations`` each line is prefixed by the token's location.
    """

    __slots__ = ("_show_locations",)

    def __init__(self, show_locations: bool = False) -> None:
        self._show_locations = show_locations

    def render(self, tokens: list[Token]) -> str:
        lines = []
        for token in tokens:
            line = token.type.name
            if token.value is not None:
                line += " " + format_value(token.value)
            if self._show_locations:
                line = f"{token.location} {line}"
            lines.append(line)
        return "\n".join(lines)
