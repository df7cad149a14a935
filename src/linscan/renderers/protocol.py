"""TokenRenderer protocol: stable interface for token renderers.

Any renderer that implements ``render(tokens) -> str`` conforms to this
protocol.

Example:
    from linscan.renderers.protocol import TokenRenderer

    def show(renderer: TokenRenderer, tokens: list[Token]) -> None:
        print(renderer.render(tokens))

"""

from typing import Protocol

from linscan.tokens import Token


class TokenRenderer(Protocol):
    """Protocol for token renderers."""

    def render(self, tokens: list[Token]) -> str:
        """Render a token list to a string."""
        ...
