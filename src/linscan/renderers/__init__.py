"""linscan renderers.

Renderers turn token lists into text for display.

Available Renderers:
- DebugRenderer: one-line list of token variants
- LineRenderer: one token per line, optionally with locations

JSON output goes through linscan.serialization.to_json.

"""

from linscan.config import get_dump_config
from linscan.renderers.protocol import TokenRenderer
from linscan.renderers.text import DebugRenderer, LineRenderer
from linscan.serialization import to_json
from linscan.tokens import Token


def render_tokens(tokens: list[Token]) -> str:
    """Render tokens using the active DumpConfig."""
    config = get_dump_config()
    if config.format == "json":
        return to_json(tokens, indent=config.json_indent)

    renderer: TokenRenderer
    if config.format == "lines":
        renderer = LineRenderer(show_locations=config.show_locations)
    else:
        renderer = DebugRenderer()
    return renderer.render(tokens)


__all__ = ["DebugRenderer", "LineRenderer", "TokenRenderer", "render_tokens"]
