"""Command-line front end: tokenize a lin script and print its tokens.

Usage:
    linscan examples/01.lin
    linscan --format lines --locations script.lin
    cat script.lin | linscan --format json

Exit status:
    0  tokens printed to stdout
    1  lexical error (message on stderr)
    2  usage, file or config error
"""

from __future__ import annotations

import argparse
import sys
import tomllib
from pathlib import Path
from typing import Any

from linscan import __version__
from linscan.config import FORMATS, DumpConfig, dump_config_context
from linscan.errors import LexError
from linscan.lexer import Lexer
from linscan.renderers import render_tokens
from linscan.utils.logger import enable_debug_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_LEX_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linscan",
        description="Tokenize a lin script and print its tokens",
    )
    parser.add_argument("file", nargs="?", default="-", help="Script to tokenize (- for stdin)")
    parser.add_argument("--format", choices=FORMATS, help="Output format (default: debug)")
    parser.add_argument(
        "--locations",
        action="store_true",
        default=None,
        help="Show line:col for each token (lines format)",
    )
    parser.add_argument("--config", type=Path, help="TOML file with output settings")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(path: Path | None) -> dict[str, Any]:
    """Read output settings from a TOML file.

    Settings live in a ``[linscan]`` table, or at top level when the file
    has no such table.
    """
    if path is None:
        return {}
    with path.open("rb") as f:
        data = tomllib.load(f)
    section = data.get("linscan", data)
    if not isinstance(section, dict):
        msg = f"{path}: [linscan] must be a table"
        raise ValueError(msg)
    return section


def read_source(file: str) -> tuple[str, str | None]:
    """Return script text and the file name used in error messages."""
    if file == "-":
        return sys.stdin.read(), None
    return Path(file).read_text(encoding="utf-8"), file


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        enable_debug_logging()

    try:
        settings = load_config(args.config)
        if args.format is not None:
            settings["format"] = args.format
        if args.locations is not None:
            settings["show_locations"] = args.locations
        config = DumpConfig.from_dict(settings)
    except (OSError, tomllib.TOMLDecodeError, ValueError) as err:
        print(f"error: {err}", file=sys.stderr)
        return EXIT_USAGE

    try:
        source, source_file = read_source(args.file)
    except (OSError, UnicodeDecodeError) as err:
        print(f"error: {err}", file=sys.stderr)
        return EXIT_USAGE

    try:
        tokens = Lexer(source, source_file=source_file).tokenize()
    except LexError as err:
        logger.debug("Rejected lexeme %r", err.lexeme)
        print(f"error: {err}", file=sys.stderr)
        return EXIT_LEX_ERROR

    with dump_config_context(config):
        print(render_tokens(tokens))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
