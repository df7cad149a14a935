"""ContextVar-based output configuration for linscan.

Controls how token lists are rendered by ``render_tokens`` and the CLI.
Scanning itself has no options: the lexical rules are fixed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from linscan.config import DumpConfig, dump_config_context
    from linscan.renderers import render_tokens

    with dump_config_context(DumpConfig(format="lines", show_locations=True)):
        print(render_tokens(tokens))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

FORMATS = ("debug", "lines", "json")


@dataclass(frozen=True, slots=True)
class DumpConfig:
    """Immutable output configuration.

    Attributes:
        format: Output format: "debug" (one-line list), "lines" (one token
            per line) or "json"
        show_locations: Prefix each token with line:col ("lines" format)
        json_indent: JSON indentation level (None for compact)

    """

    format: str = "debug"
    show_locations: bool = False
    json_indent: int | None = None

    def __post_init__(self) -> None:
        if self.format not in FORMATS:
            msg = f"Unknown output format {self.format!r}; expected one of {', '.join(FORMATS)}"
            raise ValueError(msg)
        if not isinstance(self.show_locations, bool):
            msg = f"show_locations must be true or false, got {self.show_locations!r}"
            raise ValueError(msg)
        # bool is an int subclass; indent=True is not a meaningful width
        if self.json_indent is not None and (
            isinstance(self.json_indent, bool) or not isinstance(self.json_indent, int)
        ):
            msg = f"json_indent must be an integer, got {self.json_indent!r}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "DumpConfig":
        """Create DumpConfig from dictionary.

        Useful when config comes from a TOML file. Only includes keys that
        are valid DumpConfig fields; unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New DumpConfig instance with values from dict.

        Raises:
            ValueError: If ``format`` names an unknown output format, or a
                value has the wrong type.

        Example:
            >>> config = DumpConfig.from_dict({"format": "lines", "color": True})
            >>> config.format
            'lines'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: DumpConfig = DumpConfig()

_dump_config: ContextVar[DumpConfig] = ContextVar(
    "dump_config",
    default=_DEFAULT_CONFIG,
)


def get_dump_config() -> DumpConfig:
    """Get current output configuration (thread-local)."""
    return _dump_config.get()


def set_dump_config(config: DumpConfig) -> None:
    """Set output configuration for current context.

    Args:
        config: DumpConfig instance to use for this context.

    """
    _dump_config.set(config)


def reset_dump_config() -> None:
    """Reset to default configuration."""
    _dump_config.set(_DEFAULT_CONFIG)


@contextmanager
def dump_config_context(config: DumpConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: DumpConfig to use within the context.

    """
    previous = _dump_config.get()
    _dump_config.set(config)
    try:
        yield
    finally:
        _dump_config.set(previous)


__all__ = [
    "FORMATS",
    "DumpConfig",
    "dump_config_context",
    "get_dump_config",
    "reset_dump_config",
    "set_dump_config",
]
