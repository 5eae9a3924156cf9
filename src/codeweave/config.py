"""ContextVar-based render configuration for codeweave.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Writers and unit renderers read the active config when they are created.

Usage:
    from codeweave.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(indent_unit="    ")):
        text = unit.render()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

DEFAULT_INDENT_UNIT = "\t"
DEFAULT_GENERATED_MARKER = "THIS FILE WAS AUTOMATICALLY GENERATED; DO NOT EDIT"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        indent_unit: Text emitted once per indentation level (default: one tab)
        generated_marker: Comment text placed at the top of every rendered unit

    """

    indent_unit: str = DEFAULT_INDENT_UNIT
    generated_marker: str = DEFAULT_GENERATED_MARKER

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> RenderConfig.from_dict({"indent_unit": "  ", "other": 1}).indent_unit
            '  '

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(indent_unit="  ")):
        ...     get_render_config().indent_unit
        '  '

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEFAULT_GENERATED_MARKER",
    "DEFAULT_INDENT_UNIT",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
