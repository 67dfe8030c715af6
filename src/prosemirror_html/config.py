"""ContextVar-based render configuration for prosemirror_html.

A Renderer takes its RenderConfig at construction. When none is passed it
reads the configuration active in the current context, so a framework can
set defaults once without threading a config object through every call.

Thread Safety:
    ContextVars are thread-local by design. RenderConfig is frozen.

Usage:
    # Explicit
    renderer = Renderer(config=RenderConfig(sort_attributes=True))

    # Scoped default
    with render_config_context(RenderConfig(max_depth=64)):
        renderer = Renderer()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        max_depth: Maximum node nesting below the document root. Deeper
            trees raise DepthLimitError. None disables the check.
        sort_attributes: Emit attributes sorted by name instead of in
            mapping order, for byte-stable output across producers.

    """

    max_depth: int | None = 512
    sort_attributes: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Unknown keys are ignored.

        Example:
            >>> RenderConfig.from_dict({"sort_attributes": True, "x": 1})
            RenderConfig(max_depth=512, sort_attributes=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration for the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset the current context to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(max_depth=8)):
        ...     get_render_config().max_depth
        8

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
