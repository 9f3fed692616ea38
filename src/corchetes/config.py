"""ContextVar-based shortcode configuration.

Config is read by every parse() call in the current context, so a web request,
a build worker or a test can change behavior without touching the shared
parser instances.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from corchetes.config import ShortcodeConfig, shortcode_config_context

    with shortcode_config_context(ShortcodeConfig(strict_handlers=True)):
        html = parser.parse(content)  # handler failures now raise

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ShortcodeConfig:
    """Immutable shortcode configuration.

    Attributes:
        strict_handlers: Raise ShortcodeRenderError when a handler fails
            instead of logging a warning and leaving the tag as written
        max_depth: Maximum nesting of parse() calls made from inside handlers;
            deeper calls return their content unchanged

    """

    strict_handlers: bool = False
    max_depth: int = 32

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ShortcodeConfig":
        """Create ShortcodeConfig from dictionary.

        Only includes keys that are valid ShortcodeConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ShortcodeConfig.from_dict({
            ...     "strict_handlers": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_handlers
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ShortcodeConfig = ShortcodeConfig()

_shortcode_config: ContextVar[ShortcodeConfig] = ContextVar(
    "shortcode_config",
    default=_DEFAULT_CONFIG,
)


def get_shortcode_config() -> ShortcodeConfig:
    """Get the configuration active in this thread/context."""
    return _shortcode_config.get()


def set_shortcode_config(config: ShortcodeConfig) -> None:
    """Set shortcode configuration for current context.

    Args:
        config: ShortcodeConfig instance to use for this context.

    """
    _shortcode_config.set(config)


def reset_shortcode_config() -> None:
    """Reset to the module-level default configuration."""
    _shortcode_config.set(_DEFAULT_CONFIG)


@contextmanager
def shortcode_config_context(config: ShortcodeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ShortcodeConfig to use within the context.

    Example:
        >>> with shortcode_config_context(ShortcodeConfig(max_depth=1)):
        ...     get_shortcode_config().max_depth
        1

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        config even if an exception is raised.

    """
    previous = _shortcode_config.get()
    _shortcode_config.set(config)
    try:
        yield
    finally:
        _shortcode_config.set(previous)


__all__ = [
    "ShortcodeConfig",
    "get_shortcode_config",
    "set_shortcode_config",
    "reset_shortcode_config",
    "shortcode_config_context",
]
