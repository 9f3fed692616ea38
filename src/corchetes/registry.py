"""Shortcode registry for handler lookup and registration.

The registry maps tag names to the callables that expand them. Unlike the
parse pipeline it is mutable: shortcodes are typically registered at
application start-up and may be removed or replaced later.

Thread Safety:
Mutations are serialized by an internal lock. Readers take a snapshot via
``names`` or ``get()``, so a parse running in another thread always sees a
consistent set of names.

Example:
    >>> registry = ShortcodeRegistry()
    >>> registry.register("greet", lambda attrs, content, parser, tag: "Hi")
    >>> registry.registered("greet")
    True
    >>> registry.register("broken", "not callable")
    >>> registry.registered("broken")
    False
    >>> registry.register(404, lambda attrs, content, parser, tag: "Not found")
    >>> registry.registered("404")
    True
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING

from corchetes.utils.logger import get_logger

if TYPE_CHECKING:
    from corchetes.protocol import ShortcodeHandler

logger = get_logger(__name__)


class ShortcodeRegistry:
    """Mutable mapping of tag names to handlers.

    Re-registering a name replaces its handler. Registering something that
    is not callable is ignored.
    """

    __slots__ = ("_handlers", "_lock")

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._handlers: dict[str, ShortcodeHandler] = {}
        self._lock = threading.Lock()

    def register(self, name: str, handler: ShortcodeHandler) -> None:
        """Register a handler for a tag name.

        Args:
            name: Tag name, matched literally (normally lowercase_underscore).
                Non-string names are stored as ``str(name)``.
            handler: Callable implementing the ShortcodeHandler protocol
        """
        name = str(name)
        if not callable(handler):
            logger.debug(
                "Ignoring shortcode %r: handler of type %s is not callable",
                name,
                type(handler).__name__,
            )
            return

        with self._lock:
            self._handlers[name] = handler

    def registered(self, name: str) -> bool:
        """Check if a tag name is registered."""
        return str(name) in self._handlers

    def unregister(self, name: str) -> None:
        """Remove a tag name. Unknown names are ignored."""
        with self._lock:
            self._handlers.pop(str(name), None)

    def clear(self) -> None:
        """Remove all registered shortcodes."""
        with self._lock:
            self._handlers = {}

    def get(self, name: str) -> ShortcodeHandler | None:
        """Get handler for tag name.

        Returns:
            Handler if registered, None otherwise
        """
        return self._handlers.get(str(name))

    @property
    def names(self) -> frozenset[str]:
        """Snapshot of all registered tag names."""
        with self._lock:
            return frozenset(self._handlers)

    def copy(self) -> ShortcodeRegistry:
        """Create an independent registry with the same entries."""
        clone = ShortcodeRegistry()
        with self._lock:
            clone._handlers = dict(self._handlers)
        return clone

    def __contains__(self, name: object) -> bool:
        """Support 'name in registry' syntax."""
        return str(name) in self._handlers

    def __iter__(self) -> Iterator[str]:
        """Iterate over a snapshot of registered names."""
        return iter(sorted(self.names))

    def __len__(self) -> int:
        """Number of registered tag names."""
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"ShortcodeRegistry({sorted(self.names)!r})"
