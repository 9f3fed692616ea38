"""Instance directory: named parsers plus an "active" pointer.

Lets unrelated subsystems register shortcodes into independent namespaces:

    >>> directory = InstanceDirectory()
    >>> directory.get("emails").register("name", lambda *args: "Ana")
    >>> directory.get("emails").registered("name")
    True
    >>> directory.get().registered("name")
    False

Parsers are created on first lookup and live as long as the directory. The
module-level get(), get_active() and set_active() functions operate on a
process-wide default directory; tests should build their own.

Thread Safety:
Lazy creation and active-pointer updates are guarded by a lock, so two
threads asking for the same new identifier receive the same parser.

"""

from __future__ import annotations

import threading
from collections.abc import Callable

from corchetes.parser import ShortcodeParser
from corchetes.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_IDENTIFIER = "default"


class InstanceDirectory:
    """Registry of named ShortcodeParser instances."""

    __slots__ = ("_instances", "_active", "_factory", "_lock")

    def __init__(
        self,
        factory: Callable[[], ShortcodeParser] = ShortcodeParser,
        active: str = DEFAULT_IDENTIFIER,
    ) -> None:
        """Initialize an empty directory.

        Args:
            factory: Creates the parser for a new identifier
            active: Identifier get_active() resolves to initially
        """
        self._instances: dict[str, ShortcodeParser] = {}
        self._active = str(active)
        self._factory = factory
        self._lock = threading.Lock()

    def get(self, identifier: str = DEFAULT_IDENTIFIER) -> ShortcodeParser:
        """Get the parser attached to an identifier, creating it if needed.

        Args:
            identifier: Namespace name, defaults to "default"

        Returns:
            The same ShortcodeParser for every call with this identifier
        """
        identifier = str(identifier)
        parser = self._instances.get(identifier)
        if parser is not None:
            return parser

        with self._lock:
            parser = self._instances.get(identifier)
            if parser is None:
                parser = self._factory()
                self._instances[identifier] = parser
                logger.debug("Created shortcode parser %r", identifier)
        return parser

    def get_active(self) -> ShortcodeParser:
        """Get the currently active parser."""
        return self.get(self._active)

    def set_active(self, identifier: str) -> None:
        """Set the identifier get_active() resolves to."""
        with self._lock:
            self._active = str(identifier)

    @property
    def active(self) -> str:
        """Identifier of the active parser."""
        return self._active

    @property
    def identifiers(self) -> frozenset[str]:
        """Identifiers of all parsers created so far."""
        with self._lock:
            return frozenset(self._instances)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __repr__(self) -> str:
        return f"InstanceDirectory(active={self._active!r}, identifiers={sorted(self.identifiers)!r})"


# Process-wide directory backing the module-level helpers
_DEFAULT_DIRECTORY = InstanceDirectory()


def get_directory() -> InstanceDirectory:
    """Get the process-wide directory."""
    return _DEFAULT_DIRECTORY


def get(identifier: str = DEFAULT_IDENTIFIER) -> ShortcodeParser:
    """Get a parser from the process-wide directory."""
    return _DEFAULT_DIRECTORY.get(identifier)


def get_active() -> ShortcodeParser:
    """Get the active parser from the process-wide directory."""
    return _DEFAULT_DIRECTORY.get_active()


def set_active(identifier: str) -> None:
    """Set the active identifier of the process-wide directory."""
    _DEFAULT_DIRECTORY.set_active(identifier)
