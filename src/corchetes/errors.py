"""Exception classes for Corchetes.

Parsing itself never raises: unknown tags, unterminated tags and malformed
attributes all degrade to literal text. These exceptions cover the opt-in
strict mode and misuse of the public API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from corchetes.location import SourceLocation


class CorchetesError(Exception):
    """Base exception for all Corchetes errors.

    Subclass this for specific error categories.
    """

    pass


class ShortcodeRenderError(CorchetesError):
    """A shortcode handler raised while expanding a tag.

    Only raised when ``ShortcodeConfig.strict_handlers`` is enabled. The
    handler's own exception is available as ``__cause__``.
    """

    def __init__(
        self,
        tag: str,
        message: str,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize render error.

        Args:
            tag: Name of the shortcode whose handler failed
            message: Description of the failure
            location: Where the tag starts in the source (optional)
        """
        self.tag = tag
        self.message = message
        self.location = location

        where = f"{location} " if location is not None else ""
        super().__init__(f"{where}Shortcode '{tag}': {message}")
