"""Shortcode that expands shortcodes inside its own content.

Content handed to a handler is unparsed. ``[nested]`` opts a region back in:

    [nested][icon name="close" /] closes the dialog[/nested]

An optional ``wrap`` attribute names an HTML element to wrap the result in.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from corchetes.parser import ShortcodeParser

_ELEMENT_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9-]*")


class NestedShortcode:
    """Handler for [nested]...[/nested].

    Thread Safety:
        Stateless handler. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("nested",)

    def __call__(
        self,
        attributes: dict[str, str],
        content: str | None,
        parser: ShortcodeParser,
        tag: str,
    ) -> str:
        if content is None:
            return ""

        expanded = parser.parse(content)
        element = attributes.get("wrap")
        if element and _ELEMENT_NAME_RE.fullmatch(element):
            return f"<{element}>{expanded}</{element}>"
        return expanded
