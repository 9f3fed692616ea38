"""Built-in shortcode handlers.

Only ``nested`` ships here. It opts a region of unparsed handler content
back into expansion:

    >>> from corchetes import ShortcodeParser
    >>> from corchetes.builtins import register_builtins
    >>> parser = register_builtins(ShortcodeParser())
    >>> parser.register("me", lambda *args: "ME")
    >>> parser.parse('[nested wrap="p"]by [me /][/nested]')
    '<p>by ME</p>'

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from corchetes.builtins.nesting import NestedShortcode

if TYPE_CHECKING:
    from corchetes.parser import ShortcodeParser

BUILTIN_SHORTCODES = (NestedShortcode,)


def register_builtins(parser: ShortcodeParser) -> ShortcodeParser:
    """Register every built-in shortcode under each of its names.

    Returns:
        The same parser, for chaining
    """
    for handler_class in BUILTIN_SHORTCODES:
        handler = handler_class()
        for name in handler_class.names:
            parser.register(name, handler)
    return parser


__all__ = [
    "BUILTIN_SHORTCODES",
    "NestedShortcode",
    "register_builtins",
]
