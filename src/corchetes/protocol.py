"""ShortcodeHandler protocol.

A handler is any callable taking the attribute mapping, the enclosed content
(``None`` for self-closing tags), the parser that matched the tag and the tag
name, and returning the replacement text:

    >>> def greet(attributes, content, parser, tag):
    ...     return f"Hello, {attributes.get('name', 'World')}!"

Content is handed over unparsed. A handler that wants nested shortcodes
expanded calls ``parser.parse(content)`` itself.

Thread Safety:
Handlers registered on a shared parser may be called from several threads
at once and should keep their state in arguments, not in globals.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from corchetes.parser import ShortcodeParser


@runtime_checkable
class ShortcodeHandler(Protocol):
    """Protocol for shortcode handlers.

    Plain functions, lambdas, bound methods and objects defining
    ``__call__`` all satisfy it.
    """

    def __call__(
        self,
        attributes: dict[str, str],
        content: str | None,
        parser: ShortcodeParser,
        tag: str,
    ) -> Any:
        """Expand one shortcode.

        Args:
            attributes: Lower-cased attribute names mapped to their values
            content: Enclosed text for enclosing tags, None otherwise
            parser: Parser instance that matched the tag
            tag: Tag name as registered

        Returns:
            Replacement text. ``None`` renders as an empty string, other
            non-string values are converted with ``str()``.
        """
        ...
