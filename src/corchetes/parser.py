"""Shortcode parser: drives one pass of the matcher and stitches the output.

Maps BBCode-like "shortcodes" to arbitrary callbacks:

    [shortcode]content[/shortcode]
    [shortcode attribute="example" /]
    [[shortcode]]   renders literally as [shortcode]

Example:
    >>> parser = ShortcodeParser()
    >>> parser.register("greet", lambda attrs, content, parser, tag: "Hi")
    >>> parser.parse("[greet /], there")
    'Hi, there'

The pass is single and non-recursive: handler output is never re-scanned.
A handler that wants its content expanded calls ``parser.parse(content)``;
such nested calls are limited by ``ShortcodeConfig.max_depth``.

Thread Safety:
parse() keeps its state in locals and reads a snapshot of the registry, so a
parser may be shared between threads. Registration is lock-protected.

"""

from __future__ import annotations

from collections.abc import Callable
from contextvars import ContextVar
from typing import TYPE_CHECKING

from corchetes.config import get_shortcode_config
from corchetes.dispatch import Dispatcher
from corchetes.matcher import TagMatcher, TagOccurrence
from corchetes.registry import ShortcodeRegistry
from corchetes.stringbuilder import StringBuilder
from corchetes.utils.logger import get_logger

if TYPE_CHECKING:
    from corchetes.protocol import ShortcodeHandler

logger = get_logger(__name__)

# Nesting of parse() calls made from inside handlers
_parse_depth: ContextVar[int] = ContextVar("shortcode_parse_depth", default=0)


class ShortcodeParser:
    """Replaces registered shortcodes in text with their handlers' output.

    Each parser owns its registry. Use InstanceDirectory to keep separate
    parsers for unrelated subsystems.
    """

    __slots__ = ("_registry", "_dispatcher", "_matcher")

    def __init__(self, registry: ShortcodeRegistry | None = None) -> None:
        """Initialize parser.

        Args:
            registry: Registry to own (a new empty one if None)
        """
        self._registry = registry if registry is not None else ShortcodeRegistry()
        self._dispatcher = Dispatcher(self)
        self._matcher: TagMatcher | None = None

    @property
    def registry(self) -> ShortcodeRegistry:
        """The registry this parser resolves tag names against."""
        return self._registry

    # -------------------------------------------------------------------------
    # Registration

    def register(self, name: str, handler: ShortcodeHandler) -> None:
        """Register a shortcode handler.

        The handler is called with the attributes (lower-cased keys), the
        enclosed content or None, this parser and the tag name. Handlers that
        are not callable are ignored.
        """
        self._registry.register(name, handler)

    def registered(self, name: str) -> bool:
        """Check if a shortcode has been registered."""
        return self._registry.registered(name)

    def unregister(self, name: str) -> None:
        """Remove a specific registered shortcode."""
        self._registry.unregister(name)

    def clear(self) -> None:
        """Remove all registered shortcodes."""
        self._registry.clear()

    def shortcode(self, name: str) -> Callable[[ShortcodeHandler], ShortcodeHandler]:
        """Decorator form of register().

        Example:
            >>> parser = ShortcodeParser()
            >>> @parser.shortcode("year")
            ... def year(attributes, content, parser, tag):
            ...     return "2024"
            >>> parser.parse("(c) [year /]")
            '(c) 2024'
        """

        def decorator(handler: ShortcodeHandler) -> ShortcodeHandler:
            self.register(name, handler)
            return handler

        return decorator

    # -------------------------------------------------------------------------
    # Parsing

    def find(self, content: str) -> list[TagOccurrence]:
        """List the occurrences parse() would replace, without expanding them."""
        if not self._registry or "[" not in content:
            return []
        return list(self._get_matcher().scan(content))

    def parse(self, content: str, *, source_file: str | None = None) -> str:
        """Replace every registered shortcode in ``content``.

        Args:
            content: Text to parse
            source_file: Optional file name used in log and error messages

        Returns:
            The text with shortcodes expanded. Content is returned unchanged
            when nothing is registered.
        """
        if not self._registry:
            return content

        depth = _parse_depth.get()
        max_depth = get_shortcode_config().max_depth
        if depth >= max_depth:
            logger.warning(
                "Shortcode nesting deeper than %d in %s, leaving content unparsed",
                max_depth,
                source_file or "<string>",
            )
            return content

        token = _parse_depth.set(depth + 1)
        try:
            return self._parse(content, source_file)
        finally:
            _parse_depth.reset(token)

    def _parse(self, content: str, source_file: str | None) -> str:
        if "[" not in content:
            return content

        sb = StringBuilder()
        pos = 0
        for occurrence in self._get_matcher().scan(content):
            span_start, span_end = occurrence.span
            sb.append(content[pos:span_start])
            sb.append(
                self._dispatcher.expand(occurrence, source=content, source_file=source_file)
            )
            pos = span_end

        if pos == 0:
            return content
        sb.append(content[pos:])
        return sb.build()

    def _get_matcher(self) -> TagMatcher:
        """Matcher for the current registry names, rebuilt when they change."""
        names = self._registry.names
        matcher = self._matcher
        if matcher is None or matcher.names != names:
            matcher = TagMatcher(names)
            self._matcher = matcher
        return matcher

    def __repr__(self) -> str:
        return f"ShortcodeParser({sorted(self._registry.names)!r})"
