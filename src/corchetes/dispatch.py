"""Dispatcher: turns a matched occurrence into replacement text.

Escaped occurrences (``[[name]]``) render as the tag text without the outer
brackets. Everything else is expanded by the handler registered for the tag
name, which receives the lexed attributes, the enclosed content (unparsed),
the parser and the tag name.

Handler failures follow ``ShortcodeConfig.strict_handlers``: by default the
failure is logged and the tag is left exactly as written; in strict mode a
ShortcodeRenderError is raised with the original exception chained.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from corchetes.attributes import parse_attributes
from corchetes.config import get_shortcode_config
from corchetes.errors import ShortcodeRenderError
from corchetes.location import SourceLocation
from corchetes.utils.logger import get_logger

if TYPE_CHECKING:
    from corchetes.matcher import TagOccurrence
    from corchetes.parser import ShortcodeParser

logger = get_logger(__name__)


def _coerce_result(result: Any) -> str:
    if result is None:
        return ""
    if isinstance(result, str):
        return result
    return str(result)


class Dispatcher:
    """Expands occurrences on behalf of one parser.

    Thread Safety:
        Holds only a reference to its parser. Handler lookups go through the
        parser's registry, which is safe to read concurrently.

    """

    __slots__ = ("_parser",)

    def __init__(self, parser: ShortcodeParser) -> None:
        self._parser = parser

    def expand(
        self,
        occurrence: TagOccurrence,
        *,
        source: str = "",
        source_file: str | None = None,
    ) -> str:
        """Produce the text that replaces ``occurrence.span``.

        Args:
            occurrence: Matched tag
            source: Document being parsed, used to locate failures
            source_file: Optional file name for log and error messages

        Returns:
            Replacement text

        Raises:
            ShortcodeRenderError: If the handler fails and strict_handlers
                is enabled
        """
        if occurrence.escaped:
            return occurrence.text

        handler = self._parser.registry.get(occurrence.name)
        if handler is None:
            # Unregistered by another thread since the scan started
            return occurrence.text

        attributes = parse_attributes(occurrence.raw_attributes)
        try:
            result = handler(attributes, occurrence.content, self._parser, occurrence.name)
        except ShortcodeRenderError:
            raise
        except Exception as exc:
            location = SourceLocation.from_offsets(
                source, occurrence.start, occurrence.end, source_file
            )
            if get_shortcode_config().strict_handlers:
                msg = f"handler raised {type(exc).__name__}: {exc}"
                raise ShortcodeRenderError(occurrence.name, msg, location) from exc
            logger.warning(
                "Shortcode %r at %s failed, leaving it unexpanded",
                occurrence.name,
                location,
                exc_info=True,
            )
            return occurrence.text

        return _coerce_result(result)
