"""Tag matcher: finds shortcode occurrences in a document.

The matcher is an explicit two-phase scanner rather than one large regular
expression:

1. Find the next ``[`` followed by a registered tag name.
2. For an enclosing tag, search forward for the nearest ``[/name]``.

Every scan moves forward. Within one scan the offset of the next ``]`` is
remembered, and each tag name remembers the result of its last
closing-marker search, so a document full of unterminated openings (or of
openings with no ``]`` at all) is still scanned in linear time. No
backtracking, no ReDoS.

Recognized forms:

    [name attr="v" /]          self-closing
    [name attr="v"]body[/name] enclosing ([/ name ] also closes)
    [[name ...]]               escaped, rendered literally

Same-name nesting is not supported: ``[t][t]a[/t]b[/t]`` closes the outer
tag at the first ``[/t]``.

Thread Safety:
TagMatcher is immutable after creation. Each scan() keeps its state in
locals, so one matcher may scan several documents concurrently.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# Same set as \s in the tag grammar
_WHITESPACE = frozenset(" \t\n\r\f\v")


class _ScanState:
    """Search results shared by every candidate of one scan().

    Positions only move forward during a scan, so a search result stays
    valid until the scan passes it.
    """

    __slots__ = ("closings", "_bracket_from", "_next_bracket")

    def __init__(self) -> None:
        # name -> (searched_from, (close_start, close_end) or None)
        self.closings: dict[str, tuple[int, tuple[int, int] | None]] = {}
        # Last "]" search: where it started and what it found (-1: none left)
        self._bracket_from = -1
        self._next_bracket = -1

    def head_end_from(self, source: str, pos: int) -> int:
        """Offset of the first ``]`` at or after ``pos``, or -1."""
        found = self._next_bracket
        if 0 <= self._bracket_from <= pos and (found == -1 or found >= pos):
            return found
        found = source.find("]", pos)
        self._bracket_from = pos
        self._next_bracket = found
        return found


@dataclass(frozen=True, slots=True)
class TagOccurrence:
    """One matched shortcode.

    Attributes:
        name: Registered tag name
        self_closing: True for ``[name /]``
        raw_attributes: Text between the name and ``]`` (or ``/]``)
        content: Enclosed text, or None when there is no closing tag
        prefix: Character before the tag ("" at start of input)
        suffix: Character after the tag ("" at end of input)
        start: Offset of the opening ``[``
        end: Offset just past the final ``]``
        text: The tag as written, ``source[start:end]``

    """

    name: str
    self_closing: bool
    raw_attributes: str
    content: str | None
    prefix: str
    suffix: str
    start: int
    end: int
    text: str

    @property
    def escaped(self) -> bool:
        """True for ``[[name ...]]``: render literally, skip the handler."""
        return self.prefix == "[" and self.suffix == "]"

    @property
    def span(self) -> tuple[int, int]:
        """Source range replaced by this occurrence.

        Escaped occurrences also swallow the surrounding brackets.
        """
        if self.escaped:
            return self.start - 1, self.end + 1
        return self.start, self.end


class TagMatcher:
    """Scanner restricted to a fixed set of tag names.

    Usage:
            >>> matcher = TagMatcher(["b", "quote"])
            >>> [occ.name for occ in matcher.scan("[b]bold[/b] and [quote /]")]
            ['b', 'quote']

    """

    __slots__ = ("_names", "_by_first_char")

    def __init__(self, names: Iterable[str]) -> None:
        """Initialize matcher.

        Args:
            names: Tag names to recognize; empty names are ignored
        """
        self._names = frozenset(name for name in names if name)

        # Longest names first so "[note_big]" prefers "note_big" over "note"
        by_first_char: dict[str, list[str]] = {}
        for name in sorted(self._names, key=lambda n: (-len(n), n)):
            by_first_char.setdefault(name[0], []).append(name)
        self._by_first_char = {char: tuple(names) for char, names in by_first_char.items()}

    @property
    def names(self) -> frozenset[str]:
        """Tag names this matcher recognizes."""
        return self._names

    def scan(self, source: str) -> Iterator[TagOccurrence]:
        """Yield occurrences left to right, never overlapping.

        Args:
            source: Document text

        Yields:
            TagOccurrence for each shortcode to replace
        """
        if not self._names:
            return

        state = _ScanState()
        pos = 0
        while True:
            bracket = source.find("[", pos)
            if bracket == -1:
                return
            occurrence = self._match_at(source, bracket, state)
            if occurrence is None:
                pos = bracket + 1
                continue
            yield occurrence
            pos = occurrence.span[1]

    def _match_at(
        self,
        source: str,
        start: int,
        state: _ScanState,
    ) -> TagOccurrence | None:
        """Try to read a tag whose ``[`` is at ``start``."""
        source_len = len(source)
        name = self._read_name(source, start + 1)
        if name is None:
            return None

        head_start = start + 1 + len(name)
        head_end = state.head_end_from(source, head_start)
        if head_end == -1:
            return None

        prefix = source[start - 1] if start > 0 else ""
        content: str | None = None
        if head_end > head_start and source[head_end - 1] == "/":
            self_closing = True
            raw_attributes = source[head_start : head_end - 1]
            end = head_end + 1
        else:
            self_closing = False
            closing = self._find_closing(source, name, head_end + 1, state)
            if closing is None:
                end = head_end + 1
                # Unterminated enclosing tags stay literal unless escaped.
                # Rejected before any slicing so each candidate costs O(1).
                if prefix != "[" or end >= source_len or source[end] != "]":
                    return None
            else:
                content = source[head_end + 1 : closing[0]]
                end = closing[1]
            raw_attributes = source[head_start:head_end]

        return TagOccurrence(
            name=name,
            self_closing=self_closing,
            raw_attributes=raw_attributes,
            content=content,
            prefix=prefix,
            suffix=source[end] if end < source_len else "",
            start=start,
            end=end,
            text=source[start:end],
        )

    def _read_name(self, source: str, pos: int) -> str | None:
        """Return the registered name starting at ``pos``, if any."""
        if pos >= len(source):
            return None
        candidates = self._by_first_char.get(source[pos])
        if not candidates:
            return None
        for name in candidates:
            if not source.startswith(name, pos):
                continue
            after = pos + len(name)
            if after < len(source) and (source[after] in "]/" or source[after] in _WHITESPACE):
                return name
        return None

    def _find_closing(
        self,
        source: str,
        name: str,
        pos: int,
        state: _ScanState,
    ) -> tuple[int, int] | None:
        """Find the nearest ``[/name]`` at or after ``pos``.

        Returns:
            (start, end) offsets of the closing marker, or None
        """
        cached = state.closings.get(name)
        if cached is not None:
            searched_from, found = cached
            if searched_from <= pos and (found is None or found[0] >= pos):
                return found

        found = self._search_closing(source, name, pos)
        state.closings[name] = (pos, found)
        return found

    @staticmethod
    def _search_closing(source: str, name: str, pos: int) -> tuple[int, int] | None:
        source_len = len(source)
        while True:
            marker = source.find("[/", pos)
            if marker == -1:
                return None
            cursor = marker + 2
            while cursor < source_len and source[cursor] in _WHITESPACE:
                cursor += 1
            if source.startswith(name, cursor):
                cursor += len(name)
                while cursor < source_len and source[cursor] in _WHITESPACE:
                    cursor += 1
                if cursor < source_len and source[cursor] == "]":
                    return marker, cursor + 1
            pos = marker + 2
