"""Source location tracking for log records and error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a shortcode in the parsed text.

    Line and column are 1-indexed; offsets are 0-indexed positions into the
    source string.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source
        source_file: Source file path (optional, for messages only)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5)
            >>> str(loc)
            '2:5'

            >>> str(SourceLocation(1, 1, source_file="page.txt"))
            'page.txt:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location like "file.txt:10:5" or "10:5"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offsets(
        cls,
        source: str,
        offset: int,
        end_offset: int | None = None,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Build a location by counting lines up to ``offset``.

        Args:
            source: Full source text
            offset: Start offset of the construct
            end_offset: End offset (defaults to ``offset``)
            source_file: Optional file name for messages

        Returns:
            SourceLocation with line and column resolved
        """
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            end_offset=offset if end_offset is None else end_offset,
            source_file=source_file,
        )
