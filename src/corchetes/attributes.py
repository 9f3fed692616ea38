"""Attribute lexing for shortcode tags.

Turns the raw text between a tag name and its closing bracket into a mapping
of lower-cased keys to string values:

    >>> parse_attributes(' Title="Hello" width=300 ')
    {'title': 'Hello', 'width': '300'}

Values may be double-quoted, single-quoted or bare. Anything that does not
look like ``key=value`` is skipped; lexing never fails.

Thread Safety:
Pure function over immutable input. Safe to call concurrently.

"""

from __future__ import annotations

import re

# key = "quoted" | 'quoted' | bare
_ATTRIBUTE_RE = re.compile(
    r"""
    (\w+) \s* = \s*
    (?:
        (['"]) (.*?) \2
        |
        ([^\s"'>]+)
    )
    """,
    re.VERBOSE | re.DOTALL,
)


def parse_attributes(text: str) -> dict[str, str]:
    """Parse raw attribute text into a dictionary.

    Args:
        text: Raw attribute text, possibly empty

    Returns:
        Mapping of lower-cased attribute names to values. When a key repeats,
        the last value wins. Attributes with an empty value are dropped.
    """
    attributes: dict[str, str] = {}
    if not text:
        return attributes

    for match in _ATTRIBUTE_RE.finditer(text):
        key, _quote, quoted, bare = match.groups()
        if quoted:
            attributes[key.lower()] = quoted
        elif bare:
            attributes[key.lower()] = bare

    return attributes
