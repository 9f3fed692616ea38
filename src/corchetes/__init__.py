"""
Corchetes: Shortcode Parser for Python

Maps BBCode-like "shortcodes" to arbitrary callbacks:

    [shortcode]
    [shortcode attributes="example" /]
    [shortcode]enclosed content[/shortcode]

Quick Start:
    >>> from corchetes import ShortcodeParser
    >>> parser = ShortcodeParser()
    >>> parser.register("wrap", lambda attrs, content, parser, tag: f"{attrs['tag']}:{content}")
    >>> parser.parse('[wrap tag="b"]x[/wrap]')
    'b:x'

    >>> # Escape a shortcode with double brackets
    >>> parser.parse("[[wrap /]]")
    '[wrap /]'

Named parsers:
    >>> import corchetes
    >>> corchetes.get("emails").register("name", lambda *args: "Ana")
    >>> corchetes.set_active("emails")
    >>> corchetes.get_active().parse("Hi [name /]")
    'Hi Ana'

Installation:
    pip install corchetes            # Core parser (zero deps)
"""

from corchetes.attributes import parse_attributes
from corchetes.config import (
    ShortcodeConfig,
    get_shortcode_config,
    reset_shortcode_config,
    set_shortcode_config,
    shortcode_config_context,
)
from corchetes.directory import (
    DEFAULT_IDENTIFIER,
    InstanceDirectory,
    get,
    get_active,
    get_directory,
    set_active,
)
from corchetes.dispatch import Dispatcher
from corchetes.errors import CorchetesError, ShortcodeRenderError
from corchetes.location import SourceLocation
from corchetes.matcher import TagMatcher, TagOccurrence
from corchetes.parser import ShortcodeParser
from corchetes.protocol import ShortcodeHandler
from corchetes.registry import ShortcodeRegistry

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "ShortcodeParser",
    "ShortcodeRegistry",
    "ShortcodeHandler",
    "TagMatcher",
    "TagOccurrence",
    "Dispatcher",
    "parse_attributes",
    # Named instances
    "DEFAULT_IDENTIFIER",
    "InstanceDirectory",
    "get",
    "get_active",
    "get_directory",
    "set_active",
    # Configuration
    "ShortcodeConfig",
    "get_shortcode_config",
    "set_shortcode_config",
    "reset_shortcode_config",
    "shortcode_config_context",
    # Errors
    "CorchetesError",
    "ShortcodeRenderError",
    "SourceLocation",
    "__version__",
]
