"""Register a shortcode and expand it with zero config and zero deps."""

from corchetes import ShortcodeParser

parser = ShortcodeParser()


@parser.shortcode("greet")
def greet(attributes, content, parser, tag):
    return f"Hello, {attributes.get('name', 'World')}!"


print(parser.parse('[greet name="Ana" /] [[greet /]] shows the syntax.'))
