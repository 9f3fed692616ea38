"""Keep separate shortcode sets for unrelated subsystems."""

from corchetes import InstanceDirectory
from corchetes.builtins import register_builtins

directory = InstanceDirectory()

docs = register_builtins(directory.get("docs"))
docs.register("key", lambda attrs, content, parser, tag: f"<kbd>{content}</kbd>")
directory.get("emails").register("name", lambda attrs, content, parser, tag: "Ana")

directory.set_active("docs")
print(directory.get_active().parse('[nested wrap="p"]Press [key]Ctrl+S[/key] to save.[/nested]'))

directory.set_active("emails")
print(directory.get_active().parse("Dear [name /], [key]untouched[/key]"))
