"""Property-based tests for the shortcode parser using Hypothesis.

Invariants that hold for any input text:
1. An empty registry never changes the input
2. Text without "[" is never changed, whatever is registered
3. parse() never raises with well-behaved handlers
4. Escaped tags never reach their handler
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from corchetes import ShortcodeParser, TagMatcher, parse_attributes

# Text biased towards shortcode syntax
syntax_alphabet = st.sampled_from(list("[]/ =\"'abtx\n"))
shortcode_text = st.text(alphabet=syntax_alphabet, max_size=60)
text_without_x_tag = shortcode_text.filter(lambda s: "[x" not in s)
tag_names = st.lists(st.sampled_from(["a", "b", "t", "x", "ab"]), min_size=1, max_size=4, unique=True)


def _echo(attributes, content, parser, tag):
    return f"<{tag}>"


class TestParserProperties:
    """Property-based tests for ShortcodeParser.parse()."""

    @given(text=st.text())
    @settings(max_examples=100)
    def test_empty_registry_is_identity(self, text: str) -> None:
        assert ShortcodeParser().parse(text) == text

    @given(text=st.text().filter(lambda s: "[" not in s), names=tag_names)
    @settings(max_examples=100)
    def test_text_without_brackets_unchanged(self, text: str, names: list[str]) -> None:
        parser = ShortcodeParser()
        for name in names:
            parser.register(name, _echo)
        assert parser.parse(text) == text

    @given(text=shortcode_text, names=tag_names)
    @settings(max_examples=200)
    def test_parse_never_raises(self, text: str, names: list[str]) -> None:
        parser = ShortcodeParser()
        for name in names:
            parser.register(name, _echo)
        assert isinstance(parser.parse(text), str)

    @given(before=text_without_x_tag, after=text_without_x_tag)
    @settings(max_examples=200)
    def test_escape_renders_literally(self, before: str, after: str) -> None:
        """With no other "[x" in the text, the escape is the only candidate.

        Surrounding brackets (even a trailing "[" in ``before``) cannot absorb
        it, so the output is exact and the handler is never called.
        """
        calls: list[str] = []
        parser = ShortcodeParser()
        parser.register("x", lambda *args: calls.append("x") or "")
        assert parser.parse(f"{before}[[x /]]{after}") == f"{before}[x /]{after}"
        assert calls == []


class TestMatcherProperties:
    """Occurrences are ordered and never overlap."""

    @given(text=shortcode_text, names=tag_names)
    @settings(max_examples=200)
    def test_spans_are_ordered_and_disjoint(self, text: str, names: list[str]) -> None:
        previous_end = 0
        for occurrence in TagMatcher(names).scan(text):
            start, end = occurrence.span
            assert previous_end <= start < end <= len(text)
            assert text[occurrence.start : occurrence.end] == occurrence.text
            previous_end = end


class TestAttributeProperties:
    @given(text=st.text())
    @settings(max_examples=100)
    def test_keys_are_lower_case_and_values_non_empty(self, text: str) -> None:
        for key, value in parse_attributes(text).items():
            assert key == key.lower()
            assert value
