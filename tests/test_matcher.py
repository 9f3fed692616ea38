"""Tests for TagMatcher and TagOccurrence."""

from __future__ import annotations

from corchetes import TagMatcher


def scan(source: str, *names: str) -> list:
    return list(TagMatcher(names).scan(source))


class TestForms:
    """Self-closing, enclosing, and escaped forms."""

    def test_self_closing(self) -> None:
        (occ,) = scan('[img src="a.png" /]', "img")
        assert occ.name == "img"
        assert occ.self_closing is True
        assert occ.raw_attributes == ' src="a.png" '
        assert occ.content is None
        assert occ.span == (0, 19)

    def test_self_closing_without_space(self) -> None:
        (occ,) = scan("[br/]", "br")
        assert occ.self_closing is True
        assert occ.raw_attributes == ""

    def test_enclosing(self) -> None:
        (occ,) = scan('x [b class="c"]bold[/b] y', "b")
        assert occ.self_closing is False
        assert occ.raw_attributes == ' class="c"'
        assert occ.content == "bold"
        assert occ.text == '[b class="c"]bold[/b]'
        assert occ.prefix == " "
        assert occ.suffix == " "
        assert occ.span == (2, 23)

    def test_empty_body(self) -> None:
        (occ,) = scan("[b][/b]", "b")
        assert occ.content == ""

    def test_body_spans_lines(self) -> None:
        (occ,) = scan("[quote]\nline one\nline two\n[/quote]", "quote")
        assert occ.content == "\nline one\nline two\n"

    def test_closing_tag_whitespace(self) -> None:
        for closing in ("[/b]", "[/ b]", "[/b ]", "[/ b ]", "[/\tb\n]"):
            (occ,) = scan(f"[b]x{closing}", "b")
            assert occ.content == "x"
            assert occ.end == len(f"[b]x{closing}")

    def test_escaped_self_closing(self) -> None:
        (occ,) = scan("[[x /]]", "x")
        assert occ.escaped is True
        assert occ.text == "[x /]"
        assert occ.span == (0, 7)

    def test_escaped_bare_tag(self) -> None:
        """A bare tag wrapped in double brackets is reported as an escape."""
        (occ,) = scan("[[x]]", "x")
        assert occ.escaped is True
        assert occ.content is None
        assert occ.span == (0, 5)

    def test_escaped_enclosing(self) -> None:
        (occ,) = scan("[[t]a[/t]]", "t")
        assert occ.escaped is True
        assert occ.text == "[t]a[/t]"

    def test_start_and_end_of_input(self) -> None:
        (occ,) = scan("[x /]", "x")
        assert occ.prefix == ""
        assert occ.suffix == ""
        assert occ.escaped is False


class TestRestrictions:
    """What is not a shortcode."""

    def test_unregistered_name(self) -> None:
        assert scan("[foo]bar[/foo]", "b") == []

    def test_no_names(self) -> None:
        assert scan("[b]x[/b]") == []

    def test_unterminated_enclosing_tag(self) -> None:
        assert scan("[b]never closed", "b") == []

    def test_unclosed_bracket(self) -> None:
        assert scan("[b attr='x'", "b") == []

    def test_name_boundary(self) -> None:
        """A registered name must not just be a prefix of a longer word."""
        assert scan("[bold /]", "b") == []

    def test_longest_name_wins(self) -> None:
        (occ,) = scan("[note_big /]", "note", "note_big")
        assert occ.name == "note_big"

    def test_names_are_literal(self) -> None:
        """Regex metacharacters in names are matched literally."""
        (occ,) = scan("[a.b /] [axb /]", "a.b")
        assert occ.name == "a.b"
        assert occ.start == 0

    def test_case_sensitive_names(self) -> None:
        assert scan("[B /]", "b") == []

    def test_closing_tag_of_other_name_does_not_close(self) -> None:
        assert scan("[a]x[/b]", "a", "b") == []


class TestOrdering:
    """Left-to-right, non-overlapping scanning."""

    def test_nearest_closing_tag_wins(self) -> None:
        (occ,) = scan("[t]a[/t]b[/t]", "t")
        assert occ.content == "a"
        assert occ.end == 8

    def test_same_name_nesting_closes_early(self) -> None:
        (occ,) = scan("[t][t]a[/t]b[/t]", "t")
        assert occ.content == "[t]a"
        assert occ.suffix == "b"

    def test_other_names_inside_body_are_skipped(self) -> None:
        occurrences = scan("[a][b /][/a][b /]", "a", "b")
        assert [(occ.name, occ.start) for occ in occurrences] == [("a", 0), ("b", 12)]
        assert occurrences[0].content == "[b /]"

    def test_adjacent_tags(self) -> None:
        occurrences = scan("[a /][a /]", "a")
        assert [occ.span for occ in occurrences] == [(0, 5), (5, 10)]
        assert occurrences[1].prefix == "]"

    def test_repeated_unterminated_openings(self) -> None:
        source = "[t]" * 500 + "[/x]"
        assert scan(source, "t") == []

    def test_unterminated_then_terminated(self) -> None:
        """A cached failed search does not hide a later self-closing tag."""
        occurrences = scan("[t] [t] [t /]", "t")
        assert [occ.start for occ in occurrences] == [8]

    def test_closing_search_restarts_after_consumed_marker(self) -> None:
        occurrences = scan("[t]a[/t][t]b[/t]", "t")
        assert [occ.content for occ in occurrences] == ["a", "b"]

    def test_matcher_names_property(self) -> None:
        assert TagMatcher(["a", "", "b"]).names == frozenset({"a", "b"})

    def test_repeated_unterminated_openings_with_one_late_bracket(self) -> None:
        source = "[b " * 1000 + "]"
        assert scan(source, "b") == []

    def test_openings_without_any_closing_bracket(self) -> None:
        assert scan("[b " * 1000, "b") == []

    def test_escaped_tag_after_many_unterminated_openings(self) -> None:
        occurrences = scan("[b " * 200 + "[[b]]", "b")
        assert [occ.text for occ in occurrences] == ["[b]"]
        assert occurrences[0].escaped is True


class CountingSource(str):
    """Document text that counts how often the head terminator is searched."""

    bracket_searches = 0

    def find(self, sub, *args):  # type: ignore[override]
        if sub == "]":
            type(self).bracket_searches += 1
        return super().find(sub, *args)


class TestScaling:
    """The number of searches does not grow with the number of openings."""

    def count_bracket_searches(self, text: str) -> int:
        CountingSource.bracket_searches = 0
        assert list(TagMatcher(["b"]).scan(CountingSource(text))) == []
        return CountingSource.bracket_searches

    def test_single_late_bracket(self) -> None:
        assert self.count_bracket_searches("[b " * 1000 + "]") == 1
        assert self.count_bracket_searches("[b " * 4000 + "]") == 1

    def test_no_bracket_at_all(self) -> None:
        assert self.count_bracket_searches("[b " * 1000) == 1
        assert self.count_bracket_searches("[b " * 4000) == 1

    def test_one_search_per_head_terminator(self) -> None:
        # Every "[b]" has its own "]", so the count tracks heads, not pairs
        assert self.count_bracket_searches("[b]" * 1000) == 1000
