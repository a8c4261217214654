"""Tests for the order in which lexeme rules are tried.

Each test pins one boundary between rules: splice-unquote versus the
single-character set, strings versus atoms, and where atoms end.
"""

import pytest

from mallex.lexer import Lexer


def texts(source: str) -> list[str]:
    return [t.text for t in Lexer(source).tokenize()]


class TestSpliceUnquote:
    """``~@`` is matched before ``~``."""

    def test_splice_before_tilde(self) -> None:
        assert texts("~@x") == ["~@", "x"]

    def test_tilde_alone(self) -> None:
        assert texts("~x") == ["~", "x"]

    def test_tilde_space_at(self) -> None:
        assert texts("~ @x") == ["~", "@", "x"]

    def test_double_tilde_at(self) -> None:
        assert texts("~~@") == ["~", "~@"]

    def test_quasiquote_form(self) -> None:
        assert texts("`(a ~b ~@c)") == ["`", "(", "a", "~", "b", "~@", "c", ")"]


class TestStructuralCharacters:
    """Each structural character is its own token."""

    @pytest.mark.parametrize("char", list("[]{}()'`~^@"))
    def test_single_char(self, char: str) -> None:
        assert texts(char) == [char]

    def test_vector_with_commas(self) -> None:
        assert texts("[1,2,3]") == ["[", "1", "2", "3", "]"]

    def test_map_literal(self) -> None:
        assert texts("{:a 1, :b 2}") == ["{", ":a", "1", ":b", "2", "}"]

    def test_metadata_and_deref(self) -> None:
        assert texts("^{:tag x} @state") == ["^", "{", ":tag", "x", "}", "@", "state"]


class TestStrings:
    """Strings are taken whole, escapes untouched."""

    def test_simple_string(self) -> None:
        assert texts('"hello world"') == ['"hello world"']

    def test_empty_string(self) -> None:
        assert texts('""') == ['""']

    def test_escaped_quote(self) -> None:
        assert texts(r'"a\"b"') == [r'"a\"b"']

    def test_escapes_not_interpreted(self) -> None:
        assert texts(r'"\n\t\\"') == [r'"\n\t\\"']

    def test_structural_chars_inside_string(self) -> None:
        assert texts('"(;)" x') == ['"(;)"', "x"]

    def test_string_after_atom(self) -> None:
        """A quote ends an atom and starts a string."""
        assert texts('abc"d"') == ["abc", '"d"']

    def test_adjacent_strings(self) -> None:
        assert texts('"a""b"') == ['"a"', '"b"']


class TestComments:
    """Comments run to the newline and are dropped."""

    def test_comment_then_form(self) -> None:
        assert texts("; a comment\n(x)") == ["(", "x", ")"]

    def test_trailing_comment_without_newline(self) -> None:
        assert texts("(a) ; trailing") == ["(", "a", ")"]

    def test_comment_ends_atom(self) -> None:
        assert texts("abc;comment\ndef") == ["abc", "def"]

    def test_quote_inside_comment_ignored(self) -> None:
        assert texts('; say "hi\nx') == ["x"]

    @pytest.mark.parametrize("terminator", ["\r", "\u2028", "\u2029"])
    def test_any_line_terminator_ends_comment(self, terminator: str) -> None:
        assert texts(f"; note{terminator}(x)") == ["(", "x", ")"]


class TestAtoms:
    """Atoms are maximal runs of non-delimiter characters."""

    @pytest.mark.parametrize(
        "source",
        ["+", "-1", "nil", ":keyword", "a/b", "foo-bar?", "*earmuffs*", "λ", "日本語"],
    )
    def test_single_atom(self, source: str) -> None:
        assert texts(source) == [source]

    def test_markers_inside_atom(self) -> None:
        """``~ ^ @`` only split tokens at the start of a lexeme."""
        assert texts("a~b@c^d") == ["a~b@c^d"]
        assert texts("a~@b") == ["a~@b"]

    @pytest.mark.parametrize("delimiter", list("[]{}()'`,;\"") + [" ", "\t", "\n"])
    def test_delimiters_end_atom(self, delimiter: str) -> None:
        tokens = texts(f"ab{delimiter}")
        assert tokens[0] == "ab"

    def test_scenarios(self) -> None:
        assert texts("(+ 1 2)") == ["(", "+", "1", "2", ")"]
        assert texts("'(a b)") == ["'", "(", "a", "b", ")"]
        assert texts('"unterminated') == []
