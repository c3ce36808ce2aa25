"""Tests for the command line tokenizer."""

import pytest
from delve.core.command_parser import CommandLine, parse_index, split_lines
from delve.core.variables import VariableStore


class TestCommandLine:
    """Tests for CommandLine."""

    @pytest.fixture
    def variables(self):
        """A variable store with a couple of values."""
        store = VariableStore()
        store.set("home", "gopher://example.org/")
        store.set("spaced", "two words")
        return store

    def test_plain_tokens(self):
        """Tokens are separated by blanks."""
        assert CommandLine("open  gopher://h/\tnow").tokens() == ["open", "gopher://h/", "now"]

    def test_leading_blanks_skipped(self):
        """Leading spaces, tabs and vertical tabs are skipped."""
        line = CommandLine(" \t\vshow")
        assert line.next_token() == "show"
        assert line.next_token() is None

    def test_empty_line(self):
        """An empty line has no tokens."""
        assert CommandLine("").next_token() is None
        assert CommandLine("   ").next_token() is None

    def test_comment_line(self):
        """A line starting with # has no tokens."""
        assert CommandLine("# just a comment").next_token() is None

    def test_trailing_comment(self):
        """# after a token ends the line."""
        assert CommandLine("back # go back").tokens() == ["back"]

    def test_hash_inside_token(self):
        """# in the middle of a token is kept."""
        assert CommandLine("see a#b").tokens() == ["see", "a#b"]

    def test_quoted_token(self):
        """Quoted text keeps its spaces."""
        assert CommandLine('type 0 "less %f" tail').tokens() == ["type", "0", "less %f", "tail"]

    def test_unterminated_quote(self):
        """An unterminated quote runs to the end of the line."""
        assert CommandLine('alias x "open example.org').tokens() == ["alias", "x", "open example.org"]

    def test_empty_quotes(self):
        """Two quotes give an empty token."""
        assert CommandLine('set x ""').tokens() == ["set", "x", ""]

    def test_variable_substitution(self, variables):
        """$name is replaced by the variable value."""
        assert CommandLine("open $home", variables).tokens() == ["open", "gopher://example.org/"]

    def test_variable_case_insensitive(self, variables):
        """Variable names match without regard to case."""
        assert CommandLine("open $HOME", variables).tokens()[1] == "gopher://example.org/"

    def test_unset_variable_is_empty(self, variables):
        """An unknown variable substitutes the empty string."""
        assert CommandLine("open $nothing", variables).tokens() == ["open", ""]

    def test_substitution_not_retokenized(self, variables):
        """A substituted value containing spaces stays one token."""
        assert CommandLine("set a $spaced", variables).tokens() == ["set", "a", "two words"]

    def test_substitution_not_recursive(self):
        """A value that looks like a variable is not substituted again."""
        store = VariableStore()
        store.set("a", "$b")
        store.set("b", "deep")
        assert CommandLine("$a", store).tokens() == ["$b"]

    def test_quoted_dollar_not_substituted(self, variables):
        """Quoted text is taken literally."""
        assert CommandLine('set x "$home"', variables).tokens() == ["set", "x", "$home"]

    def test_rest_after_first_token(self):
        """rest holds the unconsumed part of the line."""
        line = CommandLine("save 3")
        line.next_token()
        assert line.rest == "3"


class TestParseIndex:
    """Tests for parse_index."""

    def test_number(self):
        """Digits parse as a number."""
        assert parse_index("12") == 12

    def test_leading_blanks_and_trailing_text(self):
        """Leading blanks are skipped and trailing text ignored."""
        assert parse_index("  3 extra") == 3

    def test_not_a_number(self):
        """Non-numeric text gives None."""
        assert parse_index("open") is None
        assert parse_index("") is None
        assert parse_index(None) is None


class TestSplitLines:
    """Tests for split_lines."""

    def test_mixed_line_endings(self):
        """CRLF, CR and LF all end a line."""
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_blank_lines_are_kept(self):
        """Blank lines stay so line numbers are accurate."""
        assert split_lines("a\n\nb") == ["a", "", "b"]
