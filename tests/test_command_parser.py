"""Tests for the CommandParser module."""

import pytest
from terminal_portfolio.core.command_parser import CommandParser, ParsedInput, parse_int, parse_leading_int


class TestCommandParser:
    """Tests for CommandParser."""

    @pytest.fixture
    def parser(self):
        """Create a CommandParser instance."""
        return CommandParser()

    def test_parse_name_only(self, parser):
        """A single word is the command name with no arguments."""
        parsed = parser.parse("/about")
        assert parsed.name == "/about"
        assert parsed.tokens == ()
        assert parsed.args == ""

    def test_parse_with_arguments(self, parser):
        """Remaining words become tokens and the joined argument string."""
        parsed = parser.parse("search zen   tool")
        assert parsed.name == "search"
        assert parsed.tokens == ("zen", "tool")
        assert parsed.args == "zen tool"

    def test_parse_trims_whitespace(self, parser):
        """Leading and trailing whitespace is dropped."""
        parsed = parser.parse("   open 2  ")
        assert parsed.raw == "open 2"
        assert parsed.tokens == ("2",)

    def test_parse_tabs_split(self, parser):
        """Any whitespace run separates tokens."""
        parsed = parser.parse("/projects\t2")
        assert parsed.name == "/projects"
        assert parsed.tokens == ("2",)

    def test_parse_empty_string(self, parser):
        """Empty string parses to None."""
        assert parser.parse("") is None

    def test_parse_whitespace_only(self, parser):
        """Whitespace only parses to None."""
        assert parser.parse("  \t ") is None

    def test_parsed_input_equality(self):
        """Parsed inputs with same data are equal."""
        assert ParsedInput("a b", "a", ("b",)) == ParsedInput("a b", "a", ("b",))


class TestParseInt:
    """Tests for parse_int."""

    def test_positive(self):
        assert parse_int("3") == 3

    def test_negative(self):
        assert parse_int("-1") == -1

    def test_non_numeric(self):
        assert parse_int("abc") is None

    def test_mixed(self):
        """Trailing junk is not a number."""
        assert parse_int("2abc") is None

    def test_none(self):
        assert parse_int(None) is None

    @pytest.mark.parametrize("token", ["1_0", "٣", "²", "1.0", " 3", "+"])
    def test_only_ascii_digits(self, token):
        """Only plain ASCII digits count as a number."""
        assert parse_int(token) is None

    def test_explicit_plus(self):
        assert parse_int("+4") == 4


class TestParseLeadingInt:
    """Tests for parse_leading_int."""

    def test_whole_number(self):
        assert parse_leading_int("3") == 3

    def test_trailing_junk_ignored(self):
        """Digits before any other character are read."""
        assert parse_leading_int("2abc") == 2

    def test_negative_prefix(self):
        assert parse_leading_int("-1x") == -1

    @pytest.mark.parametrize("token", ["abc", "٣", "_1", ""])
    def test_no_leading_digits(self, token):
        assert parse_leading_int(token) is None

    def test_none(self):
        assert parse_leading_int(None) is None
