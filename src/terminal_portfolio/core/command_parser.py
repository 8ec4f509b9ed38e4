"""Command parser for interpreting user input."""

import re
from dataclasses import dataclass, field

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ParsedInput:
    """A tokenized input line."""

    raw: str
    name: str
    tokens: tuple[str, ...] = field(default_factory=tuple)

    @property
    def args(self) -> str:
        """Argument tokens joined with single spaces."""
        return " ".join(self.tokens)


class CommandParser:
    """Splits raw input lines into a command name and arguments."""

    def parse(self, input_str: str) -> ParsedInput | None:
        """
        Parse a raw input line.

        Args:
            input_str: The raw line typed at the prompt.

        Returns:
            A ParsedInput, or None if the line is empty or whitespace.
        """
        cleaned = input_str.strip()

        if not cleaned:
            return None

        name, *rest = cleaned.split()
        return ParsedInput(raw=cleaned, name=name, tokens=tuple(rest))


def parse_int(token: str | None) -> int | None:
    """Parse a whole-number argument, or None if it isn't one.

    Only ASCII digits with an optional sign are accepted.
    """
    if token is None or not INTEGER_PATTERN.fullmatch(token):
        return None
    return int(token)


def parse_leading_int(token: str | None) -> int | None:
    """Parse the leading digits of a token, so "2abc" reads as 2."""
    if token is None:
        return None
    match = INTEGER_PATTERN.match(token)
    return int(match.group()) if match else None
