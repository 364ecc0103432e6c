"""Forward-only scan position over the input text."""

from typing import NoReturn

from ._errors import ErrorKind
from ._errors import JSONParseError
from ._errors import Position

WHITESPACE = frozenset(" \t\n\r")


class Cursor:
    """
    Holds the input text and the current scan offset.

    The offset only ever moves forward and never passes the end of the
    text. peek() returns an empty string once the input is exhausted.
    """

    __slots__ = ("length", "pos", "text")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos: Position = 0
        self.length = len(text)

    def at_end(self) -> bool:
        return self.pos >= self.length

    def peek(self, offset: int = 0) -> str:
        """Returns the character at pos + offset without advancing."""
        index = self.pos + offset
        return self.text[index] if index < self.length else ""

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, self.length)

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def skip_whitespace(self) -> None:
        """Skips space, tab, newline and carriage return only."""
        while self.pos < self.length and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def fail(self, kind: ErrorKind) -> NoReturn:
        raise JSONParseError(kind, self.text, self.pos)

    def expect_not_end(self) -> None:
        if self.at_end():
            self.fail(ErrorKind.UNEXPECTED_EOF)

    def expect_end(self) -> None:
        if not self.at_end():
            self.fail(ErrorKind.EXPECTED_END_OF_INPUT)

    def expect(self, char: str) -> None:
        """Consumes char, failing on end of input or any other character."""
        self.expect_not_end()
        if self.text[self.pos] != char:
            self.fail(ErrorKind.UNEXPECTED_TOKEN)
        self.pos += 1
