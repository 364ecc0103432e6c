"""
Error types raised by the parser.

Every grammar violation maps to exactly one ErrorKind; the message text of
each kind is fixed so callers can match on it.
"""

from enum import Enum

type Position = int


class ErrorKind(Enum):
    """Enumerates the ways a parse can fail, valued by their message text."""

    UNEXPECTED_EOF = "JSON Parse error: Unexpected EOF"
    EXPECTED_END_OF_INPUT = "JSON Parse error: Expected End of Input"
    EXPECTING_JSON_KEY = "JSON Parse error: Expecting JSON Key"
    UNEXPECTED_TOKEN = "JSON Parse error: Unexpected token"
    EXPECTING_A_DIGIT = "JSON Parse error: Expecting a digit"
    EXPECTING_ESCAPE_CHARACTER = (
        "JSON Parse error: Expecting an escape character"
    )
    EXPECTING_ESCAPE_UNICODE = "JSON Parse error: Expecting an escape unicode"


class JSONParseError(ValueError):
    """
    Signals a grammar violation with its kind and location.

    Carries the offending document, the cursor offset at the moment of
    failure, and the derived line/column numbers.
    """

    def __init__(
        self, kind: ErrorKind, doc: str = "", pos: Position = 0
    ) -> None:
        if not isinstance(kind, ErrorKind):
            raise TypeError("kind must be an ErrorKind")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.kind = kind
        self.msg = kind.value
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(
            f"{self.msg} at line {self.lineno}, column {self.colno}"
        )

    def __reduce__(
        self,
    ) -> tuple[type["JSONParseError"], tuple[ErrorKind, str, Position]]:
        return (self.__class__, (self.kind, self.doc, self.pos))
