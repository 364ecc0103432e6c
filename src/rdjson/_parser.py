"""
Recursive-descent JSON parser over a single character cursor.

Lexing and parsing are fused: each production inspects the current
character, returns _ABSENT without consuming anything when the input does
not start its construct, and raises JSONParseError once it has committed
to a construct that turns out to be malformed.
"""

from collections.abc import Callable
from functools import partial
from typing import Any
from typing import Final
from typing import NoReturn

from ._config import ParseConfig
from ._cursor import Cursor
from ._errors import ErrorKind
from ._profile import ProfileContext

type JsonValue = (
    str | float | bool | None | dict[str, JsonValue] | list[JsonValue]
)

HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")

# Escaped letters are kept as the letters themselves unless control
# decoding is requested
LITERAL_ESCAPES: Final = {char: char for char in '"\\/bfnrt'}
CONTROL_ESCAPES: Final = {
    **LITERAL_ESCAPES,
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

HIGH_SURROGATES: Final = range(0xD800, 0xDC00)
LOW_SURROGATES: Final = range(0xDC00, 0xE000)


class _Absent:
    """Marks a production that did not match; never leaves this module."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<absent>"


_ABSENT: Final = _Absent()


class _Undefined:
    """
    Placeholder stored in arrays where an element was missing.

    Produced for inputs such as ``[1,]`` or ``[,1]`` unless
    ParseConfig.strict_arrays is set. A falsy singleton distinct from None.
    """

    __slots__ = ()
    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


def _is_digit(char: str) -> bool:
    # ASCII only; str.isdigit() would admit other scripts
    return "0" <= char <= "9"


class JsonParser:
    """
    Parses one document with a private cursor.

    Instances are single-use: create one per input text and call parse().
    """

    def __init__(self, text: str, config: ParseConfig) -> None:
        self.cursor = Cursor(text)
        self.config = config
        if config.decode_control_escapes:
            self._escapes = CONTROL_ESCAPES
        else:
            self._escapes = LITERAL_ESCAPES
        # Fixed priority order; the first production that matches wins
        self._productions: tuple[Callable[[], Any], ...] = (
            self.parse_string,
            self.parse_number,
            self.parse_object,
            self.parse_array,
            partial(self.parse_keyword, "true", True),
            partial(self.parse_keyword, "false", False),
            partial(self.parse_keyword, "null", None),
        )

    def parse(self) -> JsonValue:
        """Parses exactly one value and requires only whitespace after it."""
        cursor = self.cursor
        value = self.parse_value()
        if value is _ABSENT and cursor.at_end():
            cursor.fail(ErrorKind.UNEXPECTED_EOF)
        cursor.expect_end()
        return value

    def parse_value(self) -> Any:
        """
        Dispatches to the first matching production.

        Whitespace is skipped on both sides, so the cursor is left on a
        non-whitespace character or at end of input. Returns _ABSENT when
        no production matches.
        """
        self.cursor.skip_whitespace()
        value: Any = _ABSENT
        for production in self._productions:
            value = production()
            if value is not _ABSENT:
                break
        self.cursor.skip_whitespace()
        return value

    def _fail_missing_value(self) -> NoReturn:
        if self.cursor.at_end():
            self.cursor.fail(ErrorKind.UNEXPECTED_EOF)
        self.cursor.fail(ErrorKind.UNEXPECTED_TOKEN)

    def parse_string(self) -> str | _Absent:
        cursor = self.cursor
        if cursor.peek() != '"':
            return _ABSENT

        with ProfileContext("parse_string", cursor.pos) as prof:
            cursor.advance()
            text = cursor.text
            chunks: list[str] = []

            while not cursor.at_end():
                char = text[cursor.pos]
                if char == '"':
                    break
                if char == "\\":
                    chunks.append(self._parse_escape())
                else:
                    chunks.append(char)
                    cursor.pos += 1

            cursor.expect_not_end()
            cursor.advance()
            prof.consumed(cursor.pos)
            return "".join(chunks)

    def _parse_escape(self) -> str:
        """Decodes the escape sequence whose backslash is at the cursor."""
        cursor = self.cursor
        marker = cursor.peek(1)

        if marker in self._escapes:
            cursor.advance(2)
            return self._escapes[marker]

        if marker == "u":
            code = self._read_hex4(cursor.pos + 2)
            if code is None:
                cursor.advance(2)
                cursor.fail(ErrorKind.EXPECTING_ESCAPE_UNICODE)
            cursor.advance(6)

            # Join a UTF-16 surrogate pair into one code point
            if code in HIGH_SURROGATES and cursor.startswith("\\u"):
                low = self._read_hex4(cursor.pos + 2)
                if low is not None and low in LOW_SURROGATES:
                    cursor.advance(6)
                    code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
            return chr(code)

        cursor.advance()
        cursor.fail(ErrorKind.EXPECTING_ESCAPE_CHARACTER)

    def _read_hex4(self, index: int) -> int | None:
        digits = self.cursor.text[index : index + 4]
        if len(digits) != 4 or not all(c in HEX_DIGITS for c in digits):
            return None
        return int(digits, 16)

    def _expect_digit(self) -> None:
        if not _is_digit(self.cursor.peek()):
            self.cursor.fail(ErrorKind.EXPECTING_A_DIGIT)

    def _skip_digits(self) -> None:
        cursor = self.cursor
        text = cursor.text
        while cursor.pos < cursor.length and _is_digit(text[cursor.pos]):
            cursor.pos += 1

    def parse_number(self) -> Any:
        """
        Scans -?(0|[1-9][0-9]*)(.[0-9]+)?([eE][+-]?[0-9]+)? greedily.

        Scanning stops at the first character that cannot extend the
        number, so "-1e-2.2" yields -0.01 and leaves ".2" unconsumed.
        """
        cursor = self.cursor
        first = cursor.peek()
        if first != "-" and not _is_digit(first):
            return _ABSENT

        with ProfileContext("parse_number", cursor.pos) as prof:
            start = cursor.pos

            if first == "-":
                cursor.advance()
                self._expect_digit()

            if cursor.peek() == "0":
                cursor.advance()
            else:
                self._skip_digits()

            if cursor.peek() == ".":
                cursor.advance()
                self._expect_digit()
                self._skip_digits()

            if cursor.peek() in ("e", "E"):
                cursor.advance()
                if cursor.peek() in ("+", "-"):
                    cursor.advance()
                self._expect_digit()
                self._skip_digits()

            prof.consumed(cursor.pos)
            return self.config.parse_float(cursor.text[start : cursor.pos])

    def parse_object(self) -> Any:
        cursor = self.cursor
        if cursor.peek() != "{":
            return _ABSENT

        with ProfileContext("parse_object", cursor.pos) as prof:
            cursor.advance()
            cursor.skip_whitespace()
            pairs: list[tuple[str, Any]] = []

            while not cursor.at_end() and cursor.peek() != "}":
                if pairs:
                    cursor.expect(",")
                    cursor.skip_whitespace()

                key = self.parse_string()
                if isinstance(key, _Absent):
                    cursor.fail(ErrorKind.EXPECTING_JSON_KEY)

                cursor.skip_whitespace()
                cursor.expect(":")

                value = self.parse_value()
                if value is _ABSENT:
                    self._fail_missing_value()
                pairs.append((key, value))

            cursor.expect_not_end()
            cursor.advance()
            prof.consumed(cursor.pos)
            return self._apply_object_hooks(pairs)

    def _apply_object_hooks(self, pairs: list[tuple[str, Any]]) -> Any:
        """Builds the mapping; later duplicates overwrite earlier ones."""
        if self.config.object_pairs_hook:
            return self.config.object_pairs_hook(pairs)
        obj = dict(pairs)
        if self.config.object_hook:
            return self.config.object_hook(obj)
        return obj

    def parse_array(self) -> list[Any] | _Absent:
        cursor = self.cursor
        if cursor.peek() != "[":
            return _ABSENT

        with ProfileContext("parse_array", cursor.pos) as prof:
            cursor.advance()
            cursor.skip_whitespace()
            values: list[Any] = []

            while not cursor.at_end() and cursor.peek() != "]":
                if values:
                    cursor.expect(",")

                value = self.parse_value()
                if value is _ABSENT:
                    if self.config.strict_arrays:
                        self._fail_missing_value()
                    value = UNDEFINED
                values.append(value)

            cursor.expect_not_end()
            cursor.advance()
            prof.consumed(cursor.pos)
            return values

    def parse_keyword(self, literal: str, value: Any) -> Any:
        """Matches literal exactly at the cursor; never raises."""
        if not self.cursor.startswith(literal):
            return _ABSENT
        self.cursor.advance(len(literal))
        return value
