"""
Pytest configuration and shared fixtures for rdjson tests.

Provides immutable test data fixtures for the JSON_checker documents, the
basic value table, and the error-kind table.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from rdjson import ErrorKind


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    A case with accepted_reason documents input this parser deliberately
    accepts even though JSON_checker lists it as a failure.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_kind: ErrorKind | None = None
    strict_arrays: bool = False
    accepted_reason: str = ""


EOF = ErrorKind.UNEXPECTED_EOF
END = ErrorKind.EXPECTED_END_OF_INPUT
KEY = ErrorKind.EXPECTING_JSON_KEY
TOKEN = ErrorKind.UNEXPECTED_TOKEN
DIGIT = ErrorKind.EXPECTING_A_DIGIT
ESCAPE = ErrorKind.EXPECTING_ESCAPE_CHARACTER
UNICODE = ErrorKind.EXPECTING_ESCAPE_UNICODE


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides the json.org JSON_checker failure documents with the error
    kind each one raises.

    Missing array elements only fail with strict_arrays enabled, and a few
    documents are accepted on purpose.
    """
    fail_docs: list[tuple[str, ErrorKind | None, bool, str]] = [
        # https://json.org/JSON_checker/test/fail1.json
        (
            '"A JSON payload should be an object or array, not a string."',
            None,
            False,
            "any value is a valid top-level payload",
        ),
        # https://json.org/JSON_checker/test/fail2.json
        ('["Unclosed array"', EOF, False, ""),
        # https://json.org/JSON_checker/test/fail3.json
        ('{unquoted_key: "keys must be quoted"}', KEY, False, ""),
        # https://json.org/JSON_checker/test/fail4.json
        ('["extra comma",]', TOKEN, True, ""),
        # https://json.org/JSON_checker/test/fail5.json
        ('["double extra comma",,]', TOKEN, True, ""),
        # https://json.org/JSON_checker/test/fail6.json
        ('[   , "<-- missing value"]', TOKEN, True, ""),
        # https://json.org/JSON_checker/test/fail7.json
        ('["Comma after the close"],', END, False, ""),
        # https://json.org/JSON_checker/test/fail8.json
        ('["Extra close"]]', END, False, ""),
        # https://json.org/JSON_checker/test/fail9.json
        ('{"Extra comma": true,}', KEY, False, ""),
        # https://json.org/JSON_checker/test/fail10.json
        (
            '{"Extra value after close": true} "misplaced quoted value"',
            END,
            False,
            "",
        ),
        # https://json.org/JSON_checker/test/fail11.json
        ('{"Illegal expression": 1 + 2}', TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail12.json
        ('{"Illegal invocation": alert()}', TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail13.json
        ('{"Numbers cannot have leading zeroes": 013}', TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail14.json
        ('{"Numbers cannot be hex": 0x14}', TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail15.json
        ('["Illegal backslash escape: \\x15"]', ESCAPE, False, ""),
        # https://json.org/JSON_checker/test/fail16.json
        ("[\\naked]", TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail17.json
        ('["Illegal backslash escape: \\017"]', ESCAPE, False, ""),
        # https://json.org/JSON_checker/test/fail18.json
        (
            '[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
            None,
            False,
            "nesting depth is only bounded by the interpreter",
        ),
        # https://json.org/JSON_checker/test/fail19.json
        ('{"Missing colon" null}', TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail20.json
        ('{"Double colon":: null}', TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail21.json
        ('{"Comma instead of colon", null}', TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail22.json
        ('["Colon instead of comma": false]', TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail23.json
        ('["Bad value", truth]', TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail24.json
        ("['single quote']", TOKEN, False, ""),
        # https://json.org/JSON_checker/test/fail25.json
        (
            '["\ttab\tcharacter\tin\tstring\t"]',
            None,
            False,
            "raw control characters are copied verbatim",
        ),
        # https://json.org/JSON_checker/test/fail26.json
        ('["tab\\   character\\   in\\  string\\  "]', ESCAPE, False, ""),
        # https://json.org/JSON_checker/test/fail27.json
        (
            '["line\nbreak"]',
            None,
            False,
            "raw control characters are copied verbatim",
        ),
        # https://json.org/JSON_checker/test/fail28.json
        ('["line\\\nbreak"]', ESCAPE, False, ""),
        # https://json.org/JSON_checker/test/fail29.json
        ("[0e]", DIGIT, False, ""),
        # https://json.org/JSON_checker/test/fail30.json
        ("[0e+]", DIGIT, False, ""),
        # https://json.org/JSON_checker/test/fail31.json
        ("[0e+-1]", DIGIT, False, ""),
        # https://json.org/JSON_checker/test/fail32.json
        ('{"Comma instead if closing brace": true,', KEY, False, ""),
        # https://json.org/JSON_checker/test/fail33.json
        ('["mismatch"}', TOKEN, False, ""),
    ]

    return [
        JsonTestCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            should_fail=kind is not None,
            expected_kind=kind,
            strict_arrays=strict,
            accepted_reason=reason,
        )
        for idx, (doc, kind, strict, reason) in enumerate(fail_docs)
    ]


PASS1 = """[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}",
        "quotes": "&#34; \\u0022 %22 0x22 034 &#x22;",
        "\\/\\\\\\"\\uCAFE\\uBABE\\uAB98\\uFCDE\\ubcda\\uef4A\\b\\f\\n\\r\\t`1~!@#$%^&*()_+-=[]{}|;:',./<>?"
: "A key can be any string"
    },
    0.5 ,98.6
,
99.44
,

1066,
1e1,
0.1e1,
1e-1,
1e00,2e+00,2e-00
,"rosebud"]"""


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully.

    These test cases validate standards compliance for valid JSON structures.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data=PASS1,
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42),
        JsonTestCase("negative integer", "-17", False, -17),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1, 2, 3]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
        JsonTestCase("empty input", "", True, expected_kind=EOF),
        JsonTestCase("whitespace only", " \n\t\r ", True, expected_kind=EOF),
        JsonTestCase("bare word", "nul", True, expected_kind=END),
    ]
