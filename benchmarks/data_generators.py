"""
Test data generators for JSON parsing benchmarks.

Creates JSON documents that stress different productions of the parser:
- Object- and array-heavy documents of several sizes
- Deep nesting (recursion through parse_value)
- String-heavy content with escape and unicode sequences

Documents are serialized with the standard library and seeded so every run
parses identical input.
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

DATA_TYPES = (
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
    "number_heavy",
)

_ESCAPE_PROBABILITY = 0.3
_SEED = 20240115


def generate_test_data(data_type: str) -> str:
    """Generates a JSON document of the named kind."""
    generators: dict[str, Callable[[random.Random], Any]] = {
        "small_object": _small_object,
        "large_object": _large_object,
        "mixed_array": _mixed_array,
        "nested_structure": _nested_structure,
        "string_heavy": _string_heavy,
        "number_heavy": _number_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    rng = random.Random(_SEED)
    generated = generators[data_type](rng)
    return generated if isinstance(generated, str) else json.dumps(generated)


def _small_object(rng: random.Random) -> dict[str, Any]:
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _large_object(rng: random.Random) -> dict[str, Any]:
    return {
        "user_id": rng.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(rng, 10),
            "last_name": _random_string(rng, 12),
            "language": rng.choice(["en", "es", "fr", "de", "zh"]),
            "notifications": {
                "email": rng.choice([True, False]),
                "push": rng.choice([True, False]),
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_string(rng, 20)}",
                "status": rng.choice(["completed", "pending", "failed"]),
            }
            for i in range(50)
        ],
        "activity_log": [
            {
                "action": rng.choice(["login", "logout", "purchase", "view"]),
                "ip_address": ".".join(
                    str(rng.randint(1, 255)) for _ in range(4)
                ),
                "user_agent": f"Mozilla/5.0 ({_random_string(rng, 20)})",
            }
            for _ in range(30)
        ],
    }


def _mixed_array(rng: random.Random) -> list[Any]:
    makers: list[Callable[[int], Any]] = [
        lambda i: rng.randint(-1000, 1000),
        lambda i: round(rng.uniform(-100.0, 100.0), 3),
        lambda i: _random_string(rng, rng.randint(5, 30)),
        lambda i: rng.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "value": _random_string(rng, 10)},
    ]
    return [rng.choice(makers)(i) for i in range(200)]


def _nested_structure(rng: random.Random) -> dict[str, Any]:
    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}

        return {
            "level": depth,
            "data": _random_string(rng, 15),
            "items": [create_nested_dict(depth - 1) for _ in range(3)],
            "nested": create_nested_dict(depth - 1),
        }

    return create_nested_dict(6)


def _string_heavy(rng: random.Random) -> str:
    """Builds raw JSON text so escapes appear exactly as written."""

    def escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(
                    rng.choice(
                        ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\t"]
                    )
                )
            else:
                chars.append(
                    rng.choice(string.ascii_letters + string.digits + " ")
                )
        return '"' + "".join(chars) + '"'

    strings = ",".join(escaped_string() for _ in range(100))
    unicode = ",".join(
        f'"\\u{rng.randint(0x20, 0x7E):04x} \\ud83d\\ude00"' for _ in range(50)
    )
    return f'{{"strings": [{strings}], "unicode": [{unicode}]}}'


def _number_heavy(rng: random.Random) -> list[Any]:
    return [
        rng.choice(
            [
                rng.randint(-(10**9), 10**9),
                rng.uniform(-1e6, 1e6),
                rng.uniform(-1, 1) * 10.0 ** rng.randint(-300, 300),
            ]
        )
        for _ in range(500)
    ]


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
