"""
Strict recursive-descent JSON reader in pure Python.

Parses JSON text into native Python values with a single-pass cursor scan
and reports every grammar violation as a JSONParseError carrying one of a
fixed set of error kinds.
"""

import logging
from typing import IO
from typing import Any

from ._config import DEFAULT_CONFIG
from ._config import ObjectHook
from ._config import ObjectPairsHook
from ._config import ParseConfig
from ._config import ParseFloatHook
from ._errors import ErrorKind
from ._errors import JSONParseError
from ._parser import UNDEFINED
from ._parser import JsonParser
from ._parser import JsonValue
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def parse(text: str, config: ParseConfig | None = None) -> JsonValue:
    """
    Parses a complete JSON document.

    Exactly one value must be present; anything other than whitespace
    after it raises JSONParseError with kind EXPECTED_END_OF_INPUT.
    Numbers are returned as floats unless config supplies parse_float.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    parser = JsonParser(text, config or DEFAULT_CONFIG)
    try:
        return parser.parse()
    except JSONParseError as err:
        logger.debug(
            "parse failed: %s (kind=%s, pos=%d)",
            err.msg,
            err.kind.name,
            err.pos,
        )
        raise


def loads(s: str, **kwargs: Any) -> JsonValue:
    """Parses s with keyword options forwarded to ParseConfig."""
    return parse(s, ParseConfig(**kwargs))


def load(fp: IO[str], **kwargs: Any) -> JsonValue:
    """
    Parses the full contents of a text file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


__all__ = [
    "UNDEFINED",
    "ErrorKind",
    "HotPathStats",
    "JSONParseError",
    "JsonParser",
    "JsonValue",
    "ObjectHook",
    "ObjectPairsHook",
    "ParseConfig",
    "ParseFloatHook",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
]
