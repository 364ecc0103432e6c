"""Parse configuration and the hook signatures it accepts."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# Hooks may return arbitrary caller types
ObjectHook = Callable[[dict[str, Any]], Any] | None
ObjectPairsHook = Callable[[list[tuple[str, Any]]], Any] | None
ParseFloatHook = Callable[[str], Any]


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    The defaults reproduce the reference grammar exactly: numbers become
    floats, escaped control letters stay letters, and absent array elements
    are kept as UNDEFINED placeholders.
    """

    parse_float: ParseFloatHook = float
    object_hook: ObjectHook = None
    object_pairs_hook: ObjectPairsHook = None
    decode_control_escapes: bool = False
    strict_arrays: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.decode_control_escapes, bool):
            raise TypeError("decode_control_escapes must be a boolean")
        if not isinstance(self.strict_arrays, bool):
            raise TypeError("strict_arrays must be a boolean")
        if not callable(self.parse_float):
            raise TypeError("parse_float must be callable")
        for name in ("object_hook", "object_pairs_hook"):
            hook = getattr(self, name)
            if hook is not None and not callable(hook):
                raise TypeError(f"{name} must be callable or None")


DEFAULT_CONFIG = ParseConfig()
