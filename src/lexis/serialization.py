"""Token serialization — JSON round-trip for token sequences.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Caching scan results to disk
- Sending tokens to non-Python consumers
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from lexis import Scanner
    from lexis.serialization import to_json, from_json

    tokens = Scanner().tokenize("Mary had a little lamb.")
    restored = from_json(to_json(tokens))
    assert tokens == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from lexis.errors import SerializationError
from lexis.tokens import Token


def to_dict(tokens: Iterable[Token]) -> list[dict[str, Any]]:
    """Convert tokens to a list of JSON-compatible dicts."""
    return [token.to_dict() for token in tokens]


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize tokens to a JSON string.

    Args:
        tokens: Tokens to serialize
        indent: JSON indentation (None for compact)

    Returns:
        JSON string with sorted keys
    """
    return json.dumps(to_dict(tokens), sort_keys=True, indent=indent, ensure_ascii=False)


def from_dict(data: list[dict[str, Any]]) -> list[Token]:
    """Rebuild tokens from a list of dicts.

    Raises:
        SerializationError: If data is not a list of token dicts
    """
    if not isinstance(data, list):
        raise SerializationError(f"expected a list of tokens, got {type(data).__name__}")
    return [Token.from_dict(item) for item in data]


def from_json(json_str: str) -> list[Token]:
    """Deserialize tokens from a JSON string.

    Raises:
        SerializationError: If the string is not valid JSON or not a token list
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"invalid JSON: {e}") from e
    return from_dict(data)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
