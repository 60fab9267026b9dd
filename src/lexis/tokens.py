"""Token definition for the Lexis scanner.

The scanner produces a sequence of Token objects. Each Token has an emission
index, a caller-chosen type, the matched text and its half-open character span.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from lexis.errors import SerializationError

# Half-open [start, end) character offsets into the scanned text
Position: TypeAlias = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        index: 0-based position among the tokens of one scan
        type: Token type from the rule that matched
        value: The exact substring matched
        position: (start, end) offsets, half-open

    """

    index: int
    type: str
    value: str
    position: Position

    @property
    def start(self) -> int:
        """Start offset (inclusive)."""
        return self.position[0]

    @property
    def end(self) -> int:
        """End offset (exclusive)."""
        return self.position[1]

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.index}, {self.type}, {val!r}, {self.start}:{self.end})"

    def to_dict(self) -> dict[str, Any]:
        """Structured view suitable for JSON and other interchange formats."""
        return {
            "index": self.index,
            "type": self.type,
            "value": self.value,
            "position": [self.start, self.end],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Token:
        """Rebuild a token from its structured view.

        Raises:
            SerializationError: If a field is missing or has the wrong shape
        """
        try:
            index = data["index"]
            type_ = data["type"]
            value = data["value"]
            start, end = data["position"]
        except (KeyError, TypeError, ValueError) as e:
            raise SerializationError(f"malformed token payload: {data!r}") from e

        if not all(isinstance(n, int) and not isinstance(n, bool) for n in (index, start, end)):
            raise SerializationError(f"token offsets must be integers: {data!r}")
        if not isinstance(type_, str) or not isinstance(value, str):
            raise SerializationError(f"token type and value must be strings: {data!r}")
        if end - start != len(value):
            raise SerializationError(f"token span does not match value length: {data!r}")
        return cls(index, type_, value, (start, end))


__all__ = ["Position", "Token"]
