"""Report the parts of a text that a scan dropped.

The scanner silently skips characters no rule matches. Callers that need
strictness can compare the tokens against the text here.
"""

from __future__ import annotations

from collections.abc import Iterable

from lexis.tokens import Position, Token


def uncovered_spans(text: str, tokens: Iterable[Token]) -> list[Position]:
    """Return the (start, end) spans of text not covered by any token.

    Adjacent dropped characters are merged into one span.

    Example:
        >>> tokens = Scanner().tokenize("a\\nb")
        >>> uncovered_spans("a\\nb", tokens)
        [(1, 2)]
    """
    spans: list[Position] = []
    cursor = 0
    for token in tokens:
        if token.start > cursor:
            spans.append((cursor, token.start))
        cursor = max(cursor, token.end)
    if cursor < len(text):
        spans.append((cursor, len(text)))
    return spans


def is_fully_covered(text: str, tokens: Iterable[Token]) -> bool:
    """True if every character of text belongs to some token."""
    return not uncovered_spans(text, tokens)
