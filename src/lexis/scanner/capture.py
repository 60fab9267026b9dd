"""Capture helpers for the scanner.

Given a matched rule and the cursor, compute where the token ends. Pure
functions over (text, offsets); no scanner state is touched.
"""

from __future__ import annotations

from lexis.rules import Rule


def capture_end(text: str, cursor: int, length: int, rule: Rule) -> int:
    """Return the exclusive end offset of the token starting at cursor.

    The character at cursor has already matched rule. MONO rules stop after
    it; MULTI rules extend over every following character that satisfies the
    same predicate, stopping at the first failure or at end of text.

    Args:
        text: Text being scanned
        cursor: Offset of the matched character
        length: len(text), passed in to avoid recomputing it per token
        rule: The rule that matched at cursor

    Returns:
        End offset, always > cursor
    """
    end = cursor + 1
    if not rule.is_multi:
        return end

    matches = rule.predicate.matches
    while end < length and matches(text[end]):
        end += 1
    return end
