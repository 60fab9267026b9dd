"""Single-character predicates used by rules.

A predicate answers one question: does this character belong? It sees exactly
one character, with no lookback, lookahead or state carried between calls.

Variants:
- CategoryPredicate: Unicode general category (via unicodedata)
- CharSetPredicate: literal character membership
- CompositePredicate: any of several predicates
- PatternPredicate: compiled regular expression
- CallablePredicate: arbitrary function

Use compile_predicate() to turn a rule's pattern source into a predicate.

Thread Safety:
All predicates are immutable and safe to share across threads.

"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from lexis.categories import CASED_LETTER_CODES, CATEGORY_CODES, CATEGORY_ENUMS, Word
from lexis.errors import ConfigurationError
from lexis.utils.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class CharPredicate(Protocol):
    """Protocol for single-character tests."""

    def matches(self, char: str) -> bool:
        """Return True if char satisfies this predicate."""
        ...


@dataclass(frozen=True, slots=True)
class CategoryPredicate:
    """Match characters by Unicode general category.

    A one-letter code matches its whole major class, a two-letter code matches
    that subcategory only, and ``L&`` matches cased letters (Lu, Ll, Lt).
    """

    code: str

    def __post_init__(self) -> None:
        if self.code not in CATEGORY_CODES:
            raise ConfigurationError(
                f"unknown Unicode category {self.code!r}", pattern=self.code
            )

    def matches(self, char: str) -> bool:
        cat = unicodedata.category(char)
        code = self.code
        if len(code) == 1:
            return cat[0] == code
        if code == "L&":
            return cat in CASED_LETTER_CODES
        return cat == code


@dataclass(frozen=True, slots=True)
class CharSetPredicate:
    """Match characters from a fixed set."""

    chars: frozenset[str]

    def matches(self, char: str) -> bool:
        return char in self.chars


@dataclass(frozen=True, slots=True)
class CompositePredicate:
    """Match when any of the parts matches."""

    parts: tuple[CharPredicate, ...]

    def matches(self, char: str) -> bool:
        return any(part.matches(char) for part in self.parts)


@dataclass(frozen=True, slots=True)
class PatternPredicate:
    """Match characters against a compiled regular expression.

    The pattern is searched within the single character, so ``[öüä]`` and
    ``ö|ü|ä`` behave the same.
    """

    pattern: re.Pattern[str]

    def matches(self, char: str) -> bool:
        return self.pattern.search(char) is not None


@dataclass(frozen=True, slots=True)
class CallablePredicate:
    """Adapt a plain function to the CharPredicate protocol."""

    func: Callable[[str], bool]

    def matches(self, char: str) -> bool:
        return bool(self.func(char))


def category(code: str) -> CategoryPredicate:
    """Build a category predicate from a raw code such as "Lu" or "P"."""
    return CategoryPredicate(code)


def char_set(chars: Iterable[str]) -> CharSetPredicate:
    """Build a predicate matching any of the given characters."""
    return CharSetPredicate(frozenset(chars))


def any_of(*parts: CharPredicate) -> CompositePredicate:
    """Build a predicate matching when any part matches."""
    return CompositePredicate(tuple(parts))


# Letter, dash punctuation, or apostrophe
COMPLEX_WORD: CompositePredicate = any_of(
    category("L"),
    category("Pd"),
    char_set("'"),
)


def compile_predicate(source: Any) -> CharPredicate:
    """Turn a rule's pattern source into a CharPredicate.

    Resolution order:
    1. Word.COMPLEX: letter, dash punctuation or apostrophe
    2. Other category enum members: CategoryPredicate of the member's code
    3. Compiled re.Pattern: PatternPredicate
    4. str: compiled as a regular expression (never as a category code)
    5. Objects with a matches() method: used as is
    6. Other callables: CallablePredicate

    Args:
        source: Pattern source

    Returns:
        Predicate for the source

    Raises:
        ConfigurationError: If the source is missing, empty, not a valid
            regular expression, or of an unsupported type
    """
    if source is None:
        raise ConfigurationError("missing pattern")

    if isinstance(source, Enum):
        if source is Word.COMPLEX:
            return COMPLEX_WORD
        if isinstance(source, (Word, *CATEGORY_ENUMS)):
            return CategoryPredicate(source.value)
        raise ConfigurationError(
            f"unsupported enum pattern {source!r}", pattern=source
        )

    if isinstance(source, re.Pattern):
        if not source.pattern:
            raise ConfigurationError("empty pattern", pattern=source)
        return PatternPredicate(source)

    if isinstance(source, str):
        if not source:
            raise ConfigurationError("empty pattern", pattern=source)
        if source in CATEGORY_CODES:
            logger.warning(
                "Pattern %r is compiled as a regular expression, not a Unicode "
                "category; use the category enums or category(%r)",
                source,
                source,
            )
        try:
            compiled = re.compile(source)
        except re.error as e:
            raise ConfigurationError(
                f"invalid regular expression: {e}", pattern=source
            ) from e
        return PatternPredicate(compiled)

    if isinstance(source, CharPredicate):
        return source

    if callable(source):
        return CallablePredicate(source)

    raise ConfigurationError(
        f"unsupported pattern type {type(source).__name__}", pattern=source
    )


__all__ = [
    "COMPLEX_WORD",
    "CallablePredicate",
    "CategoryPredicate",
    "CharPredicate",
    "CharSetPredicate",
    "CompositePredicate",
    "PatternPredicate",
    "any_of",
    "category",
    "char_set",
    "compile_predicate",
]
