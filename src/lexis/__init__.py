"""
Lexis — Rule-Driven Text Scanner for Python

Splits text into contiguous typed tokens using an ordered list of
single-character rules. The first matching rule wins; MULTI rules capture the
longest run of matching characters, MONO rules a single character.
Zero runtime dependencies.

Quick Start:
    >>> from lexis import tokenize
    >>> [t.value for t in tokenize("Mary had a little lamb.")]
    ['Mary', ' ', 'had', ' ', 'a', ' ', 'little', ' ', 'lamb', '.']

Custom Rules:
    >>> from lexis import Punctuation, Rule, Scanner, Separator, Word
    >>> scanner = Scanner([
    ...     Rule.multi("word", Word.COMPLEX),
    ...     Rule.mono("space", Separator.ALL),
    ...     Rule.mono("punctuation", Punctuation.ALL),
    ... ])
    >>> [t.type for t in scanner.tokenize("I'll stay.")]
    ['word', 'space', 'word', 'punctuation']
"""

from collections.abc import Iterable
from typing import Any

from lexis.categories import (
    Letter,
    Mark,
    Number,
    Other,
    Punctuation,
    Separator,
    Symbol,
    Word,
)
from lexis.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from lexis.errors import ConfigurationError, LexisError, SerializationError
from lexis.predicates import CharPredicate, any_of, category, char_set, compile_predicate
from lexis.rules import CaptureMode, Rule
from lexis.ruleset import RuleDiagnostic, RuleSetBuilder, default_rules
from lexis.scanner import Scanner, is_fully_covered, uncovered_spans
from lexis.serialization import from_dict, from_json, to_dict, to_json
from lexis.tokens import Position, Token

__version__ = "0.1.0"


def tokenize(text: Any, rules: Iterable[Rule] | None = None) -> list[Token]:
    """Tokenize text with a one-off scanner.

    Args:
        text: Text to scan; non-str input yields an empty list
        rules: Ordered rules (default rule set if None or empty)

    Returns:
        Tokens in emission order

    Example:
        >>> [t.type for t in tokenize("3 cats")]
        ['number', 'space', 'word']
    """
    return Scanner(rules).tokenize(text)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    "__version__",
    # Entry points
    "tokenize",
    "Scanner",
    # Rules
    "CaptureMode",
    "Rule",
    "RuleDiagnostic",
    "RuleSetBuilder",
    "default_rules",
    # Predicates
    "CharPredicate",
    "any_of",
    "category",
    "char_set",
    "compile_predicate",
    # Categories
    "Letter",
    "Mark",
    "Number",
    "Other",
    "Punctuation",
    "Separator",
    "Symbol",
    "Word",
    # Tokens
    "Position",
    "Token",
    # Coverage
    "is_fully_covered",
    "uncovered_spans",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "ConfigurationError",
    "LexisError",
    "SerializationError",
]
