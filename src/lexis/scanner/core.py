"""Single-pass rule scanner.

Walks the text once, left to right. At each cursor position the rules are
tried in order and the first match wins; MULTI rules then extend greedily.
Characters no rule matches are dropped and the cursor moves on, so scanning
always terminates and never raises for unexpected input.

Thread Safety:
The active rules are an immutable tuple. update() swaps the reference and
scan() reads it once per pass, so a concurrent update never mixes rule sets
within one call. Pair update()/tokenize() under your own lock if the pair
must be atomic.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from lexis.config import get_scan_config
from lexis.errors import ConfigurationError
from lexis.rules import Rule
from lexis.ruleset import default_rules
from lexis.scanner.capture import capture_end
from lexis.tokens import Token
from lexis.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """Configurable lexical scanner.

    Usage:
        >>> scanner = Scanner()
        >>> [t.value for t in scanner.tokenize("Mary had 2 lambs.")]
        ['Mary', ' ', 'had', ' ', '2', ' ', 'lambs', '.']

    Args:
        rules: Ordered rules; None or empty selects the default rule set
            (ScanConfig.default_rules when set, otherwise the built-in rules)

    Raises:
        ConfigurationError: If rules is not iterable, or if an entry is not a
            Rule while ScanConfig.strict_rules is set

    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Rule] | None = None) -> None:
        self._rules: tuple[Rule, ...] = _resolve_rules(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Active rules in priority order."""
        return self._rules

    def update(self, rules: Iterable[Rule] | None) -> Scanner:
        """Replace the active rules.

        Uses the same resolution as the constructor. Tokens already produced
        are unaffected.

        Returns:
            Self for chaining
        """
        self._rules = _resolve_rules(rules)
        logger.debug("Scanner rules replaced: %r", self._rules)
        return self

    def scan(self, text: Any) -> Iterator[Token]:
        """Scan text into a token stream.

        Yields:
            Token objects in emission order; nothing for non-str input

        Complexity: O(n * r) predicate calls, n = len(text), r = len(rules)
        """
        if not isinstance(text, str):
            logger.debug("Ignoring non-text input of type %s", type(text).__name__)
            return

        rules = self._rules  # Snapshot for the whole pass
        length = len(text)
        cursor = 0
        index = 0

        while cursor < length:
            char = text[cursor]
            for rule in rules:
                if rule.matches(char):
                    end = capture_end(text, cursor, length, rule)
                    yield Token(index, rule.type, text[cursor:end], (cursor, end))
                    index += 1
                    cursor = end
                    break
            else:
                # Unmatched: dropped
                cursor += 1

    def tokenize(self, text: Any) -> list[Token]:
        """Scan text and return all tokens.

        Args:
            text: Text to scan; any other type yields an empty list

        Returns:
            Tokens with indices 0..N-1
        """
        return list(self.scan(text))

    def __repr__(self) -> str:
        types = ", ".join(rule.type for rule in self._rules)
        return f"Scanner([{types}])"


def _resolve_rules(rules: Iterable[Rule] | None) -> tuple[Rule, ...]:
    """Normalize a caller's rule list into the active rule tuple."""
    if rules is None:
        return _defaults()

    try:
        candidates = tuple(rules)
    except TypeError as e:
        raise ConfigurationError(
            f"rules must be an iterable of Rule, got {type(rules).__name__}"
        ) from e

    if not candidates:
        return _defaults()
    return _filter_rules(candidates)


def _filter_rules(candidates: tuple[Any, ...]) -> tuple[Rule, ...]:
    """Drop non-Rule entries (or raise under strict_rules)."""
    strict = get_scan_config().strict_rules
    accepted: list[Rule] = []
    for candidate in candidates:
        if isinstance(candidate, Rule):
            accepted.append(candidate)
            continue
        error = ConfigurationError(f"not a rule: {candidate!r}")
        if strict:
            raise error
        logger.warning("Skipping invalid rule: %s", error)

    if not accepted:
        logger.warning("No valid rules supplied; every character will be dropped")
    return tuple(accepted)


def _defaults() -> tuple[Rule, ...]:
    configured = get_scan_config().default_rules
    if configured:
        return _filter_rules(tuple(configured))
    return default_rules()
