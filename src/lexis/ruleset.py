"""Rule set construction and the built-in default rules.

RuleSetBuilder collects rules in priority order. A rule that fails to build
is skipped and recorded as a RuleDiagnostic, with a warning logged, so one bad
entry does not take down the whole configuration. In strict mode the
ConfigurationError propagates instead.

Example:
    >>> rules = (
    ...     RuleSetBuilder()
    ...     .multi("word", Word.COMPLEX)
    ...     .mono("space", Separator.ALL)
    ...     .mono("punctuation", Punctuation.ALL)
    ...     .build()
    ... )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from lexis.categories import Letter, Number, Punctuation, Separator, Symbol
from lexis.config import get_scan_config
from lexis.errors import ConfigurationError
from lexis.rules import CaptureMode, Rule
from lexis.utils.logger import get_logger


@dataclass(frozen=True, slots=True)
class RuleDiagnostic:
    """Record of a rule that was skipped during construction."""

    type: Any
    pattern: Any
    message: str


class RuleSetBuilder:
    """Mutable builder for an ordered rule tuple.

    Use mono()/multi()/add() to append rules, then call build() to get an
    immutable tuple suitable for Scanner.

    Args:
        logger: Logger receiving skip warnings (default: lexis.ruleset)
        strict: Raise on invalid rules; None defers to ScanConfig.strict_rules
    """

    __slots__ = ("_rules", "_diagnostics", "_logger", "_strict")

    def __init__(
        self,
        logger: logging.Logger | None = None,
        strict: bool | None = None,
    ) -> None:
        self._rules: list[Rule] = []
        self._diagnostics: list[RuleDiagnostic] = []
        self._logger = logger if logger is not None else get_logger(__name__)
        self._strict = strict

    @property
    def strict(self) -> bool:
        if self._strict is not None:
            return self._strict
        return get_scan_config().strict_rules

    def mono(self, type: str, pattern: Any) -> RuleSetBuilder:
        """Append a single-character rule. Returns self for chaining."""
        return self._append(type, pattern, CaptureMode.MONO)

    def multi(self, type: str, pattern: Any) -> RuleSetBuilder:
        """Append a greedy-run rule. Returns self for chaining."""
        return self._append(type, pattern, CaptureMode.MULTI)

    def add(self, rule: Rule) -> RuleSetBuilder:
        """Append an already-built rule. Returns self for chaining.

        Raises:
            ConfigurationError: If rule is not a Rule and the builder is strict
        """
        if isinstance(rule, Rule):
            self._rules.append(rule)
        else:
            self._reject(None, rule, ConfigurationError(f"not a rule: {rule!r}"))
        return self

    def _append(self, type: str, pattern: Any, mode: CaptureMode) -> RuleSetBuilder:
        try:
            rule = Rule.create(type, pattern, mode)
        except ConfigurationError as e:
            self._reject(type, pattern, e)
        else:
            self._rules.append(rule)
        return self

    def _reject(self, type: Any, pattern: Any, error: ConfigurationError) -> None:
        if self.strict:
            raise error
        self._diagnostics.append(RuleDiagnostic(type, pattern, str(error)))
        self._logger.warning("Skipping invalid rule: %s", error)

    @property
    def diagnostics(self) -> tuple[RuleDiagnostic, ...]:
        """Rules skipped so far."""
        return tuple(self._diagnostics)

    def build(self) -> tuple[Rule, ...]:
        """Return the accepted rules in insertion order."""
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def _build_default_rules() -> tuple[Rule, ...]:
    return (
        Rule.multi("word", Letter.ALL),
        Rule.mono("space", Separator.ALL),
        Rule.mono("punctuation", Punctuation.ALL),
        Rule.multi("number", Number.ALL),
        Rule.multi("symbol", Symbol.ALL),
    )


# Module-level defaults (rules are immutable, shared by every scanner)
_DEFAULT_RULES: tuple[Rule, ...] = _build_default_rules()


def default_rules() -> tuple[Rule, ...]:
    """Built-in rules: word, space, punctuation, number, symbol."""
    return _DEFAULT_RULES


__all__ = ["RuleDiagnostic", "RuleSetBuilder", "default_rules"]
