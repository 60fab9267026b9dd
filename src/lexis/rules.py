"""Rule and CaptureMode definitions.

A Rule ties a token type to a single-character predicate and a capture mode.
Rules are immutable; a Scanner holds an ordered tuple of them, and order is
priority.

Thread Safety:
Rule is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from lexis.errors import ConfigurationError
from lexis.predicates import CharPredicate, compile_predicate


class CaptureMode(Enum):
    """How much text a matching rule consumes.

    - MONO: exactly one character
    - MULTI: the longest run of characters satisfying the same predicate

    """

    MONO = auto()
    MULTI = auto()


@dataclass(frozen=True, slots=True)
class Rule:
    """A classification rule.

    Attributes:
        type: Token type attached to tokens this rule produces
        predicate: Single-character test
        mode: Capture mode (MONO or MULTI)

    Raises:
        ConfigurationError: If type is empty or predicate is missing

    """

    type: str
    predicate: CharPredicate
    mode: CaptureMode = CaptureMode.MONO

    def __post_init__(self) -> None:
        if not isinstance(self.type, str) or not self.type:
            raise ConfigurationError("token type must be a non-empty string")
        if not isinstance(self.predicate, CharPredicate):
            raise ConfigurationError("missing predicate", rule_type=self.type)
        if not isinstance(self.mode, CaptureMode):
            raise ConfigurationError(
                f"invalid capture mode {self.mode!r}", rule_type=self.type
            )

    @classmethod
    def create(cls, type: str, pattern: Any, mode: CaptureMode) -> Rule:
        """Build a rule from a pattern source.

        Args:
            type: Token type name
            pattern: Category enum member, regular expression (str or
                compiled), CharPredicate, or callable.
                A plain str is always a regular expression: "Lu" matches
                the text "Lu", never a single character. Use Letter.UPPERCASE
                or category("Lu") for the category; a warning is logged.
            mode: Capture mode

        Returns:
            New Rule

        Raises:
            ConfigurationError: If type or pattern is missing or invalid
        """
        if not isinstance(type, str) or not type:
            raise ConfigurationError("token type must be a non-empty string", pattern=pattern)
        try:
            predicate = compile_predicate(pattern)
        except ConfigurationError as e:
            raise ConfigurationError(e.message, rule_type=type, pattern=pattern) from e
        return cls(type, predicate, mode)

    @classmethod
    def mono(cls, type: str, pattern: Any) -> Rule:
        """Build a rule that captures one character per match."""
        return cls.create(type, pattern, CaptureMode.MONO)

    @classmethod
    def multi(cls, type: str, pattern: Any) -> Rule:
        """Build a rule that captures the longest matching run."""
        return cls.create(type, pattern, CaptureMode.MULTI)

    @property
    def is_multi(self) -> bool:
        return self.mode is CaptureMode.MULTI

    def matches(self, char: str) -> bool:
        """Test a single character against this rule's predicate."""
        return self.predicate.matches(char)

    def __repr__(self) -> str:
        return f"Rule({self.type!r}, {self.mode.name})"


__all__ = ["CaptureMode", "Rule"]
