"""Exception classes for Lexis.

Provides standardized exceptions for error handling throughout Lexis.
Tokenization itself never raises; these surface at configuration time.
"""

from __future__ import annotations

from typing import Any


class LexisError(Exception):
    """Base exception for all Lexis errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigurationError(LexisError):
    """Error in rule configuration.

    Raised when a rule is built with an empty type name, a missing or empty
    pattern, or a pattern source that cannot be turned into a predicate.
    """

    def __init__(
        self,
        message: str,
        rule_type: str | None = None,
        pattern: Any = None,
    ) -> None:
        """Initialize configuration error with optional rule context.

        Args:
            message: Error description
            rule_type: Token type of the offending rule (optional)
            pattern: Pattern source of the offending rule (optional)
        """
        self.message = message
        self.rule_type = rule_type
        self.pattern = pattern

        prefix = f"rule {rule_type!r}: " if rule_type else ""
        super().__init__(f"{prefix}{message}")


class SerializationError(LexisError):
    """Error while decoding a serialized token payload.

    Raised when a dict or JSON document does not describe a valid token.
    """

    pass
