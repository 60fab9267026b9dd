"""Rule-driven scanner for Lexis.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner and coverage helpers
├── core.py              # Scanner class (rule resolution + scan loop)
├── capture.py           # MONO / MULTI token extent
└── coverage.py          # Dropped-character reporting

Usage:
    >>> from lexis.scanner import Scanner
    >>> for token in Scanner().scan("Mary had a little lamb."):
    ...     print(repr(token))
Token(0, word, 'Mary', 0:4)
Token(1, space, ' ', 4:5)
...

"""

from lexis.scanner.core import Scanner
from lexis.scanner.coverage import is_fully_covered, uncovered_spans

__all__ = ["Scanner", "is_fully_covered", "uncovered_spans"]
