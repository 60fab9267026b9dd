"""Named Unicode general-category constants.

Each enum value is a Unicode general category code as reported by
``unicodedata.category``. One-letter codes name a major class and match every
subcategory in it. ``L&`` is the cased-letter group (Lu, Ll, Lt).

Usage:
    from lexis.categories import Letter, Punctuation

    Rule.multi("word", Letter.ALL)
    Rule.mono("dash", Punctuation.DASH)
"""

from enum import StrEnum


class Letter(StrEnum):
    ALL = "L"
    UPPERCASE = "Lu"
    LOWERCASE = "Ll"
    TITLECASE = "Lt"
    CASED = "L&"
    MODIFIER = "Lm"
    OTHER = "Lo"


class Mark(StrEnum):
    ALL = "M"
    NON_SPACING = "Mn"
    SPACING_COMBINING = "Mc"
    ENCLOSING = "Me"


class Separator(StrEnum):
    ALL = "Z"
    SPACE = "Zs"
    LINE = "Zl"
    PARAGRAPH = "Zp"


class Symbol(StrEnum):
    ALL = "S"
    MATH = "Sm"
    CURRENCY = "Sc"
    MODIFIER = "Sk"
    OTHER = "So"


class Number(StrEnum):
    ALL = "N"
    DECIMAL_DIGIT = "Nd"
    LETTER = "Nl"
    OTHER = "No"


class Punctuation(StrEnum):
    ALL = "P"
    DASH = "Pd"
    OPEN = "Ps"
    CLOSE = "Pe"
    INITIAL = "Pi"
    FINAL = "Pf"
    CONNECTOR = "Pc"
    OTHER = "Po"


class Other(StrEnum):
    ALL = "C"
    CONTROL = "Cc"
    FORMAT = "Cf"
    SURROGATE = "Cs"
    PRIVATE_USE = "Co"
    UNASSIGNED = "Cn"


class Word(StrEnum):
    """Word predicates for natural-language text.

    SIMPLE matches letters only. COMPLEX also accepts dash punctuation and the
    apostrophe, so "devil-grass" and "I'll" stay single tokens.
    """

    SIMPLE = "L"
    COMPLEX = r"[\p{L}\p{Pd}']"


CATEGORY_ENUMS: tuple[type[StrEnum], ...] = (
    Letter,
    Mark,
    Separator,
    Symbol,
    Number,
    Punctuation,
    Other,
)

# All codes accepted by CategoryPredicate
CATEGORY_CODES: frozenset[str] = frozenset(
    member.value for enum in CATEGORY_ENUMS for member in enum
)

# Subcategories of the cased-letter group
CASED_LETTER_CODES: frozenset[str] = frozenset({"Lu", "Ll", "Lt"})


__all__ = [
    "CASED_LETTER_CODES",
    "CATEGORY_CODES",
    "CATEGORY_ENUMS",
    "Letter",
    "Mark",
    "Number",
    "Other",
    "Punctuation",
    "Separator",
    "Symbol",
    "Word",
]
