"""Tests for character predicates and category constants."""

import re

import pytest

from lexis import (
    ConfigurationError,
    Letter,
    Mark,
    Number,
    Other,
    Punctuation,
    Separator,
    Symbol,
    Word,
)
from lexis.categories import CATEGORY_CODES
from lexis.predicates import (
    COMPLEX_WORD,
    CallablePredicate,
    CategoryPredicate,
    CharPredicate,
    CharSetPredicate,
    CompositePredicate,
    PatternPredicate,
    any_of,
    category,
    char_set,
    compile_predicate,
)


class TestCategoryConstants:
    def test_all_codes_collected(self) -> None:
        assert len(CATEGORY_CODES) == 38
        assert {"L", "M", "Z", "S", "N", "P", "C", "L&"} <= CATEGORY_CODES

    def test_values_are_category_codes(self) -> None:
        assert Letter.MODIFIER == "Lm"
        assert Letter.OTHER == "Lo"
        assert Punctuation.DASH == "Pd"
        assert Other.UNASSIGNED == "Cn"

    def test_simple_word_is_letters(self) -> None:
        assert compile_predicate(Word.SIMPLE) == compile_predicate(Letter.ALL)


class TestCategoryPredicate:
    """Matching by Unicode general category."""

    @pytest.mark.parametrize(
        ("code", "char"),
        [
            (Letter.UPPERCASE, "A"),
            (Letter.LOWERCASE, "z"),
            (Letter.TITLECASE, "ǅ"),
            (Letter.MODIFIER, "ʰ"),
            (Letter.OTHER, "中"),
            (Mark.NON_SPACING, "\u0301"),
            (Separator.SPACE, " "),
            (Separator.LINE, "\u2028"),
            (Separator.PARAGRAPH, "\u2029"),
            (Symbol.MATH, "+"),
            (Symbol.CURRENCY, "€"),
            (Symbol.MODIFIER, "^"),
            (Symbol.OTHER, "©"),
            (Number.DECIMAL_DIGIT, "7"),
            (Number.LETTER, "Ⅻ"),
            (Number.OTHER, "½"),
            (Punctuation.DASH, "-"),
            (Punctuation.OPEN, "("),
            (Punctuation.CLOSE, ")"),
            (Punctuation.INITIAL, "«"),
            (Punctuation.FINAL, "»"),
            (Punctuation.CONNECTOR, "_"),
            (Punctuation.OTHER, "!"),
            (Other.CONTROL, "\n"),
            (Other.FORMAT, "\u200b"),
            (Other.PRIVATE_USE, "\ue000"),
            (Other.UNASSIGNED, "\u0378"),
        ],
    )
    def test_subcategory(self, code: str, char: str) -> None:
        assert CategoryPredicate(code).matches(char)
        assert CategoryPredicate(code[0]).matches(char)

    def test_subcategory_is_exclusive(self) -> None:
        upper = CategoryPredicate(Letter.UPPERCASE)

        assert not upper.matches("a")
        assert not upper.matches("1")

    def test_cased_letters(self) -> None:
        cased = CategoryPredicate(Letter.CASED)

        assert cased.matches("A")
        assert cased.matches("a")
        assert cased.matches("ǅ")
        assert not cased.matches("中")
        assert not cased.matches("ʰ")

    def test_unknown_code(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown Unicode category"):
            category("Xx")


class TestOtherPredicates:
    def test_char_set(self) -> None:
        vowels = char_set("aeiou")

        assert vowels == CharSetPredicate(frozenset("aeiou"))
        assert vowels.matches("e")
        assert not vowels.matches("x")

    def test_any_of(self) -> None:
        digit_or_dot = any_of(category("Nd"), char_set("."))

        assert isinstance(digit_or_dot, CompositePredicate)
        assert digit_or_dot.matches("4")
        assert digit_or_dot.matches(".")
        assert not digit_or_dot.matches(",")

    @pytest.mark.parametrize("char", ["a", "Ä", "-", "–", "'"])
    def test_complex_word_accepts(self, char: str) -> None:
        assert COMPLEX_WORD.matches(char)

    @pytest.mark.parametrize("char", [" ", ".", ",", "1", "’"])
    def test_complex_word_rejects(self, char: str) -> None:
        assert not COMPLEX_WORD.matches(char)

    def test_pattern_searches_single_character(self) -> None:
        predicate = PatternPredicate(re.compile("ö|ü|ä"))

        assert predicate.matches("ü")
        assert not predicate.matches("u")

    def test_callable_result_coerced_to_bool(self) -> None:
        predicate = CallablePredicate(lambda c: c.isdigit() and c)

        assert predicate.matches("3") is True
        assert predicate.matches("x") is False

    def test_all_variants_satisfy_protocol(self) -> None:
        variants = [
            category("L"),
            char_set("x"),
            any_of(char_set("x")),
            PatternPredicate(re.compile("x")),
            CallablePredicate(str.isalpha),
        ]

        assert all(isinstance(v, CharPredicate) for v in variants)


class TestCompilePredicate:
    """Resolution of rule pattern sources."""

    def test_category_enum(self) -> None:
        assert compile_predicate(Punctuation.ALL) == CategoryPredicate("P")

    def test_complex_word(self) -> None:
        assert compile_predicate(Word.COMPLEX) is COMPLEX_WORD

    def test_compiled_pattern(self) -> None:
        pattern = re.compile(r"\d")

        assert compile_predicate(pattern) == PatternPredicate(pattern)

    def test_string_is_regex_not_category(self) -> None:
        predicate = compile_predicate("L")

        assert isinstance(predicate, PatternPredicate)
        assert predicate.matches("L")
        assert not predicate.matches("a")

    def test_string_category_code_warns(self, caplog) -> None:
        with caplog.at_level("WARNING", logger="lexis"):
            predicate = compile_predicate("Lu")

        assert not predicate.matches("A")
        assert any(
            r.name == "lexis.predicates" and "not a Unicode category" in r.getMessage()
            for r in caplog.records
        )

    def test_ordinary_string_does_not_warn(self, caplog) -> None:
        with caplog.at_level("WARNING", logger="lexis"):
            compile_predicate(r"[0-9]")

        assert not caplog.records

    def test_predicate_passes_through(self) -> None:
        predicate = char_set("x")

        assert compile_predicate(predicate) is predicate

    def test_callable(self) -> None:
        predicate = compile_predicate(str.isupper)

        assert isinstance(predicate, CallablePredicate)
        assert predicate.matches("Q")

    @pytest.mark.parametrize("source", [None, "", re.compile(""), "(", 3.0, ["a"]])
    def test_invalid_sources(self, source: object) -> None:
        with pytest.raises(ConfigurationError):
            compile_predicate(source)
