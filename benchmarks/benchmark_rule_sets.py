"""Benchmark Lexis scanning across rule sets.

Compares the built-in rules with a natural-language word rule and a
regular-expression rule set on the same corpus.

Run with:
    uv run python benchmarks/benchmark_rule_sets.py
"""

import time
from dataclasses import dataclass

from lexis import Punctuation, Rule, Scanner, Separator, Word

CORPUS = (
    "Des Teufels liebstes Möbelstück ist die lange Bank. "
    "He'll stay so I'll stay. ...and the devil-grass which brought sweet dreams, "
    "1,024 lambs cost $3.50 each — 50% off!\n"
) * 200


@dataclass
class RuleSetTiming:
    """Timing data for one rule set."""

    name: str
    total_time_ms: float
    token_count: int
    tokens_per_ms: float


RULE_SETS: dict[str, list[Rule] | None] = {
    "default": None,
    "complex-word": [
        Rule.multi("word", Word.COMPLEX),
        Rule.mono("space", Separator.ALL),
        Rule.mono("punctuation", Punctuation.ALL),
    ],
    "regex": [
        Rule.multi("word", r"\w"),
        Rule.mono("space", r"\s"),
        Rule.mono("other", r"[^\w\s]"),
    ],
}


def benchmark_rule_set(name: str, rules: list[Rule] | None, iterations: int = 20) -> RuleSetTiming:
    scanner = Scanner(rules)
    scanner.tokenize(CORPUS)  # Warmup

    start = time.perf_counter()
    for _ in range(iterations):
        tokens = scanner.tokenize(CORPUS)
    elapsed_ms = (time.perf_counter() - start) * 1000 / iterations

    return RuleSetTiming(
        name=name,
        total_time_ms=elapsed_ms,
        token_count=len(tokens),
        tokens_per_ms=len(tokens) / elapsed_ms if elapsed_ms else 0.0,
    )


def main() -> None:
    print(f"Corpus: {len(CORPUS):,} characters\n")
    print(f"{'Rule set':<15} {'ms/scan':>10} {'tokens':>10} {'tokens/ms':>12}")
    print("-" * 50)
    for name, rules in RULE_SETS.items():
        timing = benchmark_rule_set(name, rules)
        print(
            f"{timing.name:<15} {timing.total_time_ms:>10.2f} "
            f"{timing.token_count:>10,} {timing.tokens_per_ms:>12.1f}"
        )


if __name__ == "__main__":
    main()
