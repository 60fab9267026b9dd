"""Keep contractions and hyphenated words whole, and report dropped characters."""

from lexis import Punctuation, RuleSetBuilder, Scanner, Separator, Word, to_json, uncovered_spans

rules = (
    RuleSetBuilder()
    .multi("word", Word.COMPLEX)
    .mono("space", Separator.ALL)
    .mono("punctuation", Punctuation.ALL)
    .build()
)

text = "He'll stay,\nthe devil-grass grows."
tokens = Scanner(rules).tokenize(text)

print(to_json(tokens, indent=2))
print("dropped:", [text[start:end] for start, end in uncovered_spans(text, tokens)])
