"""Tokenize a sentence in 3 lines — zero config, zero deps."""

from lexis import tokenize

for token in tokenize("Mary had a little lamb."):
    print(token.index, token.type, repr(token.value), token.position)
