"""Tokenize and parse markup in 3 lines — zero config, zero deps."""

from unleashed_md import parse, tokenize

doc = parse(tokenize("Hello **World**, see [the map](maps/coast)"))
print(doc.text)
print(doc.styles)
