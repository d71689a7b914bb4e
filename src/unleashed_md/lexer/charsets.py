"""Character sets for O(1) classification.

Frozensets for O(1) membership testing, immutability and module-level
caching (no per-call allocation).

Usage:
    from unleashed_md.lexer.charsets import SPECIAL_CHARS

    if char in SPECIAL_CHARS:  # O(1) lookup
        ...
"""

ASTERISK = "*"
OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
OPEN_PAREN = "("
CLOSE_PAREN = ")"
LINE_BREAK = "\n"

# Characters that end a text run and trigger tokenizer dispatch
SPECIAL_CHARS: frozenset[str] = frozenset(
    (ASTERISK, OPEN_BRACKET, CLOSE_BRACKET, OPEN_PAREN, CLOSE_PAREN, LINE_BREAK)
)


def contains_special(text: str) -> bool:
    """Check whether ``text`` holds any character the lexer treats specially."""
    return not SPECIAL_CHARS.isdisjoint(text)
