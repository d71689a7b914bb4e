"""Lexer for the unleashed-md inline markup dialect.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (scanners + navigation)
└── charsets.py          # Special character constants

Usage:
    >>> from unleashed_md.lexer import tokenize
    >>> tokenize("foo\\nbar")
    (Token(TEXT, 'foo'), Token(LINE_BREAK), Token(TEXT, 'bar'))

"""

from unleashed_md.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
