"""Single-pass lexer with one character of lookahead.

Scans the raw markup left to right. Special characters become structural
tokens (or degrade to one-character text), everything else is collected
greedily into text runs.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from unleashed_md.lexer.charsets import (
    ASTERISK,
    CLOSE_BRACKET,
    CLOSE_PAREN,
    LINE_BREAK,
    OPEN_BRACKET,
    OPEN_PAREN,
    SPECIAL_CHARS,
)
from unleashed_md.tokens import Token, TokenType

# Special characters that always map to a single one-character token
_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    OPEN_BRACKET: TokenType.OPEN_BRACKET,
    CLOSE_PAREN: TokenType.CLOSE_PAREN,
    OPEN_PAREN: TokenType.TEXT,
    LINE_BREAK: TokenType.LINE_BREAK,
}


class Lexer:
    """Character lexer for the inline markup dialect.

    Usage:
            >>> for token in Lexer("foo [bar](baz)").tokenize():
            ...     print(token)
        Token(TEXT, 'foo ')
        Token(OPEN_BRACKET)
        Token(TEXT, 'bar')
        Token(LINK_MIDDLE)
        Token(TEXT, 'baz')
        Token(CLOSE_PAREN)

    The lexer never fails: every character of the source ends up in exactly
    one token, so joining the token values reproduces the source.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Raw markup text
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        """
        source_len = self._source_len  # Local var for faster access
        while self._pos < source_len:
            char = self._source[self._pos]
            if char == ASTERISK:
                yield self._scan_asterisk()
            elif char == CLOSE_BRACKET:
                yield self._scan_close_bracket()
            elif char in _SINGLE_CHAR_TOKENS:
                yield self._emit(_SINGLE_CHAR_TOKENS[char], self._pos + 1)
            else:
                yield self._scan_text()

    # =========================================================================
    # Scanners
    # =========================================================================

    def _scan_asterisk(self) -> Token:
        """``**`` becomes one DOUBLE_ASTERISK, a lone ``*`` an ASTERISK."""
        if self._peek(1) == ASTERISK:
            return self._emit(TokenType.DOUBLE_ASTERISK, self._pos + 2)
        return self._emit(TokenType.ASTERISK, self._pos + 1)

    def _scan_close_bracket(self) -> Token:
        """``](`` becomes LINK_MIDDLE, a lone ``]`` degrades to text."""
        if self._peek(1) == OPEN_PAREN:
            return self._emit(TokenType.LINK_MIDDLE, self._pos + 2)
        return self._emit(TokenType.TEXT, self._pos + 1)

    def _scan_text(self) -> Token:
        """Collect the maximal run of non-special characters."""
        end = self._pos + 1
        source = self._source
        source_len = self._source_len
        while end < source_len and source[end] not in SPECIAL_CHARS:
            end += 1
        return self._emit(TokenType.TEXT, end)

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def _peek(self, ahead: int = 0) -> str:
        """Peek ``ahead`` characters past the current position.

        Returns:
            The character, or empty string past the end of input.
        """
        pos = self._pos + ahead
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _emit(self, token_type: TokenType, end: int) -> Token:
        """Create a token for ``source[pos:end]`` and commit position to ``end``."""
        start = self._pos
        token = Token(
            type=token_type,
            value=self._source[start:end],
            start=start,
            end=end,
            _lineno=self._lineno,
            _col=self._col,
        )
        self._pos = end
        if token_type is TokenType.LINE_BREAK:
            self._lineno += 1
            self._col = 1
        else:
            self._col += end - start
        return token


def tokenize(source: str) -> tuple[Token, ...]:
    """Tokenize raw markup into an immutable token sequence.

    Args:
        source: Raw markup text

    Returns:
        Tuple of tokens; empty for empty input.

    Example:
        >>> [t.type.name for t in tokenize("**hi**")]
        ['DOUBLE_ASTERISK', 'TEXT', 'DOUBLE_ASTERISK']
    """
    return tuple(Lexer(source).tokenize())
