"""Token and TokenType definitions for the unleashed-md lexer.

The lexer produces a stream of Token objects that the parser and the
link extractor consume. Each Token has a type, the exact source text it
covers, and raw source offsets.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Most tokens never have their location read.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from unleashed_md.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    TEXT = auto()  # run of non-special characters, or a degraded ] or (
    ASTERISK = auto()  # *
    DOUBLE_ASTERISK = auto()  # **
    OPEN_BRACKET = auto()  # [
    LINK_MIDDLE = auto()  # ](
    CLOSE_PAREN = auto()  # )
    LINE_BREAK = auto()  # \n


# Token types whose value is fixed by the type itself
STRUCTURAL_VALUES: dict[TokenType, str] = {
    TokenType.ASTERISK: "*",
    TokenType.DOUBLE_ASTERISK: "**",
    TokenType.OPEN_BRACKET: "[",
    TokenType.LINK_MIDDLE: "](",
    TokenType.CLOSE_PAREN: ")",
    TokenType.LINE_BREAK: "\n",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The exact source text covered by this token
        start: Absolute start offset in source
        end: Absolute end offset in source (exclusive)
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)

    Equality and hashing consider ``type`` and ``value`` only, so tokens
    built by hand compare equal to lexer output.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)
    _lineno: int = field(default=1, repr=False, compare=False)
    _col: int = field(default=1, repr=False, compare=False)
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @classmethod
    def text(cls, value: str) -> Token:
        """Build a TEXT token without source offsets."""
        return cls(TokenType.TEXT, value)

    @classmethod
    def of(cls, token_type: TokenType) -> Token:
        """Build a structural token carrying its canonical value.

        Raises:
            ValueError: For TEXT, which has no canonical value; use
                ``Token.text`` instead.
        """
        value = STRUCTURAL_VALUES.get(token_type)
        if value is None:
            msg = f"{token_type.name} has no canonical value, use Token.text()"
            raise ValueError(msg)
        return cls(token_type, value)

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached).

        Tokens built by hand report line 1, column 1.
        """
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from unleashed_md.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self.start,
            end_offset=self.end,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def is_text(self) -> bool:
        return self.type is TokenType.TEXT

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is not TokenType.TEXT:
            return f"Token({self.type.name})"
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token(TEXT, {val!r})"


__all__ = ["STRUCTURAL_VALUES", "Token", "TokenType"]
