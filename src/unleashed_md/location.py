"""Source location tracking for tokens.

Provides SourceLocation dataclass for mapping tokens back to positions in
the raw markup (e.g. to place an editor cursor on a marker).

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for debugging and editor integration.

    All line and column positions are 1-indexed.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source (exclusive)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=1, offset=4, end_offset=5)
            >>> str(loc)
            '2:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0

    def __str__(self) -> str:
        """Format location as ``line:col``."""
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location."""
        return cls(lineno=0, col_offset=0)
