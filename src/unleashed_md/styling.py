"""Per-segment style resolution for presentation layers.

Walks a Document the way a renderer does: keeps a running font style,
adds a style when the walk reaches a span's first segment and removes it
after the span's last segment. Nothing is drawn or laid out here; callers
map ``FontStyle`` to their own fonts and honour ``breaks_before``.

Example:
    >>> from unleashed_md import parse_markup
    >>> for seg in styled_segments(parse_markup("a *b **c* d**")):
    ...     print(seg.text, seg.font.name)
    a  NORMAL
    b  ITALIC
    c BOLD_ITALIC
     d BOLD

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from enum import Enum, auto
from typing import NamedTuple

from unleashed_md.nodes import Bold, Document, Italic, LinkStyle, Style, StyleSpan


class FontStyle(Enum):
    """Font variants a presentation layer needs to provide."""

    NORMAL = auto()
    ITALIC = auto()
    BOLD = auto()
    BOLD_ITALIC = auto()

    def __add__(self, style: Style) -> FontStyle:
        """Apply ``style``; links and already present styles change nothing."""
        match (self, style):
            case (FontStyle.NORMAL, Italic()):
                return FontStyle.ITALIC
            case (FontStyle.NORMAL, Bold()):
                return FontStyle.BOLD
            case (FontStyle.ITALIC, Bold()) | (FontStyle.BOLD, Italic()):
                return FontStyle.BOLD_ITALIC
            case _:
                return self

    def __sub__(self, style: Style) -> FontStyle:
        """Remove ``style``; links and absent styles change nothing."""
        match (self, style):
            case (FontStyle.BOLD_ITALIC, Bold()):
                return FontStyle.ITALIC
            case (FontStyle.BOLD_ITALIC, Italic()):
                return FontStyle.BOLD
            case (FontStyle.ITALIC, Italic()) | (FontStyle.BOLD, Bold()):
                return FontStyle.NORMAL
            case _:
                return self


class StyledSegment(NamedTuple):
    """A text segment with everything needed to draw it.

    Attributes:
        index: Segment index in the Document
        text: Segment text
        font: Font style in effect for the segment
        links: Targets of the link spans covering the segment
        breaks_before: Line breaks to insert before the segment

    """

    index: int
    text: str
    font: FontStyle
    links: tuple[str, ...]
    breaks_before: int


def styled_segments(document: Document) -> Iterator[StyledSegment]:
    """Yield every text segment with its resolved font and links.

    Spans are activated in order of their start index (ties keep discovery
    order), so crossing spans resolve correctly even though ``styles`` is
    ordered by closing marker.

    Args:
        document: Parsed Document

    Yields:
        One StyledSegment per text segment
    """
    pending = sorted(document.styles, key=lambda s: s.span.start)
    pending_idx = 0
    active: list[StyleSpan] = []
    font = FontStyle.NORMAL
    breaks_by_pos = Counter(b.pos for b in document.breaks)

    for index, text in enumerate(document.text):
        while pending_idx < len(pending) and pending[pending_idx].span.start <= index:
            style_span = pending[pending_idx]
            pending_idx += 1
            if style_span.span.end < index:
                continue
            font = font + style_span.style
            active.append(style_span)

        links = tuple(s.style.target for s in active if isinstance(s.style, LinkStyle))
        yield StyledSegment(
            index=index,
            text=text,
            font=font,
            links=links,
            breaks_before=breaks_by_pos[index],
        )

        still_active: list[StyleSpan] = []
        for style_span in active:
            if style_span.span.end == index:
                font = font - style_span.style
            else:
                still_active.append(style_span)
        active = still_active


def trailing_breaks(document: Document) -> int:
    """Count the breaks after the last segment."""
    return document.breaks_at(len(document.text))


__all__ = ["FontStyle", "StyledSegment", "styled_segments", "trailing_breaks"]
