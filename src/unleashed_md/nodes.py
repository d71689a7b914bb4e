"""Typed document values for unleashed-md.

All values are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: ``match`` statements work naturally

Value Hierarchy:
Document
├── text: tuple[str, ...]           # plain-text segments
├── styles: tuple[StyleSpan, ...]   # Span + Style, discovery order
└── breaks: tuple[Break, ...]       # gap positions

Style (base)
├── Italic
├── Bold
└── LinkStyle(target)

Link(target)                        # link extractor output

Segment indices are the coordinate system for spans and breaks. A span
covers segments ``start..end`` inclusive. A break at ``pos`` sits in the
gap before segment ``pos``; ``pos == len(text)`` is the gap after the last
segment.

Thread Safety:
All values are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass

# =============================================================================
# Styles
# =============================================================================


@dataclass(frozen=True, slots=True)
class Style:
    """Base class for style kinds applied over a span of segments."""


@dataclass(frozen=True, slots=True)
class Italic(Style):
    """Italic text.

    Markup: *text*

    """


@dataclass(frozen=True, slots=True)
class Bold(Style):
    """Bold text.

    Markup: **text**

    """


@dataclass(frozen=True, slots=True)
class LinkStyle(Style):
    """Hyperlinked text.

    Markup: [text](target)

    The target is kept verbatim; it is never validated.

    """

    target: str


# =============================================================================
# Spans and breaks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Inclusive range of segment indices."""

    start: int
    end: int

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index <= self.end

    def __len__(self) -> int:
        return max(0, self.end - self.start + 1)


@dataclass(frozen=True, slots=True)
class StyleSpan:
    """A style applied over a span of segments."""

    span: Span
    style: Style


@dataclass(frozen=True, slots=True)
class Break:
    """Line break inserted immediately before the segment at ``pos``."""

    pos: int


# =============================================================================
# Documents and links
# =============================================================================


@dataclass(frozen=True, slots=True)
class Document:
    """Parser output: text segments annotated with style spans and breaks.

    Attributes:
        text: Plain-text segments in source order
        styles: Style spans in the order their closing markers were met
        breaks: Break positions in source order

    """

    text: tuple[str, ...] = ()
    styles: tuple[StyleSpan, ...] = ()
    breaks: tuple[Break, ...] = ()

    def styles_at(self, index: int) -> tuple[Style, ...]:
        """Return the styles whose span covers segment ``index``."""
        return tuple(s.style for s in self.styles if index in s.span)

    def breaks_at(self, pos: int) -> int:
        """Count the breaks sitting in the gap before segment ``pos``."""
        return sum(1 for b in self.breaks if b.pos == pos)


@dataclass(frozen=True, slots=True)
class Link:
    """A link target harvested by the link extractor."""

    target: str


__all__ = [
    "Bold",
    "Break",
    "Document",
    "Italic",
    "Link",
    "LinkStyle",
    "Span",
    "Style",
    "StyleSpan",
]
