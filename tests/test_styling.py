"""Tests for per-segment style resolution."""

from __future__ import annotations

import pytest

from unleashed_md import parse_markup
from unleashed_md.nodes import Bold, Break, Document, Italic, LinkStyle, Span, StyleSpan
from unleashed_md.styling import FontStyle, StyledSegment, styled_segments, trailing_breaks


class TestFontStyleAlgebra:
    """Combination table for running font styles."""

    @pytest.mark.parametrize(
        ("font", "style", "expected"),
        [
            (FontStyle.NORMAL, Italic(), FontStyle.ITALIC),
            (FontStyle.NORMAL, Bold(), FontStyle.BOLD),
            (FontStyle.ITALIC, Bold(), FontStyle.BOLD_ITALIC),
            (FontStyle.BOLD, Italic(), FontStyle.BOLD_ITALIC),
            (FontStyle.ITALIC, Italic(), FontStyle.ITALIC),
            (FontStyle.NORMAL, LinkStyle(target="x"), FontStyle.NORMAL),
        ],
    )
    def test_add(self, font: FontStyle, style, expected: FontStyle) -> None:  # type: ignore[no-untyped-def]
        assert font + style is expected

    @pytest.mark.parametrize(
        ("font", "style", "expected"),
        [
            (FontStyle.BOLD_ITALIC, Bold(), FontStyle.ITALIC),
            (FontStyle.BOLD_ITALIC, Italic(), FontStyle.BOLD),
            (FontStyle.ITALIC, Italic(), FontStyle.NORMAL),
            (FontStyle.BOLD, Bold(), FontStyle.NORMAL),
            (FontStyle.NORMAL, Bold(), FontStyle.NORMAL),
            (FontStyle.BOLD, LinkStyle(target="x"), FontStyle.BOLD),
        ],
    )
    def test_sub(self, font: FontStyle, style, expected: FontStyle) -> None:  # type: ignore[no-untyped-def]
        assert font - style is expected


class TestStyledSegments:
    """Walking a document."""

    def test_plain_text(self) -> None:
        segments = list(styled_segments(parse_markup("hello")))
        assert segments == [
            StyledSegment(index=0, text="hello", font=FontStyle.NORMAL, links=(), breaks_before=0)
        ]

    def test_crossing_spans(self) -> None:
        doc = parse_markup("foo*bar**bazqux*quux**corge")
        fonts = [seg.font for seg in styled_segments(doc)]
        assert fonts == [
            FontStyle.NORMAL,
            FontStyle.ITALIC,
            FontStyle.BOLD_ITALIC,
            FontStyle.BOLD,
            FontStyle.NORMAL,
        ]

    def test_nested_spans_out_of_start_order(self) -> None:
        # styles are in closing order: Italic(1..1) before Bold(0..2)
        doc = parse_markup("**a *b* c**")
        fonts = [seg.font for seg in styled_segments(doc)]
        assert fonts == [FontStyle.BOLD, FontStyle.BOLD_ITALIC, FontStyle.BOLD]

    def test_links_and_breaks(self) -> None:
        doc = parse_markup("see\n\n[the map](maps/coast) now")
        segments = list(styled_segments(doc))
        assert [(s.text, s.links, s.breaks_before) for s in segments] == [
            ("see", (), 0),
            ("the map", ("maps/coast",), 2),
            (" now", (), 0),
        ]

    def test_link_keeps_font(self) -> None:
        doc = parse_markup("*[a](x)*")
        (segment,) = styled_segments(doc)
        assert segment.font is FontStyle.ITALIC
        assert segment.links == ("x",)

    def test_hand_built_document(self) -> None:
        doc = Document(
            text=("a", "b", "c"),
            styles=(StyleSpan(span=Span(start=1, end=2), style=Bold()),),
            breaks=(Break(pos=3),),
        )
        assert [s.font for s in styled_segments(doc)] == [
            FontStyle.NORMAL,
            FontStyle.BOLD,
            FontStyle.BOLD,
        ]
        assert trailing_breaks(doc) == 1

    def test_trailing_breaks_none(self) -> None:
        assert trailing_breaks(parse_markup("a\nb")) == 0

    def test_unordered_breaks_counted_per_gap(self) -> None:
        doc = Document(
            text=("a", "b"),
            breaks=(Break(pos=1), Break(pos=0), Break(pos=1), Break(pos=2)),
        )
        assert [s.breaks_before for s in styled_segments(doc)] == [1, 2]
        assert trailing_breaks(doc) == 1

    def test_many_breaks(self) -> None:
        source = "x\n" * 2000
        segments = list(styled_segments(parse_markup(source)))
        assert len(segments) == 2000
        assert [s.breaks_before for s in segments] == [0] + [1] * 1999
