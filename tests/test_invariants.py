"""Property-based tests for lexer and parser invariants using Hypothesis.

These tests verify that certain properties always hold regardless of the
input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from unleashed_md import extract_links, parse, tokenize
from unleashed_md.lexer.charsets import SPECIAL_CHARS, contains_special
from unleashed_md.nodes import Bold, Italic, LinkStyle
from unleashed_md.tokens import TokenType

MARKUP_ALPHABET = "ab *[]()\n"
plain_text = st.text(
    alphabet=st.characters(
        exclude_characters="".join(SPECIAL_CHARS), exclude_categories=("Cs",)
    ),
    min_size=1,
    max_size=200,
)
markup = st.text(alphabet=MARKUP_ALPHABET, max_size=200)


class TestTokenizerInvariants:
    """Tokenizer properties."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_values_reproduce_source(self, source: str) -> None:
        """Every character ends up in exactly one token."""
        assert "".join(t.value for t in tokenize(source)) == source

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_no_empty_or_adjacent_text_runs(self, source: str) -> None:
        """Text runs are maximal and never empty."""
        tokens = tokenize(source)
        for token in tokens:
            assert token.value != ""
        for left, right in zip(tokens, tokens[1:]):
            if left.type is TokenType.TEXT and right.type is TokenType.TEXT:
                # Only degraded one-character brackets split text runs
                assert left.value in ("]", "(") or right.value in ("]", "(")

    @given(plain_text)
    @settings(max_examples=100)
    def test_plain_text_is_one_segment(self, source: str) -> None:
        tokens = tokenize(source)
        assert [(t.type, t.value) for t in tokens] == [(TokenType.TEXT, source)]
        doc = parse(tokens)
        assert doc.text == (source,)
        assert doc.styles == ()
        assert doc.breaks == ()

    @given(markup)
    @settings(max_examples=200)
    def test_deterministic(self, source: str) -> None:
        assert tokenize(source) == tokenize(source)


class TestParserInvariants:
    """Parser properties."""

    @given(markup)
    @settings(max_examples=300)
    def test_indices_in_range(self, source: str) -> None:
        doc = parse(tokenize(source))
        for style_span in doc.styles:
            assert 0 <= style_span.span.start <= style_span.span.end < len(doc.text)
        for brk in doc.breaks:
            assert 0 <= brk.pos <= len(doc.text)

    @given(markup)
    @settings(max_examples=200)
    def test_breaks_match_newlines(self, source: str) -> None:
        doc = parse(tokenize(source))
        assert len(doc.breaks) == source.count("\n")
        assert [b.pos for b in doc.breaks] == sorted(b.pos for b in doc.breaks)

    @given(markup)
    @settings(max_examples=200)
    def test_segments_hold_no_special_tokens(self, source: str) -> None:
        """Re-tokenizing a segment finds text only."""
        for segment in parse(tokenize(source)).text:
            assert not contains_special(segment) or segment in ("]", "(")
            assert all(t.type is TokenType.TEXT for t in tokenize(segment))

    @given(markup)
    @settings(max_examples=200)
    def test_style_counts_bounded_by_markers(self, source: str) -> None:
        tokens = tokenize(source)
        doc = parse(tokens)
        italics = sum(1 for t in tokens if t.type is TokenType.ASTERISK)
        bolds = sum(1 for t in tokens if t.type is TokenType.DOUBLE_ASTERISK)
        assert sum(1 for s in doc.styles if s.style == Italic()) <= italics // 2
        assert sum(1 for s in doc.styles if s.style == Bold()) <= bolds // 2

    @given(markup)
    @settings(max_examples=200)
    def test_text_is_source_minus_markup(self, source: str) -> None:
        """Segments are the TEXT tokens outside link targets, in order."""
        tokens = tokenize(source)
        expected: list[str] = []
        inside_target = False
        for token in tokens:
            if token.type is TokenType.LINK_MIDDLE:
                inside_target = True
            elif token.type is TokenType.CLOSE_PAREN:
                inside_target = False
            elif token.type is TokenType.TEXT and not inside_target:
                expected.append(token.value)
        assert parse(tokens).text == tuple(expected)


class TestLinkExtractionInvariants:
    """Link extractor properties."""

    @given(
        st.lists(
            st.tuples(
                st.sampled_from(["", "*", "**", "\n", "plain "]),
                st.text(alphabet="abc ", max_size=10),
                st.text(alphabet="xyz/", max_size=10),
            ),
            max_size=8,
        )
    )
    @settings(max_examples=150)
    def test_extracts_every_well_formed_link(self, parts: list[tuple[str, str, str]]) -> None:
        source = "".join(f"{noise}[{label}]({target})" for noise, label, target in parts)
        targets = [link.target for link in extract_links(tokenize(source))]
        assert targets == [target for _, _, target in parts]

    @given(
        st.lists(
            st.tuples(st.text(alphabet="abc ", min_size=1, max_size=10), st.text(alphabet="xyz/", max_size=10)),
            max_size=8,
        )
    )
    @settings(max_examples=100)
    def test_parser_agrees_with_extractor(self, parts: list[tuple[str, str]]) -> None:
        source = " ".join(f"[{label}]({target})" for label, target in parts)
        tokens = tokenize(source)
        parsed = [s.style.target for s in parse(tokens).styles if isinstance(s.style, LinkStyle)]
        assert parsed == [link.target for link in extract_links(tokens)]
