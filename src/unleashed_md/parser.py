"""Span-tracking parser for unleashed-md.

Consumes a token stream and produces a Document: plain-text segments,
style spans over segment indices, and break positions.

Each style kind has its own independent open slot instead of a shared
nesting stack. Italic and bold therefore open and close on their own
markers only, which lets spans of different kinds cross:

    foo*bar**baz*qux**  ->  Italic over 1..2, Bold over 2..3

Thread Safety:
Parser instances are single-use. Create one per token sequence.
All scan state is instance-local; configuration is read from a ContextVar.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from unleashed_md.config import get_parse_config
from unleashed_md.nodes import (
    Bold,
    Break,
    Document,
    Italic,
    LinkStyle,
    Span,
    Style,
    StyleSpan,
)
from unleashed_md.tokens import Token, TokenType
from unleashed_md.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class _ScanState:
    """Mutable state threaded through one forward pass."""

    counter: int = 0  # index of the next segment to be produced
    italic_start: int | None = None
    bold_start: int | None = None
    link_start: int | None = None
    bracket_open: bool = False  # a [ is waiting for its target to close
    link_end: int = -1
    inside_target: bool = False
    target_parts: list[str] = field(default_factory=list)


class Parser:
    """Parser for the inline markup token stream.

    Usage:
        >>> from unleashed_md.lexer import tokenize
        >>> doc = Parser(tokenize("foo *bar* baz")).parse()
        >>> doc.text
        ('foo ', 'bar', ' baz')
        >>> doc.styles
        (StyleSpan(span=Span(start=1, end=1), style=Italic()),)

    Parsing never fails. Unclosed markers produce no span, a ``)`` met
    outside a link target is dropped (unless ``keep_stray_close_paren`` is
    set), and link target text never shows up as a segment.

    A link span starts at the first ``[`` of the input and that start is
    kept for every later link, so ``"[a](x) and [b](y)"`` gives the second
    link the span 0..2. Set ``reset_link_start`` to give each link its own
    start. Links enclosing no segment (``"x[](t)y"``) produce no span even
    though ``extract_links`` still reports their target.

    """

    __slots__ = (
        "_tokens",
        "_config",
        "_state",
        "_text",
        "_styles",
        "_breaks",
    )

    def __init__(self, tokens: Iterable[Token]) -> None:
        """Initialize parser with a token sequence.

        Args:
            tokens: Tokens as produced by the lexer (any iterable)
        """
        self._tokens = tokens
        self._config = get_parse_config()
        self._state = _ScanState()
        self._text: list[str] = []
        self._styles: list[StyleSpan] = []
        self._breaks: list[Break] = []

    def parse(self) -> Document:
        """Walk the tokens once and build the Document.

        Returns:
            Document with text segments, style spans and breaks
        """
        state = self._state
        for token in self._tokens:
            match token.type:
                case TokenType.TEXT:
                    if state.inside_target:
                        state.target_parts.append(token.value)
                    else:
                        self._push_segment(token.value)
                case TokenType.ASTERISK:
                    state.italic_start = self._toggle(state.italic_start, Italic())
                case TokenType.DOUBLE_ASTERISK:
                    state.bold_start = self._toggle(state.bold_start, Bold())
                case TokenType.OPEN_BRACKET:
                    # Only the first [ since the last reset anchors the span
                    state.bracket_open = True
                    if state.link_start is None:
                        state.link_start = state.counter
                case TokenType.LINK_MIDDLE:
                    state.link_end = state.counter - 1
                    state.inside_target = True
                case TokenType.CLOSE_PAREN:
                    self._close_paren(token)
                case TokenType.LINE_BREAK:
                    self._breaks.append(Break(pos=state.counter))

        self._report_unclosed()
        return Document(
            text=tuple(self._text),
            styles=tuple(self._styles),
            breaks=tuple(self._breaks),
        )

    # =========================================================================
    # Token handlers
    # =========================================================================

    def _push_segment(self, content: str) -> None:
        transformer = self._config.text_transformer
        if transformer is not None:
            content = transformer(content)
        self._text.append(content)
        self._state.counter += 1

    def _toggle(self, start: int | None, style: Style) -> int | None:
        """Open or close a style slot.

        Returns:
            The new value of the slot: the current counter when opening,
            None when closing.
        """
        if start is None:
            return self._state.counter
        self._emit_span(start, self._state.counter - 1, style)
        return None

    def _close_paren(self, token: Token) -> None:
        state = self._state
        if not state.inside_target:
            if self._config.keep_stray_close_paren:
                self._push_segment(token.value)
            elif self._config.log_degradations:
                logger.debug("Dropped stray ')' at %s", token.location)
            return

        target = "".join(state.target_parts)
        if state.link_start is None:
            if self._config.log_degradations:
                logger.debug("Link target %r has no opening '[', no span emitted", target)
        else:
            self._emit_span(state.link_start, state.link_end, LinkStyle(target=target))
        state.target_parts = []
        state.inside_target = False
        state.bracket_open = False
        if self._config.reset_link_start:
            state.link_start = None

    def _emit_span(self, start: int, end: int, style: Style) -> None:
        if end < start:
            # Markers enclosing no segment, e.g. "a****b" or "[](x)"
            if self._config.log_degradations:
                logger.debug("Empty %s span at segment %d dropped", type(style).__name__, start)
            return
        self._styles.append(StyleSpan(span=Span(start=start, end=end), style=style))

    def _report_unclosed(self) -> None:
        if not self._config.log_degradations:
            return
        state = self._state
        unclosed = [
            name
            for name, start in (
                ("italic", state.italic_start),
                ("bold", state.bold_start),
            )
            if start is not None
        ]
        if state.bracket_open:
            unclosed.append("link")
        elif state.inside_target:
            unclosed.append("link target")
        if unclosed:
            logger.debug("Unclosed markers dropped at end of input: %s", ", ".join(unclosed))


def parse(tokens: Iterable[Token]) -> Document:
    """Parse a token sequence into a Document.

    Args:
        tokens: Tokens as produced by ``tokenize``

    Returns:
        Document AST value

    Example:
        >>> from unleashed_md.lexer import tokenize
        >>> parse(tokenize("foo\\nbar")).breaks
        (Break(pos=1),)
    """
    return Parser(tokens).parse()
