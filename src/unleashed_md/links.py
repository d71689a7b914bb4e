"""Link target extraction for unleashed-md.

A cheap pass over the token stream that harvests link targets without
building a Document, e.g. to index which entries a note refers to.

State machine per occurrence:

    INITIAL --[--> LINK_OPENED --](--> TARGET_OPENED --)--> INITIAL (emit)

Transitions are checked in sequence against the same token, so a token
that moves the machine forward is also seen by the next state.

Thread Safety:
All functions are pure; safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum, auto

from unleashed_md.nodes import Link
from unleashed_md.tokens import Token, TokenType


class LinkState(Enum):
    """Link extractor states."""

    INITIAL = auto()
    LINK_OPENED = auto()  # saw [
    TARGET_OPENED = auto()  # saw ](, collecting target text


def iter_links(tokens: Iterable[Token]) -> Iterator[Link]:
    """Yield link targets in source order.

    Inside a target only TEXT values are collected; every other token
    except the closing ``)`` is ignored.

    Args:
        tokens: Tokens as produced by ``tokenize``

    Yields:
        Link values, left to right
    """
    state = LinkState.INITIAL
    target: list[str] = []
    for token in tokens:
        if state is LinkState.INITIAL and token.type is TokenType.OPEN_BRACKET:
            state = LinkState.LINK_OPENED
        if state is LinkState.LINK_OPENED and token.type is TokenType.LINK_MIDDLE:
            state = LinkState.TARGET_OPENED
        if state is LinkState.TARGET_OPENED:
            if token.type is TokenType.CLOSE_PAREN:
                yield Link(target="".join(target))
                target = []
                state = LinkState.INITIAL
            elif token.type is TokenType.TEXT:
                target.append(token.value)


def extract_links(tokens: Iterable[Token]) -> tuple[Link, ...]:
    """Collect every well-formed ``[label](target)`` target.

    Example:
        >>> from unleashed_md.lexer import tokenize
        >>> extract_links(tokenize("[a](x) and [b](y)"))
        (Link(target='x'), Link(target='y'))
    """
    return tuple(iter_links(tokens))


def extract_link_targets(tokens: Iterable[Token]) -> list[str]:
    """Like ``extract_links`` but returns the target strings only."""
    return [link.target for link in iter_links(tokens)]


__all__ = ["LinkState", "extract_link_targets", "extract_links", "iter_links"]
