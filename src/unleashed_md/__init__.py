"""
unleashed-md — Inline markup engine for notes and campaign text

Converts a small markdown-like dialect (``**bold**``, ``*italic*``,
``[label](target)`` links and line breaks) into a token stream and a
Document of plain-text segments annotated with style spans and break
positions. Zero runtime dependencies; nothing is rendered or laid out.

Quick Start:
    >>> from unleashed_md import tokenize, parse, extract_links
    >>> tokens = tokenize("foo *bar* [baz](qux)")
    >>> doc = parse(tokens)
    >>> doc.text
    ('foo ', 'bar', ' ', 'baz')
    >>> [link.target for link in extract_links(tokens)]
    ['qux']

    >>> # Or use the high-level Markup class
    >>> from unleashed_md import Markup
    >>> md = Markup()
    >>> [(seg.text, seg.font.name) for seg in md("a **b**")]
    [('a ', 'NORMAL'), ('b', 'BOLD')]

Installation:
    pip install unleashed-md
"""

from collections.abc import Callable, Iterable

from unleashed_md.cache import CacheInfo, DictParseCache, ParseCache, hash_config, hash_content
from unleashed_md.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from unleashed_md.errors import ConfigError, SerializationError, UnleashedError
from unleashed_md.lexer import Lexer, tokenize
from unleashed_md.links import extract_link_targets, extract_links
from unleashed_md.location import SourceLocation
from unleashed_md.nodes import (
    Bold,
    Break,
    Document,
    Italic,
    Link,
    LinkStyle,
    Span,
    Style,
    StyleSpan,
)
from unleashed_md.parser import Parser, parse
from unleashed_md.serialization import from_dict, from_json, to_dict, to_json
from unleashed_md.styling import FontStyle, StyledSegment, styled_segments, trailing_breaks
from unleashed_md.text import extract_text
from unleashed_md.tokens import Token, TokenType

__version__ = "0.1.0"


def _parse_cached(source: str, config: ParseConfig, cache: ParseCache | None) -> Document:
    """Tokenize and parse ``source`` under the active config, via ``cache``."""
    config_hash = hash_config(config) if cache is not None else ""
    if cache is not None and config_hash:
        content_hash = hash_content(source)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            return cached
        doc = Parser(Lexer(source).tokenize()).parse()
        cache.put(content_hash, config_hash, doc)
        return doc
    return Parser(Lexer(source).tokenize()).parse()


def parse_markup(source: str, *, cache: ParseCache | None = None) -> Document:
    """Tokenize and parse raw markup in one call.

    Uses the configuration active in the current context (see
    ``parse_config_context``).

    Args:
        source: Raw markup text
        cache: Optional content-addressed parse cache. Bypassed when the
            active config has a text_transformer.

    Returns:
        Document value

    Example:
        >>> parse_markup("foo\\nbar").breaks
        (Break(pos=1),)
    """
    return _parse_cached(source, get_parse_config(), cache)


class Markup:
    """High-level markup processor bundling a configuration.

    Usage:
        >>> md = Markup(keep_stray_close_paren=True)
        >>> md.parse("1) first").text
        ('1', ')', ' first')

        >>> md.links("see [the map](maps/coast) and [npc](npcs/ada)")
        (Link(target='maps/coast'), Link(target='npcs/ada'))

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markup instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        keep_stray_close_paren: bool = False,
        reset_link_start: bool = False,
        text_transformer: Callable[[str], str] | None = None,
        log_degradations: bool = True,
    ) -> None:
        """Initialize Markup processor.

        Args:
            keep_stray_close_paren: Keep ``)`` outside links as literal text
            reset_link_start: Give every link its own start index
            text_transformer: Optional callback applied to each text segment
            log_degradations: Log DEBUG records for degraded markup
        """
        # Build immutable config once (thread-safe, reused across calls)
        self._config = ParseConfig(
            keep_stray_close_paren=keep_stray_close_paren,
            reset_link_start=reset_link_start,
            text_transformer=text_transformer,
            log_degradations=log_degradations,
        )

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str, *, cache: ParseCache | None = None) -> list[StyledSegment]:
        """Parse markup and resolve the style of every segment.

        Args:
            source: Raw markup text
            cache: Optional content-addressed parse cache

        Returns:
            List of StyledSegment, one per text segment
        """
        return list(styled_segments(self.parse(source, cache=cache)))

    def parse(self, source: str, *, cache: ParseCache | None = None) -> Document:
        """Parse raw markup into a Document.

        Args:
            source: Raw markup text
            cache: Optional content-addressed parse cache. For parallel parsing,
                use a thread-safe cache implementation.

        Returns:
            Document value

        Thread Safety:
            Sets config via ContextVar (thread-local). Safe for concurrent use.

        """
        with parse_config_context(self._config):
            return _parse_cached(source, self._config, cache)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        cache: ParseCache | None = None,
    ) -> list[Document]:
        """Parse multiple markup sources into Documents.

        Sets config once, parses all, resets once. When cache is provided,
        duplicate sources within the batch hit cache.

        Args:
            sources: Iterable of raw markup strings
            cache: Optional content-addressed parse cache

        Returns:
            List of Documents in input order
        """
        with parse_config_context(self._config):
            return [_parse_cached(source, self._config, cache) for source in sources]

    def links(self, source: str) -> tuple[Link, ...]:
        """Extract link targets from raw markup without building a Document."""
        return extract_links(Lexer(source).tokenize())


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "tokenize",
    "parse",
    "extract_links",
    "extract_link_targets",
    "parse_markup",
    # High-level
    "Markup",
    # Parser components
    "Lexer",
    "Parser",
    # Tokens
    "Token",
    "TokenType",
    "SourceLocation",
    # Document values
    "Document",
    "Span",
    "StyleSpan",
    "Style",
    "Italic",
    "Bold",
    "LinkStyle",
    "Break",
    "Link",
    # Style resolution
    "FontStyle",
    "StyledSegment",
    "styled_segments",
    "trailing_breaks",
    # Text
    "extract_text",
    # Parse cache
    "CacheInfo",
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "UnleashedError",
    "ConfigError",
    "SerializationError",
]
