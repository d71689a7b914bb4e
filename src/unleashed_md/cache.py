"""Content-addressed parse cache for unleashed-md.

Maps (content_hash, config_hash) to a parsed Document, evicting the least
recently used entry once full. A presentation layer that re-parses the
same markup on every frame can hand a cache to ``parse_markup`` or
``Markup`` and skip tokenizing and parsing while the text is unchanged.

Thread Safety:
    DictParseCache is not thread-safe. For parallel parsing, use a cache
    implementation with internal locking (e.g. threading.Lock around get/put).

Example:
    >>> from unleashed_md import parse_markup, DictParseCache
    >>> cache = DictParseCache()
    >>> doc1 = parse_markup("**Hello**", cache=cache)
    >>> doc2 = parse_markup("**Hello**", cache=cache)  # Cache hit, no re-parse
    >>> doc1 is doc2
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple, Protocol

from unleashed_md.utils.hashing import hash_str

if TYPE_CHECKING:
    from unleashed_md.config import ParseConfig
    from unleashed_md.nodes import Document


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches.

    Cache key is (content_hash, config_hash). Cached value is a Document,
    which is immutable and safe to share across threads.
    """

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        ...


class CacheInfo(NamedTuple):
    """Snapshot of cache statistics."""

    hits: int
    misses: int
    maxsize: int | None
    currsize: int


class DictParseCache:
    """In-memory least-recently-used parse cache.

    A renderer parsing every visible note on every frame touches the same
    few keys over and over; ``maxsize`` bounds memory when notes are edited
    and old versions never come back. ``maxsize=None`` never evicts.

    Not thread-safe. For parallel parsing, wrap with a lock or use a
    thread-safe implementation.
    """

    __slots__ = ("_data", "_maxsize", "_hits", "_misses")

    def __init__(self, maxsize: int | None = 256) -> None:
        if maxsize is not None and maxsize < 1:
            msg = f"maxsize must be positive or None, got {maxsize}"
            raise ValueError(msg)
        self._data: dict[tuple[str, str], Document] = {}
        self._maxsize = maxsize
        self._hits = 0
        self._misses = 0

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        key = (content_hash, config_hash)
        doc = self._data.pop(key, None)
        if doc is None:
            self._misses += 1
            return None
        # Reinsert as most recently used
        self._data[key] = doc
        self._hits += 1
        return doc

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache, evicting the least recently used entry."""
        key = (content_hash, config_hash)
        self._data.pop(key, None)
        self._data[key] = doc
        if self._maxsize is not None and len(self._data) > self._maxsize:
            del self._data[next(iter(self._data))]

    def cache_info(self) -> CacheInfo:
        return CacheInfo(self._hits, self._misses, self._maxsize, len(self._data))

    def clear(self) -> None:
        """Drop all entries and reset statistics."""
        self._data.clear()
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        return len(self._data)


def hash_content(source: str) -> str:
    """Key raw markup by its sha256 hex digest."""
    return hash_str(source)


def hash_config(config: ParseConfig) -> str:
    """Key the options that change the parsed Document.

    Returns ``""`` (bypass the cache) when a text_transformer is set, since
    arbitrary callables cannot be keyed. ``log_degradations`` only affects
    logging and is left out.
    """
    if config.text_transformer is not None:
        return ""
    parts = (str(config.keep_stray_close_paren), str(config.reset_link_start))
    return hash_str("|".join(parts))


__all__ = [
    "CacheInfo",
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
