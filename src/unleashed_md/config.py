"""ContextVar-based parse configuration for unleashed-md.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markup instance, read by the parser in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # In Markup class
    md = Markup(keep_stray_close_paren=True)
    doc = md.parse("a) b")  # Sets config internally via ContextVar

    # Direct parser usage (advanced)
    from unleashed_md.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(keep_stray_close_paren=True))
    try:
        doc = Parser(tokens).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(log_degradations=False)):
        doc = Parser(tokens).parse()

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from unleashed_md.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        keep_stray_close_paren: Render a ``)`` met outside a link target as
            a literal ``)`` segment instead of dropping it
        text_transformer: Optional callback applied to every visible text
            segment (link targets are left untouched)
        reset_link_start: Forget a link's start index once its ``)`` closes
            it, so the next ``[`` starts a fresh span. Off by default: the
            first ``[`` of the input anchors every later link span
        log_degradations: Emit DEBUG records when markup degrades (unclosed
            markers, dropped ``)``)

    """

    keep_stray_close_paren: bool = False
    reset_link_start: bool = False
    text_transformer: Callable[[str], str] | None = None
    log_degradations: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Useful when config comes from external sources (settings files,
        application preferences). Unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Raises:
            ConfigError: If a flag is not a bool or text_transformer is not
                callable.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "keep_stray_close_paren": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.keep_stray_close_paren
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        for name in ("keep_stray_close_paren", "reset_link_start", "log_degradations"):
            if name in filtered and not isinstance(filtered[name], bool):
                raise ConfigError(name, f"expected bool, got {type(filtered[name]).__name__}")
        transformer = filtered.get("text_transformer")
        if transformer is not None and not callable(transformer):
            raise ConfigError("text_transformer", "expected a callable or None")

        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

# Thread-local configuration via ContextVar
_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(keep_stray_close_paren=True)):
        ...     doc = parse(tokenize("a) b"))
        >>> doc.text
        ('a', ')', ' b')

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
