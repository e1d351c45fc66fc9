"""ContextVar-based parse configuration for Mustachio.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer created without an explicit delimiter pair reads the initial pair
from the active config.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from mustachio.config import ParseConfig, parse_config_context
    from mustachio.delimiters import TagDelimiterPair

    with parse_config_context(ParseConfig(tag_delimiter_pair=TagDelimiterPair("<%", "%>"))):
        tokens = tokenize("<% name %>")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from mustachio.delimiters import DEFAULT_TAG_DELIMITER_PAIR, TagDelimiterPair


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: template_id is intentionally excluded. It is per-call state,
    not configuration, and stays on the Lexer instance.

    Attributes:
        tag_delimiter_pair: Delimiters active at the start of every template

    """

    tag_delimiter_pair: TagDelimiterPair = DEFAULT_TAG_DELIMITER_PAIR

    @classmethod
    def from_dict(cls, config_dict: dict) -> ParseConfig:
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored. A two-item list or tuple is accepted for
        ``tag_delimiter_pair``.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "tag_delimiter_pair": ["<%", "%>"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tag_delimiter_pair
            TagDelimiterPair(opening='<%', closing='%>')

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "tag_delimiter_pair" in filtered:
            filtered["tag_delimiter_pair"] = TagDelimiterPair(*filtered["tag_delimiter_pair"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(tag_delimiter_pair=("[[", "]]"))):
        ...     tokens = tokenize("[[name]]")
        >>> # Automatically reset to previous config

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
