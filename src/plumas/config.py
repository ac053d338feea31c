"""ContextVar-based parse configuration for Plumas.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per parse call, read by every parser mixin in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Through the public API
    result = parse("| a | b |", config=ParseConfig(tables_enabled=False))

    # Direct parser usage (advanced)
    from plumas.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(group_lists=True))
    try:
        result = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(group_lists=True)):
        result = Parser(source).parse()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).
    A disabled construct degrades to the next interpretation in the
    segmenter's priority order, ultimately plain text.

    Attributes:
        tables_enabled: Parse pipe tables
        strikethrough_enabled: Parse ~~strikethrough~~
        task_lists_enabled: Parse - [ ] task list items
        footnotes_enabled: Parse [^id] references and [^id]: definitions
        definition_lists_enabled: Parse term / : details groups
        group_lists: Wrap consecutive list items into List containers
        blank_line_breaks: Emit a LineBreak marker for blank-line separators
        max_nesting_depth: Inline recursion limit; deeper spans become text

    """

    tables_enabled: bool = True
    strikethrough_enabled: bool = True
    task_lists_enabled: bool = True
    footnotes_enabled: bool = True
    definition_lists_enabled: bool = True
    group_lists: bool = False
    blank_line_breaks: bool = False
    max_nesting_depth: int = 32

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Useful for integration where config comes from external sources
        (YAML files, CLI flags, application settings).

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "tables_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tables_enabled
            False

        """
        # Get valid field names from dataclass
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        # Filter to only valid fields
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
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

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

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

    Useful for tests and isolated parsing operations.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(tables_enabled=False)):
        ...     result = Parser("| a | b |\\n|---|---|").parse()
        >>> # Automatically reset to previous config

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
