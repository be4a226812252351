"""ContextVar-based page configuration for Tagloom.

A Page reads its output options once, at construction. Callers either pass
them explicitly or rely on the ambient config held in a ContextVar, which
lets an application (or a test) switch every page it creates to
XML-compatible output without threading a flag through its code.

Usage:
    # Explicit
    page = Page(doctype=True, xml_compatible=True)

    # Ambient, for a block of code
    with page_config_context(PageConfig(xml_compatible=True)):
        page = Page()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_PREAMBLE = "<!doctype html>"


@dataclass(frozen=True, slots=True)
class PageConfig:
    """Immutable page output configuration.

    Attributes:
        doctype: Write the preamble before any element is opened
        xml_compatible: Render empty self-closing-capable elements as ``<tag />``
        preamble: Literal text written when ``doctype`` is set (not escaped)

    """

    doctype: bool = False
    xml_compatible: bool = False
    preamble: str = DEFAULT_PREAMBLE

    @classmethod
    def from_dict(cls, config_dict: dict) -> "PageConfig":
        """Create PageConfig from dictionary.

        Only includes keys that are valid PageConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                PageConfig attribute names.

        Returns:
            New PageConfig instance with values from dict.

        Example:
            >>> config = PageConfig.from_dict({
            ...     "xml_compatible": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.xml_compatible
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: PageConfig = PageConfig()

_page_config: ContextVar[PageConfig] = ContextVar(
    "page_config",
    default=_DEFAULT_CONFIG,
)


def get_page_config() -> PageConfig:
    """Get the ambient page configuration for this context."""
    return _page_config.get()


def set_page_config(config: PageConfig) -> None:
    """Set the ambient page configuration for the current context.

    Args:
        config: PageConfig used by pages created without an explicit config.

    """
    _page_config.set(config)


def reset_page_config() -> None:
    """Reset to the default configuration."""
    _page_config.set(_DEFAULT_CONFIG)


@contextmanager
def page_config_context(config: PageConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: PageConfig to use within the context.

    Yields:
        None

    Example:
        >>> with page_config_context(PageConfig(xml_compatible=True)):
        ...     page = Page()
        >>> # Previous config restored here

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _page_config.get()
    _page_config.set(config)
    try:
        yield
    finally:
        _page_config.set(previous)


__all__ = [
    "DEFAULT_PREAMBLE",
    "PageConfig",
    "get_page_config",
    "set_page_config",
    "reset_page_config",
    "page_config_context",
]
