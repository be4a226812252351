"""Element handles.

A handle is what an element method returns: a reference to the page plus
the stack depth at which its element was opened. It holds no markup of its
own, so any number of handles can point into the same page.

Rules a handle enforces on top of the page:

- Attributes go only to the innermost open element, before any content.
- Opening a child or appending content first closes whatever the caller
  left open below this element, so output nests the way the calls read:

      >>> from tagloom import Page
      >>> page = Page()
      >>> ol = page.frag("ol")
      >>> _ = ol.li().text("nori")
      >>> _ = ol.li().text("chashu")   # first <li> is closed here
      >>> str(page)
      '<ol><li>nori</li><li>chashu</li></ol>'

- ``close()`` closes the element and everything inside it.
- A handle whose element was closed raises MarkupProtocolError on use.

Handles are also context managers; the element is closed on exit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from tagloom.errors import MarkupProtocolError
from tagloom.page import ElemKind
from tagloom.utils.logger import get_logger

if TYPE_CHECKING:
    from tagloom.elements.registry import ElementRegistry
    from tagloom.elements.spec import ElementSpec
    from tagloom.page import OpenElement, Page

logger = get_logger(__name__)


class Element:
    """Base class of all generated element handles."""

    __slots__ = ("_page", "_depth", "_entry")

    spec: ClassVar[ElementSpec]
    registry: ClassVar[ElementRegistry]

    def __init__(self, page: Page, depth: int) -> None:
        self._page = page
        self._depth = depth
        self._entry: OpenElement | None = page.entry_at(depth)

    @classmethod
    def open_in(cls, page: Page) -> Element:
        """Open this element at the page's current position."""
        kind = cls.spec.kind
        # Void elements have no content, so XML output always self-closes them
        if kind is ElemKind.VOID and page.xml_compatible:
            kind = ElemKind.SELF_CLOSING
        depth = page.open(cls.spec.tag, kind)
        return cls(page, depth)

    @property
    def page(self) -> Page:
        return self._page

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def tag(self) -> str:
        return self.spec.tag

    @property
    def is_open(self) -> bool:
        """True while this handle's element is still open."""
        return self._entry is not None and self._page.entry_at(self._depth) is self._entry

    def close(self) -> Page:
        """Close the element and every element opened inside it.

        Returns:
            The page, for further top-level building
        """
        self._ensure_open()
        self._page.close_to(self._depth)
        return self._page

    def data_attr(self, name: str, value: object) -> Element:
        """Add a custom ``data-*`` attribute."""
        self._attr(f"data-{name}", value)
        return self

    def __enter__(self) -> Element:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.is_open and not self._page.finished:
            self._page.close_to(self._depth)

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"<{type(self).__name__} <{self.spec.tag}> depth={self._depth} {state}>"

    # =========================================================================
    # Used by generated methods
    # =========================================================================

    def _ensure_open(self) -> None:
        if not self.is_open:
            raise MarkupProtocolError("element is already closed", self.spec.tag)

    def _attr(self, name: str, value: object) -> None:
        self._ensure_attr_target(name)
        self._page.set_attr(name, value)

    def _attr_bool(self, name: str) -> None:
        self._ensure_attr_target(name)
        self._page.set_attr_bool(name)

    def _ensure_attr_target(self, name: str) -> None:
        self._ensure_open()
        if self._page.depth != self._depth:
            raise MarkupProtocolError(
                f"cannot add attribute '{name}' while child elements are open",
                self.spec.tag,
            )

    def _prepare_content(self) -> None:
        """Make this element the innermost open one."""
        self._ensure_open()
        if self._page.depth > self._depth:
            logger.debug(
                "Closing %d element(s) left open inside <%s>",
                self._page.depth - self._depth,
                self.spec.tag,
            )
            self._page.close_to(self._depth + 1)

    def _child(self, child: type[Element]) -> Element:
        self._prepare_content()
        return child.open_in(self._page)


class TextContent:
    """Mixin for elements that accept character data."""

    __slots__ = ()

    def text(self, value: object, max_chars: int | None = None) -> Element:
        """Add text content.

        ``&``, ``<`` and ``>`` are replaced with entities.

        Args:
            value: Text (numbers and booleans are converted)
            max_chars: Truncate to this many characters (hard cut)
        """
        self._prepare_content()  # type: ignore[attr-defined]
        self._page.append_text(value, max_chars)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]


class CommentContent:
    """Mixin for elements that accept comments."""

    __slots__ = ()

    def comment(self, value: object) -> Element:
        """Add a comment.

        ``-``, ``<`` and ``>`` are replaced with entities, so the comment
        can never be terminated early.
        """
        self._prepare_content()  # type: ignore[attr-defined]
        self._page.append_comment(value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]


class RawContent:
    """Mixin for elements that accept trusted markup."""

    __slots__ = ()

    def raw(self, trusted: str) -> Element:
        """Add raw content.

        **WARNING**: ``trusted`` is used verbatim, with no escaping; do not
        call with untrusted content.
        """
        self._prepare_content()  # type: ignore[attr-defined]
        self._page.append_raw(trusted)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]


# Method names the factory must not hand out to attributes or children
RESERVED_NAMES = frozenset(
    {
        "close",
        "comment",
        "data_attr",
        "depth",
        "is_open",
        "open_in",
        "page",
        "raw",
        "registry",
        "spec",
        "tag",
        "text",
    }
)


__all__ = ["CommentContent", "Element", "RESERVED_NAMES", "RawContent", "TextContent"]
