"""The document page: one output buffer, one open-element stack.

Page is the state machine every element method funnels into. It writes
markup straight into a StringBuilder as calls arrive; there is no tree.

State:
    - ``_doc``: the serialized output so far
    - ``_stack``: the elements currently open, innermost last
    - ``_empty``: True while the innermost element has had nothing appended
      since its opening tag was written. Attributes keep it True (they
      belong to the tag, not the content); text, comments, raw markup and
      closed children clear it.

Attributes are spliced into the most recent opening tag: its trailing ``>``
is taken off the buffer, `` name="value">`` goes on in its place. That is
only legal while ``_empty`` is True and the buffer really ends in ``>``;
anything else is a MarkupProtocolError raised at the offending call.

Closing follows the element's kind:

| Kind           | Output on close                                      |
|----------------|------------------------------------------------------|
| NORMAL         | ``</tag>``                                           |
| VOID           | nothing                                              |
| SELF_CLOSING   | `` />`` replacing ``>`` when empty and XML-compatible, else ``</tag>`` |

Example:
    >>> page = Page()
    >>> page.open("div")
    1
    >>> page.open("p")
    2
    >>> page.append_text("A & B")
    >>> page.finalize()
    '<div><p>A &amp; B</p></div>'

Thread Safety:
    A Page has exactly one writer. Share finished strings, not pages.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from tagloom.config import PageConfig, get_page_config
from tagloom.errors import MarkupProtocolError, PageFinishedError
from tagloom.escape import escape_attr, escape_comment, escape_text
from tagloom.stringbuilder import StringBuilder
from tagloom.utils.logger import get_logger
from tagloom.value import to_value

if TYPE_CHECKING:
    from tagloom.elements.base import Element

logger = get_logger(__name__)


class ElemKind(Enum):
    """How an element is closed."""

    NORMAL = "normal"
    """Always closed with an explicit ``</tag>``."""

    VOID = "void"
    """Never has children or a closing tag (e.g. ``<br>``)."""

    SELF_CLOSING = "self_closing"
    """Rendered ``<tag />`` when empty in XML-compatible mode."""


@dataclass(frozen=True, slots=True, eq=False)
class OpenElement:
    """An entry on the open-element stack.

    Compared by identity: two ``<li>`` opened one after the other are
    different entries, which lets element handles tell whether the element
    they refer to is still the one at their depth.
    """

    tag: str
    kind: ElemKind


class Page:
    """Incremental markup builder.

    Args:
        doctype: Write the preamble first (overrides config)
        xml_compatible: Self-close empty SELF_CLOSING elements (overrides config)
        config: Base configuration (default: the ambient PageConfig)

    Usage:
        >>> page = Page(doctype=True)
        >>> html = page.html()
        >>> _ = html.lang("en").body().p().text("Hello")
        >>> str(page)
        '<!doctype html><html lang="en"><body><p>Hello</p></body></html>'
    """

    __slots__ = ("_config", "_doc", "_stack", "_empty", "_finished")

    def __init__(
        self,
        *,
        doctype: bool | None = None,
        xml_compatible: bool | None = None,
        config: PageConfig | None = None,
    ) -> None:
        base = config if config is not None else get_page_config()
        overrides: dict[str, bool] = {}
        if doctype is not None:
            overrides["doctype"] = doctype
        if xml_compatible is not None:
            overrides["xml_compatible"] = xml_compatible
        self._config = replace(base, **overrides) if overrides else base

        self._doc = StringBuilder()
        self._stack: list[OpenElement] = []
        self._empty = False
        self._finished = False

        if self._config.doctype:
            self._doc.append(self._config.preamble)

    # =========================================================================
    # State
    # =========================================================================

    @property
    def config(self) -> PageConfig:
        """The effective configuration of this page."""
        return self._config

    @property
    def xml_compatible(self) -> bool:
        return self._config.xml_compatible

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._stack)

    @property
    def finished(self) -> bool:
        """True once finalize() has returned the markup."""
        return self._finished

    def entry_at(self, depth: int) -> OpenElement | None:
        """Get the open element at a 1-based stack depth, if any."""
        if 1 <= depth <= len(self._stack):
            return self._stack[depth - 1]
        return None

    # =========================================================================
    # Elements
    # =========================================================================

    def open(self, tag: str, kind: ElemKind = ElemKind.NORMAL) -> int:
        """Write an opening tag and push it on the stack.

        ``tag`` is written verbatim; tag names come from the element tables,
        not from user data.

        Returns:
            The new stack depth, which is this element's depth
        """
        self._check_live()
        self._doc.extend(["<", tag, ">"])
        self._stack.append(OpenElement(tag, kind))
        self._empty = True
        return len(self._stack)

    def set_attr(self, name: str, value: object) -> None:
        """Add ``name="value"`` to the most recent opening tag.

        ``&`` and ``"`` in the value are replaced with entities.

        Raises:
            MarkupProtocolError: If content was appended after the tag
        """
        self._check_live()
        self._reopen_tag(name)
        self._doc.extend([" ", name, '="', escape_attr(to_value(value)), '">'])

    def set_attr_bool(self, name: str) -> None:
        """Add a Boolean attribute (present = true) to the most recent tag.

        Raises:
            MarkupProtocolError: If content was appended after the tag
        """
        self._check_live()
        self._reopen_tag(name)
        self._doc.extend([" ", name, ">"])

    def close_one(self) -> None:
        """Close the innermost open element.

        Raises:
            MarkupProtocolError: If no element is open
        """
        self._check_live()
        if not self._stack:
            raise MarkupProtocolError("no open element to close")
        elem = self._stack.pop()
        if elem.kind is ElemKind.VOID:
            pass
        elif self._self_closes(elem, self._empty) and self._doc.endswith(">"):
            self._doc.pop()
            self._doc.append(" />")
        else:
            self._doc.extend(["</", elem.tag, ">"])
        # A closed child is content of its parent
        self._empty = False

    def close_to(self, depth: int) -> None:
        """Close every open element at ``depth`` or deeper.

        ``close_to(1)`` closes everything; a depth past the top of the stack
        closes nothing.

        Raises:
            ValueError: If depth is less than 1
        """
        if depth < 1:
            msg = f"depth must be at least 1, got {depth}"
            raise ValueError(msg)
        self._check_live()
        while len(self._stack) >= depth:
            self.close_one()

    # =========================================================================
    # Content
    # =========================================================================

    def append_text(self, value: object, max_chars: int | None = None) -> None:
        """Append character data, escaping ``&``, ``<`` and ``>``.

        Args:
            value: Text content
            max_chars: Keep at most this many characters (hard cut, no
                ellipsis)
        """
        self._check_live()
        text = to_value(value)
        if max_chars is not None:
            if max_chars < 0:
                msg = f"max_chars must not be negative, got {max_chars}"
                raise ValueError(msg)
            text = text[:max_chars]
        self._doc.append(escape_text(text))
        self._empty = False

    def append_comment(self, value: object) -> None:
        """Append ``<!--value-->`` with ``-``, ``<`` and ``>`` escaped."""
        self._check_live()
        self._doc.extend(["<!--", escape_comment(to_value(value)), "-->"])
        self._empty = False

    def append_raw(self, trusted: str) -> None:
        """Append markup verbatim.

        **WARNING**: ``trusted`` is not escaped; never pass untrusted input.
        """
        self._check_live()
        self._doc.append(trusted)
        self._empty = False

    # =========================================================================
    # Output
    # =========================================================================

    def finalize(self) -> str:
        """Close all open elements and return the finished markup.

        The page cannot be modified afterwards.

        Raises:
            PageFinishedError: If the page was already finalized
        """
        self._check_live()
        if self._stack:
            logger.debug(
                "Finalizing with %d open element(s): %s",
                len(self._stack),
                " > ".join(e.tag for e in self._stack),
            )
            self.close_to(1)
        self._finished = True
        return self._doc.build()

    def render(self) -> str:
        """Return the markup as it would be finalized, without finalizing.

        The page is left untouched; building can continue afterwards.
        """
        out = self._doc.build()
        empty = self._empty
        closing: list[str] = []
        for elem in reversed(self._stack):
            if elem.kind is ElemKind.VOID:
                pass
            elif self._self_closes(elem, empty) and out.endswith(">"):
                out = out[:-1]
                closing.append(" />")
            else:
                closing.append(f"</{elem.tag}>")
            empty = False
        return out + "".join(closing)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"<Page depth={len(self._stack)} "
            f"xml_compatible={self._config.xml_compatible} finished={self._finished}>"
        )

    # =========================================================================
    # Element handles
    # =========================================================================

    def html(self) -> Element:
        """Open the ``<html>`` document root.

        Anything still open at the top level is closed first.
        """
        return self.frag("html")

    def frag(self, element: type[Element] | str) -> Element:
        """Open an element as a top-level fragment.

        Args:
            element: Element class, or tag / class name looked up in the
                default registry (HTML first, then SVG)

        Returns:
            The handle of the opened element

        Example:
            >>> page = Page()
            >>> _ = page.frag("a").href("https://example.com/").text("Example")
            >>> str(page)
            '<a href="https://example.com/">Example</a>'
        """
        if isinstance(element, str):
            from tagloom.elements import ELEMENTS

            element = ELEMENTS.lookup(element)
        self._check_live()
        self.close_to(1)
        return element.open_in(self)

    # =========================================================================
    # Internals
    # =========================================================================

    def _check_live(self) -> None:
        if self._finished:
            raise PageFinishedError()

    def _reopen_tag(self, name: str) -> None:
        """Take the ``>`` off the most recent opening tag."""
        if not self._stack:
            raise MarkupProtocolError(f"no open tag to receive attribute '{name}'")
        if not self._empty or not self._doc.endswith(">"):
            raise MarkupProtocolError(
                f"cannot add attribute '{name}' after content", self._stack[-1].tag
            )
        self._doc.pop()

    def _self_closes(self, elem: OpenElement, empty: bool) -> bool:
        return empty and elem.kind is ElemKind.SELF_CLOSING and self._config.xml_compatible


__all__ = ["ElemKind", "OpenElement", "Page"]
