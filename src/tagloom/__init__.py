"""
Tagloom — Streaming HTML and SVG builder

Markup is written straight into one buffer as elements are opened, given
attributes and filled with content. Each element type is a class whose
methods are exactly its allowed attributes and children, so invalid
nesting fails at the call site, and every piece of text is escaped for the
context it lands in.

Quick Start:
    >>> from tagloom import Page
    >>> page = Page()
    >>> div = page.frag("div")
    >>> _ = div.id("greeting").p().text("Fish & chips")
    >>> page.finalize()
    '<div id="greeting"><p>Fish &amp; chips</p></div>'

XML-compatible output:
    >>> page = Page(xml_compatible=True)
    >>> _ = page.frag("svg").circle().r(5)
    >>> str(page)
    '<svg><circle r="5" /></svg>'

Low-level building, without the typed surface:
    >>> page = Page()
    >>> page.open("custom-element")
    1
    >>> page.set_attr("mode", "dark")
    >>> page.finalize()
    '<custom-element mode="dark"></custom-element>'
"""

from tagloom.config import (
    DEFAULT_PREAMBLE,
    PageConfig,
    get_page_config,
    page_config_context,
    reset_page_config,
    set_page_config,
)
from tagloom.elements import ELEMENTS, Element, Namespace, create_default_registry
from tagloom.errors import (
    MarkupProtocolError,
    PageFinishedError,
    TagloomError,
    UnknownElementError,
)
from tagloom.escape import escape_attr, escape_comment, escape_text
from tagloom.geometry import PathDef, Points
from tagloom.page import ElemKind, OpenElement, Page
from tagloom.value import to_value

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 (grouped by category)
    "__version__",
    # Page
    "ElemKind",
    "OpenElement",
    "Page",
    # Elements
    "ELEMENTS",
    "Element",
    "Namespace",
    "create_default_registry",
    # Geometry
    "PathDef",
    "Points",
    # Configuration
    "DEFAULT_PREAMBLE",
    "PageConfig",
    "get_page_config",
    "page_config_context",
    "reset_page_config",
    "set_page_config",
    # Errors
    "MarkupProtocolError",
    "PageFinishedError",
    "TagloomError",
    "UnknownElementError",
    # Escaping
    "escape_attr",
    "escape_comment",
    "escape_text",
    "to_value",
]
