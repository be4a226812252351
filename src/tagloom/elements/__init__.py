"""Typed element surface.

Every HTML and SVG element is a generated Element subclass whose methods
are exactly the attributes it may carry and the children it may contain.

    >>> from tagloom import Page
    >>> page = Page(doctype=True)
    >>> html = page.html()
    >>> _ = html.head().title_el().text("Tagloom")
    >>> body = html.body()
    >>> _ = body.h1().class_("banner").text("Hello")
    >>> page.finalize()
    '<!doctype html><html><head><title>Tagloom</title></head><body><h1 class="banner">Hello</h1></body></html>'

Classes are available from the namespace modules (``tagloom.elements.html``
and ``tagloom.elements.svg``) or through the shared registry:

    >>> from tagloom.elements import ELEMENTS, Namespace
    >>> ELEMENTS.get("circle", Namespace.SVG).__name__
    'Circle'
"""

from __future__ import annotations

from tagloom.elements.base import Element
from tagloom.elements.html import HTML_SPECS
from tagloom.elements.registry import ElementRegistry, ElementRegistryBuilder
from tagloom.elements.spec import ElementSpec, Namespace
from tagloom.elements.svg import SVG_SPECS


def create_default_registry() -> ElementRegistry:
    """Create a registry with all HTML and SVG elements."""
    builder = ElementRegistryBuilder()
    builder.register_all(HTML_SPECS)
    builder.register_all(SVG_SPECS)
    return builder.build()


# Shared by Page.frag() and the module-level class lookups
ELEMENTS = create_default_registry()


def __getattr__(name: str) -> type[Element]:
    """Resolve HTML element classes as attributes, e.g. ``elements.Div``."""
    if name.startswith("__"):
        raise AttributeError(name)

    from tagloom.errors import UnknownElementError

    try:
        return ELEMENTS.by_class_name(name, Namespace.HTML)
    except UnknownElementError:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg) from None


__all__ = [
    "ELEMENTS",
    "Element",
    "ElementRegistry",
    "ElementRegistryBuilder",
    "ElementSpec",
    "Namespace",
    "create_default_registry",
]
