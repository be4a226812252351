"""Element descriptors: the data the typed element surface is built from.

Each markup element is described once, as an ElementSpec: its tag, how it
closes, which attributes it carries and what it may contain. The factory
turns every spec into an Element subclass whose methods are exactly the
allowed attributes and children, so a disallowed child is an
AttributeError at the call site rather than a runtime validation pass.

Content models compose with ``+`` and shrink with ``without()``:

    >>> a_content = PHRASING.without("a")                  # transparent content of <a>
    >>> details_content = FLOW + html_children("summary")  # <details>
"""

from __future__ import annotations

import keyword
import re
from dataclasses import dataclass, field
from enum import Enum

from tagloom.page import ElemKind


class Namespace(Enum):
    """Markup vocabulary an element belongs to."""

    HTML = "html"
    SVG = "svg"


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def python_name(name: str) -> str:
    """Turn a markup name into a method name.

    Examples:
        >>> python_name("viewBox")
        'view_box'
        >>> python_name("accept-charset")
        'accept_charset'
        >>> python_name("class")
        'class_'
    """
    method = _CAMEL_BOUNDARY.sub("_", name).replace("-", "_").replace(":", "_").lower()
    if keyword.iskeyword(method):
        method += "_"
    return method


@dataclass(frozen=True, slots=True)
class AttrSpec:
    """An attribute an element may carry.

    Attributes:
        name: Attribute name as written in markup
        method: Python method name
        boolean: Presence-only attribute (method takes no value)
    """

    name: str
    method: str
    boolean: bool = False


def attr(name: str, *, boolean: bool = False, method: str | None = None) -> AttrSpec:
    """Describe a value attribute (or Boolean, with ``boolean=True``)."""
    return AttrSpec(name=name, method=method or python_name(name), boolean=boolean)


def attrs(*names: str) -> tuple[AttrSpec, ...]:
    """Describe several value attributes at once."""
    return tuple(attr(n) for n in names)


def flags(*names: str) -> tuple[AttrSpec, ...]:
    """Describe several Boolean attributes at once."""
    return tuple(attr(n, boolean=True) for n in names)


ChildRef = tuple[Namespace, str]


@dataclass(frozen=True, slots=True)
class ContentModel:
    """What an element may contain.

    Attributes:
        children: Allowed child elements, in method order
        text: Escaped character data (``text()``)
        comment: Comments (``comment()``)
        raw: Trusted markup (``raw()``)
    """

    children: tuple[ChildRef, ...] = ()
    text: bool = False
    comment: bool = False
    raw: bool = False

    def __add__(self, other: ContentModel) -> ContentModel:
        seen = set(self.children)
        merged = list(self.children)
        for ref in other.children:
            if ref not in seen:
                seen.add(ref)
                merged.append(ref)
        return ContentModel(
            children=tuple(merged),
            text=self.text or other.text,
            comment=self.comment or other.comment,
            raw=self.raw or other.raw,
        )

    def without(self, *tags: str) -> ContentModel:
        """Copy of this model minus the named child tags (any namespace)."""
        drop = set(tags)
        return ContentModel(
            children=tuple(ref for ref in self.children if ref[1] not in drop),
            text=self.text,
            comment=self.comment,
            raw=self.raw,
        )


def html_children(*tags: str) -> ContentModel:
    return ContentModel(children=tuple((Namespace.HTML, t) for t in tags))


def svg_children(*tags: str) -> ContentModel:
    return ContentModel(children=tuple((Namespace.SVG, t) for t in tags))


NO_CONTENT = ContentModel()
COMMENTS = ContentModel(comment=True, raw=True)
TEXT = ContentModel(text=True, comment=True, raw=True)


@dataclass(frozen=True, slots=True)
class ElementSpec:
    """Descriptor of one element type.

    Attributes:
        tag: Tag name as written in markup
        class_name: Name of the generated Element subclass
        description: Human-readable name, used in docstrings
        namespace: HTML or SVG
        kind: How the element closes
        attrs: Allowed attributes (global ones included)
        content: Allowed content
    """

    tag: str
    class_name: str
    description: str
    namespace: Namespace = Namespace.HTML
    kind: ElemKind = ElemKind.NORMAL
    attrs: tuple[AttrSpec, ...] = ()
    content: ContentModel = field(default=NO_CONTENT)

    @property
    def key(self) -> ChildRef:
        return (self.namespace, self.tag)


__all__ = [
    "COMMENTS",
    "NO_CONTENT",
    "TEXT",
    "AttrSpec",
    "ChildRef",
    "ContentModel",
    "ElementSpec",
    "Namespace",
    "attr",
    "attrs",
    "flags",
    "html_children",
    "python_name",
    "svg_children",
]
