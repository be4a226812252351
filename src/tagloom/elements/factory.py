"""Build Element subclasses from ElementSpecs.

Every generated class gets real methods (visible to ``dir()``, ``help()``
and ``hasattr``), one per allowed attribute and child:

    >>> Div = make_element_class(div_spec)
    >>> Div.id.__doc__
    'Add `id` attribute to `<div>`.'

Naming rules for child methods, applied in order:

1. ``title``, ``style`` and ``slot`` elements are always ``title_el``,
   ``style_el`` and ``slot_el`` (those names are global attributes).
2. A child whose name is taken by an attribute or a base method gets the
   ``_el`` suffix too (``<blockquote>``'s ``cite`` attribute vs ``<cite>``
   child; SVG ``<text>`` vs ``text()``).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tagloom.elements.base import (
    RESERVED_NAMES,
    CommentContent,
    Element,
    RawContent,
    TextContent,
)
from tagloom.elements.spec import AttrSpec, ChildRef, ElementSpec, Namespace, python_name
from tagloom.page import ElemKind

_ALWAYS_SUFFIXED = frozenset({"title", "style", "slot"})


def child_method_name(tag: str, taken: set[str] | frozenset[str]) -> str:
    """Method name for opening a ``tag`` child, given the names in use."""
    name = python_name(tag)
    if name in _ALWAYS_SUFFIXED or name in taken or name in RESERVED_NAMES:
        name += "_el"
    return name


def _value_attr(spec: ElementSpec, a: AttrSpec) -> Callable[..., Any]:
    name = a.name

    def method(self: Element, value: object) -> Element:
        self._attr(name, value)
        return self

    method.__doc__ = f"Add `{name}` attribute to `<{spec.tag}>`."
    return method


def _bool_attr(spec: ElementSpec, a: AttrSpec) -> Callable[..., Any]:
    name = a.name

    def method(self: Element) -> Element:
        self._attr_bool(name)
        return self

    method.__doc__ = f"Add `{name}` Boolean attribute to `<{spec.tag}>`."
    return method


def _child(spec: ElementSpec, ref: ChildRef) -> Callable[..., Any]:
    namespace, tag = ref

    def method(self: Element) -> Element:
        return self._child(self.registry.get(tag, namespace))

    where = "" if namespace is spec.namespace else f" ({namespace.value.upper()})"
    method.__doc__ = f"Add `<{tag}>`{where} child element to `<{spec.tag}>`."
    return method


def make_element_class(spec: ElementSpec) -> type[Element]:
    """Create the Element subclass for one spec.

    Raises:
        ValueError: If two attributes map to the same method name, or an
            attribute takes a reserved method name
    """
    namespace: dict[str, Any] = {
        "__slots__": (),
        "__doc__": _class_doc(spec),
        "__module__": f"tagloom.elements.{spec.namespace.value}",
        "spec": spec,
    }

    for a in spec.attrs:
        if a.method in RESERVED_NAMES:
            msg = f"<{spec.tag}>: attribute '{a.name}' uses reserved method name '{a.method}'"
            raise ValueError(msg)
        if a.method in namespace:
            msg = f"<{spec.tag}>: duplicate attribute method '{a.method}'"
            raise ValueError(msg)
        make = _bool_attr if a.boolean else _value_attr
        namespace[a.method] = _named(make(spec, a), a.method, spec)

    taken = {a.method for a in spec.attrs}
    for ref in spec.content.children:
        name = child_method_name(ref[1], taken)
        namespace[name] = _named(_child(spec, ref), name, spec)
        taken.add(name)

    bases: list[type] = [Element]
    if spec.content.text:
        bases.append(TextContent)
    if spec.content.comment:
        bases.append(CommentContent)
    if spec.content.raw:
        bases.append(RawContent)

    return type(spec.class_name, tuple(bases), namespace)


def _named(func: Callable[..., Any], name: str, spec: ElementSpec) -> Callable[..., Any]:
    func.__name__ = name
    func.__qualname__ = f"{spec.class_name}.{name}"
    return func


def _class_doc(spec: ElementSpec) -> str:
    lang = "SVG " if spec.namespace is Namespace.SVG else ""
    kind = f" ({spec.kind.value})" if spec.kind is not ElemKind.NORMAL else ""
    return f"`<{spec.tag}>`: {spec.description} {lang}element{kind}."


__all__ = ["child_method_name", "make_element_class"]
