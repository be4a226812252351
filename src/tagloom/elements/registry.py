"""Element registry for element class lookup and registration.

The registry maps ``(namespace, tag)`` to the generated Element subclass.
Child methods resolve their target class through it at call time, so
element tables can refer to each other (and across the HTML/SVG boundary)
in any order.

Thread Safety:
ElementRegistry is immutable after creation. Safe to share.
Use ElementRegistryBuilder for mutable construction.

Example:
    >>> builder = ElementRegistryBuilder()
    >>> builder.register_all(HTML_SPECS)
    >>> registry = builder.build()
    >>> Div = registry.get("div")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from tagloom.elements.factory import make_element_class
from tagloom.elements.spec import ElementSpec, Namespace
from tagloom.errors import UnknownElementError
from tagloom.utils.logger import get_logger

if TYPE_CHECKING:
    from tagloom.elements.base import Element

logger = get_logger(__name__)

_LOOKUP_ORDER = (Namespace.HTML, Namespace.SVG)


class ElementRegistry:
    """Immutable registry of element classes.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_by_key", "_by_class_name")

    def __init__(
        self,
        by_key: dict[tuple[Namespace, str], type[Element]],
        by_class_name: dict[tuple[Namespace, str], type[Element]],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use ElementRegistryBuilder to create instances.
        """
        self._by_key = by_key
        self._by_class_name = by_class_name

    def get(self, tag: str, namespace: Namespace = Namespace.HTML) -> type[Element]:
        """Get the element class for a tag.

        Raises:
            UnknownElementError: If the tag is not registered in the namespace
        """
        try:
            return self._by_key[(namespace, tag)]
        except KeyError:
            raise UnknownElementError(tag, namespace.value) from None

    def by_class_name(self, name: str, namespace: Namespace = Namespace.HTML) -> type[Element]:
        """Get an element class by its class name (e.g. ``"Div"``).

        Raises:
            UnknownElementError: If no class of that name is registered
        """
        try:
            return self._by_class_name[(namespace, name)]
        except KeyError:
            raise UnknownElementError(name, namespace.value) from None

    def lookup(self, name: str) -> type[Element]:
        """Find an element class by tag or class name, HTML before SVG.

        Raises:
            UnknownElementError: If nothing matches
        """
        for namespace in _LOOKUP_ORDER:
            cls = self._by_key.get((namespace, name))
            if cls is not None:
                return cls
        for namespace in _LOOKUP_ORDER:
            cls = self._by_class_name.get((namespace, name))
            if cls is not None:
                return cls
        raise UnknownElementError(name)

    def has(self, tag: str, namespace: Namespace = Namespace.HTML) -> bool:
        """Check if a tag is registered in a namespace."""
        return (namespace, tag) in self._by_key

    def tags(self, namespace: Namespace = Namespace.HTML) -> frozenset[str]:
        """Get all registered tags of a namespace."""
        return frozenset(tag for ns, tag in self._by_key if ns is namespace)

    def __contains__(self, tag: str) -> bool:
        """Support 'tag in registry' syntax (any namespace)."""
        return any((ns, tag) in self._by_key for ns in _LOOKUP_ORDER)

    def __iter__(self) -> Iterator[type[Element]]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        """Number of registered element types."""
        return len(self._by_key)


class ElementRegistryBuilder:
    """Mutable builder for ElementRegistry.

    Register specs, then call build() to generate the classes and create an
    immutable registry.
    """

    __slots__ = ("_specs",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._specs: dict[tuple[Namespace, str], ElementSpec] = {}

    def register(self, spec: ElementSpec) -> ElementRegistryBuilder:
        """Register an element spec.

        Returns:
            Self for chaining

        Raises:
            ValueError: If the tag is already registered in its namespace
        """
        if spec.key in self._specs:
            msg = f"Element <{spec.tag}> already registered in {spec.namespace.value} namespace"
            raise ValueError(msg)
        self._specs[spec.key] = spec
        return self

    def register_all(self, specs: Iterable[ElementSpec]) -> ElementRegistryBuilder:
        """Register several specs."""
        for spec in specs:
            self.register(spec)
        return self

    def build(self) -> ElementRegistry:
        """Generate element classes and build the registry.

        Raises:
            ValueError: If a spec names a child element that is not registered
        """
        for spec in self._specs.values():
            for ref in spec.content.children:
                if ref not in self._specs:
                    msg = (
                        f"<{spec.tag}> allows child <{ref[1]}> "
                        f"which is not registered in {ref[0].value} namespace"
                    )
                    raise ValueError(msg)

        by_key: dict[tuple[Namespace, str], type[Element]] = {}
        by_class_name: dict[tuple[Namespace, str], type[Element]] = {}
        for key, spec in self._specs.items():
            cls = make_element_class(spec)
            by_key[key] = cls
            by_class_name[(spec.namespace, spec.class_name)] = cls

        registry = ElementRegistry(by_key=by_key, by_class_name=by_class_name)
        for cls in by_key.values():
            cls.registry = registry
        logger.debug("Built %d element classes", len(by_key))
        return registry


__all__ = ["ElementRegistry", "ElementRegistryBuilder"]
