"""SVG element table.

SVG elements close with ``/>`` when they end up empty (in XML-compatible
pages) and with an end tag otherwise. ``<foreignObject>`` accepts HTML flow
content; HTML flow content in turn accepts ``<svg>``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagloom.elements.html import FLOW
from tagloom.elements.spec import (
    COMMENTS,
    NO_CONTENT,
    TEXT,
    AttrSpec,
    ContentModel,
    ElementSpec,
    Namespace,
    attrs,
    flags,
    svg_children,
)
from tagloom.page import ElemKind

if TYPE_CHECKING:
    from tagloom.elements.base import Element

GLOBAL_ATTRS: tuple[AttrSpec, ...] = (
    *attrs("id", "class", "style"),
    *flags("autofocus"),
    *attrs("lang", "tabindex", "transform"),
)

PRESENTATION_ATTRS = attrs(
    "clip-path",
    "clip-rule",
    "color",
    "cursor",
    "display",
    "fill",
    "fill-opacity",
    "fill-rule",
    "filter",
    "marker-end",
    "marker-mid",
    "marker-start",
    "mask",
    "opacity",
    "pointer-events",
    "shape-rendering",
    "stroke",
    "stroke-dasharray",
    "stroke-dashoffset",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-miterlimit",
    "stroke-opacity",
    "stroke-width",
    "vector-effect",
    "visibility",
)

FONT_ATTRS = attrs(
    "dominant-baseline",
    "font-family",
    "font-size",
    "font-style",
    "font-weight",
    "letter-spacing",
    "text-anchor",
    "text-decoration",
    "word-spacing",
)

_BOX = attrs("x", "y", "width", "height")

_TIMING = attrs(
    "attributeName",
    "begin",
    "dur",
    "end",
    "min",
    "max",
    "restart",
    "repeatCount",
    "repeatDur",
    "fill",
)

_VALUES = attrs(
    "calcMode",
    "values",
    "keyTimes",
    "keySplines",
    "from",
    "to",
    "by",
    "additive",
    "accumulate",
)

_FILTER_PRIMITIVE = (*_BOX, *attrs("result"))

# =========================================================================
# Content groups
# =========================================================================

DESCRIPTIVE = svg_children("desc", "metadata", "title")

ANIMATION = svg_children("animate", "animateMotion", "animateTransform", "set")

SHAPES = svg_children("circle", "ellipse", "line", "path", "polygon", "polyline", "rect")

GRADIENTS = svg_children("linearGradient", "radialGradient")

CONTAINER = (
    DESCRIPTIVE
    + ANIMATION
    + svg_children("a", "clipPath", "defs", "filter", "foreignObject", "g", "image")
    + GRADIENTS
    + svg_children("marker", "mask", "pattern")
    + SHAPES
    + svg_children("script", "style", "svg", "switch", "symbol", "text", "use", "view")
    + COMMENTS
)

GRAPHIC = DESCRIPTIVE + ANIMATION + COMMENTS

TEXT_CONTENT = TEXT + svg_children("a", "textPath", "tspan") + DESCRIPTIVE + ANIMATION

FILTER_PRIMITIVES = svg_children(
    "feBlend", "feColorMatrix", "feFlood", "feGaussianBlur", "feMerge", "feOffset"
)

PRIMITIVE_CONTENT = svg_children("animate", "set") + COMMENTS


def _el(
    tag: str,
    class_name: str,
    description: str,
    content: ContentModel = NO_CONTENT,
    *specific: tuple[AttrSpec, ...],
) -> ElementSpec:
    own = [a for group in specific for a in group]
    names = {a.method for a in own}
    merged = (*own, *(a for a in GLOBAL_ATTRS if a.method not in names))
    return ElementSpec(
        tag=tag,
        class_name=class_name,
        description=description,
        namespace=Namespace.SVG,
        kind=ElemKind.SELF_CLOSING,
        attrs=merged,
        content=content,
    )


SVG_SPECS: tuple[ElementSpec, ...] = (
    # Structure
    _el(
        "svg", "Svg", "SVG Document Fragment", CONTAINER,
        _BOX, attrs("viewBox", "preserveAspectRatio", "version", "xmlns"),
        PRESENTATION_ATTRS,
    ),
    _el("g", "G", "Group", CONTAINER, PRESENTATION_ATTRS),
    _el("defs", "Defs", "Definitions", CONTAINER),
    _el(
        "symbol", "Symbol", "Symbol", CONTAINER,
        _BOX, attrs("viewBox", "preserveAspectRatio", "refX", "refY"),
        PRESENTATION_ATTRS,
    ),
    _el("use", "Use", "Use", GRAPHIC, attrs("href"), _BOX, PRESENTATION_ATTRS),
    _el(
        "a", "A", "Anchor", CONTAINER,
        attrs("href", "target", "download", "hreflang", "ping", "referrerpolicy", "rel", "type"),
        PRESENTATION_ATTRS,
    ),
    _el("switch", "Switch", "Switch", CONTAINER, PRESENTATION_ATTRS),
    _el(
        "marker", "Marker", "Marker", CONTAINER,
        attrs(
            "markerHeight", "markerUnits", "markerWidth", "orient",
            "preserveAspectRatio", "refX", "refY", "viewBox",
        ),
        PRESENTATION_ATTRS,
    ),
    _el(
        "mask", "Mask", "Mask", CONTAINER,
        _BOX, attrs("maskContentUnits", "maskUnits"),
    ),
    _el(
        "pattern", "Pattern", "Pattern", CONTAINER,
        _BOX,
        attrs(
            "href", "patternContentUnits", "patternTransform", "patternUnits",
            "preserveAspectRatio", "viewBox",
        ),
    ),
    _el(
        "clipPath", "ClipPath", "Clipping Path",
        SHAPES + svg_children("text", "use") + GRAPHIC,
        attrs("clipPathUnits"),
    ),
    # Shapes
    _el("circle", "Circle", "Circle", GRAPHIC, attrs("cx", "cy", "r", "pathLength"),
        PRESENTATION_ATTRS),
    _el("ellipse", "Ellipse", "Ellipse", GRAPHIC, attrs("cx", "cy", "rx", "ry", "pathLength"),
        PRESENTATION_ATTRS),
    _el("line", "Line", "Line", GRAPHIC, attrs("x1", "y1", "x2", "y2", "pathLength"),
        PRESENTATION_ATTRS),
    _el("path", "Path", "Path", GRAPHIC, attrs("d", "pathLength"), PRESENTATION_ATTRS),
    _el("polygon", "Polygon", "Polygon", GRAPHIC, attrs("points", "pathLength"),
        PRESENTATION_ATTRS),
    _el("polyline", "Polyline", "Polyline", GRAPHIC, attrs("points", "pathLength"),
        PRESENTATION_ATTRS),
    _el("rect", "Rect", "Rectangle", GRAPHIC, _BOX, attrs("rx", "ry", "pathLength"),
        PRESENTATION_ATTRS),
    _el(
        "image", "Image", "Image", GRAPHIC,
        attrs("href"), _BOX,
        attrs("preserveAspectRatio", "crossorigin", "decoding"),
        PRESENTATION_ATTRS,
    ),
    # Text
    _el(
        "text", "Text", "Text", TEXT_CONTENT,
        attrs("x", "y", "dx", "dy", "rotate", "lengthAdjust", "textLength"),
        FONT_ATTRS, PRESENTATION_ATTRS,
    ),
    _el(
        "tspan", "TSpan", "Text Span", TEXT_CONTENT.without("textPath"),
        attrs("x", "y", "dx", "dy", "rotate", "lengthAdjust", "textLength"),
        FONT_ATTRS, PRESENTATION_ATTRS,
    ),
    _el(
        "textPath", "TextPath", "Text Path",
        TEXT + svg_children("a", "tspan") + DESCRIPTIVE + ANIMATION,
        attrs(
            "href", "lengthAdjust", "method", "path", "side", "spacing",
            "startOffset", "textLength",
        ),
        FONT_ATTRS, PRESENTATION_ATTRS,
    ),
    # Descriptive
    _el("title", "Title", "Title", TEXT),
    _el("desc", "Desc", "Description", TEXT),
    _el("metadata", "Metadata", "Metadata", TEXT),
    # Paint servers
    _el(
        "linearGradient", "LinearGradient", "Linear Gradient",
        DESCRIPTIVE + svg_children("animate", "animateTransform", "set", "stop") + COMMENTS,
        attrs(
            "gradientUnits", "gradientTransform", "href", "spreadMethod",
            "x1", "y1", "x2", "y2",
        ),
    ),
    _el(
        "radialGradient", "RadialGradient", "Radial Gradient",
        DESCRIPTIVE + svg_children("animate", "animateTransform", "set", "stop") + COMMENTS,
        attrs(
            "cx", "cy", "fr", "fx", "fy", "gradientUnits", "gradientTransform",
            "href", "r", "spreadMethod",
        ),
    ),
    _el(
        "stop", "Stop", "Gradient Stop", PRIMITIVE_CONTENT,
        attrs("offset", "stop-color", "stop-opacity"),
    ),
    # Filters
    _el(
        "filter", "Filter", "Filter", DESCRIPTIVE + FILTER_PRIMITIVES + COMMENTS,
        _BOX, attrs("filterUnits", "primitiveUnits"),
    ),
    _el("feBlend", "FeBlend", "Blend Filter Primitive", PRIMITIVE_CONTENT,
        _FILTER_PRIMITIVE, attrs("in", "in2", "mode")),
    _el("feColorMatrix", "FeColorMatrix", "Color Matrix Filter Primitive", PRIMITIVE_CONTENT,
        _FILTER_PRIMITIVE, attrs("in", "type", "values")),
    _el("feFlood", "FeFlood", "Flood Filter Primitive", PRIMITIVE_CONTENT,
        _FILTER_PRIMITIVE, attrs("flood-color", "flood-opacity")),
    _el("feGaussianBlur", "FeGaussianBlur", "Gaussian Blur Filter Primitive",
        PRIMITIVE_CONTENT, _FILTER_PRIMITIVE, attrs("in", "stdDeviation", "edgeMode")),
    _el("feMerge", "FeMerge", "Merge Filter Primitive",
        svg_children("feMergeNode") + COMMENTS, _FILTER_PRIMITIVE),
    _el("feMergeNode", "FeMergeNode", "Merge Node", PRIMITIVE_CONTENT, attrs("in")),
    _el("feOffset", "FeOffset", "Offset Filter Primitive", PRIMITIVE_CONTENT,
        _FILTER_PRIMITIVE, attrs("in", "dx", "dy")),
    # Embedding
    _el("foreignObject", "ForeignObject", "Foreign Object", FLOW, _BOX),
    _el(
        "script", "Script", "Script", ContentModel(raw=True),
        attrs("href", "type", "crossorigin"),
    ),
    _el("style", "Style", "Style", TEXT, attrs("type", "media")),
    _el("view", "View", "View", DESCRIPTIVE, attrs("viewBox", "preserveAspectRatio")),
    # Animation
    _el("animate", "Animate", "Animate", DESCRIPTIVE, _TIMING, _VALUES),
    _el(
        "animateMotion", "AnimateMotion", "Motion Animation",
        DESCRIPTIVE + svg_children("mpath"),
        _TIMING, _VALUES, attrs("path", "keyPoints", "rotate"),
    ),
    _el(
        "animateTransform", "AnimateTransform", "Transform Animation", DESCRIPTIVE,
        _TIMING, _VALUES, attrs("type"),
    ),
    _el("mpath", "MPath", "Motion Path", DESCRIPTIVE, attrs("href")),
    _el("set", "Set", "Set", DESCRIPTIVE, _TIMING, attrs("to")),
)  # fmt: skip


def __getattr__(name: str) -> type[Element]:
    if name.startswith("__"):
        raise AttributeError(name)

    from tagloom.elements import ELEMENTS
    from tagloom.errors import UnknownElementError

    try:
        return ELEMENTS.by_class_name(name, Namespace.SVG)
    except UnknownElementError:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg) from None


__all__ = [
    "CONTAINER",
    "GLOBAL_ATTRS",
    "PRESENTATION_ATTRS",
    "SVG_SPECS",
]
