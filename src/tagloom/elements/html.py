"""HTML element table.

One ElementSpec per HTML element: void classification, element-specific
attributes (global attributes are added to every element), and content
model. Content models follow the HTML content categories, simplified
where the full rules depend on attributes (e.g. ``<a>`` with ``href`` being
interactive).

Generated classes are reachable as module attributes:

    >>> from tagloom.elements.html import Div
    >>> Div.spec.tag
    'div'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

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
    html_children,
    svg_children,
)
from tagloom.page import ElemKind

if TYPE_CHECKING:
    from tagloom.elements.base import Element

GLOBAL_ATTRS: tuple[AttrSpec, ...] = (
    *attrs("id", "class", "accesskey", "autocapitalize", "autocorrect"),
    *flags("autofocus"),
    *attrs("contenteditable", "dir", "draggable", "enterkeyhint", "exportparts", "hidden"),
    *flags("inert"),
    *attrs("inputmode", "is", "itemid", "itemprop", "itemref"),
    *flags("itemscope"),
    *attrs(
        "itemtype",
        "lang",
        "nonce",
        "part",
        "popover",
        "role",
        "slot",
        "spellcheck",
        "style",
        "tabindex",
        "title",
        "translate",
    ),
)

# =========================================================================
# Content categories
# =========================================================================

METADATA = (
    html_children("base", "link", "meta", "noscript", "script", "style", "template", "title")
    + COMMENTS
)

PHRASING = (
    TEXT
    + html_children(
        "a", "abbr", "area", "audio", "b", "bdi", "bdo", "br", "button", "canvas",
        "cite", "code", "data", "datalist", "del", "dfn", "em", "embed", "i",
        "iframe", "img", "input", "ins", "kbd", "label", "link", "map", "mark",
        "meta", "meter", "noscript", "object", "output", "picture", "progress",
        "q", "ruby", "s", "samp", "script", "select", "slot", "small", "span",
        "strong", "sub", "sup",
    )
    + svg_children("svg")
    + html_children("template", "textarea", "time", "u", "var", "video", "wbr")
)  # fmt: skip

NON_INTERACTIVE_PHRASING = PHRASING.without(
    "a", "audio", "button", "embed", "iframe", "input", "label", "select", "textarea", "video"
)

FLOW = (
    TEXT
    + html_children(
        "a", "abbr", "address", "article", "aside", "audio", "b", "bdi", "bdo",
        "blockquote", "br", "button", "canvas", "cite", "code", "data",
        "datalist", "del", "details", "dfn", "dialog", "div", "dl", "em",
        "embed", "fieldset", "figure", "footer", "form", "h1", "h2", "h3", "h4",
        "h5", "h6", "header", "hgroup", "hr", "i", "iframe", "img", "input",
        "ins", "kbd", "label", "main", "map", "mark", "menu", "meter", "nav",
        "noscript", "object", "ol", "output", "p", "picture", "pre", "progress",
        "q", "ruby", "s", "samp", "script", "search", "section", "select",
        "slot", "small", "span", "strong", "sub", "sup",
    )
    + svg_children("svg")
    + html_children(
        "table", "template", "textarea", "time", "u", "ul", "var", "video", "wbr"
    )
)  # fmt: skip

# No sectioning, headings, header or footer inside <address>
ADDRESS = FLOW.without(
    "address", "article", "aside", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hgroup", "nav", "section",
)  # fmt: skip

HEADINGS = html_children("h1", "h2", "h3", "h4", "h5", "h6")

SCRIPT_SUPPORTING = html_children("script", "template")


def _el(
    tag: str,
    class_name: str,
    description: str,
    content: ContentModel = NO_CONTENT,
    *specific: AttrSpec | tuple[AttrSpec, ...],
    void: bool = False,
) -> ElementSpec:
    own: list[AttrSpec] = []
    for item in specific:
        own.extend(item if isinstance(item, tuple) else (item,))
    names = {a.method for a in own}
    merged = (*own, *(a for a in GLOBAL_ATTRS if a.method not in names))
    return ElementSpec(
        tag=tag,
        class_name=class_name,
        description=description,
        namespace=Namespace.HTML,
        kind=ElemKind.VOID if void else ElemKind.NORMAL,
        attrs=merged,
        content=NO_CONTENT if void else content,
    )


_MEDIA_ATTRS = (
    *flags("autoplay", "controls"),
    *attrs("controlslist", "crossorigin"),
    *flags("disableremoteplayback", "loop", "muted"),
    *attrs("preload", "src"),
)

_FORM_SUBMIT_ATTRS = (
    *attrs("formaction", "formenctype", "formmethod"),
    *flags("formnovalidate"),
    *attrs("formtarget", "popovertarget", "popovertargetaction"),
)

_TABLE_CELL_ATTRS = attrs("colspan", "headers", "rowspan")


def _heading(level: int) -> ElementSpec:
    return _el(f"h{level}", f"H{level}", f"Section Heading {level}", PHRASING)


HTML_SPECS: tuple[ElementSpec, ...] = (
    _el(
        "a", "A", "Anchor", PHRASING.without("a"),
        attrs("download", "href", "hreflang", "ping", "referrerpolicy", "rel", "target", "type"),
    ),
    _el("abbr", "Abbr", "Abbreviation", PHRASING),
    _el("address", "Address", "Contact Address", ADDRESS),
    _el(
        "area", "Area", "Image Map Area", NO_CONTENT,
        attrs(
            "alt", "coords", "download", "href", "ping", "referrerpolicy", "rel",
            "shape", "target",
        ),
        void=True,
    ),
    _el("article", "Article", "Article Contents", FLOW),
    _el("aside", "Aside", "Aside", FLOW),
    _el("audio", "Audio", "Embed Audio", html_children("source", "track"), _MEDIA_ATTRS),
    _el("b", "B", "Bring Attention To (Bold)", PHRASING),
    _el("base", "Base", "Base URL", NO_CONTENT, attrs("href", "target"), void=True),
    _el("bdi", "Bdi", "Bidirectional Isolate", PHRASING),
    _el("bdo", "Bdo", "Bidirectional Override", PHRASING),
    _el("blockquote", "BlockQuote", "Block Quotation", FLOW, attrs("cite")),
    _el("body", "Body", "Document Body", FLOW),
    _el("br", "Br", "Line Break", void=True),
    _el(
        "button", "Button", "Button", NON_INTERACTIVE_PHRASING,
        attrs("command", "commandfor"), flags("disabled"), attrs("form"),
        _FORM_SUBMIT_ATTRS, attrs("name", "type", "value"),
    ),
    _el("canvas", "Canvas", "Graphics Canvas", TEXT, attrs("height", "width")),
    _el("caption", "Caption", "Table Caption", FLOW),
    _el("cite", "Cite", "Citation", PHRASING),
    _el("code", "Code", "Inline Code", PHRASING),
    _el("col", "Col", "Table Column", NO_CONTENT, attrs("span"), void=True),
    _el(
        "colgroup", "ColGroup", "Table Column Group",
        html_children("col", "template"), attrs("span"),
    ),
    _el("data", "Data", "Data", PHRASING, attrs("value")),
    _el("datalist", "DataList", "Data List", html_children("option") + COMMENTS),
    _el("dd", "Dd", "Description Details", FLOW),
    _el("del", "Del", "Deleted Text", PHRASING, attrs("cite", "datetime")),
    _el(
        "details", "Details", "Details Disclosure", html_children("summary") + FLOW,
        flags("open"), attrs("name"),
    ),
    _el("dfn", "Dfn", "Definition", PHRASING.without("dfn")),
    _el("dialog", "Dialog", "Dialog", FLOW, attrs("closedby"), flags("open")),
    _el("div", "Div", "Content Division", FLOW),
    _el(
        "dl", "Dl", "Description List",
        html_children("dt", "dd", "div") + SCRIPT_SUPPORTING + COMMENTS,
    ),
    _el("dt", "Dt", "Description Term", FLOW),
    _el("em", "Em", "Emphasis", PHRASING),
    _el(
        "embed", "Embed", "Embed External Content", NO_CONTENT,
        attrs("height", "src", "type", "width"), void=True,
    ),
    _el(
        "fieldset", "FieldSet", "Field Set", html_children("legend") + FLOW,
        flags("disabled"), attrs("form", "name"),
    ),
    _el("figcaption", "FigCaption", "Figure Caption", FLOW),
    _el("figure", "Figure", "Figure", html_children("figcaption") + FLOW),
    _el("footer", "Footer", "Footer", FLOW.without("footer", "header")),
    _el(
        "form", "Form", "Form", FLOW.without("form"),
        attrs("accept-charset", "action", "autocomplete", "enctype", "method", "name"),
        flags("novalidate"), attrs("rel", "target"),
    ),
    *(_heading(level) for level in range(1, 7)),
    _el("head", "Head", "Header / Document Metadata", METADATA),
    _el("header", "Header", "Header", FLOW.without("footer", "header")),
    _el("hgroup", "HGroup", "Heading Group", HEADINGS + html_children("p") + COMMENTS),
    _el("hr", "Hr", "Horizontal Rule", void=True),
    _el("html", "Html", "HTML Document Root", html_children("head", "body") + COMMENTS),
    _el("i", "I", "Idiomatic Text (Italic)", PHRASING),
    _el(
        "iframe", "IFrame", "Inline Frame", NO_CONTENT,
        attrs(
            "allow", "height", "loading", "name", "referrerpolicy", "sandbox", "src",
            "srcdoc", "width",
        ),
    ),
    _el(
        "img", "Img", "Embedded Image", NO_CONTENT,
        attrs(
            "alt", "crossorigin", "decoding", "elementtiming", "fetchpriority",
            "height",
        ),
        flags("ismap"),
        attrs("loading", "referrerpolicy", "sizes", "src", "srcset", "usemap", "width"),
        void=True,
    ),
    _el(
        "input", "Input", "Input", NO_CONTENT,
        attrs("accept"), flags("alpha"), attrs("alt", "autocomplete", "capture"),
        flags("checked"), attrs("colorspace", "dirname"), flags("disabled"),
        attrs("form"), _FORM_SUBMIT_ATTRS,
        attrs("height", "list", "max", "maxlength", "min", "minlength"),
        flags("multiple"), attrs("name", "pattern", "placeholder"),
        flags("readonly", "required"),
        attrs("size", "src", "step", "type", "value", "width"),
        void=True,
    ),
    _el("ins", "Ins", "Inserted Text", PHRASING, attrs("cite", "datetime")),
    _el("kbd", "Kbd", "Keyboard Input", PHRASING),
    _el("label", "Label", "Label", PHRASING.without("label"), attrs("for")),
    _el("legend", "Legend", "Field Set Legend", HEADINGS + PHRASING),
    _el("li", "Li", "List Item", FLOW, attrs("value")),
    _el(
        "link", "Link", "External Resource Link", NO_CONTENT,
        attrs("as", "blocking", "crossorigin"), flags("disabled"),
        attrs(
            "fetchpriority", "href", "hreflang", "imagesizes", "imagesrcset",
            "integrity", "media", "referrerpolicy", "rel", "sizes", "type",
        ),
        void=True,
    ),
    _el("main", "Main", "Main", FLOW),
    _el("map", "Map", "Image Map", PHRASING, attrs("name")),
    _el("mark", "Mark", "Mark Text", PHRASING),
    _el("menu", "Menu", "Menu", html_children("li") + SCRIPT_SUPPORTING + COMMENTS),
    _el(
        "meta", "Meta", "Metadata", NO_CONTENT,
        attrs("charset", "content", "http-equiv", "media", "name"),
        void=True,
    ),
    _el(
        "meter", "Meter", "Meter", PHRASING.without("meter"),
        attrs("value", "min", "max", "low", "high", "optimum"),
    ),
    _el("nav", "Nav", "Navigation Section", FLOW),
    _el("noscript", "NoScript", "NoScript", html_children("link", "style", "meta") + FLOW),
    _el(
        "object", "Object", "External Object", TEXT,
        attrs("data", "form", "height", "name", "type", "width"),
    ),
    _el(
        "ol", "Ol", "Ordered List", html_children("li") + SCRIPT_SUPPORTING + COMMENTS,
        flags("reversed"), attrs("start", "type"),
    ),
    _el(
        "optgroup", "OptGroup", "Option Group", html_children("option", "legend") + COMMENTS,
        flags("disabled"), attrs("label"),
    ),
    _el(
        "option", "Option", "Option", TEXT,
        flags("disabled"), attrs("label"), flags("selected"), attrs("value"),
    ),
    _el("output", "Output", "Output", PHRASING, attrs("for", "form", "name")),
    _el("p", "P", "Paragraph", PHRASING),
    _el("picture", "Picture", "Picture", html_children("source", "img") + COMMENTS),
    _el("pre", "Pre", "Preformatted Text", PHRASING),
    _el("progress", "Progress", "Progress Indicator", PHRASING.without("progress"),
        attrs("max", "value")),
    _el("q", "Q", "Inline Quotation", PHRASING, attrs("cite")),
    _el("rp", "Rp", "Ruby Fallback Parenthesis", TEXT),
    _el("rt", "Rt", "Ruby Text", PHRASING),
    _el("ruby", "Ruby", "Ruby Annotation", html_children("rp", "rt") + PHRASING),
    _el("s", "S", "Strikethrough", PHRASING),
    _el("samp", "Samp", "Sample Output", PHRASING),
    # Script bodies must not be entity-escaped
    _el(
        "script", "Script", "Script", ContentModel(raw=True),
        flags("async"), attrs("blocking", "crossorigin"), flags("defer"),
        attrs("fetchpriority", "integrity"), flags("nomodule"),
        attrs("referrerpolicy", "src", "type"),
    ),
    _el("search", "Search", "Search", FLOW),
    _el("section", "Section", "Section", FLOW),
    _el(
        "select", "Select", "Select",
        html_children("option", "optgroup", "hr") + COMMENTS,
        attrs("autocomplete"), flags("disabled"), attrs("form"), flags("multiple"),
        attrs("name"), flags("required"), attrs("size"),
    ),
    _el("slot", "Slot", "Web Component Slot", TEXT, attrs("name")),
    _el("small", "Small", "Side Comment (Small)", PHRASING),
    _el(
        "source", "Source", "Media or Image Source", NO_CONTENT,
        attrs("type", "src", "srcset", "sizes", "media", "height", "width"),
        void=True,
    ),
    _el("span", "Span", "Content Span", PHRASING),
    _el("strong", "Strong", "Strong Importance", PHRASING),
    _el("style", "Style", "Style Information", TEXT, attrs("blocking", "media")),
    _el("sub", "Sub", "Subscript", PHRASING),
    _el("summary", "Summary", "Disclosure Summary", HEADINGS + PHRASING),
    _el("sup", "Sup", "Superscript", PHRASING),
    _el(
        "table", "Table", "Table",
        html_children("caption", "colgroup", "thead", "tbody", "tr", "tfoot")
        + SCRIPT_SUPPORTING
        + COMMENTS,
    ),
    _el("tbody", "TBody", "Table Body", html_children("tr") + SCRIPT_SUPPORTING + COMMENTS),
    _el("td", "Td", "Table Data Cell", FLOW, _TABLE_CELL_ATTRS),
    _el(
        "template", "Template", "Content Template", FLOW + METADATA,
        attrs("shadowrootmode"),
        flags("shadowrootclonable", "shadowrootdelegatesfocus", "shadowrootserializable"),
    ),
    _el(
        "textarea", "TextArea", "Text Area", TEXT,
        attrs("autocomplete", "cols", "dirname"), flags("disabled"),
        attrs("form", "maxlength", "minlength", "name", "placeholder"),
        flags("readonly", "required"), attrs("rows", "wrap"),
    ),
    _el("tfoot", "TFoot", "Table Foot", html_children("tr") + SCRIPT_SUPPORTING + COMMENTS),
    _el("th", "Th", "Table Header", FLOW, attrs("abbr"), _TABLE_CELL_ATTRS, attrs("scope")),
    _el("thead", "THead", "Table Head", html_children("tr") + SCRIPT_SUPPORTING + COMMENTS),
    _el("time", "Time", "Time / Date", PHRASING, attrs("datetime")),
    _el("title", "Title", "Document Title", TEXT),
    _el("tr", "Tr", "Table Row", html_children("td", "th") + SCRIPT_SUPPORTING + COMMENTS),
    _el(
        "track", "Track", "Embed Text Track", NO_CONTENT,
        flags("default"), attrs("kind", "label", "src", "srclang"),
        void=True,
    ),
    _el("u", "U", "Unarticulated Annotation (Underline)", PHRASING),
    _el("ul", "Ul", "Unordered List", html_children("li") + SCRIPT_SUPPORTING + COMMENTS),
    _el("var", "Var", "Variable", PHRASING),
    _el(
        "video", "Video", "Embed Video", html_children("source", "track"),
        _MEDIA_ATTRS, flags("disablepictureinpicture", "playsinline"),
        attrs("height", "poster", "width"),
    ),
    _el("wbr", "Wbr", "Line Break Opportunity", void=True),
)  # fmt: skip


def __getattr__(name: str) -> type[Element]:
    if name.startswith("__"):
        raise AttributeError(name)

    from tagloom.elements import ELEMENTS
    from tagloom.errors import UnknownElementError

    try:
        return ELEMENTS.by_class_name(name, Namespace.HTML)
    except UnknownElementError:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg) from None


__all__ = [
    "ADDRESS",
    "FLOW",
    "GLOBAL_ATTRS",
    "HTML_SPECS",
    "METADATA",
    "NON_INTERACTIVE_PHRASING",
    "PHRASING",
]
