"""Tests for the Page state machine.

Covers the low-level protocol (open / set_attr / append_* / close_one /
close_to / finalize) without the typed element surface.
"""

import logging

import pytest

from tagloom import ElemKind, MarkupProtocolError, Page, PageConfig, PageFinishedError


class TestOpenAndClose:
    """Opening tags, nesting and closing rules per element kind."""

    def test_nested_text(self) -> None:
        page = Page()
        page.open("div")
        page.open("p")
        page.append_text("A & B")
        page.close_one()
        page.close_one()
        assert page.finalize() == "<div><p>A &amp; B</p></div>"

    def test_open_returns_depth(self) -> None:
        page = Page()
        assert page.open("div") == 1
        assert page.open("p") == 2
        assert page.depth == 2
        page.close_one()
        assert page.depth == 1

    def test_void_element(self) -> None:
        page = Page()
        page.open("input", ElemKind.VOID)
        page.set_attr("type", "text")
        page.close_one()
        assert page.finalize() == '<input type="text">'

    def test_void_never_closes_even_in_xml_mode(self) -> None:
        page = Page(xml_compatible=True)
        page.open("br", ElemKind.VOID)
        assert page.finalize() == "<br>"

    def test_self_closing_in_xml_mode(self) -> None:
        page = Page(xml_compatible=True)
        page.open("link", ElemKind.SELF_CLOSING)
        page.set_attr("rel", "stylesheet")
        page.close_one()
        assert page.finalize() == '<link rel="stylesheet" />'

    def test_self_closing_with_content_gets_end_tag(self) -> None:
        page = Page(xml_compatible=True)
        page.open("text", ElemKind.SELF_CLOSING)
        page.set_attr("x", "1")
        page.append_text("label")
        page.close_one()
        assert page.finalize() == '<text x="1">label</text>'

    def test_self_closing_without_xml_mode_gets_end_tag(self) -> None:
        page = Page()
        page.open("circle", ElemKind.SELF_CLOSING)
        page.close_one()
        assert page.finalize() == "<circle></circle>"

    def test_parent_with_closed_child_is_not_empty(self) -> None:
        page = Page(xml_compatible=True)
        page.open("g", ElemKind.SELF_CLOSING)
        page.open("rect", ElemKind.SELF_CLOSING)
        page.close_one()
        page.close_one()
        assert page.finalize() == "<g><rect /></g>"

    def test_self_closing_after_void_child(self) -> None:
        page = Page(xml_compatible=True)
        page.open("g", ElemKind.SELF_CLOSING)
        page.open("br", ElemKind.VOID)
        page.close_one()
        page.close_one()
        assert page.finalize() == "<g><br></g>"

    def test_close_one_on_empty_stack_raises(self) -> None:
        page = Page()
        with pytest.raises(MarkupProtocolError, match="no open element"):
            page.close_one()


class TestCloseTo:
    """Depth-scoped closing."""

    def test_close_to_closes_depth_and_deeper(self) -> None:
        page = Page()
        page.open("a")
        depth = page.open("b")
        page.open("c")
        page.close_to(depth)
        assert page.depth == 1
        page.append_text("x")
        assert page.finalize() == "<a><b><c></c></b>x</a>"

    def test_close_to_past_top_is_noop(self) -> None:
        page = Page()
        page.open("div")
        page.close_to(5)
        assert page.depth == 1

    def test_close_to_one_closes_everything(self) -> None:
        page = Page()
        for tag in ("ul", "li", "span"):
            page.open(tag)
        page.close_to(1)
        assert page.depth == 0
        assert page.finalize() == "<ul><li><span></span></li></ul>"

    @pytest.mark.parametrize("depth", [0, -1])
    def test_close_to_below_one_raises(self, depth: int) -> None:
        page = Page()
        page.open("div")
        with pytest.raises(ValueError, match="at least 1"):
            page.close_to(depth)


class TestAttributes:
    """Attribute splicing into the most recent opening tag."""

    def test_multiple_attributes(self) -> None:
        page = Page()
        page.open("a")
        page.set_attr("href", "/menu")
        page.set_attr("class", "nav")
        assert page.finalize() == '<a href="/menu" class="nav"></a>'

    def test_attribute_escaping(self) -> None:
        page = Page()
        page.open("div")
        page.set_attr("title", 'Fish & "chips" <b>')
        assert page.finalize() == '<div title="Fish &amp; &quot;chips&quot; <b>"></div>'

    def test_boolean_attribute(self) -> None:
        page = Page()
        page.open("input", ElemKind.VOID)
        page.set_attr_bool("disabled")
        page.set_attr("name", "q")
        assert page.finalize() == '<input disabled name="q">'

    def test_value_conversion(self) -> None:
        page = Page()
        page.open("td")
        page.set_attr("colspan", 2)
        page.set_attr("draggable", True)
        page.set_attr("data-ratio", 0.5)
        assert page.finalize() == '<td colspan="2" draggable="true" data-ratio="0.5"></td>'

    def test_attribute_after_text_raises(self) -> None:
        page = Page()
        page.open("p")
        page.append_text("hello")
        with pytest.raises(MarkupProtocolError, match="after content"):
            page.set_attr("id", "x")

    def test_attribute_after_closed_child_raises(self) -> None:
        page = Page()
        page.open("p")
        page.open("b")
        page.close_one()
        with pytest.raises(MarkupProtocolError):
            page.set_attr_bool("hidden")

    def test_attribute_without_open_tag_raises(self) -> None:
        page = Page(doctype=True)
        with pytest.raises(MarkupProtocolError, match="no open tag"):
            page.set_attr("lang", "en")

    def test_failed_attribute_leaves_buffer_intact(self) -> None:
        page = Page()
        page.open("p")
        page.append_raw("<b>bold</b>")
        with pytest.raises(MarkupProtocolError):
            page.set_attr("id", "x")
        assert page.finalize() == "<p><b>bold</b></p>"

    def test_attribute_on_void_element_after_open(self) -> None:
        page = Page(xml_compatible=True)
        page.open("img", ElemKind.SELF_CLOSING)
        page.set_attr("src", "a.png")
        page.set_attr("alt", "")
        assert page.finalize() == '<img src="a.png" alt="" />'


class TestContent:
    """Text, comment and raw content."""

    def test_text_escaping(self) -> None:
        page = Page()
        page.open("p")
        page.append_text("<script> & </script>")
        assert page.finalize() == "<p>&lt;script&gt; &amp; &lt;/script&gt;</p>"

    def test_text_does_not_escape_quotes(self) -> None:
        page = Page()
        page.open("q")
        page.append_text("\"it's\"")
        assert page.finalize() == "<q>\"it's\"</q>"

    def test_text_max_chars_is_hard_cut(self) -> None:
        page = Page()
        page.open("p")
        page.append_text("A tale of two cities", max_chars=6)
        assert page.finalize() == "<p>A tale</p>"

    def test_max_chars_applies_before_escaping(self) -> None:
        page = Page()
        page.open("p")
        page.append_text("a&b&c", max_chars=3)
        assert page.finalize() == "<p>a&amp;b</p>"

    def test_max_chars_longer_than_text(self) -> None:
        page = Page()
        page.open("p")
        page.append_text("short", max_chars=100)
        assert page.finalize() == "<p>short</p>"

    def test_max_chars_zero_still_clears_empty(self) -> None:
        page = Page(xml_compatible=True)
        page.open("text", ElemKind.SELF_CLOSING)
        page.append_text("ignored", max_chars=0)
        assert page.finalize() == "<text></text>"

    def test_negative_max_chars_raises(self) -> None:
        page = Page()
        page.open("p")
        with pytest.raises(ValueError, match="max_chars"):
            page.append_text("x", max_chars=-1)

    def test_comment(self) -> None:
        page = Page()
        page.append_comment("a--b")
        assert page.finalize() == "<!--a&hyphen;&hyphen;b-->"

    def test_comment_cannot_terminate_early(self) -> None:
        page = Page()
        page.open("div")
        page.append_comment("-->")
        assert page.finalize() == "<div><!--&hyphen;&hyphen;&gt;--></div>"

    def test_raw_is_verbatim(self) -> None:
        page = Page()
        page.open("script")
        page.append_raw("if (a < b && c) {}")
        assert page.finalize() == "<script>if (a < b && c) {}</script>"

    def test_numbers_as_text(self) -> None:
        page = Page()
        page.open("td")
        page.append_text(3.0)
        page.append_text(" / ")
        page.append_text(7)
        assert page.finalize() == "<td>3 / 7</td>"


class TestPreambleAndConfig:
    """Construction options."""

    def test_doctype_preamble(self) -> None:
        page = Page(doctype=True)
        page.open("html")
        assert page.finalize() == "<!doctype html><html></html>"

    def test_no_preamble_by_default(self) -> None:
        assert Page().finalize() == ""

    def test_custom_preamble_from_config(self) -> None:
        config = PageConfig(doctype=True, preamble='<?xml version="1.0"?>')
        page = Page(config=config)
        page.open("svg")
        assert page.finalize() == '<?xml version="1.0"?><svg></svg>'

    def test_keyword_overrides_config(self) -> None:
        page = Page(xml_compatible=False, config=PageConfig(xml_compatible=True))
        assert page.xml_compatible is False
        assert page.config.xml_compatible is False


class TestFinalize:
    """Finalization is terminal."""

    def test_finalize_closes_open_elements(self) -> None:
        page = Page()
        page.open("html")
        page.open("body")
        page.open("p")
        page.append_text("hi")
        assert page.finalize() == "<html><body><p>hi</p></body></html>"
        assert page.depth == 0
        assert page.finished is True

    def test_finalize_logs_open_elements(self, caplog: pytest.LogCaptureFixture) -> None:
        page = Page()
        page.open("main")
        page.open("section")
        with caplog.at_level(logging.DEBUG, logger="tagloom.page"):
            page.finalize()
        assert "main > section" in caplog.text

    @pytest.mark.parametrize(
        "operation",
        [
            lambda p: p.open("div"),
            lambda p: p.set_attr("id", "x"),
            lambda p: p.set_attr_bool("hidden"),
            lambda p: p.append_text("x"),
            lambda p: p.append_comment("x"),
            lambda p: p.append_raw("x"),
            lambda p: p.close_one(),
            lambda p: p.close_to(1),
            lambda p: p.finalize(),
            lambda p: p.frag("div"),
        ],
    )
    def test_operations_after_finalize_raise(self, operation) -> None:
        page = Page()
        page.open("div")
        page.finalize()
        with pytest.raises(PageFinishedError):
            operation(page)

    def test_page_finished_error_is_protocol_error(self) -> None:
        assert issubclass(PageFinishedError, MarkupProtocolError)


class TestRender:
    """Non-consuming preview."""

    def test_render_does_not_mutate(self) -> None:
        page = Page()
        page.open("ul")
        page.open("li")
        page.append_text("one")
        assert str(page) == "<ul><li>one</li></ul>"
        assert page.depth == 2
        page.close_one()
        page.open("li")
        page.append_text("two")
        assert page.finalize() == "<ul><li>one</li><li>two</li></ul>"

    def test_render_matches_finalize(self) -> None:
        page = Page(xml_compatible=True)
        page.open("svg", ElemKind.SELF_CLOSING)
        page.open("g", ElemKind.SELF_CLOSING)
        page.open("circle", ElemKind.SELF_CLOSING)
        page.set_attr("r", 1)
        page.open("br", ElemKind.VOID)
        preview = page.render()
        assert preview == page.finalize()
        assert preview == '<svg><g><circle r="1"><br></circle></g></svg>'

    def test_render_self_closes_empty_innermost(self) -> None:
        page = Page(xml_compatible=True)
        page.open("svg", ElemKind.SELF_CLOSING)
        page.open("rect", ElemKind.SELF_CLOSING)
        assert page.render() == "<svg><rect /></svg>"

    def test_render_after_finalize(self) -> None:
        page = Page()
        page.open("p")
        out = page.finalize()
        assert page.render() == out

    def test_repr(self) -> None:
        page = Page()
        page.open("div")
        assert repr(page) == "<Page depth=1 xml_compatible=False finished=False>"
