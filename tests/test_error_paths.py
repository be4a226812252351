"""Error-path tests.

Exercises error construction, the exception hierarchy, and the guarantee
that protocol violations surface at the offending call.
"""

import pytest

from tagloom import Page
from tagloom.errors import (
    MarkupProtocolError,
    PageFinishedError,
    TagloomError,
    UnknownElementError,
)

# =========================================================================
# MarkupProtocolError construction and formatting
# =========================================================================


class TestMarkupProtocolErrorFormatting:
    """Verify MarkupProtocolError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = MarkupProtocolError("no open element to close")
        assert str(err) == "no open element to close"
        assert err.tag is None

    def test_with_tag(self) -> None:
        err = MarkupProtocolError("element is already closed", "li")
        assert str(err) == "<li>: element is already closed"
        assert err.tag == "li"

    def test_is_tagloom_error(self) -> None:
        assert isinstance(MarkupProtocolError("x"), TagloomError)


class TestPageFinishedError:
    def test_message(self) -> None:
        assert "finished" in str(PageFinishedError())

    def test_hierarchy(self) -> None:
        err = PageFinishedError()
        assert isinstance(err, MarkupProtocolError)
        assert isinstance(err, TagloomError)


class TestUnknownElementError:
    def test_message_without_namespace(self) -> None:
        err = UnknownElementError("blink")
        assert str(err) == "Unknown element 'blink'"
        assert err.name == "blink"
        assert err.namespace is None

    def test_message_with_namespace(self) -> None:
        err = UnknownElementError("div", "svg")
        assert str(err) == "Unknown element 'div' in svg namespace"

    def test_is_key_error(self) -> None:
        err = UnknownElementError("blink")
        assert isinstance(err, KeyError)
        assert isinstance(err, TagloomError)


# =========================================================================
# Errors raised at the call site
# =========================================================================


class TestProtocolViolations:
    """Violations raise immediately and name the element involved."""

    def test_attribute_after_content_names_tag(self) -> None:
        page = Page()
        page.open("span")
        page.append_text("x")
        with pytest.raises(MarkupProtocolError) as exc_info:
            page.set_attr("id", "y")
        assert exc_info.value.tag == "span"
        assert "'id'" in str(exc_info.value)

    def test_handle_attribute_with_open_child_names_tag(self) -> None:
        page = Page()
        nav = page.frag("nav")
        nav.ul()
        with pytest.raises(MarkupProtocolError) as exc_info:
            nav.role("navigation")
        assert exc_info.value.tag == "nav"

    def test_page_still_usable_after_violation(self) -> None:
        page = Page()
        p = page.frag("p").text("x")
        with pytest.raises(MarkupProtocolError):
            p.id("late")
        p.text("y")
        assert page.finalize() == "<p>xy</p>"

    def test_catch_all_with_base_class(self) -> None:
        page = Page()
        page.finalize()
        with pytest.raises(TagloomError):
            page.append_text("after")
