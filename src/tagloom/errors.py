"""Exception classes for Tagloom.

Building markup has no I/O and no parsing, so the only failures are
calling-protocol violations: asking the page to do something that would
produce malformed output. They are raised at the offending call.
"""

from __future__ import annotations


class TagloomError(Exception):
    """Base exception for all Tagloom errors.

    Subclass this for specific error categories.
    """

    pass


class MarkupProtocolError(TagloomError):
    """Operations were called out of order.

    Raised when an attribute is set after content was appended to the
    element, when no opening tag is available to receive an attribute, or
    when an element handle is used after its element was closed.
    These indicate a bug in the calling code; the page is never patched up.
    """

    def __init__(self, message: str, tag: str | None = None) -> None:
        """Initialize protocol error.

        Args:
            message: Description of the violation
            tag: Tag of the element involved (optional)
        """
        self.tag = tag

        prefix = f"<{tag}>: " if tag else ""
        super().__init__(f"{prefix}{message}")


class PageFinishedError(MarkupProtocolError):
    """A page was used after finalize() returned its markup."""

    def __init__(self) -> None:
        super().__init__("page is finished; no further operations are possible")


class UnknownElementError(TagloomError, KeyError):
    """Element type lookup failed.

    Raised when a tag or class name is not present in the element registry.
    """

    def __init__(self, name: str, namespace: str | None = None) -> None:
        """Initialize unknown element error.

        Args:
            name: Tag or class name that was looked up
            namespace: Namespace searched (None = all)
        """
        self.name = name
        self.namespace = namespace

        where = f" in {namespace} namespace" if namespace else ""
        super().__init__(f"Unknown element '{name}'{where}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])
