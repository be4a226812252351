"""Character escaping for the three markup contexts.

Each syntactic position needs a different, minimal set of substitutions,
so each gets its own table rather than sharing one generic escaper:

| Context   | Escaped                              |
|-----------|--------------------------------------|
| text      | ``&`` ``<`` ``>``                    |
| attribute | ``&`` ``"`` (values are double-quoted) |
| comment   | ``-`` ``<`` ``>``                    |

Comment escaping turns every hyphen into ``&hyphen;`` so that no ``--``
(and therefore no ``-->``) can appear inside the comment body.

Example:
    >>> escape_text("A & B")
    'A &amp; B'
    >>> escape_attr('say "hi"')
    'say &quot;hi&quot;'
    >>> escape_comment("a--b")
    'a&hyphen;&hyphen;b'
"""

from __future__ import annotations

_TEXT_TABLE = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})
_ATTR_TABLE = str.maketrans({"&": "&amp;", '"': "&quot;"})
_COMMENT_TABLE = str.maketrans({"-": "&hyphen;", "<": "&lt;", ">": "&gt;"})


def escape_text(value: str) -> str:
    """Escape character data for element content."""
    return value.translate(_TEXT_TABLE)


def escape_attr(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return value.translate(_ATTR_TABLE)


def escape_comment(value: str) -> str:
    """Escape the body of an HTML comment."""
    return value.translate(_COMMENT_TABLE)


__all__ = ["escape_attr", "escape_comment", "escape_text"]
