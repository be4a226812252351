"""StringBuilder for O(n) markup accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation.

Unlike a plain accumulator, the document buffer must occasionally take
back its last character: attribute insertion splices text in front of the
trailing ``>`` of an opening tag, and self-closing output rewrites that
``>`` into `` />``. ``endswith()`` and ``pop()`` only ever touch the last
part, so both stay O(1) for the short parts the page appends.

Thread Safety:
StringBuilder instances are owned by a single Page.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with last-character access.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<p>")
            >>> sb.pop()
            '>'
            >>> sb.append(' id="x">')
            >>> sb.build()
            '<p id="x">'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def extend(self, strings: list[str]) -> StringBuilder:
        """Append multiple strings at once.

        Args:
            strings: List of strings to append

        Returns:
            self for method chaining
        """
        self._parts.extend(s for s in strings if s)
        return self

    def endswith(self, ch: str) -> bool:
        """Return True if the accumulated text ends with ``ch``."""
        # Empty strings are never stored, so the last part decides
        return bool(self._parts) and self._parts[-1].endswith(ch)

    def pop(self) -> str | None:
        """Remove and return the last character.

        Returns:
            The removed character, or None if the builder is empty
        """
        if not self._parts:
            return None
        last = self._parts[-1]
        if len(last) == 1:
            self._parts.pop()
        else:
            self._parts[-1] = last[:-1]
        return last[-1]

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
