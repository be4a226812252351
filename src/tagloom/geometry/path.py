"""SVG path data (``d`` attribute) builder.

Example:
    >>> path = PathDef().move_to((0, 0)).line((5, 5)).line((5, 0)).close()
    >>> str(path)
    'm0 0l5 5v-5z'
    >>> from tagloom import Page
    >>> page = Page()
    >>> _ = page.frag("svg").path().d(path)
    >>> page.finalize()
    '<svg><path d="m0 0l5 5v-5z"></path></svg>'

Relative mode (the default) writes every coordinate as a delta from the
current pen position; absolute mode writes coordinates as given. Lines that
keep one coordinate unchanged (at the output precision) use the shorter
``h``/``v`` commands.
"""

from __future__ import annotations

from tagloom.geometry.numbers import (
    Point,
    check_precision,
    format_number,
    same_at_precision,
    unpack,
)

DEFAULT_PRECISION = 2


class PathDef:
    """Chainable builder for SVG path data.

    Thread Safety:
        Not thread-safe. Use one builder per path.
    """

    __slots__ = ("_absolute", "_precision", "_x0", "_y0", "_x", "_y", "_parts")

    def __init__(self, *, absolute: bool = False, precision: int = DEFAULT_PRECISION) -> None:
        self._absolute = absolute
        self._precision = check_precision(precision)
        # Subpath start and pen position, always absolute
        self._x0 = 0.0
        self._y0 = 0.0
        self._x = 0.0
        self._y = 0.0
        self._parts: list[str] = []

    def absolute(self, absolute: bool = True) -> PathDef:
        """Switch between absolute and relative output for later commands."""
        self._absolute = absolute
        return self

    def precision(self, digits: int) -> PathDef:
        """Set the number of decimal places for later commands.

        Raises:
            ValueError: If digits is negative
        """
        self._precision = check_precision(digits)
        return self

    def move_to(self, p: Point) -> PathDef:
        """Start a new subpath at ``p``."""
        x, y = unpack(p)
        self._command("M", self._rel(x, y))
        self._x0, self._y0 = self._x, self._y = x, y
        return self

    def line(self, p: Point) -> PathDef:
        """Draw a straight line to ``p``."""
        x, y = unpack(p)
        x_same = same_at_precision(x, self._x, self._precision)
        y_same = same_at_precision(y, self._y, self._precision)
        dx, dy = self._rel(x, y)
        if x_same and not y_same:
            self._command("V", (dy,))
        elif y_same and not x_same:
            self._command("H", (dx,))
        else:
            self._command("L", (dx, dy))
        self._x, self._y = x, y
        return self

    def cubic(self, p1: Point | None, p2: Point, p: Point) -> PathDef:
        """Draw a cubic Bézier curve to ``p``.

        Args:
            p1: First control point, or None for a smooth curve (the
                reflection of the previous control point)
            p2: Second control point
            p: End point
        """
        x, y = unpack(p)
        end = (*self._rel(*unpack(p2)), *self._rel(x, y))
        if p1 is None:
            self._command("S", end)
        else:
            self._command("C", (*self._rel(*unpack(p1)), *end))
        self._x, self._y = x, y
        return self

    def quad(self, p1: Point | None, p: Point) -> PathDef:
        """Draw a quadratic Bézier curve to ``p``.

        Args:
            p1: Control point, or None for a smooth curve
            p: End point
        """
        x, y = unpack(p)
        end = self._rel(x, y)
        if p1 is None:
            self._command("T", end)
        else:
            self._command("Q", (*self._rel(*unpack(p1)), *end))
        self._x, self._y = x, y
        return self

    def arc(
        self,
        rx: float,
        ry: float,
        angle: float,
        large_arc: bool,
        sweep: bool,
        p: Point,
    ) -> PathDef:
        """Draw an elliptical arc to ``p``."""
        x, y = unpack(p)
        dx, dy = self._rel(x, y)
        letter = "A" if self._absolute else "a"
        self._parts.append(
            f"{letter}{self._fmt(rx)} {self._fmt(ry)} {self._fmt(angle)} "
            f"{int(large_arc)} {int(sweep)} {self._fmt(dx)} {self._fmt(dy)}"
        )
        self._x, self._y = x, y
        return self

    def close(self) -> PathDef:
        """Close the current subpath; the pen returns to its start."""
        self._parts.append("z")
        self._x, self._y = self._x0, self._y0
        return self

    def __str__(self) -> str:
        return "".join(self._parts)

    def __repr__(self) -> str:
        return f"PathDef({str(self)!r})"

    def __bool__(self) -> bool:
        return bool(self._parts)

    def _rel(self, x: float, y: float) -> tuple[float, float]:
        if self._absolute:
            return x, y
        return x - self._x, y - self._y

    def _fmt(self, value: float) -> str:
        return format_number(float(value), self._precision)

    def _command(self, letter: str, values: tuple[float, ...]) -> None:
        if not self._absolute:
            letter = letter.lower()
        self._parts.append(letter + " ".join(self._fmt(v) for v in values))


__all__ = ["DEFAULT_PRECISION", "PathDef"]
