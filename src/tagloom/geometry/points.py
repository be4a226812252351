"""Polygon / polyline ``points`` builder."""

from __future__ import annotations

from collections.abc import Iterable

from tagloom.geometry.numbers import Point, check_precision, format_number, unpack
from tagloom.geometry.path import DEFAULT_PRECISION


class Points:
    """Chainable builder for the ``points`` attribute.

    Points are written as ``x,y`` pairs separated by single spaces:

        >>> str(Points().add((1, 2)).add((2.5, 1)))
        '1,2 2.5,1'
    """

    __slots__ = ("_precision", "_parts")

    def __init__(
        self,
        points: Iterable[Point] = (),
        *,
        precision: int = DEFAULT_PRECISION,
    ) -> None:
        self._precision = check_precision(precision)
        self._parts: list[str] = []
        self.extend(points)

    def precision(self, digits: int) -> Points:
        """Set the number of decimal places for points added later.

        Raises:
            ValueError: If digits is negative
        """
        self._precision = check_precision(digits)
        return self

    def add(self, p: Point) -> Points:
        """Add one point."""
        x, y = unpack(p)
        self._parts.append(
            f"{format_number(x, self._precision)},{format_number(y, self._precision)}"
        )
        return self

    def extend(self, points: Iterable[Point]) -> Points:
        for p in points:
            self.add(p)
        return self

    def __len__(self) -> int:
        return len(self._parts)

    def __str__(self) -> str:
        return " ".join(self._parts)

    def __repr__(self) -> str:
        return f"Points({str(self)!r})"


__all__ = ["Points"]
