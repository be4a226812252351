"""Fixed-precision number formatting shared by the geometry builders."""

from __future__ import annotations

from collections.abc import Sequence

# A point: any pair of real numbers, e.g. (3, 4), [2.5, 0]
Point = Sequence[float]


def format_number(value: float, precision: int) -> str:
    """Format ``value`` with ``precision`` decimal places, trimmed.

    With a non-zero precision, trailing zeros and then a trailing dot are
    removed, so whole numbers have no fractional part.

    Examples:
        >>> format_number(2.0001, 2)
        '2'
        >>> format_number(8.88888, 2)
        '8.89'
        >>> format_number(2.5, 0)
        '2'
    """
    text = f"{value:.{precision}f}"
    if precision > 0:
        text = text.rstrip("0").removesuffix(".")
    return text


def same_at_precision(v1: float, v2: float, precision: int) -> bool:
    """True if both values print identically at ``precision``."""
    return f"{v1:.{precision}f}" == f"{v2:.{precision}f}"


def check_precision(digits: int) -> int:
    if digits < 0:
        msg = f"precision must be >= 0, got {digits}"
        raise ValueError(msg)
    return digits


def unpack(point: Point) -> tuple[float, float]:
    """Split a point into float coordinates.

    Raises:
        ValueError: If the point does not have exactly two coordinates
    """
    try:
        x, y = point
    except (TypeError, ValueError):
        msg = f"point must be an (x, y) pair, got {point!r}"
        raise ValueError(msg) from None
    return float(x), float(y)


__all__ = ["Point", "check_precision", "format_number", "same_at_precision", "unpack"]
