"""Conversion of attribute values and text content to strings.

Attribute and text methods accept more than strings: numbers, booleans and
the geometry builders are converted here so callers can write
``rect.width(100)`` or ``path.d(PathDef().line((1, 2)))``.
"""

from __future__ import annotations

import math
from decimal import Decimal


def to_value(value: object) -> str:
    """Convert a value to its markup string form.

    - ``str`` is returned unchanged
    - ``bool`` becomes ``"true"`` / ``"false"`` (as HTML enumerated attributes
      like ``spellcheck`` and ``draggable`` expect)
    - ``int`` becomes its decimal form
    - ``float`` uses the shortest round-trip digits in plain decimal
      notation, never an exponent, and drops a trailing ``.0``
      (``2.0`` -> ``"2"``, ``1e-7`` -> ``"0.0000001"``)
    - anything else goes through ``str()``

    Examples:
        >>> to_value(True)
        'true'
        >>> to_value(2.0)
        '2'
        >>> to_value(0.25)
        '0.25'
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_value(value)
    return str(value)


def _float_value(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    # repr() gives the shortest round-trip digits; "f" spells out the exponent
    return format(Decimal(repr(value)).normalize(), "f")


__all__ = ["to_value"]
