"""Builders for SVG geometry attribute values.

Both render with ``str()`` and can be passed directly to the ``d`` and
``points`` attribute methods.
"""

from tagloom.geometry.numbers import format_number
from tagloom.geometry.path import PathDef
from tagloom.geometry.points import Points

__all__ = ["PathDef", "Points", "format_number"]
