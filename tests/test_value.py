"""Tests for attribute/text value conversion."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tagloom import PathDef, Points
from tagloom.value import to_value


class TestToValue:
    """to_value() conversions."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("text", "text"),
            ("", ""),
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (-42, "-42"),
            (2.0, "2"),
            (-0.0, "0"),
            (0.25, "0.25"),
            (1.5e-7, "0.00000015"),
            (1e-7, "0.0000001"),
            (1e16, "10000000000000000"),
            (-2.5e21, "-2500000000000000000000"),
            (0.1 + 0.2, "0.30000000000000004"),
            (float("inf"), "inf"),
            (float("-inf"), "-inf"),
            (float("nan"), "NaN"),
        ],
    )
    def test_builtin_types(self, value: object, expected: str) -> None:
        assert to_value(value) == expected

    def test_bool_is_not_treated_as_int(self) -> None:
        assert to_value(True) != "1"

    def test_geometry_builders(self) -> None:
        assert to_value(PathDef().line((1, 2))) == "l1 2"
        assert to_value(Points([(0, 0), (1, 1)])) == "0,0 1,1"

    def test_arbitrary_object_uses_str(self) -> None:
        class Color:
            def __str__(self) -> str:
                return "rebeccapurple"

        assert to_value(Color()) == "rebeccapurple"

    @given(st.floats(allow_nan=False, allow_infinity=False))
    def test_finite_floats_use_plain_decimal_notation(self, value: float) -> None:
        text = to_value(value)
        assert "e" not in text.lower()
        assert float(text) == value
