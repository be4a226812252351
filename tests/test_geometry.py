"""Tests for the SVG geometry builders."""

import pytest

from tagloom.geometry import PathDef, Points, format_number


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "precision", "expected"),
        [
            (2.0001, 2, "2"),
            (0.003, 2, "0"),
            (8.88888, 2, "8.89"),
            (1.10, 3, "1.1"),
            (10.0, 2, "10"),
            (100, 1, "100"),
            (2.6, 0, "3"),
            (-6, 2, "-6"),
        ],
    )
    def test_format_number(self, value: float, precision: int, expected: str) -> None:
        assert format_number(value, precision) == expected


class TestPathDef:
    def test_empty(self) -> None:
        assert str(PathDef()) == ""
        assert not PathDef()

    def test_move(self) -> None:
        assert str(PathDef().move_to((1, 2))) == "m1 2"

    def test_line(self) -> None:
        assert str(PathDef().line([2, 1])) == "l2 1"

    def test_horizontal(self) -> None:
        assert str(PathDef().line((2.0001, 0.003))) == "h2"

    def test_vertical(self) -> None:
        assert str(PathDef().line((0, -6))) == "v-6"

    def test_cubic(self) -> None:
        assert str(PathDef().cubic((1, 0), (5, 5), (0, 10))) == "c1 0 5 5 0 10"

    def test_cubic_smooth(self) -> None:
        assert str(PathDef().cubic(None, (5, 5), (0, 10))) == "s5 5 0 10"

    def test_quad(self) -> None:
        assert str(PathDef().quad((1, 0), (0, 10))) == "q1 0 0 10"

    def test_quad_smooth(self) -> None:
        assert str(PathDef().quad(None, (0, 10))) == "t0 10"

    def test_arc(self) -> None:
        path = PathDef().arc(20, 25, 90, True, False, (50, 10))
        assert str(path) == "a20 25 90 1 0 50 10"

    def test_relative(self) -> None:
        assert str(PathDef().line((2, 4)).line((4, 2))) == "l2 4l2 -2"

    def test_relative_curves_use_pen(self) -> None:
        path = PathDef().move_to((10, 10)).cubic((11, 10), (15, 15), (10, 20))
        assert str(path) == "m10 10c1 0 5 5 0 10"

    def test_two_decimal_places(self) -> None:
        path = PathDef().absolute(True).precision(2)
        path.line((2.2222, 9.994)).line((4.444444, 8.88888))
        assert str(path) == "L2.22 9.99L4.44 8.89"

    def test_three_decimal_places(self) -> None:
        path = PathDef(precision=3)
        path.line((2.2222, 9.994)).line((4.444444, 8.88888)).line((5.444444, 8.88888))
        assert str(path) == "l2.222 9.994l2.222 -1.105h1"

    def test_absolute_commands(self) -> None:
        path = PathDef(absolute=True)
        path.move_to((1, 1)).line((5, 1)).line((5, 4)).quad(None, (0, 0)).close()
        assert str(path) == "M1 1H5V4T0 0z"

    def test_close_returns_to_subpath_start(self) -> None:
        path = PathDef()
        path.move_to((0, 0)).line((5, 5)).line((5, 0)).close()
        path.move_to((10, 0)).line((15, 5)).line((15, 0)).close()
        assert str(path) == "m0 0l5 5v-5zm10 0l5 5v-5z"

    def test_move_without_close(self) -> None:
        path = PathDef()
        path.move_to((0, 0)).line((5, 5)).line((5, 0))
        path.move_to((10, 0)).line((15, 5)).line((15, 0)).close()
        assert str(path) == "m0 0l5 5v-5m5 0l5 5v-5z"

    def test_mode_switch_midway(self) -> None:
        path = PathDef().move_to((3, 3)).absolute().line((6, 7))
        assert str(path) == "m3 3L6 7"

    def test_zero_precision(self) -> None:
        assert str(PathDef(precision=0).line((1.4, 2.6))) == "l1 3"

    def test_negative_precision(self) -> None:
        with pytest.raises(ValueError, match="precision"):
            PathDef().precision(-1)

    def test_bad_point(self) -> None:
        with pytest.raises(ValueError, match="pair"):
            PathDef().line((1, 2, 3))

    def test_repr(self) -> None:
        assert repr(PathDef().line((1, 1))) == "PathDef('l1 1')"


class TestPoints:
    def test_empty(self) -> None:
        assert str(Points()) == ""
        assert len(Points()) == 0

    def test_single(self) -> None:
        assert str(Points().add((1, 2))) == "1,2"

    def test_pairs(self) -> None:
        assert str(Points().add((1, 2)).add((2, 1))) == "1,2 2,1"

    def test_rounding(self) -> None:
        assert str(Points().add((2.0001, 0.003))) == "2,0"

    def test_two_decimal_places(self) -> None:
        points = Points([(2.2222, 9.994), (4.444444, 8.88888)])
        assert str(points) == "2.22,9.99 4.44,8.89"

    def test_three_decimal_places(self) -> None:
        points = Points().precision(3)
        points.extend([(2.2222, 9.994), (4.444444, 8.88888), (5.444444, 8.88888)])
        assert str(points) == "2.222,9.994 4.444,8.889 5.444,8.889"
        assert len(points) == 3

    def test_bad_point(self) -> None:
        with pytest.raises(ValueError, match="pair"):
            Points().add(5)  # type: ignore[arg-type]
