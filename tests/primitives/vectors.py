import math

import pytest
from translate_scale import Point, Vec2


def test_vector_arithmetic() -> None:
    v = Vec2(3.0, 4.0)

    assert v + Vec2(1.0, 1.0) == Vec2(4.0, 5.0)
    assert v - Vec2(1.0, 1.0) == Vec2(2.0, 3.0)
    assert -v == Vec2(-3.0, -4.0)
    assert v * 2.0 == 2.0 * v == Vec2(6.0, 8.0)
    assert v / 2.0 == Vec2(1.5, 2.0)
    assert v.hypot() == 5.0


def test_point_arithmetic() -> None:
    p = Point(1.0, 2.0)

    assert p + Vec2(1.0, -1.0) == Point(2.0, 1.0)
    assert p - Vec2(1.0, -1.0) == Point(0.0, 3.0)
    assert p - Point(4.0, 6.0) == Vec2(-3.0, -4.0)
    assert p.distance(Point(4.0, 6.0)) == 5.0


def test_conversions() -> None:
    assert Point(1.0, 2.0).to_vec2() == Vec2(1.0, 2.0)
    assert Vec2(1.0, 2.0).to_point() == Point(1.0, 2.0)
    assert Vec2.zero().to_point() == Point.origin()


def test_point_plus_point_is_undefined() -> None:
    with pytest.raises(TypeError):
        Point(1.0, 2.0) + Point(1.0, 2.0)  # type: ignore[operator]


def test_non_finite_values_propagate() -> None:
    v = Vec2(float('nan'), 1.0) * 2.0

    assert math.isnan(v.x)
    assert v.y == 2.0
