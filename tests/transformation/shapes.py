import pytest
from hypothesis import given
from strategies import assert_near, legal_transformations, points
from translate_scale import Circle, Point, Rect, TranslateScale, Vec2


def test_circle_center_and_radius() -> None:
    ts = TranslateScale(Vec2(1.0, 2.0), 3.0)
    circle = ts @ Circle(Point(1.0, 1.0), 2.0)

    assert_near(circle.center, Point(4.0, 5.0))
    assert circle.radius == 6.0


def test_circle_radius_stays_non_negative() -> None:
    ts = TranslateScale(Vec2(0.0, 0.0), -2.0)
    circle = ts.apply_to_circle(Circle(Point(1.0, 0.0), 1.5))

    assert_near(circle.center, Point(-2.0, 0.0))
    assert circle.radius == 3.0


def test_circle_rejects_negative_radius() -> None:
    with pytest.raises(ValueError):
        Circle(Point(0.0, 0.0), -1.0)


def test_rect_corners() -> None:
    ts = TranslateScale(Vec2(1.0, -1.0), 2.0)
    rect = ts @ Rect(0.0, 0.0, 2.0, 3.0)

    assert rect == Rect(1.0, -1.0, 5.0, 5.0)


def test_rect_is_normalized_under_negative_scale() -> None:
    ts = TranslateScale.from_scale(-1.0)
    rect = ts.apply_to_rect(Rect(1.0, 2.0, 3.0, 5.0))

    assert rect == Rect(-3.0, -5.0, -1.0, -2.0)
    assert rect.width == 2.0
    assert rect.height == 3.0


@given(legal_transformations(), points(), points())
def test_rect_matches_mapped_corners(ts: TranslateScale, p0: Point, p1: Point) -> None:
    rect = ts @ Rect.from_points(p0, p1)
    expected = Rect.from_points(ts @ p0, ts @ p1)

    assert rect.x0 <= rect.x1
    assert rect.y0 <= rect.y1
    assert_near(rect.origin(), expected.origin())
    assert_near(rect.center(), expected.center())
