"""
A transformation restricted to uniform scaling followed by translation.

If the translation is `(x, y)` and the scale is `s`, a `TranslateScale` represents
the augmented matrix:

```
| s 0 x |
| 0 s y |
| 0 0 1 |
```

Products follow matrix multiplication. `a @ b` applies `b` first, then `a`, and is not
commutative. `ts @ point` is defined, `point @ ts` is not. Scalar products are not
commutative either: `2.0 * TranslateScale.from_translation(Vec2(1.0, 0.0))` has a
translation of `(2, 0)` while `TranslateScale.from_translation(Vec2(1.0, 0.0)) * 2.0`
keeps `(1, 0)`. Both have a scale of 2.
"""

import logging
import math
from dataclasses import dataclass, field
from functools import reduce
from typing import Self, overload

import serde

from translate_scale.affine import Affine
from translate_scale.error import NonInvertibleTransformationError
from translate_scale.primitives import Circle, Point, Rect, Scalar, Vec2

DEFAULT_TOLERANCE = 1e-9

# Non-collinear, so an affine map is determined by their images.
_PROBE_POINTS = (Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))


@serde.serde(type_check=serde.disabled)
@dataclass(frozen=True)
class TranslateScale:
    translation: Vec2 = field(default_factory=Vec2.zero)
    scale: float = 1.0

    @classmethod
    def identity(cls) -> Self:
        return cls(Vec2.zero(), 1.0)

    @classmethod
    def from_scale(cls, s: Scalar) -> Self:
        return cls(Vec2.zero(), s)

    @classmethod
    def from_translation(cls, translation: Vec2) -> Self:
        return cls(translation, 1.0)

    @classmethod
    def from_scale_about(cls, s: Scalar, focus: Point) -> Self:
        """
        Uniform scaling by `s` which keeps `focus` in place.
        """

        focus_vector = focus.to_vec2()
        return cls(focus_vector - focus_vector * s, s)

    def decompose(self) -> tuple[Vec2, float]:
        return self.translation, self.scale

    as_tuple = decompose

    def to_affine(self) -> Affine:
        t, s = self.translation, self.scale
        return Affine.new((s, 0.0, 0.0, s, t.x, t.y))

    def apply_to_point(self, point: Point) -> Point:
        return (point.to_vec2() * self.scale).to_point() + self.translation

    def apply_to_circle(self, circle: Circle) -> Circle:
        # A negative scale mirrors the circle through its mapped center.
        return Circle(self.apply_to_point(circle.center), abs(self.scale) * circle.radius)

    def apply_to_rect(self, rect: Rect) -> Rect:
        p0 = self.apply_to_point(Point(rect.x0, rect.y0))
        p1 = self.apply_to_point(Point(rect.x1, rect.y1))

        return Rect.from_points(p0, p1)

    def compose(self, other: 'TranslateScale') -> 'TranslateScale':
        """
        Transformation applying `other` first and `self` second.
        """

        return TranslateScale(
            self.translation + other.translation * self.scale,
            self.scale * other.scale,
        )

    def scale_by_left(self, k: Scalar) -> 'TranslateScale':
        return TranslateScale(self.translation * k, self.scale * k)

    def scale_by_right(self, k: Scalar) -> 'TranslateScale':
        return TranslateScale(self.translation, self.scale * k)

    def translate_by(self, offset: Vec2) -> 'TranslateScale':
        return TranslateScale(self.translation + offset, self.scale)

    def translate_by_negated(self, offset: Vec2) -> 'TranslateScale':
        return TranslateScale(self.translation - offset, self.scale)

    def is_invertible(self) -> bool:
        return self.scale != 0.0

    def inverse(self) -> 'TranslateScale':
        """
        Compute the inverse transformation.

        Composing a transformation with its inverse, on either side, gives the identity
        up to floating point rounding errors.

        Raises `NonInvertibleTransformationError` when the scale is zero.
        """

        if not self.is_invertible():
            logging.error(f'Cannot invert {self}: scale is zero')
            raise NonInvertibleTransformationError('TranslateScale with zero scale')

        scale_reciprocal = 1.0 / self.scale

        return TranslateScale(self.translation * -scale_reciprocal, scale_reciprocal)

    def is_finite(self) -> bool:
        return all(map(math.isfinite, self.__components()))

    def is_nan(self) -> bool:
        return any(map(math.isnan, self.__components()))

    def __components(self) -> tuple[float, float, float]:
        return self.translation.x, self.translation.y, self.scale

    @staticmethod
    def approx_eq(
        t1: 'TranslateScale',
        t2: 'TranslateScale',
        absolute_tolerance: float = DEFAULT_TOLERANCE,
    ) -> bool:
        return all(
            (t1 @ point).distance(t2 @ point) < absolute_tolerance for point in _PROBE_POINTS
        )

    @overload
    def __matmul__(self, other: Point) -> Point: ...

    @overload
    def __matmul__(self, other: 'TranslateScale') -> 'TranslateScale': ...

    @overload
    def __matmul__(self, other: Circle) -> Circle: ...

    @overload
    def __matmul__(self, other: Rect) -> Rect: ...

    def __matmul__(self, other: object) -> 'Point | TranslateScale | Circle | Rect':
        match other:
            case Point():
                return self.apply_to_point(other)

            case TranslateScale():
                return self.compose(other)

            case Circle():
                return self.apply_to_circle(other)

            case Rect():
                return self.apply_to_rect(other)

            case _:
                return NotImplemented

    def __mul__(self, other: object) -> 'TranslateScale':
        match other:
            case float() | int():
                return self.scale_by_right(other)

            case _:
                return NotImplemented

    def __rmul__(self, other: object) -> 'TranslateScale':
        match other:
            case float() | int():
                return self.scale_by_left(other)

            case _:
                return NotImplemented

    def __add__(self, other: object) -> 'TranslateScale':
        match other:
            case Vec2():
                return self.translate_by(other)

            case _:
                return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> 'TranslateScale':
        match other:
            case Vec2():
                return self.translate_by_negated(other)

            case _:
                return NotImplemented


def compose(*transformations: TranslateScale) -> TranslateScale:
    """
    Compose transformations right to left, like a matrix product.
    """

    return reduce(TranslateScale.compose, transformations, TranslateScale.identity())
