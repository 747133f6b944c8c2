import math
from dataclasses import dataclass
from typing import Self, TypeAlias

import serde
from attrs import Attribute, field, frozen

Scalar: TypeAlias = float | int


@serde.serde(type_check=serde.disabled)
@dataclass(frozen=True)
class Vec2:
    x: float
    y: float

    @classmethod
    def zero(cls) -> Self:
        return cls(0.0, 0.0)

    def to_point(self) -> 'Point':
        return Point(self.x, self.y)

    def hypot(self) -> float:
        return math.hypot(self.x, self.y)

    def __add__(self, other: object) -> 'Vec2':
        match other:
            case Vec2(x, y):
                return Vec2(self.x + x, self.y + y)

            case _:
                return NotImplemented

    def __sub__(self, other: object) -> 'Vec2':
        match other:
            case Vec2(x, y):
                return Vec2(self.x - x, self.y - y)

            case _:
                return NotImplemented

    def __neg__(self) -> 'Vec2':
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: object) -> 'Vec2':
        match other:
            case float() | int():
                return Vec2(self.x * other, self.y * other)

            case _:
                return NotImplemented

    def __rmul__(self, other: object) -> 'Vec2':
        return self.__mul__(other)

    def __truediv__(self, other: object) -> 'Vec2':
        match other:
            case float() | int():
                return Vec2(self.x / other, self.y / other)

            case _:
                return NotImplemented


@serde.serde(type_check=serde.disabled)
@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def origin(cls) -> Self:
        return cls(0.0, 0.0)

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)

    def distance(self, other: 'Point') -> float:
        return (self - other).hypot()

    def __add__(self, other: object) -> 'Point':
        match other:
            case Vec2(x, y):
                return Point(self.x + x, self.y + y)

            case _:
                return NotImplemented

    # Point - Point is a displacement, Point - Vec2 is another point.
    def __sub__(self, other: object) -> 'Point | Vec2':
        match other:
            case Point(x, y):
                return Vec2(self.x - x, self.y - y)

            case Vec2(x, y):
                return Point(self.x - x, self.y - y)

            case _:
                return NotImplemented


@frozen
class Rect:
    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_points(cls, p0: Point, p1: Point) -> Self:
        return cls(
            min(p0.x, p1.x),
            min(p0.y, p1.y),
            max(p0.x, p1.x),
            max(p0.y, p1.y),
        )

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def origin(self) -> Point:
        return Point(self.x0, self.y0)

    def center(self) -> Point:
        return Point(0.5 * (self.x0 + self.x1), 0.5 * (self.y0 + self.y1))


def _not_negative(instance: object, attribute: 'Attribute[float]', value: float) -> None:
    # NaN compares false and is let through.
    if value < 0.0:
        raise ValueError(f'{attribute.name!r} must be >= 0.0: {value}')


@frozen
class Circle:
    center: Point
    radius: float = field(validator=_not_negative)
