import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self, overload

import serde
import torch
from jaxtyping import Float

from translate_scale.error import NonInvertibleTransformationError
from translate_scale.primitives import Point, Scalar, Vec2
from translate_scale.serialization import tensor
from translate_scale.serialization.tensor import (
    deserialize_tensor,
    serialize_tensor,
)

# Initialize global tensor serializer & deserializer.
tensor.init()


@serde.serde(type_check=serde.disabled)
@dataclass(eq=False)
class Affine:
    """
    A general 2D affine transformation.

    Coefficients `[a, b, c, d, e, f]` are stored column-major, linear part first,
    as the augmented matrix:

    ```
    | a c e |
    | b d f |
    | 0 0 1 |
    ```
    """

    matrix: Float[torch.Tensor, '3 3'] = serde.field(
        serializer=serialize_tensor,
        deserializer=deserialize_tensor,
    )

    def __init__(self, matrix: Float[torch.Tensor, '3 3']) -> None:
        self.matrix = matrix.to(dtype=torch.float64, copy=True)

    @classmethod
    def new(cls, coefficients: Sequence[Scalar]) -> Self:
        a, b, c, d, e, f = coefficients

        return cls(
            torch.tensor(
                [
                    [a, c, e],
                    [b, d, f],
                    [0.0, 0.0, 1.0],
                ],
                dtype=torch.float64,
            )
        )

    @classmethod
    def identity(cls) -> Self:
        return cls(torch.eye(3, 3, dtype=torch.float64))

    @classmethod
    def scale(cls, s: Scalar) -> Self:
        return cls.new((s, 0.0, 0.0, s, 0.0, 0.0))

    @classmethod
    def translate(cls, translation: Vec2) -> Self:
        return cls.new((1.0, 0.0, 0.0, 1.0, translation.x, translation.y))

    def coefficients(self) -> tuple[float, float, float, float, float, float]:
        m = self.matrix

        return (
            float(m[0, 0]),
            float(m[1, 0]),
            float(m[0, 1]),
            float(m[1, 1]),
            float(m[0, 2]),
            float(m[1, 2]),
        )

    def determinant(self) -> float:
        return float(torch.linalg.det(self.matrix[:2, :2]))

    def inverse(self) -> 'Affine':
        try:
            return Affine(torch.linalg.inv(self.matrix))

        except torch.linalg.LinAlgError as error:
            logging.error(f'Cannot invert {self}: matrix is singular')
            raise NonInvertibleTransformationError('Singular affine transformation') from error

    def apply_to_point(self, point: Point) -> Point:
        homogeneous = torch.tensor((point.x, point.y, 1.0), dtype=torch.float64)
        x, y, _ = (self.matrix @ homogeneous).tolist()

        return Point(x, y)

    @overload
    def __matmul__(self, other: Point) -> Point: ...

    @overload
    def __matmul__(self, other: 'Affine') -> 'Affine': ...

    def __matmul__(self, other: object) -> 'Point | Affine':
        match other:
            case Point():
                return self.apply_to_point(other)

            case Affine():
                return Affine(self.matrix @ other.matrix)

            case _:
                return NotImplemented

    def __eq__(self, other: object, /) -> bool:
        return isinstance(other, Affine) and bool(self.matrix.eq(other.matrix).all())

    def __repr__(self) -> str:
        return f'Affine({list(self.coefficients())})'

    @staticmethod
    def approx_eq(
        a1: 'Affine',
        a2: 'Affine',
        absolute_tolerance: float = 1e-9,
        relative_tolerance: float = 0.0,
    ) -> bool:
        return bool(
            torch.isclose(
                a1.matrix,
                a2.matrix,
                rtol=relative_tolerance,
                atol=absolute_tolerance,
            ).all()
        )
