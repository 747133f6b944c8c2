from .affine import Affine
from .error import NonInvertibleTransformationError
from .primitives import Circle, Point, Rect, Vec2
from .transformation import TranslateScale, compose

__all__ = [
    'Affine',
    'Circle',
    'NonInvertibleTransformationError',
    'Point',
    'Rect',
    'TranslateScale',
    'Vec2',
    'compose',
]
