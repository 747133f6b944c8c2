class NonInvertibleTransformationError(ZeroDivisionError):
    """
    Raised when inverting a transformation with a singular linear part
    (a zero scale or a zero determinant).
    """
