# tmath/errors.py


class TMathError(Exception):
    """
    Base class for every error raised by tmath.
    """


class BoundaryError(TMathError, IndexError):
    """
    A component index fell outside [0, N).
    """


class DimensionMismatchError(TMathError, ValueError):
    """
    Operands have different dimensions, or a dimension is not allowed.
    """


class ScalarTypeError(TMathError, TypeError):
    """
    Unsupported or mixed scalar types, or an operation the scalar type cannot do.
    """


class DomainError(TMathError, ArithmeticError):
    """
    Arithmetic outside the domain of the scalar type.
    """


class IntegerDivisionByZero(DomainError, ZeroDivisionError):
    pass


class DegenerateRayError(DomainError, ZeroDivisionError):
    """
    A ray with a zero-length direction was used in an intersection test.
    """
