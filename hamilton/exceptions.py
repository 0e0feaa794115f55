class QuaternionError(Exception):
    pass


class InvalidArgument(QuaternionError, TypeError):
    """A quaternion, real scalar or 3-vector was expected and not given."""


class DivisionByZero(QuaternionError, ZeroDivisionError):
    """Normalizing or inverting a quaternion whose norm is zero."""


class ComputationError(QuaternionError, ArithmeticError):
    """The norm of a normalized quaternion came out different from 1."""
