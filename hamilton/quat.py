import logging
import math
from numbers import Real

import numpy as np

from .exceptions import ComputationError, DivisionByZero, InvalidArgument

logger = logging.getLogger(__name__)


class Quat:
    """
    Quaternion q = real + i*I + j*J + k*K following Hamilton's rules

        I^2 = J^2 = K^2 = IJK = -1,  IJ = K,  JK = I,  KI = J

    Components are always stored as floats. `conjugate`, `negate` and
    `normalize` change the quaternion in place; the functions in
    `hamilton.quat_op` (and the arithmetic operators) return new objects.
    """

    def __init__(self, real, i, j, k):
        self.real = real
        self.i = i
        self.j = j
        self.k = k

    @classmethod
    def identity(cls):
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, a):
        a = np.asarray(a, dtype=float)
        if a.size != 4:
            raise InvalidArgument(f'Can\'t make Quat from {a.size} values')
        return cls(*a.ravel())

    def as_array(self):
        return np.array([self.real, self.i, self.j, self.k])

    # components
    @property
    def real(self):
        return self._real

    @real.setter
    def real(self, value):
        self._real = float(value)

    @property
    def i(self):
        return self._i

    @i.setter
    def i(self, value):
        self._i = float(value)

    @property
    def j(self):
        return self._j

    @j.setter
    def j(self, value):
        self._j = float(value)

    @property
    def k(self):
        return self._k

    @k.setter
    def k(self, value):
        self._k = float(value)

    def get_all_im(self):
        return {'i': self.i, 'j': self.j, 'k': self.k}

    def set_all_im(self, i, j, k):
        self.i = i
        self.j = j
        self.k = k

    # magnitude
    def length2(self):
        return self.real * self.real + self.i * self.i + self.j * self.j + self.k * self.k

    def norm(self):
        return math.sqrt(self.length2())

    # alias
    length = norm

    # in-place transformations
    def normalize(self, tol=None):
        """
        Scale to unit norm in place.

        Parameters
        ----------
        tol: float, optional
            Allowed deviation of the final norm from 1. The default, None,
            demands the norm be exactly 1.0, which rounding can break for
            perfectly valid input.

        Returns
        -------
        bool
            True on success.

        Raises
        ------
        DivisionByZero
            If the norm is zero.
        ComputationError
            If the norm after scaling is not 1.
        """
        n = self.norm()
        if n == 0.0:
            logger.debug('Refusing to normalize zero quaternion %s', self)
            raise DivisionByZero('Quaternion cannot be normalized, norm = 0')

        self.real /= n
        self.i /= n
        self.j /= n
        self.k /= n

        n = self.norm()
        failed = (n != 1.0) if tol is None else (abs(n - 1.0) > tol)
        if failed:
            logger.debug('Norm after normalizing %s is %r', self, n)
            raise ComputationError(
                f'Computation error while normalizing, norm = {n!r} != 1')
        return True

    def conjugate(self):
        self.set_all_im(-self.i, -self.j, -self.k)

    def negate(self):
        self.real = -self.real
        self.conjugate()

    def clone(self):
        return type(self)(self.real, self.i, self.j, self.k)

    __copy__ = clone

    def __iter__(self):
        return iter((self.real, self.i, self.j, self.k))

    def __str__(self):
        return f'{self.real} + {self.i}i + {self.j}j + {self.k}k'

    def __repr__(self):
        return f'{type(self).__name__}({self.real!r}, {self.i!r}, {self.j!r}, {self.k!r})'

    # arithmetic, see quat_op
    def __eq__(self, rhs):
        if not isinstance(rhs, Quat):
            return NotImplemented
        return quat_op.are_equal(self, rhs)

    __hash__ = None

    def __abs__(self):
        return self.norm()

    def __neg__(self):
        return quat_op.negate(self)

    def __add__(self, rhs):
        if isinstance(rhs, Quat):
            return quat_op.add(self, rhs)
        return NotImplemented

    def __sub__(self, rhs):
        if isinstance(rhs, Quat):
            return quat_op.sub(self, rhs)
        return NotImplemented

    def __mul__(self, rhs):
        if isinstance(rhs, Quat):
            # multiply two quaternions
            return quat_op.mult(self, rhs)

        if isinstance(rhs, np.ndarray) and rhs.size == 3:
            # rotate a 3-vector by this quaternion
            return quat_op.rotate(self, rhs)

        if _is_real(rhs):
            # multiply by a real number
            return quat_op.mult_real(self, rhs)

        return NotImplemented

    def __rmul__(self, lhs):
        # real multiples commute
        if _is_real(lhs):
            return quat_op.mult_real(self, lhs)
        return NotImplemented

    def __truediv__(self, rhs):
        if isinstance(rhs, Quat):
            return quat_op.div(self, rhs)

        if _is_real(rhs):
            return quat_op.mult_real(self, 1 / rhs)

        return NotImplemented


def _is_real(x):
    return isinstance(x, Real) and not isinstance(x, bool)


# quat_op needs Quat defined
from . import quat_op  # noqa: E402
