"""
Operations on quaternions.

Every function checks that its quaternion arguments really are `Quat`
objects and returns a new `Quat`; the arguments are never modified.

Example
-------
>>> a = Quat(2, 4, 2, -0.5)
>>> b = Quat(1, 2, 3, 0.5)
>>> print(mult(a, b))
-11.75 + 10.5i + 5.0j + 8.5k
>>> print(mult(b, a))
-11.75 + 5.5i + 11.0j + -7.5k
>>> print(sub(a, b))
1.0 + 2.0i + -1.0j + -1.0k
"""

import logging

import numpy as np
from mpmath import mp

from .exceptions import DivisionByZero, InvalidArgument
from .quat import Quat, _is_real

logger = logging.getLogger(__name__)


def is_quaternion(q):
    return isinstance(q, Quat)


def _check(*args):
    for q in args:
        if not is_quaternion(q):
            raise InvalidArgument(
                f'Parameter needs to be a Quat object, got {type(q).__name__}: {q!r}')


def length2(q):
    _check(q)
    return q.length2()


def norm(q):
    _check(q)
    return q.norm()


def conjugate(q):
    _check(q)
    q2 = q.clone()
    q2.conjugate()
    return q2


def negate(q):
    _check(q)
    q2 = q.clone()
    q2.negate()
    return q2


def normalized(q, tol=None):
    _check(q)
    q2 = q.clone()
    q2.normalize(tol)
    return q2


def are_equal(q1, q2):
    # exact, no tolerance
    _check(q1, q2)
    return (q1.real == q2.real and q1.i == q2.i
            and q1.j == q2.j and q1.k == q2.k)


def are_close(q1, q2, rel_eps=None, abs_eps=None):
    """
    Componentwise comparison of two quaternions within a tolerance, using
    `mpmath.mp.almosteq`. When both epsilons are None, mpmath's defaults for
    the working precision apply.
    """
    _check(q1, q2)
    return all(mp.almosteq(s, t, rel_eps, abs_eps) for s, t in zip(q1, q2))


def add(q1, q2):
    _check(q1, q2)
    return Quat(q1.real + q2.real,
                q1.i + q2.i,
                q1.j + q2.j,
                q1.k + q2.k)


def sub(q1, q2):
    _check(q1, q2)
    return add(q1, negate(q2))


def mult_real(q, x):
    if not is_quaternion(q) or not _is_real(x):
        raise InvalidArgument(
            f'A Quat and a real number are needed, got {q!r} and {x!r}')
    return Quat(x * q.real, x * q.i, x * q.j, x * q.k)


def mult(q1, q2):
    """
    Hamilton product q1 * q2, computed with 9 multiplications instead of the
    16 of `mult_direct`.
    """
    _check(q1, q2)
    a, b, c, d = q1
    x, y, z, w = q2

    t0 = (d - c) * (z - w)
    t1 = (a + b) * (x + y)
    t2 = (a - b) * (z + w)
    t3 = (c + d) * (x - y)
    t4 = (d - b) * (y - z)
    t5 = (d + b) * (y + z)
    t6 = (a + c) * (x - w)
    t7 = (a - c) * (x + w)
    t8 = t5 + t6 + t7
    t9 = 0.5 * (t4 + t8)

    return Quat(t0 + t9 - t5,
                t1 + t9 - t8,
                t2 + t9 - t7,
                t3 + t9 - t6)


def mult_direct(q1, q2):
    _check(q1, q2)
    a, b, c, d = q1
    x, y, z, w = q2
    return Quat(a * x - b * y - c * z - d * w,
                a * y + b * x + c * w - d * z,
                a * z - b * w + c * x + d * y,
                a * w + b * z - c * y + d * x)


def inverse(q):
    """
    Multiplicative inverse, conj(q) / |q|^2.

    Raises
    ------
    DivisionByZero
        If the norm of `q` is zero.
    """
    _check(q)
    n2 = q.length2()
    if n2 == 0:
        logger.debug('Zero quaternion %s has no inverse', q)
        raise DivisionByZero('Quaternion norm is zero, cannot calculate inverse')
    return mult_real(conjugate(q), 1 / n2)


def div(q1, q2):
    # left division: inverse(q2) * q1
    _check(q1, q2)
    return mult(inverse(q2), q1)


def rotate(q, v):
    """
    Rotate the 3-vector `v` by the quaternion `q`: q * (0, v) * q^-1.

    Returns
    -------
    np.ndarray
        The rotated vector, shape (3,).
    """
    _check(q)
    v = np.asarray(v, dtype=float)
    if v.size != 3:
        raise InvalidArgument(f'Can\'t rotate a vector with {v.size} components')

    r = mult(q, mult(Quat(0.0, *v.ravel()), inverse(q)))
    return np.array([r.i, r.j, r.k])
