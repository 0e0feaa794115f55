#!/usr/bin/env python3
"""
Rotate the vector [3, 5, -2] by 90 degrees about the x axis using
r = q * w * q^-1.

Run as ``python -m hamilton.rotation``.
"""

import logging
import sys

from mpmath import mp

from .quat import Quat
from . import quat_op

logger = logging.getLogger(__name__)

# half of the rotation angle
with mp.workdps(30):
    C45 = mp.cos(mp.pi / 4)
    S45 = mp.sin(mp.pi / 4)


def VectorName(q):
    # show the imaginary part as a 3-vector, tiny rounding residues dropped
    v = q.get_all_im()
    return '[' + ', '.join(mp.nstr(mp.chop(v[c], 1e-12), 15) for c in 'ijk') + ']'


def rotate_vector_demo():
    # the vector [3,5,-2] represented as a quaternion (real=0)
    w = Quat(0, 3, 5, -2)
    # a pi/2 rotation about [1, 0, 0] and its inverse
    q = Quat(C45, S45, 0, 0)
    iq = quat_op.inverse(q)

    # r = q * w * iq
    r = quat_op.mult(q, quat_op.mult(w, iq))
    logger.debug('rotated %r into %r', w, r)
    return w, q, iq, r


def main():
    w, q, iq, r = rotate_vector_demo()

    print(f'The vector [3,5,-2] represented as a quaternion (real=0) w = {w}')
    print(f'The unit vector [1, 0, 0] rotated pi/2 radians q = {q}')
    print(f'and its inverse 1/q = {iq}')
    print(f'The rotated quaternion (real ~ 0) r = q w (1/q) = {r}')
    print(f'and the final 3D vector [i,j,k]: {VectorName(r)}')
    return 0


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
