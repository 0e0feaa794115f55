from .exceptions import ComputationError, DivisionByZero, InvalidArgument, QuaternionError
from .quat import Quat
from . import quat_op

__version__ = '0.1.0'
