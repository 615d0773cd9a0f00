from __future__ import annotations
import math
import numpy as np

from expr import Op
from errors import EqualityInEval


def deg_to_rad(a: float) -> float:
    return a * (math.pi / 180.0)


def rad_to_deg(x: float) -> float:
    return x * (180.0 / math.pi)


def round_to(value: float, digits: int) -> float:
    if not math.isfinite(value):
        return value
    return round(value, digits)


def round_half_away(x: float) -> float:
    return float(np.copysign(np.floor(np.abs(x) + 0.5), x))


def fract(x: float) -> float:
    return float(x - np.trunc(x))


def is_whole(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer()


def apply_op(op: Op, a: float, b: float) -> float:
    """Apply a binary operator with IEEE double semantics.

    Division by zero yields +-inf or NaN instead of raising, `%` is the
    truncated remainder (sign of the dividend) and `^` is a real power.
    """
    x, y = np.float64(a), np.float64(b)
    with np.errstate(all="ignore"):
        if op is Op.ADD:
            r = x + y
        elif op is Op.SUBTRACT:
            r = x - y
        elif op is Op.MULTIPLY:
            r = x * y
        elif op is Op.DIVIDE:
            r = np.divide(x, y)
        elif op is Op.MODULO:
            r = np.fmod(x, y)
        elif op is Op.POWER:
            r = np.power(x, y)
        else:
            raise EqualityInEval()
    return float(r)
