from __future__ import annotations
from typing import Callable, Dict, Optional, Tuple
import logging
import numpy as np

import config
from errors import (
    EqualityInEval,
    ParseFailure,
    ParserError,
    UnboundVariable,
    UnknownFunction,
    WrongArity,
)
from expr import BinOp, Constant, Expr, Function, Monomial, Number, Op, UnaryMinus
from numeric import apply_op, deg_to_rad, fract, rad_to_deg, round_half_away, round_to
from parser import parse

logger = logging.getLogger(__name__)


def _avg(*xs: float) -> float:
    return sum(xs) / len(xs)


# name -> (arity, fn); arity None means one or more arguments.
# Trigonometry works in degrees.
_funcs: Dict[str, Tuple[Optional[int], Callable[..., float]]] = {
    "sin": (1, lambda x: np.sin(deg_to_rad(x))),
    "cos": (1, lambda x: np.cos(deg_to_rad(x))),
    "tan": (1, lambda x: np.tan(deg_to_rad(x))),
    "arcsin": (1, lambda x: rad_to_deg(np.arcsin(x))),
    "arccos": (1, lambda x: rad_to_deg(np.arccos(x))),
    "arctan": (1, lambda x: rad_to_deg(np.arctan(x))),
    "abs": (1, np.abs),
    "floor": (1, np.floor),
    "ceil": (1, np.ceil),
    "round": (1, round_half_away),
    "trunc": (1, np.trunc),
    "fract": (1, fract),
    "sqrt": (1, np.sqrt),
    "pow": (2, np.power),
    "min": (2, np.fmin),
    "max": (2, np.fmax),
    "avg": (None, _avg),
}


def _lookup(name: str, count: int) -> Callable[..., float]:
    entry = _funcs.get(name)
    if entry is None:
        raise UnknownFunction(name)
    arity, fn = entry
    if arity is None and count < 1:
        raise WrongArity(name, 1, count)
    if arity is not None and arity != count:
        raise WrongArity(name, arity, count)
    return fn


def eval_expression(ast: Expr) -> float:
    if isinstance(ast, Number):
        return ast.value
    if isinstance(ast, Constant):
        return ast.value
    if isinstance(ast, BinOp):
        # equality is rejected before either side is looked at
        if ast.op is Op.EQUALS:
            raise EqualityInEval()
        a = eval_expression(ast.lhs)
        b = eval_expression(ast.rhs)
        if ast.op is Op.MODULO:
            return abs(apply_op(Op.MODULO, a, b))
        return apply_op(ast.op, a, b)
    if isinstance(ast, UnaryMinus):
        return -1.0 * eval_expression(ast.inner)
    if isinstance(ast, Function):
        fn = _lookup(ast.name, len(ast.args))
        args = [eval_expression(arg) for arg in ast.args]
        with np.errstate(all="ignore"):
            return float(fn(*args))
    if isinstance(ast, Monomial):
        raise UnboundVariable(ast.variable)
    raise ValueError("Unknown AST node")


def evaluate(expression: str) -> float:
    """Parse and numerically reduce `expression`, rounded for display."""
    try:
        tree = parse(expression)
    except ParserError as err:
        raise ParseFailure(err) from err
    value = round_to(eval_expression(tree), config.ROUND_DIGITS)
    logger.debug("evaluated %r -> %s", expression, value)
    return value
