"""
Equation Solver Module

Isolates a target variable on the left of an equation by repeatedly moving
terms across the '=' sign and re-simplifying both sides, until the equation
stops changing.
"""
from __future__ import annotations
from typing import Optional
import logging

import config
from errors import ConvergenceError, NotAnEquation
from expr import BinOp, Expr, Monomial, Number, Op, UnaryMinus, is_equation
from monomial import is_target
from optimizer import optimize_expression

logger = logging.getLogger(__name__)


def _eq(lhs: Expr, rhs: Expr) -> BinOp:
    return BinOp(lhs, Op.EQUALS, rhs)


def _split(e: Expr, op: Op) -> Optional[BinOp]:
    if isinstance(e, BinOp) and e.op is op:
        return e
    return None


def apply_equation_rule(tree: Expr, target: str) -> Expr:
    """Apply the first transposition that moves `target` toward isolation."""
    if not is_equation(tree):
        raise NotAnEquation(str(tree))
    lhs, rhs = tree.lhs, tree.rhs

    # ======== addition ========
    left = _split(lhs, Op.ADD)
    if left is not None and is_target(left.lhs, target):
        logger.debug("T+a = b => T = b-a")
        return _eq(left.lhs, BinOp(rhs, Op.SUBTRACT, left.rhs))
    if left is not None and is_target(left.rhs, target):
        logger.debug("a+T = b => T = b-a")
        return _eq(left.rhs, BinOp(rhs, Op.SUBTRACT, left.lhs))

    right = _split(rhs, Op.ADD)
    if right is not None and is_target(right.lhs, target):
        logger.debug("a = T+b => a-T = b")
        return _eq(BinOp(lhs, Op.SUBTRACT, right.lhs), right.rhs)
    if right is not None and is_target(right.rhs, target):
        logger.debug("a = b+T => a-T = b")
        return _eq(BinOp(lhs, Op.SUBTRACT, right.rhs), right.lhs)

    # ======== subtraction ========
    left = _split(lhs, Op.SUBTRACT)
    if left is not None and is_target(left.lhs, target):
        logger.debug("T-a = b => T = b+a")
        return _eq(left.lhs, BinOp(rhs, Op.ADD, left.rhs))
    if left is not None and is_target(left.rhs, target):
        logger.debug("a-T = b => T = -b+a")
        return _eq(left.rhs, BinOp(UnaryMinus(rhs), Op.ADD, left.lhs))

    right = _split(rhs, Op.SUBTRACT)
    if right is not None and is_target(right.lhs, target):
        logger.debug("a = T-b => a-T = -b")
        return _eq(BinOp(lhs, Op.SUBTRACT, right.lhs), UnaryMinus(right.rhs))
    if right is not None and is_target(right.rhs, target):
        logger.debug("a = b-T => a+T = b")
        return _eq(BinOp(lhs, Op.ADD, right.rhs), right.lhs)

    # ======== unary ========
    if isinstance(lhs, UnaryMinus) and is_target(lhs.inner, target):
        logger.debug("-(T) = a => T = -(a)")
        return _eq(lhs.inner, UnaryMinus(rhs))

    # ======== monomial ========
    if is_target(lhs, target):
        logger.debug("reducing coefficient")
        return _eq(
            Monomial(1.0, lhs.variable, lhs.exponent),
            BinOp(rhs, Op.DIVIDE, Number(lhs.coefficient)),
        )

    return tree


def _normalize(tree: BinOp, target: str) -> BinOp:
    return _eq(optimize_expression(tree.lhs, target), optimize_expression(tree.rhs, target))


def optimize_equation(tree: Expr, target: str) -> Expr:
    """Isolate `target` on the left-hand side of an equation tree."""
    if not is_equation(tree):
        raise NotAnEquation(str(tree))
    previous = _normalize(tree, target)
    for steps in range(1, config.MAX_ITERATIONS + 1):
        current = _normalize(apply_equation_rule(previous, target), target)
        if current == previous:
            logger.debug("equation settled after %d steps: %s", steps, current)
            return current
        previous = current
    raise ConvergenceError(config.MAX_ITERATIONS)
