"""
Term-rewriting simplifier.

One pass of `optimize_node` rewrites a tree bottom-up: children first, then
the first matching rule for the node's operator. `merge_numbers` folds
literal arithmetic whose result is a whole number. `optimize_expression`
alternates both passes until `optimize_node` stops changing the tree.
"""
from __future__ import annotations
from typing import Callable, Dict, Optional
import logging

import config
from errors import ConvergenceError, EqualityInEval
from expr import BinOp, Constant, Expr, Function, Monomial, Number, Op, UnaryMinus
from monomial import distribute_monomials
from numeric import apply_op, is_whole

logger = logging.getLogger(__name__)

Rule = Callable[[Expr, Expr], Optional[Expr]]


def _is_number(e: Expr, value: float) -> bool:
    return isinstance(e, Number) and e.value == value


def _both_monomials(a: Expr, b: Expr) -> bool:
    return isinstance(a, Monomial) and isinstance(b, Monomial)


def _rule(name: str) -> None:
    logger.debug(name)


# =====================
# Node-local rules, lhs/rhs already optimized
# =====================


def _add_rules(lhs: Expr, rhs: Expr) -> Optional[Expr]:
    if _is_number(lhs, 0.0):
        _rule("0+a=a")
        return rhs
    if _is_number(rhs, 0.0):
        _rule("a+0=a")
        return lhs
    # equal monomials are merged by distribute_monomials
    if lhs == rhs and not _both_monomials(lhs, rhs):
        _rule("a+a=2a")
        return BinOp(Number(2.0), Op.MULTIPLY, lhs)
    if isinstance(rhs, UnaryMinus):
        _rule("a+(-b)=a-b")
        return BinOp(lhs, Op.SUBTRACT, rhs.inner)
    return None


def _subtract_rules(lhs: Expr, rhs: Expr) -> Optional[Expr]:
    if _is_number(rhs, 0.0):
        _rule("a-0=a")
        return lhs
    if _is_number(lhs, 0.0):
        _rule("0-a=-a")
        return UnaryMinus(rhs)
    if lhs == rhs:
        _rule("a-a=0")
        return Number(0.0)
    if isinstance(rhs, UnaryMinus):
        _rule("a-(-b)=a+b")
        return BinOp(lhs, Op.ADD, rhs.inner)
    return None


def _multiply_rules(lhs: Expr, rhs: Expr) -> Optional[Expr]:
    if _is_number(lhs, 1.0):
        _rule("1*a=a")
        return rhs
    if _is_number(rhs, 1.0):
        _rule("a*1=a")
        return lhs
    if _is_number(lhs, 0.0):
        _rule("0*a=0")
        return Number(0.0)
    if _is_number(rhs, 0.0):
        _rule("a*0=0")
        return Number(0.0)
    if lhs == rhs and not _both_monomials(lhs, rhs):
        _rule("a*a=a^2")
        return BinOp(lhs, Op.POWER, Number(2.0))
    if (
        isinstance(lhs, BinOp)
        and isinstance(rhs, BinOp)
        and lhs.op is Op.POWER
        and rhs.op is Op.POWER
        and lhs.lhs == rhs.lhs
    ):
        _rule("a^b*a^c=a^(b+c)")
        return BinOp(lhs.lhs, Op.POWER, BinOp(lhs.rhs, Op.ADD, rhs.rhs))
    if isinstance(lhs, Number) and isinstance(rhs, BinOp) and rhs.op in (Op.ADD, Op.SUBTRACT):
        _rule("n*(b<op>c)=n*b<op>n*c")
        return BinOp(
            BinOp(lhs, Op.MULTIPLY, rhs.lhs),
            rhs.op,
            BinOp(lhs, Op.MULTIPLY, rhs.rhs),
        )
    if isinstance(lhs, Number) and isinstance(rhs, Monomial):
        _rule("n*bX^c=(n*b)X^c")
        return Monomial(lhs.value * rhs.coefficient, rhs.variable, rhs.exponent)
    return None


def _divide_rules(lhs: Expr, rhs: Expr) -> Optional[Expr]:
    if _is_number(rhs, 1.0):
        _rule("a/1=a")
        return lhs
    if isinstance(lhs, Monomial) and isinstance(rhs, Number):
        _rule("bX^c/n=(b/n)X^c")
        return Monomial(apply_op(Op.DIVIDE, lhs.coefficient, rhs.value), lhs.variable, lhs.exponent)
    if lhs == rhs:
        _rule("a/a=1")
        return Number(1.0)
    return None


def _power_rules(lhs: Expr, rhs: Expr) -> Optional[Expr]:
    if _is_number(rhs, 0.0):
        _rule("a^0=1")
        return Number(1.0)
    if _is_number(rhs, 1.0):
        _rule("a^1=a")
        return lhs
    if isinstance(rhs, UnaryMinus) and isinstance(rhs.inner, Number):
        _rule("a^(-n)=1/a^n")
        return BinOp(Number(1.0), Op.DIVIDE, BinOp(lhs, Op.POWER, rhs.inner))
    return None


_NODE_RULES: Dict[Op, Rule] = {
    Op.ADD: _add_rules,
    Op.SUBTRACT: _subtract_rules,
    Op.MULTIPLY: _multiply_rules,
    Op.DIVIDE: _divide_rules,
    Op.POWER: _power_rules,
}


def _optimize_monomial(m: Monomial) -> Expr:
    if m.coefficient == 0.0:
        _rule("collapsing monomial due to coefficient")
        return Number(0.0)
    if m.exponent == 0.0:
        _rule("collapsing monomial due to exponent")
        return Number(1.0)
    if m.coefficient < 0.0:
        _rule("applying unary to coefficient")
        return UnaryMinus(Monomial(-m.coefficient, m.variable, m.exponent))
    return m


def _optimize_unary(inner: Expr) -> Expr:
    if isinstance(inner, UnaryMinus):
        _rule("--a=a")
        return inner.inner
    if isinstance(inner, BinOp):
        if inner.op in (Op.ADD, Op.SUBTRACT):
            _rule("-(a<op>b)=-a<op>-b")
            return BinOp(UnaryMinus(inner.lhs), inner.op, UnaryMinus(inner.rhs))
        if inner.op in (Op.MULTIPLY, Op.DIVIDE, Op.MODULO):
            _rule("-(a<op>b)=-a<op>b")
            return BinOp(UnaryMinus(inner.lhs), inner.op, inner.rhs)
    return UnaryMinus(inner)


def optimize_node(tree: Expr, target: str = "") -> Expr:
    """Run one bottom-up pass of the node-local rewrite rules."""
    if isinstance(tree, BinOp):
        lhs = optimize_node(tree.lhs, target)
        rhs = optimize_node(tree.rhs, target)
        if tree.op is Op.EQUALS:
            return BinOp(lhs, Op.EQUALS, rhs)
        rules = _NODE_RULES.get(tree.op)
        if rules is not None:
            rewritten = rules(lhs, rhs)
            if rewritten is not None:
                return rewritten
        return distribute_monomials(lhs, tree.op, rhs, target)
    if isinstance(tree, Monomial):
        return _optimize_monomial(tree)
    if isinstance(tree, UnaryMinus):
        return _optimize_unary(optimize_node(tree.inner, target))
    if isinstance(tree, Function):
        return Function(tree.name, tuple(optimize_node(arg, target) for arg in tree.args))
    if isinstance(tree, (Number, Constant)):
        return tree
    raise TypeError(f"Unsupported node {tree!r}")


def merge_numbers(tree: Expr) -> Expr:
    """Fold literal BinOps whose result is a whole number; keep the rest."""
    if isinstance(tree, BinOp):
        lhs = merge_numbers(tree.lhs)
        rhs = merge_numbers(tree.rhs)
        if isinstance(lhs, Number) and isinstance(rhs, Number):
            if tree.op is Op.EQUALS:
                raise EqualityInEval()
            res = apply_op(tree.op, lhs.value, rhs.value)
            if is_whole(res):
                return Number(res)
        return BinOp(lhs, tree.op, rhs)
    if isinstance(tree, UnaryMinus):
        return UnaryMinus(merge_numbers(tree.inner))
    if isinstance(tree, Function):
        return Function(tree.name, tuple(merge_numbers(arg) for arg in tree.args))
    return tree


def optimize_expression(tree: Expr, target: str = "") -> Expr:
    """Simplify `tree` to a fixed point, hoisting `target` terms outward."""
    current = merge_numbers(optimize_node(tree, target))
    for passes in range(1, config.MAX_ITERATIONS + 1):
        latest = optimize_node(current, target)
        if latest == current:
            logger.debug("converged after %d passes: %s", passes, latest)
            return latest
        logger.debug("new cycle started: %s", latest)
        current = merge_numbers(latest)
    raise ConvergenceError(config.MAX_ITERATIONS)
