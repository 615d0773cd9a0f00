from __future__ import annotations
import logging

from expr import BinOp, Expr, Monomial, Op, UnaryMinus

logger = logging.getLogger(__name__)

ADDITIVE = (Op.ADD, Op.SUBTRACT)
MULTIPLICATIVE = (Op.MULTIPLY, Op.DIVIDE)


def is_target(e: Expr, target: str) -> bool:
	return isinstance(e, Monomial) and e.variable == target


def like_terms(a: Monomial, b: Monomial) -> bool:
	return a.variable == b.variable and a.exponent == b.exponent


def merge(a: Monomial, op: Op, b: Monomial) -> Monomial | None:
	"""Combine two monomials of the same variable, or None if op can't."""
	if a.variable != b.variable:
		return None
	if op is Op.ADD and like_terms(a, b):
		return Monomial(a.coefficient + b.coefficient, a.variable, a.exponent)
	if op is Op.SUBTRACT and like_terms(a, b):
		return Monomial(a.coefficient - b.coefficient, a.variable, a.exponent)
	if op is Op.MULTIPLY:
		return Monomial(a.coefficient * b.coefficient, a.variable, a.exponent + b.exponent)
	return None


def _hoistable(outer: Op, inner: Op) -> bool:
	if outer in ADDITIVE:
		return inner in ADDITIVE
	if outer in MULTIPLICATIVE:
		return inner in MULTIPLICATIVE
	return False


def distribute_monomials(lhs: Expr, op: Op, rhs: Expr, target: str) -> Expr:
	if isinstance(lhs, Monomial) and isinstance(rhs, Monomial):
		merged = merge(lhs, op, rhs)
		if merged is not None:
			logger.debug("merging monomials %s %s %s -> %s", lhs, op, rhs, merged)
			return merged
		return BinOp(lhs, op, rhs)
	if isinstance(lhs, BinOp) and isinstance(rhs, Monomial) and not is_target(rhs, target):
		inner = lhs.op
		if _hoistable(op, inner):
			# (a lop T) op b => (a op b) lop T
			if is_target(lhs.rhs, target):
				logger.debug("hoisting right")
				return BinOp(BinOp(lhs.lhs, op, rhs), inner, lhs.rhs)
			# (T lop a) op b => (b' lop a) + T, b' negated under subtraction
			if is_target(lhs.lhs, target) and (op in ADDITIVE or op is Op.MULTIPLY):
				logger.debug("hoisting left")
				moved: Expr = UnaryMinus(rhs) if op is Op.SUBTRACT else rhs
				outer = Op.ADD if op in ADDITIVE else Op.MULTIPLY
				return BinOp(BinOp(moved, inner, lhs.rhs), outer, lhs.lhs)
	return BinOp(lhs, op, rhs)
