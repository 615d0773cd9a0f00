from __future__ import annotations
from typing import Optional, Union
import logging

import config
from errors import MathError
from evaluator import evaluate as _evaluate
from expr import Expr
from optimizer import optimize_expression
from parser import parse, parse_equation
from solver import optimize_equation as _optimize_equation

logger = logging.getLogger(__name__)


class CAS:
    def __init__(self, default_target: str = config.DEFAULT_TARGET) -> None:
        self.default_target = default_target

    def parse(self, expr: str) -> Expr:
        return parse(expr)

    def parse_equation(self, expr: str) -> Expr:
        return parse_equation(expr)

    def evaluate(self, expr: str) -> float:
        return _evaluate(expr)

    def simplify(self, expr: Union[str, Expr], target: Optional[str] = None) -> Expr:
        tree = parse(expr) if isinstance(expr, str) else expr
        return optimize_expression(tree, target if target is not None else self.default_target)

    def solve(self, expr: Union[str, Expr], target: str) -> Expr:
        """Isolate `target` in an equation given as text or as a parsed tree."""
        tree = parse_equation(expr) if isinstance(expr, str) else expr
        return _optimize_equation(tree, target)

    def optimize(self, expr: str) -> str:
        return self.simplify(expr).as_latex()

    def optimize_equation(self, expr: str, target: str) -> str:
        return self.solve(expr, target).as_latex()


_cas = CAS()


# String-in / string-out adapters: the result, or the error's display text.

def run_evaluate(expression: str) -> Union[float, str]:
    try:
        return _cas.evaluate(expression)
    except MathError as err:
        logger.info("evaluate(%r) failed: %s", expression, err)
        return str(err)


def run_optimize(expression: str) -> str:
    try:
        return _cas.optimize(expression)
    except MathError as err:
        logger.info("optimize(%r) failed: %s", expression, err)
        return str(err)


def run_optimize_equation(expression: str, target: str) -> str:
    try:
        return _cas.optimize_equation(expression, target)
    except MathError as err:
        logger.info("optimize_equation(%r, %r) failed: %s", expression, target, err)
        return str(err)
