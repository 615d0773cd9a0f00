import pytest

import config
from errors import ConvergenceError, NotAnEquation
from expr import BinOp, Monomial, Number, Op
from parser import parse, parse_equation
from solver import apply_equation_rule, optimize_equation


def solve(text, target):
    return str(optimize_equation(parse_equation(text), target))


@pytest.mark.parametrize("text, target, expected", [
    ("x*x=x+x", "x", "(1x^(2)=2x^(1))"),
    ("x+y=x", "y", "(1y^(1)=0)"),
    ("x+y+x=x", "y", "(1y^(1)=-(1x^(1)))"),
    ("x-y-x=x", "y", "(1y^(1)=-(1x^(1)))"),
    ("y-x+x=x", "y", "(1y^(1)=1x^(1))"),
    ("-(3x)-4y=5x-6y", "y", "(1y^(1)=4x^(1))"),
])
def test_isolates_target(text, target, expected):
    assert solve(text, target) == expected


@pytest.mark.parametrize("text, expected", [
    ("2x=x+1", "(1x^(1)=1)"),
    ("3x-6=0", "(1x^(1)=2)"),
    ("x/2=3", "(1x^(1)=6)"),
    ("2x=3", "(1x^(1)=(3/2))"),
])
def test_linear_equations(text, expected):
    assert solve(text, "x") == expected


def eq(lhs, rhs):
    return BinOp(lhs, Op.EQUALS, rhs)


X = Monomial(1.0, "x", 1.0)


def test_rule_target_plus_term_on_left():
    tree = eq(BinOp(X, Op.ADD, Number(1.0)), Number(5.0))
    assert str(apply_equation_rule(tree, "x")) == "(1x^(1)=(5-1))"


def test_rule_term_plus_target_on_right():
    tree = eq(Number(5.0), BinOp(X, Op.ADD, Number(1.0)))
    assert str(apply_equation_rule(tree, "x")) == "((5-1x^(1))=1)"


def test_rule_term_minus_target_on_left():
    tree = eq(BinOp(Number(4.0), Op.SUBTRACT, X), Number(1.0))
    assert str(apply_equation_rule(tree, "x")) == "(1x^(1)=(-(1)+4))"


def test_rule_reduces_coefficient():
    tree = eq(Monomial(3.0, "x", 1.0), Number(6.0))
    assert str(apply_equation_rule(tree, "x")) == "(1x^(1)=(6/3))"


def test_rule_leaves_unmatched_equation_alone():
    tree = parse_equation("y=2")
    assert apply_equation_rule(tree, "x") == tree


def test_rejects_plain_expression():
    with pytest.raises(NotAnEquation):
        optimize_equation(parse("x+1"), "x")
    with pytest.raises(NotAnEquation):
        apply_equation_rule(parse("x+1"), "x")


def test_iteration_ceiling(monkeypatch):
    monkeypatch.setattr(config, "MAX_ITERATIONS", 1)
    with pytest.raises(ConvergenceError):
        optimize_equation(parse_equation("3x-6=0"), "x")
