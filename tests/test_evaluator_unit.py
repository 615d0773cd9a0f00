import math

import pytest

from errors import EqualityInEval, InvalidToken, ParseFailure, UnboundVariable, UnknownFunction, WrongArity
from evaluator import eval_expression, evaluate
from expr import Monomial


def setup(expr):
    return round(evaluate(expr), 14)


@pytest.mark.parametrize("expr, expected", [
    ("2+5", 7.0),
    ("3^2^4", 43046721.0),
    ("1+-1", 0.0),
    ("3+4*2/(1-5)^2^3", 3.0001220703125),
    ("-4^-2", 0.0625),
    ("3%2%3", 1.0),
    ("-3%-2", 1.0),
    ("7%-4", 3.0),
    ("2(3+4)", 14.0),
    ("--5", 5.0),
])
def test_arithmetic(expr, expected):
    assert setup(expr) == expected


def test_division_chain():
    assert setup("1/10/5") == pytest.approx(0.02)


@pytest.mark.parametrize("expr, expected", [
    ("PI", math.pi),
    ("TAU", math.tau),
    ("E", math.e),
    ("PHI", (1 + math.sqrt(5)) / 2),
])
def test_constants(expr, expected):
    assert setup(expr) == pytest.approx(expected, abs=1e-13)


@pytest.mark.parametrize("expr, expected", [
    ("cos(60)", 0.5),
    ("sin(30)", 0.5),
    ("tan(45)", 1.0),
    ("arccos(0.5)", 60.0),
    ("arcsin(0.5)", 30.0),
    ("arctan(1)", 45.0),
])
def test_trigonometry_in_degrees(expr, expected):
    assert setup(expr) == pytest.approx(expected)


@pytest.mark.parametrize("expr, expected", [
    ("abs(-3)", 3.0),
    ("floor(4.7)", 4.0),
    ("ceil(4.2)", 5.0),
    ("round(4.6)", 5.0),
    ("round(4.5)", 5.0),
    ("round(-4.5)", -5.0),
    ("trunc(-4.7)", -4.0),
    ("fract(1.128)", 0.128),
    ("sqrt(16)", 4.0),
    ("pow(2, 10)", 1024.0),
    ("min(3, 4)", 3.0),
    ("max(3, 4)", 4.0),
    ("avg(1, 2, 3, 4, 5)", 3.0),
    ("avg(7)", 7.0),
    ("7 + max(2, min(47.94, trunc(22.54)))", 29.0),
])
def test_functions(expr, expected):
    assert setup(expr) == expected


def test_ieee_results():
    assert evaluate("1/0") == math.inf
    assert evaluate("-1/0") == -math.inf
    assert math.isnan(evaluate("0/0"))
    assert math.isnan(evaluate("sqrt(-1)"))


def test_equality_is_rejected():
    with pytest.raises(EqualityInEval) as info:
        evaluate("x=1")
    assert str(info.value) == "Equality found in evaluator"


def test_unknown_function():
    with pytest.raises(UnknownFunction) as info:
        evaluate("foo(1)")
    assert info.value.name == "foo"


def test_wrong_arity():
    with pytest.raises(WrongArity) as info:
        evaluate("sqrt(1, 2)")
    assert (info.value.expected, info.value.actual) == (1, 2)
    assert str(info.value) == "Function 'sqrt' expects 1 argument(s), got 2"
    with pytest.raises(WrongArity):
        evaluate("avg()")


def test_parse_errors_are_wrapped():
    with pytest.raises(ParseFailure) as info:
        evaluate("2 $")
    assert isinstance(info.value.inner, InvalidToken)
    assert str(info.value) == "Error while parsing: Syntax error: invalid token '$'"


def test_unbound_variable():
    with pytest.raises(UnboundVariable) as info:
        evaluate("2+x")
    assert info.value.name == "x"
    with pytest.raises(UnboundVariable):
        eval_expression(Monomial(2.0, "y", 1.0))
