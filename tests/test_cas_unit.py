import pytest

from cas import CAS, run_evaluate, run_optimize, run_optimize_equation
from errors import NotAnEquation
from expr import Monomial
from parser import parse


@pytest.fixture
def cas():
    return CAS()


@pytest.mark.parametrize("text, expected", [
    ("0+645", "645"),
    ("2x^8+6x^8", "8x^{8}"),
    ("x*x", "x^{2}"),
    ("3^(-1)", "\\frac{1}{3}"),
    ("2*(2x^3+3)", "4x^{3}+6"),
])
def test_optimize_renders_latex(cas, text, expected):
    assert cas.optimize(text) == expected


@pytest.mark.parametrize("text, target, expected", [
    ("x*x=x+x", "x", "x^{2}=2x"),
    ("x+y=x", "y", "y=0"),
    ("-(3x)-4y=5x-6y", "y", "y=4x"),
    ("2x=3", "x", "x=\\frac{3}{2}"),
])
def test_optimize_equation_renders_latex(cas, text, target, expected):
    assert cas.optimize_equation(text, target) == expected


def test_simplify_accepts_parsed_tree(cas):
    assert cas.simplify(parse("x+x")) == Monomial(2.0, "x", 1.0)
    assert str(cas.simplify("x+y+x", "y")) == "(2x^(1)+1y^(1))"


def test_default_target():
    assert CAS(default_target="y").simplify("x+y+x") == CAS().simplify("x+y+x", "y")


def test_solve_rejects_plain_expression(cas):
    with pytest.raises(NotAnEquation):
        cas.solve(parse("x+1"), "x")


def test_run_adapters_return_results():
    assert run_evaluate("2+5") == 7.0
    assert run_optimize("x+x") == "2x"
    assert run_optimize_equation("x+y=x", "y") == "y=0"


def test_run_adapters_return_error_text():
    assert run_evaluate("x=1") == "Equality found in evaluator"
    assert run_optimize("2 $ 3") == "Syntax error: invalid token '$'"
    assert run_optimize_equation("x+1", "x") == "Syntax error: no equals sign found '='"
    assert run_optimize_equation("x=1=2", "x") == "Syntax error: too many equals signs"


def test_run_adapters_report_non_ascii_digits():
    assert run_evaluate("2²") == "Error while parsing: Syntax error: invalid token '²'"
    assert run_optimize("2²") == "Syntax error: invalid token '²'"


def test_variable_times_parenthesis_simplifies(cas):
    assert str(cas.simplify("x(x)")) == "1x^(2)"
    assert cas.optimize("x(x)") == "x^{2}"
