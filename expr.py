from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import math


class Op(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    POWER = "^"
    EQUALS = "="

    @property
    def precedence(self) -> Optional[int]:
        return _PRECEDENCE[self]

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


# EQUALS has no rank: it only ever sits at the root of an equation
_PRECEDENCE = {
    Op.ADD: 1,
    Op.SUBTRACT: 1,
    Op.MULTIPLY: 2,
    Op.DIVIDE: 2,
    Op.MODULO: 2,
    Op.POWER: 3,
    Op.EQUALS: None,
}


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == int(value):
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Expr:
    def to_string(self) -> str:
        raise NotImplementedError

    def as_latex(self) -> str:
        raise NotImplementedError

    def as_tree(self) -> str:
        # Local import to avoid circular dependency at module load time
        from edag import dump
        return dump(self)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class Number(Expr):
    value: float

    def to_string(self) -> str:
        return format_number(self.value)

    def as_latex(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class UnaryMinus(Expr):
    inner: Expr

    def to_string(self) -> str:
        return f"-({self.inner.to_string()})"

    def as_latex(self) -> str:
        return f"-{self.inner.as_latex()}"


@dataclass(frozen=True)
class BinOp(Expr):
    lhs: Expr
    op: Op
    rhs: Expr

    def to_string(self) -> str:
        return f"({self.lhs.to_string()}{self.op.symbol}{self.rhs.to_string()})"

    def as_latex(self) -> str:
        # the base of a power is expected to be written by the caller
        if self.op is Op.POWER:
            return f"^{{{self.rhs.as_latex()}}}"
        if self.op is Op.DIVIDE:
            return f"\\frac{{{self.lhs.as_latex()}}}{{{self.rhs.as_latex()}}}"
        if self.op is Op.MULTIPLY:
            return f"{self.lhs.as_latex()}\\cdot{self.rhs.as_latex()}"
        return f"{self.lhs.as_latex()}{self.op.symbol}{self.rhs.as_latex()}"


@dataclass(frozen=True)
class Function(Expr):
    name: str
    args: Tuple[Expr, ...] = ()

    def to_string(self) -> str:
        args = ", ".join(arg.to_string() for arg in self.args)
        return f"{self.name}({args})"

    def as_latex(self) -> str:
        args = ", ".join(arg.as_latex() for arg in self.args)
        return f"{self.name}({args})"


@dataclass(frozen=True)
class Monomial(Expr):
    """coefficient * variable^exponent for a single variable."""
    coefficient: float
    variable: str
    exponent: float

    def to_string(self) -> str:
        return f"{format_number(self.coefficient)}{self.variable}^({format_number(self.exponent)})"

    def as_latex(self) -> str:
        coeff_part = "" if self.coefficient == 1.0 else format_number(self.coefficient)
        exp_part = "" if self.exponent == 1.0 else f"^{{{format_number(self.exponent)}}}"
        return f"{coeff_part}{self.variable}{exp_part}"


@dataclass(frozen=True)
class Constant(Expr):
    name: str
    value: float

    def to_string(self) -> str:
        return self.name

    def as_latex(self) -> str:
        return self.name


def is_equation(tree: Expr) -> bool:
    return isinstance(tree, BinOp) and tree.op is Op.EQUALS
