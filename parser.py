from __future__ import annotations
from typing import List, Optional, Tuple
import logging

from constants import lookup
from errors import (
    EqualsCount,
    InvalidOperator,
    InvalidToken,
    NoEquals,
    NoFunctionName,
    UnknownConstant,
)
from expr import BinOp, Constant, Expr, Function, Monomial, Number, Op, UnaryMinus

logger = logging.getLogger(__name__)

END = "end of input"

# =====================
# Tokenizer
# =====================


class ExprTok:
    def __init__(self, kind: str, lex: str = "", num: Optional[float] = None):
        self.kind, self.lex, self.num = kind, lex, num

    def __repr__(self) -> str:
        return f"ExprTok({self.kind!r}, {self.lex!r})"


# kinds that close an operand
_OPERAND_END = ("NUM", "VAR", "CONST", ")")
# a '-' after one of these (or at the start) is a negation
_UNARY_AFTER = ("+", "-", "NEG", "*", "/", "%", "^", "=", "(", ",")


def _is_digit(c: str) -> bool:
    # ASCII only; str.isdigit also accepts superscripts float() rejects
    return "0" <= c <= "9"


def expr_tokenize(expr: str) -> List[ExprTok]:
    s = expr
    i, n = 0, len(s)
    toks: List[ExprTok] = []
    prev: Optional[ExprTok] = None

    def push(t: ExprTok) -> None:
        nonlocal prev
        # implicit multiplication when an operand is followed by another operand;
        # a number directly before a variable is left for the monomial fold
        if (
            prev is not None
            and prev.kind in _OPERAND_END
            and t.kind in ("(", "NUM", "VAR", "CONST", "FUNC")
            and not (prev.kind == "NUM" and t.kind in ("NUM", "VAR"))
        ):
            toks.append(ExprTok("*", "*"))
        toks.append(t)
        prev = t

    while i < n:
        c = s[i]
        if c.isspace():
            i += 1
            continue
        if c in "+-*/%^=(),":
            k = c
            i += 1
            if k == "-" and (prev is None or prev.kind in _UNARY_AFTER):
                k = "NEG"
            push(ExprTok(k, c))
            continue
        if _is_digit(c):
            j = i
            while j < n and _is_digit(s[j]):
                j += 1
            if j + 1 < n and s[j] == "." and _is_digit(s[j + 1]):
                j += 1
                while j < n and _is_digit(s[j]):
                    j += 1
            push(ExprTok("NUM", s[i:j], float(s[i:j])))
            i = j
            continue
        if c.isalpha() or c == "_":
            j = i + 1
            while j < n and (s[j].isalnum() or s[j] == "_"):
                j += 1
            name = s[i:j]
            k = j
            while k < n and s[k].isspace():
                k += 1
            value = lookup(name)
            # a lone letter is always a variable, so x(x+1) multiplies
            if value is None and len(name) == 1 and name.isalpha():
                push(ExprTok("VAR", name))
            elif k < n and s[k] == "(":
                push(ExprTok("FUNC", name))
            elif value is not None:
                push(ExprTok("CONST", name, value))
            else:
                raise UnknownConstant(name)
            i = j
            continue
        raise InvalidToken(c)
    return toks


# =====================
# Precedence-climbing parser
# =====================

_BINARY = {
    "+": Op.ADD,
    "-": Op.SUBTRACT,
    "*": Op.MULTIPLY,
    "/": Op.DIVIDE,
    "%": Op.MODULO,
    "^": Op.POWER,
}


class _ExprParser:
    def __init__(self, toks: List[ExprTok]) -> None:
        self.toks = toks
        self.pos = 0

    def peek(self, offset: int = 0) -> Optional[ExprTok]:
        k = self.pos + offset
        return self.toks[k] if k < len(self.toks) else None

    def advance(self) -> Optional[ExprTok]:
        t = self.peek()
        if t is not None:
            self.pos += 1
        return t

    def parse_all(self) -> Expr:
        if not self.toks:
            raise InvalidToken(END)
        tree = self.expression()
        rest = self.peek()
        if rest is not None:
            self._unexpected(rest)
        return tree

    def _unexpected(self, t: ExprTok) -> None:
        if t.kind in ("NUM", "VAR", "CONST", "FUNC", "("):
            raise InvalidOperator(t.lex)
        raise InvalidToken(t.lex)

    def expression(self, min_prec: int = 1) -> Expr:
        lhs = self.unary()
        while True:
            t = self.peek()
            op = _BINARY.get(t.kind) if t is not None else None
            if op is None or op.precedence < min_prec:
                return lhs
            self.advance()
            # '^' is right associative
            next_min = op.precedence if op is Op.POWER else op.precedence + 1
            rhs = self.expression(next_min)
            lhs = BinOp(lhs, op, rhs)

    def unary(self) -> Expr:
        t = self.peek()
        if t is not None and t.kind == "NEG":
            self.advance()
            return UnaryMinus(self.unary())
        return self.primary()

    def primary(self) -> Expr:
        t = self.advance()
        if t is None:
            raise InvalidToken(END)
        if t.kind == "NUM":
            nxt = self.peek()
            if nxt is not None and nxt.kind == "VAR":
                self.advance()
                return self.monomial(t.num, nxt.lex)
            return Number(t.num)
        if t.kind == "VAR":
            return self.monomial(1.0, t.lex)
        if t.kind == "CONST":
            return Constant(t.lex, t.num)
        if t.kind == "FUNC":
            return Function(t.lex, self.arguments())
        if t.kind == "(":
            inner = self.expression()
            closing = self.advance()
            if closing is None:
                raise InvalidToken(END)
            if closing.kind == ",":
                raise NoFunctionName()
            if closing.kind != ")":
                self._unexpected(closing)
            return inner
        raise InvalidToken(t.lex)

    def monomial(self, coefficient: float, variable: str) -> Monomial:
        # fold a literal exponent: x^8, x^-2 (but not x^2^3)
        if self.peek() is not None and self.peek().kind == "^":
            k = 1
            sign = 1.0
            if self.peek(k) is not None and self.peek(k).kind == "NEG":
                sign = -1.0
                k += 1
            lit = self.peek(k)
            after = self.peek(k + 1)
            if lit is not None and lit.kind == "NUM" and not (after is not None and after.kind == "^"):
                self.pos += k + 1
                return Monomial(coefficient, variable, sign * lit.num)
        return Monomial(coefficient, variable, 1.0)

    def arguments(self) -> Tuple[Expr, ...]:
        opening = self.advance()
        if opening is None or opening.kind != "(":
            raise NoFunctionName()
        args: List[Expr] = []
        if self.peek() is not None and self.peek().kind == ")":
            self.advance()
            return tuple(args)
        while True:
            args.append(self.expression())
            t = self.advance()
            if t is None:
                raise InvalidToken(END)
            if t.kind == ")":
                return tuple(args)
            if t.kind != ",":
                self._unexpected(t)


def _split_equals(toks: List[ExprTok]) -> Tuple[List[ExprTok], List[ExprTok]]:
    idx = [k for k, t in enumerate(toks) if t.kind == "="]
    if len(idx) == 0:
        raise NoEquals()
    if len(idx) > 1:
        raise EqualsCount(len(idx))
    return toks[: idx[0]], toks[idx[0] + 1 :]


def _parse_side(toks: List[ExprTok]) -> Expr:
    if not toks:
        raise InvalidToken("=")
    return _ExprParser(toks).parse_all()


def _equation(toks: List[ExprTok]) -> Expr:
    lhs_toks, rhs_toks = _split_equals(toks)
    return BinOp(_parse_side(lhs_toks), Op.EQUALS, _parse_side(rhs_toks))


def parse(expr: str) -> Expr:
    """Parse an expression. A single '=' is accepted and becomes the root."""
    toks = expr_tokenize(expr)
    if any(t.kind == "=" for t in toks):
        tree = _equation(toks)
    else:
        tree = _ExprParser(toks).parse_all()
    logger.debug("parsed %r -> %s", expr, tree)
    return tree


def parse_equation(expr: str) -> Expr:
    """Parse text holding exactly one '=' into BinOp(lhs, EQUALS, rhs)."""
    tree = _equation(expr_tokenize(expr))
    logger.debug("parsed equation %r -> %s", expr, tree)
    return tree
