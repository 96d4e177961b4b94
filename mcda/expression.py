"""Sandboxed evaluation of utility formulas.

A formula is an arithmetic expression over a single variable ``x`` built from
numbers, parentheses and the operators ``+ - * /``. Formulas are parsed by a
small recursive-descent parser into a tree of nodes; nothing is ever handed to
Python's own evaluation machinery, so a formula can only ever compute a number.

Grammar::

    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := ("+" | "-") unary | primary
    primary    := NUMBER | "x" | "(" expression ")"
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Tuple, Union

ALLOWED_CHARACTERS = re.compile(r"[x0-9\s()+\-*/.]*")

_TOKEN = re.compile(r"\s*(?:(?P<number>[0-9]+\.?[0-9]*|\.[0-9]+)|(?P<name>x)|(?P<symbol>[-+*/()]))")


class ExpressionError(ValueError):
    """Raised when a formula is disallowed, malformed or evaluates to NaN."""


def _divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


_BINARY = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
}


@dataclass(frozen=True)
class Number:
    value: float

    def evaluate(self, x: float) -> float:
        return self.value


@dataclass(frozen=True)
class Variable:
    def evaluate(self, x: float) -> float:
        return x


@dataclass(frozen=True)
class Negate:
    operand: "Node"

    def evaluate(self, x: float) -> float:
        return -self.operand.evaluate(x)


@dataclass(frozen=True)
class BinaryOp:
    operator: str
    left: "Node"
    right: "Node"

    def evaluate(self, x: float) -> float:
        return _BINARY[self.operator](self.left.evaluate(x), self.right.evaluate(x))


Node = Union[Number, Variable, Negate, BinaryOp]


def tokenize(text: str) -> List[Tuple[str, str]]:
    tokens: List[Tuple[str, str]] = []
    position = 0
    length = len(text)
    while position < length:
        match = _TOKEN.match(text, position)
        if match is None:
            if text[position:].isspace():
                break
            raise ExpressionError(f"Unexpected character at position {position}: {text[position:]!r}")
        kind = match.lastgroup
        tokens.append((kind, match.group(kind)))
        position = match.end()
    return tokens


class _Parser:
    def __init__(self, tokens: List[Tuple[str, str]]) -> None:
        self.tokens = tokens
        self.index = 0

    def peek(self) -> Tuple[str, str] | None:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def take(self) -> Tuple[str, str]:
        token = self.peek()
        if token is None:
            raise ExpressionError("Unexpected end of formula")
        self.index += 1
        return token

    def at_symbol(self, *symbols: str) -> bool:
        token = self.peek()
        return token is not None and token[0] == "symbol" and token[1] in symbols

    def parse(self) -> Node:
        node = self.expression()
        if self.peek() is not None:
            raise ExpressionError(f"Unexpected token {self.peek()[1]!r}")
        return node

    def expression(self) -> Node:
        node = self.term()
        while self.at_symbol("+", "-"):
            operator = self.take()[1]
            node = BinaryOp(operator, node, self.term())
        return node

    def term(self) -> Node:
        node = self.unary()
        while self.at_symbol("*", "/"):
            operator = self.take()[1]
            node = BinaryOp(operator, node, self.unary())
        return node

    def unary(self) -> Node:
        if self.at_symbol("-"):
            self.take()
            return Negate(self.unary())
        if self.at_symbol("+"):
            self.take()
            return self.unary()
        return self.primary()

    def primary(self) -> Node:
        kind, text = self.take()
        if kind == "number":
            return Number(float(text))
        if kind == "name":
            return Variable()
        if text == "(":
            node = self.expression()
            if not self.at_symbol(")"):
                raise ExpressionError("Missing closing parenthesis")
            self.take()
            return node
        raise ExpressionError(f"Unexpected token {text!r}")


class Formula:
    """A parsed formula that can be evaluated for many values of ``x``."""

    def __init__(self, text: str, root: Node) -> None:
        self.text = text
        self.root = root

    @classmethod
    def parse(cls, text: str) -> "Formula":
        if not isinstance(text, str):
            raise ExpressionError("Formula must be a string")
        if not ALLOWED_CHARACTERS.fullmatch(text):
            raise ExpressionError(f"Formula contains disallowed characters: {text!r}")
        try:
            root = _Parser(tokenize(text)).parse()
        except RecursionError as exc:
            raise ExpressionError("Formula is nested too deeply") from exc
        return cls(text, root)

    def __call__(self, x: float) -> float:
        try:
            result = self.root.evaluate(float(x))
        except RecursionError as exc:
            raise ExpressionError("Formula is nested too deeply") from exc
        if math.isnan(result):
            raise ExpressionError(f"Formula {self.text!r} is not a number at x={x}")
        return result

    def __repr__(self) -> str:
        return f"Formula({self.text!r})"


def evaluate_expression(text: str, x: float) -> float:
    return Formula.parse(text)(x)


def is_valid_expression(text: str) -> bool:
    try:
        Formula.parse(text)
    except ExpressionError:
        return False
    return True
