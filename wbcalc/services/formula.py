"""%MAC formula evaluation.

A MAC formula is a plain arithmetic expression in one variable, ``CG``::

    ((CG - 35.0) / 14.9) * 100
    20 + ((CG - 232.28) / 86.22) * 100

Evaluation substitutes the CG value into the text, rejects anything that
is not a digit, ``+ - * / ( ) .`` or whitespace, then parses the result
with a small recursive-descent parser and interprets the tree. Nothing is
ever handed to ``eval``.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal

from wbcalc.contracts.aircraft import MacConfig
from wbcalc.contracts.envelope import FormulaCheck

logger = logging.getLogger(__name__)

VALIDATION_CG = 240  # Sample CG used to smoke-test a formula

_CG_TOKEN = re.compile(r"CG", re.IGNORECASE)
_ALLOWED = re.compile(r"^[0-9+\-*/().\s]+$")
_TOKEN = re.compile(r"\s*(?:(\d+\.?\d*|\.\d+)|(.))")

# a + ((CG - b) / c) * d
_LINEAR_SHAPE = re.compile(
    r"([\d.]+)\s*\+\s*\(\(CG\s*-\s*([\d.]+)\)\s*/\s*([\d.]+)\)\s*\*\s*([\d.]+)"
)


class FormulaError(ValueError):
    """Formula is malformed, contains forbidden characters, or cannot be evaluated."""


# ------------------------------------------------------------------
# Syntax tree
# ------------------------------------------------------------------


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: Node


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: Node
    right: Node


Node = Number | UnaryOp | BinaryOp


# ------------------------------------------------------------------
# Parsing
# ------------------------------------------------------------------


def _tokenize(expression: str) -> list[str | float]:
    tokens: list[str | float] = []
    pos = 0
    while pos < len(expression):
        match = _TOKEN.match(expression, pos)
        if match is None:  # trailing whitespace
            break
        number, symbol = match.groups()
        if number is not None:
            tokens.append(float(number))
        elif symbol is not None and not symbol.isspace():
            tokens.append(symbol)
        pos = match.end()
    return tokens


class _Parser:
    """expr := term (('+'|'-') term)*
    term := unary (('*'|'/') unary)*
    unary := ('+'|'-') unary | primary
    primary := NUMBER | '(' expr ')'
    """

    def __init__(self, tokens: list[str | float]):
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> Node:
        if not self._tokens:
            raise FormulaError("Formula is empty")
        node = self._expr()
        if self._pos != len(self._tokens):
            raise FormulaError(f"Unexpected '{self._tokens[self._pos]}' in formula")
        return node

    def _peek(self) -> str | float | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self) -> str | float | None:
        token = self._peek()
        self._pos += 1
        return token

    def _expr(self) -> Node:
        node = self._term()
        while self._peek() in ("+", "-"):
            op = self._next()
            node = BinaryOp(op, node, self._term())
        return node

    def _term(self) -> Node:
        node = self._unary()
        while self._peek() in ("*", "/"):
            op = self._next()
            node = BinaryOp(op, node, self._unary())
        return node

    def _unary(self) -> Node:
        if self._peek() in ("+", "-"):
            op = self._next()
            return UnaryOp(op, self._unary())
        return self._primary()

    def _primary(self) -> Node:
        token = self._next()
        if isinstance(token, float):
            return Number(token)
        if token == "(":
            node = self._expr()
            if self._next() != ")":
                raise FormulaError("Unbalanced parentheses in formula")
            return node
        if token is None:
            raise FormulaError("Formula ends unexpectedly")
        raise FormulaError(f"Unexpected '{token}' in formula")


def parse_expression(expression: str) -> Node:
    """Parse a CG-free arithmetic expression into a syntax tree."""
    try:
        return _Parser(_tokenize(expression)).parse()
    except RecursionError as exc:
        raise FormulaError("Formula is nested too deeply") from exc


def _interpret(node: Node) -> float:
    if isinstance(node, Number):
        return node.value
    if isinstance(node, UnaryOp):
        value = _interpret(node.operand)
        return -value if node.op == "-" else value
    left = _interpret(node.left)
    right = _interpret(node.right)
    if node.op == "+":
        return left + right
    if node.op == "-":
        return left - right
    if node.op == "*":
        return left * right
    if right == 0:
        raise FormulaError("Division by zero in formula")
    return left / right


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------


def _decimal_string(value: float) -> str:
    """Positional decimal text of *value* (never exponent notation)."""
    if isinstance(value, int):
        return str(value)
    return format(Decimal(repr(float(value))), "f")


def substitute_cg(formula: str, cg_value: float) -> str:
    return _CG_TOKEN.sub(_decimal_string(cg_value), formula)


def evaluate(formula: str, cg_value: float) -> float:
    """Evaluate *formula* with ``CG`` bound to *cg_value*.

    Raises ``FormulaError`` on forbidden characters, syntax errors,
    division by zero, or a non-finite result.
    """
    expression = substitute_cg(formula, cg_value)
    if not _ALLOWED.match(expression):
        raise FormulaError("Formula contains invalid characters")

    try:
        result = _interpret(parse_expression(expression))
    except RecursionError as exc:
        raise FormulaError("Formula is nested too deeply") from exc

    if not math.isfinite(result):
        raise FormulaError("Formula produces invalid result")
    return result


def validate_formula(formula: str) -> FormulaCheck:
    """Smoke-test *formula* at a sample CG.

    Only proves the formula evaluates at ``VALIDATION_CG``, not at every CG.
    """
    try:
        evaluate(formula, VALIDATION_CG)
    except FormulaError as exc:
        return FormulaCheck(is_valid=False, error=str(exc))
    return FormulaCheck(is_valid=True)


def solve_cg_from_mac(mac_percent: float, mac_config: MacConfig) -> float | None:
    """Invert ``a + ((CG - b) / c) * d`` for CG.

    Returns ``None`` for any other formula shape, including algebraically
    equivalent ones written differently.
    """
    formula = mac_config.formula
    if "((CG" not in formula or ") /" not in formula:
        return None

    match = _LINEAR_SHAPE.search(formula)
    if match is None:
        return None

    try:
        a, b, c, d = (float(part) for part in match.groups())
        return ((mac_percent - a) * c / d) + b
    except (ValueError, ZeroDivisionError) as exc:
        logger.debug("Cannot solve CG from formula %r: %s", formula, exc)
        return None
