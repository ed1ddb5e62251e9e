"""Evaluator: walks statements against an Environment."""

from __future__ import annotations

import logging

from .environment import Environment
from .nodes import (
    AssignmentStatement,
    Expression,
    Identifier,
    InfixExpression,
    NumberLiteral,
    SayStatement,
    Statement,
    StringLiteral,
)
from .values import Empty, Value, VNumber, VText, format_value

logger = logging.getLogger(__name__)

DIVISION_BY_ZERO = "Error: Division by zero"


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(statements: list[Statement], environment: Environment) -> Value:
    """Run *statements* in order and return the result of the last one.

    Returns ``Empty`` when there are no statements.
    """
    result: Value = Empty
    for stmt in statements:
        result = _eval_stmt(stmt, environment)
    return result


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

def _eval_stmt(stmt: Statement, env: Environment) -> Value:
    if isinstance(stmt, AssignmentStatement):
        value = eval_expression(stmt.value, env)
        if stmt.name:
            env.set(stmt.name, value)
        return value
    if isinstance(stmt, SayStatement):
        return VText("".join(format_value(eval_expression(e, env)) for e in stmt.values))
    raise TypeError(f"not a statement: {stmt!r}")


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

def eval_expression(expr: Expression | None, env: Environment) -> Value:
    """Evaluate *expr*.  Reads the environment, never writes it."""
    if expr is None:
        return Empty
    if isinstance(expr, NumberLiteral):
        return VNumber(expr.value)
    if isinstance(expr, StringLiteral):
        return VText(expr.value)
    if isinstance(expr, Identifier):
        value = env.get(expr.name)
        if value is None:
            logger.debug("unbound identifier %r", expr.name)
            return VText(f"<{expr.name}>")
        return value
    if isinstance(expr, InfixExpression):
        return _eval_infix(
            expr.operator,
            eval_expression(expr.left, env),
            eval_expression(expr.right, env),
        )
    raise TypeError(f"not an expression: {expr!r}")


def _eval_infix(operator: str, left: Value, right: Value) -> Value:
    """Arithmetic on two numbers; text concatenation for anything else."""
    if isinstance(left, VNumber) and isinstance(right, VNumber):
        l, r = left.value, right.value
        if operator in ("plus", "+"):
            return VNumber(l + r)
        if operator in ("minus", "-"):
            return VNumber(l - r)
        if operator in ("times", "*"):
            return VNumber(l * r)
        if operator in ("over", "/"):
            if r == 0:
                logger.debug("division by zero: %s %s %s", left, operator, right)
                return VText(DIVISION_BY_ZERO)
            return VNumber(l / r)
    return VText(format_value(left) + format_value(right))
