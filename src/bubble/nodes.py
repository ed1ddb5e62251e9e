"""AST nodes produced by the parser.

Operand slots typed ``Expression | None`` hold ``None`` where the input had
no usable factor; the evaluator treats that as ``Empty``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

@dataclass
class NumberLiteral:
    value: float


@dataclass
class StringLiteral:
    value: str


@dataclass
class Identifier:
    name: str


@dataclass
class InfixExpression:
    left: "Expression | None"
    operator: str
    right: "Expression | None"


Expression = Union[NumberLiteral, StringLiteral, Identifier, InfixExpression]


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

@dataclass
class AssignmentStatement:
    name: str  # "" for a bare expression
    value: Expression | None = None


@dataclass
class SayStatement:
    values: list[Expression | None] = field(default_factory=list)


Statement = Union[AssignmentStatement, SayStatement]
