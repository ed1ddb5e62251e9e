"""Bubble, a tiny scripting language: lexer, parser and tree-walking evaluator."""

import logging

from .environment import Environment
from .evaluator import evaluate, eval_expression
from .lexer import Token, TokenKind, classify, tokenize
from .parser import parse
from .session import Session, evaluate_line
from .values import Empty, Value, VNumber, VText, _Empty, format_value
from .repl import BubbleRepl

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "tokenize",
    "classify",
    "parse",
    "evaluate",
    "eval_expression",
    "evaluate_line",
    "format_value",
    "Token",
    "TokenKind",
    "Environment",
    "Session",
    "Empty",
    "Value",
    "VNumber",
    "VText",
    "_Empty",
    "BubbleRepl",
]
