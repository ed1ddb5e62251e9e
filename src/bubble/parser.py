"""Parser: token list → statements, by recursive descent.

Three precedence tiers, lowest first::

    expression := term (('plus' | '+' | 'minus' | '-') term)*
    term       := factor (('times' | '*' | 'over' | '/') factor)*
    factor     := NUMBER | STRING | IDENTIFIER

The cursor only moves forward.  Nothing here raises: a factor position
holding any other token yields ``None``, and a token that no production can
consume is skipped so that parsing always reaches EOF.
"""

from __future__ import annotations

import logging

from .lexer import Token, TokenKind
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

logger = logging.getLogger(__name__)

_ADDITIVE = (TokenKind.PLUS, TokenKind.MINUS)
_MULTIPLICATIVE = (TokenKind.TIMES, TokenKind.DIVIDED_BY)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse(tokens: list[Token]) -> list[Statement]:
    """Build the statement list for an EOF-terminated token list."""
    return _Parser(tokens).parse_program()


# ---------------------------------------------------------------------------
# Parser state
# ---------------------------------------------------------------------------

class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            tokens = [*tokens, Token(TokenKind.EOF, "")]
        self.tokens = tokens
        self.pos = 0

    # -- Cursor ---------------------------------------------------------

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def peek(self) -> Token:
        # The cursor never passes EOF, so EOF is the answer at the end.
        return self.tokens[min(self.pos + 1, len(self.tokens) - 1)]

    def at_end(self) -> bool:
        return self.current.kind == TokenKind.EOF

    def advance(self) -> Token:
        tok = self.current
        if not self.at_end():
            self.pos += 1
        return tok

    def skip(self) -> None:
        logger.debug("skipping unexpected token %r", self.current)
        self.advance()

    # -- Statements -----------------------------------------------------

    def parse_program(self) -> list[Statement]:
        statements: list[Statement] = []
        while not self.at_end():
            tok = self.current
            if tok.kind == TokenKind.IDENTIFIER and self.peek().kind == TokenKind.ASSIGN:
                statements.append(self.parse_assignment())
            elif tok.kind == TokenKind.REMEMBER:
                statements.append(self.parse_remember())
            elif tok.kind == TokenKind.SAY:
                statements.append(self.parse_say())
            else:
                start = self.pos
                expr = self.parse_expression()
                if self.pos == start:
                    self.skip()
                    continue
                statements.append(AssignmentStatement(name="", value=expr))
        return statements

    def parse_assignment(self) -> AssignmentStatement:
        """name = expression"""
        name = self.advance().text
        self.advance()  # '='
        return AssignmentStatement(name=name, value=self.parse_expression())

    def parse_remember(self) -> AssignmentStatement:
        """remember name as expression; trailing parts are optional."""
        self.advance()  # 'remember'
        stmt = AssignmentStatement(name="")
        if self.current.kind != TokenKind.IDENTIFIER:
            logger.debug("'remember' without a name")
            return stmt
        stmt.name = self.advance().text
        if self.current.kind != TokenKind.AS:
            logger.debug("'remember %s' without 'as'", stmt.name)
            return stmt
        self.advance()  # 'as'
        stmt.value = self.parse_expression()
        return stmt

    def parse_say(self) -> SayStatement:
        """say expression*, consuming everything up to EOF."""
        self.advance()  # 'say'
        stmt = SayStatement()
        while not self.at_end():
            start = self.pos
            expr = self.parse_expression()
            if self.pos == start:
                self.skip()
                continue
            stmt.values.append(expr)
        return stmt

    # -- Expressions ----------------------------------------------------

    def parse_expression(self) -> Expression | None:
        expr = self.parse_term()
        while self.current.kind in _ADDITIVE:
            operator = self.advance().text
            expr = InfixExpression(expr, operator, self.parse_term())
        return expr

    def parse_term(self) -> Expression | None:
        expr = self.parse_factor()
        while self.current.kind in _MULTIPLICATIVE:
            operator = self.advance().text
            expr = InfixExpression(expr, operator, self.parse_factor())
        return expr

    def parse_factor(self) -> Expression | None:
        tok = self.current
        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return NumberLiteral(float(tok.text))
        if tok.kind == TokenKind.STRING:
            self.advance()
            return StringLiteral(tok.text)
        if tok.kind == TokenKind.IDENTIFIER:
            self.advance()
            return Identifier(tok.text)
        logger.debug("no factor at %r", tok)
        return None
