"""Recursive-descent parser building a syntax tree from a token stream."""

from __future__ import annotations

from vscc.lexer import Lexer
from vscc.nodes import (
    BinaryExpression,
    BinaryOperator,
    CompoundStatement,
    Expression,
    Function,
    FunctionType,
    GroupedExpression,
    IntegerLiteral,
    Program,
    Statement,
    empty_statement,
    return_statement,
)
from vscc.tokens import Token, TokenType, token_type_name

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_ADD_SUB = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUBTRACT,
}

_MULT_DIV = {
    TokenType.STAR: BinaryOperator.MULTIPLY,
    TokenType.SLASH: BinaryOperator.DIVIDE,
}


class ParseError(Exception):
    """Raised when the token stream does not form a valid program."""


class Parser:
    """Parses the tokens of a lexer into a Program on construction."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._current: Token = lexer.next_token()
        self._program = self._parse_program()

    @property
    def program(self) -> Program:
        """The parsed program."""
        return self._program

    def _parse_program(self) -> Program:
        return Program(self._parse_function())

    def _parse_function(self) -> Function:
        self._expect_and_consume(TokenType.KEYWORD_INT)
        self._expect(TokenType.IDENTIFIER)
        name = self._current.lexeme
        self._consume()
        self._expect_and_consume(TokenType.OPEN_PAREN)
        self._expect_and_consume(TokenType.CLOSE_PAREN)
        body = self._parse_compound_statement()
        return Function(FunctionType.INT, name, body)

    def _parse_compound_statement(self) -> CompoundStatement:
        self._expect_and_consume(TokenType.OPEN_BRACE)
        statements: list[Statement] = []
        while self._current.type not in (TokenType.END_OF_FILE, TokenType.CLOSE_BRACE):
            statements.append(self._parse_statement())
        self._expect_and_consume(TokenType.CLOSE_BRACE)
        return CompoundStatement(tuple(statements))

    def _parse_statement(self) -> Statement:
        if self._current.type is TokenType.SEMICOLON:
            self._consume()
            return empty_statement()
        if self._current.type is TokenType.KEYWORD_RETURN:
            return self._parse_return_statement()
        raise ParseError("Unknown statement type")

    def _parse_return_statement(self) -> Statement:
        self._expect_and_consume(TokenType.KEYWORD_RETURN)
        expression = self._parse_expression()
        self._expect_and_consume(TokenType.SEMICOLON)
        return return_statement(expression)

    def _parse_expression(self) -> Expression:
        return self._parse_add_sub()

    def _parse_add_sub(self) -> Expression:
        left = self._parse_mult_div()
        while (op := _ADD_SUB.get(self._current.type)) is not None:
            self._consume()
            # The right operand is a single primary expression.
            right = self._parse_primary()
            left = BinaryExpression(op, left, right)
        return left

    def _parse_mult_div(self) -> Expression:
        left = self._parse_primary()
        while (op := _MULT_DIV.get(self._current.type)) is not None:
            self._consume()
            right = self._parse_primary()
            left = BinaryExpression(op, left, right)
        return left

    def _parse_primary(self) -> Expression:
        if self._current.type is TokenType.NUMBER:
            value = int(self._current.lexeme)
            if not _INT_MIN <= value <= _INT_MAX:
                raise ParseError(f"Integer literal out of range: {self._current.lexeme}")
            self._consume()
            return IntegerLiteral(value)
        if self._current.type is TokenType.OPEN_PAREN:
            self._consume()
            expression = self._parse_expression()
            self._expect_and_consume(TokenType.CLOSE_PAREN)
            return GroupedExpression(expression)
        raise ParseError(
            "Expected an integer literal or an expression in parentheses"
        )

    def _expect(self, expected: TokenType) -> None:
        if self._current.type is not expected:
            raise ParseError(
                f"Expected token type {token_type_name(expected)}, "
                f"but got {token_type_name(self._current.type)}"
            )

    def _consume(self) -> None:
        self._current = self._lexer.next_token()

    def _expect_and_consume(self, expected: TokenType) -> None:
        self._expect(expected)
        self._consume()


def parse(source: str) -> Program:
    """Tokenize and parse source text into a Program."""
    return Parser(Lexer(source)).program