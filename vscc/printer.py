"""Human-readable dump of a parsed program."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from vscc.nodes import (
    BinaryExpression,
    CompoundStatement,
    Expression,
    Function,
    GroupedExpression,
    IntegerLiteral,
    Program,
    Statement,
    StatementType,
)


def _expression_parts(expression: Expression | None) -> Iterator[str]:
    if expression is None:
        yield "null\n"
    elif isinstance(expression, IntegerLiteral):
        yield f"Integer Literal: {expression.value}\n"
    elif isinstance(expression, GroupedExpression):
        yield "Grouped Expression: \n"
        yield from _expression_parts(expression.expression)
    elif isinstance(expression, BinaryExpression):
        yield f"Binary Expression: {expression.op.value}\n"
        yield "  Left: "
        yield from _expression_parts(expression.left)
        yield "  Right: "
        yield from _expression_parts(expression.right)


def _statement_parts(statement: Statement) -> Iterator[str]:
    if statement.type is StatementType.EMPTY:
        yield "  Empty statement.\n"
    elif statement.type is StatementType.RETURN:
        yield "  Return statement with expression: "
        if statement.expression is None:
            yield "No expression.\n"
        else:
            yield from _expression_parts(statement.expression)
    else:
        yield "  Unknown statement type.\n"


def _compound_parts(compound: CompoundStatement) -> Iterator[str]:
    yield f"Compound Statement with {len(compound.statements)} statements:\n"
    for statement in compound.statements:
        yield from _statement_parts(statement)


def _function_parts(function: Function) -> Iterator[str]:
    yield f"Function: {function.name}\n"
    yield f"Type: {function.type.value}\n"
    yield from _compound_parts(function.body)


def format_expression(expression: Expression) -> str:
    """Return the dump of a single expression."""
    return "".join(_expression_parts(expression))


def format_program(program: Program) -> str:
    """Return the dump of a whole program."""
    if program.main is None:
        return "No main function defined.\n"
    return "Program with main function:\n" + "".join(_function_parts(program.main))


def print_program(program: Program, file: TextIO | None = None) -> None:
    """Write the dump of a program to file, standard output by default."""
    (file or sys.stdout).write(format_program(program))