"""Syntax tree nodes for the supported C subset."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class BinaryOperator(Enum):
    """Arithmetic operators of binary expressions."""

    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"


@dataclass(frozen=True)
class IntegerLiteral:
    """An integer constant."""

    value: int


@dataclass(frozen=True)
class GroupedExpression:
    """An expression written between parentheses."""

    expression: Expression


@dataclass(frozen=True)
class BinaryExpression:
    """Two operands joined by an arithmetic operator."""

    op: BinaryOperator
    left: Expression
    right: Expression


Expression = Union[IntegerLiteral, GroupedExpression, BinaryExpression]


class StatementType(Enum):
    """Kinds of statements."""

    EMPTY = "Empty"
    RETURN = "Return"


@dataclass(frozen=True)
class Statement:
    """A statement; return statements carry the returned expression."""

    type: StatementType
    expression: Expression | None = None


@dataclass(frozen=True)
class CompoundStatement:
    """A braced block of statements."""

    statements: tuple[Statement, ...] = field(default_factory=tuple)


class FunctionType(Enum):
    """Return types of functions."""

    INT = "Int"


@dataclass(frozen=True)
class Function:
    """A function definition with its return type, name and body."""

    type: FunctionType
    name: str
    body: CompoundStatement = field(default_factory=CompoundStatement)


@dataclass(frozen=True)
class Program:
    """A whole program, made of its main function."""

    main: Function | None = None


def empty_statement() -> Statement:
    """Return a statement that does nothing."""
    return Statement(StatementType.EMPTY)


def return_statement(expression: Expression | None = None) -> Statement:
    """Return a statement that returns the given expression."""
    return Statement(StatementType.RETURN, expression)