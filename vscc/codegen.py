"""x86-64 assembly generation (Intel syntax) from a syntax tree."""

from __future__ import annotations

from vscc.nodes import (
    BinaryExpression,
    BinaryOperator,
    CompoundStatement,
    Expression,
    GroupedExpression,
    IntegerLiteral,
    Program,
    Statement,
    StatementType,
)

_PROLOGUE = (
    ".intel_syntax noprefix\n"
    ".section .text\n"
    "    .globl _start\n"
    "\n"
    "_start:\n"
    "    call main\n"
    "    mov rdi, rax\n"
    "    mov rax, 60\n"
    "    syscall\n"
    "\n"
    "main:\n"
)

_OPERATIONS = {
    BinaryOperator.ADD: ("    add rax, rbx\n",),
    BinaryOperator.SUBTRACT: ("    sub rax, rbx\n",),
    BinaryOperator.MULTIPLY: ("    imul eax, ebx\n",),
    BinaryOperator.DIVIDE: ("    cdq\n", "    idiv ebx\n"),
}


class CodeGenError(Exception):
    """Raised when a program cannot be turned into assembly."""


class CodeGenerator:
    """Generates the assembly for a program on construction."""

    def __init__(self, program: Program | None) -> None:
        self._program = program
        self._output: list[str] = []
        self._generate()

    def emit_assembly(self) -> str:
        """Return the generated assembly text."""
        return "".join(self._output)

    def _generate(self) -> None:
        if self._program is None or self._program.main is None:
            raise CodeGenError("No main function defined in the program.")
        self._output.append(_PROLOGUE)
        self._visit_compound(self._program.main.body)

    def _visit_compound(self, compound: CompoundStatement) -> None:
        for statement in compound.statements:
            self._visit_statement(statement)

    def _visit_statement(self, statement: Statement) -> None:
        if statement.type is StatementType.EMPTY:
            return
        if statement.type is StatementType.RETURN:
            if statement.expression is not None:
                self._visit_expression(statement.expression)
            self._output.append("    ret\n")
            return
        raise CodeGenError("Unknown statement type")

    def _visit_expression(self, expression: Expression) -> None:
        if isinstance(expression, IntegerLiteral):
            self._output.append(f"    mov rax, {expression.value}\n")
        elif isinstance(expression, GroupedExpression):
            self._visit_expression(expression.expression)
        elif isinstance(expression, BinaryExpression):
            self._visit_binary(expression)
        else:
            raise CodeGenError("Unknown expression type")

    def _visit_binary(self, binary: BinaryExpression) -> None:
        operation = _OPERATIONS.get(binary.op)
        if operation is None:
            raise CodeGenError("Unsupported operator")
        self._visit_expression(binary.left)
        self._output.append("    push rax\n")
        self._visit_expression(binary.right)
        self._output.append("    mov rbx, rax\n")
        self._output.append("    pop rax\n")
        self._output.extend(operation)


def generate_assembly(program: Program) -> str:
    """Return the assembly text for a program."""
    return CodeGenerator(program).emit_assembly()