"""Compilation pipeline: lexing, parsing, code generation and running the result."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import TextIO

from vscc.codegen import CodeGenerator
from vscc.lexer import Lexer
from vscc.parser import Parser
from vscc.printer import print_program


def _exit_code(returncode: int) -> int:
    """Map a process return code to a shell-style exit status."""
    return returncode if returncode >= 0 else 128 - returncode


def _run_stage(command: list[str], failure: str) -> None:
    """Run one build step, raising CalledProcessError if it fails."""
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        print(f"Error: {failure}", file=sys.stderr)
        raise subprocess.CalledProcessError(result.returncode, command)


class Compiler:
    """Compiles a source text on construction and keeps every stage's result."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.lexer = Lexer(source)
        self.parser = Parser(self.lexer)
        self.codegen = CodeGenerator(self.parser.program)

    def print_tokens(self, file: TextIO | None = None) -> None:
        """Write the token list to file, standard output by default."""
        self.lexer.print_tokens(file)

    def print_ast(self, file: TextIO | None = None) -> None:
        """Write the syntax tree dump to file, standard output by default."""
        print_program(self.parser.program, file)

    def print_assembly(self, file: TextIO | None = None) -> None:
        """Write the generated assembly to file, standard output by default."""
        (file or sys.stdout).write(self.emit_assembly())

    def emit_assembly(self) -> str:
        """Return the generated assembly text."""
        return self.codegen.emit_assembly()

    def save_assembly(self, filename: str | os.PathLike[str]) -> None:
        """Write the generated assembly to a file."""
        Path(filename).write_text(self.emit_assembly())
        print(f"Assembly saved to: {filename}")

    def assemble_and_execute(
        self,
        asm_filename: str = "output.s",
        exe_filename: str = "output",
    ) -> int:
        """Assemble, link and run the program; return its exit status.

        A failing assembler or linker raises subprocess.CalledProcessError.
        """
        self.save_assembly(asm_filename)

        object_filename = f"{exe_filename}.o"
        assemble = ["as", "--64", asm_filename, "-o", object_filename]
        link = ["ld", object_filename, "-o", exe_filename]

        print(f"Assembling: {' '.join(assemble)}")
        _run_stage(assemble, "Assembly failed.")

        print(f"Linking: {' '.join(link)}")
        _run_stage(link, "Linking failed.")

        executable = exe_filename if os.sep in exe_filename else f"./{exe_filename}"
        print(f"Executing: {executable}")
        result = subprocess.run([executable], check=False)
        code = _exit_code(result.returncode)
        print(f"Program exited with code: {code}")

        for leftover in (asm_filename, object_filename, exe_filename):
            Path(leftover).unlink(missing_ok=True)

        return code