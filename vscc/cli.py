"""Command-line entry point: compile a file, show every stage and run it."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from vscc.codegen import CodeGenError
from vscc.compiler import Compiler
from vscc.parser import ParseError


def read_source(path: str) -> str:
    """Return the text of the file at path."""
    return Path(path).read_text()


def main(argv: list[str] | None = None) -> int:
    """Compile the file named on the command line and run the result."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: vscc <input_file>", file=sys.stderr)
        return 1

    path = args[0]
    try:
        source = read_source(path)
    except OSError:
        print(f"Error: Could not open file {path}", file=sys.stderr)
        return 1
    if not source:
        return 1

    print(f"=> FILE: {path}")

    try:
        compiler = Compiler(source)
    except (ParseError, CodeGenError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print("====== Start of Tokens ======")
    compiler.print_tokens()
    print("====== End of Tokens ========\n")

    print("====== Parsing Program ======")
    compiler.print_ast()
    print("====== End of Parsing =======\n")

    print("====== Emitting Assembly =====")
    compiler.print_assembly()
    print("====== End of Assembly ======\n")

    print("====== Assembling and Executing =====")
    try:
        exit_code = compiler.assemble_and_execute("output.s", "output")
    except subprocess.CalledProcessError as error:
        exit_code = error.returncode
    print("====== End of Execution =====\n")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())