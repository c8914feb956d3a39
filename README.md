# vscc

A very small compiler for a tiny subset of C. It reads one source file holding
an `int main()` function whose body is made of `return` statements and empty
statements (`;`), with integer expressions built from `+`, `-`, `*`, `/` and
parentheses. It generates x86-64 assembly in Intel syntax and can assemble,
link and run the result.

## Installing

```
pip install .
```

Assembling and running the generated program needs the GNU assembler (`as`)
and linker (`ld`) on an x86-64 Linux machine. Tokenizing, parsing and
generating assembly need nothing beyond Python.

## Command line

```
vscc program.c
```

Given a file such as

```c
int main() {
    return (1 + 2) * 3;
}
```

`vscc` prints, in order:

1. the tokens, one per line, as `[line:column] Type 'lexeme'`;
2. a description of the parsed program;
3. the generated assembly;
4. the commands used to assemble, link and run it, and the program's exit
   code.

The exit status of `vscc` is the compiled program's exit code (9 for the
example above). It is 1 when no file is given, when the file cannot be read
or is empty, or when the program has a syntax error; if the assembler or
linker fails, it is that tool's exit status.

While running, `vscc` writes `output.s`, `output.o` and `output` to the current
directory; they are removed once the program has run.

## The language

- One function, `int main()`, with no parameters.
- Statements: `return <expression>;` and the empty statement `;`.
- Expressions: integer literals within the signed 32-bit range, `+`, `-`,
  `*`, `/` and parentheses. `*` and `/` bind tighter than `+` and `-`, and all
  operators group from the left.
- After `+` or `-`, the right operand must be a single number or a
  parenthesised expression: write `1 + (2 * 3)`, not `1 + 2 * 3`.
- `//` comments run to the end of the line.

Variables, declarations, assignments, other functions and control flow are not
supported; a source using them is rejected with a syntax error. `=` and string
literals are recognised by the lexer but not accepted by the parser.

## Library use

```python
from vscc.lexer import tokenize
from vscc.parser import parse
from vscc.codegen import generate_assembly
from vscc.printer import format_program
from vscc.compiler import Compiler

source = "int main() { return 4 / 2; }"

for token in tokenize(source):
    print(token)

program = parse(source)
print(format_program(program))
print(generate_assembly(program))

compiler = Compiler(source)
compiler.save_assembly("output.s")
exit_code = compiler.assemble_and_execute("output.s", "output")
```

- `vscc.lexer.Lexer` offers `next_token()`, `peek_token(index)`,
  `format_tokens()` and `print_tokens(file)` over the token list.
- `vscc.nodes` holds the syntax tree classes (`Program`, `Function`,
  `CompoundStatement`, `Statement`, `IntegerLiteral`, `GroupedExpression`,
  `BinaryExpression`).
- `vscc.compiler.Compiler` runs every stage on construction and offers
  `print_tokens`, `print_ast`, `print_assembly`, `emit_assembly`,
  `save_assembly` and `assemble_and_execute`.

Syntax errors raise `vscc.parser.ParseError`; problems during code generation
raise `vscc.codegen.CodeGenError`. A failing assembler or linker in
`assemble_and_execute` raises `subprocess.CalledProcessError`.

## Running the tests

```
pip install .[test]
pytest
```