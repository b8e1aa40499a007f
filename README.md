# melpc

`melpc` holds the pieces of a small compiler for MELP, a teaching
language with numeric and boolean values, functions, `if`/`else` and
`while`. It turns source text into tokens, represents programs as a
syntax tree, and writes such a tree out as textual LLVM IR (`.ll`) that
`llc` and a C linker can turn into a native executable.

A MELP program looks like this:

```
function add(numeric a; numeric b) as numeric
    return a + b
end_function

function main() as numeric
    return add(10; 15)
end_function
```

## What is inside

- `melpc.tokens` – the `TokenType` enum, the frozen `Token` dataclass
  (`type`, `lexeme`, `line`, `column`, `value`) and `token_type_name()`,
  which gives a display name such as `"NUMBER"`, `"+"` or `"MOD"`.
- `melpc.lexer` – `tokenize(source)` and the character class helpers
  `is_digit`, `is_alpha`, `is_alphanumeric` and `is_whitespace`.
  Spaces, tabs and carriage returns are skipped; newlines become
  `TokenType.NEWLINE` tokens; `--` starts a comment that runs to the end
  of the line and is dropped. Every token carries its 1-based line and
  column. A number's `value` is its integer (capped at 2**63 - 1), a
  string's `value` is its text without quotes. Unknown characters, a lone
  `!` and unterminated strings come back as `TokenType.ERROR` tokens whose
  lexeme and value hold the message, and scanning carries on. A NUL
  character ends the input. The list always ends with `TokenType.EOF`.
- `melpc.nodes` – the syntax tree as dataclasses: `Program`, `Function`,
  `Parameter`, `TypeSpec`, the statements `Return`, `VarDecl`,
  `Assignment`, `If`, `While`, `ExprStmt`, and the expressions
  `BinaryOp`, `UnaryOp`, `Literal`, `Identifier`, `Call`. All share the
  `Node` base, with keyword-only `line` and `column`, and each class has a
  `node_type` from the `NodeType` enum.
- `melpc.irtypes` – mappings from MELP to LLVM spellings:
  `get_llvm_type()` (`numeric`/`int` → `i64`, `boolean`/`bool` → `i1`,
  `void` → `void`, otherwise `i64`), `get_llvm_type_from_ast()`,
  `get_llvm_binary_op()` (`+` → `add`, `/` → `sdiv`, `%` → `srem`,
  `and` → `and`, …, otherwise `add`), `get_llvm_icmp_pred()`
  (`<` → `slt`, `>=` → `sge`, …, otherwise `eq`),
  `token_type_to_op_string()` and `clean_identifier()`, which keeps the
  leading word of a name (at most 255 characters).
- `melpc.codegen` – `CodeGenerator`, `generate_ir(ast)` which returns
  the IR as a string, `generate_code(ast, output_file)` which writes it
  to a file, and `CodegenError`.

## Tokenizing

```python
from melpc.lexer import tokenize
from melpc.tokens import TokenType

tokens = tokenize("function main() as numeric\n  return 42\nend_function")

for token in tokens:
    print(token.type.name, repr(token.lexeme), token.line, token.column)

assert tokens[-1].type is TokenType.EOF
```

## Generating IR

Build a `Program` from the node classes, then hand it to the generator:

```python
from melpc.codegen import CodegenError, generate_code, generate_ir
from melpc.nodes import Function, Literal, Program, Return, TypeSpec
from melpc.tokens import TokenType

program = Program(functions=[
    Function(
        "main",
        return_type=TypeSpec(TokenType.NUMERIC),
        body=[Return(Literal(TokenType.NUMBER, 42))],
    ),
])

try:
    ir_text = generate_ir(program)
    generate_code(program, "main.ll")
except CodegenError as exc:
    print(f"code generation failed: {exc}")
```

`generate_ir` and `generate_code` raise `CodegenError` when the tree is
`None` or not a `Program`; `generate_code` also raises it when the output
file is `None` or cannot be opened.

The output starts with a module header (data layout, the
`x86_64-pc-linux-gnu` target triple and declarations of `printf` and
`scanf`), followed by one `define` per function. Parameters and local
variables live in `alloca` stack slots and values flow through numbered
registers, which start afresh in each function after its parameters.
`if` blocks use `thenN`/`elseN`/`endifN` labels and loops use
`loopN`/`bodyN`/`endloopN`, with `N` increasing across the module. A
function whose body does not end in `return` gets `ret <type> 0` (or
`ret void`) appended.

`CodeGenerator` can also be driven piece by piece: `program()`,
`function()`, `statement()` and `expression()` emit into its buffer,
`getvalue()` returns what has been emitted, and `next_register()` /
`next_label()` hand out fresh `%N` and `labelN` names.

## What this package does not do

- There is no parser: nothing here turns the token list into a syntax
  tree. Trees are built directly from the classes in `melpc.nodes`.
- There is no semantic checking. The generator assumes a well-formed,
  type-correct tree and emits IR for whatever it is given.
- There is no command-line tool, and the package does not run `llc` or a
  linker; turning the `.ll` file into an executable is left to you.
- There is no printer for syntax trees beyond the dataclasses' own
  `repr`.

## Running the tests

The test suite uses pytest and is declared under the `test` extra:

```
pip install -e ".[test]"
pytest
```