# kplfront

Front-end pieces for KPL, a small Pascal-like teaching language:
character classification, a scanner, a symbol table with nested scopes,
semantic checks on identifiers, and plain-text dumps of declarations.
It has no dependencies beyond the standard library.

## Modules

- `kplfront.charcodes`: `CharCode` and `char_code(ch)`, the lexical class
  of a single character (`None`, meaning end of input, is `UNKNOWN`).
- `kplfront.tokens`: `TokenType`, the `Token` dataclass,
  `check_keyword(string)` and `token_to_string(token_type)`.
- `kplfront.errors`: `ErrorCode`, `CompileError` and `MissingTokenError`.
- `kplfront.reader`: `Reader`, which steps through text keeping line and
  column, and `open_source(path)`.
- `kplfront.scanner`: `Scanner`, `tokenize(text)` and `format_token(token)`.
- `kplfront.symtab`: types, constant values, declared objects, `Scope`
  and `SymbolTable`.
- `kplfront.semantics`: `SemanticChecker`.
- `kplfront.debug`: `format_type`, `format_constant_value`,
  `format_object`, `format_object_list` and `format_scope`.

## Scanning

```python
from kplfront.scanner import tokenize, format_token

for token in tokenize("PROGRAM demo; BEGIN x := 42 END."):
    print(format_token(token))
```

This prints lines such as `1-1:KW_PROGRAM`, `1-9:TK_IDENT(demo)` and
`1-26:TK_NUMBER(42)`, and ends with a `TK_EOF` token.

Each token carries its type, line and column. Identifiers, numbers and
character constants also carry their text, and numbers their integer
value (leading zeros are dropped). Keywords are case-insensitive.
Whitespace and `(* ... *)` comments are skipped.

Identifiers longer than 15 characters, numbers above 2147483647, bad
character constants, a lone `!`, unknown symbols and unterminated
comments raise `kplfront.errors.CompileError`. Its `code` is an
`ErrorCode` whose value is the message, and its text has the form
`line-column:message`. `MissingTokenError` renders as
`line-column:Missing <token description>`, using `token_to_string`.

To scan a file on disk, open it with `kplfront.reader.open_source(path)`
(it raises `OSError` if the file cannot be read) and pass the reader to
`kplfront.scanner.Scanner`. Iterating a scanner yields tokens up to and
including `TK_EOF`; `get_token()` and `get_valid_token()` return one at a
time.

## Symbol table and checks

```python
from kplfront.symtab import SymbolTable, make_int_type
from kplfront.semantics import SemanticChecker
from kplfront.tokens import Token, TokenType
from kplfront.debug import format_object

table = SymbolTable()
program = table.create_program("DEMO")
table.enter_block(program.scope)

variable = table.create_variable("X")
variable.type = make_int_type()
table.declare(variable)

checker = SemanticChecker(table)
token = Token(TokenType.TK_IDENT, 1, 1, string="X")
assert checker.check_declared_variable("X", token) is variable

print(format_object(program, 0))
# Program DEMO
#     Var X : Int
```

A fresh table already holds the built-in routines `READC`, `READI`,
`WRITEI`, `WRITEC` and `WRITELN`. `lookup(name)` searches the current
scope, then each enclosing scope, then the built-ins. Declaring a
parameter inside a function or procedure scope also adds it to the
owner's `params`.

The checker's methods raise `CompileError` at the given token's position:
`check_fresh_ident` for a name already declared in the current scope,
and the `check_declared_*` methods for names that are undeclared or of
the wrong kind. `check_declared_lvalue_ident` accepts variables,
parameters, and a function only inside its own body.

## What it does not do

There is no parser for KPL programs and no command-line program: the
package scans text and provides the symbol table and checks a parser
would use, but nothing here reads a whole program and builds its scopes
for you. It does not generate or run code.

## Tests

The test suite uses pytest; install the `test` extra to get it.