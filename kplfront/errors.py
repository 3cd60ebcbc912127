"""Compile errors reported by the scanner, parser and semantic checks."""

from __future__ import annotations

from enum import Enum

from .tokens import TokenType, token_to_string


class ErrorCode(Enum):
    """Error kinds; each value is the message shown to the user."""

    END_OF_COMMENT = "End of comment expected."
    IDENT_TOO_LONG = "Identifier too long."
    NUMBER_TOO_LONG = "Value of integer number exceeds the range!"
    INVALID_CONSTANT_CHAR = "Invalid char constant."
    INVALID_SYMBOL = "Invalid symbol."
    INVALID_IDENT = "An identifier expected."
    INVALID_CONSTANT = "A constant expected."
    INVALID_TYPE = "A type expected."
    INVALID_BASICTYPE = "A basic type expected."
    INVALID_VARIABLE = "A variable expected."
    INVALID_FUNCTION = "A function identifier expected."
    INVALID_PROCEDURE = "A procedure identifier expected."
    INVALID_PARAMETER = "A parameter expected."
    INVALID_STATEMENT = "Invalid statement."
    INVALID_COMPARATOR = "A comparator expected."
    INVALID_EXPRESSION = "Invalid expression."
    INVALID_TERM = "Invalid term."
    INVALID_FACTOR = "Invalid factor."
    INVALID_LVALUE = "Invalid lvalue in assignment."
    INVALID_ARGUMENTS = "Wrong arguments."
    UNDECLARED_IDENT = "Undeclared identifier."
    UNDECLARED_CONSTANT = "Undeclared constant."
    UNDECLARED_INT_CONSTANT = "Undeclared integer constant."
    UNDECLARED_TYPE = "Undeclared type."
    UNDECLARED_VARIABLE = "Undeclared variable."
    INVALID_RETURN = "Expect the owner of the current scope."
    UNDECLARED_PROCEDURE = "Undeclared procedure."
    DUPLICATE_IDENT = "Duplicate identifier."
    TYPE_INCONSISTENCY = "Type inconsistency"
    PARAMETERS_ARGUMENTS_INCONSISTENCY = (
        "The number of arguments and the number of parameters are inconsistent."
    )

    @property
    def message(self) -> str:
        return self.value


class CompileError(Exception):
    """An error found in the source, located by line and column."""

    def __init__(self, code: ErrorCode, line_no: int, col_no: int) -> None:
        self.code: ErrorCode | None = code
        self.line_no = line_no
        self.col_no = col_no
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.line_no}-{self.col_no}:{self.code.message}"


class MissingTokenError(CompileError):
    """A token of a given type was expected but not found."""

    def __init__(self, token_type: TokenType, line_no: int, col_no: int) -> None:
        self.token_type = token_type
        self.code = None
        self.line_no = line_no
        self.col_no = col_no
        Exception.__init__(self, str(self))

    def __str__(self) -> str:
        return f"{self.line_no}-{self.col_no}:Missing {token_to_string(self.token_type)}"