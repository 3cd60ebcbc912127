"""Declaration checks run while parsing."""

from __future__ import annotations

from .errors import CompileError, ErrorCode
from .symtab import ObjectKind, SymbolObject, SymbolTable
from .tokens import Token


class SemanticChecker:
    """Checks identifiers against a symbol table.

    Each check receives the token that holds the name; errors are raised as
    :class:`CompileError` at that token's position.
    """

    def __init__(self, symtab: SymbolTable) -> None:
        self.symtab = symtab

    @staticmethod
    def _error(code: ErrorCode, token: Token) -> CompileError:
        return CompileError(code, token.line_no, token.col_no)

    def _lookup_kind(
        self,
        name: str,
        token: Token,
        kind: ObjectKind,
        undeclared: ErrorCode,
        wrong_kind: ErrorCode,
    ) -> SymbolObject:
        obj = self.symtab.lookup(name)
        if obj is None:
            raise self._error(undeclared, token)
        if obj.kind is not kind:
            raise self._error(wrong_kind, token)
        return obj

    def check_fresh_ident(self, name: str, token: Token) -> None:
        """Fail if ``name`` is already declared in the current scope."""
        scope = self.symtab.current_scope
        if scope is not None and scope.find(name) is not None:
            raise self._error(ErrorCode.DUPLICATE_IDENT, token)

    def check_declared_ident(self, name: str, token: Token) -> SymbolObject:
        obj = self.symtab.lookup(name)
        if obj is None:
            raise self._error(ErrorCode.UNDECLARED_IDENT, token)
        return obj

    def check_declared_constant(self, name: str, token: Token) -> SymbolObject:
        return self._lookup_kind(
            name,
            token,
            ObjectKind.CONSTANT,
            ErrorCode.UNDECLARED_CONSTANT,
            ErrorCode.INVALID_CONSTANT,
        )

    def check_declared_type(self, name: str, token: Token) -> SymbolObject:
        return self._lookup_kind(
            name, token, ObjectKind.TYPE, ErrorCode.UNDECLARED_TYPE, ErrorCode.INVALID_TYPE
        )

    def check_declared_variable(self, name: str, token: Token) -> SymbolObject:
        return self._lookup_kind(
            name,
            token,
            ObjectKind.VARIABLE,
            ErrorCode.UNDECLARED_VARIABLE,
            ErrorCode.INVALID_VARIABLE,
        )

    def check_declared_procedure(self, name: str, token: Token) -> SymbolObject:
        return self._lookup_kind(
            name,
            token,
            ObjectKind.PROCEDURE,
            ErrorCode.UNDECLARED_PROCEDURE,
            ErrorCode.INVALID_PROCEDURE,
        )

    def check_declared_lvalue_ident(self, name: str, token: Token) -> SymbolObject:
        """Return an object that may be assigned to.

        Variables and parameters qualify; a function only inside its own body.
        """
        obj = self.symtab.lookup(name)
        if obj is None:
            raise self._error(ErrorCode.UNDECLARED_IDENT, token)
        if obj.kind in (ObjectKind.VARIABLE, ObjectKind.PARAMETER):
            return obj
        if obj.kind is ObjectKind.FUNCTION:
            scope = self.symtab.current_scope
            if scope is None or obj is not scope.owner:
                raise self._error(ErrorCode.INVALID_RETURN, token)
            return obj
        raise self._error(ErrorCode.INVALID_IDENT, token)