"""Text dumps of types, constants and scopes."""

from __future__ import annotations

from .symtab import (
    ConstantObject,
    ConstantValue,
    FunctionObject,
    ParameterObject,
    ParamKind,
    ProcedureObject,
    ProgramObject,
    Scope,
    SymbolObject,
    Type,
    TypeClass,
    TypeObject,
    VariableObject,
)


def format_type(type_: Type) -> str:
    """Render a type as ``Int``, ``Char`` or ``Arr(size,element)``."""
    if type_.type_class is TypeClass.INT:
        return "Int"
    if type_.type_class is TypeClass.CHAR:
        return "Char"
    return f"Arr({type_.array_size},{format_type(type_.element_type)})"


def format_constant_value(value: ConstantValue) -> str:
    """Render an integer as digits and a character in single quotes."""
    if value.type_class is TypeClass.INT:
        return str(value.int_value)
    if value.type_class is TypeClass.CHAR:
        return f"'{value.char_value}'"
    return ""


def format_object(obj: SymbolObject, indent: int) -> str:
    """Render one object; blocks include their scope indented four more."""
    pad = " " * indent
    if isinstance(obj, ConstantObject):
        return f"{pad}Const {obj.name} = {format_constant_value(obj.value)}"
    if isinstance(obj, TypeObject):
        return f"{pad}Type {obj.name} = {format_type(obj.actual_type)}"
    if isinstance(obj, VariableObject):
        return f"{pad}Var {obj.name} : {format_type(obj.type)}"
    if isinstance(obj, ParameterObject):
        label = "Param" if obj.param_kind is ParamKind.VALUE else "Param VAR"
        return f"{pad}{label} {obj.name} : {format_type(obj.type)}"
    if isinstance(obj, FunctionObject):
        header = f"{pad}Function {obj.name} : {format_type(obj.return_type)}\n"
        return header + format_scope(obj.scope, indent + 4)
    if isinstance(obj, ProcedureObject):
        return f"{pad}Procedure {obj.name}\n" + format_scope(obj.scope, indent + 4)
    if isinstance(obj, ProgramObject):
        return f"{pad}Program {obj.name}\n" + format_scope(obj.scope, indent + 4)
    return ""


def format_object_list(objects: list[SymbolObject], indent: int) -> str:
    """Render each object followed by a newline."""
    return "".join(f"{format_object(obj, indent)}\n" for obj in objects)


def format_scope(scope: Scope, indent: int) -> str:
    """Render the objects declared in ``scope``."""
    return format_object_list(scope.objects, indent)