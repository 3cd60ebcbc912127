"""Symbol table: types, constants, declared objects and nested scopes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar


class TypeClass(Enum):
    """Kind of a type."""

    INT = auto()
    CHAR = auto()
    ARRAY = auto()


class ObjectKind(Enum):
    """Kind of a declared object."""

    CONSTANT = auto()
    VARIABLE = auto()
    TYPE = auto()
    FUNCTION = auto()
    PROCEDURE = auto()
    PARAMETER = auto()
    PROGRAM = auto()


class ParamKind(Enum):
    """How a parameter is passed."""

    VALUE = auto()
    REFERENCE = auto()


@dataclass
class Type:
    """A basic type or an array type."""

    type_class: TypeClass
    array_size: int = 0
    element_type: Type | None = None


@dataclass
class ConstantValue:
    """An integer or character constant."""

    type_class: TypeClass
    int_value: int = 0
    char_value: str = ""


@dataclass(eq=False)
class Scope:
    """Objects declared in one block, linked to the enclosing scope."""

    owner: SymbolObject | None = field(default=None, repr=False)
    outer: Scope | None = field(default=None, repr=False)
    objects: list[SymbolObject] = field(default_factory=list)

    def find(self, name: str) -> SymbolObject | None:
        """Return the object named ``name`` declared directly in this scope."""
        return find_object(self.objects, name)


@dataclass(eq=False)
class SymbolObject:
    """Base of every declared object."""

    name: str
    kind: ClassVar[ObjectKind]


@dataclass(eq=False)
class ConstantObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.CONSTANT
    value: ConstantValue | None = None


@dataclass(eq=False)
class TypeObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.TYPE
    actual_type: Type | None = None


@dataclass(eq=False)
class VariableObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.VARIABLE
    type: Type | None = None
    scope: Scope | None = field(default=None, repr=False)


@dataclass(eq=False)
class FunctionObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.FUNCTION
    params: list[ParameterObject] = field(default_factory=list)
    return_type: Type | None = None
    scope: Scope | None = field(default=None, repr=False)


@dataclass(eq=False)
class ProcedureObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.PROCEDURE
    params: list[ParameterObject] = field(default_factory=list)
    scope: Scope | None = field(default=None, repr=False)


@dataclass(eq=False)
class ParameterObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.PARAMETER
    param_kind: ParamKind = ParamKind.VALUE
    type: Type | None = None
    function: SymbolObject | None = field(default=None, repr=False)


@dataclass(eq=False)
class ProgramObject(SymbolObject):
    kind: ClassVar[ObjectKind] = ObjectKind.PROGRAM
    scope: Scope | None = field(default=None, repr=False)


# ---------------------------------------------------------------- types


def make_int_type() -> Type:
    return Type(TypeClass.INT)


def make_char_type() -> Type:
    return Type(TypeClass.CHAR)


def make_array_type(array_size: int, element_type: Type) -> Type:
    return Type(TypeClass.ARRAY, array_size, element_type)


def duplicate_type(type_: Type) -> Type:
    """Return a deep copy of ``type_``."""
    if type_.type_class is TypeClass.ARRAY:
        return Type(TypeClass.ARRAY, type_.array_size, duplicate_type(type_.element_type))
    return Type(type_.type_class)


def compare_type(type1: Type, type2: Type) -> bool:
    """Return True if both types are structurally the same."""
    if type1.type_class is not type2.type_class:
        return False
    if type1.type_class is TypeClass.ARRAY:
        return type1.array_size == type2.array_size and compare_type(
            type1.element_type, type2.element_type
        )
    return True


# ------------------------------------------------------------- constants


def make_int_constant(i: int) -> ConstantValue:
    return ConstantValue(TypeClass.INT, int_value=i)


def make_char_constant(ch: str) -> ConstantValue:
    return ConstantValue(TypeClass.CHAR, char_value=ch)


def duplicate_constant_value(value: ConstantValue) -> ConstantValue:
    """Return a copy of ``value``."""
    if value.type_class is TypeClass.INT:
        return make_int_constant(value.int_value)
    return ConstantValue(value.type_class, char_value=value.char_value)


# --------------------------------------------------------------- objects


def find_object(objects: list[SymbolObject], name: str) -> SymbolObject | None:
    """Return the first object in ``objects`` named exactly ``name``."""
    return next((obj for obj in objects if obj.name == name), None)


class SymbolTable:
    """Program object, current scope and built-in global objects."""

    def __init__(self) -> None:
        self.program: ProgramObject | None = None
        self.current_scope: Scope | None = None
        self.global_objects: list[SymbolObject] = []

        readc = self.create_function("READC")
        readc.return_type = make_char_type()
        self.global_objects.append(readc)

        readi = self.create_function("READI")
        readi.return_type = make_int_type()
        self.global_objects.append(readi)

        writei = self.create_procedure("WRITEI")
        param = self.create_parameter("i", ParamKind.VALUE, writei)
        param.type = make_int_type()
        writei.params.append(param)
        self.global_objects.append(writei)

        writec = self.create_procedure("WRITEC")
        param = self.create_parameter("ch", ParamKind.VALUE, writec)
        param.type = make_char_type()
        writec.params.append(param)
        self.global_objects.append(writec)

        self.global_objects.append(self.create_procedure("WRITELN"))

        self.int_type = make_int_type()
        self.char_type = make_char_type()

    def create_program(self, name: str) -> ProgramObject:
        program = ProgramObject(name)
        program.scope = Scope(owner=program, outer=None)
        self.program = program
        return program

    def create_constant(self, name: str) -> ConstantObject:
        return ConstantObject(name)

    def create_type(self, name: str) -> TypeObject:
        return TypeObject(name)

    def create_variable(self, name: str) -> VariableObject:
        return VariableObject(name, scope=self.current_scope)

    def create_function(self, name: str) -> FunctionObject:
        function = FunctionObject(name)
        function.scope = Scope(owner=function, outer=self.current_scope)
        return function

    def create_procedure(self, name: str) -> ProcedureObject:
        procedure = ProcedureObject(name)
        procedure.scope = Scope(owner=procedure, outer=self.current_scope)
        return procedure

    def create_parameter(
        self, name: str, kind: ParamKind, owner: SymbolObject
    ) -> ParameterObject:
        return ParameterObject(name, param_kind=kind, function=owner)

    def enter_block(self, scope: Scope) -> None:
        self.current_scope = scope

    def exit_block(self) -> None:
        if self.current_scope is None:
            raise RuntimeError("no block to exit")
        self.current_scope = self.current_scope.outer

    def declare(self, obj: SymbolObject) -> None:
        """Add ``obj`` to the current scope; parameters also join the owner's list."""
        scope = self.current_scope
        if scope is None:
            raise RuntimeError("no current scope to declare into")
        if isinstance(obj, ParameterObject) and isinstance(
            scope.owner, (FunctionObject, ProcedureObject)
        ):
            scope.owner.params.append(obj)
        scope.objects.append(obj)

    def lookup(self, name: str) -> SymbolObject | None:
        """Find ``name`` from the current scope outwards, then among the globals."""
        scope = self.current_scope
        while scope is not None:
            obj = scope.find(name)
            if obj is not None:
                return obj
            scope = scope.outer
        return find_object(self.global_objects, name)