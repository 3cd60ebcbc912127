import pytest

from kplfront.symtab import (
    FunctionObject,
    ObjectKind,
    ParamKind,
    ParameterObject,
    ProcedureObject,
    SymbolTable,
    TypeClass,
    compare_type,
    duplicate_constant_value,
    duplicate_type,
    find_object,
    make_array_type,
    make_char_constant,
    make_char_type,
    make_int_constant,
    make_int_type,
)


@pytest.fixture
def table():
    symtab = SymbolTable()
    program = symtab.create_program("PRG")
    symtab.enter_block(program.scope)
    return symtab


def test_builtin_globals_in_order():
    symtab = SymbolTable()
    assert [obj.name for obj in symtab.global_objects] == [
        "READC",
        "READI",
        "WRITEI",
        "WRITEC",
        "WRITELN",
    ]


def test_builtin_functions_return_types():
    symtab = SymbolTable()
    readc = symtab.lookup("READC")
    readi = symtab.lookup("READI")
    assert isinstance(readc, FunctionObject)
    assert readc.return_type.type_class is TypeClass.CHAR
    assert readi.return_type.type_class is TypeClass.INT


def test_builtin_procedure_parameters():
    symtab = SymbolTable()
    writei = symtab.lookup("WRITEI")
    assert isinstance(writei, ProcedureObject)
    assert [p.name for p in writei.params] == ["i"]
    param = writei.params[0]
    assert param.param_kind is ParamKind.VALUE
    assert param.type.type_class is TypeClass.INT
    assert param.function is writei
    assert symtab.lookup("WRITELN").params == []


def test_compare_type():
    assert compare_type(make_int_type(), make_int_type())
    assert not compare_type(make_int_type(), make_char_type())
    assert compare_type(
        make_array_type(3, make_int_type()), make_array_type(3, make_int_type())
    )
    assert not compare_type(
        make_array_type(3, make_int_type()), make_array_type(4, make_int_type())
    )
    assert not compare_type(
        make_array_type(3, make_int_type()), make_array_type(3, make_char_type())
    )


def test_duplicate_type_is_deep_copy():
    original = make_array_type(2, make_array_type(5, make_char_type()))
    copy = duplicate_type(original)
    assert compare_type(original, copy)
    assert copy is not original
    assert copy.element_type is not original.element_type


def test_duplicate_constant_value():
    ival = make_int_constant(42)
    cval = make_char_constant("x")
    assert duplicate_constant_value(ival) == ival
    assert duplicate_constant_value(ival) is not ival
    assert duplicate_constant_value(cval).char_value == "x"
    assert duplicate_constant_value(cval).type_class is TypeClass.CHAR


def test_program_scope(table):
    assert table.program.kind is ObjectKind.PROGRAM
    assert table.current_scope is table.program.scope
    assert table.current_scope.owner is table.program
    assert table.current_scope.outer is None


def test_declare_and_lookup(table):
    var = table.create_variable("x")
    table.declare(var)
    assert var.scope is table.program.scope
    assert table.lookup("x") is var
    assert table.current_scope.find("x") is var
    assert table.lookup("y") is None


def test_nested_scope_shadowing(table):
    outer_var = table.create_variable("x")
    table.declare(outer_var)
    func = table.create_function("F")
    table.declare(func)
    assert func.scope.outer is table.program.scope

    table.enter_block(func.scope)
    inner_var = table.create_variable("x")
    table.declare(inner_var)
    assert table.lookup("x") is inner_var
    assert table.lookup("F") is func

    table.exit_block()
    assert table.lookup("x") is outer_var


def test_declare_parameter_joins_owner(table):
    proc = table.create_procedure("P")
    table.declare(proc)
    table.enter_block(proc.scope)
    param = table.create_parameter("a", ParamKind.REFERENCE, proc)
    table.declare(param)
    assert proc.params == [param]
    assert proc.scope.find("a") is param
    assert isinstance(param, ParameterObject)


def test_declare_without_scope_raises():
    symtab = SymbolTable()
    with pytest.raises(RuntimeError):
        symtab.declare(symtab.create_variable("x"))


def test_find_object_missing():
    assert find_object([], "A") is None
    symtab = SymbolTable()
    assert find_object(symtab.global_objects, "readc") is None