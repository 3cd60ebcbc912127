from kplfront.debug import (
    format_constant_value,
    format_object,
    format_object_list,
    format_scope,
    format_type,
)
from kplfront.symtab import (
    ParamKind,
    SymbolTable,
    make_array_type,
    make_char_constant,
    make_char_type,
    make_int_constant,
    make_int_type,
)


def _program_with_var():
    symtab = SymbolTable()
    program = symtab.create_program("P")
    symtab.enter_block(program.scope)
    var = symtab.create_variable("x")
    var.type = make_int_type()
    symtab.declare(var)
    return symtab, program


def test_basic_types():
    assert format_type(make_int_type()) == "Int"
    assert format_type(make_char_type()) == "Char"


def test_array_type():
    assert format_type(make_array_type(3, make_int_type())) == "Arr(3,Int)"
    nested = make_array_type(2, make_array_type(3, make_char_type()))
    assert format_type(nested).startswith("Arr(2,Arr(")
    assert format_type(nested).count("Arr(") == 2


def test_constant_values():
    assert format_constant_value(make_int_constant(42)) == "42"
    assert format_constant_value(make_char_constant("a")) == "'a'"


def test_constant_object_indent():
    symtab = SymbolTable()
    const = symtab.create_constant("C")
    const.value = make_int_constant(5)
    text = format_object(const, 2)
    assert text == "  Const C = 5"


def test_parameter_kinds():
    symtab = SymbolTable()
    proc = symtab.create_procedure("Q")
    by_value = symtab.create_parameter("a", ParamKind.VALUE, proc)
    by_value.type = make_int_type()
    by_ref = symtab.create_parameter("b", ParamKind.REFERENCE, proc)
    by_ref.type = make_char_type()
    assert format_object(by_value, 0).startswith("Param a : ")
    assert format_object(by_ref, 0).startswith("Param VAR b : ")


def test_program_dump():
    _, program = _program_with_var()
    assert format_object(program, 0) == "Program P\n    Var x : Int\n"


def test_function_scope_is_indented():
    symtab, program = _program_with_var()
    func = symtab.create_function("F")
    func.return_type = make_char_type()
    symtab.declare(func)
    symtab.enter_block(func.scope)
    local = symtab.create_variable("y")
    local.type = make_char_type()
    symtab.declare(local)

    lines = format_object(func, 4).splitlines()
    assert lines[0].startswith("    Function F : ")
    assert lines[1].startswith(" " * 8 + "Var y")


def test_object_list_and_scope():
    _, program = _program_with_var()
    assert format_object_list([], 0) == ""
    text = format_scope(program.scope, 0)
    assert text.endswith("\n")
    assert text.splitlines() == [format_object(program.scope.objects[0], 0)]