import re

import pytest

from zkfuzz.debug_ast import (
    AnonymousComp,
    ArrayAccess,
    AssignOp,
    Block,
    ComponentAccess,
    Declaration,
    IfThenElse,
    InfixOp,
    InfixOpcode,
    LogCall,
    Meta,
    NameTable,
    Number,
    PrefixOpcode,
    Ret,
    SignalType,
    Substitution,
    Variable,
    VariableKind,
    VariableType,
)
from zkfuzz.debug_format import (
    format_access,
    format_assign_op,
    format_expression,
    format_infix_opcode,
    format_prefix_opcode,
    format_signal_type,
    format_statement,
    format_variable_type,
)


def plain(text):
    return re.sub(r"\x1b\[\d+m", "", text)


@pytest.mark.parametrize(
    "opcode, name",
    [
        (InfixOpcode.MUL, "Mul"),
        (InfixOpcode.SHIFT_L, "ShL"),
        (InfixOpcode.LESSER_EQ, "LEq"),
        (InfixOpcode.LESSER, "Lt"),
        (InfixOpcode.NOT_EQ, "NEq"),
        (InfixOpcode.BIT_XOR, "BitXor"),
    ],
)
def test_infix_names(opcode, name):
    assert format_infix_opcode(opcode) == name


def test_infix_names_are_distinct():
    names = {format_infix_opcode(op) for op in InfixOpcode}
    assert len(names) == len(InfixOpcode)


def test_prefix_names():
    assert format_prefix_opcode(PrefixOpcode.SUB) == "Minus"
    assert format_prefix_opcode(PrefixOpcode.BOOL_NOT) == "BoolNot"
    assert format_prefix_opcode(PrefixOpcode.COMPLEMENT) == "Complement"


def test_assign_op_names():
    assert format_assign_op(AssignOp.ASSIGN_VAR) == "AssignVar"
    assert format_assign_op(AssignOp.ASSIGN_CONSTRAINT_SIGNAL) == "AssignConstraintSignal"


def test_signal_type_names():
    assert format_signal_type(SignalType.INTERMEDIATE) == "Intermediate"


def test_variable_types():
    assert format_variable_type(VariableType(VariableKind.VAR)) == "Var"
    assert format_variable_type(VariableType(VariableKind.COMPONENT)) == "Component"
    sig = VariableType(VariableKind.SIGNAL, SignalType.OUTPUT)
    assert format_variable_type(sig) == "Signal: Output []"
    tagged = VariableType(VariableKind.SIGNAL, SignalType.INPUT, ("binary",))
    assert format_variable_type(tagged) == 'Signal: Input ["binary"]'
    bus = VariableType(VariableKind.BUS, SignalType.INPUT, (), "Point")
    assert format_variable_type(bus) == "Bus: Point Input []"


def test_number_exact():
    assert format_expression(Number(5), {}, 1) == "  \x1b[34mNumber:\x1b[0m 5\n"


def test_component_access():
    out = format_access(ComponentAccess(0), {0: "out"}, 1)
    assert out == "  ComponentAccess\n    name: out\n"


def test_array_access_nests_expression():
    out = plain(format_access(ArrayAccess(Number(3)), {}, 0))
    assert out.splitlines() == ["ArrayAccess:", "    Number: 3"]


def test_infix_structure():
    expr = InfixOp(Number(1), InfixOpcode.ADD, Variable(0))
    lines = plain(format_expression(expr, {0: "x"}, 0)).splitlines()
    assert lines == [
        "InfixOp:",
        "  Operator: Add",
        "  Left-Hand Expression:",
        "    Number: 1",
        "  Right-Hand Expression:",
        "    Variable:",
        "      Name: x",
        "      Access:",
    ]


def test_indent_prefixes_every_line():
    expr = InfixOp(Variable(0, [ArrayAccess(Number(2))]), InfixOpcode.MUL, Number(7))
    for line in format_expression(expr, {0: "a"}, 3).splitlines():
        assert line.startswith("      ")


def test_name_table_as_lookup():
    table = NameTable()
    ident = table.intern("signal_in")
    assert "Name: signal_in" in plain(format_expression(Variable(ident), table, 0))


def test_unknown_id_raises():
    with pytest.raises(KeyError):
        format_expression(Variable(9), {}, 0)


def test_anonymous_comp_prints_raw_id():
    expr = AnonymousComp(4, True, [Number(1)], [])
    lines = plain(format_expression(expr, {}, 0)).splitlines()
    assert lines[1] == "  id: 4"
    assert lines[2] == "  is_parallel: true"


def test_unsupported_expression():
    with pytest.raises(TypeError):
        format_expression("nope", {}, 0)


def test_declaration():
    stmt = Declaration(Meta(7), VariableType(VariableKind.VAR), 0, [Number(2)], True)
    lines = plain(format_statement(stmt, {0: "arr"}, 0)).splitlines()
    assert lines[0] == "Declaration (elem_id=7):"
    assert "  Name: arr" in lines
    assert "    Number: 2" in lines
    assert lines[-1] == "  Is Constant: true"


def test_block_separators():
    block = Block(Meta(1), [LogCall(Meta(2)), Ret()])
    out = format_statement(block, {}, 0)
    assert out.count("-------------------------------") == 3
    assert "LogCall" in out and "Ret" in out


def test_if_then_else_shows_only_else_body():
    stmt = IfThenElse(Meta(3), Variable(0), Ret(), LogCall(Meta(4)))
    out = plain(format_statement(stmt, {0: "cond_var"}, 0))
    assert "cond_var" not in out
    assert out.splitlines()[-1] == "    LogCall"


def test_substitution():
    stmt = Substitution(Meta(5), 0, [], AssignOp.ASSIGN_SIGNAL, Number(1))
    lines = plain(format_statement(stmt, {0: "y"}, 0)).splitlines()
    assert "  Variable: y" in lines
    assert "  Operation: AssignSignal" in lines


def test_unsupported_statement():
    with pytest.raises(TypeError):
        format_statement(Number(1), {}, 0)