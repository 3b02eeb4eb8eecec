"""Indented, colour-highlighted text dumps of circuit syntax trees."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Union

from zkfuzz.debug_ast import (
    AnonymousComp,
    ArrayAccess,
    ArrayInLine,
    Assert,
    AssignOp,
    Block,
    BusCall,
    Call,
    ComponentAccess,
    ConstraintEquality,
    Declaration,
    IfThenElse,
    InfixOp,
    InfixOpcode,
    InitializationBlock,
    InlineSwitchOp,
    LogCall,
    MultSubstitution,
    NameTable,
    Number,
    ParallelOp,
    PrefixOp,
    PrefixOpcode,
    Ret,
    Return,
    SignalType,
    Substitution,
    Tuple,
    UnderscoreSubstitution,
    UniformArray,
    Variable,
    VariableKind,
    VariableType,
    While,
)

_RESET = "\x1b[0m"
_BLUE = "\x1b[34m"
_GREEN = "\x1b[32m"
_YELLOW = "\x1b[33m"
_CYAN = "\x1b[36m"
_MAGENTA = "\x1b[35m"
_RED = "\x1b[31m"

_SEPARATOR = f"{_RED}-------------------------------{_RESET}"

Lookup = Union[Mapping[int, str], NameTable]

_SIGNAL_TYPE_NAMES = {
    SignalType.OUTPUT: "Output",
    SignalType.INPUT: "Input",
    SignalType.INTERMEDIATE: "Intermediate",
}

_ASSIGN_OP_NAMES = {
    AssignOp.ASSIGN_VAR: "AssignVar",
    AssignOp.ASSIGN_SIGNAL: "AssignSignal",
    AssignOp.ASSIGN_CONSTRAINT_SIGNAL: "AssignConstraintSignal",
}

_INFIX_NAMES = {
    InfixOpcode.MUL: "Mul",
    InfixOpcode.DIV: "Div",
    InfixOpcode.ADD: "Add",
    InfixOpcode.SUB: "Sub",
    InfixOpcode.POW: "Pow",
    InfixOpcode.INT_DIV: "IntDiv",
    InfixOpcode.MOD: "Mod",
    InfixOpcode.SHIFT_L: "ShL",
    InfixOpcode.SHIFT_R: "ShR",
    InfixOpcode.LESSER_EQ: "LEq",
    InfixOpcode.GREATER_EQ: "GEq",
    InfixOpcode.LESSER: "Lt",
    InfixOpcode.GREATER: "Gt",
    InfixOpcode.EQ: "Eq",
    InfixOpcode.NOT_EQ: "NEq",
    InfixOpcode.BOOL_OR: "BoolOr",
    InfixOpcode.BOOL_AND: "BoolAnd",
    InfixOpcode.BIT_OR: "BitOr",
    InfixOpcode.BIT_AND: "BitAnd",
    InfixOpcode.BIT_XOR: "BitXor",
}

_PREFIX_NAMES = {
    PrefixOpcode.SUB: "Minus",
    PrefixOpcode.BOOL_NOT: "BoolNot",
    PrefixOpcode.COMPLEMENT: "Complement",
}


def _name(lookup: Lookup, ident: int) -> str:
    if isinstance(lookup, NameTable):
        return lookup.name_of(ident)
    return lookup[ident]


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _tags(tags: tuple[str, ...]) -> str:
    return "[" + ", ".join(json.dumps(t, ensure_ascii=False) for t in tags) + "]"


def format_signal_type(signal_type: SignalType) -> str:
    """Name of a signal direction."""
    return _SIGNAL_TYPE_NAMES[signal_type]


def format_variable_type(xtype: VariableType) -> str:
    """One-line description of a declared type."""
    if xtype.kind is VariableKind.VAR:
        return "Var"
    if xtype.kind is VariableKind.COMPONENT:
        return "Component"
    if xtype.kind is VariableKind.ANONYMOUS_COMPONENT:
        return "AnonymousComponent"
    signal = format_signal_type(xtype.signal_type)
    if xtype.kind is VariableKind.SIGNAL:
        return f"Signal: {signal} {_tags(xtype.tags)}"
    return f"Bus: {xtype.bus_name} {signal} {_tags(xtype.tags)}"


def format_assign_op(op: AssignOp) -> str:
    """Short name of an assignment operator."""
    return _ASSIGN_OP_NAMES[op]


def format_infix_opcode(opcode: InfixOpcode) -> str:
    """Short name of a binary operator."""
    return _INFIX_NAMES[opcode]


def format_prefix_opcode(opcode: PrefixOpcode) -> str:
    """Short name of a unary operator."""
    return _PREFIX_NAMES[opcode]


def format_access(access, lookup: Lookup, indent: int = 0) -> str:
    """Render a component or array access."""
    ind = "  " * indent
    match access:
        case ComponentAccess(name=name):
            return f"{ind}ComponentAccess\n{ind}  name: {_name(lookup, name)}\n"
        case ArrayAccess(index=index):
            return f"{ind}ArrayAccess:\n" + format_expression(index, lookup, indent + 2)
    raise TypeError(f"not an access: {access!r}")


def _many(items, lookup: Lookup, indent: int) -> str:
    return "".join(format_expression(item, lookup, indent) for item in items)


def format_expression(expr, lookup: Lookup, indent: int = 0) -> str:
    """Render an expression tree, one node per block of lines."""
    ind = "  " * indent
    sub = indent + 2
    match expr:
        case Number(value=value):
            return f"{ind}{_BLUE}Number:{_RESET} {value}\n"
        case InfixOp(lhe=lhe, infix_op=op, rhe=rhe):
            return "".join(
                [
                    f"{ind}{_GREEN}InfixOp:{_RESET}\n",
                    f"{ind}  {_CYAN}Operator:{_RESET} {format_infix_opcode(op)}\n",
                    f"{ind}  {_YELLOW}Left-Hand Expression:{_RESET}\n",
                    format_expression(lhe, lookup, sub),
                    f"{ind}  {_YELLOW}Right-Hand Expression:{_RESET}\n",
                    format_expression(rhe, lookup, sub),
                ]
            )
        case PrefixOp(prefix_op=op, rhe=rhe):
            return "".join(
                [
                    f"{ind}{_GREEN}PrefixOp:{_RESET}\n",
                    f"{ind}  {_CYAN}Operator:{_RESET} {format_prefix_opcode(op)}\n",
                    f"{ind}  {_YELLOW}Right-Hand Expression:{_RESET}\n",
                    format_expression(rhe, lookup, sub),
                ]
            )
        case ParallelOp(rhe=rhe):
            return "".join(
                [
                    f"{ind}ParallelOp\n",
                    f"{ind}  {_YELLOW}Right-Hand Expression:{_RESET}\n",
                    format_expression(rhe, lookup, sub),
                ]
            )
        case Variable(id=ident, access=accesses):
            return "".join(
                [
                    f"{ind}{_BLUE}Variable:{_RESET}\n",
                    f"{ind}  Name: {_name(lookup, ident)}\n",
                    f"{ind}  Access:\n",
                    *(format_access(a, lookup, sub) for a in accesses),
                ]
            )
        case InlineSwitchOp(if_true=if_true, if_false=if_false):
            return "".join(
                [
                    f"{ind}InlineSwitchOp:\n",
                    f"{ind}  if_true:\n",
                    format_expression(if_true, lookup, sub),
                    f"{ind}  if_false:\n",
                    format_expression(if_false, lookup, sub),
                ]
            )
        case Call(id=ident, args=args):
            return "".join(
                [
                    f"{ind}Call\n",
                    f"{ind}  id: {_name(lookup, ident)}\n",
                    f"{ind}  args:\n",
                    _many(args, lookup, sub),
                ]
            )
        case ArrayInLine(values=values):
            return f"{ind}ArrayInLine\n{ind}  values:\n" + _many(values, lookup, sub)
        case Tuple(values=values):
            return f"{ind}Tuple\n{ind}  values:\n" + _many(values, lookup, sub)
        case UniformArray(value=value, dimension=dimension):
            return "".join(
                [
                    f"{ind}UniformArray\n",
                    f"{ind}  value:\n",
                    format_expression(value, lookup, sub),
                    f"{ind}  dimension:\n",
                    format_expression(dimension, lookup, sub),
                ]
            )
        case BusCall(id=ident, args=args):
            return "".join(
                [
                    f"{ind}BusCall\n",
                    f"{ident}  id:\n",
                    f"{ind}  args:\n",
                    _many(args, lookup, sub),
                ]
            )
        case AnonymousComp(id=ident, is_parallel=is_parallel, params=params, signals=signals):
            return "".join(
                [
                    f"{ind}AnonymousComp\n",
                    f"{ind}  id: {ident}\n",
                    f"{ind}  is_parallel: {_flag(is_parallel)}\n",
                    f"{ind}  params:\n",
                    _many(params, lookup, sub),
                    f"{ind}  signals:\n",
                    _many(signals, lookup, sub),
                ]
            )
    raise TypeError(f"not an expression: {expr!r}")


def _header(ind: str, title: str, meta) -> str:
    return f"{ind}{_GREEN}{title}{_RESET} (elem_id={meta.elem_id}):\n"


def format_statement(stmt, lookup: Lookup, indent: int = 0) -> str:
    """Render a statement tree, one node per block of lines."""
    ind = "  " * indent
    sub = indent + 2
    match stmt:
        case IfThenElse(meta=meta, else_case=else_case):
            parts = [
                _header(ind, "IfThenElse", meta),
                f"{ind}  {_CYAN}Condition:{_RESET}:\n",
                f"{ind}  {_CYAN}If Case:{_RESET}:\n",
            ]
            if else_case is not None:
                parts.append(f"{ind}  {_CYAN}Else Case:{_RESET}:\n")
                parts.append(format_statement(else_case, lookup, sub))
            return "".join(parts)
        case While(meta=meta, stmt=body):
            return "".join(
                [
                    _header(ind, "While", meta),
                    f"{ind}  {_CYAN}Condition:{_RESET}:\n",
                    f"{ind}  {_CYAN}Statement:{_RESET}:\n",
                    format_statement(body, lookup, sub),
                ]
            )
        case Return(meta=meta, value=value):
            return "".join(
                [
                    _header(ind, "Return", meta),
                    f"{ind}  {_MAGENTA}Value:{_RESET}:\n",
                    format_expression(value, lookup, sub),
                ]
            )
        case Substitution(meta=meta, var=var, access=accesses, op=op, rhe=rhe):
            return "".join(
                [
                    _header(ind, "Substitution", meta),
                    f"{ind}  {_BLUE}Variable:{_RESET} {_name(lookup, var)}\n",
                    f"{ind}  {_MAGENTA}Access:{_RESET}\n",
                    *(format_access(a, lookup, sub) for a in accesses),
                    f"{ind}  {_CYAN}Operation:{_RESET} {format_assign_op(op)}\n",
                    f"{ind}  {_YELLOW}Right-Hand Expression:{_RESET}:\n",
                    format_expression(rhe, lookup, sub),
                ]
            )
        case Block(meta=meta, stmts=stmts):
            separator = f"{ind}    {_SEPARATOR}\n"
            parts = [_header(ind, "Block", meta), separator]
            for inner in stmts:
                parts.append(format_statement(inner, lookup, sub))
                parts.append(separator)
            return "".join(parts)
        case Assert(meta=meta, arg=arg):
            return "".join(
                [
                    _header(ind, "Assert", meta),
                    f"{ind}  {_YELLOW}Argument:{_RESET}:\n",
                    format_expression(arg, lookup, sub),
                ]
            )
        case InitializationBlock(meta=meta, xtype=xtype, initializations=inits):
            return "".join(
                [
                    _header(ind, "InitializationBlock", meta),
                    f"{ind}  {_CYAN}Type:{_RESET} {format_variable_type(xtype)}\n",
                    f"{ind}  {_YELLOW}Initializations:{_RESET}\n",
                    *(format_statement(i, lookup, sub) for i in inits),
                ]
            )
        case Declaration(meta=meta, xtype=xtype, id=ident, dimensions=dims, is_constant=const):
            return "".join(
                [
                    _header(ind, "Declaration", meta),
                    f"{ind}  {_CYAN}Type:{_RESET} {format_variable_type(xtype)}\n",
                    f"{ind}  {_MAGENTA}Name:{_RESET} {_name(lookup, ident)}\n",
                    f"{ind}  {_YELLOW}Dimensions:{_RESET}:\n",
                    _many(dims, lookup, sub),
                    f"{ind}  {_CYAN}Is Constant:{_RESET} {_flag(const)}\n",
                ]
            )
        case MultSubstitution(meta=meta, lhe=lhe, op=op, rhe=rhe):
            return "".join(
                [
                    _header(ind, "MultSubstitution", meta),
                    f"{ind}  {_CYAN}Op:{_RESET} {format_assign_op(op)}\n",
                    f"{ind}  {_YELLOW}Left-Hand Expression:{_RESET}:\n",
                    format_expression(lhe, lookup, sub),
                    f"{ind}  {_YELLOW}Right-Hand Expression:{_RESET}:\n",
                    format_expression(rhe, lookup, sub),
                ]
            )
        case UnderscoreSubstitution(meta=meta, op=op, rhe=rhe):
            return "".join(
                [
                    _header(ind, "UnderscoreSubstitution", meta),
                    f"{ind}  {_CYAN}Op:{_RESET} {format_assign_op(op)}\n",
                    f"{ind}  {_YELLOW}Right-Hand Expression:{_RESET}:\n",
                    format_expression(rhe, lookup, sub),
                ]
            )
        case ConstraintEquality(meta=meta, rhe=rhe):
            return "".join(
                [
                    _header(ind, "ConstraintEquality", meta),
                    f"{ind}  {_YELLOW}Left-Hand Expression:{_RESET}:\n",
                    f"{ind}  {_YELLOW}Right-Hand Expression:{_RESET}:\n",
                    format_expression(rhe, lookup, sub),
                ]
            )
        case LogCall():
            return f"{ind}{_GREEN}LogCall{_RESET}\n"
        case Ret():
            return f"{ind}{_BLUE}Ret{_RESET}\n"
    raise TypeError(f"not a statement: {stmt!r}")