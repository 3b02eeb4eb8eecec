"""Circuit syntax tree with interned identifiers."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union


class SignalType(Enum):
    OUTPUT = auto()
    INPUT = auto()
    INTERMEDIATE = auto()


class VariableKind(Enum):
    VAR = auto()
    SIGNAL = auto()
    COMPONENT = auto()
    ANONYMOUS_COMPONENT = auto()
    BUS = auto()


@dataclass(frozen=True)
class VariableType:
    """Declared type of a variable, signal, component or bus."""

    kind: VariableKind
    signal_type: Optional[SignalType] = None
    tags: tuple[str, ...] = ()
    bus_name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind in (VariableKind.SIGNAL, VariableKind.BUS):
            if self.signal_type is None:
                raise ValueError(f"{self.kind.name} type requires a signal type")
        elif self.signal_type is not None or self.tags:
            raise ValueError(f"{self.kind.name} type takes no signal type or tags")
        if self.kind is VariableKind.BUS:
            if not self.bus_name:
                raise ValueError("BUS type requires a bus name")
        elif self.bus_name is not None:
            raise ValueError(f"{self.kind.name} type takes no bus name")
        object.__setattr__(self, "tags", tuple(self.tags))


class AssignOp(Enum):
    ASSIGN_VAR = auto()
    ASSIGN_SIGNAL = auto()
    ASSIGN_CONSTRAINT_SIGNAL = auto()


class InfixOpcode(Enum):
    MUL = auto()
    DIV = auto()
    ADD = auto()
    SUB = auto()
    POW = auto()
    INT_DIV = auto()
    MOD = auto()
    SHIFT_L = auto()
    SHIFT_R = auto()
    LESSER_EQ = auto()
    GREATER_EQ = auto()
    LESSER = auto()
    GREATER = auto()
    EQ = auto()
    NOT_EQ = auto()
    BOOL_OR = auto()
    BOOL_AND = auto()
    BIT_OR = auto()
    BIT_AND = auto()
    BIT_XOR = auto()


class PrefixOpcode(Enum):
    SUB = auto()
    BOOL_NOT = auto()
    COMPLEMENT = auto()


@dataclass(frozen=True)
class Meta:
    """Source location information attached to a statement."""

    elem_id: int
    start: int = 0
    end: int = 0


class NameTable:
    """Two-way mapping between names and small integer ids.

    Ids are handed out in order of first appearance, starting at zero.
    """

    def __init__(self) -> None:
        self._name2id: dict[str, int] = {}
        self._id2name: dict[int, str] = {}

    def intern(self, name: str) -> int:
        """Return the id of ``name``, assigning a new one if it is unseen."""
        ident = self._name2id.get(name)
        if ident is None:
            ident = len(self._name2id)
            self._name2id[name] = ident
            self._id2name[ident] = name
        return ident

    def name_of(self, ident: int) -> str:
        """Return the name for ``ident``; raise KeyError if unknown."""
        return self._id2name[ident]

    @property
    def name2id(self) -> dict[str, int]:
        return dict(self._name2id)

    @property
    def id2name(self) -> dict[int, str]:
        return dict(self._id2name)

    def __len__(self) -> int:
        return len(self._name2id)

    def __contains__(self, name: object) -> bool:
        return name in self._name2id


# --- accesses -------------------------------------------------------------


@dataclass
class ComponentAccess:
    name: int


@dataclass
class ArrayAccess:
    index: "Expression"


Access = Union[ComponentAccess, ArrayAccess]


# --- expressions ----------------------------------------------------------


@dataclass
class InfixOp:
    lhe: "Expression"
    infix_op: InfixOpcode
    rhe: "Expression"


@dataclass
class PrefixOp:
    prefix_op: PrefixOpcode
    rhe: "Expression"


@dataclass
class InlineSwitchOp:
    cond: "Expression"
    if_true: "Expression"
    if_false: "Expression"


@dataclass
class ParallelOp:
    rhe: "Expression"


@dataclass
class Variable:
    id: int
    access: list[Access] = field(default_factory=list)


@dataclass
class Number:
    value: int


@dataclass
class Call:
    id: int
    args: list["Expression"] = field(default_factory=list)


@dataclass
class BusCall:
    id: int
    args: list["Expression"] = field(default_factory=list)


@dataclass
class AnonymousComp:
    id: int
    is_parallel: bool
    params: list["Expression"] = field(default_factory=list)
    signals: list["Expression"] = field(default_factory=list)


@dataclass
class ArrayInLine:
    values: list["Expression"] = field(default_factory=list)


@dataclass
class Tuple:
    values: list["Expression"] = field(default_factory=list)


@dataclass
class UniformArray:
    value: "Expression"
    dimension: "Expression"


Expression = Union[
    InfixOp,
    PrefixOp,
    InlineSwitchOp,
    ParallelOp,
    Variable,
    Number,
    Call,
    BusCall,
    AnonymousComp,
    ArrayInLine,
    Tuple,
    UniformArray,
]


# --- statements -----------------------------------------------------------


@dataclass
class IfThenElse:
    meta: Meta
    cond: Expression
    if_case: "Statement"
    else_case: Optional["Statement"] = None


@dataclass
class While:
    meta: Meta
    cond: Expression
    stmt: "Statement"


@dataclass
class Return:
    meta: Meta
    value: Expression


@dataclass
class InitializationBlock:
    meta: Meta
    xtype: VariableType
    initializations: list["Statement"] = field(default_factory=list)


@dataclass
class Declaration:
    meta: Meta
    xtype: VariableType
    id: int
    dimensions: list[Expression] = field(default_factory=list)
    is_constant: bool = False


@dataclass
class Substitution:
    meta: Meta
    var: int
    access: list[Access]
    op: AssignOp
    rhe: Expression


@dataclass
class MultSubstitution:
    meta: Meta
    lhe: Expression
    op: AssignOp
    rhe: Expression


@dataclass
class UnderscoreSubstitution:
    meta: Meta
    op: AssignOp
    rhe: Expression


@dataclass
class ConstraintEquality:
    meta: Meta
    lhe: Expression
    rhe: Expression


@dataclass
class LogCall:
    meta: Meta


@dataclass
class Block:
    meta: Meta
    stmts: list["Statement"] = field(default_factory=list)


@dataclass
class Assert:
    meta: Meta
    arg: Expression


@dataclass
class Ret:
    pass


Statement = Union[
    IfThenElse,
    While,
    Return,
    InitializationBlock,
    Declaration,
    Substitution,
    MultSubstitution,
    UnderscoreSubstitution,
    ConstraintEquality,
    LogCall,
    Block,
    Assert,
    Ret,
]


def _children(stmt: Statement) -> list[Statement]:
    if isinstance(stmt, IfThenElse):
        children = [stmt.if_case]
        if stmt.else_case is not None:
            children.append(stmt.else_case)
        return children
    if isinstance(stmt, While):
        return [stmt.stmt]
    if isinstance(stmt, InitializationBlock):
        return list(stmt.initializations)
    if isinstance(stmt, Block):
        return list(stmt.stmts)
    return []


def walk_statements(stmt: Statement) -> Iterator[Statement]:
    """Yield ``stmt`` and its nested statements, depth first.

    Children are pushed onto a stack in order and popped last-first, so the
    last child of a node is visited before the first. A node's children are
    read only after the consumer has resumed from it, so changes made to a
    yielded node are seen by the traversal.
    """
    stack = [stmt]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(_children(current))


def apply_iterative(stmt: Statement, func: Callable[[Statement], None]) -> None:
    """Call ``func`` on ``stmt`` and every statement nested in it."""
    for current in walk_statements(stmt):
        func(current)