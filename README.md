# zkfuzz

Building blocks for fuzzing zero-knowledge circuits:

- `zkfuzz.coverage`: a tracker that counts the distinct execution paths
  taken through a program;
- `zkfuzz.debug_ast`: node types for circuit statements and expressions,
  with identifiers interned as integers, and a traversal over nested
  statements;
- `zkfuzz.debug_format`: an indented, ANSI-coloured text dump of those
  nodes.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Coverage tracking

`CoverageTracker` records the branches taken during one execution and
counts how many distinct execution paths have been seen.

```python
from zkfuzz.coverage import CoverageTracker

tracker = CoverageTracker()
tracker.record_branch(1, True)
tracker.record_branch(2, False)
tracker.record_path()
assert tracker.coverage_count() == 1

tracker.clear_current_path()
tracker.record_branch(3, True)
tracker.record_path()
assert tracker.coverage_count() == 2

tracker.clear()
assert tracker.coverage_count() == 0
```

- `record_branch(meta_elem_id, branch_cond)` appends a step to the current
  path. Each step holds the branch id, how many times that branch has been
  reached on the current path so far, and the condition's outcome.
- `record_path()` stores the current path. Recording the same path twice
  counts once.
- `clear_current_path()` starts a new path and keeps the recorded ones.
- `clear()` forgets everything.
- `coverage_count()` returns the number of distinct paths recorded.

A branch reached a second time on the same path is a separate step, so a
loop that runs twice and one that runs once give different paths.
`copy.copy(tracker)` gives an independent tracker with the same state.

## Syntax trees

`zkfuzz.debug_ast` defines:

- enums `SignalType`, `VariableKind`, `AssignOp`, `InfixOpcode`,
  `PrefixOpcode`;
- `VariableType(kind, signal_type=None, tags=(), bus_name=None)`, which
  raises `ValueError` when the fields do not fit the kind (signals and
  buses need a signal type, buses need a name, the other kinds take
  neither);
- `Meta(elem_id, start=0, end=0)`;
- accesses `ComponentAccess`, `ArrayAccess`;
- expressions `InfixOp`, `PrefixOp`, `InlineSwitchOp`, `ParallelOp`,
  `Variable`, `Number`, `Call`, `BusCall`, `AnonymousComp`, `ArrayInLine`,
  `Tuple`, `UniformArray`;
- statements `IfThenElse`, `While`, `Return`, `InitializationBlock`,
  `Declaration`, `Substitution`, `MultSubstitution`,
  `UnderscoreSubstitution`, `ConstraintEquality`, `LogCall`, `Block`,
  `Assert`, `Ret`.

Identifiers in nodes are integers handed out by a `NameTable`:
`intern(name)` returns the id of a name, assigning the next free id (from
zero, in order of first appearance) to a new one; `name_of(ident)` maps
back and raises `KeyError` for an unknown id. The `name2id` and `id2name`
properties return copies of both mappings; `len()` and `in` work on names.

```python
from zkfuzz.debug_ast import AssignOp, Block, Meta, NameTable, Number, Substitution

names = NameTable()
out = names.intern("out")
stmt = Block(
    meta=Meta(elem_id=0),
    stmts=[
        Substitution(
            meta=Meta(elem_id=1),
            var=out,
            access=[],
            op=AssignOp.ASSIGN_CONSTRAINT_SIGNAL,
            rhe=Number(1),
        )
    ],
)
```

`walk_statements(stmt)` yields a statement and every statement nested in
it (branches of `IfThenElse`, bodies of `While`, contents of `Block` and
`InitializationBlock`), depth first, with the last child of a node visited
before the first. `apply_iterative(stmt, func)` calls `func` on each of
them; changes `func` makes to a node's children are seen by the traversal.

## Pretty printing

`zkfuzz.debug_format` renders nodes as indented text with ANSI colour
codes. The lookup may be a `NameTable` or any mapping from id to name.

```python
from zkfuzz.debug_format import format_statement

print(format_statement(stmt, names, 0))
```

`format_expression`, `format_access`, `format_variable_type`,
`format_signal_type`, `format_assign_op`, `format_infix_opcode` and
`format_prefix_opcode` render the smaller pieces. Each level of nesting
adds two indentation steps of two spaces. The statement dump prints headers
only for the condition and `if` branch of an `IfThenElse`, the condition of
a `While` and the left side of a `ConstraintEquality`; the nested content
in those places is not rendered. Passing something that is not a node
raises `TypeError`.

## What the package does not do

It does not read circuit source files: trees are built by hand from the
node types above. It has no symbolic or concrete executor, no mutation
search for under-constrained circuits and no command-line tool; the
coverage tracker only counts the paths it is told about.