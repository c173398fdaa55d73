"""Expression nodes handed to the evaluator.

The node set is closed: every variant below is handled by
`fwjs.evaluator.eval_node`. Nodes are immutable once built, so a single
function body may be shared by any number of closures.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Tuple, Union
from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from .types import FwValue


class Op(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MOD = "%"
    EQ = "=="
    GE = ">="
    GT = ">"
    LE = "<="
    LT = "<"

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Op':
        return cls(symbol)


@dataclass(frozen=True)
class SourceMeta:
    line: int
    column: int


def _meta_field() -> Any:
    return field(default=None, kw_only=True, compare=False, repr=False)


@dataclass(frozen=True)
class Constant:
    value: 'FwValue'
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class Variable:
    name: str
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class Print:
    expr: 'Node'
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class BinaryOp:
    op: Op
    left: 'Node'
    right: 'Node'
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class If:
    cond: 'Node'
    then: 'Node'
    else_: 'Node'
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class While:
    cond: 'Node'
    body: 'Node'
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class Sequence:
    first: 'Node'
    second: 'Node'
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class VarDecl:
    name: str
    expr: 'Node'
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class Assign:
    name: str
    expr: 'Node'
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class FunctionDecl:
    params: Tuple[str, ...]
    body: 'Node'
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class FunctionApp:
    fn: 'Node'
    args: Tuple['Node', ...]
    meta: Optional[SourceMeta] = _meta_field()


Node: TypeAlias = Union[
    Constant,
    Variable,
    Print,
    BinaryOp,
    If,
    While,
    Sequence,
    VarDecl,
    Assign,
    FunctionDecl,
    FunctionApp,
]


def node_meta(node: object) -> Optional[SourceMeta]:
    return getattr(node, "meta", None)


def seq(*nodes: 'Node') -> 'Node':
    """Right-nest `nodes` into Sequence pairs; a single node is returned as-is."""
    if not nodes:
        raise ValueError("seq() needs at least one node")

    acc = nodes[-1]

    for node in reversed(nodes[:-1]):
        acc = Sequence(node, acc)

    return acc
