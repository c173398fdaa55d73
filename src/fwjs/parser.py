"""Text front end: lark grammar -> fwjs expression nodes."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, List, Optional

from lark import Lark, Token, Transformer, UnexpectedInput, v_args
from lark.exceptions import VisitError

from .tree import (
    Assign,
    BinaryOp,
    Constant,
    FunctionApp,
    FunctionDecl,
    If,
    Node,
    Op,
    Print,
    SourceMeta,
    VarDecl,
    Variable,
    While,
    seq,
)
from .types import FwBool, FwNull, FwNumber, FwjsRuntimeError, FwjsSyntaxError


@lru_cache(maxsize=1)
def make_parser() -> Lark:
    return Lark.open(
        "grammar.lark",
        rel_to=__file__,
        parser="lalr",
        lexer="basic",
        propagate_positions=True,
        maybe_placeholders=True,
    )


def _source_meta(meta: Any) -> Optional[SourceMeta]:
    if getattr(meta, "empty", True):
        return None

    line = getattr(meta, "line", None)
    column = getattr(meta, "column", None)
    if line is None or column is None:
        return None

    return SourceMeta(line=line, column=column)


def _null(meta: Optional[SourceMeta] = None) -> Constant:
    return Constant(FwNull(), meta=meta)


@v_args(meta=True)
class ToNodes(Transformer):
    """Bottom-up rewrite of the lark parse tree into frozen node dataclasses."""

    def start(self, meta, children: List[Node]) -> Node:
        return self._statements(meta, children)

    def block(self, meta, children: List[Node]) -> Node:
        return self._statements(meta, children)

    def _statements(self, meta, children: List[Node]) -> Node:
        if not children:
            return _null(_source_meta(meta))

        return seq(*children)

    def var_decl(self, meta, children) -> Node:
        name, expr = children
        return VarDecl(str(name), expr, meta=_source_meta(meta))

    def assign(self, meta, children) -> Node:
        name, expr = children
        return Assign(str(name), expr, meta=_source_meta(meta))

    def binop(self, meta, children) -> Node:
        left, op, right = children
        return BinaryOp(Op.from_symbol(str(op)), left, right, meta=_source_meta(meta))

    def neg(self, meta, children) -> Node:
        _minus, operand = children
        m = _source_meta(meta)
        return BinaryOp(Op.SUBTRACT, Constant(FwNumber(0), meta=m), operand, meta=m)

    def app(self, meta, children) -> Node:
        callee, *rest = children
        args = rest[0] if rest and rest[0] is not None else []
        return FunctionApp(callee, tuple(args), meta=_source_meta(meta))

    def args(self, meta, children) -> List[Node]:
        return list(children)

    def params(self, meta, children) -> List[str]:
        names = [str(tok) for tok in children]
        seen = set()

        for name in names:
            if name in seen:
                line = getattr(meta, "line", None)
                column = getattr(meta, "column", None)
                raise FwjsSyntaxError(f"Duplicate parameter '{name}'", line, column)
            seen.add(name)

        return names

    def number(self, meta, children) -> Node:
        (tok,) = children
        return Constant(FwNumber(int(tok)), meta=_source_meta(meta))

    def true(self, meta, children) -> Node:
        return Constant(FwBool(True), meta=_source_meta(meta))

    def false(self, meta, children) -> Node:
        return Constant(FwBool(False), meta=_source_meta(meta))

    def null(self, meta, children) -> Node:
        return _null(_source_meta(meta))

    def var(self, meta, children) -> Node:
        (tok,) = children
        return Variable(str(tok), meta=_source_meta(meta))

    def print(self, meta, children) -> Node:
        (expr,) = children
        return Print(expr, meta=_source_meta(meta))

    def if_expr(self, meta, children) -> Node:
        cond, then, *rest = children
        m = _source_meta(meta)
        else_ = rest[0] if rest and rest[0] is not None else _null(m)
        return If(cond, then, else_, meta=m)

    def while_expr(self, meta, children) -> Node:
        cond, body = children
        return While(cond, body, meta=_source_meta(meta))

    def function(self, meta, children) -> Node:
        m = _source_meta(meta)
        body = children[-1]
        name: Optional[str] = None
        params: List[str] = []

        for child in children[:-1]:
            if isinstance(child, Token):
                name = str(child)
            elif isinstance(child, list):
                params = child

        fn = FunctionDecl(tuple(params), body, meta=m)

        if name is None:
            return fn

        # `function f(...) {...}` declares f in the current scope
        return VarDecl(name, fn, meta=m)


def parse_source(src: str) -> Node:
    try:
        tree = make_parser().parse(src)
    except UnexpectedInput as exc:
        raise FwjsSyntaxError(_describe(exc), _position(exc, "line"), _position(exc, "column")) from exc

    try:
        return ToNodes().transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, FwjsRuntimeError):
            raise exc.orig_exc from None
        raise


def _position(exc: UnexpectedInput, attr: str) -> Optional[int]:
    # lark reports -1 when the position is unknown (e.g. at end of input)
    value = getattr(exc, attr, None)

    if isinstance(value, int) and value > 0:
        return value

    return None


def _describe(exc: UnexpectedInput) -> str:
    token = getattr(exc, "token", None)

    if token is not None and getattr(token, "type", None) == "$END":
        return "Unexpected end of input"

    if token is not None:
        return f"Unexpected token {str(token)!r}"

    char = getattr(exc, "char", None)
    if char is not None:
        return f"Unexpected character {char!r}"

    return "Invalid syntax"
