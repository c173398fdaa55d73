from __future__ import annotations

from typing import Callable, Optional

from .runtime import Environment
from .stdlib import std_print
from .tree import (
    Assign,
    BinaryOp,
    Constant,
    FunctionApp,
    FunctionDecl,
    If,
    Node,
    Print,
    Sequence,
    VarDecl,
    Variable,
    While,
    node_meta,
)
from .types import FwNull, FwValue, FwjsRecursionError, FwjsRuntimeError
from .utils import strict_unbound_enabled

from .eval.bind import eval_assign, eval_var_decl
from .eval.expr import eval_binary
from .eval.fn import eval_function_app, eval_function_decl
from .eval.loops import eval_if, eval_while

EvalFunc = Callable[[Node, Environment], FwValue]


def _maybe_attach_location(exc: FwjsRuntimeError, node: Node) -> None:
    if getattr(exc, "_augmented", False):
        return

    meta = node_meta(node)

    if meta is not None:
        exc.fw_meta = meta
        exc._augmented = True  # type: ignore[attr-defined]

# ---------------- Public API ----------------

def eval_expr(ast: Node, env: Optional[Environment]=None, strict_unbound: Optional[bool]=None) -> FwValue:
    """
    Evaluate `ast` in `env`, or in a fresh global environment when none is given.
    A `strict_unbound` override on a caller-supplied environment applies to
    this call only; the previous policy is restored afterwards.
    """
    if env is None:
        if strict_unbound is None:
            strict_unbound = strict_unbound_enabled()
        env = Environment(strict_unbound=strict_unbound)
        return _eval_top(ast, env)

    if strict_unbound is None:
        return _eval_top(ast, env)

    saved = env.strict_unbound
    env.strict_unbound = strict_unbound
    try:
        return _eval_top(ast, env)
    finally:
        env.strict_unbound = saved


def _eval_top(ast: Node, env: Environment) -> FwValue:
    try:
        return eval_node(ast, env)
    except RecursionError:
        raise FwjsRecursionError("Maximum evaluation depth exceeded") from None

# ---------------- Core evaluator ----------------

def eval_node(n: Node, env: Environment) -> FwValue:
    try:
        return _eval_node_inner(n, env)
    except FwjsRuntimeError as e:
        _maybe_attach_location(e, n)
        raise


def _eval_node_inner(n: Node, env: Environment) -> FwValue:
    match n:
        case Constant(value=value):
            return value
        case Variable(name=name):
            if env.strict_unbound:
                return env.resolve_variable(name)
            return env.resolve_variable(name, default=FwNull())
        case Print(expr=expr):
            return std_print(eval_node(expr, env))
        case BinaryOp():
            return eval_binary(n, env, eval_node)
        case If():
            return eval_if(n, env, eval_node)
        case While():
            return eval_while(n, env, eval_node)
        case Sequence():
            # walk the right spine iteratively so statement count adds no depth
            cur: Node = n
            while isinstance(cur, Sequence):
                eval_node(cur.first, env)
                cur = cur.second
            return eval_node(cur, env)
        case VarDecl():
            return eval_var_decl(n, env, eval_node)
        case Assign():
            return eval_assign(n, env, eval_node)
        case FunctionDecl():
            return eval_function_decl(n, env)
        case FunctionApp():
            return eval_function_app(n, env, eval_node)
        case _:
            raise FwjsRuntimeError(f"Unknown node: {type(n).__name__}")
