from __future__ import annotations

from typing import Callable

from ..tree import Assign, Node, VarDecl
from ..types import Environment, FwValue

EvalFunc = Callable[[Node, Environment], FwValue]

def eval_var_decl(n: VarDecl, env: Environment, eval_func: EvalFunc) -> FwValue:
    value = eval_func(n.expr, env)
    env.declare_variable(n.name, value)

    return value

def eval_assign(n: Assign, env: Environment, eval_func: EvalFunc) -> FwValue:
    """Rebind the nearest visible `name`; falls back to creating a global."""
    value = eval_func(n.expr, env)
    env.update_variable(n.name, value)

    return value
