from __future__ import annotations

from typing import Callable, List

from ..runtime import call_closure
from ..tree import FunctionApp, FunctionDecl, Node
from ..types import Environment, FwClosure, FwValue, FwjsNotCallableError

EvalFunc = Callable[[Node, Environment], FwValue]

def eval_function_decl(n: FunctionDecl, env: Environment) -> FwClosure:
    # the live frame is captured, so later writes to outer names are visible
    return FwClosure(params=tuple(n.params), body=n.body, env=env)

def eval_function_app(n: FunctionApp, env: Environment, eval_func: EvalFunc) -> FwValue:
    callee = eval_func(n.fn, env)

    if not isinstance(callee, FwClosure):
        raise FwjsNotCallableError(callee)

    args: List[FwValue] = [eval_func(arg, env) for arg in n.args]

    return call_closure(callee, args)
