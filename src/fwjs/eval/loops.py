from __future__ import annotations

from typing import Callable

from ..tree import If, Node, While
from ..types import Environment, FwNull, FwValue
from .helpers import require_condition

EvalFunc = Callable[[Node, Environment], FwValue]

def eval_if(n: If, env: Environment, eval_func: EvalFunc) -> FwValue:
    if require_condition(eval_func(n.cond, env), "if"):
        return eval_func(n.then, env)

    return eval_func(n.else_, env)

def eval_while(n: While, env: Environment, eval_func: EvalFunc) -> FwValue:
    result: FwValue = FwNull()
    keep_going = require_condition(eval_func(n.cond, env), "while")

    while keep_going:
        result = eval_func(n.body, env)
        keep_going = require_condition(eval_func(n.cond, env), "while")

    return result
