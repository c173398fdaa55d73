from __future__ import annotations

import logging
from typing import List

from .types import (
    Environment,
    FwClosure,
    FwValue,
    FwjsArityError,
)

logger = logging.getLogger(__name__)

def call_closure(fn: FwClosure, args: List[FwValue]) -> FwValue:
    """
    Closure application:
    - a fresh frame hangs off the closure's captured environment, never the caller's;
    - argument count must equal parameter count;
    - parameters are declared in that frame, then the body runs there.
    """
    from .evaluator import eval_node  # local import to avoid cycle

    if len(args) != len(fn.params):
        raise FwjsArityError(f"Function expects {len(fn.params)} args; got {len(args)}")

    callee_env = Environment(parent=fn.env)

    for name, val in zip(fn.params, args):
        callee_env.declare_variable(name, val)

    logger.debug("apply %r with %d arg(s) at depth %d", fn, len(args), callee_env.depth)

    return eval_node(fn.body, callee_env)
