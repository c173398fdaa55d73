from __future__ import annotations

from typing import Callable

from ..tree import BinaryOp, Node, Op
from ..types import Environment, FwBool, FwNumber, FwValue, FwjsArithmeticError
from .common import require_number

EvalFunc = Callable[[Node, Environment], FwValue]

def eval_binary(n: BinaryOp, env: Environment, eval_func: EvalFunc) -> FwValue:
    # both sides always run, left first
    lhs = eval_func(n.left, env)
    rhs = eval_func(n.right, env)

    return apply_binary_operator(n.op, lhs, rhs)

def apply_binary_operator(op: Op, lhs: FwValue, rhs: FwValue) -> FwValue:
    if op is Op.EQ:
        return FwBool(lhs == rhs)

    a = require_number(lhs, op)
    b = require_number(rhs, op)

    match op:
        case Op.ADD:
            return FwNumber(a + b)
        case Op.SUBTRACT:
            return FwNumber(a - b)
        case Op.MULTIPLY:
            return FwNumber(a * b)
        case Op.DIVIDE:
            return FwNumber(truncating_div(a, b))
        case Op.MOD:
            return FwNumber(truncating_mod(a, b))
        case Op.GE:
            return FwBool(a >= b)
        case Op.GT:
            return FwBool(a > b)
        case Op.LE:
            return FwBool(a <= b)
        case Op.LT:
            return FwBool(a < b)

    raise AssertionError(f"unhandled operator {op}")

def truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise FwjsArithmeticError("Division by zero")

    q = abs(a) // abs(b)

    return q if (a < 0) == (b < 0) else -q

def truncating_mod(a: int, b: int) -> int:
    if b == 0:
        raise FwjsArithmeticError("Modulo by zero")

    # sign follows the dividend
    return a - b * truncating_div(a, b)
