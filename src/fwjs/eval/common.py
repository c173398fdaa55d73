from __future__ import annotations

from typing import Any

from ..tree import Op
from ..types import FwBool, FwClosure, FwNull, FwNumber, FwValue, FwjsTypeError

def require_number(value: FwValue, op: Op) -> int:
    if isinstance(value, FwNumber):
        return value.value

    raise FwjsTypeError(f"Operator '{op.value}' expects numbers; got {type(value).__name__} {value!r}")

def stringify(value: Any) -> str:
    if isinstance(value, FwNumber):
        return str(value.value)

    if isinstance(value, FwBool):
        return "true" if value.value else "false"

    if isinstance(value, FwNull) or value is None:
        return "null"

    if isinstance(value, FwClosure):
        return repr(value)

    return str(value)
