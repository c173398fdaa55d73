from __future__ import annotations

from ..types import FwBool, FwValue, FwjsInvalidConditionError

def require_condition(value: FwValue, construct: str) -> bool:
    """Conditions must be booleans; there is no truthiness coercion."""
    match value:
        case FwBool(value=b):
            return b
        case _:
            raise FwjsInvalidConditionError(construct, value)
