"""The diagnostic print primitive, the only built-in the language ships."""

from __future__ import annotations

from .eval.common import stringify
from .types import FwValue

def std_print(value: FwValue) -> FwValue:
    print(stringify(value))

    return value
