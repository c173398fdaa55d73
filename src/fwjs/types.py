from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import SimpleNamespace
from typing import Dict, Optional, Tuple
from typing_extensions import TypeAlias
from .tree import Node

logger = logging.getLogger(__name__)

# ---------- Value Model ----------

@dataclass(frozen=True)
class FwNull:
    def __repr__(self) -> str:
        return "null"

@dataclass(frozen=True)
class FwNumber:
    value: int
    def __repr__(self) -> str:
        return str(self.value)

@dataclass(frozen=True)
class FwBool:
    value: bool
    def __repr__(self) -> str:
        return "true" if self.value else "false"

@dataclass(frozen=True, eq=False)
class FwClosure:
    params: Tuple[str, ...]
    body: Node
    env: 'Environment'  # captured by reference, never copied
    def __repr__(self) -> str:
        return f"function({', '.join(self.params)}) {{...}}"

FwValue: TypeAlias = FwNull | FwNumber | FwBool | FwClosure

# ---------- Exceptions ----------

class ErrorKind(Enum):
    RUNTIME = "runtime"
    DUPLICATE_DECLARATION = "duplicate-declaration"
    INVALID_CONDITION = "invalid-condition"
    NOT_CALLABLE = "not-callable"
    ARITY_MISMATCH = "arity-mismatch"
    UNBOUND_VARIABLE = "unbound-variable"
    TYPE_MISMATCH = "type-mismatch"
    DIVISION_BY_ZERO = "division-by-zero"
    RECURSION_DEPTH = "recursion-depth"
    SYNTAX = "syntax"

class FwjsRuntimeError(Exception):
    kind: ErrorKind = ErrorKind.RUNTIME
    fw_meta: Optional[object]

    def __init__(self, message: str):
        super().__init__(message)
        self.fw_meta = None

    def __str__(self) -> str:
        msg = super().__str__()

        meta = getattr(self, "fw_meta", None)
        if meta is None:
            return msg

        line = getattr(meta, "line", None)
        col = getattr(meta, "column", None)

        if line is None:
            return msg

        if col is None:
            return f"{msg} (line {line})"

        return f"{msg} (line {line}, col {col})"

class FwjsDuplicateDeclarationError(FwjsRuntimeError):
    kind = ErrorKind.DUPLICATE_DECLARATION

    def __init__(self, name: str):
        super().__init__(f"Variable '{name}' already declared in this scope")
        self.name = name

class FwjsUnboundVariableError(FwjsRuntimeError):
    kind = ErrorKind.UNBOUND_VARIABLE

    def __init__(self, name: str):
        super().__init__(f"Name '{name}' not found")
        self.name = name

class FwjsInvalidConditionError(FwjsRuntimeError):
    kind = ErrorKind.INVALID_CONDITION

    def __init__(self, construct: str, value: FwValue):
        super().__init__(f"{construct} condition must be a boolean; got {type(value).__name__} {value!r}")
        self.value = value

class FwjsNotCallableError(FwjsRuntimeError):
    kind = ErrorKind.NOT_CALLABLE

    def __init__(self, value: FwValue):
        super().__init__(f"{type(value).__name__} {value!r} is not callable")
        self.value = value

class FwjsArityError(FwjsRuntimeError):
    kind = ErrorKind.ARITY_MISMATCH

class FwjsTypeError(FwjsRuntimeError):
    kind = ErrorKind.TYPE_MISMATCH

class FwjsArithmeticError(FwjsRuntimeError):
    kind = ErrorKind.DIVISION_BY_ZERO

class FwjsRecursionError(FwjsRuntimeError):
    kind = ErrorKind.RECURSION_DEPTH

class FwjsSyntaxError(FwjsRuntimeError):
    kind = ErrorKind.SYNTAX

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column

        if line is not None:
            self.fw_meta = SimpleNamespace(line=line, column=column)

# ---------- Scope frames ----------

_MISSING = object()

class Environment:
    """One lexical scope frame.

    A frame maps names to values and links to an optional outer frame. The
    frame without a parent is the global environment; bare assignments to
    names no frame defines land there.
    """

    def __init__(self, parent: Optional['Environment']=None, strict_unbound: Optional[bool]=None):
        self.parent = parent
        self.vars: Dict[str, FwValue] = {}

        if strict_unbound is not None:
            self.strict_unbound = strict_unbound
        elif parent is not None:
            self.strict_unbound = parent.strict_unbound
        else:
            self.strict_unbound = False

    def child(self) -> 'Environment':
        return Environment(parent=self)

    def is_global(self) -> bool:
        return self.parent is None

    @property
    def global_env(self) -> 'Environment':
        cur = self

        while cur.parent is not None:
            cur = cur.parent

        return cur

    @property
    def depth(self) -> int:
        n = 0
        cur = self.parent

        while cur is not None:
            n += 1
            cur = cur.parent

        return n

    def find_frame(self, name: str) -> Optional['Environment']:
        """Nearest frame in the chain that binds `name`, or None."""
        cur: Optional[Environment] = self

        while cur is not None:
            if name in cur.vars:
                return cur

            cur = cur.parent

        return None

    def resolve_variable(self, name: str, default: object=_MISSING) -> FwValue:
        owner = self.find_frame(name)

        if owner is not None:
            return owner.vars[name]

        if default is _MISSING:
            raise FwjsUnboundVariableError(name)

        return default  # type: ignore[return-value]

    def update_variable(self, name: str, value: FwValue) -> None:
        owner = self.find_frame(name)

        if owner is None:
            owner = self.global_env
            logger.debug("assignment to undeclared '%s' creates a global binding", name)

        owner.vars[name] = value

    def declare_variable(self, name: str, value: FwValue) -> None:
        if name in self.vars:
            raise FwjsDuplicateDeclarationError(name)

        if self.parent is not None and self.parent.find_frame(name) is not None:
            logger.debug("declaration of '%s' shadows an outer binding", name)

        self.vars[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __repr__(self) -> str:
        names = ", ".join(self.vars)
        return f"<Environment depth={self.depth} vars=[{names}]>"
