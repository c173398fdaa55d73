from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

from .eval.common import stringify
from .evaluator import eval_expr
from .parser import parse_source
from .runtime import Environment
from .types import FwValue, FwjsRuntimeError
from .utils import debug_py_trace_enabled, log_level, recursion_limit

logger = logging.getLogger(__name__)

def run(src: str, env: Optional[Environment]=None, strict_unbound: Optional[bool]=None) -> FwValue:
    ast = parse_source(src)

    return eval_expr(ast, env, strict_unbound=strict_unbound)

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Existing path => read file contents.
    - Otherwise treat the argument as literal source.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise SystemExit("No input provided on stdin")
        return data

    candidate = Path(arg)
    if candidate.exists():
        return candidate.read_text(encoding="utf-8")

    return arg

def main(argv: Optional[list[str]]=None) -> int:
    logging.basicConfig(level=log_level(), format="%(levelname)s %(name)s: %(message)s")

    strict: Optional[bool] = None
    arg = None

    for token in (sys.argv[1:] if argv is None else argv):
        if token == "--strict":
            strict = True
            continue

        if arg is None:
            arg = token
        else:
            raise SystemExit(f"Unexpected argument: {token}")

    limit = recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    source = _load_source(arg)

    try:
        result = run(source, strict_unbound=strict)
    except FwjsRuntimeError as exc:
        logger.debug("run failed with %s", exc.kind.value)
        if debug_py_trace_enabled():
            traceback.print_exc()
        print(f"error[{exc.kind.value}]: {exc}", file=sys.stderr)
        return 1

    print(stringify(result))
    return 0

if __name__ == "__main__":
    sys.exit(main())
