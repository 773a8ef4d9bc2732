"""
Run the reference scenarios and log what each combinator produced.

Run: python -m foldopt [--log-level DEBUG] [--json]
"""
from __future__ import annotations
import argparse
import sys
from typing import Any, Callable, List, Optional, Tuple

from . import combinators as opt
from .logger import ConsoleLogger
from .maybe import Maybe
from .option import NONE, Some

Scenario = Tuple[str, Callable[[], Any], Any]


def _parse_to_int(s: str) -> int: return int(s)


def scenarios() -> List[Scenario]:
    price = "£16.10"
    return [
        ("xor absent/present", lambda: opt.xor(NONE, Some(price)), Some(price)),
        ("xor present/present", lambda: opt.xor(Some(price), Some(price)), NONE),
        ("filter below threshold", lambda: opt.filter(Some(50.0), lambda x: x > 100.0), NONE),
        ("filter above threshold", lambda: opt.filter(Some(101.5), lambda x: x > 100.0), Some(101.5)),
        ("map parse present", lambda: opt.map(Some("42"), _parse_to_int), Some(42)),
        ("map parse absent", lambda: opt.map(NONE, _parse_to_int), NONE),
        ("get_or_else absent", lambda: opt.get_or_else(NONE, 0), 0),
        ("or_else absent", lambda: opt.or_else(NONE, lambda: Some("fallback")), Some("fallback")),
        ("and_then maybe", lambda: opt.and_then(Maybe("7"), lambda s: Some(int(s) * 2)), Some(14)),
        ("is_some maybe absent", lambda: opt.is_some(Maybe(None)), False),
    ]


def run(logger: ConsoleLogger) -> int:
    failed = 0
    for name, thunk, expected in scenarios():
        got = thunk()
        log = logger.bind(scenario=name)
        if got == expected:
            log.info("ok", result=repr(got))
        else:
            failed += 1
            log.error("mismatch", result=repr(got), expected=repr(expected))
    logger.debug("done", failed=failed)
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="foldopt", description="Run the reference scenarios and log the results.")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    p.add_argument("--json", action="store_true", help="emit one JSON object per line")
    args = p.parse_args(argv)
    return run(ConsoleLogger(level=args.log_level, json_output=args.json))


if __name__ == "__main__":
    sys.exit(main())
