#!/usr/bin/env python3
from __future__ import annotations
from typing import List, Optional
import argparse
import logging
import sys

import config
from cas import CAS
from errors import MathError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="symrewrite", description="Evaluate, simplify and solve algebraic expressions.")
    ap.add_argument("--version", action="version", version=config.VERSION)
    ap.add_argument("-v", "--verbose", action="store_true", help="log every rewrite rule that fires")
    sub = ap.add_subparsers(dest="command", required=True)

    p_eval = sub.add_parser("eval", help="evaluate an expression numerically")
    p_eval.add_argument("expression")

    p_simp = sub.add_parser("simplify", help="simplify an expression")
    p_simp.add_argument("expression")
    p_simp.add_argument("--target", default=config.DEFAULT_TARGET, help="variable to hoist terms toward")

    p_solve = sub.add_parser("solve", help="isolate a variable in an equation")
    p_solve.add_argument("equation")
    p_solve.add_argument("--for", dest="target", required=True, help="variable to isolate")

    for p in (p_simp, p_solve):
        p.add_argument("--canonical", action="store_true", help="print the fully parenthesized form")
        p.add_argument("--tree", action="store_true", help="print the rewritten tree")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )
    cas = CAS()
    try:
        if args.command == "eval":
            print(cas.evaluate(args.expression))
            return 0
        if args.command == "simplify":
            result = cas.simplify(args.expression, args.target)
        else:
            result = cas.solve(args.equation, args.target)
    except MathError as err:
        print(err, file=sys.stderr)
        return 1
    if args.tree:
        print(result.as_tree())
    elif args.canonical:
        print(result.to_string())
    else:
        print(result.as_latex())
    return 0


if __name__ == "__main__":
    sys.exit(main())
