#!/usr/bin/env python3
"""
Run a Brainfuck program file.

Program output goes to stdout byte for byte and `,` reads bytes from
stdin. Exit status: 0 on success, 1 when the program could not be read
or failed while running, 3 when the step limit stopped it.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from bf_config import InterpreterConfig
from brainfuck import BrainfuckError, BrainfuckInterpreter, check_brackets, decode

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_STEP_LIMIT = 3


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="run-bf", description="Run a Brainfuck program")
    ap.add_argument("program", help="Path to the program source file")
    ap.add_argument("--debug", action="store_true", help="Trace the first steps to stderr")
    ap.add_argument("--step-limit", type=int, default=None, help="Stop after N steps (0 = unlimited)")
    ap.add_argument("--tape-size", type=int, default=None, help="Number of tape cells")
    ap.add_argument("--wrap", action="store_true", help="Wrap the pointer around the tape ends")
    ap.add_argument("--check", action="store_true", help="Only check that brackets are balanced")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = InterpreterConfig.from_env()
        source = Path(args.program).read_text(encoding="utf-8", errors="replace")
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.step_limit is not None:
        config.step_limit = args.step_limit
    if args.tape_size is not None:
        config.tape_size = args.tape_size
    if args.wrap:
        config.wrap_pointer = True

    program = decode(source)
    try:
        check_brackets(program)
        if args.check:
            print(f"{args.program}: {len(program)} operations, brackets balanced", file=sys.stderr)
            return EXIT_OK
        itp = BrainfuckInterpreter(**config.interpreter_options())
        itp.run(program, debug=args.debug)
    except (BrainfuckError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if itp.hit_step_limit:
        print(f"error: stopped after {itp.step_count} steps (step limit)", file=sys.stderr)
        return EXIT_STEP_LIMIT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
