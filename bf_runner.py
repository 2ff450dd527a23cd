import io
from typing import Optional

from bf_config import InterpreterConfig
from brainfuck import BrainfuckError, BrainfuckInterpreter

DEFAULT_STEP_LIMIT = 5000


def default_step_limit() -> int:
    """BF_STEP_LIMIT when it is positive, otherwise DEFAULT_STEP_LIMIT."""
    return max(InterpreterConfig.from_env().step_limit, 0) or DEFAULT_STEP_LIMIT


def run_program(code: str, input_data: bytes = b"", **options) -> bytes:
    """Execute BF code against in-memory input and return everything it wrote.
    ``options`` are passed straight to BrainfuckInterpreter.
    """
    stdout = io.BytesIO()
    itp = BrainfuckInterpreter(**options)
    itp.run(code, stdin=io.BytesIO(input_data), stdout=stdout)
    return stdout.getvalue()


def run_once(code: str, x: int, step_limit: Optional[int] = None) -> Optional[int]:
    """Execute BF code with single byte input, return single byte output.
    None when nothing was written or the program failed.
    """
    if step_limit is None:
        step_limit = default_step_limit()
    stdout = io.BytesIO()
    itp = BrainfuckInterpreter(max_steps=step_limit)
    try:
        itp.run(code, stdin=io.BytesIO(bytes((x % 256,))), stdout=stdout)
    except BrainfuckError:
        return None
    out = stdout.getvalue()
    return out[0] if out else None
