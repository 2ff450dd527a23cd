import pytest

from bf_runner import run_once, run_program
from brainfuck import InputExhaustedError


def test_run_program_collects_output():
    assert run_program("+" * 72 + ".+.") == b"HI"


def test_run_program_with_input():
    assert run_program(",[->++<]>.", bytes([7])) == b"\x0e"


def test_run_program_passes_options():
    assert run_program("<+.", wrap_pointer=True, memory_size=4) == b"\x01"


def test_run_program_propagates_errors():
    with pytest.raises(InputExhaustedError):
        run_program(",.")


def test_run_once():
    assert run_once(",+.", 3) == 4
    assert run_once(",.", 0) == 0
    assert run_once(",-.", 256) == 255


def test_run_once_without_output():
    assert run_once(",", 5) is None
    assert run_once("+[]", 0, step_limit=50) is None


def test_run_once_on_failure():
    assert run_once("<", 1) is None
    assert run_once(",,.", 1) is None
