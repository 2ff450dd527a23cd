import os
import subprocess
import sys
from pathlib import Path

import run_bf

ROOT = Path(__file__).resolve().parent.parent


def _run(args, *, stdin=b""):
    env = {k: v for k, v in os.environ.items() if not k.startswith("BF_")}
    return subprocess.run(
        [sys.executable, "-m", "run_bf", *args],
        cwd=ROOT,
        env=env,
        input=stdin,
        capture_output=True,
        check=False,
    )


def _write(tmp_path: Path, src: str) -> str:
    p = tmp_path / "prog.bf"
    p.write_text(src, encoding="utf-8")
    return str(p)


def test_cli_prints_letter(tmp_path: Path):
    proc = _run([_write(tmp_path, "+" * 65 + ". the letter A")])
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == b"A"


def test_cli_echoes_input(tmp_path: Path):
    proc = _run([_write(tmp_path, ",.,.")], stdin=b"ok")
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == b"ok"


def test_cli_input_exhausted(tmp_path: Path):
    proc = _run([_write(tmp_path, "+.,.")])
    assert proc.returncode == 1
    assert proc.stdout == b"\x01"
    assert b"Input exhausted" in proc.stderr


def test_cli_missing_file(tmp_path: Path):
    proc = _run([str(tmp_path / "nope.bf")])
    assert proc.returncode == 1
    assert proc.stderr.startswith(b"error:")


def test_cli_unbalanced_program_fails_before_output(tmp_path: Path):
    proc = _run([_write(tmp_path, "+.[")])
    assert proc.returncode == 1
    assert proc.stdout == b""
    assert b"Unmatched '['" in proc.stderr


def test_cli_step_limit(tmp_path: Path):
    proc = _run([_write(tmp_path, "+[]"), "--step-limit", "25"])
    assert proc.returncode == 3
    assert b"25 steps" in proc.stderr


def test_cli_pointer_out_of_bounds(tmp_path: Path):
    path = _write(tmp_path, ">>>+.")
    proc = _run([path, "--tape-size", "3"])
    assert proc.returncode == 1
    assert b"outside tape of 3 cells" in proc.stderr
    proc = _run([path, "--tape-size", "3", "--wrap"])
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == b"\x01"


def test_cli_usage_error():
    proc = _run([])
    assert proc.returncode == 2


def test_main_check_only(tmp_path: Path, capsys):
    assert run_bf.main(["--check", _write(tmp_path, "[->+<] copy")]) == 0
    assert "6 operations, brackets balanced" in capsys.readouterr().err


def test_main_check_rejects_stray_bracket(tmp_path: Path, capsys):
    assert run_bf.main(["--check", _write(tmp_path, "]")]) == 1
    assert "Unmatched ']' at operation 0" in capsys.readouterr().err
