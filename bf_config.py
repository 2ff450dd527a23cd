"""Interpreter settings read from the environment (and a local .env file)."""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from brainfuck import DEFAULT_MEMORY_SIZE

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


@dataclass
class InterpreterConfig:
    tape_size: int = DEFAULT_MEMORY_SIZE
    step_limit: int = 0  # 0 = unlimited
    wrap_pointer: bool = False

    @classmethod
    def from_env(cls) -> "InterpreterConfig":
        return cls(
            tape_size=_env_int("BF_TAPE_SIZE", DEFAULT_MEMORY_SIZE),
            step_limit=_env_int("BF_STEP_LIMIT", 0),
            wrap_pointer=_env_flag("BF_WRAP_POINTER"),
        )

    def interpreter_options(self) -> Dict[str, Any]:
        """Keyword arguments for BrainfuckInterpreter."""
        max_steps: Optional[int] = self.step_limit if self.step_limit > 0 else None
        return {
            "memory_size": self.tape_size,
            "max_steps": max_steps,
            "wrap_pointer": self.wrap_pointer,
        }
