#!/usr/bin/env python3
"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the byte in the cell at the pointer
    ,   Input a byte and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments and ignored.

Source text is decoded once into a tuple of Operation values. The
interpreter walks that tuple with an instruction pointer and resolves
bracket jumps by scanning for the balancing bracket each time a jump is
taken (there is no jump table).
"""

import sys
from enum import Enum
from typing import BinaryIO, Optional, Sequence, Tuple, Union

import numpy as np

DEFAULT_MEMORY_SIZE = 300
DEBUG_TRACE_STEPS = 50


class Operation(Enum):
    MOVE_LEFT = "<"
    MOVE_RIGHT = ">"
    INCREMENT = "+"
    DECREMENT = "-"
    OUTPUT = "."
    ACCEPT = ","
    JUMP_FORWARD_IF_ZERO = "["
    JUMP_BACKWARD_IF_NONZERO = "]"

    @classmethod
    def from_char(cls, char: str) -> Optional["Operation"]:
        """Return the operation for an instruction character, None for comments."""
        return _OPERATIONS_BY_CHAR.get(char)


_OPERATIONS_BY_CHAR = {op.value: op for op in Operation}

Program = Tuple[Operation, ...]


class BrainfuckError(Exception):
    """Base class for every failure raised while running a program."""


class UnmatchedBracketError(BrainfuckError):
    def __init__(self, position: int, message: str) -> None:
        self.position = position
        super().__init__(f"{message} at operation {position}")


class TapeBoundsError(BrainfuckError):
    def __init__(self, pointer: int, memory_size: int) -> None:
        self.pointer = pointer
        self.memory_size = memory_size
        super().__init__(f"Pointer moved to {pointer}, outside tape of {memory_size} cells")


class InputExhaustedError(BrainfuckError):
    pass


class InputReadError(BrainfuckError):
    pass


def decode(source: str) -> Program:
    """Extract the operations from program text, skipping everything else."""
    ops = []
    for char in source:
        op = Operation.from_char(char)
        if op is not None:
            ops.append(op)
    return tuple(ops)


def source_text(program: Sequence[Operation]) -> str:
    return "".join(op.value for op in program)


def find_loop_end(program: Sequence[Operation], start: int) -> int:
    """Position of the ] that balances the [ at ``start``.

    ``need`` counts opening brackets seen from ``start`` onwards and
    ``found`` counts closing ones; the first position where they agree is
    the matching bracket.
    """
    need = 0
    found = 0
    for position in range(start, len(program)):
        op = program[position]
        if op is Operation.JUMP_FORWARD_IF_ZERO:
            need += 1
        elif op is Operation.JUMP_BACKWARD_IF_NONZERO:
            found += 1
        if need and need == found:
            return position
    raise UnmatchedBracketError(start, "Unmatched '['")


def find_loop_start(program: Sequence[Operation], start: int) -> int:
    """Position of the [ that balances the ] at ``start``, scanning backwards."""
    need = 0
    found = 0
    for position in range(start, -1, -1):
        op = program[position]
        if op is Operation.JUMP_BACKWARD_IF_NONZERO:
            need += 1
        elif op is Operation.JUMP_FORWARD_IF_ZERO:
            found += 1
        if need and need == found:
            return position
    raise UnmatchedBracketError(start, "Unmatched ']'")


def check_brackets(program: Sequence[Operation]) -> None:
    """Raise UnmatchedBracketError for the first unbalanced bracket."""
    stack = []
    for position, op in enumerate(program):
        if op is Operation.JUMP_FORWARD_IF_ZERO:
            stack.append(position)
        elif op is Operation.JUMP_BACKWARD_IF_NONZERO:
            if not stack:
                raise UnmatchedBracketError(position, "Unmatched ']'")
            stack.pop()
    if stack:
        raise UnmatchedBracketError(stack[-1], "Unmatched '['")


class BrainfuckInterpreter:
    def __init__(self, memory_size=DEFAULT_MEMORY_SIZE, max_steps=None, wrap_pointer=False):
        if memory_size < 1:
            raise ValueError("memory_size must be at least 1")
        self.memory = np.zeros(memory_size, dtype=np.uint8)
        self.pointer = 0
        self.instruction_pointer = 0
        self.max_steps = max_steps
        self.wrap_pointer = wrap_pointer
        self.step_count = 0
        self.hit_step_limit = False

    def reset(self):
        """Zero the tape and rewind both pointers."""
        self.memory[:] = 0
        self.pointer = 0
        self.instruction_pointer = 0
        self.step_count = 0
        self.hit_step_limit = False

    def run(
        self,
        program: Union[str, Sequence[Operation]],
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
        debug: bool = False,
    ) -> int:
        """Execute a program until it falls off the end.

        Returns the number of operations executed. Errors abort the run
        immediately; anything already written to ``stdout`` stays written.
        """
        if isinstance(program, str):
            program = decode(program)
        if stdin is None:
            stdin = sys.stdin.buffer
        if stdout is None:
            stdout = sys.stdout.buffer

        self.reset()
        try:
            while self.instruction_pointer < len(program):
                if self.max_steps is not None and self.step_count >= self.max_steps:
                    self.hit_step_limit = True
                    break

                if debug and self.step_count < DEBUG_TRACE_STEPS:
                    op = program[self.instruction_pointer]
                    print(
                        f"Step {self.step_count:2d}: IP={self.instruction_pointer:2d} CMD='{op.value}' "
                        f"PTR={self.pointer} CELL={self.memory[self.pointer]} MEM={self.memory[:5].tolist()}",
                        file=sys.stderr,
                    )

                self._step(program, stdin, stdout)
                self.step_count += 1
        finally:
            stdout.flush()

        return self.step_count

    def _step(self, program, stdin, stdout):
        """Apply the operation at the instruction pointer and advance it."""
        op = program[self.instruction_pointer]

        if op is Operation.MOVE_LEFT:
            self._move(-1)

        elif op is Operation.MOVE_RIGHT:
            self._move(1)

        elif op is Operation.INCREMENT:
            self.memory[self.pointer] = (int(self.memory[self.pointer]) + 1) % 256

        elif op is Operation.DECREMENT:
            self.memory[self.pointer] = (int(self.memory[self.pointer]) - 1) % 256

        elif op is Operation.OUTPUT:
            stdout.write(bytes((int(self.memory[self.pointer]),)))

        elif op is Operation.ACCEPT:
            self.memory[self.pointer] = self._read_byte(stdin, stdout)

        elif op is Operation.JUMP_FORWARD_IF_ZERO:
            if self.memory[self.pointer] == 0:
                self.instruction_pointer = find_loop_end(program, self.instruction_pointer) + 1
                return

        elif op is Operation.JUMP_BACKWARD_IF_NONZERO:
            if self.memory[self.pointer] != 0:
                self.instruction_pointer = find_loop_start(program, self.instruction_pointer)
                return

        self.instruction_pointer += 1

    def _move(self, delta):
        pointer = self.pointer + delta
        size = len(self.memory)
        if 0 <= pointer < size:
            self.pointer = pointer
        elif self.wrap_pointer:
            # Circular tape
            self.pointer = pointer % size
        else:
            raise TapeBoundsError(pointer, size)

    def _read_byte(self, stdin, stdout):
        # Let any pending output reach the reader before blocking on input.
        stdout.flush()
        try:
            data = stdin.read(1)
        except OSError as e:
            raise InputReadError(f"Failed to read a byte of input: {e}") from e
        if not data:
            raise InputExhaustedError(
                f"Input exhausted at operation {self.instruction_pointer}"
            )
        return data[0]
