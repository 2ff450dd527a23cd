#!/usr/bin/env python3
"""
Brainfuck Step-by-Step Debugger

This script shows the step-by-step execution of a Brainfuck program,
displaying the state of the memory tape, input stream, and output at each step.
"""

import io

from brainfuck import BrainfuckError, BrainfuckInterpreter, Operation, decode, source_text


class BrainfuckDebugger(BrainfuckInterpreter):
    """Extended Brainfuck interpreter with step-by-step debugging."""

    def __init__(self, memory_size=30, show_memory_range=10, max_steps=100, wrap_pointer=False):
        super().__init__(memory_size, max_steps=max_steps, wrap_pointer=wrap_pointer)
        self.show_memory_range = show_memory_range

    def debug_run(self, code, input_data=b""):
        """Execute Brainfuck code with step-by-step debugging."""
        print(f"🐛 BRAINFUCK DEBUGGER")
        print(f"Program: {code}")
        print(f"Input: {input_data!r} (as bytes: {list(input_data)})")
        print("=" * 80)

        program = decode(code)
        stdin = io.BytesIO(input_data)
        stdout = io.BytesIO()

        self.reset()
        self._show_state(program, stdin, stdout, "INITIAL")

        while self.instruction_pointer < len(program):
            if self.max_steps is not None and self.step_count >= self.max_steps:
                self.hit_step_limit = True
                break

            op = program[self.instruction_pointer]
            print(f"\nStep {self.step_count + 1}: Execute '{op.value}' at position {self.instruction_pointer}")
            self._step(program, stdin, stdout)
            self.step_count += 1
            print(f"  {self._describe(op)}")

            self._show_state(program, stdin, stdout, f"AFTER STEP {self.step_count}")

        if self.hit_step_limit:
            print(f"\n⚠️ Execution stopped after {self.max_steps} steps (possible infinite loop)")

        output = stdout.getvalue()
        print(f"\n🎯 FINAL RESULT:")
        print(f"Output: {output!r} → {list(output)}")
        return output

    def _describe(self, op):
        """Explain the step that just ran, from the state it left behind."""
        cell = self.memory[self.pointer]
        if op is Operation.MOVE_LEFT:
            return f"Move pointer left → position {self.pointer}"
        if op is Operation.MOVE_RIGHT:
            return f"Move pointer right → position {self.pointer}"
        if op is Operation.INCREMENT:
            return f"Increment cell[{self.pointer}] → {cell}"
        if op is Operation.DECREMENT:
            return f"Decrement cell[{self.pointer}] → {cell}"
        if op is Operation.OUTPUT:
            return f"Output cell[{self.pointer}] = {cell} → {bytes((int(cell),))!r}"
        if op is Operation.ACCEPT:
            return f"Read input byte {cell} → cell[{self.pointer}]"
        if op is Operation.JUMP_FORWARD_IF_ZERO:
            if cell == 0:
                return f"Loop start: cell[{self.pointer}] = 0, jump to position {self.instruction_pointer}"
            return f"Loop start: cell[{self.pointer}] ≠ 0, enter loop"
        if cell != 0:
            return f"Loop end: cell[{self.pointer}] ≠ 0, jump back to position {self.instruction_pointer}"
        return f"Loop end: cell[{self.pointer}] = 0, exit loop"

    def _show_state(self, program, stdin, stdout, label):
        """Show current state of memory, pointer, and program."""
        print(f"\n{label}:")

        # Show program with instruction pointer
        code = source_text(program)
        program_display = ""
        for i, cmd in enumerate(code):
            if i == self.instruction_pointer:
                program_display += f"[{cmd}]"
            else:
                program_display += cmd
        print(f"Program:  {program_display}")

        # Show input stream
        data = stdin.getvalue()
        input_index = stdin.tell()
        input_display = " ".join(
            f"[{b}]" if i == input_index else str(b) for i, b in enumerate(data)
        )
        if input_index >= len(data):
            input_display += " [EOF]"
        print(f"Input:    {input_display.strip()}")

        # Show memory tape (focused around pointer)
        start = max(0, self.pointer - self.show_memory_range // 2)
        end = min(len(self.memory), start + self.show_memory_range)

        # Adjust start if we're near the end
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)

        memory_vals = []
        memory_ptrs = []
        memory_addrs = []

        for i in range(start, end):
            memory_vals.append(f"{int(self.memory[i]):3d}")
            memory_ptrs.append(" ^ " if i == self.pointer else "   ")
            memory_addrs.append(f"{i:3d}")

        print(f"Memory:   [" + "|".join(memory_vals) + "]")
        print(f"Pointer:   " + " ".join(memory_ptrs))
        print(f"Address:   " + " ".join(memory_addrs))

        # Show output so far
        output = stdout.getvalue()
        if output:
            print(f"Output:   {output!r} → {list(output)}")
        else:
            print(f"Output:   (empty)")


def main():
    """Interactive debugger."""
    debugger = BrainfuckDebugger(memory_size=20, show_memory_range=8)

    print("🧠 Brainfuck Step-by-Step Debugger")
    print("Enter 'quit' to exit\n")

    while True:
        print("-" * 60)
        try:
            program = input("Enter Brainfuck program: ").strip()
            if program.lower() == 'quit':
                break

            input_data = input("Enter input data: ").strip().encode("utf-8")
        except EOFError:
            print()
            break

        try:
            print()
            result = debugger.debug_run(program, input_data)
            print(f"\n✅ Execution complete. Final output: {result!r}")
        except BrainfuckError as e:
            print(f"\n❌ Error during execution: {e}")


if __name__ == "__main__":
    main()
