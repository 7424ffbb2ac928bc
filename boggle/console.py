"""Line-oriented console I/O for interactive play."""

import sys
from typing import TextIO

CLEAR_SCREEN = "\033[H\033[2J"


class Console:
    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    def print(self, *args, **kwargs):
        print(*args, file=self._out, **kwargs)

    def get_line(self, prompt: str = "") -> str:
        """Blocking read of one line, without its newline. Raises EOFError at end of input."""
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def get_yes_or_no(self, prompt: str = "") -> bool:
        while True:
            answer = self.get_line(prompt).strip().lower()
            if answer.startswith("y"):
                return True
            if answer.startswith("n"):
                return False
            self.print("Please type a word that begins with 'y' or 'n'.")

    def clear(self):
        # Only real terminals get the escape sequence; pipes and test buffers don't.
        if self._out.isatty():
            self._out.write(CLEAR_SCREEN)
            self._out.flush()
