"""Line-oriented console input and output."""

import sys
from typing import List, Optional, TextIO


class LineIO:
    def read_line(self, prompt: str) -> str:
        raise NotImplementedError

    def write_line(self, text: str = ""):
        raise NotImplementedError

    def write_lines(self, lines: List[str]):
        for line in lines:
            self.write_line(line)


class ConsoleLineIO(LineIO):
    """
    Prompts on stdout and reads answers from stdin.

    Read and write failures are not caught here: without a console the game
    cannot continue, so they go straight up to the caller.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_line(self, prompt: str) -> str:
        self.stdout.write(f"{prompt} ")
        self.stdout.flush()

        line = self.stdin.readline()
        if not line:
            raise EOFError("Failed to read line: end of input")
        return line.strip()

    def write_line(self, text: str = ""):
        self.stdout.write(f"{text}\n")
        self.stdout.flush()
