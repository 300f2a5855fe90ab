"""
Line-oriented user input.

The menu reads from an ``InputSource`` handed to it rather than from a
process-wide stream, so any text stream (a terminal, a file, a ``StringIO``
in tests) can drive a session. End of input raises ``EOFError``.
"""

import sys
from datetime import date, datetime
from typing import Optional, TextIO

DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%m/%d/%Y")


class InputSource:
    """Prompts on ``out`` and reads answers from ``stream``."""

    def __init__(self, stream: Optional[TextIO] = None, out: Optional[TextIO] = None):
        self.stream = stream or sys.stdin
        self.out = out or sys.stdout

    def read_line(self, prompt: str = "") -> str:
        """Read one line without its line terminator."""
        if prompt:
            self.out.write(prompt)
            self.out.flush()
        line = self.stream.readline()
        if line == "":
            raise EOFError("input exhausted")
        return line.rstrip("\r\n")

    def read_optional_line(self, prompt: str = "") -> Optional[str]:
        """Like ``read_line`` but a blank answer becomes ``None``."""
        return self.read_line(prompt).strip() or None

    def read_int(self, prompt: str = "") -> int:
        """Read an integer, asking again until one is given."""
        while True:
            raw = self.read_line(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                print("Your input is invalid!", file=self.out)

    def read_float(self, prompt: str = "") -> float:
        """Read a number, asking again until one is given."""
        while True:
            raw = self.read_line(prompt)
            try:
                return float(raw.strip())
            except ValueError:
                print("Your input is invalid!", file=self.out)

    def read_date(self, prompt: str = "") -> date:
        """Read a date as YYYY-MM-DD, YYYY/MM/DD or MM/DD/YYYY."""
        while True:
            raw = self.read_line(prompt).strip()
            for fmt in DATE_FORMATS:
                try:
                    return datetime.strptime(raw, fmt).date()
                except ValueError:
                    continue
            print("Your input is invalid! Use YYYY-MM-DD.", file=self.out)

    def read_choice(self) -> int:
        return self.read_int("Please make your choice: ")
