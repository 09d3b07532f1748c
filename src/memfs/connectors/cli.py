"""Interactive terminal on stdin/stdout."""

from __future__ import annotations

import sys


class StdioTerminal:
    """Reads lines from stdin, writes to stdout."""

    @property
    def name(self) -> str:
        return "cli"

    def read_line(self, prompt: str) -> str | None:
        sys.stdout.write(prompt)
        sys.stdout.flush()
        raw = sys.stdin.buffer.readline()
        if not raw:
            return None
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise OSError(f"input is not valid UTF-8: {e}") from e
        return line.rstrip("\r\n")

    def write(self, text: str = "") -> None:
        print(text)
