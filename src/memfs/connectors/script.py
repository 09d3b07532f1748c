"""Scripted terminal — replays a fixed list of input lines.

Used by ``memfs demo`` and by the tests. Everything written, prompts
included, is kept in ``transcript``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class ScriptedTerminal:
    def __init__(self, lines: Iterable[str], *, echo: bool = True) -> None:
        self._lines = deque(lines)
        self._echo = echo
        self.transcript: list[str] = []

    @property
    def name(self) -> str:
        return "script"

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def read_line(self, prompt: str) -> str | None:
        if not self._lines:
            self.transcript.append(prompt)
            return None
        line = self._lines.popleft()
        self.transcript.append(f"{prompt}{line}" if self._echo else prompt)
        return line

    def write(self, text: str = "") -> None:
        self.transcript.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.transcript)
