"""Terminal protocol — the text boundary between a session and its user."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Terminal(Protocol):
    """Line-oriented input plus free-form text output."""

    @property
    def name(self) -> str: ...

    def read_line(self, prompt: str) -> str | None:
        """Show ``prompt`` and return the next line without its newline.

        Returns None once the input is exhausted. May raise OSError if the
        underlying stream fails.
        """
        ...

    def write(self, text: str = "") -> None:
        """Write ``text`` followed by a newline."""
        ...
