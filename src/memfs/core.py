"""Command dispatcher — maps typed commands onto FileStore operations.

Responsibilities:
1. Read one command line at a time from a Terminal
2. Resolve the command through the alias table (case-insensitive)
3. Collect the command's arguments, one line each
4. Call the store and render the result as text
5. Turn every FileError into a printed message so the loop keeps going
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from memfs.config import MemfsConfig
from memfs.errors import FileError, InputStreamError, InvalidInput
from memfs.store import NO_EXTENSION, FileEntry, FileStore

if TYPE_CHECKING:
    from memfs.connectors.base import Terminal

logger = logging.getLogger(__name__)

MAX_FILE_ID = 2**32 - 1


class Command(str, Enum):
    CREATE = "create"
    WRITE = "write"
    READ = "read"
    LIST = "list"
    DELETE = "delete"
    INFO = "info"
    STATS = "stats"
    HELP = "help"
    QUIT = "quit"


_ALIASES: dict[str, Command] = {
    "create": Command.CREATE,
    "c": Command.CREATE,
    "write": Command.WRITE,
    "w": Command.WRITE,
    "read": Command.READ,
    "r": Command.READ,
    "list": Command.LIST,
    "l": Command.LIST,
    "ls": Command.LIST,
    "delete": Command.DELETE,
    "d": Command.DELETE,
    "del": Command.DELETE,
    "info": Command.INFO,
    "i": Command.INFO,
    "stats": Command.STATS,
    "s": Command.STATS,
    "help": Command.HELP,
    "h": Command.HELP,
    "?": Command.HELP,
    "quit": Command.QUIT,
    "q": Command.QUIT,
    "exit": Command.QUIT,
}

HELP_TEXT = """\
📚 Available Commands:
  create, c       - Create a new file
  write, w        - Write content to an existing file
  read, r         - Read file content
  list, l, ls     - List all files
  delete, d, del  - Delete a file (by name or ID)
  info, i         - Show detailed file information
  stats, s        - Show system statistics
  help, h, ?      - Show this help message
  quit, q, exit   - Exit the program"""


def parse_command(text: str) -> Command:
    """Resolve a typed command or alias. Raises InvalidInput if unknown."""
    command = _ALIASES.get(text.strip().lower())
    if command is None:
        raise InvalidInput(f"Unknown command: {text.strip()}")
    return command


def parse_file_id(text: str) -> int | None:
    """Return ``text`` as a file ID, or None if it should be treated as a name.

    Only ASCII decimal digits (optionally prefixed with "+") within the
    unsigned 32-bit range count as an ID.
    """
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    file_id = int(digits)
    return file_id if file_id <= MAX_FILE_ID else None


class Dispatcher:
    """Runs the command loop against a store it was handed."""

    def __init__(
        self,
        store: FileStore,
        terminal: Terminal,
        config: MemfsConfig | None = None,
    ) -> None:
        self.store = store
        self.config = config or MemfsConfig()
        self._terminal = terminal
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    # ── Loop ──────────────────────────────────────────────────

    def run(self) -> None:
        """Serve commands until quit or end of input.

        Raises InputStreamError if the terminal fails; everything else is
        reported and the loop continues.
        """
        self._say("🗂️  Welcome to the In-Memory File Management System!")
        self._say("Type 'help' to see available commands.")
        self._say()

        self._running = True
        logger.debug("Session started on %s terminal", self._terminal.name)
        try:
            while self._running:
                line = self._read(self.config.prompt)
                if line is None:
                    logger.debug("Input exhausted at command prompt")
                    break

                try:
                    command = parse_command(line)
                except InvalidInput as e:
                    self._say(f"❌ {e}")
                    continue

                if not self.execute(command):
                    break
        finally:
            self._running = False

        self._say("👋 Goodbye!")

    def execute(self, command: Command) -> bool:
        """Run one command. Returns False when the session should stop."""
        if command is Command.QUIT:
            return False

        handler = getattr(self, f"_cmd_{command.value}")
        try:
            handler()
        except FileError as e:
            logger.debug("%s failed: %s", command.value, e)
            self._say(f"❌ {e}")
        return True

    # ── Terminal I/O ──────────────────────────────────────────

    def _say(self, text: str = "") -> None:
        self._terminal.write(text)

    def _read(self, prompt: str) -> str | None:
        try:
            return self._terminal.read_line(prompt)
        except OSError as e:
            raise InputStreamError(f"Failed to read input: {e}") from e

    def _ask(self, prompt: str) -> str:
        """Read one required argument. Blank input aborts the command."""
        line = self._read(prompt)
        if line is None:
            raise InputStreamError("Failed to read input: end of input")
        text = line.strip()
        if not text:
            raise InvalidInput("Input cannot be empty")
        return text

    def _resolve(self, text: str) -> FileEntry:
        file_id = parse_file_id(text)
        if file_id is not None:
            return self.store.get_by_id(file_id)
        return self.store.get_by_name(text)

    # ── Commands ──────────────────────────────────────────────

    def _cmd_create(self) -> None:
        self._say("Creating file...")
        name = self._ask("Enter file name: ")
        content = self._ask("Enter file content: ")
        file_id = self.store.create(name, content)
        self._say(f"✅ File '{name}' created successfully with ID: {file_id}")

    def _cmd_write(self) -> None:
        self._say("Writing content...")
        name = self._ask("Enter file name: ")
        content = self._ask("Enter new content: ")
        self.store.write(name, content)
        self._say(f"✅ Content written to '{name}' successfully")

    def _cmd_read(self) -> None:
        self._say("Reading file...")
        name = self._ask("Enter file name: ")
        content = self.store.read(name)
        separator = "-" * self.config.separator_width
        self._say(f"📄 Content of '{name}':")
        self._say(separator)
        self._say(content)
        self._say(separator)

    def _cmd_list(self) -> None:
        self._say("Listing files...")
        files = self.store.list_files()
        if not files:
            self._say("📭 No files found.")
            return
        self._say("📂 Files in system:")
        for entry in files:
            self._say(f"  {entry.summary()}")

    def _cmd_delete(self) -> None:
        self._say("Deleting file...")
        target = self._ask("Enter file name or ID: ")
        file_id = parse_file_id(target)
        if file_id is not None:
            self.store.delete_by_id(file_id)
        else:
            self.store.delete_by_name(target)
        self._say("✅ File deleted successfully")

    def _cmd_info(self) -> None:
        self._say("File information...")
        target = self._ask("Enter file name or ID: ")
        entry = self._resolve(target)
        self._say("📋 File Information:")
        self._say(entry.detailed(self.config.preview_length))

    def _cmd_stats(self) -> None:
        stats = self.store.stats()
        self._say("📊 System Statistics:")
        self._say(f"  Total files: {stats.count}")
        self._say(f"  Total size: {stats.total_size} bytes")
        if not stats.count:
            return
        self._say(f"  Average file size: {stats.average_size} bytes")
        self._say("  File types:")
        for ext, count in stats.extensions.items():
            label = ext if ext == NO_EXTENSION else f".{ext}"
            self._say(f"    {label}: {count} files")

    def _cmd_help(self) -> None:
        self._say(HELP_TEXT)
