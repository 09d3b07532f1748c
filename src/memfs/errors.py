"""Error kinds raised by the file store and the command dispatcher."""

from __future__ import annotations


class FileError(Exception):
    """Base class for recoverable failures of a single command."""


class NotFound(FileError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"File '{name}' not found")


class AlreadyExists(FileError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"File '{name}' already exists")


class InvalidInput(FileError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid input: {message}")


class AccessDenied(FileError):
    """Reserved; no current operation raises it."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Access denied: {message}")


class EmptyContent(FileError):
    """Reserved; empty content is accepted by the store."""

    def __init__(self) -> None:
        super().__init__("Cannot create file with empty content")


class InvalidId(FileError):
    def __init__(self, file_id: int) -> None:
        self.file_id = file_id
        super().__init__(f"Invalid file ID: {file_id}")


class InputStreamError(Exception):
    """The input collaborator failed or closed in the middle of a command.

    Not a FileError: the dispatcher lets it escape so the process can exit
    with a non-zero status.
    """
