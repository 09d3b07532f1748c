"""In-memory file store — ordered entries with sequential, never-reused IDs.

Nothing here touches the disk. Entries are kept in a plain list in creation
order and looked up by linear scan; the store is not meant for scale.
Callers only ever see frozen ``FileEntry`` values, so the list is the single
owner of entry state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta

from memfs.errors import AlreadyExists, InvalidId, InvalidInput, NotFound

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 50
NO_EXTENSION = "no extension"


def format_age(delta: timedelta) -> str:
    """Render a duration as ``4.2s``, ``3m12s`` or ``1h2m5s``."""
    total_s = max(delta.total_seconds(), 0.0)
    if total_s < 60:
        return f"{total_s:.1f}s"
    if total_s < 3600:
        m, s = divmod(int(total_s), 60)
        return f"{m}m{s}s"
    h, rem = divmod(int(total_s), 3600)
    m, s = divmod(rem, 60)
    return f"{h}h{m}m{s}s"


@dataclass(frozen=True)
class FileEntry:
    """A named text file held in memory."""

    id: int
    name: str
    content: str
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def size(self) -> int:
        """Byte length of the UTF-8 encoded content."""
        return len(self.content.encode("utf-8"))

    @property
    def extension(self) -> str | None:
        """Text after the last '.' in the name, or None."""
        if "." not in self.name:
            return None
        ext = self.name.rsplit(".", 1)[1]
        return ext or None

    def preview(self, limit: int = PREVIEW_LENGTH) -> str:
        return self.content[:limit]

    def is_truncated(self, limit: int = PREVIEW_LENGTH) -> bool:
        return len(self.content) > limit

    def age(self, now: datetime | None = None) -> timedelta:
        elapsed = (now or datetime.now()) - self.created_at
        return max(elapsed, timedelta(0))

    def summary(self) -> str:
        return f"[{self.id}] {self.name} ({self.size} bytes)"

    def detailed(self, limit: int = PREVIEW_LENGTH, now: datetime | None = None) -> str:
        marker = "..." if self.is_truncated(limit) else ""
        return (
            f"ID: {self.id}\n"
            f"Name: {self.name}\n"
            f"Size: {self.size} bytes\n"
            f"Created: {format_age(self.age(now))} ago\n"
            f"Preview: {self.preview(limit)}{marker}"
        )

    def __str__(self) -> str:
        return self.summary()


@dataclass
class StoreStats:
    """Aggregate view of the store at one point in time."""

    count: int = 0
    total_size: int = 0
    average_size: int = 0
    extensions: dict[str, int] = field(default_factory=dict)


class FileStore:
    """Authoritative collection of file entries for one process."""

    def __init__(self) -> None:
        self._files: list[FileEntry] = []
        self._next_id = 1

    # ── Lookup ────────────────────────────────────────────────

    def _index_of_name(self, name: str) -> int | None:
        for i, entry in enumerate(self._files):
            if entry.name == name:
                return i
        return None

    def _index_of_id(self, file_id: int) -> int | None:
        for i, entry in enumerate(self._files):
            if entry.id == file_id:
                return i
        return None

    def get_by_name(self, name: str) -> FileEntry:
        i = self._index_of_name(name)
        if i is None:
            raise NotFound(name)
        return self._files[i]

    def get_by_id(self, file_id: int) -> FileEntry:
        i = self._index_of_id(file_id)
        if i is None:
            raise InvalidId(file_id)
        return self._files[i]

    # ── CRUD ──────────────────────────────────────────────────

    def create(self, name: str, content: str) -> int:
        """Store a new entry and return its ID."""
        if not name.strip():
            raise InvalidInput("File name cannot be empty")
        if self._index_of_name(name) is not None:
            raise AlreadyExists(name)

        file_id = self._next_id
        self._files.append(FileEntry(id=file_id, name=name, content=content))
        self._next_id += 1
        logger.info("Created file %r (id=%d, %d bytes)", name, file_id, self._files[-1].size)
        return file_id

    def write(self, name: str, content: str) -> None:
        """Replace the content of an existing entry, keeping its position."""
        i = self._index_of_name(name)
        if i is None:
            raise NotFound(name)
        self._files[i] = replace(self._files[i], content=content)
        logger.debug("Wrote %d bytes to %r", self._files[i].size, name)

    def read(self, name: str) -> str:
        return self.get_by_name(name).content

    def list_files(self) -> tuple[FileEntry, ...]:
        return tuple(self._files)

    def delete_by_name(self, name: str) -> None:
        i = self._index_of_name(name)
        if i is None:
            raise NotFound(name)
        self._remove(i)

    def delete_by_id(self, file_id: int) -> None:
        i = self._index_of_id(file_id)
        if i is None:
            raise InvalidId(file_id)
        self._remove(i)

    def _remove(self, index: int) -> None:
        entry = self._files.pop(index)
        logger.info("Deleted file %r (id=%d)", entry.name, entry.id)

    # ── Aggregates ────────────────────────────────────────────

    def count(self) -> int:
        return len(self._files)

    def total_size(self) -> int:
        return sum(entry.size for entry in self._files)

    def stats(self) -> StoreStats:
        count = self.count()
        total = self.total_size()
        extensions: dict[str, int] = {}
        for entry in self._files:
            ext = entry.extension or NO_EXTENSION
            extensions[ext] = extensions.get(ext, 0) + 1
        return StoreStats(
            count=count,
            total_size=total,
            average_size=total // count if count else 0,
            extensions=extensions,
        )

    def __len__(self) -> int:
        return len(self._files)
