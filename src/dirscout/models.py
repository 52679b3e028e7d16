"""Data models for dirscout."""

import stat
from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from enum import Enum
from enum import auto
from pathlib import Path
from typing import Self

from dirscout.exceptions import MetadataUnavailableError


class EntryHint(Enum):
    """Coarse type hint supplied by directory enumeration."""

    DIRECTORY = auto()
    NOT_DIRECTORY = auto()
    UNKNOWN = auto()


class EntryType(Enum):
    """Type of a filesystem entry, derived from its mode bits."""

    REGULAR = auto()
    DIRECTORY = auto()
    SYMLINK = auto()
    OTHER = auto()

    @classmethod
    def from_mode(cls, mode: int) -> Self:
        """Classify raw st_mode bits."""
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.REGULAR
        return cls.OTHER


@dataclass(frozen=True)
class DirectoryEntry:
    """One child of a directory, as produced by enumeration."""

    name: str  # Opaque; may hold surrogate escapes for undecodable bytes
    hint: EntryHint


@dataclass(frozen=True)
class EntryMetadata:
    """Point-in-time snapshot of one entry (never follows symlinks)."""

    path: Path
    entry_type: EntryType
    permissions: int  # Only the 9 rwx bits (mode & 0o777)
    owner_id: int
    group_id: int
    owner_name: str | None  # None when the id has no account
    group_name: str | None
    size_bytes: int
    modified_at: datetime  # Naive, local time

    @property
    def owner(self) -> str:
        """Owner name, or the numeric id when it cannot be resolved."""
        return self.owner_name if self.owner_name is not None else str(self.owner_id)

    @property
    def group(self) -> str:
        """Group name, or the numeric id when it cannot be resolved."""
        return self.group_name if self.group_name is not None else str(self.group_id)


@dataclass
class ListedEntry:
    """One row of a listing.

    In detailed mode exactly one of metadata and error is set. In plain mode
    neither is.
    """

    name: str
    metadata: EntryMetadata | None = None
    error: MetadataUnavailableError | None = None


@dataclass
class Listing:
    """Result of listing one directory."""

    path: Path
    detailed: bool
    entries: list[ListedEntry] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    @property
    def failures(self) -> list[MetadataUnavailableError]:
        return [entry.error for entry in self.entries if entry.error is not None]
