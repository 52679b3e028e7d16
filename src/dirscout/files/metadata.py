"""Per-entry metadata resolution."""

import grp
import logging
import os
import pwd
from datetime import datetime
from pathlib import Path
from typing import Protocol

from dirscout.exceptions import MetadataUnavailableError
from dirscout.models import EntryMetadata
from dirscout.models import EntryType

logger = logging.getLogger(__name__)

PERMISSION_MASK = 0o777


class IdentityLookup(Protocol):
    """Best-effort mapping of numeric ids to account names."""

    def user_name(self, uid: int) -> str | None: ...

    def group_name(self, gid: int) -> str | None: ...


class SystemIdentityLookup:
    """Identity lookup backed by the system account databases."""

    def user_name(self, uid: int) -> str | None:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            return None

    def group_name(self, gid: int) -> str | None:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            return None


def resolve_metadata(
    directory: Path, name: str, identity: IdentityLookup | None = None
) -> EntryMetadata:
    """Resolve metadata for one entry without following symlinks.

    Args:
        directory: Directory containing the entry
        name: Bare name of the entry inside directory
        identity: Lookup for owner/group names (default: system databases)

    Returns:
        EntryMetadata describing the entry itself (a symlink is reported as
        a symlink, never as its target)

    Raises:
        MetadataUnavailableError: If the entry cannot be stat'ed (vanished,
            permission denied on the parent, ...)
    """
    if identity is None:
        identity = SystemIdentityLookup()

    path = directory / name
    try:
        st = os.lstat(path)
    except OSError as e:
        logger.debug("lstat failed for %s: %s", path, e)
        raise MetadataUnavailableError(path, e) from e

    return EntryMetadata(
        path=path,
        entry_type=EntryType.from_mode(st.st_mode),
        permissions=st.st_mode & PERMISSION_MASK,
        owner_id=st.st_uid,
        group_id=st.st_gid,
        owner_name=identity.user_name(st.st_uid),
        group_name=identity.group_name(st.st_gid),
        size_bytes=st.st_size,
        modified_at=datetime.fromtimestamp(st.st_mtime),
    )
