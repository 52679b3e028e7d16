"""Directory listing."""

import logging
import os
from pathlib import Path

from dirscout.exceptions import MetadataUnavailableError
from dirscout.files import IdentityLookup
from dirscout.files import SystemIdentityLookup
from dirscout.files import resolve_metadata
from dirscout.files import scan_directory
from dirscout.models import ListedEntry
from dirscout.models import Listing

logger = logging.getLogger(__name__)


def compute_listing(
    path: Path, detailed: bool = False, identity: IdentityLookup | None = None
) -> Listing:
    """List the immediate children of a directory.

    Args:
        path: Directory to list
        detailed: If True, resolve metadata for every entry
        identity: Lookup for owner/group names (default: system databases)

    Returns:
        Listing with entries sorted by the byte encoding of their names.
        In detailed mode an entry whose metadata cannot be resolved carries
        the error instead and the remaining entries are still resolved.

    Raises:
        DirectoryUnreadableError: If path cannot be opened as a directory
    """
    with scan_directory(path) as scan:
        names = [entry.name for entry in scan]

    # Sorting needs the complete name set, so this is the one buffering point.
    names.sort(key=os.fsencode)
    listing = Listing(path=path, detailed=detailed)

    if not detailed:
        listing.entries = [ListedEntry(name=name) for name in names]
        return listing

    if identity is None:
        identity = SystemIdentityLookup()

    for name in names:
        try:
            metadata = resolve_metadata(path, name, identity)
        except MetadataUnavailableError as e:
            logger.debug("Skipping metadata for %s: %s", name, e)
            listing.entries.append(ListedEntry(name=name, error=e))
        else:
            listing.entries.append(ListedEntry(name=name, metadata=metadata))

    return listing
