"""Filesystem primitives for dirscout."""

from dirscout.files.metadata import IdentityLookup
from dirscout.files.metadata import SystemIdentityLookup
from dirscout.files.metadata import resolve_metadata
from dirscout.files.scan import DirectoryScan
from dirscout.files.scan import scan_directory

__all__ = [
    "DirectoryScan",
    "IdentityLookup",
    "SystemIdentityLookup",
    "resolve_metadata",
    "scan_directory",
]
