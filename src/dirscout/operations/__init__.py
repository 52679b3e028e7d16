"""High-level operations for dirscout."""

from dirscout.operations.listing import compute_listing
from dirscout.operations.manage import change_directory
from dirscout.operations.manage import create_file
from dirscout.operations.manage import delete_file
from dirscout.operations.paths import resolve_against
from dirscout.operations.search import search_files

__all__ = [
    "change_directory",
    "compute_listing",
    "create_file",
    "delete_file",
    "resolve_against",
    "search_files",
]
