"""Output formatting for dirscout operations."""

import os
import stat
from pathlib import Path

import typer

from dirscout.exceptions import DirectoryUnreadableError
from dirscout.models import EntryMetadata
from dirscout.models import EntryType
from dirscout.models import Listing

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SEPARATOR_WIDTH = 80

# (title, width) for every fixed-width column; the name column follows
COLUMNS = (
    ("PERMISSIONS", 12),
    ("OWNER", 8),
    ("GROUP", 8),
    ("SIZE", 10),
    ("MODIFIED", 20),
)

_TYPE_CHARS = {
    EntryType.DIRECTORY: "d",
    EntryType.SYMLINK: "l",
}

# Owner, group, other; read, write, execute
_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def format_permissions(entry_type: EntryType, permissions: int) -> str:
    """Render a type character plus rwx triplets, e.g. "drwxr-xr-x"."""
    chars = [_TYPE_CHARS.get(entry_type, "-")]
    for bit, char in _PERMISSION_BITS:
        chars.append(char if permissions & bit else "-")
    return "".join(chars)


def format_entry_row(metadata: EntryMetadata, name: str) -> str:
    """Render one detailed-listing row.

    Columns are left-justified and never truncated, so an over-long owner or
    group name pushes the following columns right.
    """
    values = (
        format_permissions(metadata.entry_type, metadata.permissions),
        metadata.owner,
        metadata.group,
        str(metadata.size_bytes),
        metadata.modified_at.strftime(TIMESTAMP_FORMAT),
    )
    return _format_columns(values, display_name(name))


def format_listing_header() -> list[str]:
    """Return the title row and the separator for detailed listings."""
    titles = tuple(title for title, _ in COLUMNS)
    return [_format_columns(titles, "NAME"), "-" * SEPARATOR_WIDTH]


def display_name(name: str) -> str:
    """Make an entry name printable.

    Bytes that are not valid in the filesystem encoding are shown as
    backslash escapes instead of failing on output.
    """
    return os.fsencode(name).decode(errors="backslashreplace")


def print_listing(listing: Listing) -> None:
    """Print a listing; per-entry metadata failures go to stderr.

    Args:
        listing: Listing to print
    """
    if not listing.detailed:
        typer.echo(f"\nContents of {listing.path}:")
        for entry in listing.entries:
            typer.echo(f"  - {display_name(entry.name)}")
        return

    for line in format_listing_header():
        typer.echo(line)
    for entry in listing.entries:
        if entry.error is not None:
            typer.secho(
                f"  [stat error] {display_name(entry.name)} : {entry.error.reason}",
                fg=typer.colors.RED,
                err=True,
            )
        elif entry.metadata is not None:
            typer.echo(format_entry_row(entry.metadata, entry.name))


def print_listing_error(error: DirectoryUnreadableError) -> None:
    """Print a directory-open failure to stderr."""
    typer.secho(
        f"opendir failed for {error.path} : {error.reason}",
        fg=typer.colors.RED,
        bold=True,
        err=True,
    )


def print_search_result(path: Path) -> None:
    typer.echo(f"Found: {display_name(str(path))}")


def print_search_skip(error: DirectoryUnreadableError) -> None:
    typer.secho(
        f"skipped {error.path} : {error.reason}",
        fg=typer.colors.BRIGHT_BLACK,
        err=True,
    )


def print_search_summary(target: str, matches: int) -> None:
    """Print how many matches a search produced."""
    if matches == 0:
        typer.secho(f"No files named {target} found", fg=typer.colors.YELLOW)
    else:
        typer.secho(
            f"✓ {matches} match{'es' if matches != 1 else ''}",
            fg=typer.colors.GREEN,
            bold=True,
        )


def _format_columns(values: tuple[str, ...], name: str) -> str:
    cells = [
        value.ljust(width) for value, (_, width) in zip(values, COLUMNS, strict=True)
    ]
    return "".join(cells) + " " + name
