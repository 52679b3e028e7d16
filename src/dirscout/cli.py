"""Command-line interface for dirscout."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from dirscout import __version__
from dirscout.config import Config
from dirscout.exceptions import ConfigValidationError
from dirscout.exceptions import ConfigVersionError
from dirscout.exceptions import DirectoryUnreadableError
from dirscout.exceptions import describe_os_error
from dirscout.operations import change_directory
from dirscout.operations import compute_listing
from dirscout.operations import create_file
from dirscout.operations import delete_file
from dirscout.operations import resolve_against
from dirscout.operations import search_files
from dirscout.output import print_listing
from dirscout.output import print_listing_error
from dirscout.output import print_search_result
from dirscout.output import print_search_skip
from dirscout.output import print_search_summary

app = typer.Typer(help="Filesystem explorer")

logger = logging.getLogger(__name__)

MENU = """\
1. List files (names only)
2. List files (detailed -> permissions, owner, size, mtime)
3. Create file
4. Delete file
5. Change directory
6. Search file (recursive)
7. Exit"""


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dirscout {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug details to stderr")
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Config file (default: user config dir)"),
    ] = None,
) -> None:
    """Filesystem explorer."""
    try:
        config = Config.load(config_path)
    except (ConfigValidationError, ConfigVersionError) as e:
        typer.secho(f"✗ Config error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    level = logging.DEBUG if verbose else config.logging_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


@app.command("ls")
def list_command(
    ctx: typer.Context,
    path: Annotated[
        Path | None, typer.Argument(help="Directory to list (default: current)")
    ] = None,
    long: Annotated[
        bool | None,
        typer.Option(
            "--long/--short",
            "-l/-s",
            help="Show permissions, owner, group, size and mtime",
        ),
    ] = None,
) -> None:
    """List the contents of a directory."""
    config: Config = ctx.obj
    detailed = config.long_listing if long is None else long
    root = Path.cwd()
    target = root if path is None else resolve_against(root, path)

    if not run_listing(target, detailed):
        raise typer.Exit(1)


@app.command("find")
def find_command(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Exact file name to search for")],
    root: Annotated[
        Path | None, typer.Argument(help="Directory to search (default: current)")
    ] = None,
    show_skipped: Annotated[
        bool | None,
        typer.Option(
            "--show-skipped/--hide-skipped",
            help="Report directories that could not be searched",
        ),
    ] = None,
) -> None:
    """Search recursively for files with an exact name."""
    config: Config = ctx.obj
    if show_skipped is None:
        show_skipped = config.show_skipped
    cwd = Path.cwd()
    start = cwd if root is None else resolve_against(cwd, root)

    try:
        run_search(start, name, show_skipped=show_skipped)
    except ValueError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None


@app.command("touch")
def create_command(
    name: Annotated[str, typer.Argument(help="File to create")],
) -> None:
    """Create an empty file (fails if it already exists)."""
    if not run_create(Path.cwd(), name):
        raise typer.Exit(1)


@app.command("rm")
def delete_command(
    name: Annotated[str, typer.Argument(help="File to delete")],
) -> None:
    """Delete a file."""
    if not run_delete(Path.cwd(), name):
        raise typer.Exit(1)


@app.command("shell")
def shell_command(ctx: typer.Context) -> None:
    """Start the interactive menu."""
    config: Config = ctx.obj
    run_shell(Path.cwd(), show_skipped=config.show_skipped)


@app.command("config")
def config_command(
    ctx: typer.Context,
    init: Annotated[
        bool, typer.Option("--init", help="Write the current settings to disk")
    ] = False,
) -> None:
    """Show the active configuration."""
    config: Config = ctx.obj
    path = ctx.parent.params.get("config_path") or Config.default_path()
    if init:
        if path.exists():
            typer.secho(f"✗ Config already exists: {path}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1)
        config.save(path)
        typer.secho(f"✓ Wrote {path}", fg=typer.colors.GREEN, bold=True)
        return

    typer.echo(f"Config file: {path}")
    for key, value in config.to_dict().items():
        typer.echo(f"  {key} = {value}")


def run_listing(path: Path, detailed: bool) -> bool:
    """List path; returns False if the directory could not be opened."""
    try:
        listing = compute_listing(path, detailed=detailed)
    except DirectoryUnreadableError as e:
        print_listing_error(e)
        return False
    print_listing(listing)
    return True


def run_search(root: Path, target: str, show_skipped: bool = False) -> int:
    """Stream search results for target under root; returns the match count."""
    on_unreadable = print_search_skip if show_skipped else None
    matches = 0
    for path in search_files(root, target, on_unreadable=on_unreadable):
        print_search_result(path)
        matches += 1
    print_search_summary(target, matches)
    return matches


def run_create(root: Path, name: str) -> bool:
    """Create name under root; returns False on failure."""
    try:
        path = create_file(root, name)
    except FileExistsError:
        typer.secho(f"File already exists: {name}", fg=typer.colors.YELLOW)
        return False
    except OSError as e:
        typer.secho(
            f"create failed: {describe_os_error(e)}", fg=typer.colors.RED, err=True
        )
        return False
    typer.secho(f"File created: {path}", fg=typer.colors.GREEN)
    return True


def run_delete(root: Path, name: str) -> bool:
    """Delete name under root; returns False on failure."""
    try:
        path = delete_file(root, name)
    except OSError as e:
        typer.secho(
            f"remove failed: {describe_os_error(e)}", fg=typer.colors.RED, err=True
        )
        return False
    typer.secho(f"Deleted: {path}", fg=typer.colors.GREEN)
    return True


def run_shell(root: Path, show_skipped: bool = False) -> None:
    """Run the interactive menu until the user exits.

    The current root is threaded through every operation and replaced only
    by a successful directory change.
    """
    typer.echo("=" * 37)
    typer.secho("         dirscout file explorer", bold=True)
    typer.echo("=" * 37)

    while True:
        typer.echo(f"\nCurrent Directory: {root}")
        typer.echo(MENU)
        try:
            raw = typer.prompt("Enter choice", prompt_suffix=": ")
        except typer.Abort:
            break

        try:
            choice = int(raw)
        except ValueError:
            typer.echo("Invalid input")
            continue

        try:
            match choice:
                case 1:
                    run_listing(root, detailed=False)
                case 2:
                    run_listing(root, detailed=True)
                case 3:
                    run_create(root, _prompt_word("Enter filename to create"))
                case 4:
                    run_delete(root, _prompt_word("Enter filename to delete"))
                case 5:
                    target = _prompt_word(
                        "Enter directory to change to (absolute or relative)"
                    )
                    root = _change_root(root, target)
                case 6:
                    target = _prompt_word("Enter filename to search for (exact name)")
                    typer.echo("Searching (this may take time for large trees)...")
                    try:
                        run_search(root, target, show_skipped=show_skipped)
                    except ValueError as e:
                        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
                case 7:
                    break
                case _:
                    typer.echo("Invalid choice")
        except typer.Abort:
            break

    typer.echo("Goodbye!")


def _prompt_word(text: str) -> str:
    return typer.prompt(text, prompt_suffix=": ").strip()


def _change_root(root: Path, target: str) -> Path:
    try:
        new_root = change_directory(root, target)
    except OSError as e:
        typer.secho(
            f"chdir failed: {describe_os_error(e)}", fg=typer.colors.RED, err=True
        )
        return root
    typer.echo(f"Changed directory to: {new_root}")
    return new_root


def main() -> None:
    """Main entry point for the dirscout CLI."""
    app()


if __name__ == "__main__":
    main()
