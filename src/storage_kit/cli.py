"""CLI commands using Typer."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

if TYPE_CHECKING:
    from storage_kit.context import StorageContext
    from storage_kit.types import OperationResult, ReadResult

import typer

from storage_kit import __version__
from storage_kit.console import StorageConsole, configure_logging
from storage_kit.context import create_context
from storage_kit.errors import NameExhaustedError

app = typer.Typer(
    name="storage-kit",
    help="File and directory operations with uniform results",
    no_args_is_help=True,
)

out = StorageConsole()

# Options given to the main callback, shared with every command
state: dict[str, Any] = {"config": None}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        out.console.print(f"storage-kit v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file (YAML)", dir_okay=False),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Show debug logging")] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """File and directory operations with uniform results."""
    state["config"] = config
    configure_logging(verbose)


def _get_context(context: StorageContext | None) -> StorageContext:
    """Return the injected context or build one from the global options."""
    if context is not None:
        return context
    try:
        return create_context(config_path=state["config"])
    except (OSError, ValueError) as e:
        out.show_error(str(e))
        raise typer.Exit(1) from e


def _report(result: OperationResult | ReadResult, message: str) -> None:
    """Print the outcome of an operation, exiting 1 on failure."""
    if result.success:
        out.show_success(message)
        return
    out.show_error(f"{message} failed: {result.error}")
    raise typer.Exit(1)


# ============================================================================
# File Commands
# ============================================================================


@app.command("read")
def read_file(
    path: Annotated[Path, typer.Argument(help="File to read")],
    _context=None,
) -> None:
    """Print the content of a text file."""
    ctx = _get_context(_context)
    result = ctx.files.read(path)
    if not result.success:
        out.show_error(f"Cannot read {path}: {result.error}")
        raise typer.Exit(1)
    out.show_text(result.content or "")


@app.command("write")
def write_file(
    path: Annotated[Path, typer.Argument(help="File to create")],
    content: Annotated[str, typer.Argument(help="Text to write")],
    _context=None,
) -> None:
    """Create a file (overwrites an existing one)."""
    ctx = _get_context(_context)
    _report(ctx.files.create(path, content), f"Write {path}")


@app.command("update")
def update_file(
    path: Annotated[Path, typer.Argument(help="File to update")],
    content: Annotated[str, typer.Argument(help="New content")],
    _context=None,
) -> None:
    """Replace the content of a file."""
    ctx = _get_context(_context)
    _report(ctx.files.update(path, content), f"Update {path}")


@app.command("rm")
def remove_file(
    path: Annotated[Path, typer.Argument(help="File to delete")],
    _context=None,
) -> None:
    """Delete a single file."""
    ctx = _get_context(_context)
    _report(ctx.files.delete(path), f"Delete {path}")


@app.command("mv")
def rename_file(
    old: Annotated[Path, typer.Argument(help="Existing file")],
    new: Annotated[Path, typer.Argument(help="New path")],
    _context=None,
) -> None:
    """Rename a file. Directories are rejected; use move-dir."""
    ctx = _get_context(_context)
    _report(ctx.files.rename(old, new), f"Rename {old} -> {new}")


@app.command("cp")
def copy_file(
    old: Annotated[Path, typer.Argument(help="Source file")],
    new: Annotated[Path, typer.Argument(help="Destination file")],
    _context=None,
) -> None:
    """Copy a text file."""
    ctx = _get_context(_context)
    if not ctx.files.copy(old, new):
        out.show_error(f"Copy {old} -> {new} failed")
        raise typer.Exit(1)
    out.show_success(f"Copied {old} -> {new}")


# ============================================================================
# Directory Commands
# ============================================================================


@app.command("mkdir")
def make_dir(
    path: Annotated[Path, typer.Argument(help="Directory to create")],
    _context=None,
) -> None:
    """Create a directory (its parent must exist)."""
    ctx = _get_context(_context)
    _report(ctx.dirs.create(path), f"Create {path}")


@app.command("rmdir")
def remove_dir(
    path: Annotated[Path, typer.Argument(help="Directory to delete")],
    _context=None,
) -> None:
    """Delete a directory and everything in it."""
    ctx = _get_context(_context)
    _report(ctx.dirs.delete(path), f"Delete {path}")


@app.command("ls")
def list_dir(
    path: Annotated[Path, typer.Argument(help="Directory to list")] = Path("."),
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Include subdirectories")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON")] = False,
    _context=None,
) -> None:
    """List a directory."""
    ctx = _get_context(_context)
    result = ctx.dirs.list(path, recursive=recursive)
    if not result.success:
        out.show_error(f"Cannot list {path}: {result.error}")
        raise typer.Exit(1)
    if as_json:
        out.show_json(result.entries)
    else:
        out.show_entries(path, result.entries)


def _resolve_dest(ctx: StorageContext, source: Path, dest: Path | None) -> Path:
    """Pick the destination, deriving a free copy name when none is given."""
    if dest is not None:
        return dest
    try:
        return Path(ctx.dirs.last_name(source))
    except NameExhaustedError as e:
        out.show_error(str(e))
        raise typer.Exit(1) from e


def _require_dir(ctx: StorageContext, path: Path) -> None:
    """Exit 1 unless ``path`` is an existing directory."""
    if not ctx.dirs.check(path):
        out.show_error(f"{path} is not a directory")
        raise typer.Exit(1)


@app.command("copy-dir")
def copy_dir(
    source: Annotated[Path, typer.Argument(help="Directory to copy")],
    dest: Annotated[
        Path | None, typer.Argument(help="Destination (default: <source>-copy)")
    ] = None,
    _context=None,
) -> None:
    """Recursively copy a directory."""
    ctx = _get_context(_context)
    _require_dir(ctx, source)
    target = _resolve_dest(ctx, source, dest)
    if not ctx.dirs.copy(source, target):
        out.show_error(f"Cannot copy {source} into {target}")
        raise typer.Exit(1)
    out.show_success(f"Copied {source} -> {target}")


@app.command("move-dir")
def move_dir(
    source: Annotated[Path, typer.Argument(help="Directory to move")],
    dest: Annotated[
        Path | None, typer.Argument(help="Destination (default: <source>-copy)")
    ] = None,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    _context=None,
) -> None:
    """Copy a directory, then delete the source.

    The source is deleted even if some files failed to copy.
    """
    ctx = _get_context(_context)
    _require_dir(ctx, source)
    target = _resolve_dest(ctx, source, dest)
    if not yes and not typer.confirm(f"Move {source} to {target} and delete {source}?"):
        raise typer.Abort()
    ctx.dirs.move(source, target)
    if ctx.dirs.exists(source):
        out.show_error(f"Move {source} -> {target} did not complete")
        raise typer.Exit(1)
    out.show_success(f"Moved {source} -> {target}")


@app.command("exists")
def exists(
    path: Annotated[Path, typer.Argument(help="Path to check")],
    _context=None,
) -> None:
    """Exit 0 if the path exists, 1 otherwise."""
    ctx = _get_context(_context)
    if ctx.dirs.exists(path):
        kind = "directory" if ctx.dirs.check(path) else "file"
        out.show_success(f"{path} exists ({kind})")
        return
    out.show_error(f"{path} does not exist")
    raise typer.Exit(1)


@app.command("next-name")
def next_name(
    base: Annotated[str, typer.Argument(help="Base path without extension")],
    ext: Annotated[str, typer.Option("--ext", "-e", help="Extension, e.g. .txt")] = "",
    _context=None,
) -> None:
    """Print the first free copy name for BASE."""
    ctx = _get_context(_context)
    try:
        name = ctx.dirs.last_name(base, ext)
    except NameExhaustedError as e:
        out.show_error(str(e))
        raise typer.Exit(1) from e
    out.show_line(name)


if __name__ == "__main__":
    app()
