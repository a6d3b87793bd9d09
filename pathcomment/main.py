"""Command entry point: resolves the base directory and runs the processor."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

from pathcomment.args import Args
from pathcomment.cli import Cli

__all__ = ["find_git_root", "resolve_paths", "main"]


def find_git_root(start_dir: str | os.PathLike[str]) -> Path | None:
    """Return the nearest directory at or above ``start_dir`` that holds a ``.git`` directory."""
    start = Path(start_dir)
    for candidate in (start, *start.parents):
        if (candidate / ".git").is_dir():
            return candidate
    return None


def resolve_paths(args: Args) -> tuple[Path, Path | None]:
    """Work out the base directory and the .gitignore to merge, if any.

    Raises OSError when the target or base directory cannot be accessed.
    """
    git_base_used = False
    if args.base is not None:
        base_dir = Path(args.base)
    elif args.no_git:
        base_dir = Path.cwd()
    else:
        try:
            target = Path(args.dir).resolve(strict=True)
        except OSError as exc:
            raise OSError(f"Error accessing target directory '{args.dir}': {exc}") from exc
        git_root = find_git_root(target)
        if git_root is not None:
            print(f"Found .git repository root at: {git_root}")
            git_base_used = True
            base_dir = git_root
        else:
            print(
                "No .git directory found upwards from target. "
                "Using current working directory as base."
            )
            base_dir = Path.cwd()

    try:
        base_dir = base_dir.resolve(strict=True)
    except OSError as exc:
        raise OSError(f"Error accessing base directory '{base_dir}': {exc}") from exc

    gitignore_path = (
        base_dir / ".gitignore" if git_base_used and not args.no_ignore_merge else None
    )
    return base_dir, gitignore_path


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = Args.parse(argv)
    try:
        base_dir, gitignore_path = resolve_paths(args)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    Cli(args, base_dir, gitignore_path).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())