"""Command-line arguments."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, fields

from pathcomment.comments import Style

__all__ = ["Args", "build_parser"]

_VERSION = "0.1.1"


@dataclass
class Args:
    """Options controlling how path comments are written."""

    dir: str
    base: str | None = None
    keep: bool = False
    clean: bool = False
    force: bool = False
    no_git: bool = False
    no_recursive: bool = False
    no_ignore_merge: bool = False
    extensions: str | None = None
    config_file: str | None = None
    dry_run: bool = False
    comment_style: Style | None = None
    print_extensions: bool = False

    @classmethod
    def parse(cls, argv: Sequence[str] | None = None) -> Args:
        """Parse ``argv`` (defaults to ``sys.argv[1:]``); exits on invalid input."""
        namespace = build_parser().parse_args(argv)
        values = {f.name: getattr(namespace, f.name) for f in fields(cls)}
        if values["comment_style"] is not None:
            values["comment_style"] = Style(values["comment_style"])
        return cls(**values)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="path-comment",
        description="CLI tool to prepend file paths as comments to source code files",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("dir", help="Directory to process files in")
    parser.add_argument(
        "-b",
        "--base",
        help=(
            "Base directory for calculating relative paths. If not provided, "
            "searches upwards for a .git directory to use as the base. Falls back "
            "to the current working directory if no .git directory is found."
        ),
    )
    parser.add_argument(
        "-k",
        "--keep",
        action="store_true",
        help="Keep other existing path comments in the file.",
    )
    parser.add_argument("--clean", action="store_true", help="If used, the --keep is ignored.")
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Process folders that would normally be ignored (node_modules, venv, etc.)",
    )
    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Disable searching for a .git directory to determine the base path.",
    )
    parser.add_argument(
        "--no-recursive",
        action="store_true",
        help="Disables processing files recursively",
    )
    parser.add_argument(
        "--no-ignore-merge",
        action="store_true",
        help="Disable merging ignore rules from .gitignore found in the base directory.",
    )
    parser.add_argument(
        "-e",
        "--extensions",
        help="File extensions to process (comma-separated), eg `rs,ts,toml`",
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        help="Configuration file for file extensions and comment styles",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Dry run (don't modify files, just print what would be done)",
    )
    parser.add_argument(
        "-s",
        "--comment-style",
        choices=[style.value for style in Style],
        help="Force override a specific comment style to use (overrides config file)",
    )
    parser.add_argument(
        "-p",
        "--print-extensions",
        action="store_true",
        help="Print configured extensions styles, then exit.",
    )
    return parser