"""Walks a directory and writes a path comment at the top of each source file."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

from pathcomment.args import Args
from pathcomment.comments import Style, default_config, parse_config, path_comment_regex

__all__ = ["Cli", "load_ignored_dirs"]

_ANSI_RESET = "\x1b[0m"
_ANSI_GREEN = "\x1b[32m"
_ANSI_RED = "\x1b[31m"
_ANSI_YELLOW = "\x1b[33m"

_DEFAULT_IGNORE_CONFIG = """\
# Directories skipped unless --force is given
.git
.hg
.svn
node_modules
bower_components
target
build
dist
venv
.venv
__pycache__
.mypy_cache
.pytest_cache
.tox
.idea
.vscode
.next
.nuxt
"""


def _added(text: str) -> str:
    return f"{_ANSI_GREEN}+ {text}{_ANSI_RESET}"


def _removed(text: str) -> str:
    return f"{_ANSI_RED}- {text}{_ANSI_RESET}"


def _no_change(text: str) -> str:
    return f"{_ANSI_YELLOW} {text}{_ANSI_RESET}"


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


def _split_lines(content: str) -> list[str]:
    """Split on newlines, dropping a final empty line and any trailing carriage returns."""
    if not content:
        return []
    parts = content.split("\n")
    if content.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _extension(path: Path) -> str | None:
    suffix = path.suffix
    return suffix[1:].lower() if suffix else None


def _read_gitignore_lines(path: Path) -> Iterator[str]:
    """Yield decoded lines of ``path``, stopping at the first line that is not UTF-8."""
    data = path.read_bytes()
    chunks = data.split(b"\n")
    if data.endswith(b"\n"):
        chunks.pop()
    for chunk in chunks:
        if chunk.endswith(b"\r"):
            chunk = chunk[:-1]
        try:
            yield chunk.decode("utf-8")
        except UnicodeDecodeError:
            return


def load_ignored_dirs(gitignore_path: str | os.PathLike[str] | None) -> set[str]:
    """Return the built-in ignored directory names, merged with simple names from a .gitignore."""
    ignored = {
        line.strip()
        for line in _DEFAULT_IGNORE_CONFIG.splitlines()
        if line.strip() and not line.strip().startswith("#")
    }
    if gitignore_path is None:
        return ignored

    path = Path(gitignore_path)
    if path.is_file():
        print(f"Merging ignore rules from {path}")
        try:
            lines = list(_read_gitignore_lines(path))
        except OSError:
            _warn(f"Warning: Could not read .gitignore file at {path}")
            return ignored
        for line in lines:
            entry = line.split("#", 1)[0].strip()
            if not entry or any(ch in entry for ch in "*?[!\\"):
                continue
            name = entry[:-1] if entry.endswith("/") else entry
            if name:
                ignored.add(name)
    elif ".git" in path.parts:
        _warn(f"Warning: .gitignore path specified but not found or not a file: {path}")
    return ignored


class Cli:
    """Applies the configured path-comment rules to files and directories."""

    def __init__(
        self,
        args: Args,
        base_dir: str | os.PathLike[str],
        gitignore_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.args = args
        self.base_dir = Path(base_dir)
        self.extension_styles = self._load_extension_styles(args)
        self.ignored_dirs = load_ignored_dirs(gitignore_path)
        self._processed = 0
        self._skipped = 0

    @staticmethod
    def _load_extension_styles(args: Args) -> dict[str, Style]:
        if args.config_file is not None:
            try:
                content = Path(args.config_file).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                _warn(f"Error reading config file {args.config_file}: {exc}")
                print("Using default configuration")
                styles = default_config()
            else:
                print(f"Loading config from {args.config_file}")
                styles = parse_config(content)
        else:
            styles = default_config()

        if args.extensions is None:
            return styles

        filtered: dict[str, Style] = {}
        for ext in (part.strip().lower() for part in args.extensions.split(",")):
            if ext in styles:
                filtered[ext] = styles[ext]
            else:
                _warn(
                    f"Warning: Extension '.{ext}' specified but no configuration found, "
                    "defaulting to '//' style."
                )
                filtered[ext] = Style.SLASH
        return filtered

    def should_process_file(self, path: str | os.PathLike[str]) -> bool:
        """Whether the file's extension has a configured comment style."""
        ext = _extension(Path(path))
        return ext is not None and ext in self.extension_styles

    def determine_comment_style(self, path: str | os.PathLike[str]) -> Style | None:
        """The style forced on the command line, else the one configured for the extension."""
        if self.args.comment_style is not None:
            return self.args.comment_style
        ext = _extension(Path(path))
        return None if ext is None else self.extension_styles.get(ext)

    def should_skip_directory(self, path: str | os.PathLike[str]) -> bool:
        """Whether any named component of ``path`` is an ignored directory."""
        if self.args.force:
            return False
        path = Path(path)
        parts = path.parts[1:] if path.anchor else path.parts
        return any(part != ".." and part in self.ignored_dirs for part in parts)

    def _relative_path(self, path: Path) -> str:
        try:
            rel = path.relative_to(self.base_dir)
        except ValueError:
            rel = path
        text = str(rel).replace("\\", "/")
        while text.startswith("./"):
            text = text[2:]
        return text

    def process_file(self, path: str | os.PathLike[str]) -> None:
        """Add, replace or remove the path comment of one file.

        Raises OSError when the file cannot be read or written.
        """
        path = Path(path)
        if not self.should_process_file(path):
            return
        style = self.determine_comment_style(path)
        if style is None:
            _warn(f"Internal Error: Could not determine comment style for {path}. Skipping.")
            self._skipped += 1
            return
        start, end = style.delimiters()
        processed = str(path)

        try:
            content = path.read_bytes().decode("utf-8")
        except UnicodeDecodeError:
            print(f"{processed} {_no_change('Skipped non-UTF8 file')}")
            self._skipped += 1
            return

        first_line = f"{start}{self._relative_path(path)}{end}"
        lines = _split_lines(content)
        keep, clean = self.args.keep, self.args.clean

        already_had = bool(lines) and lines[0].strip() == first_line.strip()
        if already_had and (keep or not clean):
            print(f"{processed} {_no_change(first_line)}")
            self._skipped += 1
            return

        pattern = path_comment_regex(style)
        to_strip: set[int] = set()
        if not keep:
            to_strip = {
                number
                for number, line in enumerate(lines)
                if not (number == 0 and already_had) and pattern.match(line.strip())
            }

        self._report(processed, first_line, lines, sorted(to_strip), already_had)

        final_lines = [] if clean else [first_line]
        for number, line in enumerate(lines):
            if number == 0 and already_had:
                continue
            if number not in to_strip:
                final_lines.append(line)

        new_content = "\n".join(final_lines)
        if content.endswith("\n") or not content:
            if not new_content.endswith("\n"):
                new_content += "\n"
        elif new_content.endswith("\n"):
            new_content = new_content[:-1]

        if new_content == content:
            if already_had:
                print(f"{processed} {_no_change(first_line)}")
            self._skipped += 1
            return

        if self.args.dry_run:
            self._processed += 1
            return
        try:
            path.write_bytes(new_content.encode("utf-8"))
        except OSError as exc:
            _warn(f"Error writing file {path}: {exc}")
            self._skipped += 1
            raise
        self._processed += 1

    def _report(
        self,
        processed: str,
        first_line: str,
        lines: list[str],
        stripped: list[int],
        already_had: bool,
    ) -> None:
        clean = self.args.clean
        if not stripped:
            if already_had:
                shown = _removed(first_line) if clean else _no_change(first_line)
            elif clean:
                shown = _no_change("(no change)")
            else:
                shown = _added(first_line)
            print(f"{processed} {shown}")
            return

        print(f"{processed} ")
        if already_had:
            print(_removed(first_line) if clean else _no_change(first_line))
        for number in stripped:
            print(_removed(lines[number]))
        if not already_had and not clean:
            print(_added(first_line))
        print()

    def stats(self) -> tuple[int, int]:
        """Return ``(processed, skipped)`` file counts."""
        return self._processed, self._skipped

    def print_extension_styles(self) -> None:
        """Print each configured extension with its comment delimiters."""
        if not self.extension_styles:
            print("No file extensions configured.")
            return
        print("File extensions that will be processed:")
        for ext, style in sorted(self.extension_styles.items()):
            start, end = style.delimiters()
            print(f"  .{ext}: {start}{end}")
        print()

    def _walk(self) -> Iterator[Path]:
        """Yield regular files under the target directory, honouring skip rules."""
        root = Path(self.args.dir)
        if root.is_file():
            yield root
            return
        max_depth = 1 if self.args.no_recursive else None
        stack = [(root, 0)]
        while stack:
            directory, depth = stack.pop()
            if max_depth is not None and depth >= max_depth:
                continue
            try:
                with os.scandir(directory) as it:
                    entries = sorted(it, key=lambda entry: entry.name)
            except OSError as exc:
                _warn(f"Error walking directory: {exc}")
                continue
            subdirs: list[Path] = []
            for entry in entries:
                if entry.name.startswith("."):
                    continue
                path = Path(entry.path)
                try:
                    if entry.is_dir(follow_symlinks=False):
                        if not self.should_skip_directory(path):
                            subdirs.append(path)
                    elif entry.is_file(follow_symlinks=False):
                        yield path
                except OSError as exc:
                    _warn(f"Error walking directory: {exc}")
            stack.extend((sub, depth + 1) for sub in reversed(subdirs))

    def run(self) -> None:
        """Process the target directory and print a summary."""
        if self.args.print_extensions:
            self.print_extension_styles()
            return

        print(f"Processing directory: {self.args.dir}")
        print(f"Using base directory: {self.base_dir}")
        if self.args.dry_run:
            print("Dry run mode enabled. No files will be modified.")
        if self.args.force:
            print("Force mode enabled. Ignoring default directory skip list.")
        print()

        for path in self._walk():
            if not self.should_process_file(path):
                self._skipped += 1
                continue
            try:
                self.process_file(path)
            except OSError as exc:
                _warn(f"Error processing {path}: {exc}")

        processed, skipped = self.stats()
        print("\nSummary:")
        print(f"  Files processed: {processed}")
        print(f"  Files skipped: {skipped}")
        if self.args.dry_run:
            print("\nThis was a dry run. No files were modified.")