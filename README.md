# pathcomment

`pathcomment` walks a directory and puts each source file's path, relative to
a base directory, into a comment on the file's first line:

```js
// src/components/App.tsx
import React from 'react';
```

The comment syntax is chosen from the file's extension (`//`, `/* */`, `#`,
`;`, `<!-- -->`, `--` or `%`). Unless `--keep` is given, other lines that are
nothing but a path comment are removed, so running the tool again after moving
files brings every header up to date. A file whose first line already holds the
right comment is left alone.

## Installation

```
pip install .
```

## Usage

```
pathcomment DIR [options]
```

By default the base directory for relative paths is the nearest directory at
or above `DIR` that contains a `.git` directory. If there is none, the current
working directory is used. When a `.git` root is found, plain names listed in
its `.gitignore` (lines without `*`, `?`, `[`, `!` or `\`; a trailing `/` is
dropped and text after `#` is ignored) are added to the directories that are
skipped.

Directories such as `node_modules`, `target`, `build`, `dist`, `venv` and
`__pycache__` are skipped unless `--force` is given. Files and directories
whose names start with `.` are never visited. Files that are not valid UTF-8
are skipped.

If `DIR` or the base directory cannot be accessed, the command prints an error
and exits with status 1.

### Options

| Option | Meaning |
| --- | --- |
| `-b, --base DIR` | Base directory for relative paths |
| `-k, --keep` | Keep other path comments already in the file |
| `--clean` | Do not add a path comment; remove the existing ones |
| `-f, --force` | Also process directories that are normally skipped |
| `--no-git` | Do not search for a `.git` directory; use the current directory as base |
| `--no-recursive` | Only process files directly inside `DIR` |
| `--no-ignore-merge` | Do not merge names from the repository's `.gitignore` |
| `-e, --extensions LIST` | Only process these extensions, e.g. `py,rs,toml`; an extension with no configured style uses `//` |
| `--config FILE` | Read extension-to-style rules from `FILE` (the built-in rules are used if it cannot be read) |
| `-d, --dry-run` | Show what would change without writing anything |
| `-s, --comment-style STYLE` | Use one style for every file: `slash`, `slash-star`, `hash`, `semi`, `xml`, `double-dash`, `percent` |
| `-p, --print-extensions` | List the configured extensions and their styles, then exit |
| `-V, --version` | Print the version and exit |

### Examples

Preview the changes for a project:

```
pathcomment . --dry-run
```

Only touch Python and TOML files:

```
pathcomment src -e py,toml
```

Strip all path comments again:

```
pathcomment . --clean
```

List the extensions that would be processed:

```
pathcomment . --print-extensions
```

### Configuration file

A configuration file has one extension per line followed by its comment
markers. Blank lines and lines starting with `#` are ignored, a leading `.` on
the extension is optional, and extensions are matched case-insensitively.
Lines with a missing or unknown style are reported and skipped:

```
# extension  style
.py          #
.rs          //
.css         /* */
.html        <!-- -->
.sql         --
```

## Output

Each file is listed with the change made to it: added headers in green,
removed path comments in red and unchanged headers in yellow. A summary of
processed and skipped files is printed at the end.

## Using it from Python

```python
from pathcomment.args import Args
from pathcomment.cli import Cli
from pathcomment.main import resolve_paths

args = Args(dir="src", dry_run=True)
base_dir, gitignore_path = resolve_paths(args)
cli = Cli(args, base_dir, gitignore_path)
cli.run()
processed, skipped = cli.stats()
```

`Cli.process_file(path)` handles a single file and raises `OSError` if it
cannot be read or written. `pathcomment.comments` holds the `Style` enum,
`parse_config`, `default_config` and `path_comment_regex`.

## Limitations

`.gitignore` files are not interpreted as full pattern files: only plain
directory names are taken from them, and only from the `.gitignore` in the
detected repository root. Files are processed one after another.