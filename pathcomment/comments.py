"""Comment styles, path-comment detection and extension configuration."""

from __future__ import annotations

import enum
import re
import sys
from functools import lru_cache


class Style(enum.Enum):
    """A line comment style, named as on the command line."""

    SLASH = "slash"
    SLASH_STAR = "slash-star"
    HASH = "hash"
    SEMI = "semi"
    XML = "xml"
    DOUBLE_DASH = "double-dash"
    PERCENT = "percent"

    @classmethod
    def from_marker(cls, text: str) -> Style:
        """Return the style written as ``text`` in a config file (e.g. ``"/* */"``)."""
        marker = text.strip()
        for style, known in _MARKERS.items():
            if known == marker:
                return style
        raise ValueError(f"unknown comment style {text!r}")

    def delimiters(self) -> tuple[str, str]:
        """Return the text placed before and after a comment's body."""
        return _DELIMITERS[self]


_MARKERS = {
    Style.SLASH: "//",
    Style.SLASH_STAR: "/* */",
    Style.HASH: "#",
    Style.SEMI: ";",
    Style.XML: "<!-- -->",
    Style.DOUBLE_DASH: "--",
    Style.PERCENT: "%",
}

_DELIMITERS = {
    Style.SLASH: ("// ", ""),
    Style.SLASH_STAR: ("/* ", " */"),
    Style.HASH: ("# ", ""),
    Style.SEMI: ("; ", ""),
    Style.XML: ("<!-- ", " -->"),
    Style.DOUBLE_DASH: ("-- ", ""),
    Style.PERCENT: ("% ", ""),
}

_PATH_BODY = (
    r"((?:/|\\|[A-Za-z]:)?(?:[\w\-\.]+(?:/|\\))+[\w\-\.]+(?:\.\w+)?"
    r"|[\w\-\.]+\.\w+)"
)


@lru_cache(maxsize=None)
def path_comment_regex(style: Style) -> re.Pattern[str]:
    """Return a pattern matching a whole line that is only a path comment in ``style``."""
    start, end = style.delimiters()
    pattern = rf"^({re.escape(start)})\s*{_PATH_BODY}\s*({re.escape(end)})\Z"
    return re.compile(pattern)


def parse_config(content: str) -> dict[str, Style]:
    """Parse ``extension style`` lines into a mapping of extension to style.

    Blank lines and lines starting with ``#`` are ignored. Malformed lines are
    reported on stderr and skipped.
    """
    styles: dict[str, Style] = {}
    for raw in content.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        if len(parts) == 1:
            print(
                f"Warning: Missing comment style for extension '.{parts[0]}' "
                "in config file, skipping",
                file=sys.stderr,
            )
            continue
        extension = parts[0].lstrip(".").lower()
        marker = " ".join(parts[1:])
        try:
            styles[extension] = Style.from_marker(marker)
        except ValueError:
            print(
                f"Warning: Unknown comment style '{marker}' for extension "
                f"'.{extension}' in config file, skipping",
                file=sys.stderr,
            )
    return styles


_DEFAULT_CONFIG = """\
# extension   comment style
rs      //
c       //
h       //
cc      //
cpp     //
hpp     //
cs      //
java    //
kt      //
scala   //
swift   //
go      //
dart    //
js      //
jsx     //
mjs     //
cjs     //
ts      //
tsx     //
php     //
scss    //
less    //
css     /* */
py      #
rb      #
sh      #
bash    #
zsh     #
fish    #
pl      #
r       #
yaml    #
yml     #
toml    #
ps1     #
nim     #
jl      #
ex      #
exs     #
html    <!-- -->
htm     <!-- -->
xml     <!-- -->
svg     <!-- -->
vue     <!-- -->
md      <!-- -->
lua     --
sql     --
hs      --
elm     --
lisp    ;
clj     ;
el      ;
scm     ;
asm     ;
ini     ;
tex     %
erl     %
"""


def default_config() -> dict[str, Style]:
    """Return the built-in extension to comment style mapping."""
    return parse_config(_DEFAULT_CONFIG)