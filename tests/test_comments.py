import pytest

from pathcomment.comments import (
    Style,
    default_config,
    parse_config,
    path_comment_regex,
)


def test_default_config_styles():
    config = default_config()
    assert config["rs"].delimiters() == ("// ", "")
    assert config["py"].delimiters() == ("# ", "")
    assert config["html"].delimiters() == ("<!-- ", " -->")
    assert config["js"] is Style.SLASH
    assert config["tsx"] is Style.SLASH
    assert "xyz" not in config


@pytest.mark.parametrize(
    "marker, style",
    [
        ("//", Style.SLASH),
        ("/* */", Style.SLASH_STAR),
        ("#", Style.HASH),
        (";", Style.SEMI),
        ("<!-- -->", Style.XML),
        ("--", Style.DOUBLE_DASH),
        ("%", Style.PERCENT),
        ("  #  ", Style.HASH),
    ],
)
def test_from_marker(marker, style):
    assert Style.from_marker(marker) is style


def test_from_marker_unknown():
    with pytest.raises(ValueError):
        Style.from_marker("!!")


@pytest.mark.parametrize(
    "style, expected",
    [
        (Style.SLASH, ("// ", "")),
        (Style.SLASH_STAR, ("/* ", " */")),
        (Style.HASH, ("# ", "")),
        (Style.SEMI, ("; ", "")),
        (Style.XML, ("<!-- ", " -->")),
        (Style.DOUBLE_DASH, ("-- ", "")),
        (Style.PERCENT, ("% ", "")),
    ],
)
def test_delimiters(style, expected):
    assert style.delimiters() == expected


@pytest.mark.parametrize(
    "line",
    [
        "// old/path/test.js",
        "// src/App.tsx",
        "// /opt/App.tsx",
        "// path\\to\\test4.js",
        "// test1.js",
        "// src/test2.js",
    ],
)
def test_slash_regex_matches_path_comments(line):
    match = path_comment_regex(Style.SLASH).match(line)
    assert match is not None
    assert match.group(0) == line


@pytest.mark.parametrize(
    "line",
    [
        "// test3.js - My note",
        "// Another path comment: ./component.tsx",
        "import React from 'react';",
        "content();",
        "# src/app.py",
    ],
)
def test_slash_regex_rejects_other_lines(line):
    assert path_comment_regex(Style.SLASH).match(line) is None


def test_regex_with_end_delimiter():
    xml = path_comment_regex(Style.XML)
    assert xml.match("<!-- docs/index.html -->") is not None
    assert xml.match("<!-- docs/index.html") is None
    star = path_comment_regex(Style.SLASH_STAR)
    assert star.match("/* styles/main.css */") is not None


def test_regex_cached_per_style():
    first = path_comment_regex(Style.HASH)
    second = path_comment_regex(Style.HASH)
    assert first is second
    match = first.match("# code/lib/util.py")
    assert match is not None
    assert match.group(0) == "# code/lib/util.py"
    assert path_comment_regex(Style.SLASH).match("# code/lib/util.py") is None


def test_parse_config_normalises_extensions():
    config = parse_config(".RS //\n\n# comment line\ncss /* */\n")
    assert config == {"rs": Style.SLASH, "css": Style.SLASH_STAR}


def test_parse_config_skips_bad_lines(capsys):
    config = parse_config("py #\nfoo\nbar ???\n")
    assert config == {"py": Style.HASH}
    err = capsys.readouterr().err
    assert "Missing comment style for extension '.foo'" in err
    assert "Unknown comment style '???' for extension '.bar'" in err


def test_parse_config_empty():
    assert parse_config("") == {}