import pytest

from pathcomment.args import Args, build_parser
from pathcomment.comments import Style


def test_defaults():
    args = Args.parse(["some/dir"])
    assert args == Args(dir="some/dir")
    assert args.comment_style is None
    assert args.keep is False
    assert args.dry_run is False


def test_short_flags():
    args = Args.parse(["src", "-k", "-f", "-d", "-p", "-b", "base", "-e", "rs,py"])
    assert args.keep and args.force and args.dry_run and args.print_extensions
    assert args.base == "base"
    assert args.extensions == "rs,py"


def test_long_flags():
    args = Args.parse(
        [
            "src",
            "--clean",
            "--no-git",
            "--no-recursive",
            "--no-ignore-merge",
            "--config",
            "styles.cfg",
        ]
    )
    assert args.clean and args.no_git and args.no_recursive and args.no_ignore_merge
    assert args.config_file == "styles.cfg"


@pytest.mark.parametrize("style", list(Style))
def test_comment_style_round_trip(style):
    args = Args.parse(["src", "-s", style.value])
    assert args.comment_style is style


def test_long_comment_style():
    assert Args.parse(["src", "--comment-style", "hash"]).comment_style is Style.HASH


def test_missing_dir_exits():
    with pytest.raises(SystemExit) as info:
        Args.parse([])
    assert info.value.code == 2


def test_unknown_style_exits():
    with pytest.raises(SystemExit) as info:
        Args.parse(["src", "-s", "bogus"])
    assert info.value.code == 2


def test_parser_dest_names_match_fields():
    namespace = build_parser().parse_args(["x"])
    assert set(vars(namespace)) == set(Args.__dataclass_fields__)