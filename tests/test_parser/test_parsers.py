from argparse import ArgumentParser

import pytest

from optgrid.parser import get_arg_parsers, get_root_parser, get_subparsers


def test_root_parser_defaults():
    args = get_root_parser().parse_args([])
    assert args.verbose is False
    assert args.table is None
    assert args.width is None
    assert args.log_mode is None


def test_root_parser_options():
    args = get_root_parser().parse_args(
        ["-v", "--table", "opts.toml", "--width", "60", "--log-mode", "json"]
    )
    assert args.verbose is True
    assert args.table == "opts.toml"
    assert args.width == 60
    assert args.log_mode == "json"


def test_invalid_log_mode():
    with pytest.raises(SystemExit):
        get_root_parser().parse_args(["--log-mode", "xml"])


def test_get_subparsers_type_check():
    with pytest.raises(TypeError):
        get_subparsers("not a parser")


def test_get_arg_parsers():
    parsers = get_arg_parsers()
    assert isinstance(parsers.root, ArgumentParser)
    assert parsers.root.prog == "optgrid"
    for name in ("help", "classify", "shell", "init", "version"):
        assert isinstance(getattr(parsers, name), ArgumentParser)


def test_help_command():
    parsers = get_arg_parsers()
    assert parsers.parse_args(["help"]).option is None
    assert parsers.parse_args(["help", "add"]).option == "add"


def test_init_command_default():
    parsers = get_arg_parsers()
    args = parsers.parse_args(["init"])
    assert args.command == "init"
    assert args.name == "."


def test_classify_command_keeps_flags():
    parsers = get_arg_parsers()
    args, extras = parsers.root.parse_known_args(["classify", "file", "-v", "--from", "x"])
    assert args.command == "classify"
    assert sorted([*extras, *args.args]) == sorted(["file", "-v", "--from", "x"])
