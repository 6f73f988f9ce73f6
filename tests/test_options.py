from __future__ import annotations

import pytest

from buildpath.command.main import build_parser
from buildpath.command.options import PathCategory, RequestOptions, normalize_options
from buildpath.errors import BuildPathError


def test_parser_records_flags_in_command_line_order():
    args = build_parser().parse_args(["--src", "--app", "a,b", "--base", "-s", ":", "--ebin"])
    assert args.raw_opts == [
        ("src", True),
        ("app", "a,b"),
        ("base", True),
        ("separator", ":"),
        ("ebin", True),
    ]


def test_parser_without_path_flags_yields_empty_raw_opts():
    args = build_parser().parse_args(["--as", "test", "-v"])
    assert args.raw_opts == []
    assert args.profiles == ["test"]
    assert args.verbose is True


def test_parser_keeps_repeated_flags():
    args = build_parser().parse_args(["--ebin", "--ebin", "--app", "a", "--app", "b"])
    assert args.raw_opts == [("ebin", True), ("ebin", True), ("app", "a"), ("app", "b")]


def test_no_category_defaults_to_ebin():
    opts = normalize_options([])
    assert opts == RequestOptions(categories=(PathCategory.EBIN,), separator=" ", app_filters=())


def test_only_app_and_separator_still_defaults_to_ebin():
    opts = normalize_options([("app", "x"), ("separator", ",")])
    assert opts.categories == (PathCategory.EBIN,)
    assert opts.separator == ","
    assert opts.app_filters == ("x",)


def test_app_and_separator_never_become_categories():
    opts = normalize_options([("app", "x"), ("lib", True), ("separator", ":"), ("priv", True)])
    assert opts.categories == (PathCategory.LIB, PathCategory.PRIV)


def test_duplicate_categories_are_kept():
    opts = normalize_options([("ebin", True), ("ebin", True)])
    assert opts.categories == (PathCategory.EBIN, PathCategory.EBIN)


def test_separator_is_passed_through_verbatim_first_wins():
    opts = normalize_options([("separator", " :: "), ("separator", ",")])
    assert opts.separator == " :: "


def test_unknown_path_option_is_rejected():
    with pytest.raises(BuildPathError, match="unknown path option: bogus"):
        normalize_options([("bogus", True)])


def test_help_uses_provider_short_description():
    help_text = build_parser().format_help()
    assert "Print paths to build dirs in current profile." in help_text
    assert "example: bpath --lib --separator :" in help_text
