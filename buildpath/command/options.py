"""
Brief: Option table, ordered argparse parsing and option normalization for the path command.

Details: Path flags are recorded as an ordered (key, value) list so category
order and repeats survive parsing; normalize_options turns that list into a
RequestOptions with the ebin default and the separator resolved.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from buildpath.errors import BuildPathError


class PathCategory(str, Enum):
    BASE = "base"
    BIN = "bin"
    EBIN = "ebin"
    LIB = "lib"
    PRIV = "priv"
    SRC = "src"
    REL = "rel"


RawOpts = List[Tuple[str, Any]]

APP_KEY = "app"
SEPARATOR_KEY = "separator"
DEFAULT_SEPARATOR = " "


@dataclass(frozen=True)
class OptionSpec:
    key: str
    short: Optional[str]
    long: str
    kind: str  # "string" | "boolean"
    help: str


PATH_OPTS: Tuple[OptionSpec, ...] = (
    OptionSpec(APP_KEY, None, "app", "string", "Comma separated list of applications to return paths for."),
    OptionSpec("base", None, "base", "boolean", "Return the `base' path of the current profile."),
    OptionSpec("bin", None, "bin", "boolean", "Return the `bin' path of the current profile."),
    OptionSpec("ebin", None, "ebin", "boolean", "Return all `ebin' paths of the current profile's applications."),
    OptionSpec("lib", None, "lib", "boolean", "Return the `lib' path of the current profile."),
    OptionSpec("priv", None, "priv", "boolean", "Return the `priv' path of the current profile's applications."),
    OptionSpec(SEPARATOR_KEY, "s", "separator", "string",
               "In case of multiple return paths, the separator character to use to join them."),
    OptionSpec("src", None, "src", "boolean", "Return the `src' path of the current profile's applications."),
    OptionSpec("rel", None, "rel", "boolean", "Return the `rel' path of the current profile."),
)


@dataclass(frozen=True)
class RequestOptions:
    categories: Tuple[PathCategory, ...]
    separator: str = DEFAULT_SEPARATOR
    app_filters: Tuple[str, ...] = ()


class _RecordOption(argparse.Action):
    """Append ``(dest, value)`` to ``namespace.raw_opts`` in command-line order."""

    def __call__(self, parser, namespace, values, option_string=None):  # noqa: ANN001
        recorded = list(getattr(namespace, "raw_opts", None) or [])
        recorded.append((self.dest, True if self.nargs == 0 else values))
        setattr(namespace, "raw_opts", recorded)


def add_path_options(parser: argparse.ArgumentParser, opts: Sequence[OptionSpec] = PATH_OPTS) -> None:
    for o in opts:
        flags = [f"--{o.long}"] + ([f"-{o.short}"] if o.short else [])
        if o.kind == "boolean":
            parser.add_argument(*flags, dest=o.key, action=_RecordOption, nargs=0,
                                default=argparse.SUPPRESS, help=o.help)
        else:
            parser.add_argument(*flags, dest=o.key, action=_RecordOption, metavar=o.key.upper(),
                                default=argparse.SUPPRESS, help=o.help)
    parser.set_defaults(raw_opts=[])


def normalize_options(raw: RawOpts) -> RequestOptions:
    categories: List[PathCategory] = []
    separator: Optional[str] = None
    app_filters: List[str] = []
    for key, value in raw:
        if key == APP_KEY:
            app_filters.append(str(value))
        elif key == SEPARATOR_KEY:
            # first occurrence wins
            if separator is None:
                separator = str(value)
        elif value is True:
            try:
                categories.append(PathCategory(key))
            except ValueError:
                raise BuildPathError(f"unknown path option: {key}") from None
    if not categories:
        categories = [PathCategory.EBIN]
    return RequestOptions(
        categories=tuple(categories),
        separator=DEFAULT_SEPARATOR if separator is None else separator,
        app_filters=tuple(app_filters),
    )
