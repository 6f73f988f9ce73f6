"""
Brief: Normalize dependency and application names to plain strings.

Details: Dependency declarations may name an app as a str, as raw bytes, or as
a symbolic Atom; all three collapse to the same str form.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from buildpath.errors import BuildPathError


@dataclass(frozen=True)
class Atom:
    """Symbolic identifier, e.g. a dependency name declared as a bare symbol."""

    name: str

    def __str__(self) -> str:
        return self.name


AppNameLike = Union[str, bytes, Atom]


def normalize_app_name(name: AppNameLike) -> str:
    if isinstance(name, Atom):
        return name.name
    if isinstance(name, bytes):
        return name.decode("utf-8")
    if isinstance(name, str):
        return name
    raise BuildPathError(f"unsupported app name: {name!r}")
