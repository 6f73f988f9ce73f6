"""
Brief: Project path utilities (project_root/config_path/profile_dir/base_dir).

Details: Locates the project root by walking up to the nearest buildpath.json
and derives the per-profile build directory from the active profile list.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


CONFIG_FILENAME = "buildpath.json"
DEFAULT_BASE_DIR = "_build"
DEFAULT_PROFILE = "default"


def find_project_root(start: Optional[Path] = None) -> Path:
    """Return the nearest directory at or above ``start`` holding buildpath.json.

    Falls back to ``start`` itself (or the cwd) when no config file exists.
    """
    here = Path(start if start is not None else Path.cwd()).resolve()
    for cand in (here, *here.parents):
        if (cand / CONFIG_FILENAME).is_file():
            return cand
    return here


def config_path(root: Path) -> Path:
    return root / CONFIG_FILENAME


def profile_dir(profiles: Iterable[str]) -> str:
    # [default] -> "default"; [default, test, prod] -> "test+prod"
    named = [p for p in profiles if p != DEFAULT_PROFILE]
    if not named:
        return DEFAULT_PROFILE
    return "+".join(named)


def build_root(root: Path, base_dir: str | Path) -> Path:
    p = Path(base_dir).expanduser()
    if not p.is_absolute():
        p = root / p
    return p


def profile_base_dir(root: Path, base_dir: str | Path, profiles: Iterable[str]) -> Path:
    return build_root(root, base_dir) / profile_dir(profiles)
