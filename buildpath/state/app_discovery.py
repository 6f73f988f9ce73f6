"""
Brief: Discover project applications on disk.

Details: Scans the configured project app directories for src/<name>.app.src
or ebin/<name>.app descriptors, skipping anything inside the build output root.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional


def _is_under(p: Path, root: Path) -> bool:
    try:
        p.resolve().relative_to(root.resolve())
        return True
    except ValueError:
        return False


def _candidate_dirs(root: Path, pattern: str) -> List[Path]:
    if pattern in ("", "."):
        return [root]
    return sorted(p for p in root.glob(pattern) if p.is_dir())


def _app_names_in(d: Path) -> List[str]:
    names = [f.name[: -len(".app.src")] for f in sorted((d / "src").glob("*.app.src"))]
    if not names:
        names = [f.name[: -len(".app")] for f in sorted((d / "ebin").glob("*.app"))]
    return names


def discover_project_apps(root: Path, patterns: Iterable[str], exclude: Optional[Path] = None) -> List[str]:
    found: List[str] = []
    for pattern in patterns:
        for d in _candidate_dirs(root, pattern):
            if exclude is not None and _is_under(d, exclude):
                continue
            for name in _app_names_in(d):
                if name not in found:
                    found.append(name)
    return found
