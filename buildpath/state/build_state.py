"""
Brief: Read-only snapshot of the build state the path command reads.

Details: Exposes the base dir of the active profiles, the project apps, the
active profile list and the declared deps per profile. load_build_state builds
it from buildpath.json plus profile/base-dir overrides.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from buildpath.state.app_discovery import discover_project_apps
from buildpath.state.names import AppNameLike
from buildpath.state.project_config import load_project_config
from buildpath.util import log
from buildpath.util.paths import DEFAULT_PROFILE, build_root, config_path, profile_base_dir


Dep = Tuple[AppNameLike, Any]


@dataclass(frozen=True)
class BuildState:
    base: str
    apps: Tuple[str, ...] = ()
    profiles: Tuple[str, ...] = (DEFAULT_PROFILE,)
    deps: Mapping[str, Tuple[Dep, ...]] = field(default_factory=dict)
    is_dir: Callable[[str], bool] = field(default=os.path.isdir, repr=False, compare=False)

    def base_dir(self) -> str:
        return self.base

    def project_apps(self) -> List[str]:
        return list(self.apps)

    def current_profiles(self) -> List[str]:
        return list(self.profiles)

    def deps_for_profile(self, profile: str) -> List[Dep]:
        return list(self.deps.get(profile, ()))


def current_profiles_for(requested: Iterable[str]) -> List[str]:
    """``default`` first, then each requested profile once, in request order."""
    active = [DEFAULT_PROFILE]
    for p in requested:
        p = p.strip()
        if p and p not in active:
            active.append(p)
    return active


def load_build_state(
    root: Path,
    profiles: Iterable[str] = (),
    base_dir_override: Optional[str] = None,
    is_dir: Callable[[str], bool] = os.path.isdir,
) -> BuildState:
    cfg = load_project_config(config_path(root))
    active = current_profiles_for(profiles)
    base_dir = base_dir_override or cfg.base_dir
    base = profile_base_dir(root, base_dir, active)

    if cfg.apps is not None:
        apps = list(cfg.apps)
    else:
        apps = discover_project_apps(root, cfg.project_app_dirs, exclude=build_root(root, base_dir))
        if not apps:
            log.warn(f"No project apps found under {root}")

    deps = {p: tuple(d.as_pair() for d in cfg.deps_for(p)) for p in active}

    log.debug(f"Project root: {root}")
    log.debug(f"Profiles: {'+'.join(active)} -> {base}")
    log.debug(f"Project apps: {', '.join(apps) or '(none)'}")
    return BuildState(
        base=str(base),
        apps=tuple(apps),
        profiles=tuple(active),
        deps=deps,
        is_dir=is_dir,
    )
