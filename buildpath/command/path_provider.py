"""
Brief: The `path` command: print build directories of the current profile.

Details: Resolves the apps in scope, expands each requested path category into
concrete paths under the profile base dir, keeps the ones that exist as
directories and writes them joined by the separator in a single write.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO, Tuple

from buildpath.command.options import PATH_OPTS, OptionSpec, PathCategory, RawOpts, RequestOptions, normalize_options
from buildpath.state.build_state import BuildState
from buildpath.state.names import normalize_app_name
from buildpath.util import log


@dataclass(frozen=True)
class Provider:
    example: str
    short_desc: str
    opts: Tuple[OptionSpec, ...]


PROVIDER = Provider(
    example="bpath --lib --separator :",
    short_desc="Print paths to build dirs in current profile.",
    opts=PATH_OPTS,
)

_SINGLE_DIRS = {
    PathCategory.BASE: "",
    PathCategory.BIN: "bin",
    PathCategory.LIB: "lib",
    PathCategory.REL: "rel",
}


def explicit_apps(app_filters: Sequence[str]) -> List[str]:
    # Tokens of later --app occurrences land ahead of earlier ones:
    # --app a,b --app c -> [c, a, b]. Empty tokens are dropped.
    apps: List[str] = []
    for value in app_filters:
        apps = [t for t in value.split(",") if t] + apps
    return apps


def project_deps(state: BuildState) -> List[str]:
    """Names of the deps declared under every active profile, deduplicated and sorted."""
    names = set()
    for profile in state.current_profiles():
        for name, _spec in state.deps_for_profile(profile):
            names.add(normalize_app_name(name))
    return sorted(names)


def resolve_apps(opts: RequestOptions, state: BuildState) -> List[str]:
    apps = explicit_apps(opts.app_filters)
    if apps:
        log.debug(f"Apps from --app: {', '.join(apps)}")
        return apps
    project = [normalize_app_name(a) for a in state.project_apps()]
    deps = project_deps(state)
    log.debug(f"Apps from project ({len(project)}) and deps ({len(deps)})")
    return project + deps


def expand_category(category: PathCategory, apps: Sequence[str], base: str) -> List[str]:
    if category in _SINGLE_DIRS:
        sub = _SINGLE_DIRS[category]
        return [f"{base}/{sub}" if sub else base]
    return [f"{base}/lib/{app}/{category.value}" for app in apps]


def expand_paths(categories: Sequence[PathCategory], apps: Sequence[str], state: BuildState) -> List[str]:
    base = state.base_dir()
    paths: List[str] = []
    for category in categories:
        paths.extend(expand_category(category, apps, base))
    return paths


def filter_existing(paths: Sequence[str], state: BuildState) -> List[str]:
    return [p for p in paths if state.is_dir(p)]


def print_paths_if_exist(paths: Sequence[str], separator: str, state: BuildState, out: Optional[TextIO] = None) -> str:
    real = filter_existing(paths, state)
    dropped = len(paths) - len(real)
    if dropped:
        log.debug(f"Skipped {dropped} path(s) that are not directories")
    text = separator.join(real)
    (out or sys.stdout).write(text)
    return text


def do(raw: RawOpts, state: BuildState, out: Optional[TextIO] = None) -> str:
    opts = normalize_options(raw)
    apps = resolve_apps(opts, state)
    paths = expand_paths(opts.categories, apps, state)
    return print_paths_if_exist(paths, opts.separator, state, out=out)
