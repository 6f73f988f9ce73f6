from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from buildpath.command.options import add_path_options
from buildpath.command.path_provider import PROVIDER, Provider, do
from buildpath.errors import BuildPathError, format_error
from buildpath.state.build_state import load_build_state
from buildpath.util import log
from buildpath.util.env import get_env_flag, get_env_list, get_env_str, load_env
from buildpath.util.paths import find_project_root


def build_parser(provider: Provider = PROVIDER) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bpath",
        description=provider.short_desc,
        epilog=f"example: {provider.example}",
    )
    add_path_options(ap, provider.opts)
    ap.add_argument("--as", dest="profiles", action="append", default=[], metavar="PROFILES",
                    help="Comma separated profiles to activate on top of `default'.")
    ap.add_argument("--base-dir", default=None, help="Override the build output root (default: _build).")
    ap.add_argument("--project-root", default=None, help="Directory to start the project root search from.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log resolution details to stderr.")
    return ap


def _requested_profiles(args: argparse.Namespace) -> List[str]:
    profiles = get_env_list("BUILDPATH_PROFILE")
    for value in args.profiles:
        profiles.extend(p for p in value.split(",") if p.strip())
    return profiles


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        root = find_project_root(Path(args.project_root) if args.project_root else None)
        load_env(root / ".env")
        log.set_verbose(args.verbose or get_env_flag("BUILDPATH_VERBOSE", "DEBUG"))

        base_dir = args.base_dir or get_env_str("BUILDPATH_BASE_DIR")
        state = load_build_state(root, _requested_profiles(args), base_dir_override=base_dir)
        do(args.raw_opts, state)
    except (BuildPathError, OSError) as e:
        log.error(format_error(e))
        return 1
    return 0


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))
