from __future__ import annotations

import sys
from datetime import datetime
from colorama import Fore, Style, init as colorama_init


colorama_init()

# stdout carries the command result, so every log line goes to stderr.
_VERBOSE: bool = False


def set_verbose(v: bool) -> None:
    global _VERBOSE
    _VERBOSE = bool(v)


def _ts() -> str:
    return datetime.now().strftime("%H:%M:%S")


def debug(msg: str) -> None:
    if not _VERBOSE:
        return
    print(f"{Fore.MAGENTA}[{_ts()}] DBG {Style.RESET_ALL} {msg}", file=sys.stderr)


def warn(msg: str) -> None:
    print(f"{Fore.YELLOW}[{_ts()}] WARN{Style.RESET_ALL} {msg}", file=sys.stderr)


def error(msg: str) -> None:
    print(f"{Fore.RED}[{_ts()}] ERR {Style.RESET_ALL} {msg}", file=sys.stderr)
