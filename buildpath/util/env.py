from __future__ import annotations

import os
from pathlib import Path
from dotenv import load_dotenv

from buildpath.errors import BuildPathError


_TRUTHY = ("1", "true", "on", "yes")


def load_env(dotenv_path: str | Path | None = None) -> None:
    try:
        load_dotenv(dotenv_path if dotenv_path else None, override=False)
    except (OSError, UnicodeDecodeError) as e:
        raise BuildPathError(f"cannot read {dotenv_path}: {e}") from e


def get_env_str(key: str, default: str | None = None) -> str | None:
    return os.environ.get(key, default)


def get_env_flag(*keys: str) -> bool:
    """True when any of ``keys`` is set to a truthy value (1/true/on/yes)."""
    for key in keys:
        if (os.environ.get(key, "") or "").strip().lower() in _TRUTHY:
            return True
    return False


def get_env_list(key: str) -> list[str]:
    """Comma-separated env value as a list, blanks dropped."""
    raw = os.environ.get(key, "") or ""
    return [part.strip() for part in raw.split(",") if part.strip()]
