"""
Brief: Error type raised by the path command and its state loader.

Details: Wraps an arbitrary reason value; format_error renders it as the text
shown to the user before the command exits non-zero.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import Any


def format_error(reason: Any) -> str:
    if isinstance(reason, BuildPathError):
        return format_error(reason.reason)
    if isinstance(reason, str):
        return reason
    return repr(reason)


class BuildPathError(Exception):
    def __init__(self, reason: Any) -> None:
        self.reason = reason
        super().__init__(format_error(reason))
