"""Shortening of paths for display."""

from __future__ import annotations

import os
from pathlib import PurePath


def _trim_start_matches(text: str, prefix: str) -> str:
    if not prefix:
        return text
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


def trim_path(start: str, path: str | os.PathLike[str]) -> str:
    """Strip ``start`` (repeatedly) from the front of ``path``.

    When anything was stripped, leading path separators are removed too.
    """
    path_str = os.fspath(path) if isinstance(path, (str, PurePath)) else os.fsdecode(path)
    trimmed = _trim_start_matches(path_str, start)
    if len(trimmed) < len(path_str):
        return trimmed.lstrip(os.sep)
    return trimmed