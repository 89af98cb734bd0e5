"""Locations of the program and of saved screenshots."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


def exe_dir() -> str:
    """Return the absolute directory holding the running program."""
    if getattr(sys, "frozen", False):
        program = sys.executable
    else:
        program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not program:
        return os.getcwd()
    return os.path.dirname(os.path.abspath(program))


def resolve_save_path(configured: PathLike, base: Optional[PathLike] = None) -> str:
    """Resolve a configured save directory.

    An absolute path is returned unchanged; a relative one is taken relative
    to ``base``, or to the program's directory if ``base`` is omitted.
    """
    path = os.fspath(configured)
    if os.path.isabs(path):
        return path
    root = os.fspath(base) if base is not None else exe_dir()
    return os.path.join(root, path)


def ensure_directory(path: PathLike) -> bool:
    """Create ``path`` and its parents if needed; return whether it exists afterwards."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass
    return os.path.exists(path)


def make_timestamped_png_name(when: Optional[datetime] = None) -> str:
    """Return a ``yyyyMMdd_HHmmss.png`` file name for ``when`` (local now by default)."""
    moment = when if when is not None else datetime.now()
    return moment.strftime("%Y%m%d_%H%M%S") + ".png"


def is_absolute(path: PathLike) -> bool:
    """Return whether ``path`` is absolute."""
    return os.path.isabs(path)


def join(base: PathLike, sub: PathLike) -> str:
    """Join ``sub`` onto ``base``; an absolute ``sub`` replaces ``base``."""
    return os.path.join(os.fspath(base), os.fspath(sub))