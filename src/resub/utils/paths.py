# src/resub/utils/paths.py
"""
paths – Small, centralized path helpers for resub.

Provides:
  • is_hidden_name(str)          – leading-dot detection for one name
  • file_identity(path)          – (st_dev, st_ino) key of the target file
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

from resub.constants import HIDDEN_PREFIX


def is_hidden_name(name: str) -> bool:
    """Return True if a single entry name is hidden (leading dot)."""
    return name.startswith(HIDDEN_PREFIX)


def file_identity(path: str | os.PathLike[str]) -> Optional[Tuple[int, int]]:
    """Return the (device, inode) pair of the file *path* points to.

    Symlinks are followed. None is returned when the target cannot be
    stat'ed (vanished entry, broken symlink, permission denied).
    """
    try:
        st = os.stat(path)
    except OSError:
        return None
    return (st.st_dev, st.st_ino)
