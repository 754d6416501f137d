"""Store root utilities to constrain host file access.

Store paths are '/'-separated and absolute; they are mapped under a host root
directory and must never escape it.
"""

from __future__ import annotations

import os
from typing import Tuple


def normalize_root(root: str) -> str:
    s = os.path.expanduser(str(root or "").strip() or ".")
    return os.path.abspath(s)


def ensure_within_root(root: str, abs_path: str) -> Tuple[bool, str]:
    """Return (ok, normalized_abs) if path is within root.

    The second value is the normalized absolute path.
    """
    p = os.path.abspath(abs_path)
    try:
        common = os.path.commonpath([root, p])
    except ValueError:
        return False, p
    return common == root, p


def to_host_path(root: str, store_path: str) -> Tuple[bool, str]:
    """Map a store path onto the host filesystem below root."""
    relative = store_path.strip().lstrip("/")
    return ensure_within_root(root, os.path.join(root, relative))
