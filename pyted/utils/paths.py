from __future__ import annotations

import os
from pathlib import Path


def full_path(path: str | Path) -> Path:
    """Absolute, normalized form of `path` ("~" expanded, ".." collapsed, symlinks kept)."""
    return Path(os.path.abspath(os.path.expanduser(os.fspath(path))))


def same_path(a: str | Path, b: str | Path) -> bool:
    """Case-insensitive path equality, as used for duplicate detection."""
    return os.fspath(a).casefold() == os.fspath(b).casefold()
