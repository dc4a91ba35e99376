from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """
    Asks the user which text file to open or where to save one.
    Captions and file-type filters belong to the implementation.
    """

    def ask_open_path(self, parent: Any | None, start_dir: str | None) -> Path | None:
        """Return the chosen existing file, or None if cancelled."""
        ...

    def ask_save_path(self, parent: Any | None, suggested: str) -> Path | None:
        """Return the chosen destination (suggested path pre-filled), or None if cancelled."""
        ...
