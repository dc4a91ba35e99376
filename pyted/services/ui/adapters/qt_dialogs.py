from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QFileDialog

from pyted.services.ui.ports.dialogs import IFileDialogService
from pyted.utils.constants import DEFAULT_EXTENSION, FILE_FILTER, TEXT_FILTER


def with_default_extension(path: Path, selected_filter: str) -> Path:
    """Append ".txt" when the text filter was active and the user typed no suffix."""
    if selected_filter == TEXT_FILTER and not path.suffix:
        return path.with_suffix(DEFAULT_EXTENSION)
    return path


class QtFileDialogService(IFileDialogService):
    """Native open/save dialogs filtered to text files."""

    def ask_open_path(self, parent: Any | None, start_dir: str | None) -> Path | None:
        path_str, _ = QFileDialog.getOpenFileName(parent, "Open", start_dir or "", FILE_FILTER)
        return Path(path_str) if path_str else None

    def ask_save_path(self, parent: Any | None, suggested: str) -> Path | None:
        path_str, selected = QFileDialog.getSaveFileName(
            parent, "Save As", suggested, FILE_FILTER, TEXT_FILTER
        )
        if not path_str:
            return None
        return with_default_extension(Path(path_str), selected)
