from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from pyted.domain.errors import DocumentIOError
from pyted.domain.interfaces import IFileService


class FileService(IFileService):
    """UTF-8 text reads and atomic (whole-file) writes."""

    def read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentIOError(f"Not a UTF-8 text file: {path}") from e
        except OSError as e:
            raise DocumentIOError(f"Cannot read {path}: {e.strerror or e}") from e

    def write_text_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise DocumentIOError(f"Cannot open for write: {path}")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise DocumentIOError(f"Commit failed for: {path}")
