from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from pyted.services.ui.ports.messages import IMessageService, SaveChoice


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def info(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.information(parent, title, text)

    def warning(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.warning(parent, title, text)

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def ask_save_changes(self, parent: Any | None, title: str, text: str) -> SaveChoice:
        resp = QMessageBox.question(
            parent,
            title,
            text,
            QMessageBox.StandardButton.Yes
            | QMessageBox.StandardButton.No
            | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Cancel,
        )
        if resp == QMessageBox.StandardButton.Yes:
            return SaveChoice.SAVE
        if resp == QMessageBox.StandardButton.No:
            return SaveChoice.DISCARD
        return SaveChoice.CANCEL
