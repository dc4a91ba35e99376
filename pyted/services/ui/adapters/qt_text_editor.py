from __future__ import annotations

from PyQt6.QtGui import QShowEvent, QTextCursor
from PyQt6.QtWidgets import QPlainTextEdit, QWidget

from pyted.domain.interfaces import Listener


class QtTextBuffer(QPlainTextEdit):
    """
    Plain-text editing widget satisfying ITextBuffer.

    Counts as ready once it has been shown for the first time; before that Qt
    may still be polishing the widget and emitting textChanged on its own.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._ready = False
        self._ready_listeners: list[Listener] = []

        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        self.setTabStopDistance(4 * self.fontMetrics().horizontalAdvance(" "))

    # ---- ITextBuffer ----

    def text(self) -> str:
        return self.toPlainText()

    def set_text(self, text: str) -> None:
        self.setPlainText(text)

    def move_cursor_to_start(self) -> None:
        c = self.textCursor()
        c.movePosition(QTextCursor.MoveOperation.Start)
        self.setTextCursor(c)

    def set_buffer_modified(self, modified: bool) -> None:
        self.document().setModified(modified)

    def is_ready(self) -> bool:
        return self._ready

    def add_ready_listener(self, listener: Listener) -> None:
        self._ready_listeners.append(listener)

    def add_changed_listener(self, listener: Listener) -> None:
        self.textChanged.connect(listener)

    # ---- Qt ----

    def showEvent(self, e: QShowEvent) -> None:
        super().showEvent(e)
        if self._ready:
            return
        self._ready = True
        for listener in list(self._ready_listeners):
            listener()

