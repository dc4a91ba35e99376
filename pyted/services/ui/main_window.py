from __future__ import annotations

from PyQt6.QtCore import QByteArray, QEvent, QObject, QPoint, Qt
from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QMenu, QStatusBar, QTabWidget

from pyted.domain.interfaces import ISettingsService, ITextBuffer
from pyted.services.ui.adapters.qt_text_editor import QtTextBuffer
from pyted.services.ui.commands import Delegate, ICommand
from pyted.services.ui.presenters.editor_presenter import Editor, RecentEntry
from pyted.utils.constants import APP_NAME


class MainWindow(QMainWindow):
    """
    Thin tabbed window implementing IEditorView.

    All document logic lives in the attached Editor; the window only renders
    tabs, status and the recent menu, and forwards user intents as commands.
    """

    def __init__(self, settings: ISettingsService, *, app_title: str = APP_NAME) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1000, 700)

        self.settings = settings
        self.editor: Editor | None = None

        self.tabs = QTabWidget(self)
        self.tabs.setTabsClosable(True)
        self.tabs.setDocumentMode(True)
        self.tabs.tabBar().installEventFilter(self)
        self.tabs.tabBar().setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.tabs.tabBar().customContextMenuRequested.connect(self._show_tab_menu)
        self.setCentralWidget(self.tabs)

        self.recent_menu = QMenu("Open Recent", self)
        self.recent_actions: list[QAction] = []
        self.setStatusBar(QStatusBar(self))

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

    # ---------- wiring ----------

    def attach_editor(self, editor: Editor) -> None:
        self.editor = editor
        self._build_actions(editor)
        self._build_menu()
        self.tabs.currentChanged.connect(lambda _i: editor.on_tab_selected())
        self.tabs.tabCloseRequested.connect(self._close_tab_at)
        editor.rebuild_recent_menu()

    def _command_action(
        self, text: str, command: ICommand, shortcut: QKeySequence | str | None = None
    ) -> QAction:
        act = QAction(text, self, triggered=lambda chk=False, c=command: c.execute())
        if shortcut is not None:
            act.setShortcut(shortcut)
        return act

    def _build_actions(self, editor: Editor) -> None:
        self.act_new = self._command_action(
            "New", Delegate(editor.new_doc), QKeySequence.StandardKey.New
        )
        self.act_open = self._command_action(
            "Open…", Delegate(editor.open_doc), QKeySequence.StandardKey.Open
        )
        self.act_save = self._command_action(
            "Save", Delegate(editor.save_doc), QKeySequence.StandardKey.Save
        )
        self.act_save_as = self._command_action(
            "Save As…", Delegate(editor.save_doc_as), QKeySequence.StandardKey.SaveAs
        )
        self.act_close = self._command_action(
            "Close", Delegate(editor.close_active_doc), QKeySequence.StandardKey.Close
        )
        self.act_clear_recent = self._command_action("Clear Recent", Delegate(editor.clear_recent))
        self.act_exit = self._command_action("E&xit", Delegate(self.close), "Ctrl+Q")

    def _build_menu(self) -> None:
        filem = self.menuBar().addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_close)
        filem.addSeparator()
        filem.addAction(self.act_exit)

    # ---------- IEditorView ----------

    def create_buffer(self) -> ITextBuffer:
        return QtTextBuffer()

    def add_tab(self, buffer: ITextBuffer, title: str) -> None:
        self.tabs.addTab(buffer, self._escape(title))

    def remove_tab(self, buffer: ITextBuffer) -> None:
        i = self.tabs.indexOf(buffer)
        if i >= 0:
            self.tabs.removeTab(i)
        buffer.deleteLater()

    def select_tab(self, buffer: ITextBuffer) -> None:
        self.tabs.setCurrentWidget(buffer)
        buffer.setFocus()

    def current_tab(self) -> ITextBuffer | None:
        return self.tabs.currentWidget()

    def set_tab_title(self, buffer: ITextBuffer, title: str) -> None:
        i = self.tabs.indexOf(buffer)
        if i >= 0:
            self.tabs.setTabText(i, self._escape(title))

    def set_status(self, text: str) -> None:
        self.statusBar().showMessage(text)

    def set_recent_entries(self, entries: list[RecentEntry]) -> None:
        self.recent_menu.clear()
        self.recent_actions = []
        if not entries:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for entry in entries:
            act = self._command_action(entry.label, entry.command)
            act.setToolTip(entry.path)
            self.recent_actions.append(act)
            self.recent_menu.addAction(act)
        if self.editor is not None:
            self.recent_menu.addSeparator()
            self.recent_menu.addAction(self.act_clear_recent)

    # ---------- tab interactions ----------

    def _close_tab_at(self, index: int) -> None:
        if self.editor is None:
            return
        self.tabs.setCurrentIndex(index)
        self.editor.close_active_doc()

    def tab_context_menu(self, index: int) -> QMenu | None:
        """Right-click menu for the tab at `index`, or None off a tab."""
        if self.editor is None or index < 0:
            return None
        menu = QMenu(self)
        act = self._command_action("Close tab", Delegate(lambda: self._close_tab_at(index)))
        act.setParent(menu)
        menu.addAction(act)
        return menu

    def _show_tab_menu(self, pos: QPoint) -> None:
        bar = self.tabs.tabBar()
        menu = self.tab_context_menu(bar.tabAt(pos))
        if menu is not None:
            menu.exec(bar.mapToGlobal(pos))
            menu.deleteLater()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        # Middle click on a tab closes it.
        if (
            obj is self.tabs.tabBar()
            and event.type() == QEvent.Type.MouseButtonRelease
            and event.button() == Qt.MouseButton.MiddleButton
        ):
            index = self.tabs.tabBar().tabAt(event.position().toPoint())
            if index >= 0:
                self._close_tab_at(index)
                return True
        return super().eventFilter(obj, event)

    @staticmethod
    def _escape(title: str) -> str:
        # QTabBar treats '&' as a mnemonic marker
        return title.replace("&", "&&")

    # ---------- Close ----------

    def closeEvent(self, event: QCloseEvent) -> None:
        if self.editor is not None and not self.editor.close_all_docs(reopen_empty=False):
            event.ignore()
            return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
