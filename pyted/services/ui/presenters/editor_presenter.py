from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pyted.domain.errors import RecentFileNotFound
from pyted.domain.interfaces import (
    IFileService,
    IRecentList,
    ISettingsService,
    ITextBuffer,
    Scheduler,
)
from pyted.domain.models import Document, DocumentTab
from pyted.services.ui.commands import ICommand, OpenRecent
from pyted.services.ui.ports.dialogs import IFileDialogService
from pyted.services.ui.ports.messages import IMessageService, SaveChoice
from pyted.utils.constants import DEFAULT_SAVE_NAME, MAX_RECENTS, MODIFIED_MARKER
from pyted.utils.paths import full_path, same_path
from pyted.utils.scheduling import call_soon

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecentEntry:
    """One "Open Recent" menu item: what to show and what to run."""

    label: str
    path: str
    command: ICommand


@runtime_checkable
class IEditorView(Protocol):
    """Passive multi-tab view driven by the Editor (implemented by the Qt MainWindow)."""

    # tabs
    def create_buffer(self) -> ITextBuffer: ...
    def add_tab(self, buffer: ITextBuffer, title: str) -> None: ...
    def remove_tab(self, buffer: ITextBuffer) -> None: ...  # also disposes buffers never added
    def select_tab(self, buffer: ITextBuffer) -> None: ...
    def current_tab(self) -> ITextBuffer | None: ...
    def set_tab_title(self, buffer: ITextBuffer, title: str) -> None: ...

    # status + recents
    def set_status(self, text: str) -> None: ...
    def set_recent_entries(self, entries: list[RecentEntry]) -> None: ...


def format_tab_title(doc: Document) -> str:
    return f"{doc.short_name}{MODIFIED_MARKER}" if doc.modified else doc.short_name


def _escape_mnemonic(text: str) -> str:
    return text.replace("&", "&&")


class Editor:
    """
    Coordinates open tabs, their Documents and the recent-files list.

    The view reports tab selection through `on_tab_selected()`; everything else
    (creating, opening, saving, closing) goes through the methods below.
    Document I/O failures are shown via the message service and reported to
    the caller as None/False, never raised.
    """

    def __init__(
        self,
        view: IEditorView,
        recent: IRecentList,
        files: IFileService,
        messages: IMessageService,
        dialogs: IFileDialogService,
        *,
        settings: ISettingsService | None = None,
        schedule: Scheduler = call_soon,
    ) -> None:
        self.view = view
        self.recent = recent
        self.files = files
        self.messages = messages
        self.dialogs = dialogs
        self.settings = settings
        self._schedule = schedule
        self._tabs: list[DocumentTab] = []

        self.recent.load_data()
        self.rebuild_recent_menu()
        self.update_ui_state()

    # ---------- queries ----------

    @property
    def tabs(self) -> list[DocumentTab]:
        return list(self._tabs)

    def active_tab(self) -> DocumentTab | None:
        current = self.view.current_tab()
        if current is None:
            return None
        return next((t for t in self._tabs if t.buffer is current), None)

    def active_document(self) -> Document | None:
        tab = self.active_tab()
        return tab.document if tab else None

    def find_tab_by_path(self, path: str | Path) -> DocumentTab | None:
        full = full_path(path)
        for tab in self._tabs:
            doc = tab.document
            if doc.has_name and same_path(doc.path, full):
                return tab
        return None

    def doc_opened(self, path: str | Path) -> bool:
        return self.find_tab_by_path(path) is not None

    # ---------- lifecycle ----------

    def start(self, start_path: str | Path | None = None) -> None:
        """Open `start_path` if given and readable, else start with an empty document."""
        if start_path is not None and self.open_path(start_path) is not None:
            return
        self.new_doc()

    def new_doc(self) -> DocumentTab:
        tab = self._create_tab()
        self._attach(tab)
        self.view.set_status("New document created.")
        return tab

    def open_doc(self) -> DocumentTab | None:
        path = self.dialogs.ask_open_path(self.view, self._start_dir())
        if path is None:
            return None
        return self.open_path(path)

    def open_path(self, path: str | Path) -> DocumentTab | None:
        full = full_path(path)

        already = self.find_tab_by_path(full)
        if already is not None:
            self.view.select_tab(already.buffer)
            self.recent.add(full)
            self.recent.save_data()
            self.rebuild_recent_menu()
            self.view.set_status("Document already open, tab activated.")
            return already

        tab = self._create_tab()
        try:
            tab.document.open(full)
        except OSError as e:
            self.view.remove_tab(tab.buffer)
            log.warning("Open failed for %s: %s", full, e)
            self.messages.error(self.view, "Open Error", f"Failed to open file:\n{e}")
            return None

        self._attach(tab)
        self.recent.add(full)
        self.recent.save_data()
        self.rebuild_recent_menu()
        self._remember_dir(full)
        self.view.set_status(f"Opened: {full}")
        return tab

    def open_doc_by_recent_index(self, index: int) -> DocumentTab | None:
        items = self.recent.items
        if not 0 <= index < len(items):
            return None

        try:
            path = self._existing_recent_path(items[index])
        except RecentFileNotFound as e:
            log.info("Pruning missing recent file %s", e.path)
            self.messages.warning(self.view, "Recent", str(e))
            self.recent.remove(e.path)
            self.recent.save_data()
            self.rebuild_recent_menu()
            return None

        return self.open_path(path)

    def save_doc(self) -> bool:
        tab = self.active_tab()
        if tab is None:
            return False
        return self._save(tab)

    def save_doc_as(self) -> bool:
        tab = self.active_tab()
        if tab is None:
            return False
        return self._save_as(tab)

    def close_active_doc(self) -> bool:
        tab = self.active_tab()
        if tab is None:
            return False
        return self.close_tab(tab)

    def close_tab(self, tab: DocumentTab) -> bool:
        """Close one tab, asking to save if modified. False if the user cancelled."""
        if not self._confirm_close(tab):
            return False

        self._remove(tab)
        if not self._tabs:
            self.new_doc()
        else:
            self.update_ui_state()
        return True

    def close_all_docs(self, *, reopen_empty: bool = True) -> bool:
        """
        Close every tab in open order. Stops at the first cancellation, leaving
        that tab and all later ones open. On success persists the recent list.
        """
        for tab in list(self._tabs):
            if not self._confirm_close(tab):
                return False
            self._remove(tab)

        self.recent.save_data()
        if reopen_empty:
            self.new_doc()
        return True

    # ---------- recent menu ----------

    def rebuild_recent_menu(self) -> None:
        entries = [
            RecentEntry(
                label=f"&{i + 1} {_escape_mnemonic(path)}",
                path=path,
                command=OpenRecent(self, i),
            )
            for i, path in enumerate(self.recent.items[:MAX_RECENTS])
        ]
        self.view.set_recent_entries(entries)

    def clear_recent(self) -> None:
        self.recent.clear()
        self.recent.save_data()
        self.rebuild_recent_menu()
        self.view.set_status("Recent files cleared.")

    # ---------- view notifications ----------

    def on_tab_selected(self) -> None:
        self.update_ui_state()

    def update_ui_state(self) -> None:
        self.view.set_status("Ready." if self.active_tab() else "No open documents.")

    # ---------- internals ----------

    def _create_tab(self) -> DocumentTab:
        buffer = self.view.create_buffer()
        return DocumentTab(buffer=buffer, document=Document(buffer, self.files, self._schedule))

    def _attach(self, tab: DocumentTab) -> None:
        tab.document.add_modified_listener(lambda: self._refresh_title(tab))
        self._tabs.append(tab)
        self.view.add_tab(tab.buffer, format_tab_title(tab.document))
        self.view.select_tab(tab.buffer)

    def _remove(self, tab: DocumentTab) -> None:
        self._tabs.remove(tab)
        self.view.remove_tab(tab.buffer)

    def _refresh_title(self, tab: DocumentTab) -> None:
        if tab in self._tabs:
            self.view.set_tab_title(tab.buffer, format_tab_title(tab.document))

    def _confirm_close(self, tab: DocumentTab) -> bool:
        doc = tab.document
        if not doc.modified:
            return True

        self.view.select_tab(tab.buffer)
        choice = self.messages.ask_save_changes(
            self.view,
            "Close",
            f'Document "{doc.short_name}" has been modified. Save changes?',
        )
        if choice is SaveChoice.CANCEL:
            self.view.set_status("Close cancelled.")
            return False
        if choice is SaveChoice.DISCARD:
            return True
        return self._save(tab)

    def _save(self, tab: DocumentTab) -> bool:
        doc = tab.document
        if not doc.has_name:
            return self._save_as(tab)
        try:
            doc.save()
        except OSError as e:
            self._report_save_error(doc.path, e)
            return False
        self._after_successful_save(tab)
        return True

    def _save_as(self, tab: DocumentTab) -> bool:
        doc = tab.document
        if doc.path is not None:
            suggested = str(doc.path)
        else:
            start = self._start_dir()
            suggested = str(Path(start) / DEFAULT_SAVE_NAME) if start else DEFAULT_SAVE_NAME

        target = self.dialogs.ask_save_path(self.view, suggested)
        if target is None:
            return False

        other = self.find_tab_by_path(target)
        if other is not None and other is not tab:
            self.messages.error(
                self.view,
                "Save Error",
                f"The file is already open in another tab:\n{full_path(target)}\nClose that tab first.",
            )
            return False
        try:
            doc.save_as(target)
        except OSError as e:
            self._report_save_error(target, e)
            return False
        self._after_successful_save(tab)
        return True

    def _after_successful_save(self, tab: DocumentTab) -> None:
        path = tab.document.path
        if path is None:
            return
        self.recent.add(path)
        self.recent.save_data()
        self.rebuild_recent_menu()
        self._refresh_title(tab)
        self._remember_dir(path)
        self.view.set_status("Document saved.")

    def _report_save_error(self, path: Any, e: OSError) -> None:
        log.warning("Save failed for %s: %s", path, e)
        self.messages.error(self.view, "Save Error", f"Failed to save file:\n{e}")

    @staticmethod
    def _existing_recent_path(path: str) -> str:
        if not Path(path).is_file():
            raise RecentFileNotFound(path)
        return path

    def _start_dir(self) -> str | None:
        doc = self.active_document()
        if doc is not None and doc.path is not None:
            return str(doc.path.parent)
        if self.settings is not None:
            return self.settings.get_last_dir()
        return None

    def _remember_dir(self, path: Path) -> None:
        if self.settings is not None:
            self.settings.set_last_dir(str(path.parent))
