from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path
from typing import Any, Callable

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from pyted.services.file_service import FileService
from pyted.services.recent_list import RecentList
from pyted.services.settings_service import SettingsService
from pyted.services.ui.ports.messages import SaveChoice


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Fakes for the editor's collaborators ---


class ManualScheduler:
    """Collects deferred callbacks; `tick()` runs what is pending, like one event-loop pass."""

    def __init__(self) -> None:
        self.pending: list[Callable[[], None]] = []

    def __call__(self, callback: Callable[[], None]) -> None:
        self.pending.append(callback)

    def tick(self) -> None:
        due, self.pending = self.pending, []
        for cb in due:
            cb()


class FakeTextBuffer:
    """In-memory ITextBuffer. Every text change notifies, like a real widget."""

    def __init__(self, *, ready: bool = False) -> None:
        self._text = ""
        self._ready = ready
        self.buffer_modified = False
        self.cursor = -1
        self._ready_listeners: list[Callable[[], None]] = []
        self._changed_listeners: list[Callable[[], None]] = []

    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text
        for cb in list(self._changed_listeners):
            cb()

    def type_text(self, text: str) -> None:
        """Simulate a user keystroke sequence appended at the end."""
        self.buffer_modified = True
        self.set_text(self._text + text)

    def move_cursor_to_start(self) -> None:
        self.cursor = 0

    def set_buffer_modified(self, modified: bool) -> None:
        self.buffer_modified = modified

    def is_ready(self) -> bool:
        return self._ready

    def add_ready_listener(self, listener: Callable[[], None]) -> None:
        self._ready_listeners.append(listener)

    def add_changed_listener(self, listener: Callable[[], None]) -> None:
        self._changed_listeners.append(listener)

    def make_ready(self) -> None:
        self._ready = True
        for cb in list(self._ready_listeners):
            cb()


class FakeView:
    """Records what the Editor pushes to the UI; tabs kept in display order."""

    def __init__(self) -> None:
        self.tabs: list[FakeTextBuffer] = []
        self.titles: dict[int, str] = {}
        self.current: FakeTextBuffer | None = None
        self.status = ""
        self.recent_entries: list[Any] = []
        self.disposed: list[FakeTextBuffer] = []

    def create_buffer(self) -> FakeTextBuffer:
        return FakeTextBuffer(ready=True)

    def add_tab(self, buffer: FakeTextBuffer, title: str) -> None:
        self.tabs.append(buffer)
        self.titles[id(buffer)] = title

    def remove_tab(self, buffer: FakeTextBuffer) -> None:
        self.disposed.append(buffer)
        if buffer not in self.tabs:
            return
        i = self.tabs.index(buffer)
        self.tabs.remove(buffer)
        self.titles.pop(id(buffer), None)
        if self.current is buffer:
            self.current = self.tabs[min(i, len(self.tabs) - 1)] if self.tabs else None

    def select_tab(self, buffer: FakeTextBuffer) -> None:
        self.current = buffer

    def current_tab(self) -> FakeTextBuffer | None:
        return self.current

    def set_tab_title(self, buffer: FakeTextBuffer, title: str) -> None:
        self.titles[id(buffer)] = title

    def title_of(self, buffer: FakeTextBuffer) -> str:
        return self.titles[id(buffer)]

    def set_status(self, text: str) -> None:
        self.status = text

    def set_recent_entries(self, entries: list[Any]) -> None:
        self.recent_entries = list(entries)


class FakeMessages:
    """Scripted IMessageService: answers save prompts from a queue (DISCARD once exhausted)."""

    def __init__(self) -> None:
        self.answers: list[SaveChoice] = []
        self.asked: list[str] = []
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.infos: list[str] = []

    def info(self, parent, title, text) -> None:
        self.infos.append(text)

    def warning(self, parent, title, text) -> None:
        self.warnings.append(text)

    def error(self, parent, title, text) -> None:
        self.errors.append(text)

    def ask_save_changes(self, parent, title, text) -> SaveChoice:
        self.asked.append(text)
        return self.answers.pop(0) if self.answers else SaveChoice.DISCARD


class FakeDialogs:
    """Scripted IFileDialogService: returns queued paths (None means cancelled)."""

    def __init__(self) -> None:
        self.open_paths: list[Path | None] = []
        self.save_paths: list[Path | None] = []
        self.save_requests: list[str] = []

    def ask_open_path(self, parent, start_dir) -> Path | None:
        return self.open_paths.pop(0) if self.open_paths else None

    def ask_save_path(self, parent, suggested) -> Path | None:
        self.save_requests.append(suggested)
        return self.save_paths.pop(0) if self.save_paths else None


# --- Other common fixtures ---


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def fake_view() -> FakeView:
    return FakeView()


@pytest.fixture()
def fake_messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def fake_dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def recent_path(tmp_path: Path) -> Path:
    return tmp_path / "appdata" / "recent.json"


@pytest.fixture()
def recent(recent_path: Path, file_service: FileService) -> RecentList:
    return RecentList(recent_path, files=file_service)
