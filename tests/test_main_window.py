from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtGui import QCloseEvent

from pyted.services.file_service import FileService
from pyted.services.recent_list import RecentList
from pyted.services.settings_service import SettingsService
from pyted.services.ui.adapters import QtTextBuffer
from pyted.services.ui.main_window import MainWindow
from pyted.services.ui.ports.messages import SaveChoice
from pyted.services.ui.presenters.editor_presenter import Editor, IEditorView


@pytest.fixture()
def settings(tmp_path) -> SettingsService:
    return SettingsService(QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat))


@pytest.fixture()
def window(qtbot, tmp_path, settings, fake_messages, fake_dialogs) -> MainWindow:
    """Real window + Editor with scripted dialogs; Qt event loop drives readiness."""
    w = MainWindow(settings=settings, app_title="Test")
    qtbot.addWidget(w)
    files = FileService()
    editor = Editor(
        view=w,
        recent=RecentList(tmp_path / "recent.json", files=files),
        files=files,
        messages=fake_messages,
        dialogs=fake_dialogs,
        settings=settings,
    )
    w.attach_editor(editor)
    editor.start()
    w.show()
    return w


def _wait_ready(qtbot, w: MainWindow) -> None:
    qtbot.waitUntil(lambda: all(t.document.is_ready for t in w.editor.tabs), timeout=2000)


def test_window_is_an_editor_view(window: MainWindow):
    assert isinstance(window, IEditorView)


def test_window_starts_with_one_untitled_tab(qtbot, window: MainWindow):
    _wait_ready(qtbot, window)

    assert window.tabs.count() == 1
    assert window.tabs.tabText(0) == "(untitled)"
    assert isinstance(window.current_tab(), QtTextBuffer)
    assert window.editor.active_document().modified is False


def test_typing_marks_tab_title(qtbot, window: MainWindow):
    _wait_ready(qtbot, window)
    buf = window.current_tab()

    qtbot.keyClicks(buf, "hi")

    assert window.editor.active_document().modified is True
    assert window.tabs.tabText(0) == "(untitled)*"


def test_open_file_is_clean_after_ready(qtbot, tmp_path: Path, window: MainWindow):
    src = tmp_path / "a.txt"
    src.write_text("Loaded", encoding="utf-8")

    tab = window.editor.open_path(src)
    _wait_ready(qtbot, window)

    assert tab.buffer.toPlainText() == "Loaded"
    assert tab.document.modified is False
    assert window.tabs.count() == 2
    assert window.tabs.tabText(window.tabs.currentIndex()) == "a.txt"
    assert window.statusBar().currentMessage() == f"Opened: {src}"


def test_recent_menu_lists_entries_and_triggers_open(qtbot, tmp_path: Path, window: MainWindow):
    a = tmp_path / "a.txt"
    a.write_text("A", encoding="utf-8")
    window.editor.recent.add(a)
    window.editor.rebuild_recent_menu()

    assert len(window.recent_actions) == 1
    assert window.recent_actions[0].text() == f"&1 {a}"

    window.recent_actions[0].trigger()

    assert window.editor.active_document().path == a


def test_recent_menu_empty_placeholder(window: MainWindow):
    window.editor.clear_recent()
    acts = window.recent_menu.actions()
    assert len(acts) == 1
    assert acts[0].text() == "(empty)"
    assert acts[0].isEnabled() is False


def test_new_and_close_actions(qtbot, window: MainWindow):
    window.act_new.trigger()
    assert window.tabs.count() == 2

    window.act_close.trigger()
    window.act_close.trigger()
    assert window.tabs.count() == 1


def test_tab_close_button_routes_through_confirmation(qtbot, window: MainWindow, fake_messages):
    _wait_ready(qtbot, window)
    qtbot.keyClicks(window.current_tab(), "x")
    fake_messages.answers = [SaveChoice.CANCEL]

    window.tabs.tabCloseRequested.emit(0)

    assert window.tabs.count() == 1
    assert window.tabs.tabText(0) == "(untitled)*"
    assert fake_messages.asked


def test_save_as_action_writes_file(qtbot, tmp_path: Path, window: MainWindow, fake_dialogs):
    _wait_ready(qtbot, window)
    qtbot.keyClicks(window.current_tab(), "body")
    target = tmp_path / "saved.txt"
    fake_dialogs.save_paths = [target]

    window.act_save.trigger()

    assert target.read_text(encoding="utf-8") == "body"
    assert window.tabs.tabText(0) == "saved.txt"


def test_ampersand_in_title_is_escaped(tmp_path: Path, window: MainWindow):
    src = tmp_path / "R&D.txt"
    src.write_text("", encoding="utf-8")
    window.editor.open_path(src)
    assert window.tabs.tabText(window.tabs.currentIndex()) == "R&&D.txt"


def test_close_event_cancelled_keeps_window(qtbot, window: MainWindow, fake_messages):
    _wait_ready(qtbot, window)
    qtbot.keyClicks(window.current_tab(), "x")
    fake_messages.answers = [SaveChoice.CANCEL]

    ev = QCloseEvent()
    window.closeEvent(ev)

    assert ev.isAccepted() is False
    assert window.tabs.count() == 1


def test_close_event_persists_geometry(qtbot, window: MainWindow, settings):
    ev = QCloseEvent()
    window.closeEvent(ev)

    assert ev.isAccepted() is True
    assert settings.get_geometry()
    assert window.tabs.count() == 0


def test_recent_action_text_escapes_ampersand(tmp_path: Path, window: MainWindow):
    p = tmp_path / "a&b.txt"
    window.editor.recent.add(p)
    window.editor.rebuild_recent_menu()

    assert window.recent_actions[0].text() == f"&1 {str(p).replace('&', '&&')}"


def test_tab_context_menu_closes_that_tab(qtbot, window: MainWindow):
    window.editor.new_doc()
    window.editor.new_doc()
    assert window.tabs.count() == 3

    menu = window.tab_context_menu(1)
    assert menu is not None
    acts = menu.actions()
    assert [a.text() for a in acts] == ["Close tab"]

    acts[0].trigger()

    assert window.tabs.count() == 2


def test_tab_context_menu_off_tab_is_none(window: MainWindow):
    assert window.tab_context_menu(-1) is None
