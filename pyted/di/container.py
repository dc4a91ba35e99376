from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from pyted.domain.interfaces import IFileService, IRecentList, ISettingsService
from pyted.services.config.app_config import EditorConfig
from pyted.services.file_service import FileService
from pyted.services.recent_list import RecentList
from pyted.services.settings_service import SettingsService
from pyted.services.ui.adapters import QtFileDialogService, QtMessageService
from pyted.services.ui.main_window import MainWindow
from pyted.services.ui.ports.dialogs import IFileDialogService
from pyted.services.ui.ports.messages import IMessageService
from pyted.services.ui.presenters.editor_presenter import Editor
from pyted.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the MainWindow and the Editor presenter that drives it
    """

    def __init__(
        self,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        recent: IRecentList | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        config: EditorConfig | None = None,
    ) -> None:
        self.config = config
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        if recent is None:
            recent = RecentList(
                config.recent_path if config else None, files=self.file_service
            )
        self.recent: IRecentList = recent
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: EditorConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- UI factories ----------

    def build_editor(self, view: MainWindow) -> Editor:
        return Editor(
            view=view,
            recent=self.recent,
            files=self.file_service,
            messages=self.messages,
            dialogs=self.dialogs,
            settings=self.settings_service,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """
        Create the window, attach an Editor to it and open the start document
        (or an empty one).
        """
        window = MainWindow(settings=self.settings_service, app_title=app_title)
        editor = self.build_editor(window)
        window.attach_editor(editor)
        editor.start(start_path)
        return window
