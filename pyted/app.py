from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pyted.di.container import Container
from pyted.services.config.app_config import build_editor_config
from pyted.utils.constants import APP_NAME, APP_ORG
from pyted.utils.logging import setup_logging

log = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Loads config, sets up logging, bootstraps Qt, composes the application
    via the DI container and launches the main window.
    """
    config = build_editor_config()
    log_path = setup_logging(config.log_level, log_dir=config.log_dir, console=config.log_console)
    log.info("Starting %s (config: %s, log: %s)", APP_NAME, config.loaded_from, log_path)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=config.app_title)
    win.show()

    return app.exec()
