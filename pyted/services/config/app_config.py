from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_log_dir

from pyted.services.config.ini_config_service import IniConfigService
from pyted.services.recent_list import default_storage_path
from pyted.utils.constants import APP_NAME
from pyted.utils.logging import parse_level


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # pyted/services/config/app_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class EditorConfig:
    """
    Typed settings the composition root needs, resolved once at startup.

    Each value falls back to a platform default when the INI leaves it out.
    """

    app_title: str
    recent_path: Path
    log_level: int
    log_dir: Path
    log_console: bool
    loaded_from: Path | None = None

    @classmethod
    def from_ini(cls, ini: IniConfigService) -> EditorConfig:
        return cls(
            app_title=(ini.get("app", "title") or "").strip() or APP_NAME,
            recent_path=ini.get_path("recent", "path") or default_storage_path(),
            log_level=parse_level(ini.get("logging", "level"), logging.INFO),
            log_dir=ini.get_path("logging", "dir") or Path(user_log_dir(APP_NAME, appauthor=False)),
            log_console=bool(ini.get_bool("logging", "console", True)),
            loaded_from=ini.loaded_from,
        )


def build_editor_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> EditorConfig:
    root = project_root or _project_root_fallback()
    return EditorConfig.from_ini(IniConfigService(explicit_path=explicit_ini, project_root=root))
