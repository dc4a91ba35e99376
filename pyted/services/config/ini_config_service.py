# pyted/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

from platformdirs import user_config_dir

from pyted.utils.constants import APP_NAME

log = logging.getLogger(__name__)


class IniConfigService:
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/PyTextEditor/config.ini or %APPDATA%\PyTextEditor\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)

    Recognised keys:
      [app]     title
      [recent]  path       (JSON file holding the recent-files list)
      [logging] level, dir, console
    """

    DEFAULT_FILE = "config.ini"

    def __init__(
        self,
        explicit_path: Optional[Path] = None,
        project_root: Optional[Path] = None,
        *,
        user_dir: Optional[Path] = None,
    ):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)

        cfg_dir = user_dir or Path(user_config_dir(APP_NAME, appauthor=False))
        candidates.append(cfg_dir / self.DEFAULT_FILE)

        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.exists():
                continue
            try:
                with path.open("r", encoding="utf-8") as fh:
                    self._parser.read_file(fh)
            except (OSError, configparser.Error) as e:
                # A broken config file must not stop the editor from starting.
                log.warning("Ignoring unreadable config %s: %s", path, e)
                self._parser = configparser.ConfigParser()
                continue
            self._loaded_from = path
            break

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        val = self.get(section, key, None)
        if val is None:
            return default
        truth = {"1", "true", "yes", "y", "on"}
        falsy = {"0", "false", "no", "n", "off"}
        s = val.strip().lower()
        if s in truth:
            return True
        if s in falsy:
            return False
        return default

    def get_path(self, section: str, key: str) -> Optional[Path]:
        val = (self.get(section, key, None) or "").strip()
        return Path(val).expanduser() if val else None

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        snap: Dict[str, Dict[str, str]] = {}
        for sect in self._parser.sections():
            snap[sect] = dict(self._parser[sect])  # copy
        return snap

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics."""
        return self._loaded_from
