from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_data_dir

from pyted.domain.interfaces import IFileService, IRecentList
from pyted.services.file_service import FileService
from pyted.utils.constants import APP_NAME, MAX_RECENTS, RECENT_FILE_NAME
from pyted.utils.paths import full_path, same_path

log = logging.getLogger(__name__)


def default_storage_path() -> Path:
    """<user data dir>/PyTextEditor/recent.json (platform specific)."""
    return Path(user_data_dir(APP_NAME, appauthor=False)) / RECENT_FILE_NAME


class RecentList(IRecentList):
    """
    Most-recently-used file paths, newest first.

    Invariants:
      - at most MAX_RECENTS entries
      - no two entries are equal ignoring case
      - add() always inserts at the front, so load_data() replays the stored
        sequence from least-recent to most-recent

    Persistence is best-effort: storage errors are logged, never raised.
    """

    def __init__(
        self,
        storage_path: Path | None = None,
        *,
        files: IFileService | None = None,
        max_items: int = MAX_RECENTS,
    ) -> None:
        self._storage_path = Path(storage_path) if storage_path else default_storage_path()
        self._files = files or FileService()
        self._max_items = max_items
        self._items: list[str] = []

    @property
    def items(self) -> list[str]:
        return list(self._items)

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    def add(self, path: str | Path) -> None:
        if not str(path).strip():
            return
        full = str(full_path(path))
        self._items = [x for x in self._items if not same_path(x, full)]
        self._items.insert(0, full)
        del self._items[self._max_items :]

    def remove(self, path: str | Path) -> None:
        if not str(path).strip():
            return
        full = str(full_path(path))
        self._items = [x for x in self._items if not same_path(x, full)]

    def clear(self) -> None:
        self._items.clear()

    def save_data(self) -> None:
        try:
            self._storage_path.parent.mkdir(parents=True, exist_ok=True)
            self._files.write_text_atomic(self._storage_path, json.dumps(self._items, indent=2))
        except (OSError, TypeError, ValueError) as e:
            log.warning("Could not save recent list to %s: %s", self._storage_path, e)

    def load_data(self) -> None:
        self._items.clear()

        if not self._storage_path.exists():
            return
        try:
            data = json.loads(self._files.read_text(self._storage_path))
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable recent list %s: %s", self._storage_path, e)
            return
        if not isinstance(data, list):
            log.warning("Ignoring recent list %s: expected a JSON array", self._storage_path)
            return

        # Stored newest-first; add() pushes to the front, so replay oldest-first.
        for entry in reversed(data):
            if isinstance(entry, str) and entry.strip():
                self.add(entry)
