from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, runtime_checkable

Listener = Callable[[], None]
Scheduler = Callable[[Callable[[], None]], None]


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_last_dir(self) -> str | None: ...
    def set_last_dir(self, directory: str) -> None: ...


@runtime_checkable
class ITextBuffer(Protocol):
    """
    The text-editing surface a Document wraps.

    The buffer owns its own "modified" flag and may emit content-changed
    notifications while it is still being constructed; `is_ready()` turns
    True once its native handle exists.
    """

    def text(self) -> str: ...
    def set_text(self, text: str) -> None: ...
    def move_cursor_to_start(self) -> None: ...
    def set_buffer_modified(self, modified: bool) -> None: ...

    def is_ready(self) -> bool: ...
    def add_ready_listener(self, listener: Listener) -> None: ...
    def add_changed_listener(self, listener: Listener) -> None: ...


class IRecentList(Protocol):
    """Bounded most-recently-used list of absolute file paths."""

    @property
    def items(self) -> list[str]: ...

    def add(self, path: str | Path) -> None: ...
    def remove(self, path: str | Path) -> None: ...
    def clear(self) -> None: ...
    def save_data(self) -> None: ...
    def load_data(self) -> None: ...

