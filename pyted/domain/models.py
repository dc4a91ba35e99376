from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Iterator

from pyted.domain.errors import InvalidDocumentState
from pyted.domain.interfaces import IFileService, ITextBuffer, Listener, Scheduler
from pyted.utils.constants import UNTITLED_NAME
from pyted.utils.paths import full_path

log = logging.getLogger(__name__)


class DocumentState(Enum):
    UNINITIALIZED = auto()
    READY = auto()


class Document:
    """
    One text buffer plus its file path and "modified" flag.

    The buffer may report content changes while its native handle is being
    created. Those are ignored: the document stays UNINITIALIZED until the
    buffer is ready, then one scheduler tick later it resets both modified
    flags and becomes READY. Only changes after that count as user edits.
    Text assigned by open() is never treated as an edit.
    """

    def __init__(
        self,
        buffer: ITextBuffer,
        files: IFileService,
        schedule: Scheduler,
    ) -> None:
        self._buffer = buffer
        self._files = files
        self._schedule = schedule

        self._state = DocumentState.UNINITIALIZED
        self._suppress_tracking = False
        self._modified = False
        self._path: Path | None = None
        self._listeners: list[Listener] = []

        buffer.add_changed_listener(self._on_buffer_changed)
        if buffer.is_ready():
            self._schedule(self._become_ready)
        else:
            buffer.add_ready_listener(lambda: self._schedule(self._become_ready))

    # ---------- read accessors ----------

    @property
    def buffer(self) -> ITextBuffer:
        return self._buffer

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def has_name(self) -> bool:
        return self._path is not None

    @property
    def short_name(self) -> str:
        return self._path.name if self._path is not None else UNTITLED_NAME

    @property
    def state(self) -> DocumentState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is DocumentState.READY

    @property
    def modified(self) -> bool:
        return self._modified

    @modified.setter
    def modified(self, value: bool) -> None:
        if self._modified == value:
            return
        self._modified = value
        for listener in list(self._listeners):
            listener()

    def add_modified_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_modified_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ---------- file operations ----------

    def open(self, path: str | Path) -> None:
        """Load `path` into the buffer. Raises DocumentIOError; on failure nothing changes."""
        full = full_path(path)
        text = self._files.read_text(full)

        with self._untracked():
            self._buffer.set_text(text)
            self._buffer.move_cursor_to_start()

        self._path = full
        self.mark_clean()
        log.debug("Opened %s (%d chars)", full, len(text))

    def save(self) -> None:
        if self._path is None:
            raise InvalidDocumentState("Document has no name. Use save_as().")

        self._files.write_text_atomic(self._path, self._buffer.text())
        self.mark_clean()
        log.debug("Saved %s", self._path)

    def save_as(self, path: str | Path) -> None:
        previous = self._path
        self._path = full_path(path)
        try:
            self.save()
        except OSError:
            self._path = previous
            raise

    def mark_clean(self) -> None:
        self._buffer.set_buffer_modified(False)
        self.modified = False

    # ---------- internals ----------

    @contextmanager
    def _untracked(self) -> Iterator[None]:
        self._suppress_tracking = True
        try:
            yield
        finally:
            self._suppress_tracking = False

    def _on_buffer_changed(self) -> None:
        if self._suppress_tracking or self._state is not DocumentState.READY:
            return
        self.modified = True

    def _become_ready(self) -> None:
        if self._state is DocumentState.READY:
            return
        self.mark_clean()
        self._state = DocumentState.READY


@dataclass(eq=False)
class DocumentTab:
    """An open tab: the view-side buffer handle bound to its Document."""

    buffer: ITextBuffer
    document: Document
