from __future__ import annotations


class EditorError(Exception):
    """Base class for errors raised by the document/editor layer."""


class DocumentIOError(EditorError, OSError):
    """A document file could not be read, decoded or written."""


class InvalidDocumentState(EditorError, RuntimeError):
    """Operation not valid for the document's current state (e.g. save() with no name)."""


class RecentFileNotFound(EditorError, FileNotFoundError):
    """A recent-list entry points at a file that no longer exists."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found:\n{path}")
        self.path = path
