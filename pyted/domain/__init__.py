"""Domain layer: interfaces, errors and the Document model."""

from .errors import DocumentIOError, EditorError, InvalidDocumentState, RecentFileNotFound
from .interfaces import IFileService, IRecentList, ISettingsService, ITextBuffer
from .models import Document, DocumentState, DocumentTab

__all__ = [
    "IFileService",
    "IRecentList",
    "ISettingsService",
    "ITextBuffer",
    "Document",
    "DocumentState",
    "DocumentTab",
    "EditorError",
    "DocumentIOError",
    "InvalidDocumentState",
    "RecentFileNotFound",
]
