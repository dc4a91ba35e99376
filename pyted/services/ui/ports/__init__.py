from __future__ import annotations

from .dialogs import IFileDialogService
from .messages import IMessageService, SaveChoice

__all__ = [
    "IFileDialogService",
    "IMessageService",
    "SaveChoice",
]
