"""Concrete service implementations."""

from .file_service import FileService
from .recent_list import RecentList
from .settings_service import SettingsService

__all__ = ["FileService", "RecentList", "SettingsService"]
