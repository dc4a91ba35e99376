"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    DEFAULT_EXTENSION,
    DEFAULT_SAVE_NAME,
    FILE_FILTER,
    MAX_RECENTS,
    MODIFIED_MARKER,
    RECENT_FILE_NAME,
    SETTINGS_GEOMETRY,
    SETTINGS_LAST_DIR,
    TEXT_FILTER,
    UNTITLED_NAME,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "UNTITLED_NAME",
    "MODIFIED_MARKER",
    "DEFAULT_SAVE_NAME",
    "DEFAULT_EXTENSION",
    "FILE_FILTER",
    "TEXT_FILTER",
    "RECENT_FILE_NAME",
    "MAX_RECENTS",
    "SETTINGS_GEOMETRY",
    "SETTINGS_LAST_DIR",
]
