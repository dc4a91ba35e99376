APP_ORG = "QuickTools"
APP_NAME = "PyTextEditor"

UNTITLED_NAME = "(untitled)"
MODIFIED_MARKER = "*"
DEFAULT_SAVE_NAME = "document.txt"
DEFAULT_EXTENSION = ".txt"
TEXT_FILTER = "Text files (*.txt)"
FILE_FILTER = f"{TEXT_FILTER};;All files (*)"

RECENT_FILE_NAME = "recent.json"
MAX_RECENTS = 5

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_LAST_DIR = "file/last_dir"
