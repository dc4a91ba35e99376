from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyted.services.ui.presenters.editor_presenter import Editor


@dataclass(frozen=True)
class OpenRecent:
    """
    Command: open the file at position `index` of the recent list.
    The index is resolved when executed, so a stale entry is detected then.
    """

    editor: Editor
    index: int

    def execute(self) -> None:
        self.editor.open_doc_by_recent_index(self.index)
