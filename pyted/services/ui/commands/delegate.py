from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Delegate:
    """
    Command: run a zero-argument action (menu items, shortcuts, tab context actions).
    """

    action: Callable[[], object]

    def execute(self) -> None:
        self.action()
