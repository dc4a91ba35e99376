from __future__ import annotations

from typing import Protocol

from .delegate import Delegate
from .open_recent import OpenRecent


class ICommand(Protocol):
    def execute(self) -> None: ...


__all__ = [
    "ICommand",
    "Delegate",
    "OpenRecent",
]
