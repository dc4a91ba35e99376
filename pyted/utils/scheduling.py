from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QTimer


def call_soon(callback: Callable[[], None]) -> None:
    """Run `callback` on the next pass of the Qt event loop."""
    QTimer.singleShot(0, callback)
