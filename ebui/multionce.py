"""Run a list of initialisers exactly once."""

from __future__ import annotations

import threading
from typing import Callable


class MultiOnce:
    """Like a run-once guard, but for any number of functions."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False
        self._funcs: list[Callable[[], None]] = []

    def append(self, func: Callable[[], None]) -> None:
        """Add func to the functions to run; ignored once do() has been called."""
        if not self._done:
            self._funcs.append(func)

    def do(self) -> None:
        """Run all appended functions the first time; later calls do nothing."""
        with self._lock:
            if self._done:
                return
            self._done = True
            funcs, self._funcs = self._funcs, []
        for func in funcs:
            func()