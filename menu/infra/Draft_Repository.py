"""In-memory holder for the menu item draft.

There is exactly one draft per process and nothing is written to disk.
All reads and changes go through the lock so concurrent requests served by
the same worker see a consistent draft.
"""
from __future__ import annotations
from contextlib import contextmanager
from threading import Lock
from typing import Iterator

from menu.domain.MenuItem import MenuItem

_lock = Lock()
_draft = MenuItem()


class DraftRepository:
    @contextmanager
    def edit(self) -> Iterator[MenuItem]:
        """Yield the current draft while holding the lock."""
        with _lock:
            yield _draft

    def get_summary(self) -> dict:
        with _lock:
            return _draft.summary()

    def reset(self) -> dict:
        with _lock:
            _draft.reset()
            return _draft.summary()


__all__ = ['DraftRepository']
