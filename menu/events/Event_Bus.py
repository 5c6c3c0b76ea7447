"""Event bus for menu item events.

Events:
  menu_item.saved             payload {"item": <MenuItem summary dict>}
  menu_item.selection_changed payload {"ingredient": Ingredient, "selected": bool, "count": int}

Listeners are callables taking (event_name, payload). A listener that raises
is logged and skipped; the publisher never sees the error.
"""
from __future__ import annotations
import logging
from threading import Lock
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

MENU_ITEM_SAVED = "menu_item.saved"
MENU_SELECTION_CHANGED = "menu_item.selection_changed"

Listener = Callable[[str, Any], None]


class EventBus:
    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {}
        self._lock = Lock()

    def subscribe(self, listener: Listener, *event_names: str) -> None:
        """Register listener for each named event; registering twice is a no-op."""
        with self._lock:
            for name in event_names:
                listeners = self._listeners.setdefault(name, [])
                if listener not in listeners:
                    listeners.append(listener)

    def publish(self, event_name: str, payload: Any = None) -> int:
        """Deliver payload to every listener of event_name. Returns how many took it."""
        with self._lock:
            listeners = tuple(self._listeners.get(event_name, ()))
        delivered = 0
        for listener in listeners:
            try:
                listener(event_name, payload)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event_name)
            else:
                delivered += 1
        return delivered


GLOBAL_EVENT_BUS = EventBus()


def create_event(event_name: str, payload: Any = None) -> int:
    return GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'create_event', 'MENU_ITEM_SAVED', 'MENU_SELECTION_CHANGED']
