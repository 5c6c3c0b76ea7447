"""Console and web-facing observers for menu item events.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - menu_item.saved
  - menu_item.selection_changed

Each event is written to the application log (the "console" a saved menu
item ends up on) and kept in a small in-memory ring buffer that the web
layer exposes at /api/events.

  * Every stored event gets an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from menu.utilities.config import MAX_EVENTS
from .Event_Bus import (
    GLOBAL_EVENT_BUS, MENU_ITEM_SAVED, MENU_SELECTION_CHANGED
)

logger = logging.getLogger("menu_app")

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    evt: Dict[str, Any] = {
        'type': event_name,
        'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
    }
    if isinstance(payload, dict):
        item = payload.get('item')
        if isinstance(item, dict):
            evt['name'] = item.get('name', '')
            evt['ingredients'] = list(item.get('ingredients', []))
            evt['total_price'] = item.get('total_price')
            logger.info("Menu item saved: %s", item)
        ing = payload.get('ingredient')
        if ing is not None and hasattr(ing, 'name'):
            evt['ingredient'] = ing.name
        for k in ('selected', 'count'):
            if k in payload:
                evt[k] = payload[k]
    if event_name == MENU_SELECTION_CHANGED:
        logger.debug("Selection changed: %s", evt)
    with _lock:
        evt['id'] = _next_id
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    GLOBAL_EVENT_BUS.subscribe(_record, MENU_ITEM_SAVED, MENU_SELECTION_CHANGED)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
