"""Event helper utilities.

Quick import:
    from menu.events.event_helpers import publish_menu_item_saved, publish_selection_changed
"""
from __future__ import annotations
from typing import Any
from .Event_Bus import create_event, MENU_ITEM_SAVED, MENU_SELECTION_CHANGED

__all__ = [
    'publish_menu_item_saved', 'publish_selection_changed',
    'MENU_ITEM_SAVED', 'MENU_SELECTION_CHANGED'
]


def publish_menu_item_saved(summary: dict) -> int:
    """Publish a menu_item.saved event. Returns the number of listeners notified."""
    return create_event(MENU_ITEM_SAVED, {'item': summary})


def publish_selection_changed(ingredient: Any, selected: bool, count: int) -> int:
    """Publish a menu_item.selection_changed event."""
    return create_event(MENU_SELECTION_CHANGED, {
        'ingredient': ingredient,
        'selected': selected,
        'count': count
    })
