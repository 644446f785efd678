"""
Keyboard Events - Key value type and key-handling helpers.

Host adapters translate their native key events into ``KeyEvent`` so that
every controller speaks one vocabulary (DOM ``KeyboardEvent.key`` names).

Usage:
    from focus_core.keyboard import KeyEvent, create_activation_handler

    on_key = create_activation_handler(lambda event: toggle_row())
    on_key(KeyEvent(" "))  # toggles, default prevented
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from focus_core.constants import (
    ACTIVATION_KEYS,
    ARROW_KEYS,
    KEY_ESCAPE,
    KEY_TAB,
    NAVIGATION_KEYS,
)

KeyHandler = Callable[["KeyEvent"], None]


@dataclass
class KeyEvent:
    """A single key press delivered to a controller."""

    key: str
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False
    default_prevented: bool = field(default=False, compare=False)

    def prevent_default(self) -> None:
        """Mark the host's default action for this key as suppressed."""
        self.default_prevented = True

    @property
    def is_tab(self) -> bool:
        return self.key == KEY_TAB


def is_activation_key(key: str) -> bool:
    """Check if a key is an activation key (Enter or Space)."""
    return key in ACTIVATION_KEYS


def is_arrow_key(key: str) -> bool:
    return key in ARROW_KEYS


def is_navigation_key(key: str) -> bool:
    """Check if a key is Home, End, PageUp or PageDown."""
    return key in NAVIGATION_KEYS


def is_escape_key(key: str) -> bool:
    return key == KEY_ESCAPE


def has_modifier_key(event: KeyEvent) -> bool:
    """Check if any modifier (Ctrl, Meta, Alt, Shift) is held."""
    return event.ctrl or event.meta or event.alt or event.shift


def create_key_handler(keys: Iterable[str], handler: KeyHandler) -> KeyHandler:
    """
    Create a handler that only fires for the given keys.

    Args:
        keys: Key names to react to
        handler: Callable invoked with the event

    Returns:
        A handler that ignores every other key
    """
    accepted = frozenset(keys)

    def _on_key(event: KeyEvent) -> None:
        if event.key in accepted:
            handler(event)

    return _on_key


def create_activation_handler(handler: KeyHandler) -> KeyHandler:
    """Create a handler for Enter/Space that also suppresses the default action."""

    def _activate(event: KeyEvent) -> None:
        event.prevent_default()
        handler(event)

    return create_key_handler(ACTIVATION_KEYS, _activate)


def create_arrow_key_handler(handler: KeyHandler) -> KeyHandler:
    return create_key_handler(ARROW_KEYS, handler)
