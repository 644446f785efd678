"""
Focus Core - Toolkit-independent focus and keyboard interaction engine.

This package decides which element holds focus, contains focus inside
dialogs, returns focus to the trigger when they close, drives roving
keyboard navigation for composite widgets, and announces changes to
assistive technology:
- Focus registry (eligibility queries, safe focusing)
- Focus trap and focus return controllers
- Roving navigation for tab lists and table rows
- Live announcer (one surface per politeness level)

Usage:
    from focus_core import (
        FocusRegistry,
        FocusTrap,
        FocusReturn,
        create_roving_key_handler,
        announce,
    )
"""

from focus_core.focus_registry import FocusRegistry, is_eligible
from focus_core.focus_trap import FocusTrap, TrapState
from focus_core.focus_return import FocusReturn
from focus_core.keyboard import KeyEvent
from focus_core.live_announcer import (
    Announcement,
    LiveAnnouncer,
    LiveRegionBinding,
    Politeness,
    announce,
    announce_assertive,
    announce_polite,
    get_live_announcer,
)
from focus_core.roving import (
    ActivationMode,
    NavigationResult,
    NavItem,
    Orientation,
    RovingNavigator,
    WrapPolicy,
    create_roving_key_handler,
    resolve_index,
)

__all__ = [
    # Registry
    "FocusRegistry",
    "is_eligible",
    # Trap / return
    "FocusTrap",
    "TrapState",
    "FocusReturn",
    # Keyboard
    "KeyEvent",
    # Roving navigation
    "ActivationMode",
    "NavigationResult",
    "NavItem",
    "Orientation",
    "RovingNavigator",
    "WrapPolicy",
    "create_roving_key_handler",
    "resolve_index",
    # Announcer
    "Announcement",
    "LiveAnnouncer",
    "LiveRegionBinding",
    "Politeness",
    "announce",
    "announce_assertive",
    "announce_polite",
    "get_live_announcer",
]
