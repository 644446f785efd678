"""
Roving Navigation - Arrow/Home/End navigation for composite widgets.

One algorithm serves tab lists and data-table rows; only orientation and
wrap policy differ. The controller never holds widget state: it takes the
current index and item flags and returns where focus (and, in automatic
mode, selection) should go next.

Usage:
    from focus_core.roving import (
        NavItem, Orientation, WrapPolicy, ActivationMode,
        create_roving_key_handler,
    )

    handle = create_roving_key_handler(
        orientation=Orientation.HORIZONTAL,
        wrap_policy=WrapPolicy.WRAP,
        activation_mode=ActivationMode.AUTOMATIC,
        on_select=select_tab,
        on_focus=focus_tab,
    )
    result = handle(event, current_index, items)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from focus_core.constants import (
    KEY_ARROW_DOWN,
    KEY_ARROW_LEFT,
    KEY_ARROW_RIGHT,
    KEY_ARROW_UP,
    KEY_END,
    KEY_HOME,
)
from focus_core.errors import EmptyCollection
from focus_core.keyboard import KeyEvent, is_activation_key

logger = logging.getLogger(__name__)

IndexCallback = Callable[[int], None]


class Orientation(Enum):
    """Which arrow keys move the current item."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    BOTH = "both"


class WrapPolicy(Enum):
    """Behaviour at either end of the collection."""
    WRAP = "wrap"    # last -> first (tab lists)
    CLAMP = "clamp"  # stop at the boundary (table rows)


class ActivationMode(Enum):
    """Whether moving focus also selects."""
    AUTOMATIC = "automatic"
    MANUAL = "manual"  # selection waits for Enter/Space


@dataclass(frozen=True)
class NavItem:
    """One entry of a navigable collection."""
    id: str
    disabled: bool = False


@dataclass(frozen=True)
class NavigationResult:
    """Decision produced for one key press."""
    index: Optional[int]
    moved: bool = False
    selected: bool = False
    handled: bool = False

    @classmethod
    def unhandled(cls, index: Optional[int]) -> "NavigationResult":
        return cls(index=index)


_FORWARD_KEYS = {
    KEY_ARROW_RIGHT: (Orientation.HORIZONTAL, Orientation.BOTH),
    KEY_ARROW_DOWN: (Orientation.VERTICAL, Orientation.BOTH),
}
_BACKWARD_KEYS = {
    KEY_ARROW_LEFT: (Orientation.HORIZONTAL, Orientation.BOTH),
    KEY_ARROW_UP: (Orientation.VERTICAL, Orientation.BOTH),
}


def key_delta(key: str, orientation: Orientation) -> Optional[int]:
    """
    Map an arrow key to a step for the given orientation.

    Returns:
        +1, -1, or None when the key does not move along this axis
    """
    if key in _FORWARD_KEYS and orientation in _FORWARD_KEYS[key]:
        return 1
    if key in _BACKWARD_KEYS and orientation in _BACKWARD_KEYS[key]:
        return -1
    return None


def _step(index: int, direction: int, count: int, wrap_policy: WrapPolicy) -> Optional[int]:
    """One step; None when a clamped boundary blocks progress."""
    nxt = index + direction
    if wrap_policy is WrapPolicy.WRAP:
        return nxt % count
    if nxt < 0 or nxt >= count:
        return None
    return nxt


def _seek(
    start: int,
    direction: int,
    disabled: Sequence[bool],
    wrap_policy: WrapPolicy,
    origin: int,
) -> int:
    """
    Skip disabled items from start, stepping in direction.

    Stops on the first enabled item. Returns origin when the walk revisits
    it or runs into a clamped boundary.
    """
    count = len(disabled)
    index = start
    for _ in range(count):
        if not disabled[index]:
            return index
        nxt = _step(index, direction, count, wrap_policy)
        if nxt is None or nxt == origin:
            return origin
        index = nxt
    return origin


def resolve_index(
    current: int,
    key: str,
    disabled: Sequence[bool],
    orientation: Orientation = Orientation.HORIZONTAL,
    wrap_policy: WrapPolicy = WrapPolicy.WRAP,
) -> Optional[int]:
    """
    Compute the target index for a navigation key.

    Args:
        current: Index of the current item
        key: Key name
        disabled: Per-item disabled flags, in order
        orientation: Axis the arrow keys follow
        wrap_policy: Wrap around or clamp at the ends

    Returns:
        Target index (equal to current when nothing can move), or None when
        the key is not a navigation key for this orientation.
    """
    count = len(disabled)
    delta = key_delta(key, orientation)
    if key not in (KEY_HOME, KEY_END) and delta is None:
        return None

    if count == 0 or all(disabled):
        logger.debug(str(EmptyCollection("roving navigation", count)))
        return current

    origin = min(max(current, 0), count - 1)

    if key == KEY_HOME:
        return _seek(0, 1, disabled, WrapPolicy.CLAMP, origin)
    if key == KEY_END:
        return _seek(count - 1, -1, disabled, WrapPolicy.CLAMP, origin)

    assert delta is not None
    target = _step(origin, delta, count, wrap_policy)
    if target is None:
        return origin
    return _seek(target, delta, disabled, wrap_policy, origin)


class RovingNavigator:
    """
    Key handler for roving-tabindex widgets.

    In AUTOMATIC mode a move focuses and selects the new item. In MANUAL
    mode a move only focuses it; Enter/Space select the current item.
    """

    def __init__(
        self,
        orientation: Orientation = Orientation.HORIZONTAL,
        wrap_policy: WrapPolicy = WrapPolicy.WRAP,
        activation_mode: ActivationMode = ActivationMode.AUTOMATIC,
        *,
        on_select: Optional[IndexCallback] = None,
        on_focus: Optional[IndexCallback] = None,
    ):
        """
        Initialize navigator.

        Args:
            orientation: Which arrows move the current item
            wrap_policy: Wrap around or clamp at the ends
            activation_mode: Whether moving also selects
            on_select: Callback when selection should change (receives index)
            on_focus: Callback when focus should move (receives index)
        """
        self.orientation = orientation
        self.wrap_policy = wrap_policy
        self.activation_mode = activation_mode
        self._on_select = on_select
        self._on_focus = on_focus

    def handle_key(
        self,
        event: KeyEvent,
        current: int,
        items: Sequence[NavItem],
    ) -> NavigationResult:
        """
        Decide what one key press does to the collection.

        Returns:
            NavigationResult; handled keys also get ``prevent_default()``
        """
        if is_activation_key(event.key):
            return self._handle_activation(event, current, items)

        disabled = [item.disabled for item in items]
        target = resolve_index(current, event.key, disabled, self.orientation, self.wrap_policy)
        if target is None:
            return NavigationResult.unhandled(current)

        event.prevent_default()
        moved = target != current
        if not moved:
            return NavigationResult(index=current, handled=True)

        self._emit(self._on_focus, target)
        selected = self.activation_mode is ActivationMode.AUTOMATIC
        if selected:
            self._emit(self._on_select, target)
        return NavigationResult(index=target, moved=True, selected=selected, handled=True)

    def _handle_activation(
        self,
        event: KeyEvent,
        current: int,
        items: Sequence[NavItem],
    ) -> NavigationResult:
        if self.activation_mode is not ActivationMode.MANUAL:
            return NavigationResult.unhandled(current)
        if not 0 <= current < len(items) or items[current].disabled:
            return NavigationResult.unhandled(current)

        event.prevent_default()
        self._emit(self._on_select, current)
        return NavigationResult(index=current, selected=True, handled=True)

    @staticmethod
    def _emit(callback: Optional[IndexCallback], index: int) -> None:
        if callback is None:
            return
        try:
            callback(index)
        except Exception as exc:  # widget callback boundary
            logger.error(f"Roving navigation callback failed for index {index}: {exc}")


def create_roving_key_handler(
    orientation: Orientation = Orientation.HORIZONTAL,
    wrap_policy: WrapPolicy = WrapPolicy.WRAP,
    activation_mode: ActivationMode = ActivationMode.AUTOMATIC,
    *,
    on_select: Optional[IndexCallback] = None,
    on_focus: Optional[IndexCallback] = None,
) -> Callable[[KeyEvent, int, Sequence[NavItem]], NavigationResult]:
    """
    Create a roving-navigation key handler.

    Example:
        handle = create_roving_key_handler(
            Orientation.VERTICAL, WrapPolicy.CLAMP, on_focus=focus_row,
        )
        handle(KeyEvent("ArrowDown"), 3, rows)
    """
    navigator = RovingNavigator(
        orientation,
        wrap_policy,
        activation_mode,
        on_select=on_select,
        on_focus=on_focus,
    )
    return navigator.handle_key
