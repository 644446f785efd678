"""
focus_widgets.tabs

Accessible tabs model: selection state plus roving-tabindex keyboard
behaviour delegated to ``RovingNavigator``.

WCAG Compliance:
- 2.1.1 Keyboard: Arrow key navigation, Home/End support
- 2.4.3 Focus Order: only the selected tab is a Tab stop
- 4.1.2 Name, Role, Value: ARIA tabs pattern attributes
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from focus_core.aria import get_aria_label, get_current_attributes, get_selected_attributes
from focus_core.config import FocusConfig
from focus_core.focus_registry import FocusRegistry
from focus_core.interfaces import IFocusHost
from focus_core.keyboard import KeyEvent
from focus_core.roving import (
    ActivationMode,
    NavigationResult,
    NavItem,
    Orientation,
    RovingNavigator,
    WrapPolicy,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TabItem:
    """One tab: id, visible label and whether it can be chosen."""
    id: str
    label: str
    disabled: bool = False


class TabsModel:
    """
    State and keyboard handling for a tab list.

    The model owns the selected id; focus moves go through the host and the
    tab elements registered with ``register_tab``.
    """

    def __init__(
        self,
        host: IFocusHost,
        items: Sequence[TabItem],
        *,
        default_selected_id: Optional[str] = None,
        orientation: Orientation = Orientation.HORIZONTAL,
        activation_mode: Optional[ActivationMode] = None,
        wrap_policy: Optional[WrapPolicy] = None,
        on_selection_change: Optional[Callable[[str], None]] = None,
        aria_label: Optional[str] = None,
        config: Optional[FocusConfig] = None,
    ):
        if orientation is Orientation.BOTH:
            raise ValueError("Tab lists are horizontal or vertical")

        self._registry = FocusRegistry(host)
        self._items: List[TabItem] = list(items)
        self._elements: Dict[str, Any] = {}
        self._on_selection_change = on_selection_change
        self.orientation = orientation
        self.aria_label = aria_label

        if activation_mode is None:
            activation_mode = config.activation_mode if config else ActivationMode.AUTOMATIC
        if wrap_policy is None:
            wrap_policy = config.tabs_wrap_policy if config else WrapPolicy.WRAP

        self._selected_id: Optional[str] = default_selected_id or (
            self._items[0].id if self._items else None
        )
        self._focused_index = self.selected_index

        self._navigator = RovingNavigator(
            orientation,
            wrap_policy,
            activation_mode,
            on_select=self._select_index,
            on_focus=self._focus_index,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def items(self) -> List[TabItem]:
        return list(self._items)

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected_index(self) -> int:
        for index, item in enumerate(self._items):
            if item.id == self._selected_id:
                return index
        return -1

    @property
    def selected_item(self) -> Optional[TabItem]:
        index = self.selected_index
        return self._items[index] if index >= 0 else None

    @property
    def focused_index(self) -> int:
        return self._focused_index

    @property
    def activation_mode(self) -> ActivationMode:
        return self._navigator.activation_mode

    def register_tab(self, tab_id: str, element: Any) -> None:
        """Associate a host element with a tab (None unregisters)."""
        if element is None:
            self._elements.pop(tab_id, None)
        else:
            self._elements[tab_id] = element

    def select(self, tab_id: str) -> bool:
        """Select a tab by id, e.g. on click. Disabled tabs are ignored."""
        for index, item in enumerate(self._items):
            if item.id == tab_id:
                if item.disabled:
                    return False
                self._focused_index = index
                self._select_index(index)
                return True
        logger.warning(f"Unknown tab id: {tab_id}")
        return False

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------

    def handle_key(self, event: KeyEvent, index: Optional[int] = None) -> NavigationResult:
        """
        Handle a key pressed on a tab.

        Args:
            event: Key event
            index: Index of the tab that received the key (focused tab
                   when omitted)
        """
        current = self._focused_index if index is None else index
        nav_items = [NavItem(item.id, item.disabled) for item in self._items]
        return self._navigator.handle_key(event, current, nav_items)

    def _select_index(self, index: int) -> None:
        tab_id = self._items[index].id
        if tab_id == self._selected_id:
            return
        self._selected_id = tab_id
        if self._on_selection_change:
            self._on_selection_change(tab_id)

    def _focus_index(self, index: int) -> None:
        self._focused_index = index
        element = self._elements.get(self._items[index].id)
        if element is None:
            logger.debug(f"No element registered for tab {self._items[index].id}")
            return
        self._registry.safe_focus(element)

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def tablist_attributes(self) -> Dict[str, Any]:
        return {
            "role": "tablist",
            "aria-orientation": self.orientation.value,
            **get_aria_label(self.aria_label),
        }

    def tab_attributes(self, tab_id: str) -> Dict[str, Any]:
        """Roving tabindex: only the selected tab is reachable with Tab."""
        item = next(i for i in self._items if i.id == tab_id)
        selected = tab_id == self._selected_id
        attrs: Dict[str, Any] = {
            "id": f"tab-{tab_id}",
            "role": "tab",
            "aria-controls": f"tabpanel-{tab_id}",
            "tabindex": 0 if selected else -1,
            **get_selected_attributes(selected),
            **get_current_attributes("page" if selected else None),
        }
        if item.disabled:
            attrs["disabled"] = True
        return attrs

    def panel_attributes(self) -> Dict[str, Any]:
        if self._selected_id is None:
            return {}
        return {
            "id": f"tabpanel-{self._selected_id}",
            "role": "tabpanel",
            "aria-labelledby": f"tab-{self._selected_id}",
        }
