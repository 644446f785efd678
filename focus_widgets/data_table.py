"""
focus_widgets.data_table

Accessible data table model: row focus navigation, row selection and sort
state with live-region announcements.

WCAG Compliance:
- 1.3.1 Info and Relationships: aria-sort / aria-selected attributes
- 2.1.1 Keyboard: Arrow keys, Home/End row navigation, Space to select
- 4.1.3 Status Messages: sort changes announced politely
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from focus_core.config import FocusConfig
from focus_core.constants import KEY_ENTER, KEY_SPACE
from focus_core.focus_registry import FocusRegistry
from focus_core.interfaces import IFocusHost
from focus_core.keyboard import KeyEvent
from focus_core.live_announcer import LiveRegionBinding, Politeness
from focus_core.roving import (
    ActivationMode,
    NavigationResult,
    NavItem,
    Orientation,
    RovingNavigator,
    WrapPolicy,
)

logger = logging.getLogger(__name__)

ASCENDING = "asc"
DESCENDING = "desc"


@dataclass(frozen=True)
class DataTableColumn:
    """Column definition."""
    key: str
    header: str
    sortable: bool = False


@dataclass(frozen=True)
class SortConfig:
    column: str
    direction: str = ASCENDING

    @property
    def label(self) -> str:
        return "ascending" if self.direction == ASCENDING else "descending"


class DataTableModel:
    """
    Keyboard and selection state for a data table.

    Rows are identified by id. Focus moves between rows with the roving
    navigator (clamped at both ends by default); selection changes only
    through Space, ``toggle_row`` or ``toggle_all``.
    """

    def __init__(
        self,
        host: IFocusHost,
        row_ids: Sequence[str],
        columns: Sequence[DataTableColumn],
        *,
        selectable: bool = False,
        selected_rows: Sequence[str] = (),
        sort_config: Optional[SortConfig] = None,
        on_selection_change: Optional[Callable[[List[str]], None]] = None,
        on_sort_change: Optional[Callable[[str, str], None]] = None,
        wrap_policy: Optional[WrapPolicy] = None,
        caption: Optional[str] = None,
        config: Optional[FocusConfig] = None,
    ):
        self._registry = FocusRegistry(host)
        self._row_ids: List[str] = list(row_ids)
        self._columns: List[DataTableColumn] = list(columns)
        self._row_elements: Dict[str, Any] = {}
        self.selectable = selectable
        self.caption = caption
        self._selected: List[str] = [r for r in selected_rows if r in self._row_ids]
        self._sort_config = sort_config
        self._on_selection_change = on_selection_change
        self._on_sort_change = on_sort_change
        self._focused_row: Optional[str] = None

        if wrap_policy is None:
            wrap_policy = config.table_wrap_policy if config else WrapPolicy.CLAMP

        self._navigator = RovingNavigator(
            Orientation.VERTICAL,
            wrap_policy,
            ActivationMode.MANUAL,
            on_focus=self._focus_row_index,
        )
        self._sort_binding = LiveRegionBinding(
            Politeness.POLITE,
            clear_on_unmount=config.clear_on_unmount if config else None,
        )
        self._sort_binding.update(self.sort_announcement)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def row_ids(self) -> List[str]:
        return list(self._row_ids)

    @property
    def selected_rows(self) -> List[str]:
        return list(self._selected)

    @property
    def focused_row(self) -> Optional[str]:
        return self._focused_row

    @property
    def sort_config(self) -> Optional[SortConfig]:
        return self._sort_config

    @property
    def all_selected(self) -> bool:
        return bool(self._row_ids) and len(self._selected) == len(self._row_ids)

    @property
    def some_selected(self) -> bool:
        return 0 < len(self._selected) < len(self._row_ids)

    def register_row(self, row_id: str, element: Any) -> None:
        if element is None:
            self._row_elements.pop(row_id, None)
        else:
            self._row_elements[row_id] = element

    def set_rows(self, row_ids: Sequence[str]) -> None:
        """Replace the rows, dropping selection and focus for removed ones."""
        self._row_ids = list(row_ids)
        self._selected = [r for r in self._selected if r in self._row_ids]
        if self._focused_row not in self._row_ids:
            self._focused_row = None

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------

    def handle_key(self, event: KeyEvent, row_id: str) -> NavigationResult:
        """
        Handle a key pressed on a row.

        Arrow Up/Down and Home/End move row focus; Space toggles the row's
        selection when the table is selectable.
        """
        if row_id not in self._row_ids:
            logger.debug(f"Key on unknown row {row_id}")
            return NavigationResult.unhandled(None)

        index = self._row_ids.index(row_id)
        if event.key == KEY_SPACE:
            if not self.selectable:
                return NavigationResult.unhandled(index)
            event.prevent_default()
            self.toggle_row(row_id)
            return NavigationResult(index=index, selected=True, handled=True)

        if event.key == KEY_ENTER:
            return NavigationResult.unhandled(index)

        nav_items = [NavItem(r) for r in self._row_ids]
        return self._navigator.handle_key(event, index, nav_items)

    def _focus_row_index(self, index: int) -> None:
        row_id = self._row_ids[index]
        self._focused_row = row_id
        element = self._row_elements.get(row_id)
        if element is not None:
            self._registry.safe_focus(element)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle_row(self, row_id: str) -> None:
        if not self.selectable or row_id not in self._row_ids:
            return
        if row_id in self._selected:
            self._selected = [r for r in self._selected if r != row_id]
        else:
            self._selected = [*self._selected, row_id]
        self._notify_selection()

    def toggle_all(self) -> None:
        """Select every row, or clear the selection when all are selected."""
        if not self.selectable:
            return
        self._selected = [] if self.all_selected else list(self._row_ids)
        self._notify_selection()

    def _notify_selection(self) -> None:
        if self._on_selection_change:
            self._on_selection_change(list(self._selected))

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def _column(self, key: str) -> Optional[DataTableColumn]:
        return next((c for c in self._columns if c.key == key), None)

    @property
    def sort_announcement(self) -> Optional[str]:
        if self._sort_config is None:
            return None
        column = self._column(self._sort_config.column)
        header = column.header if column else self._sort_config.column
        return f"Sorted by {header}, {self._sort_config.label}"

    def sort(self, column_key: str) -> Optional[SortConfig]:
        """
        Toggle sorting on a column.

        The same column flips asc -> desc -> asc; a new column starts asc.

        Returns:
            The new sort configuration, or None for unsortable columns
        """
        column = self._column(column_key)
        if column is None or not column.sortable:
            return None

        current = self._sort_config
        direction = (
            DESCENDING
            if current is not None and current.column == column_key and current.direction == ASCENDING
            else ASCENDING
        )
        self._sort_config = SortConfig(column_key, direction)
        self._sort_binding.update(self.sort_announcement)
        if self._on_sort_change:
            self._on_sort_change(column_key, direction)
        return self._sort_config

    def unmount(self) -> None:
        self._sort_binding.unmount()

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def header_attributes(self, column_key: str) -> Dict[str, Any]:
        attrs: Dict[str, Any] = {"scope": "col"}
        column = self._column(column_key)
        if column is None or not column.sortable:
            return attrs
        if self._sort_config and self._sort_config.column == column_key:
            attrs["aria-sort"] = "ascending" if self._sort_config.direction == ASCENDING else "descending"
        else:
            attrs["aria-sort"] = "none"
        return attrs

    def row_attributes(self, row_id: str) -> Dict[str, Any]:
        attrs: Dict[str, Any] = {"tabindex": 0}
        if self.selectable:
            attrs["aria-selected"] = row_id in self._selected
        return attrs

    def select_all_attributes(self) -> Dict[str, Any]:
        if self.all_selected:
            checked = "true"
        elif self.some_selected:
            checked = "mixed"
        else:
            checked = "false"
        return {"aria-checked": checked, "aria-label": "Select all rows"}
