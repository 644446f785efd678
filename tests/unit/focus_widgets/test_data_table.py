"""Tests for focus_widgets/data_table.py - Data table model."""

import pytest

from focus_core.keyboard import KeyEvent
from focus_core.live_announcer import Politeness
from focus_core.roving import WrapPolicy
from focus_widgets.data_table import DataTableColumn, DataTableModel, SortConfig

pytestmark = pytest.mark.unit

COLUMNS = [
    DataTableColumn("name", "Name", sortable=True),
    DataTableColumn("price", "Price", sortable=True),
    DataTableColumn("notes", "Notes"),
]
ROWS = ["r1", "r2", "r3"]


@pytest.fixture
def table(tree, surfaces):
    """Selectable table with one host element per row."""
    body = tree.add("tbody", tab_reachable=False)
    selections = []
    sorts = []
    model = DataTableModel(
        tree,
        ROWS,
        COLUMNS,
        selectable=True,
        on_selection_change=selections.append,
        on_sort_change=lambda key, direction: sorts.append((key, direction)),
    )
    for row_id in ROWS:
        model.register_row(row_id, tree.add(f"row-{row_id}", parent=body))
    return model, selections, sorts


class TestRowNavigation:

    def test_arrow_down_moves_focus(self, tree, table):
        model, selections, _ = table

        result = model.handle_key(KeyEvent("ArrowDown"), "r1")

        assert result.index == 1
        assert model.focused_row == "r2"
        assert tree.active_element().name == "row-r2"
        assert selections == []

    def test_arrow_down_at_last_row_stays(self, tree, table):
        model, _, _ = table
        event = KeyEvent("ArrowDown")

        result = model.handle_key(event, "r3")

        assert result.index == 2
        assert result.handled and not result.moved
        assert event.default_prevented

    def test_arrow_up_at_first_row_stays(self, table):
        model, _, _ = table
        assert model.handle_key(KeyEvent("ArrowUp"), "r1").index == 0

    def test_home_end(self, tree, table):
        model, _, _ = table
        model.handle_key(KeyEvent("End"), "r1")
        assert tree.active_element().name == "row-r3"
        model.handle_key(KeyEvent("Home"), "r3")
        assert tree.active_element().name == "row-r1"

    def test_horizontal_arrows_ignored(self, table):
        model, _, _ = table
        assert not model.handle_key(KeyEvent("ArrowRight"), "r1").handled

    def test_wrap_policy_override(self, tree, surfaces):
        model = DataTableModel(tree, ROWS, COLUMNS, wrap_policy=WrapPolicy.WRAP)
        assert model.handle_key(KeyEvent("ArrowDown"), "r3").index == 0

    def test_unknown_row(self, table):
        model, _, _ = table
        result = model.handle_key(KeyEvent("ArrowDown"), "missing")
        assert not result.handled
        assert result.index is None

    def test_enter_not_handled(self, table):
        model, selections, _ = table
        assert not model.handle_key(KeyEvent("Enter"), "r1").handled
        assert selections == []


class TestSelection:

    def test_space_toggles_row(self, table):
        model, selections, _ = table
        event = KeyEvent(" ")

        result = model.handle_key(event, "r2")

        assert result.handled
        assert event.default_prevented
        assert model.selected_rows == ["r2"]

        model.handle_key(KeyEvent(" "), "r2")
        assert model.selected_rows == []
        assert selections == [["r2"], []]

    def test_space_ignored_when_not_selectable(self, tree, surfaces):
        model = DataTableModel(tree, ROWS, COLUMNS)
        event = KeyEvent(" ")
        assert not model.handle_key(event, "r1").handled
        assert not event.default_prevented

    def test_toggle_all(self, table):
        model, _, _ = table
        model.toggle_all()
        assert model.selected_rows == ROWS
        model.toggle_all()
        assert model.selected_rows == []

    def test_select_all_tristate(self, table):
        model, _, _ = table
        assert model.select_all_attributes()["aria-checked"] == "false"
        model.toggle_row("r1")
        assert model.select_all_attributes()["aria-checked"] == "mixed"
        model.toggle_all()
        assert model.select_all_attributes()["aria-checked"] == "true"

    def test_row_attributes(self, table):
        model, _, _ = table
        model.toggle_row("r1")
        assert model.row_attributes("r1") == {"tabindex": 0, "aria-selected": True}
        assert model.row_attributes("r2")["aria-selected"] is False

    def test_set_rows_drops_removed_selection(self, table):
        model, _, _ = table
        model.toggle_row("r1")
        model.toggle_row("r3")
        model.handle_key(KeyEvent("ArrowDown"), "r2")

        model.set_rows(["r1", "r2"])

        assert model.selected_rows == ["r1"]
        assert model.focused_row is None

    def test_initial_selection_filtered(self, tree, surfaces):
        model = DataTableModel(tree, ROWS, COLUMNS, selectable=True, selected_rows=["r1", "zz"])
        assert model.selected_rows == ["r1"]


class TestSorting:

    def test_sort_toggles_direction(self, table):
        model, _, sorts = table

        assert model.sort("name") == SortConfig("name", "asc")
        assert model.sort("name") == SortConfig("name", "desc")
        assert model.sort("name") == SortConfig("name", "asc")
        assert model.sort("price") == SortConfig("price", "asc")
        assert sorts == [("name", "asc"), ("name", "desc"), ("name", "asc"), ("price", "asc")]

    def test_unsortable_column(self, table):
        model, _, sorts = table
        assert model.sort("notes") is None
        assert model.sort("missing") is None
        assert sorts == []

    def test_sort_announced_politely(self, table, surfaces):
        model, _, _ = table

        model.sort("price")
        polite = surfaces.surfaces[Politeness.POLITE]
        assert polite.text == "Sorted by Price, ascending"

        model.sort("price")
        assert polite.text == "Sorted by Price, descending"

    def test_initial_sort_announced(self, tree, surfaces):
        DataTableModel(tree, ROWS, COLUMNS, sort_config=SortConfig("name", "desc"))
        assert surfaces.surfaces[Politeness.POLITE].text == "Sorted by Name, descending"

    def test_unmount_clears_announcement(self, table, surfaces):
        model, _, _ = table
        model.sort("name")
        model.unmount()
        assert surfaces.surfaces[Politeness.POLITE].text == ""

    def test_header_aria_sort(self, table):
        model, _, _ = table
        model.sort("name")
        model.sort("name")

        assert model.header_attributes("name") == {"scope": "col", "aria-sort": "descending"}
        assert model.header_attributes("price")["aria-sort"] == "none"
        assert "aria-sort" not in model.header_attributes("notes")
