"""Tests for focus_core/roving.py - Arrow/Home/End navigation."""

import pytest

from focus_core.keyboard import KeyEvent
from focus_core.roving import (
    ActivationMode,
    NavItem,
    Orientation,
    RovingNavigator,
    WrapPolicy,
    create_roving_key_handler,
    key_delta,
    resolve_index,
)

pytestmark = pytest.mark.unit

# Five items, index 2 disabled
DISABLED = [False, False, True, False, False]
ITEMS = [NavItem(f"item-{i}", disabled=d) for i, d in enumerate(DISABLED)]


# =============================================================================
# resolve_index
# =============================================================================


class TestResolveIndex:
    """Pure index resolution."""

    def test_arrow_skips_disabled(self):
        assert resolve_index(1, "ArrowRight", DISABLED) == 3

    def test_arrow_left_skips_disabled(self):
        assert resolve_index(3, "ArrowLeft", DISABLED) == 1

    def test_end_lands_on_last(self):
        assert resolve_index(1, "End", DISABLED) == 4

    def test_home_lands_on_first(self):
        assert resolve_index(3, "Home", DISABLED) == 0

    def test_wrap_from_last(self):
        assert resolve_index(4, "ArrowRight", DISABLED, wrap_policy=WrapPolicy.WRAP) == 0

    def test_wrap_from_first_backwards(self):
        assert resolve_index(0, "ArrowLeft", DISABLED, wrap_policy=WrapPolicy.WRAP) == 4

    def test_clamp_at_last(self):
        assert resolve_index(4, "ArrowRight", DISABLED, wrap_policy=WrapPolicy.CLAMP) == 4

    def test_clamp_at_first(self):
        assert resolve_index(0, "ArrowLeft", DISABLED, wrap_policy=WrapPolicy.CLAMP) == 0

    def test_home_skips_disabled_leading_items(self):
        assert resolve_index(3, "Home", [True, True, False, False]) == 2

    def test_end_skips_disabled_trailing_items(self):
        assert resolve_index(0, "End", [False, False, True]) == 1

    def test_clamp_with_only_disabled_ahead_stays(self):
        assert resolve_index(1, "ArrowRight", [False, False, True], wrap_policy=WrapPolicy.CLAMP) == 1

    def test_all_disabled_returns_current(self):
        assert resolve_index(1, "ArrowRight", [True, True, True]) == 1

    def test_empty_collection_returns_current(self):
        assert resolve_index(0, "End", []) == 0

    def test_single_enabled_item_wraps_to_itself(self):
        assert resolve_index(1, "ArrowRight", [True, False, True]) == 1

    def test_out_of_range_current_is_clamped(self):
        assert resolve_index(9, "ArrowLeft", DISABLED, wrap_policy=WrapPolicy.CLAMP) == 3

    def test_other_axis_not_handled(self):
        assert resolve_index(1, "ArrowDown", DISABLED, Orientation.HORIZONTAL) is None
        assert resolve_index(1, "ArrowRight", DISABLED, Orientation.VERTICAL) is None

    def test_both_orientation_accepts_all_arrows(self):
        assert resolve_index(1, "ArrowDown", DISABLED, Orientation.BOTH) == 3
        assert resolve_index(3, "ArrowLeft", DISABLED, Orientation.BOTH) == 1

    def test_non_navigation_key(self):
        assert resolve_index(1, "a", DISABLED) is None

    @pytest.mark.parametrize("key, orientation, expected", [
        ("ArrowRight", Orientation.HORIZONTAL, 1),
        ("ArrowLeft", Orientation.HORIZONTAL, -1),
        ("ArrowDown", Orientation.VERTICAL, 1),
        ("ArrowUp", Orientation.VERTICAL, -1),
        ("ArrowUp", Orientation.HORIZONTAL, None),
    ])
    def test_key_delta(self, key, orientation, expected):
        assert key_delta(key, orientation) == expected


# =============================================================================
# RovingNavigator
# =============================================================================


class TestRovingNavigator:
    """Callbacks and activation modes."""

    @pytest.fixture
    def calls(self):
        return {"focus": [], "select": []}

    def make(self, calls, **kwargs):
        return RovingNavigator(
            on_focus=calls["focus"].append,
            on_select=calls["select"].append,
            **kwargs,
        )

    def test_automatic_focuses_and_selects(self, calls):
        navigator = self.make(calls)
        event = KeyEvent("ArrowRight")

        result = navigator.handle_key(event, 1, ITEMS)

        assert result.index == 3
        assert result.moved and result.selected and result.handled
        assert event.default_prevented
        assert calls == {"focus": [3], "select": [3]}

    def test_manual_only_focuses(self, calls):
        navigator = self.make(calls, activation_mode=ActivationMode.MANUAL)

        result = navigator.handle_key(KeyEvent("End"), 1, ITEMS)

        assert result.index == 4
        assert not result.selected
        assert calls == {"focus": [4], "select": []}

    @pytest.mark.parametrize("key", ["Enter", " "])
    def test_manual_activation_selects_current(self, calls, key):
        navigator = self.make(calls, activation_mode=ActivationMode.MANUAL)
        event = KeyEvent(key)

        result = navigator.handle_key(event, 3, ITEMS)

        assert result.selected and result.handled
        assert event.default_prevented
        assert calls["select"] == [3]

    def test_manual_activation_ignores_disabled_item(self, calls):
        navigator = self.make(calls, activation_mode=ActivationMode.MANUAL)
        result = navigator.handle_key(KeyEvent("Enter"), 2, ITEMS)
        assert not result.handled
        assert calls["select"] == []

    def test_automatic_mode_ignores_activation_keys(self, calls):
        navigator = self.make(calls)
        event = KeyEvent("Enter")
        assert not navigator.handle_key(event, 1, ITEMS).handled
        assert not event.default_prevented

    def test_blocked_move_is_handled_without_callbacks(self, calls):
        navigator = self.make(calls, wrap_policy=WrapPolicy.CLAMP)
        event = KeyEvent("ArrowRight")

        result = navigator.handle_key(event, 4, ITEMS)

        assert result.handled and not result.moved
        assert event.default_prevented
        assert calls == {"focus": [], "select": []}

    def test_unrelated_key_passes_through(self, calls):
        navigator = self.make(calls)
        event = KeyEvent("x")
        result = navigator.handle_key(event, 1, ITEMS)
        assert not result.handled
        assert result.index == 1
        assert not event.default_prevented

    def test_callback_failure_is_logged(self, caplog):
        def broken(index):
            raise RuntimeError("widget gone")

        navigator = RovingNavigator(on_focus=broken)
        result = navigator.handle_key(KeyEvent("ArrowRight"), 0, ITEMS)

        assert result.index == 1
        assert "callback failed" in caplog.text

    def test_create_roving_key_handler(self, calls):
        handle = create_roving_key_handler(
            Orientation.VERTICAL,
            WrapPolicy.CLAMP,
            on_focus=calls["focus"].append,
        )
        result = handle(KeyEvent("ArrowDown"), 1, ITEMS)
        assert result.index == 3
        assert calls["focus"] == [3]
