"""Tests for focus_widgets/toast.py - Toast notification stack."""

import pytest

from focus_core.keyboard import KeyEvent
from focus_core.live_announcer import Politeness
from focus_widgets.toast import ToastStack, ToastType

pytestmark = pytest.mark.unit


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms / 1000


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def stack(clock, surfaces):
    changes = []
    stack = ToastStack(clock=clock, on_change=changes.append)
    stack.changes = changes
    return stack


class TestToastAnnouncements:

    def test_info_is_polite(self, stack, surfaces):
        toast = stack.add_toast("Settings saved", ToastType.SUCCESS)

        assert toast.id == "toast-1"
        assert toast.attributes["role"] == "status"
        assert surfaces.surfaces[Politeness.POLITE].text == "Settings saved"

    def test_error_is_assertive(self, stack, surfaces):
        toast = stack.add_toast("Server unavailable", ToastType.ERROR)

        assert toast.attributes == {
            "role": "alert",
            "aria-live": "assertive",
            "aria-atomic": "true",
            "tabindex": 0,
        }
        assert surfaces.surfaces[Politeness.ASSERTIVE].text == "Server unavailable"
        assert Politeness.POLITE not in surfaces.surfaces

    def test_repeated_message_announced_again(self, stack, surfaces):
        stack.add_toast("Saved")
        stack.add_toast("Saved")
        assert surfaces.surfaces[Politeness.POLITE].history == ["Saved", "", "Saved"]

    def test_removal_clears_own_announcement(self, stack, surfaces):
        toast = stack.add_toast("Saved")
        stack.remove_toast(toast.id)
        assert surfaces.surfaces[Politeness.POLITE].text == ""

    def test_removing_older_duplicate_keeps_newer_announcement(self, stack, surfaces):
        first = stack.add_toast("Saved")
        stack.add_toast("Saved")

        stack.remove_toast(first.id)

        assert surfaces.surfaces[Politeness.POLITE].text == "Saved"


class TestToastStack:

    def test_ids_and_order(self, stack):
        stack.add_toast("one")
        stack.add_toast("two")
        assert [t.id for t in stack.toasts] == ["toast-1", "toast-2"]
        assert len(stack.changes) == 2

    def test_remove_unknown(self, stack):
        assert stack.remove_toast("toast-9") is False

    def test_oldest_dropped_past_limit(self, stack):
        for i in range(ToastStack.MAX_TOASTS + 1):
            stack.add_toast(f"message {i}")
        ids = [t.id for t in stack.toasts]
        assert len(ids) == ToastStack.MAX_TOASTS
        assert "toast-1" not in ids

    def test_clear(self, stack):
        stack.add_toast("one")
        stack.clear()
        assert stack.toasts == []

    def test_region_attributes(self, stack):
        assert stack.region_attributes() == {"role": "region", "aria-label": "Notifications"}


class TestToastKeyboard:

    def test_escape_dismisses_dismissible(self, stack):
        stack.add_toast("closable")
        stack.add_toast("sticky", dismissible=False)
        event = KeyEvent("Escape")

        assert stack.handle_key(event) is True
        assert [t.message for t in stack.toasts] == ["sticky"]

    def test_escape_without_dismissible(self, stack):
        stack.add_toast("sticky", dismissible=False)
        assert stack.handle_key(KeyEvent("Escape")) is False

    def test_other_keys_ignored(self, stack):
        stack.add_toast("closable")
        assert stack.handle_key(KeyEvent("Enter")) is False
        assert len(stack.toasts) == 1


class TestToastTiming:

    def test_auto_dismiss(self, stack, clock):
        toast = stack.add_toast("Saved")

        clock.advance(5000)
        assert stack.dismiss_expired() == []

        clock.advance(1000)
        assert stack.dismiss_expired() == [toast.id]
        assert stack.toasts == []

    def test_zero_duration_never_expires(self, stack, clock):
        toast = stack.add_toast("Pinned", duration_ms=0)
        clock.advance(600_000)
        assert stack.dismiss_expired() == []
        assert toast.remaining_ms(clock()) is None

    def test_pause_on_hover(self, stack, clock):
        toast = stack.add_toast("Saved")
        clock.advance(1000)
        stack.pause(toast.id)
        clock.advance(10_000)

        assert stack.dismiss_expired() == []

        stack.resume(toast.id)
        assert toast.remaining_ms(clock()) == pytest.approx(5000)
        clock.advance(5000)
        assert stack.dismiss_expired() == [toast.id]

    def test_pause_disabled(self, clock, surfaces):
        stack = ToastStack(clock=clock, pause_on_hover=False)
        toast = stack.add_toast("Saved")
        stack.pause(toast.id)
        clock.advance(6000)
        assert stack.dismiss_expired() == [toast.id]

    def test_config_duration(self, clock, surfaces, temp_config):
        temp_config.toast_duration_ms = 2000
        stack = ToastStack(clock=clock, config=temp_config)
        toast = stack.add_toast("Saved")
        assert toast.duration_ms == 2000
