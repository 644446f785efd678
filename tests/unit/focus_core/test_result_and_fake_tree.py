"""Tests for focus_core/result.py and focus_core/fake_tree.py."""

import pytest

from focus_core.errors import EmptyCollection, FocusTargetUnavailable
from focus_core.fake_tree import FakeTree
from focus_core.interfaces import IFocusable, IFocusHost, ISurfaceHost
from focus_core.live_announcer import MemorySurfaceHost
from focus_core.result import Err, Ok

pytestmark = pytest.mark.unit


class TestResult:

    def test_ok(self):
        result = Ok("button")
        assert result.is_ok() and not result.is_err()
        assert result.unwrap() == "button"
        assert result.unwrap_or("other") == "button"
        assert result.error is None
        assert result.map(str.upper) == Ok("BUTTON")

    def test_err(self):
        result = Err("detached")
        assert result.is_err() and not result.is_ok()
        assert result.unwrap_or(None) is None
        assert result.map(str.upper) is result
        with pytest.raises(ValueError, match="detached"):
            result.unwrap()

    def test_repr(self):
        assert repr(Ok(3)) == "Ok(3)"
        assert repr(Err("x")) == "Err('x')"


class TestErrors:

    def test_messages(self):
        assert "(hidden)" in str(FocusTargetUnavailable("el", "hidden"))
        assert str(EmptyCollection("tabs", 3)) == "No eligible items for tabs (size=3)"


class TestFakeTree:

    def test_satisfies_capability_protocols(self, tree):
        assert isinstance(tree, IFocusHost)
        assert isinstance(tree.add("button"), IFocusable)
        assert isinstance(MemorySurfaceHost(), ISurfaceHost)

    def test_duplicate_names_rejected(self, tree):
        tree.add("button")
        with pytest.raises(ValueError):
            tree.add("button")

    def test_remove_detaches_subtree(self, tree):
        panel = tree.add("panel")
        child = tree.add("child", parent=panel)
        tree.focus(child)

        tree.remove(panel)

        assert not tree.is_connected(child)
        assert tree.active_element() is None
        with pytest.raises(KeyError):
            tree.get("child")

    def test_focus_detached_raises(self, tree):
        button = tree.add("button")
        tree.remove(button)
        with pytest.raises(RuntimeError):
            tree.focus(button)

    def test_deferred_focus(self):
        tree = FakeTree(deferred=True)
        button = tree.add("button")

        tree.focus(button)
        assert tree.active_element() is None

        tree.flush()
        assert tree.active_element() is button

    def test_deferred_focus_dropped_when_detached(self):
        tree = FakeTree(deferred=True)
        button = tree.add("button")
        tree.focus(button)
        tree.remove(button)

        tree.flush()

        assert tree.active_element() is None
