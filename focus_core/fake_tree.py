"""
Fake host tree for headless use and tests.

Implements ``IFocusHost`` over a small in-memory node tree so controllers
can be exercised without a GUI toolkit.

Usage:
    tree = FakeTree()
    dialog = tree.add("dialog", tab_reachable=False)
    ok = tree.add("ok", parent=dialog)
    cancel = tree.add("cancel", parent=dialog)

    tree.focus(ok)
    assert tree.active_element() is ok
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


class FakeElement:
    """A node in a ``FakeTree``."""

    def __init__(
        self,
        name: str,
        *,
        tab_reachable: bool = True,
        disabled: bool = False,
        visible: bool = True,
    ):
        self.name = name
        self.tab_reachable = tab_reachable
        self.disabled = disabled
        self.visible = visible
        self.parent: Optional[FakeElement] = None
        self.children: List[FakeElement] = []

    def iter_descendants(self) -> Iterator["FakeElement"]:
        """Descendants in document (pre-order) order."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def __repr__(self) -> str:
        return f"FakeElement({self.name!r})"


class FakeTree:
    """
    In-memory focus host.

    Focus changes apply synchronously by default. With ``deferred=True``
    they are queued until ``flush()``, which models hosts that apply focus
    on the next tick.
    """

    def __init__(self, *, deferred: bool = False):
        self.root = FakeElement("root", tab_reachable=False)
        self._by_name: Dict[str, FakeElement] = {"root": self.root}
        self._active: Optional[FakeElement] = None
        self._pending: Optional[FakeElement] = None
        self._deferred = deferred
        self.focus_log: List[str] = []

    def add(
        self,
        name: str,
        parent: Optional[FakeElement] = None,
        *,
        tab_reachable: bool = True,
        disabled: bool = False,
        visible: bool = True,
    ) -> FakeElement:
        """Create a node and append it to parent (the root by default)."""
        if name in self._by_name:
            raise ValueError(f"Duplicate element name: {name}")
        element = FakeElement(
            name,
            tab_reachable=tab_reachable,
            disabled=disabled,
            visible=visible,
        )
        owner = parent or self.root
        element.parent = owner
        owner.children.append(element)
        self._by_name[name] = element
        return element

    def get(self, name: str) -> FakeElement:
        return self._by_name[name]

    def remove(self, element: FakeElement) -> None:
        """Detach element (and its subtree) from the tree."""
        if element.parent is not None:
            element.parent.children.remove(element)
            element.parent = None
        for node in [element, *element.iter_descendants()]:
            self._by_name.pop(node.name, None)
            if self._active is node:
                self._active = None

    # ------------------------------------------------------------------
    # IFocusHost
    # ------------------------------------------------------------------

    def query_focusable(self, container: FakeElement) -> List[FakeElement]:
        return list(container.iter_descendants())

    def focus(self, element: FakeElement) -> None:
        if not self.is_connected(element):
            raise RuntimeError(f"{element!r} is not attached")
        if self._deferred:
            self._pending = element
            return
        self._apply(element)

    def is_connected(self, element: FakeElement) -> bool:
        node: Optional[FakeElement] = element
        while node is not None:
            if node is self.root:
                return True
            node = node.parent
        return False

    def active_element(self) -> Optional[FakeElement]:
        return self._active

    # ------------------------------------------------------------------
    # Deferred focus
    # ------------------------------------------------------------------

    def flush(self) -> None:
        """Apply a focus request queued in deferred mode."""
        if self._pending is not None:
            element, self._pending = self._pending, None
            if self.is_connected(element):
                self._apply(element)

    def _apply(self, element: FakeElement) -> None:
        self._active = element
        self.focus_log.append(element.name)
        logger.debug(f"Fake focus -> {element.name}")
