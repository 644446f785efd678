"""
Qt Focus Host - IFocusHost over a QWidget tree.

Maps the engine's capabilities onto Qt:
- candidate order follows the window's focus chain (respects setTabOrder)
- tab reachability comes from the widget's focus policy
- focus requests go through QWidget.setFocus

Usage:
    from focus_qt.host import QtFocusHost

    host = QtFocusHost(main_window)
    trap = FocusTrap(host, host.wrap(dialog))
    trap.activate()
"""

from __future__ import annotations

import logging
from typing import List, Optional

from PyQt6 import sip
from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtWidgets import QApplication, QWidget

logger = logging.getLogger(__name__)


class QtFocusable:
    """
    Focus handle for a QWidget.

    Two handles are equal when they wrap the same widget, so handles from
    different queries can be compared.
    """

    __slots__ = ("_widget",)

    def __init__(self, widget: QWidget):
        self._widget = widget

    @property
    def widget(self) -> QWidget:
        return self._widget

    @property
    def tab_reachable(self) -> bool:
        policy = self._widget.focusPolicy()
        return bool(policy.value & Qt.FocusPolicy.TabFocus.value)

    @property
    def disabled(self) -> bool:
        return not self._widget.isEnabled()

    @property
    def visible(self) -> bool:
        return self._widget.isVisible()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QtFocusable):
            return self._widget is other._widget
        return NotImplemented

    def __hash__(self) -> int:
        return id(self._widget)

    def __repr__(self) -> str:
        name = self._widget.objectName() or type(self._widget).__name__
        return f"QtFocusable({name})"


class _NoFocusRestorer(QObject):
    """Puts a widget back to NoFocus once it loses programmatic focus."""

    def __init__(self, widget: QWidget):
        super().__init__(widget)
        widget.installEventFilter(self)

    def eventFilter(self, obj: Optional[QObject], event: Optional[QEvent]) -> bool:
        if event is not None and event.type() == QEvent.Type.FocusOut:
            obj.removeEventFilter(self)
            obj.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            self.deleteLater()
        return False


class QtFocusHost:
    """
    Focus host backed by Qt widgets.

    Args:
        root: Optional top-level widget. When given, connectivity means
              "inside root" and the active element is root's window focus
              widget; otherwise the application's focus widget is used.

    Widgets with NoFocus policy (labels, containers) are given ClickFocus
    while they hold programmatic focus and are put back to NoFocus when
    they lose it.
    """

    def __init__(self, root: Optional[QWidget] = None):
        self._root = root

    def wrap(self, widget: Optional[QWidget]) -> Optional[QtFocusable]:
        return QtFocusable(widget) if widget is not None else None

    def query_focusable(self, container: QtFocusable) -> List[QtFocusable]:
        """Descendants of container in focus-chain order."""
        scope = container.widget
        result: List[QtFocusable] = []
        seen = {id(scope)}
        current = scope.nextInFocusChain()
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            if scope.isAncestorOf(current):
                result.append(QtFocusable(current))
            current = current.nextInFocusChain()
        return result

    def focus(self, element: QtFocusable) -> None:
        widget = element.widget
        if widget.focusPolicy() == Qt.FocusPolicy.NoFocus:
            # Focusable until focus leaves, never a Tab stop
            widget.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
            _NoFocusRestorer(widget)
        widget.setFocus(Qt.FocusReason.OtherFocusReason)

    def is_connected(self, element: QtFocusable) -> bool:
        widget = element.widget
        if sip.isdeleted(widget):
            return False
        if self._root is None or sip.isdeleted(self._root):
            return True
        return widget is self._root or self._root.isAncestorOf(widget)

    def active_element(self) -> Optional[QtFocusable]:
        if self._root is not None and not sip.isdeleted(self._root):
            return self.wrap(self._root.window().focusWidget())
        return self.wrap(QApplication.focusWidget())
