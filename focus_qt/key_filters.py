"""
Qt key filters - Route Qt key presses into the focus engine.

Provides:
- key_event_from_qt: QKeyEvent -> KeyEvent translation
- FocusTrapFilter: application-wide Tab containment for a FocusTrap
- RovingKeyFilter: arrow/Home/End navigation for a list-like widget
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Sequence

from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import QApplication

from focus_core import constants as keys
from focus_core.focus_trap import FocusTrap
from focus_core.keyboard import KeyEvent
from focus_core.roving import NavItem, RovingNavigator

logger = logging.getLogger(__name__)


def _key_value(key) -> int:
    return key.value if isinstance(key, Enum) else int(key)


QT_KEY_NAMES: Dict[int, str] = {
    _key_value(Qt.Key.Key_Tab): keys.KEY_TAB,
    _key_value(Qt.Key.Key_Backtab): keys.KEY_TAB,
    _key_value(Qt.Key.Key_Return): keys.KEY_ENTER,
    _key_value(Qt.Key.Key_Enter): keys.KEY_ENTER,
    _key_value(Qt.Key.Key_Space): keys.KEY_SPACE,
    _key_value(Qt.Key.Key_Escape): keys.KEY_ESCAPE,
    _key_value(Qt.Key.Key_Up): keys.KEY_ARROW_UP,
    _key_value(Qt.Key.Key_Down): keys.KEY_ARROW_DOWN,
    _key_value(Qt.Key.Key_Left): keys.KEY_ARROW_LEFT,
    _key_value(Qt.Key.Key_Right): keys.KEY_ARROW_RIGHT,
    _key_value(Qt.Key.Key_Home): keys.KEY_HOME,
    _key_value(Qt.Key.Key_End): keys.KEY_END,
    _key_value(Qt.Key.Key_PageUp): keys.KEY_PAGE_UP,
    _key_value(Qt.Key.Key_PageDown): keys.KEY_PAGE_DOWN,
}


def key_event_from_qt(event: QKeyEvent) -> Optional[KeyEvent]:
    """
    Translate a Qt key press.

    Returns:
        KeyEvent, or None for keys the engine does not handle
    """
    code = _key_value(event.key())
    name = QT_KEY_NAMES.get(code)
    if name is None:
        return None

    modifiers = event.modifiers()
    return KeyEvent(
        key=name,
        # Qt reports Shift+Tab as Backtab
        shift=bool(modifiers & Qt.KeyboardModifier.ShiftModifier)
        or code == _key_value(Qt.Key.Key_Backtab),
        ctrl=bool(modifiers & Qt.KeyboardModifier.ControlModifier),
        alt=bool(modifiers & Qt.KeyboardModifier.AltModifier),
        meta=bool(modifiers & Qt.KeyboardModifier.MetaModifier),
    )


class FocusTrapFilter(QObject):
    """
    Event filter enforcing a FocusTrap's Tab cycle.

    Installed on the application by default so Tab presses are seen before
    any widget's own focusNextPrevChild handling.

    Usage:
        trap = FocusTrap(host, host.wrap(dialog))
        trap_filter = FocusTrapFilter(trap)
        trap_filter.install()
        trap.activate()
    """

    def __init__(self, trap: FocusTrap, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._trap = trap
        self._target: Optional[QObject] = None

    @property
    def trap(self) -> FocusTrap:
        return self._trap

    def install(self, target: Optional[QObject] = None) -> None:
        """Install on target (defaults to the QApplication instance)."""
        if target is None:
            target = QApplication.instance()
        if target is None:
            logger.warning("FocusTrapFilter.install: no QApplication")
            return
        self.remove()
        target.installEventFilter(self)
        self._target = target

    def remove(self) -> None:
        if self._target is not None:
            self._target.removeEventFilter(self)
            self._target = None

    def eventFilter(self, obj: Optional[QObject], event: Optional[QEvent]) -> bool:
        if obj is None or event is None:
            return False
        if event.type() != QEvent.Type.KeyPress or not self._trap.is_active:
            return super().eventFilter(obj, event)

        key_event = key_event_from_qt(event)  # type: ignore[arg-type]
        if key_event is None or not key_event.is_tab:
            return super().eventFilter(obj, event)
        return self._trap.handle_key(key_event)


class RovingKeyFilter(QObject):
    """
    Event filter applying a RovingNavigator to one widget.

    The widget's owner supplies the current index and item list through
    callables so the filter never holds stale state.
    """

    def __init__(
        self,
        navigator: RovingNavigator,
        *,
        current_index: Callable[[], int],
        items: Callable[[], Sequence[NavItem]],
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._navigator = navigator
        self._current_index = current_index
        self._items = items
        if parent is not None:
            parent.installEventFilter(self)

    def eventFilter(self, obj: Optional[QObject], event: Optional[QEvent]) -> bool:
        if obj is None or event is None:
            return False
        if event.type() != QEvent.Type.KeyPress:
            return super().eventFilter(obj, event)

        key_event = key_event_from_qt(event)  # type: ignore[arg-type]
        if key_event is None:
            return super().eventFilter(obj, event)

        result = self._navigator.handle_key(
            key_event, self._current_index(), self._items()
        )
        return result.handled
