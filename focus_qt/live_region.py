"""
Qt Live Regions - Announcement surfaces for screen readers.

Each surface is an off-screen QLabel whose accessible name carries the
announcement; every write sends a QAccessible NameChanged event, which is
what screen readers pick up on desktop platforms.

Usage:
    from focus_qt.live_region import QtSurfaceHost
    from focus_core.live_announcer import LiveAnnouncer, announce

    LiveAnnouncer.configure(surface_host=QtSurfaceHost(main_window))
    announce("Export complete")
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QWidget

from focus_core.live_announcer import Politeness, surface_attributes

logger = logging.getLogger(__name__)

# QAccessible and QAccessibleEvent are available via QtGui in PyQt6 but may
# require specific compilation flags.
HAS_QACCESSIBLE = False
try:
    from PyQt6.QtGui import QAccessible, QAccessibleEvent
    HAS_QACCESSIBLE = True
except ImportError:
    pass


class QtLiveSurface:
    """
    Visually hidden, non-interactive label used as a live region.

    The label stays shown but off-screen: hidden widgets leave the
    accessibility tree and would never be read.
    """

    def __init__(self, politeness: Politeness, parent: Optional[QWidget] = None):
        self._politeness = politeness
        self._attributes = surface_attributes(politeness)

        self.label = QLabel(parent)
        self.label.setObjectName(self._attributes["id"])
        self.label.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.label.setAccessibleDescription(f"Live status updates ({politeness.value})")
        self.label.setGeometry(-10000, -10000, 1, 1)
        if parent is not None:
            self.label.show()

    @property
    def politeness(self) -> Politeness:
        return self._politeness

    @property
    def text(self) -> str:
        return self.label.text()

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self._attributes)

    def set_text(self, text: str) -> None:
        self.label.setText(text)
        self.label.setAccessibleName(text)
        self._notify_accessibility()

    def _notify_accessibility(self) -> None:
        if not HAS_QACCESSIBLE:
            return
        event = QAccessibleEvent(self.label, QAccessible.Event.NameChanged)
        QAccessible.updateAccessibility(event)


class QtSurfaceHost:
    """Creates one QtLiveSurface per politeness, parented to a window."""

    def __init__(self, parent: Optional[QWidget] = None):
        self._parent = parent
        self.surfaces: Dict[Politeness, QtLiveSurface] = {}

    def create_surface(self, politeness: str) -> QtLiveSurface:
        level = Politeness.coerce(politeness)
        surface = QtLiveSurface(level, self._parent)
        self.surfaces[level] = surface
        logger.debug(f"Created Qt live surface {surface.label.objectName()}")
        return surface
