"""
PyQt6 adapter for the focus engine.

Provides:
- QtFocusHost / QtFocusable: the focus capability over QWidgets
- QtSurfaceHost / QtLiveSurface: screen reader live regions
- FocusTrapFilter / RovingKeyFilter: Qt key routing
"""

from focus_qt.host import QtFocusable, QtFocusHost
from focus_qt.key_filters import FocusTrapFilter, RovingKeyFilter, key_event_from_qt
from focus_qt.live_region import QtLiveSurface, QtSurfaceHost

__all__ = [
    "QtFocusable",
    "QtFocusHost",
    "FocusTrapFilter",
    "RovingKeyFilter",
    "key_event_from_qt",
    "QtLiveSurface",
    "QtSurfaceHost",
]
