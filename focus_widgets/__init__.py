"""
Focus Widgets - Widget models built on the focus engine.

Each model owns its own state (selection, open flag, toast stack) and
delegates every focus and key decision to the focus_core controllers.
"""

from focus_widgets.data_table import DataTableColumn, DataTableModel, SortConfig
from focus_widgets.modal import ModalController
from focus_widgets.tabs import TabItem, TabsModel
from focus_widgets.toast import Toast, ToastStack, ToastType

__all__ = [
    "DataTableColumn",
    "DataTableModel",
    "SortConfig",
    "ModalController",
    "TabItem",
    "TabsModel",
    "Toast",
    "ToastStack",
    "ToastType",
]
