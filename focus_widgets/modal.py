"""
focus_widgets.modal

Modal dialog controller composing a focus trap (containment while open)
and focus return (back to the trigger when closed).

WCAG Compliance:
- 2.1.1 Keyboard: Escape closes (configurable)
- 2.1.2 No Keyboard Trap: focus returns to the trigger on close
- 2.4.3 Focus Order: Tab cycles inside the dialog while open
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from focus_core.aria import generate_id
from focus_core.focus_registry import FocusRegistry
from focus_core.focus_return import FocusReturn
from focus_core.focus_trap import FocusTrap
from focus_core.interfaces import IFocusHost
from focus_core.keyboard import KeyEvent, is_escape_key

logger = logging.getLogger(__name__)


class ModalController:
    """
    Open/close lifecycle and key handling for one dialog container.

    The owning widget keeps the ``is_open`` truth; it calls ``set_open``
    whenever that changes and routes key presses through ``handle_key``.
    ``on_close`` is the single callback used to ask the owner to close.
    """

    def __init__(
        self,
        host: IFocusHost,
        container: Any,
        *,
        on_close: Callable[[], None],
        title: str = "",
        close_on_escape: bool = True,
        close_on_backdrop_click: bool = True,
        return_focus_to: Optional[Any] = None,
    ):
        registry = FocusRegistry(host)
        self._container = container
        self._on_close = on_close
        self.title = title
        self.close_on_escape = close_on_escape
        self.close_on_backdrop_click = close_on_backdrop_click
        self._trap = FocusTrap(host, container, registry=registry)
        self._return = FocusReturn(host, return_focus_to, registry=registry)
        self._is_open = False
        self.title_id = generate_id("modal-title")
        self.description_id = generate_id("modal-description")

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def trap(self) -> FocusTrap:
        return self._trap

    def set_open(self, is_open: bool, return_focus_to: Any = None) -> None:
        """
        Follow the owner's open flag.

        Opening snapshots the trigger before the trap moves focus inside;
        closing releases the trap before focus is returned.
        """
        if return_focus_to is not None:
            self._return.return_target = return_focus_to
        if is_open == self._is_open:
            return
        self._is_open = is_open
        if is_open:
            self._return.set_active(True)
            self._trap.set_active(True, self._container)
            logger.debug(f"Modal opened: {self.title}")
        else:
            self._trap.set_active(False)
            self._return.set_active(False)
            logger.debug(f"Modal closed: {self.title}")

    def open(self) -> None:
        self.set_open(True)

    def close(self) -> None:
        self.set_open(False)

    def request_close(self) -> None:
        """Ask the owner to close (the owner then calls ``set_open(False)``)."""
        try:
            self._on_close()
        except Exception as exc:  # widget callback boundary
            logger.error(f"Modal on_close callback failed: {exc}")

    def handle_key(self, event: KeyEvent) -> bool:
        """
        Route a key press received while the dialog is open.

        Returns:
            True when the event was consumed
        """
        if not self._is_open:
            return False
        if is_escape_key(event.key) and self.close_on_escape:
            event.prevent_default()
            self.request_close()
            return True
        return self._trap.handle_key(event)

    def handle_backdrop_click(self, target: Any) -> bool:
        """Close when the click landed on the backdrop (the container itself)."""
        if not self._is_open or not self.close_on_backdrop_click:
            return False
        if target != self._container:
            return False
        self.request_close()
        return True

    def dialog_attributes(self) -> Dict[str, Any]:
        return {
            "role": "dialog",
            "aria-modal": True,
            "aria-labelledby": self.title_id,
            "aria-describedby": self.description_id,
        }
