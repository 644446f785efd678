"""
Focus Trap - Keep Tab cycling inside a container.

Implements WCAG 2.1.2 (No Keyboard Trap) style containment for modal
surfaces: while active, Tab past the last element wraps to the first and
Shift+Tab before the first wraps to the last.

The trap never restores focus on release; pair it with
``focus_core.focus_return.FocusReturn`` for that.

Usage:
    trap = FocusTrap(host, dialog)
    trap.activate()

    # In the host key handler:
    if trap.handle_key(event):
        return  # default suppressed

    trap.deactivate()

    # Or scoped:
    with FocusTrap(host, dialog):
        run_dialog()
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

from focus_core.errors import EmptyCollection
from focus_core.focus_registry import FocusRegistry
from focus_core.interfaces import IFocusHost
from focus_core.keyboard import KeyEvent

logger = logging.getLogger(__name__)


class TrapState(Enum):
    """Lifecycle state of a focus trap."""
    INACTIVE = "inactive"
    ACTIVE = "active"


class FocusTrap:
    """
    Binary focus-containment state machine.

    Re-entrant: a trap may be activated, deactivated and activated again any
    number of times, optionally on a different container each time.
    """

    def __init__(
        self,
        host: IFocusHost,
        container: Optional[Any] = None,
        *,
        registry: Optional[FocusRegistry] = None,
    ):
        """
        Initialize focus trap.

        Args:
            host: Host capability provider
            container: Node whose focusable descendants bound the Tab cycle
            registry: Shared registry (one is created when omitted)
        """
        self._registry = registry or FocusRegistry(host)
        self._host = host
        self._container = container
        self._state = TrapState.INACTIVE

    @property
    def state(self) -> TrapState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is TrapState.ACTIVE

    @property
    def container(self) -> Optional[Any]:
        return self._container

    def set_active(self, active: bool, container: Optional[Any] = None) -> None:
        """
        Drive the trap from an (active, container) pair.

        Intended to be called whenever the owning widget's props change;
        only transitions have an effect.
        """
        if active:
            self.activate(container)
        else:
            self.deactivate()

    def activate(self, container: Optional[Any] = None) -> None:
        """Enter the Active state and move focus into the container."""
        target = container if container is not None else self._container

        if self.is_active:
            if target is None or target == self._container:
                return
            logger.debug("Focus trap re-targeted to a new container")
            self.deactivate()

        if target is None:
            logger.warning("Focus trap activation ignored: no container")
            return

        self._container = target
        self._state = TrapState.ACTIVE
        self._focus_initial()

    def deactivate(self) -> None:
        """Release key interception. Focus is left where it is."""
        if not self.is_active:
            return
        self._state = TrapState.INACTIVE
        logger.debug("Focus trap released")

    def _focus_initial(self) -> None:
        first = self._registry.first_focusable(self._container)
        if first is not None:
            self._registry.safe_focus(first)
            return

        # Defined origin for Tab when nothing inside can take focus
        logger.debug(str(EmptyCollection("focus trap")))
        self._registry.safe_focus(self._container)

    def handle_key(self, event: KeyEvent) -> bool:
        """
        Intercept Tab while active.

        Args:
            event: Key event from the host

        Returns:
            True when the event was handled and its default suppressed
        """
        if not self.is_active or not event.is_tab:
            return False

        focusable = self._registry.focusable_in(self._container)
        if not focusable:
            event.prevent_default()
            return True

        first, last = focusable[0], focusable[-1]
        current = self._host.active_element()

        if event.shift:
            if current == first:
                event.prevent_default()
                self._registry.safe_focus(last)
                return True
        elif current == last:
            event.prevent_default()
            self._registry.safe_focus(first)
            return True

        return False

    def __enter__(self) -> "FocusTrap":
        self.activate()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.deactivate()
        return False
