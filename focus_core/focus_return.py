"""
Focus Return - Restore focus to the trigger when a transient surface closes.

Usage:
    focus_return = FocusReturn(host)
    focus_return.activate()      # remembers the currently focused trigger
    ...
    focus_return.deactivate()    # puts focus back on it
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from focus_core.focus_registry import FocusRegistry
from focus_core.interfaces import IFocusHost

logger = logging.getLogger(__name__)

_UNSET = object()


class FocusReturn:
    """
    Snapshot-and-restore controller for one open/close cycle at a time.

    Only an inactive-to-active change takes a snapshot; repeated
    activations never overwrite the original capture, even when nothing
    was focused at the time.
    """

    def __init__(
        self,
        host: IFocusHost,
        return_target: Optional[Any] = None,
        *,
        registry: Optional[FocusRegistry] = None,
    ):
        self._host = host
        self._registry = registry or FocusRegistry(host)
        self._return_target = return_target
        self._snapshot: Optional[Any] = None
        self._active = False

    @property
    def snapshot(self) -> Optional[Any]:
        return self._snapshot

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def return_target(self) -> Optional[Any]:
        return self._return_target

    @return_target.setter
    def return_target(self, target: Optional[Any]) -> None:
        self._return_target = target

    def set_active(self, active: bool, return_target: Any = _UNSET) -> None:
        """Edge-triggered (active, explicit target) primitive."""
        if return_target is not _UNSET:
            self._return_target = return_target
        if active and not self._active:
            self.activate()
        elif not active and self._active:
            self.deactivate()

    def activate(self) -> None:
        """Capture the focused element (no-op while already active)."""
        if self._active:
            return
        self._active = True
        try:
            self._snapshot = self._host.active_element()
        except Exception as exc:  # host boundary
            logger.warning(f"Could not read active element: {exc}")
            self._snapshot = None

    def deactivate(self) -> None:
        """
        Restore focus and clear the snapshot.

        The explicit return target wins; the snapshot is used when there is
        no explicit target or it cannot take focus. A second consecutive
        call is a no-op.
        """
        if not self._active and self._snapshot is None:
            return

        self._active = False
        snapshot, self._snapshot = self._snapshot, None

        if self._return_target is not None:
            if self._registry.safe_focus(self._return_target).is_ok():
                return
            logger.debug("Explicit return target unavailable, using snapshot")

        if snapshot is not None:
            self._registry.safe_focus(snapshot)

    def __enter__(self) -> "FocusReturn":
        self.activate()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.deactivate()
        return False
