"""
focus_widgets.toast

Non-blocking toast notifications announced through the live regions.
Error toasts are announced assertively, everything else politely.
"""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from focus_core.config import FocusConfig
from focus_core.constants import TOAST_DURATION_MS_DEFAULT
from focus_core.keyboard import KeyEvent, is_escape_key
from focus_core.live_announcer import LiveRegionBinding, Politeness

logger = logging.getLogger(__name__)


class ToastType(Enum):
    """Types of toast notifications."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    @property
    def politeness(self) -> Politeness:
        return Politeness.ASSERTIVE if self is ToastType.ERROR else Politeness.POLITE

    @property
    def role(self) -> str:
        return "alert" if self is ToastType.ERROR else "status"


@dataclass
class Toast:
    """A single toast in the stack."""
    id: str
    message: str
    toast_type: ToastType = ToastType.INFO
    dismissible: bool = True
    duration_ms: int = TOAST_DURATION_MS_DEFAULT
    created_at: float = 0.0
    paused_at: Optional[float] = None
    paused_total: float = 0.0
    binding: Optional[LiveRegionBinding] = field(default=None, repr=False, compare=False)

    def remaining_ms(self, now: float) -> Optional[float]:
        """Milliseconds before auto-dismiss; None when it never expires."""
        if self.duration_ms <= 0:
            return None
        reference = self.paused_at if self.paused_at is not None else now
        elapsed_ms = (reference - self.created_at - self.paused_total) * 1000
        return max(0.0, self.duration_ms - elapsed_ms)

    @property
    def attributes(self) -> dict:
        return {
            "role": self.toast_type.role,
            "aria-live": self.toast_type.politeness.value,
            "aria-atomic": "true",
            "tabindex": 0,
        }


class ToastStack:
    """
    Manages toasts in the order they were added.

    The stack keeps a consistent order (newest last) so tab order through
    the notification region is predictable. Time is read from an injectable
    clock in seconds.
    """

    MAX_TOASTS = 5

    def __init__(
        self,
        *,
        duration_ms: Optional[int] = None,
        pause_on_hover: Optional[bool] = None,
        on_change: Optional[Callable[[List[Toast]], None]] = None,
        clock: Callable[[], float] = time.monotonic,
        config: Optional[FocusConfig] = None,
    ):
        if duration_ms is None:
            duration_ms = config.toast_duration_ms if config else TOAST_DURATION_MS_DEFAULT
        if pause_on_hover is None:
            pause_on_hover = config.toast_pause_on_hover if config else True
        self.duration_ms = duration_ms
        self.pause_on_hover = pause_on_hover
        self._on_change = on_change
        self._clock = clock
        self._toasts: List[Toast] = []
        self._ids = itertools.count(1)

    @property
    def toasts(self) -> List[Toast]:
        return list(self._toasts)

    def region_attributes(self) -> dict:
        return {"role": "region", "aria-label": "Notifications"}

    def add_toast(
        self,
        message: str,
        toast_type: ToastType = ToastType.INFO,
        *,
        dismissible: bool = True,
        duration_ms: Optional[int] = None,
    ) -> Toast:
        """Add a toast and announce its message."""
        toast = Toast(
            id=f"toast-{next(self._ids)}",
            message=message,
            toast_type=toast_type,
            dismissible=dismissible,
            duration_ms=self.duration_ms if duration_ms is None else duration_ms,
            created_at=self._clock(),
        )
        toast.binding = LiveRegionBinding(toast_type.politeness)
        toast.binding.update(message)
        self._toasts.append(toast)

        # Drop oldest if too many
        while len(self._toasts) > self.MAX_TOASTS:
            self._discard(self._toasts[0])

        self._changed()
        return toast

    def remove_toast(self, toast_id: str) -> bool:
        toast = self._find(toast_id)
        if toast is None:
            return False
        self._discard(toast)
        self._changed()
        return True

    def clear(self) -> None:
        for toast in list(self._toasts):
            self._discard(toast)
        self._changed()

    def _discard(self, toast: Toast) -> None:
        self._toasts.remove(toast)
        if toast.binding is not None:
            toast.binding.unmount()

    def _find(self, toast_id: str) -> Optional[Toast]:
        return next((t for t in self._toasts if t.id == toast_id), None)

    def _changed(self) -> None:
        if self._on_change:
            self._on_change(self.toasts)

    # ------------------------------------------------------------------
    # Keyboard / pointer
    # ------------------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> bool:
        """Escape dismisses every dismissible toast."""
        if not is_escape_key(event.key):
            return False
        dismissible = [t for t in self._toasts if t.dismissible]
        if not dismissible:
            return False
        for toast in dismissible:
            self._discard(toast)
        self._changed()
        return True

    def pause(self, toast_id: str) -> None:
        """Pause auto-dismiss (pointer entered the toast)."""
        toast = self._find(toast_id)
        if toast is None or not self.pause_on_hover or toast.paused_at is not None:
            return
        toast.paused_at = self._clock()

    def resume(self, toast_id: str) -> None:
        toast = self._find(toast_id)
        if toast is None or toast.paused_at is None:
            return
        toast.paused_total += self._clock() - toast.paused_at
        toast.paused_at = None

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------

    def dismiss_expired(self) -> List[str]:
        """
        Remove toasts whose duration has elapsed.

        Call from the host's timer tick.

        Returns:
            Ids of the dismissed toasts
        """
        now = self._clock()
        expired = [t for t in self._toasts if t.remaining_ms(now) == 0]
        for toast in expired:
            self._discard(toast)
        if expired:
            logger.debug(f"Auto-dismissed {len(expired)} toast(s)")
            self._changed()
        return [t.id for t in expired]
