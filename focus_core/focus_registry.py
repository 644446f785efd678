"""
Focus Registry - Query which elements may receive focus.

Pure queries over the host tree plus one best-effort focus helper.

Usage:
    from focus_core.focus_registry import FocusRegistry

    registry = FocusRegistry(host)
    first = registry.first_focusable(dialog)
    registry.safe_focus(first)
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from focus_core.errors import FocusTargetUnavailable
from focus_core.interfaces import IFocusHost
from focus_core.result import Err, Ok, Result

logger = logging.getLogger(__name__)


def is_eligible(element: Any) -> bool:
    """Eligible for sequential focus: visible, enabled and tab reachable."""
    return bool(element.visible and not element.disabled and element.tab_reachable)


class FocusRegistry:
    """
    Eligibility queries and safe focusing against one host.

    The registry holds no state of its own beyond the host reference, so a
    single instance can be shared by any number of controllers.
    """

    def __init__(self, host: IFocusHost):
        self._host = host

    @property
    def host(self) -> IFocusHost:
        return self._host

    def focusable_in(self, container: Any) -> List[Any]:
        """
        Get all eligible elements within a container.

        Args:
            container: Host node whose descendants are queried

        Returns:
            Eligible elements in document order; empty when there are none
            or when the host query fails.
        """
        if container is None:
            return []
        try:
            candidates = self._host.query_focusable(container)
        except Exception as exc:  # host boundary
            logger.warning(f"Focusable query failed for {container!r}: {exc}")
            return []
        return [element for element in candidates if is_eligible(element)]

    def first_focusable(self, container: Any) -> Optional[Any]:
        focusable = self.focusable_in(container)
        return focusable[0] if focusable else None

    def last_focusable(self, container: Any) -> Optional[Any]:
        focusable = self.focusable_in(container)
        return focusable[-1] if focusable else None

    def is_eligible(self, element: Any) -> bool:
        return is_eligible(element)

    def safe_focus(self, element: Optional[Any]) -> Result[Any, FocusTargetUnavailable]:
        """
        Focus an element without ever raising.

        Programmatic focus does not require a tab stop, only an attached,
        visible and enabled element.

        Returns:
            Ok(element) when the focus request was issued, otherwise
            Err(FocusTargetUnavailable) after logging a warning.
        """
        error = self._check_focus_target(element)
        if error is None:
            try:
                self._host.focus(element)
                return Ok(element)
            except Exception as exc:  # host boundary
                error = FocusTargetUnavailable(element, f"host refused focus: {exc}")

        logger.warning(str(error))
        return Err(error)

    def _check_focus_target(self, element: Optional[Any]) -> Optional[FocusTargetUnavailable]:
        if element is None:
            return FocusTargetUnavailable(None, "no target")
        try:
            connected = self._host.is_connected(element)
        except Exception as exc:  # host boundary
            return FocusTargetUnavailable(element, f"connectivity check failed: {exc}")
        if not connected:
            return FocusTargetUnavailable(element, "detached")
        if element.disabled:
            return FocusTargetUnavailable(element, "disabled")
        if not element.visible:
            return FocusTargetUnavailable(element, "hidden")
        return None
