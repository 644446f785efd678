"""
Error taxonomy for the focus engine.

Nothing in the engine is fatal. Failures are represented as values carried
in ``Err`` results or logged, and always degrade to "focus/announcement
unchanged" rather than raising into the hosting widget.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class FocusTargetUnavailable:
    """An attempt to focus a detached, missing or non-focusable element."""

    element: Optional[Any]
    reason: str

    def __str__(self) -> str:
        return f"Focus target unavailable ({self.reason}): {self.element!r}"


@dataclass(frozen=True)
class EmptyCollection:
    """Navigation or trap activation over zero eligible elements."""

    context: str
    size: int = 0

    def __str__(self) -> str:
        return f"No eligible items for {self.context} (size={self.size})"
