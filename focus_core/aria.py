"""
ARIA attribute helpers.

Small builders that return attribute dictionaries for widgets to merge into
whatever their host renders. Absent values produce empty dictionaries so
callers can always ``**``-merge the result.
"""

from __future__ import annotations

import itertools
from typing import Dict, Optional, Union

from focus_core.constants import ARIA_ID_PREFIX_DEFAULT

_id_counter = itertools.count(1)

CurrentValue = Union[bool, str]
_CURRENT_TOKENS = ("page", "step", "location", "date", "time")


def generate_id(prefix: str = ARIA_ID_PREFIX_DEFAULT) -> str:
    """
    Generate a process-unique id for ARIA relationships.

    Example:
        >>> generate_id("tab")
        'tab-1'
    """
    return f"{prefix}-{next(_id_counter)}"


def reset_id_counter() -> None:
    """Restart id generation at 1 (test isolation)."""
    global _id_counter
    _id_counter = itertools.count(1)


def get_aria_label(
    aria_label: Optional[str] = None,
    aria_labelledby: Optional[str] = None,
) -> Dict[str, str]:
    """Label attributes, preferring aria-label over aria-labelledby."""
    if aria_label:
        return {"aria-label": aria_label}
    if aria_labelledby:
        return {"aria-labelledby": aria_labelledby}
    return {}


def get_aria_described_by(described_by: Optional[str] = None) -> Dict[str, str]:
    if described_by:
        return {"aria-describedby": described_by}
    return {}


def combine_aria_described_by(*ids: Optional[str]) -> Optional[str]:
    """Join the non-empty ids with spaces, or None when there are none."""
    valid = [i for i in ids if i]
    return " ".join(valid) if valid else None


def get_live_region_attributes(live: str = "polite") -> Dict[str, object]:
    """Attributes for a live region; atomic unless the region is off."""
    if live not in ("polite", "assertive", "off"):
        raise ValueError(f"Unknown live politeness: {live!r}")
    return {"aria-live": live, "aria-atomic": live != "off"}


def get_busy_attributes(busy: bool) -> Dict[str, bool]:
    return {"aria-busy": busy}


def get_expanded_attributes(expanded: Optional[bool]) -> Dict[str, bool]:
    if expanded is None:
        return {}
    return {"aria-expanded": expanded}


def get_pressed_attributes(pressed: Optional[bool]) -> Dict[str, bool]:
    """Pressed state for toggle buttons."""
    if pressed is None:
        return {}
    return {"aria-pressed": pressed}


def get_selected_attributes(selected: Optional[bool]) -> Dict[str, bool]:
    if selected is None:
        return {}
    return {"aria-selected": selected}


def get_current_attributes(current: Optional[CurrentValue]) -> Dict[str, CurrentValue]:
    """Current-item attributes for navigation (True or a token like "page")."""
    if current is None:
        return {}
    if isinstance(current, str) and current not in _CURRENT_TOKENS:
        raise ValueError(f"Unknown aria-current token: {current!r}")
    return {"aria-current": current}
