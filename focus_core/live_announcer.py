"""
Live Announcer - Screen reader announcements through live regions.

Keeps exactly one persistent, visually hidden surface per politeness level
for the process lifetime and writes announcement text into it. Assistive
technology reads ``assertive`` surfaces immediately (interrupting current
speech) and queues ``polite`` ones.

Usage:
    from focus_core.live_announcer import announce, announce_assertive

    announce("Settings saved")                # polite
    announce_assertive("Connection lost")     # interrupts

    # Headless/test setup and teardown:
    LiveAnnouncer.configure(surface_host=MemorySurfaceHost())
    LiveAnnouncer.reset_for_testing()

Identical consecutive announcements would not mutate the surface, and some
screen readers only speak on mutation. The announcer therefore forces an
observable change for duplicates (see ``duplicate_strategy``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from focus_core.constants import (
    DUPLICATE_STRATEGIES,
    DUPLICATE_TEXT_MARKER,
    LIVE_REGION_HIDDEN_STYLE,
    LIVE_REGION_ID_PREFIX,
    LIVE_REGION_ROLE,
)
from focus_core.interfaces import ILiveSurface, ISurfaceHost

logger = logging.getLogger(__name__)


class Politeness(str, Enum):
    """Urgency level of an announcement."""
    POLITE = "polite"        # Non-urgent, wait for idle
    ASSERTIVE = "assertive"  # Important, interrupt current

    @classmethod
    def coerce(cls, value: Union["Politeness", str]) -> "Politeness":
        """Accept enum members or their string values; unknown -> POLITE."""
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Unknown politeness {value!r}, using polite")
            return cls.POLITE


@dataclass(frozen=True)
class Announcement:
    """A message written to a live surface."""
    text: str
    politeness: Politeness


def surface_attributes(politeness: Politeness) -> Dict[str, str]:
    """Attributes every announcement surface carries."""
    return {
        "id": f"{LIVE_REGION_ID_PREFIX}{politeness.value}",
        "role": LIVE_REGION_ROLE,
        "aria-live": politeness.value,
        "aria-atomic": "true",
    }


class MemorySurface:
    """
    In-memory live surface.

    Records every content write so headless consumers and tests can observe
    the mutations assistive technology would see.
    """

    def __init__(self, politeness: Politeness):
        self._politeness = politeness
        self._text = ""
        self._history: List[str] = []
        self._attributes = surface_attributes(politeness)
        self.style = dict(LIVE_REGION_HIDDEN_STYLE)

    @property
    def text(self) -> str:
        return self._text

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self._attributes)

    @property
    def history(self) -> List[str]:
        """Every value written, in order."""
        return list(self._history)

    @property
    def mutation_count(self) -> int:
        return len(self._history)

    def set_text(self, text: str) -> None:
        self._text = text
        self._history.append(text)


class MemorySurfaceHost:
    """Surface factory for headless hosts."""

    def __init__(self) -> None:
        self.surfaces: Dict[Politeness, MemorySurface] = {}

    def create_surface(self, politeness: str) -> MemorySurface:
        level = Politeness.coerce(politeness)
        surface = MemorySurface(level)
        self.surfaces[level] = surface
        return surface


class LiveAnnouncer:
    """
    Owner of the announcement surface for one politeness level.

    One instance per politeness, obtained through ``get_live_announcer``.
    ``announce`` and ``clear`` are the only writers; last write wins, so no
    caller owns the surface exclusively.

    Lifecycle:
        - ``configure()`` selects the surface host and duplicate strategy
          (before first use; reconfiguring drops existing instances).
        - Surfaces are created lazily on the first announcement.
        - ``reset_for_testing()`` drops every instance and restores defaults.
    """

    _instances: Dict[Politeness, "LiveAnnouncer"] = {}
    _surface_host: Optional[ISurfaceHost] = None
    _duplicate_strategy: str = "clear"
    _clear_on_unmount: bool = True

    def __init__(self, politeness: Politeness):
        self._politeness = politeness
        self._surface: Optional[ILiveSurface] = None
        self._write_count = 0

    # ------------------------------------------------------------------
    # Singleton management
    # ------------------------------------------------------------------

    @classmethod
    def instance(cls, politeness: Union[Politeness, str] = Politeness.POLITE) -> "LiveAnnouncer":
        """Get the announcer for a politeness level, creating it on first use."""
        level = Politeness.coerce(politeness)
        announcer = cls._instances.get(level)
        if announcer is None:
            announcer = cls(level)
            cls._instances[level] = announcer
        return announcer

    @classmethod
    def configure(
        cls,
        surface_host: Optional[ISurfaceHost] = None,
        *,
        duplicate_strategy: Optional[str] = None,
        clear_on_unmount: Optional[bool] = None,
    ) -> None:
        """
        Configure announcer-wide settings.

        Args:
            surface_host: Factory for surfaces (defaults to in-memory)
            duplicate_strategy: "clear" (clear then set) or "vary"
                (toggle a trailing non-breaking space)
            clear_on_unmount: Default for ``LiveRegionBinding``
        """
        if surface_host is not None and surface_host is not cls._surface_host:
            if cls._instances:
                logger.info("Surface host changed; existing live announcers dropped")
            cls._instances = {}
            cls._surface_host = surface_host

        if duplicate_strategy is not None:
            if duplicate_strategy in DUPLICATE_STRATEGIES:
                cls._duplicate_strategy = duplicate_strategy
            else:
                logger.warning(f"Unknown duplicate strategy {duplicate_strategy!r}, keeping "
                               f"{cls._duplicate_strategy!r}")

        if clear_on_unmount is not None:
            cls._clear_on_unmount = clear_on_unmount

    @classmethod
    def reset_for_testing(cls) -> None:
        """
        Reset all announcer state for test isolation.

        Call this in test fixtures to ensure tests don't affect each other.
        """
        cls._instances = {}
        cls._surface_host = None
        cls._duplicate_strategy = "clear"
        cls._clear_on_unmount = True
        logger.debug("LiveAnnouncer reset for testing")

    @classmethod
    def clear_on_unmount_default(cls) -> bool:
        return cls._clear_on_unmount

    # ------------------------------------------------------------------
    # Surface
    # ------------------------------------------------------------------

    @property
    def politeness(self) -> Politeness:
        return self._politeness

    @property
    def surface(self) -> Optional[ILiveSurface]:
        """The surface, created on first access (None if the host failed)."""
        if self._surface is None:
            host = type(self)._surface_host
            if host is None:
                host = MemorySurfaceHost()
                type(self)._surface_host = host
            try:
                self._surface = host.create_surface(self._politeness.value)
                logger.debug(f"Created live surface for {self._politeness.value}")
            except Exception as exc:  # host boundary
                logger.error(f"Failed to create {self._politeness.value} live surface: {exc}")
                return None
        return self._surface

    @property
    def write_count(self) -> int:
        """Number of writes (announcements and clears) made so far."""
        return self._write_count

    @property
    def text(self) -> str:
        """Current surface content without any duplicate marker."""
        if self._surface is None:
            return ""
        return self._surface.text.removesuffix(DUPLICATE_TEXT_MARKER)

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------

    def announce(self, text: str) -> Optional[Announcement]:
        """
        Write text into the surface.

        Args:
            text: Message to announce; empty text is ignored

        Returns:
            The announcement written, or None when nothing was written
        """
        if not text:
            logger.debug("Empty announcement ignored")
            return None

        surface = self.surface
        if surface is None:
            return None

        try:
            if self.text == text and surface.text:
                self._write_duplicate(surface, text)
            else:
                surface.set_text(text)
        except Exception as exc:  # host boundary
            logger.error(f"Announcement failed on {self._politeness.value} surface: {exc}")
            return None

        self._write_count += 1
        return Announcement(text, self._politeness)

    def _write_duplicate(self, surface: ILiveSurface, text: str) -> None:
        if type(self)._duplicate_strategy == "vary":
            if surface.text.endswith(DUPLICATE_TEXT_MARKER):
                surface.set_text(text)
            else:
                surface.set_text(text + DUPLICATE_TEXT_MARKER)
            return
        surface.set_text("")
        surface.set_text(text)

    def clear(self) -> None:
        """Empty the surface (no-op before it exists)."""
        if self._surface is None or not self._surface.text:
            return
        try:
            self._surface.set_text("")
            self._write_count += 1
        except Exception as exc:  # host boundary
            logger.error(f"Failed to clear {self._politeness.value} surface: {exc}")


def get_live_announcer(politeness: Union[Politeness, str] = Politeness.POLITE) -> LiveAnnouncer:
    """
    Get the process-wide announcer for a politeness level.

    Returns:
        LiveAnnouncer singleton for that level
    """
    return LiveAnnouncer.instance(politeness)


def announce(
    text: str,
    politeness: Union[Politeness, str] = Politeness.POLITE,
) -> Optional[Announcement]:
    """
    Announce a message to screen readers.

    Args:
        text: Message to announce
        politeness: POLITE waits, ASSERTIVE interrupts

    Example:
        announce("Settings saved")
        announce("Error: server unavailable", Politeness.ASSERTIVE)
    """
    return get_live_announcer(politeness).announce(text)


def announce_polite(text: str) -> Optional[Announcement]:
    return announce(text, Politeness.POLITE)


def announce_assertive(text: str) -> Optional[Announcement]:
    """Announce assertively (interrupts current speech). Use sparingly."""
    return announce(text, Politeness.ASSERTIVE)


class LiveRegionBinding:
    """
    Ties announcements to an owning widget's lifecycle.

    ``update`` announces when the owner's message changes. ``unmount``
    clears the surface, unless disabled, so a remounted owner does not
    leave a stale message to be re-read. Only the owner's own write is
    cleared: any later write to the surface, even with the same text,
    belongs to someone else and is left alone.

    Example:
        binding = LiveRegionBinding(Politeness.POLITE)
        binding.update("Sorted by Name, ascending")
        ...
        binding.unmount()
    """

    def __init__(
        self,
        politeness: Union[Politeness, str] = Politeness.POLITE,
        clear_on_unmount: Optional[bool] = None,
    ):
        self._politeness = Politeness.coerce(politeness)
        if clear_on_unmount is None:
            clear_on_unmount = LiveAnnouncer.clear_on_unmount_default()
        self.clear_on_unmount = clear_on_unmount
        self._message: Optional[str] = None
        # (announcer, write_count) of this owner's last write
        self._last_write: Optional[Tuple[LiveAnnouncer, int]] = None

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def politeness(self) -> Politeness:
        return self._politeness

    def update(self, message: Optional[str]) -> None:
        """Announce message if it differs from the owner's previous one."""
        if message == self._message:
            return
        self._message = message
        self._last_write = None
        if message:
            announcer = get_live_announcer(self._politeness)
            if announcer.announce(message) is not None:
                self._last_write = (announcer, announcer.write_count)

    def owns_surface(self) -> bool:
        """True while this owner's write is still the latest on the surface."""
        if self._last_write is None:
            return False
        announcer, write_count = self._last_write
        return (
            announcer is get_live_announcer(self._politeness)
            and announcer.write_count == write_count
        )

    def unmount(self) -> None:
        if self.clear_on_unmount and self.owns_surface():
            get_live_announcer(self._politeness).clear()
        self._message = None
        self._last_write = None
