"""
Host capability interfaces.

Provides Protocol definitions for everything the focus engine needs from the
environment, so controllers can run against a Qt widget tree, an in-memory
fake tree, or any other host without importing it.

Usage:
    from focus_core.interfaces import IFocusHost

    class MyHost:
        def query_focusable(self, container): ...
        def focus(self, element): ...
        def is_connected(self, element): ...
        def active_element(self): ...

    assert isinstance(MyHost(), IFocusHost)
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class IFocusable(Protocol):
    """Opaque handle to a UI node that may receive focus.

    Handles compare equal when they refer to the same host node.
    """

    @property
    def tab_reachable(self) -> bool:
        """Whether the node participates in sequential (Tab) navigation."""
        ...

    @property
    def disabled(self) -> bool:
        """Whether the node is disabled."""
        ...

    @property
    def visible(self) -> bool:
        """Whether the node is rendered and shown."""
        ...


@runtime_checkable
class IFocusHost(Protocol):
    """Tree-query and focus capabilities of the hosting UI.

    Focus requests may be applied asynchronously by the host; callers must
    read ``active_element()`` rather than assume a request took effect.
    """

    def query_focusable(self, container: Any) -> Sequence[Any]:
        """Return candidate descendants of container in document order.

        Candidates are unfiltered; eligibility is decided by the registry.
        """
        ...

    def focus(self, element: Any) -> None:
        """Request focus on element. May raise if the host refuses."""
        ...

    def is_connected(self, element: Any) -> bool:
        """Whether element is still attached to the live tree."""
        ...

    def active_element(self) -> Optional[Any]:
        """Return the element currently holding focus, if any."""
        ...


@runtime_checkable
class ILiveSurface(Protocol):
    """A persistent, visually hidden text surface read by assistive technology."""

    @property
    def text(self) -> str:
        ...

    @property
    def attributes(self) -> Dict[str, str]:
        ...

    def set_text(self, text: str) -> None:
        """Replace the surface content."""
        ...


@runtime_checkable
class ISurfaceHost(Protocol):
    """Factory for live surfaces, one call per politeness level."""

    def create_surface(self, politeness: str) -> ILiveSurface:
        ...
