import faulthandler
import os
import sys
import time
from pathlib import Path

import pytest

# Qt widgets are created headless in the adapter tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from focus_core.aria import reset_id_counter
from focus_core.config import FocusConfig
from focus_core.fake_tree import FakeTree
from focus_core.live_announcer import LiveAnnouncer, MemorySurfaceHost

# =============================================================================
# Global singleton reset fixture for test isolation
# =============================================================================

@pytest.fixture(autouse=True)
def reset_focus_singletons():
    """
    Reset process-wide engine state after each test for proper isolation.

    Singletons reset:
    - LiveAnnouncer: per-politeness instances, surface host and settings
    - ARIA id counter
    """
    # Run the test
    yield

    # Teardown: reset all singletons
    LiveAnnouncer.reset_for_testing()
    reset_id_counter()


@pytest.fixture
def tree():
    """Fresh in-memory focus host."""
    return FakeTree()


@pytest.fixture
def surfaces():
    """
    Memory surface host installed on the announcers.

    Tests read announcements from ``surfaces.surfaces[Politeness.X]``.
    """
    host = MemorySurfaceHost()
    LiveAnnouncer.configure(surface_host=host)
    return host


@pytest.fixture
def temp_config(tmp_path):
    """
    Provide a fresh FocusConfig with validation.

    This fixture GUARANTEES a clean config or fails loudly.
    """
    config_path = tmp_path / f"config_{id(tmp_path)}_{time.time_ns()}.json"
    config = FocusConfig(config_file=config_path)

    assert config.duplicate_strategy == "clear", \
        f"FIXTURE CONTAMINATED! duplicate_strategy={config.duplicate_strategy}"
    assert config.toast_duration_ms == 6000, \
        f"FIXTURE CONTAMINATED! duration={config.toast_duration_ms}"

    return config


def pytest_collection_modifyitems(config, items):
    """Assign tier markers based on test location."""
    for item in items:
        path = Path(str(item.fspath)).as_posix()

        if "/tests/unit/focus_qt/" in path:
            item.add_marker(pytest.mark.gui)
            continue

        if "/tests/unit/" in path:
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)


def pytest_sessionstart(session):  # pragma: no cover - test harness init
    """Enable faulthandler for the entire test run to aid diagnosing hangs."""
    try:
        faulthandler.enable(file=sys.stderr, all_threads=True)
    except Exception:
        pass
