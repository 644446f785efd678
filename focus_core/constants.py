"""
Engine-wide constants for the focus engine.

Centralizes key names, live-region surface settings and widget timing
defaults so controllers and widgets agree on them.
"""

# =============================================================================
# Key Names
# =============================================================================

# Key names follow the DOM ``KeyboardEvent.key`` vocabulary so that any host
# adapter (Qt, a fake tree, a terminal toolkit) can translate into one set.
KEY_TAB = "Tab"
KEY_ENTER = "Enter"
KEY_SPACE = " "
KEY_ESCAPE = "Escape"
KEY_ARROW_UP = "ArrowUp"
KEY_ARROW_DOWN = "ArrowDown"
KEY_ARROW_LEFT = "ArrowLeft"
KEY_ARROW_RIGHT = "ArrowRight"
KEY_HOME = "Home"
KEY_END = "End"
KEY_PAGE_UP = "PageUp"
KEY_PAGE_DOWN = "PageDown"

ARROW_KEYS = (KEY_ARROW_UP, KEY_ARROW_DOWN, KEY_ARROW_LEFT, KEY_ARROW_RIGHT)
NAVIGATION_KEYS = (KEY_HOME, KEY_END, KEY_PAGE_UP, KEY_PAGE_DOWN)
ACTIVATION_KEYS = (KEY_ENTER, KEY_SPACE)


# =============================================================================
# Live Regions
# =============================================================================

# Surface id prefix; one surface per politeness, e.g. "aria-live-polite"
LIVE_REGION_ID_PREFIX = "aria-live-"

# Role applied to every announcement surface
LIVE_REGION_ROLE = "status"

# Off-screen geometry for the visually hidden surface
LIVE_REGION_HIDDEN_STYLE = {
    "position": "absolute",
    "left": "-10000px",
    "width": "1px",
    "height": "1px",
    "overflow": "hidden",
}

# Appended/removed on alternate duplicate announcements ("vary" strategy)
DUPLICATE_TEXT_MARKER = "\u00a0"

DUPLICATE_STRATEGIES = ("clear", "vary")


# =============================================================================
# Widgets
# =============================================================================

# WCAG 2.2.1 allows users time to read; 6 seconds is the library default
TOAST_DURATION_MS_DEFAULT = 6000

# Guard rails for configured toast durations (0 = never auto-dismiss)
TOAST_DURATION_MS_MAX = 60_000

# Default ARIA id prefix for generated ids
ARIA_ID_PREFIX_DEFAULT = "id"


# =============================================================================
# Files
# =============================================================================

APP_DIR_NAME = ".focus_engine"
CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "focus.log"
