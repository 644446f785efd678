"""
Configuration management for the focus engine.
Handles announcer behaviour, navigation defaults and widget timing, with
JSON persistence.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from focus_core.constants import (
    APP_DIR_NAME,
    CONFIG_FILE_NAME,
    DUPLICATE_STRATEGIES,
    TOAST_DURATION_MS_DEFAULT,
    TOAST_DURATION_MS_MAX,
)
from focus_core.logging_setup import setup_logging
from focus_core.roving import ActivationMode, WrapPolicy

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """
    Get the engine's config directory.

    Returns:
        Path to the config directory (~/.focus_engine/)
    """
    config_dir = Path.home() / APP_DIR_NAME
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


class FocusConfig:
    """
    Engine configuration with JSON persistence.

    Key ideas:
    - Settings are grouped in sections (announcer, navigation, toast, logging).
    - Files only need the keys they override; everything else comes from
      DEFAULT_CONFIG.
    - Accessors apply guard rails and fall back to defaults on bad values.
    """

    # NOTE: This structure is treated as immutable. Always use
    # _default_config_deepcopy() when you need a fresh copy of defaults.
    DEFAULT_CONFIG: Dict[str, Any] = {
        "announcer": {
            # Clear a widget's announcement when it unmounts
            "clear_on_unmount": True,
            # How identical consecutive announcements are made observable:
            # "clear" (clear then set) or "vary" (toggle trailing nbsp)
            "duplicate_strategy": "clear",
        },
        "navigation": {
            # Wrap policy per collection kind: "wrap" or "clamp"
            "tabs_wrap": "wrap",
            "table_wrap": "clamp",
            # "automatic" selects on focus move, "manual" waits for Enter/Space
            "activation_mode": "automatic",
        },
        "toast": {
            # Auto-dismiss delay in ms (0 = never, max 60s)
            "duration_ms": TOAST_DURATION_MS_DEFAULT,
            "pause_on_hover": True,
        },
        "logging": {
            "debug": False,
        },
    }

    def __init__(self, config_file: Optional[Path] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_file: Optional path to config JSON file. When omitted,
                         ~/.focus_engine/config.json is used.
        """
        self.config_file: Path = self._resolve_config_path(config_file)
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        self.data: Dict[str, Any] = self._load()
        logger.info(f"Config loaded from {self.config_file}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_config_path(config_file: Optional[Path]) -> Path:
        if config_file is not None:
            return Path(config_file)
        return Path.home() / APP_DIR_NAME / CONFIG_FILE_NAME

    def _load(self) -> Dict[str, Any]:
        """Load configuration from JSON file, merging with defaults."""
        if not self.config_file.exists():
            logger.info("No config file found, using defaults")
            return self._default_config_deepcopy()

        try:
            with self.config_file.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"Failed to load config: {exc}. Using defaults.")
            return self._default_config_deepcopy()

        if not isinstance(raw, dict):
            logger.error("Config root is not an object. Using defaults.")
            return self._default_config_deepcopy()

        return self._merge_with_defaults(raw)

    @classmethod
    def _default_config_deepcopy(cls) -> Dict[str, Any]:
        """
        Return a deep copy of DEFAULT_CONFIG to avoid state leakage
        between instances or tests.
        """
        return copy.deepcopy(cls.DEFAULT_CONFIG)

    def _merge_with_defaults(self, user_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge user config with defaults, section by section, so new keys
        appear without discarding user-provided values.
        """
        merged = self._default_config_deepcopy()

        for key, value in user_config.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key].update(value)
            else:
                merged[key] = value

        return merged

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.data.get(name)
        if not isinstance(section, dict):
            section = copy.deepcopy(self.DEFAULT_CONFIG[name])
            self.data[name] = section
        return section

    def _default(self, section: str, key: str) -> Any:
        return self.DEFAULT_CONFIG[section][key]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self) -> None:
        """Persist the current configuration to the config file."""
        try:
            with self.config_file.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=2, ensure_ascii=False)
            logger.info("Configuration saved")
        except OSError as exc:
            logger.error(f"Failed to save config: {exc}")

    def reset_to_defaults(self) -> None:
        self.data = self._default_config_deepcopy()
        self.save()

    def configure_logging(self, log_dir: Optional[Path] = None) -> Path:
        """
        Install engine logging at the level chosen by logging.debug.

        Returns:
            Path of the log file
        """
        return setup_logging(debug=self.debug_logging, log_dir=log_dir)

    def apply(self) -> None:
        """Push announcer settings into the process-wide announcers."""
        from focus_core.live_announcer import LiveAnnouncer

        LiveAnnouncer.configure(
            duplicate_strategy=self.duplicate_strategy,
            clear_on_unmount=self.clear_on_unmount,
        )

    # ------------------------------------------------------------------
    # Announcer
    # ------------------------------------------------------------------

    @property
    def clear_on_unmount(self) -> bool:
        return bool(self._section("announcer").get("clear_on_unmount", True))

    @clear_on_unmount.setter
    def clear_on_unmount(self, value: bool) -> None:
        self._section("announcer")["clear_on_unmount"] = bool(value)
        self.save()

    @property
    def duplicate_strategy(self) -> str:
        value = self._section("announcer").get("duplicate_strategy")
        if value not in DUPLICATE_STRATEGIES:
            logger.warning(f"Invalid duplicate_strategy {value!r}, using default")
            return self._default("announcer", "duplicate_strategy")
        return value

    @duplicate_strategy.setter
    def duplicate_strategy(self, value: str) -> None:
        if value not in DUPLICATE_STRATEGIES:
            raise ValueError(f"duplicate_strategy must be one of {DUPLICATE_STRATEGIES}")
        self._section("announcer")["duplicate_strategy"] = value
        self.save()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _wrap_policy(self, key: str) -> WrapPolicy:
        value = self._section("navigation").get(key)
        try:
            return WrapPolicy(value)
        except ValueError:
            logger.warning(f"Invalid navigation.{key} {value!r}, using default")
            return WrapPolicy(self._default("navigation", key))

    @property
    def tabs_wrap_policy(self) -> WrapPolicy:
        return self._wrap_policy("tabs_wrap")

    @tabs_wrap_policy.setter
    def tabs_wrap_policy(self, policy: WrapPolicy) -> None:
        self._section("navigation")["tabs_wrap"] = WrapPolicy(policy).value
        self.save()

    @property
    def table_wrap_policy(self) -> WrapPolicy:
        return self._wrap_policy("table_wrap")

    @table_wrap_policy.setter
    def table_wrap_policy(self, policy: WrapPolicy) -> None:
        self._section("navigation")["table_wrap"] = WrapPolicy(policy).value
        self.save()

    @property
    def activation_mode(self) -> ActivationMode:
        value = self._section("navigation").get("activation_mode")
        try:
            return ActivationMode(value)
        except ValueError:
            logger.warning(f"Invalid navigation.activation_mode {value!r}, using default")
            return ActivationMode(self._default("navigation", "activation_mode"))

    @activation_mode.setter
    def activation_mode(self, mode: ActivationMode) -> None:
        self._section("navigation")["activation_mode"] = ActivationMode(mode).value
        self.save()

    # ------------------------------------------------------------------
    # Toast
    # ------------------------------------------------------------------

    @property
    def toast_duration_ms(self) -> int:
        """
        Auto-dismiss delay in milliseconds.

        GUARDRAIL: 0 (never) to 60000; out-of-range values are clamped.
        """
        value = self._section("toast").get("duration_ms", TOAST_DURATION_MS_DEFAULT)
        try:
            duration = int(value)
        except (TypeError, ValueError):
            return TOAST_DURATION_MS_DEFAULT
        return max(0, min(TOAST_DURATION_MS_MAX, duration))

    @toast_duration_ms.setter
    def toast_duration_ms(self, value: int) -> None:
        self._section("toast")["duration_ms"] = max(0, min(TOAST_DURATION_MS_MAX, int(value)))
        self.save()

    @property
    def toast_pause_on_hover(self) -> bool:
        return bool(self._section("toast").get("pause_on_hover", True))

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    @property
    def debug_logging(self) -> bool:
        return bool(self._section("logging").get("debug", False))

    @debug_logging.setter
    def debug_logging(self, value: bool) -> None:
        self._section("logging")["debug"] = bool(value)
        self.save()
