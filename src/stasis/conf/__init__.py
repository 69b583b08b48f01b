"""Django-like settings system for Stasis.

Usage:
    # In your game project's settings.py
    from stasis.conf import global_settings

    # Override defaults
    DEFAULT_SCENE = "Level1"
    SCENES = ["menu", "Level1", "Level2"]
    GAMEPLAY_SCENES = ["Level1", "Level2"]

    # In your game code
    from stasis.conf import settings

    print(settings.DEFAULT_SCENE)  # "Level1"
"""

import importlib
import os
from typing import Any

from stasis.conf import global_settings


class LazySettings:
    """Lazy settings proxy that loads user settings on first access.

    Settings are loaded from:
    1. global_settings (framework defaults)
    2. User's settings module (overrides)

    The settings module location is determined by:
    - STASIS_SETTINGS_MODULE environment variable, or
    - Convention: "settings" module in current directory
    """

    def __init__(self) -> None:
        """Initialize the lazy settings proxy."""
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        """Load settings from global_settings and user's settings module."""
        settings_module = os.environ.get("STASIS_SETTINGS_MODULE", "settings")

        self._wrapped = Settings()

        try:
            mod = importlib.import_module(settings_module)
            for setting in dir(mod):
                if setting.isupper():
                    setattr(self._wrapped, setting, getattr(mod, setting))
        except ImportError:
            # No user settings module found, use defaults only
            pass

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        if self._wrapped is None:
            self._setup()
        if self._wrapped is None:
            msg = "Settings could not be loaded"
            raise RuntimeError(msg)
        return getattr(self._wrapped, name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            if self._wrapped is None:
                self._setup()
            if self._wrapped is None:
                msg = "Settings could not be loaded"
                raise RuntimeError(msg)
            setattr(self._wrapped, name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Manually configure settings (useful for testing).

        Example:
            settings.configure(
                SAVE_FILE="/tmp/prefs.json",
                DEFAULT_SCENE="Level1",
            )
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)


class Settings:
    """Container for all settings with attribute access."""

    def __init__(self) -> None:
        """Initialize settings with defaults from global_settings."""
        for setting in dir(global_settings):
            if setting.isupper():
                value = getattr(global_settings, setting)
                # Lists are copied so configure() on one instance never leaks into the defaults
                setattr(self, setting, list(value) if isinstance(value, list) else value)


# Global singleton instance
settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
