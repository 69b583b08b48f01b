"""Menu system."""

from stasis.systems.menu.manager import MenuManager

__all__ = ["MenuManager"]
