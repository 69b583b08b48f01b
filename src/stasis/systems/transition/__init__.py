"""Transition system for restoring saved state across scene loads."""

from stasis.systems.transition.manager import TransitionManager, TransitionState

__all__ = ["TransitionManager", "TransitionState"]
