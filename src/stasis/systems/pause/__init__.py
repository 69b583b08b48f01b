"""Pause system for gating time progression."""

from stasis.systems.pause.manager import PauseManager

__all__ = ["PauseManager"]
