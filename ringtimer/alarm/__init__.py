"""Alarm package."""

from .controller import AlarmController, AlarmMode, AlarmSession, AUTO_DISMISS_SECONDS

__all__ = ["AlarmController", "AlarmMode", "AlarmSession", "AUTO_DISMISS_SECONDS"]
