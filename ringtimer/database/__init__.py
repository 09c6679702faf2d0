"""Database package."""

from .models import Preference
from .store import DatabaseStore, open_database

__all__ = ["DatabaseStore", "Preference", "open_database"]
