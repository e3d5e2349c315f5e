"""Persistence for activities, preferences and quiz results."""

from screenaware.storage.activity_store import ActivityStore, duration_from_parts, today_key
from screenaware.storage.local_storage import LocalStorage

__all__ = ["ActivityStore", "LocalStorage", "duration_from_parts", "today_key"]
