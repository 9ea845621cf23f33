"""
Data access layer for the event manager.

Provides the in-memory event list and its CSV storage.
"""
from .event_list import EventList
from .storage import Storage

__all__ = [
    'EventList',
    'Storage',
]
