"""
Data models for the event manager.
"""
from .event import Event, Participant, Item, Priority, DATE_TIME_FORMAT, to_bool

__all__ = [
    'Event',
    'Participant',
    'Item',
    'Priority',
    'DATE_TIME_FORMAT',
    'to_bool',
]
