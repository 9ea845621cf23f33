"""
In-memory event store.

Holds the ordered list of events with their participants and items and
provides the CRUD, mark, sort, filter and find operations that commands
execute against. Names are matched case-insensitively.
"""
import logging
from datetime import datetime, date, time
from typing import List, Iterator

from event_manager.exceptions import ItemNotFoundError, DuplicateDataError
from event_manager.models import Event, Participant, Item, Priority

logger = logging.getLogger(__name__)

EVENT_NOT_FOUND_MESSAGE = "Event not found!"
PARTICIPANT_NOT_FOUND_MESSAGE = "Participant not found!"
ITEM_NOT_FOUND_MESSAGE = "Item not found!"
DUPLICATE_EVENT_MESSAGE = "Duplicate event!"
DUPLICATE_PARTICIPANT_MESSAGE = "Duplicate participant!"
DUPLICATE_ITEM_MESSAGE = "Duplicate item!"


class EventList:
    """
    Manages the list of events.

    Example:
        >>> events = EventList()
        >>> events.add_event("Meetup", datetime(2024, 9, 10, 10, 0), "Hall A", Priority.HIGH)
        >>> events.add_participant("John", "91234567", "john@example.com", "Meetup")
        >>> events.get_event("meetup").participant_count
        1
    """

    def __init__(self):
        self._events: List[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def get_event(self, name: str) -> Event:
        """
        Get an event by name.

        Raises:
            ItemNotFoundError: If no event has that name
        """
        for event in self._events:
            if event.matches(name):
                return event
        raise ItemNotFoundError(EVENT_NOT_FOUND_MESSAGE)

    def has_event(self, name: str) -> bool:
        return any(event.matches(name) for event in self._events)

    # ==================== Events ====================

    def add_event(self, name: str, event_time: datetime, venue: str,
                  priority: Priority, is_done: bool = False) -> None:
        """
        Add a new event to the end of the list.

        Raises:
            DuplicateDataError: If an event with the same name exists
        """
        if self.has_event(name):
            raise DuplicateDataError(DUPLICATE_EVENT_MESSAGE)

        event = Event(name, event_time, venue, priority, is_done)
        self._events.append(event)
        logger.info("Added event %s", name)

    def remove_event(self, name: str) -> None:
        event = self.get_event(name)
        self._events.remove(event)
        logger.info("Removed event %s", event.name)

    def edit_event(self, name: str, new_name: str, event_time: datetime,
                   venue: str, priority: Priority) -> None:
        """
        Replace all fields of an event.

        Raises:
            ItemNotFoundError: If the event does not exist
            DuplicateDataError: If new_name belongs to a different event
        """
        event = self.get_event(name)
        if not event.matches(new_name) and self.has_event(new_name):
            raise DuplicateDataError(DUPLICATE_EVENT_MESSAGE)

        event.name = new_name
        event.time = event_time
        event.venue = venue
        event.priority = priority

    def mark_event(self, name: str, is_done: bool) -> Event:
        event = self.get_event(name)
        event.is_done = is_done
        return event

    # ==================== Participants ====================

    def add_participant(self, name: str, number: str, email: str, event_name: str) -> None:
        event = self.get_event(event_name)
        if event.get_participant(name) is not None:
            raise DuplicateDataError(DUPLICATE_PARTICIPANT_MESSAGE)
        event.participants.append(Participant(name, number, email))

    def remove_participant(self, name: str, event_name: str) -> None:
        event = self.get_event(event_name)
        participant = self._get_participant(event, name)
        event.participants.remove(participant)

    def edit_participant(self, name: str, new_name: str, number: str,
                         email: str, event_name: str) -> None:
        event = self.get_event(event_name)
        participant = self._get_participant(event, name)
        other = event.get_participant(new_name)
        if other is not None and other is not participant:
            raise DuplicateDataError(DUPLICATE_PARTICIPANT_MESSAGE)

        participant.name = new_name
        participant.number = number
        participant.email = email

    def mark_participant(self, name: str, event_name: str, is_present: bool) -> Participant:
        participant = self._get_participant(self.get_event(event_name), name)
        participant.is_present = is_present
        return participant

    def find_participants(self, event_name: str, query: str) -> List[Participant]:
        """
        Find participants of an event whose name contains the query.

        Args:
            event_name: Event to search
            query: Case-insensitive substring of the participant name

        Returns:
            Matching participants in list order (may be empty)
        """
        event = self.get_event(event_name)
        needle = query.strip().lower()
        return [p for p in event.participants if needle in p.name.lower()]

    def copy_participants(self, from_event: str, to_event: str) -> int:
        """
        Replace the participants of one event with copies of another's.

        Attendance is reset on the copies.

        Returns:
            Number of participants copied
        """
        source = self.get_event(from_event)
        target = self.get_event(to_event)
        target.participants = [Participant(p.name, p.number, p.email) for p in source.participants]
        return len(target.participants)

    # ==================== Items ====================

    def add_item(self, name: str, event_name: str) -> None:
        event = self.get_event(event_name)
        if event.get_item(name) is not None:
            raise DuplicateDataError(DUPLICATE_ITEM_MESSAGE)
        event.items.append(Item(name))

    def remove_item(self, name: str, event_name: str) -> None:
        event = self.get_event(event_name)
        event.items.remove(self._get_item(event, name))

    def edit_item(self, name: str, new_name: str, event_name: str) -> None:
        event = self.get_event(event_name)
        item = self._get_item(event, name)
        other = event.get_item(new_name)
        if other is not None and other is not item:
            raise DuplicateDataError(DUPLICATE_ITEM_MESSAGE)
        item.name = new_name

    def mark_item(self, name: str, event_name: str, is_present: bool) -> Item:
        item = self._get_item(self.get_event(event_name), name)
        item.is_present = is_present
        return item

    # ==================== Sorting ====================

    def sort_by_name(self) -> None:
        self._events.sort(key=lambda e: e.name.lower())

    def sort_by_time(self) -> None:
        self._events.sort(key=lambda e: e.time)

    def sort_by_priority(self) -> None:
        """Sort HIGH first; ties keep their current order."""
        self._events.sort(key=lambda e: e.priority.rank)

    # ==================== Filtering ====================

    def filter_by_name(self, text: str) -> List[Event]:
        needle = text.strip().lower()
        return [e for e in self._events if needle in e.name.lower()]

    def filter_by_date(self, day: date) -> List[Event]:
        return [e for e in self._events if e.time.date() == day]

    def filter_by_time(self, at: time) -> List[Event]:
        return [e for e in self._events if e.time.time() == at]

    def filter_by_item(self, text: str) -> List[Event]:
        needle = text.strip().lower()
        return [e for e in self._events
                if any(needle in item.name.lower() for item in e.items)]

    def filter_by_priority(self, priority: Priority) -> List[Event]:
        return [e for e in self._events if e.priority == priority]

    # ==================== Helpers ====================

    def _get_participant(self, event: Event, name: str) -> Participant:
        participant = event.get_participant(name)
        if participant is None:
            raise ItemNotFoundError(PARTICIPANT_NOT_FOUND_MESSAGE)
        return participant

    def _get_item(self, event: Event, name: str) -> Item:
        item = event.get_item(name)
        if item is None:
            raise ItemNotFoundError(ITEM_NOT_FOUND_MESSAGE)
        return item
