"""
Core data models for events, participants and items.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Any, List

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"


class Priority(Enum):
    """
    Priority level of an event.

    Members are declared from most to least urgent; `rank` follows that
    order and is used when sorting events by priority.
    """
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return list(Priority).index(self)

    def __str__(self) -> str:
        return self.name


@dataclass
class Participant:
    """
    A person attending an event.

    Attributes:
        name: Participant name
        number: 8-digit phone number
        email: Email address
        is_present: Attendance flag (default False)

    Example:
        >>> p = Participant("John Doe", "91234567", "john@example.com")
        >>> print(p)
        John Doe / 91234567 / john@example.com [ ]
    """
    name: str
    number: str = ""
    email: str = ""
    is_present: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary format (for CSV rows).

        Returns:
            Dictionary with 'name', 'number', 'email' and 'present' keys
        """
        return {
            "name": self.name,
            "number": self.number,
            "email": self.email,
            "present": self.is_present,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Participant':
        """
        Create from dictionary format.

        Args:
            data: Dictionary with 'name' and optional 'number'/'email'/'present'

        Returns:
            Participant instance
        """
        return cls(
            str(data.get("name", "")).strip(),
            str(data.get("number", "")).strip(),
            str(data.get("email", "")).strip(),
            to_bool(data.get("present", False)),
        )

    def __str__(self) -> str:
        mark = "X" if self.is_present else " "
        return f"{self.name} / {self.number} / {self.email} [{mark}]"


@dataclass
class Item:
    """
    A to-do item to be accounted for at an event.

    Attributes:
        name: Item name
        is_present: Accounted-for flag (default False)
    """
    name: str
    is_present: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "present": self.is_present}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        return cls(str(data.get("name", "")).strip(), to_bool(data.get("present", False)))

    def __str__(self) -> str:
        mark = "X" if self.is_present else " "
        return f"{self.name} [{mark}]"


@dataclass
class Event:
    """
    An event with its participants and items.

    Attributes:
        name: Event name (unique within an EventList, case-insensitive)
        time: Start date and time
        venue: Venue description
        priority: Priority level
        is_done: Completion flag
        participants: Participants in insertion order
        items: Items in insertion order
    """
    name: str
    time: datetime
    venue: str
    priority: Priority = Priority.MEDIUM
    is_done: bool = False
    participants: List[Participant] = field(default_factory=list)
    items: List[Item] = field(default_factory=list)

    def matches(self, name: str) -> bool:
        """Check if this event has the given name (case-insensitive)."""
        return self.name.lower() == name.strip().lower()

    def get_participant(self, name: str) -> Participant | None:
        for participant in self.participants:
            if participant.name.lower() == name.strip().lower():
                return participant
        return None

    def get_item(self, name: str) -> Item | None:
        for item in self.items:
            if item.name.lower() == name.strip().lower():
                return item
        return None

    @property
    def participant_count(self) -> int:
        return len(self.participants)

    @property
    def item_count(self) -> int:
        return len(self.items)

    def format_time(self) -> str:
        """Format time in the same YYYY-MM-DD HH:mm form the parser accepts."""
        return self.time.strftime(DATE_TIME_FORMAT)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event fields (without participants and items) to a dictionary.

        Returns:
            Dictionary with 'name', 'time', 'venue', 'priority' and 'done' keys
        """
        return {
            "name": self.name,
            "time": self.format_time(),
            "venue": self.venue,
            "priority": self.priority.value,
            "done": self.is_done,
        }

    def __str__(self) -> str:
        mark = "X" if self.is_done else " "
        return (f"Event name: {self.name} / Event time: {self.format_time()} / "
                f"Event venue: {self.venue} / Event priority: {self.priority} / Done: [{mark}]")


def to_bool(value: Any) -> bool:
    """Interpret CSV cell values such as True, 'true', 1 or 'yes' as booleans."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "y", "x")
    try:
        return bool(value) and bool(value == value)  # NaN is falsy here
    except (TypeError, ValueError):
        return False
