"""
Tests for data models.
"""
from datetime import datetime

import pytest
from event_manager.models import Event, Participant, Item, Priority, to_bool


def test_priority_rank():
    """Test priorities rank from HIGH to LOW."""
    assert Priority.HIGH.rank < Priority.MEDIUM.rank < Priority.LOW.rank
    assert str(Priority.HIGH) == "HIGH"
    assert Priority("low") == Priority.LOW


def test_participant_str():
    """Test participant display."""
    participant = Participant("John Doe", "91234567", "john@example.com")
    assert str(participant) == "John Doe / 91234567 / john@example.com [ ]"
    participant.is_present = True
    assert str(participant) == "John Doe / 91234567 / john@example.com [X]"


def test_participant_dict_round_trip():
    """Test Participant serialization."""
    participant = Participant("John Doe", "91234567", "john@example.com", True)
    assert Participant.from_dict(participant.to_dict()) == participant


def test_participant_from_dict_defaults():
    """Test missing keys fall back to defaults."""
    participant = Participant.from_dict({"name": " Ann "})
    assert participant == Participant("Ann")


def test_item():
    """Test Item display and serialization."""
    item = Item("Chairs", True)
    assert str(item) == "Chairs [X]"
    assert item.to_dict() == {"name": "Chairs", "present": True}
    assert Item.from_dict({"name": "Chairs", "present": "false"}) == Item("Chairs")


def test_event_lookup():
    """Test participant and item lookup ignores case."""
    event = Event("Meetup", datetime(2024, 9, 10, 10, 0), "Hall A", Priority.HIGH)
    event.participants.append(Participant("John Doe"))
    event.items.append(Item("Chairs"))

    assert event.matches(" meetup ")
    assert event.get_participant("JOHN DOE") is event.participants[0]
    assert event.get_item("chairs") is event.items[0]
    assert event.get_item("Tables") is None
    assert event.participant_count == 1
    assert event.item_count == 1


def test_event_str_and_dict():
    """Test Event display and serialization."""
    event = Event("Meetup", datetime(2024, 9, 10, 10, 0), "Hall A", Priority.HIGH, is_done=True)
    assert str(event) == ("Event name: Meetup / Event time: 2024-09-10 10:00 / "
                          "Event venue: Hall A / Event priority: HIGH / Done: [X]")
    assert event.to_dict() == {
        "name": "Meetup",
        "time": "2024-09-10 10:00",
        "venue": "Hall A",
        "priority": "high",
        "done": True,
    }


def test_event_lists_not_shared():
    """Test each event gets its own participant list."""
    first = Event("A", datetime(2024, 1, 1), "X")
    second = Event("B", datetime(2024, 1, 1), "Y")
    first.participants.append(Participant("John"))
    assert second.participants == []


@pytest.mark.parametrize("value,expected", [
    (True, True),
    ("True", True),
    ("yes", True),
    ("1", True),
    (1, True),
    (False, False),
    ("", False),
    ("no", False),
    (0, False),
    (float("nan"), False),
])
def test_to_bool(value, expected):
    """Test CSV cell values are read as booleans."""
    assert to_bool(value) is expected
