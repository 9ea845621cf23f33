"""
Tests for command execution against the event list.
"""
from datetime import datetime

import pytest
from event_manager.commands import (
    MenuCommand,
    ListCommand,
    ExitCommand,
    AddEventCommand,
    AddParticipantCommand,
    AddItemCommand,
    RemoveEventCommand,
    EditItemCommand,
    ViewCommand,
    MarkEventCommand,
    MarkParticipantCommand,
    CopyCommand,
    SortCommand,
    FilterCommand,
    FindCommand,
)
from event_manager.data import EventList
from event_manager.models import Priority


@pytest.fixture
def events():
    events = EventList()
    AddEventCommand("Meetup", datetime(2024, 9, 10, 10, 0), "Hall A", Priority.MEDIUM).execute(events)
    AddEventCommand("Concert", datetime(2024, 8, 1, 20, 0), "Stadium", Priority.HIGH).execute(events)
    AddParticipantCommand("John Doe", "91234567", "john@example.com", "Meetup").execute(events)
    AddItemCommand("Chairs", "Meetup").execute(events)
    return events


def test_menu():
    """Test menu is rendered as markdown."""
    output = MenuCommand().execute(EventList())
    assert output.markdown
    assert "add -e EVENT -t TIME -v VENUE -u PRIORITY" in output.message
    assert not output.is_exit


def test_exit():
    """Test exit ends the loop."""
    output = ExitCommand().execute(EventList())
    assert output.is_exit
    assert output.message == "Thank you for using EventManagerCLI! Goodbye!"


def test_list(events):
    """Test listing events."""
    output = ListCommand().execute(events)
    lines = output.message.splitlines()
    assert lines[0] == "There are 2 events in your list! Here are your scheduled events:"
    assert lines[1] == ("1. Event name: Meetup / Event time: 2024-09-10 10:00 / "
                        "Event venue: Hall A / Event priority: MEDIUM / Done: [ ]")

    assert ListCommand().execute(EventList()).message == "There are no events in your list!"


def test_add_messages(events):
    """Test add reports success and store errors."""
    cmd = AddEventCommand("Brunch", datetime(2024, 9, 10, 11, 0), "Cafe", Priority.LOW)
    assert cmd.execute(events).message == "Event added successfully"
    assert cmd.execute(events).message == "Duplicate event!"
    assert AddItemCommand("Cups", "Party").execute(events).message == "Event not found!"


def test_remove_event(events):
    """Test removing an event."""
    assert RemoveEventCommand("Concert").execute(events).message == "Event removed successfully"
    assert len(events) == 1


def test_edit_item(events):
    """Test renaming an item."""
    assert EditItemCommand("Chairs", "Tables", "Meetup").execute(events).message == "Item successfully updated"
    assert events.get_event("Meetup").get_item("Tables") is not None
    assert EditItemCommand("Chairs", "Tables", "Meetup").execute(events).message == "Item not found!"


def test_view(events):
    """Test viewing participants and items."""
    output = ViewCommand("meetup", True).execute(events)
    assert output.message.splitlines() == [
        "There are 1 participants in Meetup! Here are your participants:",
        "1. John Doe / 91234567 / john@example.com [ ]",
    ]

    output = ViewCommand("Meetup", False).execute(events)
    assert output.message.splitlines()[1] == "1. Chairs [ ]"


def test_mark(events):
    """Test mark messages name the new state."""
    assert MarkEventCommand("Meetup", True).execute(events).message == "Event Meetup marked as done"
    assert events.get_event("Meetup").is_done

    output = MarkParticipantCommand("john doe", "Meetup", True).execute(events)
    assert output.message == "Participant John Doe marked present"
    output = MarkParticipantCommand("Ann", "Meetup", True).execute(events)
    assert output.message == "Participant not found!"


def test_copy(events):
    """Test copying participants."""
    output = CopyCommand("Meetup", "Concert").execute(events)
    assert output.message == "Participant list copied over from Meetup to Concert successfully (1 participants)"
    assert events.get_event("Concert").participant_count == 1


def test_sort(events):
    """Test sort keeps the new order."""
    output = SortCommand("time").execute(events)
    assert output.message.startswith("Events sorted by time successfully!")
    assert [e.name for e in events] == ["Concert", "Meetup"]


def test_filter(events):
    """Test filter by date and by item."""
    output = FilterCommand("-d", "2024-09-10").execute(events)
    assert output.message.splitlines()[0] == 'Here are the events matching "2024-09-10":'
    assert len(output.message.splitlines()) == 2

    output = FilterCommand("-x", "tables").execute(events)
    assert output.message == 'There are no events matching "tables"!'

    output = FilterCommand("-u", "high").execute(events)
    assert "Concert" in output.message


def test_find(events):
    """Test finding participants."""
    output = FindCommand("Meetup", "john").execute(events)
    assert output.message.splitlines()[1] == "1. John Doe / 91234567 / john@example.com [ ]"
    assert FindCommand("Party", "john").execute(events).message == "Event not found!"
