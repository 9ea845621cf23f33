"""
Tests for CSV storage.
"""
from datetime import datetime

import pandas as pd
import pytest
from event_manager.data import EventList, Storage
from event_manager.models import Priority


@pytest.fixture
def storage(tmp_path):
    return Storage(tmp_path / "events.csv", tmp_path / "participants.csv", tmp_path / "items.csv")


def test_load_missing_files(storage):
    """Test missing files load as an empty list."""
    assert len(storage.load()) == 0


def test_save_and_load(storage):
    """Test saved events, participants and items load back."""
    events = EventList()
    events.add_event("Meetup", datetime(2024, 9, 10, 10, 0), "Hall A", Priority.HIGH)
    events.add_event("Brunch", datetime(2024, 9, 11, 11, 0), "Cafe", Priority.LOW, is_done=True)
    events.add_participant("John Doe", "91234567", "john@example.com", "Meetup")
    events.mark_participant("John Doe", "Meetup", True)
    events.add_item("Chairs", "Brunch")

    storage.save(events)
    loaded = storage.load()

    assert [e.name for e in loaded] == ["Meetup", "Brunch"]
    meetup = loaded.get_event("Meetup")
    assert meetup.time == datetime(2024, 9, 10, 10, 0)
    assert meetup.priority == Priority.HIGH
    assert not meetup.is_done
    assert meetup.participants[0].number == "91234567"
    assert meetup.participants[0].is_present

    brunch = loaded.get_event("Brunch")
    assert brunch.is_done
    assert brunch.items[0].name == "Chairs"
    assert not brunch.items[0].is_present


def test_load_skips_bad_rows(storage):
    """Test malformed rows are skipped and the rest load."""
    pd.DataFrame([
        {"name": "Meetup", "time": "2024-09-10 10:00", "venue": "Hall A", "priority": "high", "done": "False"},
        {"name": "Broken", "time": "next week", "venue": "Hall B", "priority": "low", "done": "False"},
        {"name": "Gala", "time": "2024-10-01 19:00", "venue": "Ballroom", "priority": "urgent", "done": "False"},
    ]).to_csv(storage.events_file, index=False)
    pd.DataFrame([
        {"event": "Meetup", "name": "John", "number": "91234567", "email": "j@example.com", "present": "True"},
        {"event": "Broken", "name": "Ann", "number": "91111111", "email": "a@example.com", "present": "False"},
    ]).to_csv(storage.participants_file, index=False)

    loaded = storage.load()

    assert [e.name for e in loaded] == ["Meetup"]
    assert loaded.get_event("Meetup").participant_count == 1


def test_load_header_case(storage):
    """Test column names are matched case-insensitively."""
    storage.events_file.write_text("Name, Time ,Venue,PRIORITY\nMeetup,2024-09-10 10:00,Hall A,medium\n")

    loaded = storage.load()

    event = loaded.get_event("Meetup")
    assert event.priority == Priority.MEDIUM
    assert not event.is_done


def test_load_into_existing_list(storage):
    """Test loading fills the list passed in."""
    events = EventList()
    storage.save(events)
    assert storage.load(events) is events
