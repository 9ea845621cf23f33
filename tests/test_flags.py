"""
Tests for the flag tokenizer.
"""
import pytest
from event_manager.exceptions import MissingFieldError, DuplicateFieldError
from event_manager.parsers.flags import (
    split_by_flags,
    FlagSplit,
    ADD_EVENT_FLAGS,
    ITEM_FLAGS,
)


def test_split_basic():
    """Test splitting a line into leading text and flag segments."""
    fields = split_by_flags("add -e Meetup -t 2024-09-10 10:00 -v Hall A -u high", ADD_EVENT_FLAGS)
    assert fields.leading == "add"
    assert fields.segments == (
        ("-e", "Meetup"),
        ("-t", "2024-09-10 10:00"),
        ("-v", "Hall A"),
        ("-u", "high"),
    )
    assert len(fields) == 5


def test_split_collapses_whitespace():
    """Test values are trimmed and internal spacing collapsed."""
    fields = split_by_flags("add   -m  Name   tags  -e   Meetup  ", ITEM_FLAGS)
    assert fields.value("-m") == "Name tags"
    assert fields.value("-e") == "Meetup"


def test_split_whole_tokens_only():
    """Test flags inside words or outside the flag set are kept as text."""
    fields = split_by_flags("add -m Re-entry -name badge -e Meetup", ITEM_FLAGS)
    assert fields.value("-m") == "Re-entry -name badge"
    assert fields.flags == ["-m", "-e"]


def test_split_any_order():
    """Test fields are looked up by flag regardless of order."""
    fields = split_by_flags("add -u low -v Hall -e Meetup -t 2024-09-10 10:00", ADD_EVENT_FLAGS)
    assert fields.value("-e") == "Meetup"
    assert fields.value("-t") == "2024-09-10 10:00"
    assert fields.at(1) == "low"


def test_split_no_flags():
    """Test a line without flags is all leading text."""
    fields = split_by_flags("list everything", ITEM_FLAGS)
    assert fields == FlagSplit("list everything")
    assert len(fields) == 1


def test_duplicate_flag():
    """Test a repeated flag raises DuplicateFieldError."""
    with pytest.raises(DuplicateFieldError):
        split_by_flags("add -m Chairs -e Meetup -e Party", ITEM_FLAGS)


def test_missing_flag():
    """Test missing and blank values raise MissingFieldError."""
    fields = split_by_flags("add -m Chairs -e", ITEM_FLAGS)
    assert fields.has("-e")
    with pytest.raises(MissingFieldError):
        fields.value("-e")

    fields = split_by_flags("add -m Chairs", ITEM_FLAGS)
    assert not fields.has("-e")
    with pytest.raises(MissingFieldError):
        fields.value("-e")


def test_at_out_of_range():
    """Test positional access past the last field raises MissingFieldError."""
    fields = split_by_flags("add -m Chairs", ITEM_FLAGS)
    assert fields.at(1) == "Chairs"
    with pytest.raises(MissingFieldError):
        fields.at(2)
    with pytest.raises(MissingFieldError):
        fields.at(0)
