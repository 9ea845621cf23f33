"""
Tests for field validators.
"""
from datetime import datetime, date, time

import pytest
from event_manager import messages
from event_manager.exceptions import (
    InvalidDateTimeError,
    InvalidPriorityError,
    InvalidPhoneNumberError,
    InvalidEmailError,
    InvalidEventStatusError,
)
from event_manager.models import Priority
from event_manager.parsers.validators import (
    is_valid_phone_number,
    is_valid_email,
    parse_date_time,
    parse_date,
    parse_time,
    parse_priority,
    parse_phone_number,
    parse_email,
    parse_status,
)


def test_phone_number():
    """Test phone numbers must be exactly 8 digits."""
    assert is_valid_phone_number("91234567")
    assert not is_valid_phone_number("9123456")
    assert not is_valid_phone_number("912345678")
    assert not is_valid_phone_number("9123 456")
    assert not is_valid_phone_number("abcdefgh")
    assert not is_valid_phone_number("")
    assert not is_valid_phone_number("٩١٢٣٤٥٦٧")
    assert not is_valid_phone_number("９１２３４５６７")


def test_email():
    """Test email shape local@domain.tld."""
    assert is_valid_email("john@example.com")
    assert is_valid_email("john.doe+work@mail-host.org")
    assert not is_valid_email("john@example")
    assert not is_valid_email("john.example.com")
    assert not is_valid_email("john@@example.com")


def test_parse_date_time():
    """Test YYYY-MM-DD HH:mm parsing."""
    assert parse_date_time("2024-09-10 10:00") == datetime(2024, 9, 10, 10, 0)
    assert parse_date_time(" 2024-12-31 23:59 ") == datetime(2024, 12, 31, 23, 59)


@pytest.mark.parametrize("text", [
    "2024-13-10 10:00",
    "2024-02-30 10:00",
    "2024-09-10 24:00",
    "2024-09-10 10:60",
    "2024-9-1 9:00",
    "2024-09-10",
    "10:00",
    "tomorrow",
    "２０２４-09-10 10:00",
])
def test_parse_date_time_invalid(text):
    """Test invalid date-times raise InvalidDateTimeError."""
    with pytest.raises(InvalidDateTimeError) as exc:
        parse_date_time(text)
    assert exc.value.message == messages.INVALID_DATE_TIME_MESSAGE


def test_parse_date_and_time():
    """Test separate date and time parsing."""
    assert parse_date("2024-09-10") == date(2024, 9, 10)
    assert parse_time("07:05") == time(7, 5)

    with pytest.raises(InvalidDateTimeError) as exc:
        parse_date("10-09-2024")
    assert exc.value.message == messages.INVALID_DATE_MESSAGE

    with pytest.raises(InvalidDateTimeError) as exc:
        parse_time("7pm")
    assert exc.value.message == messages.INVALID_TIME_MESSAGE


def test_parse_priority():
    """Test priority is case-insensitive."""
    assert parse_priority("high") == Priority.HIGH
    assert parse_priority("Medium") == Priority.MEDIUM
    assert parse_priority("LOW") == Priority.LOW

    with pytest.raises(InvalidPriorityError):
        parse_priority("urgent")


def test_parse_phone_and_email():
    """Test parse functions return trimmed values or raise."""
    assert parse_phone_number(" 91234567 ") == "91234567"
    assert parse_email(" john@example.com ") == "john@example.com"

    with pytest.raises(InvalidPhoneNumberError):
        parse_phone_number("1234")
    with pytest.raises(InvalidEmailError):
        parse_email("john")


def test_parse_status():
    """Test status pairs map to booleans case-insensitively."""
    assert parse_status("done", "done", "undone", InvalidEventStatusError) is True
    assert parse_status("UNDONE", "done", "undone", InvalidEventStatusError) is False

    with pytest.raises(InvalidEventStatusError):
        parse_status("finished", "done", "undone", InvalidEventStatusError)
