"""
Field validators for command parsing.

Pure functions: the is_valid_* checks return booleans, the parse_*
functions return the typed value or raise the matching
InvalidCommandError subclass.
"""
import re
from datetime import datetime, date, time

from event_manager import messages
from event_manager.exceptions import (
    InvalidDateTimeError,
    InvalidPriorityError,
    InvalidPhoneNumberError,
    InvalidEmailError,
)
from event_manager.models import Priority, DATE_TIME_FORMAT

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

PHONE_NUMBER_RE = re.compile(r"\d{8}", re.ASCII)
EMAIL_RE = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9-]+\.[A-Za-z0-9-]+")

# Strict shapes checked before strptime, which also accepts "2024-9-1 9:00"
DATE_TIME_SHAPE_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}", re.ASCII)
DATE_SHAPE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_SHAPE_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)


def is_valid_phone_number(number: str) -> bool:
    """
    Check that a phone number is exactly 8 digits.

    Example:
        >>> is_valid_phone_number("91234567")
        True
        >>> is_valid_phone_number("9123 4567")
        False
    """
    return PHONE_NUMBER_RE.fullmatch(number) is not None


def is_valid_email(email: str) -> bool:
    """Check that an email looks like local@domain.tld."""
    return EMAIL_RE.fullmatch(email) is not None


def parse_date_time(text: str) -> datetime:
    """
    Parse a YYYY-MM-DD HH:mm date-time (24-hour clock).

    Raises:
        InvalidDateTimeError: If text is not a valid date-time
    """
    text = text.strip()
    if not DATE_TIME_SHAPE_RE.fullmatch(text):
        raise InvalidDateTimeError()
    try:
        return datetime.strptime(text, DATE_TIME_FORMAT)
    except ValueError as e:
        raise InvalidDateTimeError() from e


def parse_date(text: str) -> date:
    """Parse a YYYY-MM-DD date, raising InvalidDateTimeError on failure."""
    text = text.strip()
    if not DATE_SHAPE_RE.fullmatch(text):
        raise InvalidDateTimeError(messages.INVALID_DATE_MESSAGE)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateTimeError(messages.INVALID_DATE_MESSAGE) from e


def parse_time(text: str) -> time:
    """Parse an HH:mm time, raising InvalidDateTimeError on failure."""
    text = text.strip()
    if not TIME_SHAPE_RE.fullmatch(text):
        raise InvalidDateTimeError(messages.INVALID_TIME_MESSAGE)
    try:
        return datetime.strptime(text, TIME_FORMAT).time()
    except ValueError as e:
        raise InvalidDateTimeError(messages.INVALID_TIME_MESSAGE) from e


def parse_priority(text: str) -> Priority:
    """
    Parse a priority level case-insensitively.

    Example:
        >>> parse_priority("High")
        <Priority.HIGH: 'high'>
    """
    try:
        return Priority[text.strip().upper()]
    except KeyError as e:
        raise InvalidPriorityError() from e


def parse_phone_number(text: str) -> str:
    number = text.strip()
    if not is_valid_phone_number(number):
        raise InvalidPhoneNumberError()
    return number


def parse_email(text: str) -> str:
    email = text.strip()
    if not is_valid_email(email):
        raise InvalidEmailError()
    return email


def parse_status(text: str, mark_word: str, unmark_word: str, error_class) -> bool:
    """
    Parse one of a pair of status words into a boolean.

    Args:
        text: Status token from the input
        mark_word: Word meaning True (e.g. "done")
        unmark_word: Word meaning False (e.g. "undone")
        error_class: InvalidStatusError subclass raised for any other word

    Returns:
        True for mark_word, False for unmark_word
    """
    status = text.strip().lower()
    if status == mark_word:
        return True
    if status == unmark_word:
        return False
    raise error_class()
