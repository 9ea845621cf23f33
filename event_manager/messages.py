"""
User-facing usage and error messages.

One usage message per command family, plus the field-level messages
raised by the validators.
"""

INVALID_COMMAND_MESSAGE = "Invalid command!"

INVALID_ADD_MESSAGE = """Invalid command!
Please enter your commands in the following format:
add -e EVENT -t TIME -v VENUE -u PRIORITY
add -p PARTICIPANT -n NUMBER -email EMAIL -e EVENT
add -m ITEM -e EVENT"""

INVALID_REMOVE_MESSAGE = """Invalid command!
Please enter your commands in the following format:
remove -e EVENT
remove -p PARTICIPANT -e EVENT
remove -m ITEM -e EVENT"""

INVALID_EDIT_MESSAGE = """Invalid command!
Please enter your commands in the following format:
edit -e OLD_EVENT -name NEW_EVENT -t TIME -v VENUE -u PRIORITY
edit -p OLD_PARTICIPANT -name NEW_PARTICIPANT -n NUMBER -email EMAIL -e EVENT
edit -m ITEM > NEW_ITEM -e EVENT"""

INVALID_VIEW_MESSAGE = """Invalid command!
Please enter your commands in the following format:
view -e EVENT -y TYPE"""

INVALID_MARK_MESSAGE = """Invalid command!
Please enter your commands in the following format:
mark -e EVENT -s STATUS
mark -p PARTICIPANT -e EVENT -s STATUS
mark -m ITEM -e EVENT -s STATUS"""

INVALID_COPY_MESSAGE = """Invalid command!
Please enter your commands in the following format:
copy FROM_EVENT > TO_EVENT"""

INVALID_SORT_MESSAGE = """Invalid command!
Please enter your commands in the following format:
sort -by name/time/priority"""

INVALID_FILTER_MESSAGE = """Invalid command!
Please enter your commands in the following format:
filter -e/-d/-t/-x/-u FILTER_DESCRIPTION"""

INVALID_FIND_MESSAGE = """Invalid command!
Please enter your commands in the following format:
find -e EVENT -p NAME"""

INVALID_DATE_TIME_MESSAGE = """Invalid date-time format!
Please use the following format for event time:
YYYY-MM-DD HH:mm

MM-DD has to be between 01-01 and 12-31, and HH:mm has to be between 00:00 and 23:59."""

INVALID_DATE_MESSAGE = """Invalid date format!
Please use the following format for the date:
YYYY-MM-DD"""

INVALID_TIME_MESSAGE = """Invalid time format!
Please use the following format for the time:
HH:mm"""

INVALID_PRIORITY_MESSAGE = """Invalid priority level status!
Please use the following format for priority level:
high/medium/low"""

INVALID_PHONE_NUMBER_MESSAGE = """Invalid phone number!
Please enter a valid phone number with exactly 8 digits."""

INVALID_EMAIL_MESSAGE = """Invalid email format!
Please enter a valid email address."""

INVALID_TYPE_MESSAGE = """Invalid type!
Please set the type as either "participant" or "item\""""

INVALID_EVENT_STATUS_MESSAGE = """Invalid event status!
Please set the event status as either "done" or "undone\""""

INVALID_PARTICIPANT_STATUS_MESSAGE = """Invalid participant status!
Please set the participant status as either "present" or "absent\""""

INVALID_ITEM_STATUS_MESSAGE = """Invalid item status!
Please set the item status as either "accounted" or "unaccounted\""""

INVALID_SORT_KEYWORD_MESSAGE = """Invalid sort keyword!
Please set the sort keyword as either "name"/"time"/"priority\""""

INVALID_FILTER_FLAG_MESSAGE = """Invalid filter flag!
Please set the filter flag as either "-e/-d/-t/-x/-u\""""

INVALID_FIND_FLAG_MESSAGE = """Invalid find flag!
Please set the find flag using "-e" and "-p\""""

USAGE_MESSAGES = {
    "add": INVALID_ADD_MESSAGE,
    "remove": INVALID_REMOVE_MESSAGE,
    "edit": INVALID_EDIT_MESSAGE,
    "view": INVALID_VIEW_MESSAGE,
    "mark": INVALID_MARK_MESSAGE,
    "copy": INVALID_COPY_MESSAGE,
    "sort": INVALID_SORT_MESSAGE,
    "filter": INVALID_FILTER_MESSAGE,
    "find": INVALID_FIND_MESSAGE,
}


def get_usage_message(command_word: str) -> str:
    """Return the usage message for a command word, or the generic one."""
    return USAGE_MESSAGES.get(command_word.lower(), INVALID_COMMAND_MESSAGE)
