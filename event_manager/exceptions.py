"""
Exceptions raised while parsing commands and updating the event list.

Every parse failure is an InvalidCommandError whose message is the
actionable text shown to the user. MalformedInputError subclasses are
raised by the flag tokenizer and never reach the user directly: the
dispatcher rewrites them into the usage message of the command family.
"""
from event_manager import messages


class InvalidCommandError(Exception):
    """Base class for input that cannot be turned into a command."""

    default_message = messages.INVALID_COMMAND_MESSAGE

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnknownCommandError(InvalidCommandError):
    """The command word is not in the command table."""


class InvalidCommandFormatError(InvalidCommandError):
    """Wrong or missing flags for a known command word."""


class InvalidDateTimeError(InvalidCommandError):
    default_message = messages.INVALID_DATE_TIME_MESSAGE


class InvalidPriorityError(InvalidCommandError):
    default_message = messages.INVALID_PRIORITY_MESSAGE


class InvalidPhoneNumberError(InvalidCommandError):
    default_message = messages.INVALID_PHONE_NUMBER_MESSAGE


class InvalidEmailError(InvalidCommandError):
    default_message = messages.INVALID_EMAIL_MESSAGE


class InvalidTypeError(InvalidCommandError):
    default_message = messages.INVALID_TYPE_MESSAGE


class InvalidStatusError(InvalidCommandError):
    """Status token outside the pair accepted by a mark command."""


class InvalidEventStatusError(InvalidStatusError):
    default_message = messages.INVALID_EVENT_STATUS_MESSAGE


class InvalidParticipantStatusError(InvalidStatusError):
    default_message = messages.INVALID_PARTICIPANT_STATUS_MESSAGE


class InvalidItemStatusError(InvalidStatusError):
    default_message = messages.INVALID_ITEM_STATUS_MESSAGE


class InvalidSortKeywordError(InvalidCommandError):
    default_message = messages.INVALID_SORT_KEYWORD_MESSAGE


class InvalidFilterFlagError(InvalidCommandError):
    default_message = messages.INVALID_FILTER_FLAG_MESSAGE


class InvalidFindFlagError(InvalidCommandError):
    default_message = messages.INVALID_FIND_FLAG_MESSAGE


class InvalidCopyFormatError(InvalidCommandError):
    default_message = messages.INVALID_COPY_MESSAGE


class MalformedInputError(LookupError):
    """Input could not be split into the fields a builder asked for."""


class MissingFieldError(MalformedInputError):
    """A required field is absent or blank after splitting."""


class DuplicateFieldError(MalformedInputError):
    """The same flag appears more than once in one line."""


class ItemNotFoundError(Exception):
    """An event, participant or item named in a command does not exist."""


class DuplicateDataError(Exception):
    """An event, participant or item with the same name already exists."""
