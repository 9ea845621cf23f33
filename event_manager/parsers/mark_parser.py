"""
Parser for the mark command.

    mark -e EVENT -s done/undone
    mark -p PARTICIPANT -e EVENT -s present/absent
    mark -m ITEM -e EVENT -s accounted/unaccounted
"""
import logging

from .base import CommandParser, register_parser
from .flags import (
    EVENT_FLAG, PARTICIPANT_FLAG, ITEM_FLAG, STATUS_FLAG,
    MARK_EVENT_FLAGS, MARK_PARTICIPANT_FLAGS, MARK_ITEM_FLAGS,
)
from .validators import parse_status
from event_manager.commands import MarkEventCommand, MarkParticipantCommand, MarkItemCommand
from event_manager.commands.mark_command import (
    EVENT_MARK_STATUS, EVENT_UNMARK_STATUS,
    PARTICIPANT_MARK_STATUS, PARTICIPANT_UNMARK_STATUS,
    ITEM_MARK_STATUS, ITEM_UNMARK_STATUS,
)
from event_manager.exceptions import (
    InvalidEventStatusError,
    InvalidParticipantStatusError,
    InvalidItemStatusError,
)

logger = logging.getLogger(__name__)


@register_parser
class MarkCommandParser(CommandParser):
    """Builds mark commands; each family accepts only its own status pair."""

    command_word = "mark"

    def parse(self, line, parts):
        command_flag = self.command_flag(parts)

        if command_flag == EVENT_FLAG:
            fields = self.split(line, MARK_EVENT_FLAGS)
            name = fields.value(EVENT_FLAG)
            is_done = parse_status(fields.value(STATUS_FLAG), EVENT_MARK_STATUS,
                                   EVENT_UNMARK_STATUS, InvalidEventStatusError)
            return MarkEventCommand(name, is_done)

        if command_flag == PARTICIPANT_FLAG:
            fields = self.split(line, MARK_PARTICIPANT_FLAGS)
            name = fields.value(PARTICIPANT_FLAG)
            event_name = fields.value(EVENT_FLAG)
            is_present = parse_status(fields.value(STATUS_FLAG), PARTICIPANT_MARK_STATUS,
                                      PARTICIPANT_UNMARK_STATUS, InvalidParticipantStatusError)
            return MarkParticipantCommand(name, event_name, is_present)

        if command_flag == ITEM_FLAG:
            fields = self.split(line, MARK_ITEM_FLAGS)
            name = fields.value(ITEM_FLAG)
            event_name = fields.value(EVENT_FLAG)
            is_present = parse_status(fields.value(STATUS_FLAG), ITEM_MARK_STATUS,
                                      ITEM_UNMARK_STATUS, InvalidItemStatusError)
            return MarkItemCommand(name, event_name, is_present)

        raise self.invalid_format()
