"""
Parser for the add command.

    add -e EVENT -t TIME -v VENUE -u PRIORITY
    add -p PARTICIPANT -n NUMBER -email EMAIL -e EVENT
    add -m ITEM -e EVENT
"""
import logging

from .base import CommandParser, register_parser
from .flags import (
    EVENT_FLAG, PARTICIPANT_FLAG, ITEM_FLAG, TIME_FLAG, VENUE_FLAG,
    PRIORITY_FLAG, NUMBER_FLAG, EMAIL_FLAG,
    ADD_EVENT_FLAGS, ADD_PARTICIPANT_FLAGS, ITEM_FLAGS,
)
from .validators import parse_date_time, parse_priority, parse_phone_number, parse_email
from event_manager.commands import AddEventCommand, AddParticipantCommand, AddItemCommand

logger = logging.getLogger(__name__)


@register_parser
class AddCommandParser(CommandParser):
    """Builds add commands for events, participants and items."""

    command_word = "add"

    def parse(self, line, parts):
        command_flag = self.command_flag(parts)

        if command_flag == EVENT_FLAG:
            return self._parse_add_event(line)
        if command_flag == PARTICIPANT_FLAG:
            return self._parse_add_participant(line)
        if command_flag == ITEM_FLAG:
            return self._parse_add_item(line)

        raise self.invalid_format()

    def _parse_add_event(self, line: str) -> AddEventCommand:
        fields = self.split(line, ADD_EVENT_FLAGS)
        name = fields.value(EVENT_FLAG)
        time_text = fields.value(TIME_FLAG)
        venue = fields.value(VENUE_FLAG)
        priority_text = fields.value(PRIORITY_FLAG)

        logger.info("Creating AddEventCommand with details: %s, %s, %s", name, time_text, venue)
        return AddEventCommand(name, parse_date_time(time_text), venue, parse_priority(priority_text))

    def _parse_add_participant(self, line: str) -> AddParticipantCommand:
        fields = self.split(line, ADD_PARTICIPANT_FLAGS)
        name = fields.value(PARTICIPANT_FLAG)
        number_text = fields.value(NUMBER_FLAG)
        email_text = fields.value(EMAIL_FLAG)
        event_name = fields.value(EVENT_FLAG)

        # Phone number is validated before email
        number = parse_phone_number(number_text)
        email = parse_email(email_text)

        logger.info("Creating AddParticipantCommand with details: %s, %s", name, event_name)
        return AddParticipantCommand(name, number, email, event_name)

    def _parse_add_item(self, line: str) -> AddItemCommand:
        fields = self.split(line, ITEM_FLAGS)
        name = fields.value(ITEM_FLAG)
        event_name = fields.value(EVENT_FLAG)

        logger.info("Creating AddItemCommand with details: %s, %s", name, event_name)
        return AddItemCommand(name, event_name)
