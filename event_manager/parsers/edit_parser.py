"""
Parser for the edit command.

    edit -e OLD_EVENT -name NEW_EVENT -t TIME -v VENUE -u PRIORITY
    edit -p OLD_PARTICIPANT -name NEW_PARTICIPANT -n NUMBER -email EMAIL -e EVENT
    edit -m ITEM > NEW_ITEM -e EVENT
"""
import logging

from .base import CommandParser, register_parser
from .flags import (
    EVENT_FLAG, PARTICIPANT_FLAG, ITEM_FLAG, NAME_FLAG, TIME_FLAG, VENUE_FLAG,
    PRIORITY_FLAG, NUMBER_FLAG, EMAIL_FLAG, ARROW,
    EDIT_EVENT_FLAGS, EDIT_PARTICIPANT_FLAGS, ITEM_FLAGS,
)
from .validators import parse_date_time, parse_priority, parse_phone_number, parse_email
from event_manager.commands import EditEventCommand, EditParticipantCommand, EditItemCommand

logger = logging.getLogger(__name__)


@register_parser
class EditCommandParser(CommandParser):
    """Builds edit commands, validating fields the same way as add."""

    command_word = "edit"

    def parse(self, line, parts):
        command_flag = self.command_flag(parts)

        if command_flag == EVENT_FLAG:
            return self._parse_edit_event(line)
        if command_flag == PARTICIPANT_FLAG:
            return self._parse_edit_participant(line)
        if command_flag == ITEM_FLAG:
            return self._parse_edit_item(line)

        raise self.invalid_format()

    def _parse_edit_event(self, line: str) -> EditEventCommand:
        fields = self.split(line, EDIT_EVENT_FLAGS)
        old_name = fields.value(EVENT_FLAG)
        new_name = fields.value(NAME_FLAG)
        time_text = fields.value(TIME_FLAG)
        venue = fields.value(VENUE_FLAG)
        priority_text = fields.value(PRIORITY_FLAG)

        logger.info("Creating EditEventCommand for %s", old_name)
        return EditEventCommand(old_name, new_name, parse_date_time(time_text),
                                venue, parse_priority(priority_text))

    def _parse_edit_participant(self, line: str) -> EditParticipantCommand:
        fields = self.split(line, EDIT_PARTICIPANT_FLAGS)
        old_name = fields.value(PARTICIPANT_FLAG)
        new_name = fields.value(NAME_FLAG)
        number_text = fields.value(NUMBER_FLAG)
        email_text = fields.value(EMAIL_FLAG)
        event_name = fields.value(EVENT_FLAG)

        number = parse_phone_number(number_text)
        email = parse_email(email_text)

        logger.info("Creating EditParticipantCommand for %s in %s", old_name, event_name)
        return EditParticipantCommand(old_name, new_name, number, email, event_name)

    def _parse_edit_item(self, line: str) -> EditItemCommand:
        fields = self.split(line, ITEM_FLAGS)
        names = fields.value(ITEM_FLAG).split(ARROW)
        event_name = fields.value(EVENT_FLAG)

        if len(names) != 2:
            raise self.invalid_format()
        old_name, new_name = (name.strip() for name in names)
        if not old_name or not new_name:
            raise self.invalid_format()

        logger.info("Creating EditItemCommand for %s in %s", old_name, event_name)
        return EditItemCommand(old_name, new_name, event_name)
