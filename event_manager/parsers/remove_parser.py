"""
Parser for the remove command.
"""
from .base import CommandParser, register_parser
from .flags import (
    EVENT_FLAG, PARTICIPANT_FLAG, ITEM_FLAG,
    REMOVE_EVENT_FLAGS, REMOVE_PARTICIPANT_FLAGS, ITEM_FLAGS,
)
from event_manager.commands import RemoveEventCommand, RemoveParticipantCommand, RemoveItemCommand


@register_parser
class RemoveCommandParser(CommandParser):
    """Builds remove commands; fields are only checked for presence."""

    command_word = "remove"

    def parse(self, line, parts):
        command_flag = self.command_flag(parts)

        if command_flag == EVENT_FLAG:
            fields = self.split(line, REMOVE_EVENT_FLAGS)
            return RemoveEventCommand(fields.value(EVENT_FLAG))
        if command_flag == PARTICIPANT_FLAG:
            fields = self.split(line, REMOVE_PARTICIPANT_FLAGS)
            return RemoveParticipantCommand(fields.value(PARTICIPANT_FLAG), fields.value(EVENT_FLAG))
        if command_flag == ITEM_FLAG:
            fields = self.split(line, ITEM_FLAGS)
            return RemoveItemCommand(fields.value(ITEM_FLAG), fields.value(EVENT_FLAG))

        raise self.invalid_format()
