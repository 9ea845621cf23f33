"""
Parser for the view command: view -e EVENT -y participant/item
"""
from .base import CommandParser, register_parser
from .flags import EVENT_FLAG, TYPE_FLAG, VIEW_FLAGS
from event_manager.commands import ViewCommand
from event_manager.commands.view_command import PARTICIPANT_TYPE, ITEM_TYPE
from event_manager.exceptions import InvalidTypeError


@register_parser
class ViewCommandParser(CommandParser):

    command_word = "view"

    def parse(self, line, parts):
        if self.command_flag(parts) != EVENT_FLAG:
            raise self.invalid_format()

        fields = self.split(line, VIEW_FLAGS)
        event_name = fields.value(EVENT_FLAG)
        view_type = fields.value(TYPE_FLAG).lower()

        if view_type == PARTICIPANT_TYPE:
            return ViewCommand(event_name, True)
        if view_type == ITEM_TYPE:
            return ViewCommand(event_name, False)
        raise InvalidTypeError()
