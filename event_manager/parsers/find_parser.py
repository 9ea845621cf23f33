"""
Parser for the find command: find -e EVENT -p NAME
"""
from .base import CommandParser, register_parser
from .flags import EVENT_FLAG, PARTICIPANT_FLAG, FIND_FLAGS
from event_manager.commands import FindCommand
from event_manager.exceptions import InvalidFindFlagError


@register_parser
class FindCommandParser(CommandParser):

    command_word = "find"

    def parse(self, line, parts):
        self.command_flag(parts)
        if EVENT_FLAG not in parts or PARTICIPANT_FLAG not in parts:
            raise InvalidFindFlagError()

        fields = self.split(line, FIND_FLAGS)
        return FindCommand(fields.value(EVENT_FLAG), fields.value(PARTICIPANT_FLAG))
