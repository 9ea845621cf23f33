"""
Parser for the sort command: sort -by name/time/priority
"""
from .base import CommandParser, register_parser
from .flags import KEYWORD_FLAG, SORT_FLAGS
from event_manager.commands import SortCommand
from event_manager.commands.sort_command import SORT_KEYWORDS
from event_manager.exceptions import InvalidSortKeywordError


@register_parser
class SortCommandParser(CommandParser):

    command_word = "sort"

    def parse(self, line, parts):
        if self.command_flag(parts) != KEYWORD_FLAG:
            raise self.invalid_format()

        fields = self.split(line, SORT_FLAGS)
        keyword = fields.value(KEYWORD_FLAG).lower()
        if keyword not in SORT_KEYWORDS:
            raise InvalidSortKeywordError()
        return SortCommand(keyword)
