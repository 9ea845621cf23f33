"""
Parser for the filter command: filter -e/-d/-t/-x/-u FILTER_DESCRIPTION
"""
import logging

from .base import CommandParser, register_parser
from .flags import DATE_FLAG, TIME_FLAG, PRIORITY_FLAG, FILTER_FLAGS
from .validators import parse_date, parse_time, parse_priority
from event_manager.commands import FilterCommand
from event_manager.exceptions import InvalidFilterFlagError

logger = logging.getLogger(__name__)


@register_parser
class FilterCommandParser(CommandParser):
    """
    Builds filter commands.

    Only one filter flag is allowed per line and it is matched
    case-insensitively. Descriptions for -d, -t and -u are validated
    here so execution never sees a malformed value.
    """

    command_word = "filter"

    def parse(self, line, parts):
        flag_token = self.command_flag(parts)
        if not any(part.lower() in FILTER_FLAGS for part in parts[1:]):
            raise self.invalid_format()

        filter_flag = flag_token.lower()
        if filter_flag not in FILTER_FLAGS:
            raise InvalidFilterFlagError()

        fields = self.split(line, (flag_token,))
        description = fields.value(flag_token)

        if filter_flag == DATE_FLAG:
            description = parse_date(description).isoformat()
        elif filter_flag == TIME_FLAG:
            description = parse_time(description).strftime("%H:%M")
        elif filter_flag == PRIORITY_FLAG:
            description = parse_priority(description).value

        logger.info("Creating FilterCommand with %s %s", filter_flag, description)
        return FilterCommand(filter_flag, description)
