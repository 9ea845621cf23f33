"""
Filter command: list the events matching a description.
"""
from dataclasses import dataclass

from .base import Command, CommandOutput, format_numbered
from event_manager.parsers.flags import (
    EVENT_FLAG, DATE_FLAG, TIME_FLAG, ITEM_FILTER_FLAG, PRIORITY_FLAG,
)
from event_manager.parsers.validators import parse_date, parse_time, parse_priority

FILTER_MESSAGE = "Here are the events matching \"%s\":"
NO_MATCH_MESSAGE = "There are no events matching \"%s\"!"


@dataclass(frozen=True)
class FilterCommand(Command):
    """
    Filter events without changing the list.

    Attributes:
        flag: -e (name contains), -d (date), -t (time of day),
              -x (has an item whose name contains), -u (priority)
        description: Text to match; already validated for -d, -t and -u
    """

    flag: str
    description: str

    command_word = "filter"

    def execute(self, events) -> CommandOutput:
        if self.flag == EVENT_FLAG:
            matches = events.filter_by_name(self.description)
        elif self.flag == DATE_FLAG:
            matches = events.filter_by_date(parse_date(self.description))
        elif self.flag == TIME_FLAG:
            matches = events.filter_by_time(parse_time(self.description))
        elif self.flag == ITEM_FILTER_FLAG:
            matches = events.filter_by_item(self.description)
        elif self.flag == PRIORITY_FLAG:
            matches = events.filter_by_priority(parse_priority(self.description))
        else:
            raise ValueError(f"Unknown filter flag: {self.flag}")

        if not matches:
            return CommandOutput(NO_MATCH_MESSAGE % self.description)
        return CommandOutput(FILTER_MESSAGE % self.description + "\n" + format_numbered(matches))

    def to_input(self) -> str:
        return f"filter {self.flag} {self.description}"
