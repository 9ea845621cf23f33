"""
Sort command: reorder the event list.
"""
from dataclasses import dataclass

from .base import Command, CommandOutput, format_numbered

SORT_KEYWORDS = ("name", "time", "priority")
SORT_MESSAGE = "Events sorted by %s successfully!"


@dataclass(frozen=True)
class SortCommand(Command):
    """
    Sort events by name (alphabetical), time (earliest first) or
    priority (high first). The new order is kept for later commands.
    """

    keyword: str

    command_word = "sort"

    def execute(self, events) -> CommandOutput:
        if self.keyword == "name":
            events.sort_by_name()
        elif self.keyword == "time":
            events.sort_by_time()
        else:
            events.sort_by_priority()

        message = SORT_MESSAGE % self.keyword
        if len(events) > 0:
            message += "\n" + format_numbered(events)
        return CommandOutput(message)

    def to_input(self) -> str:
        return f"sort -by {self.keyword}"
