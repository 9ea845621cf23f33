"""
Find command: search an event's participants by name.
"""
from dataclasses import dataclass

from .base import Command, CommandOutput, format_numbered
from event_manager.exceptions import ItemNotFoundError

FIND_MESSAGE = "Here are the participants in %s matching \"%s\":"
NOT_FOUND_MESSAGE = "There are no participants in %s matching \"%s\"!"


@dataclass(frozen=True)
class FindCommand(Command):
    event_name: str
    participant_name: str

    command_word = "find"

    def execute(self, events) -> CommandOutput:
        try:
            matches = events.find_participants(self.event_name, self.participant_name)
        except ItemNotFoundError as e:
            return CommandOutput(str(e))

        if not matches:
            return CommandOutput(NOT_FOUND_MESSAGE % (self.event_name, self.participant_name))
        header = FIND_MESSAGE % (self.event_name, self.participant_name)
        return CommandOutput(header + "\n" + format_numbered(matches))

    def to_input(self) -> str:
        return f"find -e {self.event_name} -p {self.participant_name}"
