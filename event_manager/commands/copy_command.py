"""
Copy command: copy the participant list of one event into another.
"""
from dataclasses import dataclass

from .base import Command, CommandOutput
from event_manager.exceptions import ItemNotFoundError

COPY_MESSAGE = "Participant list copied over from %s to %s successfully (%d participants)"


@dataclass(frozen=True)
class CopyCommand(Command):
    """
    Replace the participants of to_event with those of from_event.

    Copied participants start out absent.
    """

    from_event: str
    to_event: str

    command_word = "copy"

    def execute(self, events) -> CommandOutput:
        try:
            count = events.copy_participants(self.from_event, self.to_event)
        except ItemNotFoundError as e:
            return CommandOutput(str(e))
        return CommandOutput(COPY_MESSAGE % (self.from_event, self.to_event, count))

    def to_input(self) -> str:
        return f"copy {self.from_event} > {self.to_event}"
