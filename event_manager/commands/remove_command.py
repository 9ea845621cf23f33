"""
Remove commands: remove an event, or a participant or item from an event.
"""
from dataclasses import dataclass

from .base import Command, CommandOutput
from event_manager.exceptions import ItemNotFoundError

REMOVE_EVENT_MESSAGE = "Event removed successfully"
REMOVE_PARTICIPANT_MESSAGE = "Participant removed successfully"
REMOVE_ITEM_MESSAGE = "Item removed successfully"


@dataclass(frozen=True)
class RemoveEventCommand(Command):
    """Remove an event and everything in it."""

    name: str

    command_word = "remove"

    def execute(self, events) -> CommandOutput:
        try:
            events.remove_event(self.name)
        except ItemNotFoundError as e:
            return CommandOutput(str(e))
        return CommandOutput(REMOVE_EVENT_MESSAGE)

    def to_input(self) -> str:
        return f"remove -e {self.name}"


@dataclass(frozen=True)
class RemoveParticipantCommand(Command):
    name: str
    event_name: str

    command_word = "remove"

    def execute(self, events) -> CommandOutput:
        try:
            events.remove_participant(self.name, self.event_name)
        except ItemNotFoundError as e:
            return CommandOutput(str(e))
        return CommandOutput(REMOVE_PARTICIPANT_MESSAGE)

    def to_input(self) -> str:
        return f"remove -p {self.name} -e {self.event_name}"


@dataclass(frozen=True)
class RemoveItemCommand(Command):
    name: str
    event_name: str

    command_word = "remove"

    def execute(self, events) -> CommandOutput:
        try:
            events.remove_item(self.name, self.event_name)
        except ItemNotFoundError as e:
            return CommandOutput(str(e))
        return CommandOutput(REMOVE_ITEM_MESSAGE)

    def to_input(self) -> str:
        return f"remove -m {self.name} -e {self.event_name}"
