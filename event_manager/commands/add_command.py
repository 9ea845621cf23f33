"""
Add commands: add an event, a participant or an item.
"""
from dataclasses import dataclass
from datetime import datetime

from .base import Command, CommandOutput
from event_manager.exceptions import ItemNotFoundError, DuplicateDataError
from event_manager.models import Priority, DATE_TIME_FORMAT

ADD_EVENT_MESSAGE = "Event added successfully"
ADD_PARTICIPANT_MESSAGE = "Participant added successfully"
ADD_ITEM_MESSAGE = "Item added successfully"


@dataclass(frozen=True)
class AddEventCommand(Command):
    """Add a new event to the event list."""

    name: str
    time: datetime
    venue: str
    priority: Priority

    command_word = "add"

    def execute(self, events) -> CommandOutput:
        try:
            events.add_event(self.name, self.time, self.venue, self.priority)
        except DuplicateDataError as e:
            return CommandOutput(str(e))
        return CommandOutput(ADD_EVENT_MESSAGE)

    def to_input(self) -> str:
        return (f"add -e {self.name} -t {self.time.strftime(DATE_TIME_FORMAT)} "
                f"-v {self.venue} -u {self.priority.value}")


@dataclass(frozen=True)
class AddParticipantCommand(Command):
    """Add a participant to an existing event."""

    name: str
    number: str
    email: str
    event_name: str

    command_word = "add"

    def execute(self, events) -> CommandOutput:
        try:
            events.add_participant(self.name, self.number, self.email, self.event_name)
        except (ItemNotFoundError, DuplicateDataError) as e:
            return CommandOutput(str(e))
        return CommandOutput(ADD_PARTICIPANT_MESSAGE)

    def to_input(self) -> str:
        return f"add -p {self.name} -n {self.number} -email {self.email} -e {self.event_name}"


@dataclass(frozen=True)
class AddItemCommand(Command):
    """Add an item to an existing event."""

    name: str
    event_name: str

    command_word = "add"

    def execute(self, events) -> CommandOutput:
        try:
            events.add_item(self.name, self.event_name)
        except (ItemNotFoundError, DuplicateDataError) as e:
            return CommandOutput(str(e))
        return CommandOutput(ADD_ITEM_MESSAGE)

    def to_input(self) -> str:
        return f"add -m {self.name} -e {self.event_name}"
