"""
Edit commands: replace the details of an event, a participant or an item.
"""
from dataclasses import dataclass
from datetime import datetime

from .base import Command, CommandOutput
from event_manager.exceptions import ItemNotFoundError, DuplicateDataError
from event_manager.models import Priority, DATE_TIME_FORMAT

EDIT_EVENT_MESSAGE = "Event info successfully updated"
EDIT_PARTICIPANT_MESSAGE = "Participant contact information successfully updated"
EDIT_ITEM_MESSAGE = "Item successfully updated"


@dataclass(frozen=True)
class EditEventCommand(Command):
    """Replace the name, time, venue and priority of an event."""

    old_name: str
    new_name: str
    time: datetime
    venue: str
    priority: Priority

    command_word = "edit"

    def execute(self, events) -> CommandOutput:
        try:
            events.edit_event(self.old_name, self.new_name, self.time, self.venue, self.priority)
        except (ItemNotFoundError, DuplicateDataError) as e:
            return CommandOutput(str(e))
        return CommandOutput(EDIT_EVENT_MESSAGE)

    def to_input(self) -> str:
        return (f"edit -e {self.old_name} -name {self.new_name} "
                f"-t {self.time.strftime(DATE_TIME_FORMAT)} -v {self.venue} -u {self.priority.value}")


@dataclass(frozen=True)
class EditParticipantCommand(Command):
    """Replace the name, phone number and email of a participant."""

    old_name: str
    new_name: str
    number: str
    email: str
    event_name: str

    command_word = "edit"

    def execute(self, events) -> CommandOutput:
        try:
            events.edit_participant(self.old_name, self.new_name, self.number,
                                    self.email, self.event_name)
        except (ItemNotFoundError, DuplicateDataError) as e:
            return CommandOutput(str(e))
        return CommandOutput(EDIT_PARTICIPANT_MESSAGE)

    def to_input(self) -> str:
        return (f"edit -p {self.old_name} -name {self.new_name} -n {self.number} "
                f"-email {self.email} -e {self.event_name}")


@dataclass(frozen=True)
class EditItemCommand(Command):
    """Rename an item."""

    old_name: str
    new_name: str
    event_name: str

    command_word = "edit"

    def execute(self, events) -> CommandOutput:
        try:
            events.edit_item(self.old_name, self.new_name, self.event_name)
        except (ItemNotFoundError, DuplicateDataError) as e:
            return CommandOutput(str(e))
        return CommandOutput(EDIT_ITEM_MESSAGE)

    def to_input(self) -> str:
        return f"edit -m {self.old_name} > {self.new_name} -e {self.event_name}"
