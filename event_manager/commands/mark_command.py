"""
Mark commands: set the done, present or accounted flag.

Each family accepts exactly one pair of status words.
"""
from dataclasses import dataclass

from .base import Command, CommandOutput
from event_manager.exceptions import ItemNotFoundError

EVENT_MARK_STATUS = "done"
EVENT_UNMARK_STATUS = "undone"
PARTICIPANT_MARK_STATUS = "present"
PARTICIPANT_UNMARK_STATUS = "absent"
ITEM_MARK_STATUS = "accounted"
ITEM_UNMARK_STATUS = "unaccounted"

EVENT_MARK_MESSAGE = "Event %s marked as done"
EVENT_UNMARK_MESSAGE = "Event %s marked as not done"
PARTICIPANT_MARK_MESSAGE = "Participant %s marked present"
PARTICIPANT_UNMARK_MESSAGE = "Participant %s marked absent"
ITEM_MARK_MESSAGE = "Item %s has been accounted for"
ITEM_UNMARK_MESSAGE = "Item %s has not been accounted for"


@dataclass(frozen=True)
class MarkEventCommand(Command):
    name: str
    is_done: bool

    command_word = "mark"

    def execute(self, events) -> CommandOutput:
        try:
            event = events.mark_event(self.name, self.is_done)
        except ItemNotFoundError as e:
            return CommandOutput(str(e))
        message = EVENT_MARK_MESSAGE if self.is_done else EVENT_UNMARK_MESSAGE
        return CommandOutput(message % event.name)

    def to_input(self) -> str:
        status = EVENT_MARK_STATUS if self.is_done else EVENT_UNMARK_STATUS
        return f"mark -e {self.name} -s {status}"


@dataclass(frozen=True)
class MarkParticipantCommand(Command):
    name: str
    event_name: str
    is_present: bool

    command_word = "mark"

    def execute(self, events) -> CommandOutput:
        try:
            participant = events.mark_participant(self.name, self.event_name, self.is_present)
        except ItemNotFoundError as e:
            return CommandOutput(str(e))
        message = PARTICIPANT_MARK_MESSAGE if self.is_present else PARTICIPANT_UNMARK_MESSAGE
        return CommandOutput(message % participant.name)

    def to_input(self) -> str:
        status = PARTICIPANT_MARK_STATUS if self.is_present else PARTICIPANT_UNMARK_STATUS
        return f"mark -p {self.name} -e {self.event_name} -s {status}"


@dataclass(frozen=True)
class MarkItemCommand(Command):
    name: str
    event_name: str
    is_present: bool

    command_word = "mark"

    def execute(self, events) -> CommandOutput:
        try:
            item = events.mark_item(self.name, self.event_name, self.is_present)
        except ItemNotFoundError as e:
            return CommandOutput(str(e))
        message = ITEM_MARK_MESSAGE if self.is_present else ITEM_UNMARK_MESSAGE
        return CommandOutput(message % item.name)

    def to_input(self) -> str:
        status = ITEM_MARK_STATUS if self.is_present else ITEM_UNMARK_STATUS
        return f"mark -m {self.name} -e {self.event_name} -s {status}"
