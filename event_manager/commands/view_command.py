"""
View command: show the participants or items of an event.
"""
from dataclasses import dataclass

from .base import Command, CommandOutput, format_numbered
from event_manager.exceptions import ItemNotFoundError

PARTICIPANT_TYPE = "participant"
ITEM_TYPE = "item"

VIEW_PARTICIPANTS_MESSAGE = "There are %d participants in %s! Here are your participants:"
VIEW_ITEMS_MESSAGE = "There are %d items in %s! Here are your items:"


@dataclass(frozen=True)
class ViewCommand(Command):
    """
    List the participants or items of one event.

    Attributes:
        event_name: Event to view
        is_participant_view: True for participants, False for items
    """

    event_name: str
    is_participant_view: bool

    command_word = "view"

    def execute(self, events) -> CommandOutput:
        try:
            event = events.get_event(self.event_name)
        except ItemNotFoundError as e:
            return CommandOutput(str(e))

        if self.is_participant_view:
            header = VIEW_PARTICIPANTS_MESSAGE % (event.participant_count, event.name)
            entries = event.participants
        else:
            header = VIEW_ITEMS_MESSAGE % (event.item_count, event.name)
            entries = event.items

        if not entries:
            return CommandOutput(header)
        return CommandOutput(header + "\n" + format_numbered(entries))

    def to_input(self) -> str:
        view_type = PARTICIPANT_TYPE if self.is_participant_view else ITEM_TYPE
        return f"view -e {self.event_name} -y {view_type}"
