"""
Commands produced by the parser and executed against the event list.
"""
from .base import Command, CommandOutput
from .basic_commands import MenuCommand, ListCommand, ExitCommand
from .add_command import AddEventCommand, AddParticipantCommand, AddItemCommand
from .remove_command import RemoveEventCommand, RemoveParticipantCommand, RemoveItemCommand
from .edit_command import EditEventCommand, EditParticipantCommand, EditItemCommand
from .view_command import ViewCommand
from .mark_command import MarkEventCommand, MarkParticipantCommand, MarkItemCommand
from .copy_command import CopyCommand
from .sort_command import SortCommand
from .filter_command import FilterCommand
from .find_command import FindCommand

__all__ = [
    'Command',
    'CommandOutput',
    'MenuCommand',
    'ListCommand',
    'ExitCommand',
    'AddEventCommand',
    'AddParticipantCommand',
    'AddItemCommand',
    'RemoveEventCommand',
    'RemoveParticipantCommand',
    'RemoveItemCommand',
    'EditEventCommand',
    'EditParticipantCommand',
    'EditItemCommand',
    'ViewCommand',
    'MarkEventCommand',
    'MarkParticipantCommand',
    'MarkItemCommand',
    'CopyCommand',
    'SortCommand',
    'FilterCommand',
    'FindCommand',
]
