"""
Basic commands: menu, list, exit.
"""
from dataclasses import dataclass

from .base import Command, CommandOutput, format_numbered

MENU_MESSAGE = """\
# Menu

| Command | Usage |
|---|---|
| menu | `menu` |
| list | `list` |
| add event | `add -e EVENT -t TIME -v VENUE -u PRIORITY` |
| add participant | `add -p PARTICIPANT -n NUMBER -email EMAIL -e EVENT` |
| add item | `add -m ITEM -e EVENT` |
| remove | `remove -e EVENT`, `remove -p PARTICIPANT -e EVENT`, `remove -m ITEM -e EVENT` |
| edit event | `edit -e OLD_EVENT -name NEW_EVENT -t TIME -v VENUE -u PRIORITY` |
| edit participant | `edit -p OLD_PARTICIPANT -name NEW_PARTICIPANT -n NUMBER -email EMAIL -e EVENT` |
| edit item | `edit -m ITEM > NEW_ITEM -e EVENT` |
| view | `view -e EVENT -y participant/item` |
| mark event | `mark -e EVENT -s done/undone` |
| mark participant | `mark -p PARTICIPANT -e EVENT -s present/absent` |
| mark item | `mark -m ITEM -e EVENT -s accounted/unaccounted` |
| copy | `copy FROM_EVENT > TO_EVENT` |
| sort | `sort -by name/time/priority` |
| filter | `filter -e/-d/-t/-x/-u FILTER_DESCRIPTION` |
| find | `find -e EVENT -p NAME` |
| exit | `exit` |

TIME is `YYYY-MM-DD HH:mm`, PRIORITY is `high`, `medium` or `low`.
"""

LIST_MESSAGE = "There are %d events in your list! Here are your scheduled events:"
EMPTY_LIST_MESSAGE = "There are no events in your list!"
EXIT_MESSAGE = "Thank you for using EventManagerCLI! Goodbye!"


@dataclass(frozen=True)
class MenuCommand(Command):
    """Show every command's syntax."""

    command_word = "menu"

    def execute(self, events) -> CommandOutput:
        return CommandOutput(MENU_MESSAGE, markdown=True)


@dataclass(frozen=True)
class ListCommand(Command):
    """List all events in their current order."""

    command_word = "list"

    def execute(self, events) -> CommandOutput:
        if len(events) == 0:
            return CommandOutput(EMPTY_LIST_MESSAGE)
        return CommandOutput(LIST_MESSAGE % len(events) + "\n" + format_numbered(events))


@dataclass(frozen=True)
class ExitCommand(Command):
    """Exit the application."""

    command_word = "exit"

    def execute(self, events) -> CommandOutput:
        return CommandOutput(EXIT_MESSAGE, is_exit=True)
