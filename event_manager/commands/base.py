"""
Base command classes.

Commands are immutable records produced by the parser. Each one is
executed once against the event list and returns a CommandOutput.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from event_manager.data.event_list import EventList


@dataclass(frozen=True)
class CommandOutput:
    """
    Result of executing a command.

    Attributes:
        message: Text shown to the user
        is_exit: True if the REPL should stop after printing
        markdown: True if message should be rendered as Markdown
    """
    message: str
    is_exit: bool = False
    markdown: bool = False


class Command(ABC):
    """
    Base class for all commands.

    Each command should override:
    - command_word: Word that starts the command line
    - execute(): Command logic against the event list
    - to_input(): Canonical input line for commands with fields
    """

    command_word: str = ""

    @abstractmethod
    def execute(self, events: EventList) -> CommandOutput:
        """
        Execute the command.

        Args:
            events: Event list to query or update

        Returns:
            CommandOutput with the message to show
        """
        pass

    def to_input(self) -> str:
        """
        Format the command back into its canonical input line.

        Parsing the returned line yields an equal command.
        """
        return self.command_word


def format_numbered(lines) -> str:
    """Format lines as a 1-based numbered list."""
    return "\n".join(f"{i}. {line}" for i, line in enumerate(lines, 1))
