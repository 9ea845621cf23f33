"""
Command dispatcher: turns one raw input line into a Command.
"""
import logging

from event_manager import messages
from event_manager.commands import Command
from event_manager.exceptions import (
    UnknownCommandError,
    InvalidCommandFormatError,
    MalformedInputError,
)
from .base import get_registry

# Import parser modules so they register themselves
from . import (  # noqa: F401
    basic_parsers,
    add_parser,
    remove_parser,
    edit_parser,
    view_parser,
    mark_parser,
    copy_parser,
    sort_parser,
    filter_parser,
    find_parser,
)

logger = logging.getLogger(__name__)


class Parser:
    """
    Parses input lines into commands.

    The first whitespace-delimited token selects the command family
    (case-insensitive); the rest of the line is handed to that family's
    parser. Parsing never touches the event list.
    """

    def __init__(self):
        self.registry = get_registry()

    def parse_command(self, line: str) -> Command:
        """
        Parse one input line.

        Args:
            line: Raw user input

        Returns:
            Command ready to execute

        Raises:
            InvalidCommandError: With the message to show the user
        """
        line = line.strip()
        parts = line.split()
        if not parts:
            raise UnknownCommandError()

        command_word = parts[0].lower()
        parser_class = self.registry.get(command_word)
        if parser_class is None:
            logger.warning("Unknown command: %s", command_word)
            raise UnknownCommandError()

        try:
            command = parser_class().parse(line, parts)
        except MalformedInputError as e:
            logger.warning("Malformed %s command: %s", command_word, e)
            raise InvalidCommandFormatError(messages.get_usage_message(command_word)) from e

        logger.info("Parsed %s command", command_word)
        return command

    def list_command_words(self):
        return self.registry.list_command_words()
