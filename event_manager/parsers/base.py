"""
Base command parser classes and registry.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Type, Optional, List, Sequence

from event_manager import messages
from event_manager.commands import Command
from event_manager.exceptions import InvalidCommandFormatError, MissingFieldError
from event_manager.parsers.flags import FlagSplit, split_by_flags

logger = logging.getLogger(__name__)


class CommandParser(ABC):
    """
    Base class for the builder of one command family.

    Each parser should override:
    - command_word: Command word that selects it
    - parse(): Build a command from the input line
    """

    command_word: str = ""

    @property
    def usage(self) -> str:
        """Usage message shown when a line of this family is malformed."""
        return messages.get_usage_message(self.command_word)

    @abstractmethod
    def parse(self, line: str, parts: List[str]) -> Command:
        """
        Build a command.

        Args:
            line: Full trimmed input line
            parts: Whitespace-delimited tokens of line; parts[0] is the command word

        Returns:
            Parsed command

        Raises:
            InvalidCommandError: If the line is not a valid command of this family
            MalformedInputError: If a required field is missing or repeated
        """
        pass

    def command_flag(self, parts: List[str]) -> str:
        """
        Get the flag that selects the sub-command (the second token).

        Raises:
            MissingFieldError: If the line holds only the command word
        """
        if len(parts) < 2:
            raise MissingFieldError("Missing command flag")
        return parts[1]

    def split(self, line: str, flags: Sequence[str]) -> FlagSplit:
        """
        Split a line by the given flags, rejecting text before the first flag.

        Raises:
            InvalidCommandFormatError: If anything other than the command word
                precedes the first flag
        """
        fields = split_by_flags(line, flags)
        if fields.leading.lower() != self.command_word:
            logger.warning("Unexpected text before first flag: %r", fields.leading)
            raise InvalidCommandFormatError(self.usage)
        return fields

    def invalid_format(self) -> InvalidCommandFormatError:
        logger.warning("Invalid %s command format", self.command_word)
        return InvalidCommandFormatError(self.usage)


class ParserRegistry:
    """
    Registry for all command parsers.

    Parsers register themselves and are looked up by command word.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._parsers: Dict[str, Type[CommandParser]] = {}

    def register(self, parser_class: Type[CommandParser]) -> None:
        """
        Register a parser class.

        Args:
            parser_class: CommandParser subclass to register
        """
        self._parsers[parser_class.command_word.lower()] = parser_class

    def get(self, command_word: str) -> Optional[Type[CommandParser]]:
        """
        Get parser class for a command word.

        Args:
            command_word: Command word (case-insensitive)

        Returns:
            Parser class or None if not found
        """
        return self._parsers.get(command_word.lower())

    def list_command_words(self) -> List[str]:
        """Get sorted list of registered command words."""
        return sorted(self._parsers.keys())


# Global registry
_registry = ParserRegistry()


def register_parser(parser_class: Type[CommandParser]) -> Type[CommandParser]:
    """
    Decorator to register a command parser.

    Usage:
        @register_parser
        class AddCommandParser(CommandParser):
            command_word = "add"
            ...
    """
    _registry.register(parser_class)
    return parser_class


def get_registry() -> ParserRegistry:
    """Get the global parser registry."""
    return _registry
