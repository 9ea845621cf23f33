"""
Parser for the copy command: copy FROM_EVENT > TO_EVENT
"""
from .base import CommandParser, register_parser
from .flags import ARROW
from event_manager.commands import CopyCommand
from event_manager.exceptions import InvalidCopyFormatError


@register_parser
class CopyCommandParser(CommandParser):
    """Builds copy commands from two event names separated by a single '>'."""

    command_word = "copy"

    def parse(self, line, parts):
        self.command_flag(parts)
        names = " ".join(parts[1:]).split(ARROW)
        if len(names) != 2:
            raise InvalidCopyFormatError()

        from_event, to_event = (name.strip() for name in names)
        if not from_event or not to_event:
            raise InvalidCopyFormatError()
        return CopyCommand(from_event, to_event)
