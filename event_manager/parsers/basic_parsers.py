"""
Parsers for commands without fields. Trailing text is ignored.
"""
from .base import CommandParser, register_parser
from event_manager.commands import MenuCommand, ListCommand, ExitCommand


@register_parser
class MenuCommandParser(CommandParser):
    command_word = "menu"

    def parse(self, line, parts):
        return MenuCommand()


@register_parser
class ListCommandParser(CommandParser):
    command_word = "list"

    def parse(self, line, parts):
        return ListCommand()


@register_parser
class ExitCommandParser(CommandParser):
    command_word = "exit"

    def parse(self, line, parts):
        return ExitCommand()
