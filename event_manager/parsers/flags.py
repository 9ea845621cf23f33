"""
Flag constants and the flag tokenizer.

A command line is a command word followed by flag-delimited fields:

    add -e Meetup -t 2024-09-10 10:00 -v Hall A -u high

A flag is only recognized as a whole whitespace-delimited token that is
part of the flag set of the command being parsed, so values may contain
hyphenated words ("Re-entry talk") or other commands' flags.
"""
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from event_manager.exceptions import MissingFieldError, DuplicateFieldError

EVENT_FLAG = "-e"
PARTICIPANT_FLAG = "-p"
ITEM_FLAG = "-m"
TIME_FLAG = "-t"
VENUE_FLAG = "-v"
PRIORITY_FLAG = "-u"
NUMBER_FLAG = "-n"
EMAIL_FLAG = "-email"
NAME_FLAG = "-name"
STATUS_FLAG = "-s"
TYPE_FLAG = "-y"
KEYWORD_FLAG = "-by"
DATE_FLAG = "-d"
ITEM_FILTER_FLAG = "-x"

ARROW = ">"

# Flag sets per sub-command, in canonical order
ADD_EVENT_FLAGS = (EVENT_FLAG, TIME_FLAG, VENUE_FLAG, PRIORITY_FLAG)
ADD_PARTICIPANT_FLAGS = (PARTICIPANT_FLAG, NUMBER_FLAG, EMAIL_FLAG, EVENT_FLAG)
ITEM_FLAGS = (ITEM_FLAG, EVENT_FLAG)
REMOVE_EVENT_FLAGS = (EVENT_FLAG,)
REMOVE_PARTICIPANT_FLAGS = (PARTICIPANT_FLAG, EVENT_FLAG)
EDIT_EVENT_FLAGS = (EVENT_FLAG, NAME_FLAG, TIME_FLAG, VENUE_FLAG, PRIORITY_FLAG)
EDIT_PARTICIPANT_FLAGS = (PARTICIPANT_FLAG, NAME_FLAG, NUMBER_FLAG, EMAIL_FLAG, EVENT_FLAG)
VIEW_FLAGS = (EVENT_FLAG, TYPE_FLAG)
MARK_EVENT_FLAGS = (EVENT_FLAG, STATUS_FLAG)
MARK_PARTICIPANT_FLAGS = (PARTICIPANT_FLAG, EVENT_FLAG, STATUS_FLAG)
MARK_ITEM_FLAGS = (ITEM_FLAG, EVENT_FLAG, STATUS_FLAG)
SORT_FLAGS = (KEYWORD_FLAG,)
FILTER_FLAGS = (EVENT_FLAG, DATE_FLAG, TIME_FLAG, ITEM_FILTER_FLAG, PRIORITY_FLAG)
FIND_FLAGS = (EVENT_FLAG, PARTICIPANT_FLAG)


@dataclass(frozen=True)
class FlagSplit:
    """
    Result of splitting a line by flags.

    Attributes:
        leading: Text before the first flag (normally the command word)
        segments: (flag, value) pairs in the order the flags appear
    """
    leading: str
    segments: Tuple[Tuple[str, str], ...] = ()

    def __len__(self) -> int:
        return len(self.segments) + 1

    @property
    def flags(self) -> List[str]:
        return [flag for flag, _ in self.segments]

    def has(self, flag: str) -> bool:
        return flag in self.flags

    def at(self, index: int) -> str:
        """
        Get a field value by position.

        Args:
            index: 1-based position after the leading segment

        Returns:
            Trimmed field value

        Raises:
            MissingFieldError: If there is no field at that position
        """
        if index < 1 or index > len(self.segments):
            raise MissingFieldError(f"No field at position {index}")
        return self.segments[index - 1][1]

    def value(self, flag: str) -> str:
        """
        Get the value following a flag.

        Raises:
            MissingFieldError: If the flag is absent or its value is blank
        """
        for seg_flag, seg_value in self.segments:
            if seg_flag == flag:
                if not seg_value:
                    raise MissingFieldError(f"Blank value for {flag}")
                return seg_value
        raise MissingFieldError(f"Missing flag {flag}")


def split_by_flags(text: str, flags: Iterable[str]) -> FlagSplit:
    """
    Split text into a leading segment and one segment per recognized flag.

    Walks the whitespace-delimited tokens once; every token that is in
    `flags` starts a new segment and every other token is appended to the
    current one. Internal spacing of values is collapsed to single spaces.

    Args:
        text: Raw input line
        flags: Recognized flags for the command being parsed

    Returns:
        FlagSplit with trimmed values

    Raises:
        DuplicateFieldError: If a flag appears more than once

    Example:
        >>> s = split_by_flags("mark -e Meetup -s done", ("-e", "-s"))
        >>> s.leading, s.segments
        ('mark', (('-e', 'Meetup'), ('-s', 'done')))
    """
    recognized = set(flags)
    leading: List[str] = []
    segments: List[Tuple[str, List[str]]] = []
    seen = set()

    for token in text.split():
        if token in recognized:
            if token in seen:
                raise DuplicateFieldError(f"Flag {token} given more than once")
            seen.add(token)
            segments.append((token, []))
        elif segments:
            segments[-1][1].append(token)
        else:
            leading.append(token)

    return FlagSplit(
        " ".join(leading),
        tuple((flag, " ".join(words)) for flag, words in segments),
    )
