"""
Command parsing: flag tokenizer, field validators and per-family builders.

The dispatcher lives in event_manager.parsers.parser.
"""
from .flags import FlagSplit, split_by_flags
from .validators import (
    is_valid_phone_number,
    is_valid_email,
    parse_date_time,
    parse_date,
    parse_time,
    parse_priority,
    parse_phone_number,
    parse_email,
    parse_status,
)

__all__ = [
    'FlagSplit',
    'split_by_flags',
    'is_valid_phone_number',
    'is_valid_email',
    'parse_date_time',
    'parse_date',
    'parse_time',
    'parse_priority',
    'parse_phone_number',
    'parse_email',
    'parse_status',
]
