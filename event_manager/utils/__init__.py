"""
Utility functions for the event manager application.
"""
from .columns import get_column, normalize_columns
from .console import render_output, render_error, render_markdown

__all__ = [
    'get_column',
    'normalize_columns',
    'render_output',
    'render_error',
    'render_markdown',
]
