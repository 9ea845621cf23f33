"""
EventManagerCLI - plan events, their participants and their items from the terminal.
"""

__version__ = "1.0.0"
