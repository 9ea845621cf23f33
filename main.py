"""
EventManagerCLI - Main Entry Point

Plan events, their participants and their items from the terminal.
"""
import logging

from config import (
    EVENTS_FILE, PARTICIPANTS_FILE, ITEMS_FILE, LOG_FILE, LOG_LEVEL, LOG_FORMAT,
    verify_data_path, MODE,
)
from event_manager.data import Storage
from event_manager.exceptions import InvalidCommandError
from event_manager.parsers.parser import Parser
from event_manager.utils import render_output, render_error

logger = logging.getLogger(__name__)


def print_welcome():
    """Print welcome message."""
    print("=" * 70)
    print("  EventManagerCLI")
    print("  Type 'menu' for commands, 'exit' to exit")
    print("=" * 70)
    print()


def setup_logging():
    """Send log records to the log file so the console stays clean."""
    logging.basicConfig(filename=LOG_FILE, level=LOG_LEVEL, format=LOG_FORMAT)


def repl():
    """
    Main Read-Eval-Print Loop.

    Parses each line into a command and executes it against the event list.
    """
    # Make sure the data directory exists
    try:
        verify_data_path()
    except OSError as e:
        print(f"Error: {e}")
        print("\nPlease check your configuration and data directory.")
        return

    setup_logging()

    storage = Storage(EVENTS_FILE, PARTICIPANTS_FILE, ITEMS_FILE)
    events = storage.load()
    logger.info("Loaded %d events", len(events))

    import atexit
    # Register auto-save on exit
    def save_on_exit():
        """Save events before program exits."""
        storage.save(events)

    atexit.register(save_on_exit)

    print_welcome()

    parser = Parser()

    # Main loop
    while True:
        try:
            user_input = input("> ").strip()

            # Skip empty input
            if not user_input:
                continue

            try:
                command = parser.parse_command(user_input)
            except InvalidCommandError as e:
                render_error(e.message)
                continue

            # Execute command
            try:
                output = command.execute(events)
            except Exception as e:
                logger.exception("Error executing %s", command.command_word)
                print(f"Error executing command: {e}")
                # In development mode, show full traceback
                if MODE == "DEVELOPMENT":
                    import traceback
                    traceback.print_exc()
                continue

            render_output(output)
            if output.is_exit:
                break

        except (KeyboardInterrupt, EOFError):
            # Ctrl+C or Ctrl+D
            print("\nGoodbye!")
            break


def main():
    """Main entry point."""
    try:
        repl()
    except KeyboardInterrupt:
        print("\nInterrupted. Goodbye!")
    except Exception as e:
        print(f"Fatal error: {e}")
        if MODE == "DEVELOPMENT":
            import traceback
            traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
