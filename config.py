"""
Configuration for EventManagerCLI.

Toggle between PRODUCTION and DEVELOPMENT mode, or set the
EVENT_MANAGER_MODE environment variable.
"""
import os
from pathlib import Path

# ==================== MODE SELECTION ====================
# Options: "PRODUCTION" or "DEVELOPMENT"
MODE = os.environ.get("EVENT_MANAGER_MODE", "PRODUCTION").upper()
# ========================================================

# Base paths
PROJECT_ROOT = Path(__file__).parent
PRODUCTION_DATA_PATH = Path.home() / ".event_manager"
DEVELOPMENT_DATA_PATH = PROJECT_ROOT / "data"

# Select data path based on mode
if MODE == "PRODUCTION":
    DATA_PATH = PRODUCTION_DATA_PATH
elif MODE == "DEVELOPMENT":
    DATA_PATH = DEVELOPMENT_DATA_PATH
else:
    raise ValueError(f"Invalid MODE: {MODE}. Must be 'PRODUCTION' or 'DEVELOPMENT'")

# File paths
EVENTS_FILE = DATA_PATH / "events.csv"
PARTICIPANTS_FILE = DATA_PATH / "participants.csv"
ITEMS_FILE = DATA_PATH / "items.csv"
LOG_FILE = DATA_PATH / "event_manager.log"

# Application settings
LOG_LEVEL = "DEBUG" if MODE == "DEVELOPMENT" else "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def verify_data_path():
    """Create the data directory if it does not exist yet."""
    DATA_PATH.mkdir(parents=True, exist_ok=True)
    return True


if __name__ == "__main__":
    # Test configuration
    print(f"\nMode: {MODE}")
    print(f"Data Path: {DATA_PATH}")
    print(f"Events File: {EVENTS_FILE}")
    print(f"Participants File: {PARTICIPANTS_FILE}")
    print(f"Items File: {ITEMS_FILE}")
    print(f"Log File: {LOG_FILE}")
