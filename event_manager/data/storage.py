"""
CSV storage for the event list.

Events, participants and items are kept in three CSV files:

    events.csv        name, time, venue, priority, done
    participants.csv  event, name, number, email, present
    items.csv         event, name, present

Missing files load as an empty list. Rows that cannot be read (bad
date-time, unknown priority, unknown event) are skipped with a warning.
"""
import logging
import pandas as pd
from pathlib import Path
from typing import Dict, Any, List

from event_manager.data.event_list import EventList
from event_manager.exceptions import InvalidCommandError, ItemNotFoundError, DuplicateDataError
from event_manager.models import to_bool
from event_manager.parsers.validators import parse_date_time, parse_priority
from event_manager.utils import normalize_columns

logger = logging.getLogger(__name__)

EVENT_COLUMNS = ['name', 'time', 'venue', 'priority', 'done']
PARTICIPANT_COLUMNS = ['event', 'name', 'number', 'email', 'present']
ITEM_COLUMNS = ['event', 'name', 'present']


class Storage:
    """
    Loads and saves an EventList as CSV files.
    """

    def __init__(self, events_file: Path, participants_file: Path, items_file: Path):
        """
        Initialize storage.

        Args:
            events_file: Path to events CSV
            participants_file: Path to participants CSV
            items_file: Path to items CSV
        """
        self.events_file = Path(events_file)
        self.participants_file = Path(participants_file)
        self.items_file = Path(items_file)

    def load(self, event_list: EventList = None) -> EventList:
        """
        Load events, then participants and items, into an event list.

        Args:
            event_list: List to fill (a new one is created if None)

        Returns:
            The filled EventList
        """
        if event_list is None:
            event_list = EventList()

        self._load_events(event_list, self._read(self.events_file, EVENT_COLUMNS))
        self._load_participants(event_list, self._read(self.participants_file, PARTICIPANT_COLUMNS))
        self._load_items(event_list, self._read(self.items_file, ITEM_COLUMNS))

        logger.info("Loaded %d events from %s", len(event_list), self.events_file)
        return event_list

    def save(self, event_list: EventList) -> None:
        """Write the event list to the three CSV files."""
        event_rows: List[Dict[str, Any]] = []
        participant_rows: List[Dict[str, Any]] = []
        item_rows: List[Dict[str, Any]] = []

        for event in event_list:
            event_rows.append(event.to_dict())
            for participant in event.participants:
                participant_rows.append({"event": event.name, **participant.to_dict()})
            for item in event.items:
                item_rows.append({"event": event.name, **item.to_dict()})

        for filepath, rows, columns in (
            (self.events_file, event_rows, EVENT_COLUMNS),
            (self.participants_file, participant_rows, PARTICIPANT_COLUMNS),
            (self.items_file, item_rows, ITEM_COLUMNS),
        ):
            filepath.parent.mkdir(parents=True, exist_ok=True)
            pd.DataFrame(rows, columns=columns).to_csv(filepath, index=False)

        logger.info("Saved %d events to %s", len(event_rows), self.events_file)

    def _read(self, filepath: Path, columns: List[str]) -> pd.DataFrame:
        """
        Read a CSV as strings, adding any missing columns as blanks.

        Returns:
            DataFrame (empty with `columns` if the file does not exist)
        """
        try:
            df = pd.read_csv(filepath, dtype=str, keep_default_na=False, skipinitialspace=True)
        except FileNotFoundError:
            return pd.DataFrame(columns=columns)
        except pd.errors.EmptyDataError:
            return pd.DataFrame(columns=columns)

        return normalize_columns(df, columns)

    def _load_events(self, event_list: EventList, df: pd.DataFrame) -> None:
        for idx, row in df.iterrows():
            try:
                event_list.add_event(
                    row['name'].strip(),
                    parse_date_time(row['time']),
                    row['venue'].strip(),
                    parse_priority(row['priority'] or "medium"),
                    to_bool(row['done']),
                )
            except (InvalidCommandError, DuplicateDataError) as e:
                logger.warning("Skipping event row %d in %s: %s", idx + 2, self.events_file, e)

    def _load_participants(self, event_list: EventList, df: pd.DataFrame) -> None:
        for idx, row in df.iterrows():
            try:
                name = row['name'].strip()
                event_name = row['event'].strip()
                event_list.add_participant(name, row['number'].strip(), row['email'].strip(), event_name)
                event_list.mark_participant(name, event_name, to_bool(row['present']))
            except (ItemNotFoundError, DuplicateDataError) as e:
                logger.warning("Skipping participant row %d in %s: %s", idx + 2, self.participants_file, e)

    def _load_items(self, event_list: EventList, df: pd.DataFrame) -> None:
        for idx, row in df.iterrows():
            try:
                name = row['name'].strip()
                event_name = row['event'].strip()
                event_list.add_item(name, event_name)
                event_list.mark_item(name, event_name, to_bool(row['present']))
            except (ItemNotFoundError, DuplicateDataError) as e:
                logger.warning("Skipping item row %d in %s: %s", idx + 2, self.items_file, e)
