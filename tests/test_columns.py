"""
Tests for column resolution utilities.
"""
import pandas as pd
from event_manager.utils.columns import get_column, normalize_columns


def test_get_column_exact_match():
    """Test exact case match."""
    df = pd.DataFrame(columns=['name', 'time', 'venue'])
    assert get_column(df, 'name') == 'name'
    assert get_column(df, 'venue') == 'venue'


def test_get_column_case_insensitive():
    """Test case-insensitive matching."""
    df = pd.DataFrame(columns=['Name', 'TIME', ' Venue '])
    assert get_column(df, 'name') == 'Name'
    assert get_column(df, 'time') == 'TIME'
    assert get_column(df, 'venue') == ' Venue '


def test_get_column_missing():
    """Test missing column returns None."""
    df = pd.DataFrame(columns=['name', 'time'])
    assert get_column(df, 'missing') is None


def test_normalize_columns():
    """Test columns are renamed and missing ones added."""
    df = pd.DataFrame([{'Name': 'Meetup', 'PRIORITY': 'high'}])
    result = normalize_columns(df, ['name', 'priority', 'done'])

    assert list(result.columns) == ['name', 'priority', 'done']
    assert result.loc[0, 'name'] == 'Meetup'
    assert result.loc[0, 'done'] == ''


def test_normalize_columns_keeps_extra():
    """Test unknown columns are left alone."""
    df = pd.DataFrame(columns=['name', 'notes'])
    result = normalize_columns(df, ['name'])
    assert list(result.columns) == ['name', 'notes']
