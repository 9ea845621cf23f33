"""
Column name resolution utilities.

Handles case-insensitive column name matching for DataFrames.
This is needed because hand-edited CSV files may have inconsistent
capitalization or stray spaces in the header row.
"""
import pandas as pd
from typing import List, Optional


def get_column(df: pd.DataFrame, name: str) -> Optional[str]:
    """
    Return actual column name matching `name` case-insensitively, or None.

    Args:
        df: DataFrame to search
        name: Column name to find (case-insensitive, surrounding spaces ignored)

    Returns:
        Actual column name if found, None otherwise

    Example:
        >>> df = pd.DataFrame(columns=['Name', ' TIME ', 'Venue'])
        >>> get_column(df, 'time')
        ' TIME '
        >>> get_column(df, 'missing') is None
        True
    """
    name_lower = name.strip().lower()
    for col in df.columns:
        if str(col).strip().lower() == name_lower:
            return col
    return None


def normalize_columns(df: pd.DataFrame, columns: List[str], fill: str = "") -> pd.DataFrame:
    """
    Rename matching columns to their canonical names and add missing ones.

    Args:
        df: DataFrame read from disk
        columns: Canonical lowercase column names
        fill: Value for columns that are missing

    Returns:
        DataFrame containing every column in `columns`
    """
    renamed = {}
    missing = []
    for col in columns:
        actual = get_column(df, col)
        if actual is None:
            missing.append(col)
        elif actual != col:
            renamed[actual] = col

    df = df.rename(columns=renamed)
    for col in missing:
        df[col] = fill
    return df
