"""
Shared record types for players and games.
"""

from dataclasses import dataclass
from typing import Hashable

import pandas as pd

from puzzleboard.config import GAME_CATEGORIES


@dataclass(frozen=True)
class Player:
    """A roster entry. Identity is by `id`."""
    id: Hashable
    name: str


@dataclass(frozen=True)
class Game:
    id: Hashable
    display_name: str
    category: str


def players_from_frame(df: pd.DataFrame) -> list[Player]:
    """
    Build roster entries from a DataFrame with `id` and `name` columns.

    Row order is kept, since roster order breaks ranking ties.
    """
    missing = {'id', 'name'} - set(df.columns)
    if missing:
        raise ValueError(f"Roster is missing columns: {sorted(missing)}")

    # Blank names become empty strings so they never match OCR text
    names = df['name'].fillna('').astype(str)
    return [
        Player(id=player_id, name=name)
        for player_id, name in zip(df['id'].tolist(), names.tolist())
    ]


def games_from_frame(df: pd.DataFrame) -> list[Game]:
    """Build game entries from a DataFrame with id, display_name, category."""
    missing = {'id', 'display_name', 'category'} - set(df.columns)
    if missing:
        raise ValueError(f"Games are missing columns: {sorted(missing)}")

    unknown = set(df['category']) - GAME_CATEGORIES
    if unknown:
        raise ValueError(f"Unknown game categories: {sorted(unknown)}")

    return [
        Game(id=row['id'], display_name=str(row['display_name']), category=str(row['category']))
        for row in df[['id', 'display_name', 'category']].to_dict('records')
    ]
