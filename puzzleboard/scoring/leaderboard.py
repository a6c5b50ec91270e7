"""
Leaderboard Aggregation

Totals placement points per player for the public leaderboard:
- Overall, per category (analytical / language) and today-only modes
- Per-game leaderboard
- Highlight slides (overall leader, player of the day, streak, stinker)

Usage:
    from puzzleboard.scoring.leaderboard import enrich_placements, compute_points_by_mode
    placements = enrich_placements(raw_placements, result_sets, games)
    table = compute_points_by_mode(players, placements, "overall")
"""

from datetime import date, datetime, timezone
from typing import Hashable, Optional, Sequence

import pandas as pd

from puzzleboard.config import FIRE_STREAK_DAYS, LEADERBOARD_MODES
from puzzleboard.models import Game, Player
from puzzleboard.utils import setup_logging, validate_mode

# --- Module Logger ---
logger = setup_logging(__name__)

ENRICHED_COLUMNS = ["player_id", "points", "game_id", "category", "date"]


def enrich_placements(
    placements: pd.DataFrame,
    result_sets: pd.DataFrame,
    games: Sequence[Game],
) -> pd.DataFrame:
    """
    Attach game, category and date to raw placement rows.

    Args:
        placements: Columns player_id, points, result_set_id
        result_sets: Columns id, game_id, result_date
        games: Known games

    Returns:
        DataFrame with columns player_id, points, game_id, category, date.
        Placements whose result set or game is unknown keep NaN/NaT there.
    """
    df_games = pd.DataFrame(
        [{'game_id': g.id, 'category': g.category} for g in games],
        columns=['game_id', 'category'],
    )
    df_sets = result_sets.rename(columns={'id': 'result_set_id', 'result_date': 'date'})[
        ['result_set_id', 'game_id', 'date']
    ]

    df = placements.merge(df_sets, on='result_set_id', how='left')
    df = df.merge(df_games, on='game_id', how='left')
    df['date'] = pd.to_datetime(df['date'], errors='coerce')

    unmatched = df['game_id'].isna().sum()
    if unmatched:
        logger.warning(f"{unmatched} placements reference an unknown result set")

    return df[ENRICHED_COLUMNS]


def _totals_frame(players: Sequence[Player], points_by_player: pd.Series) -> pd.DataFrame:
    """One row per roster player with their summed points (0 if none)."""
    df = pd.DataFrame(
        [{'id': p.id, 'name': p.name} for p in players],
        columns=['id', 'name'],
    )
    df['points'] = df['id'].map(points_by_player).fillna(0).astype(int)
    return df


def _today(today: Optional[date]) -> pd.Timestamp:
    """Reference day at midnight; defaults to the current UTC date."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return pd.Timestamp(today).normalize()


def compute_points_by_mode(
    players: Sequence[Player],
    placements: pd.DataFrame,
    mode: str = "overall",
    today: Optional[date] = None,
) -> pd.DataFrame:
    """
    Total points per player for one leaderboard mode.

    Args:
        players: Roster
        placements: Enriched placements (see enrich_placements)
        mode: "overall", "analytical", "language" or "daily"
        today: Reference day for "daily" (default: current UTC date)

    Returns:
        DataFrame with columns rank, id, name, points; every roster player
        appears, sorted by points descending then name

    Raises:
        ValueError: If mode is unknown
    """
    validate_mode(mode, LEADERBOARD_MODES)

    df = placements
    if mode in ("analytical", "language"):
        df = df[df['category'] == mode]
    elif mode == "daily":
        df = df[pd.to_datetime(df['date'], errors='coerce') == _today(today)]

    totals = df.groupby('player_id')['points'].sum()
    rows = _totals_frame(players, totals)
    rows = rows.sort_values(['points', 'name'], ascending=[False, True]).reset_index(drop=True)
    rows.insert(0, 'rank', range(1, len(rows) + 1))
    return rows


def compute_game_leaderboard(
    players: Sequence[Player],
    placements: pd.DataFrame,
    game_id: Hashable,
) -> pd.DataFrame:
    """
    Points per player for a single game.

    Only players with points for the game are listed, highest first; ties
    keep roster order.
    """
    df = placements[placements['game_id'] == game_id]
    totals = df.groupby('player_id')['points'].sum()

    rows = _totals_frame(players, totals)
    rows = rows[rows['points'] > 0]
    rows = rows.sort_values('points', ascending=False, kind='stable').reset_index(drop=True)
    rows.insert(0, 'rank', range(1, len(rows) + 1))
    return rows


def _streak_leader(
    players: Sequence[Player],
    placements: pd.DataFrame,
    today: pd.Timestamp,
) -> tuple[Optional[Player], int]:
    """Player with the most points in the last FIRE_STREAK_DAYS days."""
    age_days = (today - pd.to_datetime(placements['date'], errors='coerce')).dt.days
    recent = placements[age_days < FIRE_STREAK_DAYS]
    totals = recent.groupby('player_id')['points'].sum()

    leader, best = None, 0
    for p in players:
        pts = int(totals.get(p.id, 0))
        if pts > best:
            leader, best = p, pts
    return leader, best


def build_highlights(
    players: Sequence[Player],
    placements: pd.DataFrame,
    today: Optional[date] = None,
) -> list[dict]:
    """
    Build the highlight slides shown above the leaderboard.

    Returns:
        List of {'title', 'text'} dicts; empty when nobody has points yet
    """
    day = _today(today)

    overall = compute_points_by_mode(players, placements, "overall", today=day)
    scored = overall[overall['points'] > 0]
    daily = compute_points_by_mode(players, placements, "daily", today=day)
    daily_scored = daily[daily['points'] > 0]

    slides = []

    if not scored.empty:
        leader = scored.iloc[0]
        slides.append({
            'title': 'Puzzle Monarch 👑',
            'text': f"{leader['name']} is ruling the league with {leader['points']} total points.",
        })

    if not daily_scored.empty:
        top = daily_scored.iloc[0]
        slides.append({
            'title': 'Player of the Day 🔥',
            'text': f"{top['name']} dropped {top['points']} point(s) today ({day.strftime('%Y-%m-%d')}).",
        })

    fire_player, fire_points = _streak_leader(players, placements, day)
    if fire_player is not None:
        slides.append({
            'title': 'On Fire Streak 🔥🔥',
            'text': (
                f"{fire_player.name} has {fire_points} point(s) in the last "
                f"{FIRE_STREAK_DAYS} days. Keep the streak alive."
            ),
        })

    if len(scored) > 1:
        stinker = scored.iloc[-1]
        slides.append({
            'title': 'Having a Stinker 😬',
            'text': (
                f"{stinker['name']} is currently at the bottom with "
                f"{stinker['points']} total points. Time for a comeback."
            ),
        })

    return slides
