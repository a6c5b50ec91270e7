"""
Placements and Points

A submitted result for one game on one day is a list of placements. A
placement is either a podium finish (rank 1-3, worth 3/2/1 points) or a
"flawless" bonus for a player who did not make the podium. A flawless
player who is already on the podium gets the bonus point added to their
podium placement instead.
"""

from dataclasses import dataclass, replace
from typing import Hashable, Iterable, Mapping, Union

import pandas as pd

from puzzleboard.config import FLAWLESS_BONUS_POINTS, RANK_POINTS
from puzzleboard.models import Player
from puzzleboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

PLACEMENT_COLUMNS = ["result_set_id", "player_id", "rank", "points"]


@dataclass(frozen=True)
class RankedPlacement:
    player_id: Hashable
    rank: int
    points: int

    def __post_init__(self):
        if self.rank not in RANK_POINTS:
            raise ValueError(f"Rank must be one of {sorted(RANK_POINTS)}, got {self.rank}")


@dataclass(frozen=True)
class BonusPlacement:
    player_id: Hashable
    points: int = FLAWLESS_BONUS_POINTS


Placement = Union[RankedPlacement, BonusPlacement]


def selections_from_podium(podium: Iterable[Player]) -> dict[int, list[Hashable]]:
    """Turn an inferred podium (index 0 = rank 1) into rank selections."""
    return {rank: [player.id] for rank, player in enumerate(podium, start=1)}


def build_placements(
    rank_selections: Mapping[int, Iterable[Hashable]],
    flawless_ids: Iterable[Hashable] = (),
) -> list[Placement]:
    """
    Build the placements for one result set.

    Args:
        rank_selections: Player ids selected for each rank. A rank may hold
            several players when places are shared.
        flawless_ids: Players who earned the flawless bonus

    Returns:
        Ranked placements in rank order, followed by bonus-only placements

    Raises:
        ValueError: If a rank outside 1-3 is selected
    """
    placements: list[Placement] = []

    for rank in sorted(rank_selections):
        if rank not in RANK_POINTS:
            raise ValueError(f"Rank must be one of {sorted(RANK_POINTS)}, got {rank}")
        for player_id in rank_selections[rank]:
            placements.append(RankedPlacement(player_id=player_id, rank=rank, points=RANK_POINTS[rank]))

    for player_id in flawless_ids:
        existing = next(
            (i for i, p in enumerate(placements) if str(p.player_id) == str(player_id)),
            None,
        )
        if existing is not None:
            current = placements[existing]
            placements[existing] = replace(current, points=current.points + FLAWLESS_BONUS_POINTS)
        else:
            placements.append(BonusPlacement(player_id=player_id))

    logger.debug(f"Built {len(placements)} placements")
    return placements


def describe_placement(placement: Placement) -> str:
    """Short human-readable label, e.g. '#1 (+3)' or 'flawless (+1)'."""
    if isinstance(placement, RankedPlacement):
        return f"#{placement.rank} (+{placement.points})"
    if isinstance(placement, BonusPlacement):
        return f"flawless (+{placement.points})"
    raise TypeError(f"Unknown placement type: {type(placement).__name__}")


def placements_to_frame(placements: Iterable[Placement], result_set_id: Hashable) -> pd.DataFrame:
    """
    Flatten placements into rows for storage or aggregation.

    Bonus-only placements have no rank, so `rank` is a nullable integer column.
    """
    rows = []
    for p in placements:
        rows.append({
            'result_set_id': result_set_id,
            'player_id': p.player_id,
            'rank': p.rank if isinstance(p, RankedPlacement) else pd.NA,
            'points': p.points,
        })

    df = pd.DataFrame(rows, columns=PLACEMENT_COLUMNS)
    df['rank'] = df['rank'].astype('Int64')
    df['points'] = df['points'].astype(int)
    return df
