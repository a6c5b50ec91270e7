"""
Tests for placement building and points.
"""

import pandas as pd
import pytest

from puzzleboard.models import Player
from puzzleboard.scoring.placements import (
    BonusPlacement,
    RankedPlacement,
    build_placements,
    describe_placement,
    placements_to_frame,
    selections_from_podium,
)


class TestBuildPlacements:
    """Tests for build_placements function."""

    def test_podium_points(self):
        result = build_placements({1: [10], 2: [20], 3: [30]})
        assert result == [
            RankedPlacement(player_id=10, rank=1, points=3),
            RankedPlacement(player_id=20, rank=2, points=2),
            RankedPlacement(player_id=30, rank=3, points=1),
        ]

    def test_ranks_emitted_in_order(self):
        result = build_placements({3: [30], 1: [10]})
        assert [p.rank for p in result] == [1, 3]

    def test_shared_rank(self):
        result = build_placements({1: [10, 20]})
        assert all(p.rank == 1 and p.points == 3 for p in result)
        assert len(result) == 2

    def test_flawless_adds_to_podium_placement(self):
        result = build_placements({1: [10], 2: [20]}, flawless_ids=[10])
        assert result[0] == RankedPlacement(player_id=10, rank=1, points=4)
        assert len(result) == 2

    def test_flawless_off_podium_is_bonus(self):
        result = build_placements({1: [10]}, flawless_ids=[40])
        assert result[-1] == BonusPlacement(player_id=40, points=1)

    def test_flawless_only(self):
        assert build_placements({}, flawless_ids=[1, 2]) == [
            BonusPlacement(player_id=1),
            BonusPlacement(player_id=2),
        ]

    def test_invalid_rank(self):
        with pytest.raises(ValueError, match="Rank must be one of"):
            build_placements({4: [10]})

    def test_empty(self):
        assert build_placements({}) == []


class TestRankedPlacement:
    """Tests for RankedPlacement validation."""

    def test_rejects_rank_zero(self):
        with pytest.raises(ValueError):
            RankedPlacement(player_id=1, rank=0, points=1)


class TestSelectionsFromPodium:
    """Tests for selections_from_podium."""

    def test_maps_index_to_rank(self):
        podium = [Player(id=5, name="Eve"), Player(id=3, name="Cal")]
        assert selections_from_podium(podium) == {1: [5], 2: [3]}

    def test_empty_podium(self):
        assert selections_from_podium([]) == {}


class TestDescribePlacement:
    """Tests for describe_placement labels."""

    def test_ranked(self):
        assert describe_placement(RankedPlacement(player_id=1, rank=2, points=2)) == "#2 (+2)"

    def test_bonus(self):
        assert describe_placement(BonusPlacement(player_id=1)) == "flawless (+1)"

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            describe_placement("first")


class TestPlacementsToFrame:
    """Tests for placements_to_frame."""

    def test_columns_and_values(self):
        placements = build_placements({1: [10]}, flawless_ids=[20])
        df = placements_to_frame(placements, result_set_id=7)

        assert list(df.columns) == ["result_set_id", "player_id", "rank", "points"]
        assert df['result_set_id'].tolist() == [7, 7]
        assert df['points'].tolist() == [3, 1]
        assert df.loc[0, 'rank'] == 1
        assert pd.isna(df.loc[1, 'rank'])
        assert str(df['rank'].dtype) == "Int64"

    def test_empty(self):
        df = placements_to_frame([], result_set_id=1)
        assert df.empty
