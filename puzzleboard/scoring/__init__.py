"""
Scoring

Modules:
- placements: Rank and bonus placements with their points
- leaderboard: Point totals by mode, per-game tables and highlights
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "build_placements":
        from puzzleboard.scoring.placements import build_placements
        return build_placements
    if name == "compute_points_by_mode":
        from puzzleboard.scoring.leaderboard import compute_points_by_mode
        return compute_points_by_mode
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
