"""
Central configuration for the Puzzleboard leaderboard.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DATA_FOLDER = PROJECT_ROOT / "data"
ROSTER_CSV = DATA_FOLDER / "players.csv"

# --- Games ---
# Categories used by the leaderboard modes
GAME_CATEGORIES = frozenset({"analytical", "language"})
LEADERBOARD_MODES = ("overall", "analytical", "language", "daily")

# --- Placement Points ---
RANK_POINTS = {1: 3, 2: 2, 3: 1}
FLAWLESS_BONUS_POINTS = 1

# --- OCR Rank Inference ---
TOP_N_RANKS = 3
SHORT_NAME_MAX_LEN = 4  # Tokens up to this length are "short"
SHORT_NAME_MAX_EDITS = 1  # Short names tolerate a single typo
LONG_NAME_MAX_EDITS = 2
SELF_REFERENCE_TOKEN = "you"

# --- Highlights ---
FIRE_STREAK_DAYS = 7

# --- Input Validation ---
MAX_INPUT_SIZE = 50_000  # Maximum OCR text size in bytes (~50KB)
