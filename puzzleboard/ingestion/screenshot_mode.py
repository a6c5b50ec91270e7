"""
Screenshot-Mode Result Submission

This module handles OCR-assisted submission of a daily game result. The admin
runs OCR on a results screenshot, pastes the recognized text, and the podium
is inferred from the roster; flawless bonuses are added on top.

Usage:
    python -m puzzleboard.ingestion.screenshot_mode [roster.csv]

    Programmatic usage:
        from puzzleboard.ingestion.screenshot_mode import submit_screenshot_text
        result = submit_screenshot_text(text, roster, uploader_id=3)
"""

import sys
from pathlib import Path

# Add project root to path for direct script execution
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from typing import Hashable, Iterable, Optional, Sequence

import pandas as pd

from puzzleboard.config import MAX_INPUT_SIZE, ROSTER_CSV, TOP_N_RANKS
from puzzleboard.models import Player, players_from_frame
from puzzleboard.ocr.inference import infer_top_three
from puzzleboard.scoring.placements import (
    build_placements,
    describe_placement,
    selections_from_podium,
)
from puzzleboard.utils import setup_logging, validate_input_size

# --- Module Logger ---
logger = setup_logging(__name__)


class SubmissionError(Exception):
    """Custom exception for submission errors"""
    pass


class ValidationError(SubmissionError):
    """Validation-specific errors"""
    pass


def load_roster(path: Path = ROSTER_CSV) -> list[Player]:
    """
    Load the roster from a CSV file with `id` and `name` columns.

    Players are ordered by name, which decides ties between players found
    on the same line of a screenshot.

    Raises:
        SubmissionError: If the file does not exist
        ValidationError: If the file is empty, malformed or missing columns
    """
    if not path.exists():
        raise SubmissionError(f"Roster file not found: {path}")

    try:
        df = pd.read_csv(path, dtype={'name': str}, keep_default_na=False)
        players = players_from_frame(df.sort_values('name', kind='stable'))
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise ValidationError(f"Could not read roster file {path}: {e}")
    except (KeyError, ValueError) as e:
        raise ValidationError(f"Invalid roster file {path}: {e}")

    logger.info(f"Loaded {len(players)} players from {path}")
    return players


def submit_screenshot_text(
    text: Optional[str],
    roster: Sequence[Player],
    uploader_id: Optional[Hashable] = None,
    flawless_ids: Iterable[Hashable] = (),
) -> dict:
    """
    Main entry point for screenshot-mode submission.

    Args:
        text: OCR text of the results screenshot (empty if OCR failed)
        roster: Known players
        uploader_id: Player who took the screenshot; their "You" row is
            attributed to them
        flawless_ids: Players who earned the flawless bonus

    Returns:
        Dictionary with:
            - success: bool
            - ranking: inferred podium, index 0 = rank 1
            - placements: placements built from the podium and bonuses
            - warnings: list of warning messages

    Raises:
        ValueError: If the text exceeds MAX_INPUT_SIZE
        ValidationError: If a flawless id is not in the roster
    """
    result = {
        'success': False,
        'ranking': [],
        'placements': [],
        'warnings': [],
    }

    text = text or ""
    validate_input_size(text, MAX_INPUT_SIZE)

    # CLI input yields string ids; map them back onto the roster's ids
    known_ids = {str(p.id): p.id for p in roster}
    flawless_ids = list(flawless_ids)
    unknown = [pid for pid in flawless_ids if str(pid) not in known_ids]
    if unknown:
        raise ValidationError(f"Flawless players not in roster: {unknown}")
    flawless_ids = [known_ids[str(pid)] for pid in flawless_ids]

    # Step 1: Infer the podium
    logger.info("Inferring podium from OCR text...")
    ranking = infer_top_three(roster, text, uploader_id=uploader_id)
    result['ranking'] = ranking

    if not text.strip():
        result['warnings'].append("No OCR text; select the podium manually")
    elif len(ranking) < TOP_N_RANKS:
        result['warnings'].append(
            f"Only {len(ranking)} of {TOP_N_RANKS} ranks detected; fill the rest manually"
        )
    for w in result['warnings']:
        logger.warning(f"  Warning: {w}")

    # Step 2: Build placements
    placements = build_placements(selections_from_podium(ranking), flawless_ids)
    result['placements'] = placements
    logger.info(f"  Built {len(placements)} placements")

    result['success'] = True
    return result


def read_pasted_text() -> str:
    """Read lines from stdin until two consecutive empty lines or EOF."""
    lines = []
    empty_count = 0

    try:
        while True:
            line = input()
            if line == "":
                empty_count += 1
                if empty_count >= 2:
                    break
                lines.append(line)
            else:
                empty_count = 0
                lines.append(line)
    except EOFError:
        pass

    return "\n".join(lines)


def main():
    """CLI interface for screenshot-mode submission."""
    roster_path = Path(sys.argv[1]) if len(sys.argv) > 1 else ROSTER_CSV

    print("=" * 60)
    print("Puzzleboard Screenshot-Mode Submission")
    print("=" * 60)

    try:
        roster = load_roster(roster_path)
    except SubmissionError as e:
        print(f"\nROSTER ERROR: {e}")
        sys.exit(1)

    print("\nPlayers:")
    for p in roster:
        print(f"  [{p.id}] {p.name}")

    uploader_id = input("\nUploader id (blank for none): ").strip() or None

    print("\nPaste the OCR text below.")
    print("When finished, press Enter twice (empty line) to process.\n")
    print("-" * 60)
    text = read_pasted_text()
    print("-" * 60)

    flawless_raw = input("Flawless player ids (comma-separated, blank for none): ").strip()
    flawless_ids = [pid.strip() for pid in flawless_raw.split(",") if pid.strip()]

    try:
        result = submit_screenshot_text(text, roster, uploader_id, flawless_ids)
    except ValidationError as e:
        print(f"\nVALIDATION ERROR: {e}")
        sys.exit(1)
    except SubmissionError as e:
        print(f"\nSUBMISSION ERROR: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"\nINPUT ERROR: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"\nUNEXPECTED ERROR: {e}")
        raise

    names = {str(p.id): p.name for p in roster}

    print("\n" + "=" * 60)
    print("PODIUM")
    for rank, player in enumerate(result['ranking'], start=1):
        print(f"  #{rank} {player.name}")
    print("PLACEMENTS")
    for placement in result['placements']:
        print(f"  {names.get(str(placement.player_id), placement.player_id)}: {describe_placement(placement)}")
    if result['warnings']:
        print(f"  Warnings: {len(result['warnings'])}")
    print("=" * 60)


if __name__ == "__main__":
    main()
