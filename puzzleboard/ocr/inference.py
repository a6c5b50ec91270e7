"""
OCR Rank Inference

Infers the top three players of a daily game from text recognized in a
results screenshot. Each roster player's first name is searched line by line
(with fuzzy matching to absorb OCR noise); players are ranked by the line on
which their name first appears.

Usage:
    from puzzleboard.ocr import infer_top_three
    podium = infer_top_three(roster, ocr_text, uploader_id=7)
"""

from dataclasses import dataclass
from typing import Hashable, Iterable, Optional, Sequence

from puzzleboard.config import SELF_REFERENCE_TOKEN, TOP_N_RANKS
from puzzleboard.models import Player
from puzzleboard.ocr.matching import first_name_token, is_close_match
from puzzleboard.utils import YOU_RE, setup_logging, tokenize_line

# --- Module Logger ---
logger = setup_logging(__name__)


@dataclass(frozen=True)
class Match:
    """Earliest line on which a player's name was found."""
    player: Player
    line_index: int


def find_uploader(roster: Sequence[Player], uploader_id: Optional[Hashable]) -> Optional[Player]:
    """Look up the uploader in the roster; ids are compared as strings."""
    if uploader_id is None or uploader_id == "":
        return None

    for player in roster:
        if str(player.id) == str(uploader_id):
            return player

    logger.warning(f"Uploader id {uploader_id!r} not in roster, skipping '{SELF_REFERENCE_TOKEN}' substitution")
    return None


def substitute_self_reference(text: str, uploader: Optional[Player]) -> str:
    """
    Replace every whole-word "you" (any case) with the uploader's full name.

    Screenshots show the uploader's own row as "You". Words merely containing
    the letters ("yours", "Yolanda") are left alone.
    """
    if uploader is None:
        return text
    return YOU_RE.sub(lambda _: uploader.name, text)


def find_first_matches(text: Optional[str], roster: Iterable[Player]) -> list[Match]:
    """
    Find, for each player, the first line containing their first name.

    Args:
        text: Recognized text, already substituted
        roster: Players in roster order

    Returns:
        One Match per player found, in roster order. Players whose name
        never appears (or whose first-name token is empty) are omitted.
    """
    if not text:
        return []

    lines = [tokenize_line(line) if line.strip() else [] for line in text.lower().split("\n")]
    matches = []

    for player in roster:
        first = first_name_token(player.name)
        if not first:
            logger.debug(f"Player {player.id!r} has an empty first name, never matched")
            continue

        for index, words in enumerate(lines):
            if any(w == first or is_close_match(w, first) for w in words):
                matches.append(Match(player=player, line_index=index))
                break

    return matches


def assemble_ranking(matches: Iterable[Match], top_n: int = TOP_N_RANKS) -> list[Player]:
    """
    Order matches by line and keep the first `top_n` distinct players.

    The sort is stable, so players found on the same line keep roster order.
    """
    ranked = sorted(matches, key=lambda m: m.line_index)

    podium: list[Player] = []
    seen = set()
    for match in ranked:
        if match.player.id in seen:
            continue
        seen.add(match.player.id)
        podium.append(match.player)
        if len(podium) == top_n:
            break

    return podium


def infer_top_three(
    roster: Iterable[Player],
    recognized_text: Optional[str],
    uploader_id: Optional[Hashable] = None,
) -> list[Player]:
    """
    Infer ranks 1..3 from OCR text.

    Args:
        roster: Known players, in roster order (ties go to earlier players)
        recognized_text: OCR output for one screenshot; empty or None is allowed
        uploader_id: Id of the player who uploaded the screenshot, if any

    Returns:
        Up to three Players; index 0 is rank 1
    """
    # Snapshot so a caller mutating its list mid-call cannot change the result
    players = tuple(roster)
    if not recognized_text or not players:
        return []

    uploader = find_uploader(players, uploader_id)
    text = substitute_self_reference(recognized_text, uploader)

    matches = find_first_matches(text, players)
    podium = assemble_ranking(matches)

    logger.info(
        f"Matched {len(matches)}/{len(players)} players; "
        f"podium: {', '.join(p.name for p in podium) or '(none)'}"
    )
    return podium
