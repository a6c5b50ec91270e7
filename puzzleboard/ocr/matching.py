"""
Fuzzy name matching for OCR output.

OCR engines routinely misread a letter or two ("Mlke" for "Mike"), so player
names are compared with a plain edit distance and accepted when the number of
edits stays within a tolerance that depends on the length of the tokens.
"""

from rapidfuzz.distance import Levenshtein

from puzzleboard.config import (
    SHORT_NAME_MAX_LEN,
    SHORT_NAME_MAX_EDITS,
    LONG_NAME_MAX_EDITS,
)


def levenshtein(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions needed to turn `a` into `b`.

    Comparison is case-sensitive; callers normalize case beforehand.
    """
    return Levenshtein.distance(a, b)


def max_edits_for(word: str, target: str) -> int:
    """Edit tolerance for a pair of tokens: one for short names, two otherwise."""
    if max(len(word), len(target)) <= SHORT_NAME_MAX_LEN:
        return SHORT_NAME_MAX_EDITS
    return LONG_NAME_MAX_EDITS


def is_close_match(word: str, target: str) -> bool:
    """
    Decide whether an OCR word and a name token refer to the same player.

    Args:
        word: Token read from the screenshot text
        target: First-name token of a roster player

    Returns:
        True if the lowercased tokens are within the length-dependent
        edit tolerance
    """
    a = word.lower()
    b = target.lower()
    if a == b:
        return True
    return levenshtein(a, b) <= max_edits_for(a, b)


def first_name_token(name: str) -> str:
    """Lowercased part of a display name before the first space."""
    return name.split(" ")[0].lower()
