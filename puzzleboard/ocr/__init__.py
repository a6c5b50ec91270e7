"""
OCR Rank Inference

Modules:
- matching: Edit distance and fuzzy name matching
- inference: Text search and podium assembly
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "infer_top_three":
        from puzzleboard.ocr.inference import infer_top_three
        return infer_top_three
    if name == "levenshtein":
        from puzzleboard.ocr.matching import levenshtein
        return levenshtein
    if name == "is_close_match":
        from puzzleboard.ocr.matching import is_close_match
        return is_close_match
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
