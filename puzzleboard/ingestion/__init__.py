"""
Result Ingestion

Modules:
- screenshot_mode: OCR-assisted daily result submission
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "submit_screenshot_text":
        from puzzleboard.ingestion.screenshot_mode import submit_screenshot_text
        return submit_screenshot_text
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
