"""
Shared utilities for the Puzzleboard leaderboard.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import re

# --- Shared Regex Patterns for OCR Text ---
# Whole-word "you", bounded by non-letters or string edges ("yours" is untouched)
YOU_RE = re.compile(r"(?<![A-Za-z])you(?![A-Za-z])", re.IGNORECASE)

# Anything that is not a letter separates word tokens
NON_ALPHA_RE = re.compile(r"[^a-zA-Z]+")


def tokenize_line(line: str) -> list[str]:
    """Split a line into letter-only tokens, dropping empties."""
    return [token for token in NON_ALPHA_RE.split(line) if token]


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- Validation ---
def validate_mode(mode: str, allowed: tuple[str, ...]) -> None:
    """
    Validate that a leaderboard mode is allowed.

    Args:
        mode: Mode name to validate
        allowed: Allowed mode names

    Raises:
        ValueError: If mode is not one of the allowed names
    """
    if mode not in allowed:
        raise ValueError(
            f"Invalid mode: '{mode}'. "
            f"Allowed values: {', '.join(allowed)}"
        )


def validate_input_size(text: str, max_size: int) -> None:
    """
    Validate that input text does not exceed maximum size.

    Args:
        text: Input text to validate
        max_size: Maximum allowed size in bytes

    Raises:
        ValueError: If input exceeds max_size
    """
    size = len(text.encode("utf-8"))
    if size > max_size:
        raise ValueError(
            f"Input too large: {size:,} bytes. "
            f"Maximum allowed: {max_size:,} bytes"
        )


__all__ = [
    # Logging
    'setup_logging',
    # Validation
    'validate_mode',
    'validate_input_size',
    # OCR text
    'YOU_RE',
    'NON_ALPHA_RE',
    'tokenize_line',
]
