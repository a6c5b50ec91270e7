"""
Puzzleboard - Core Package

This package contains the core modules for:
- OCR rank inference from results screenshots (puzzleboard.ocr)
- Placement scoring and leaderboard aggregation (puzzleboard.scoring)
- Screenshot-mode result submission (puzzleboard.ingestion)
- Shared configuration and utilities
"""

__version__ = "1.0.0"
