"""
Data Module
===========

Configuration and review input.

This module provides:
    - Settings: Environment-backed application configuration
    - ReviewSource: TSV review dataset (file or URL) with sample fallback

Quick Start:
    from src.data import ReviewSource, get_settings

    settings = get_settings()
    source = ReviewSource(settings.reviews.location, settings.reviews.text_column)
    source.load_or_fallback()
    review = source.pick_random()

Configuration:
    Set environment variables or create a .env file.
    See src/data/config.py for all available options.
"""

from .config import get_settings, reset_settings, load_settings, Settings
from .review_source import (
    ReviewSource,
    ReviewSourceError,
    SAMPLE_REVIEWS,
    load_reviews_from_tsv,
)

__all__ = [
    "get_settings",
    "reset_settings",
    "load_settings",
    "Settings",
    "ReviewSource",
    "ReviewSourceError",
    "SAMPLE_REVIEWS",
    "load_reviews_from_tsv",
]
