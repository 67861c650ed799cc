"""
Review Source
=============

Loads review texts from a tab-separated dataset (local file or URL) and
hands out random reviews for analysis.

Dataset format:
    Header row, tab-delimited, one column (default "text") holding the
    review. Rows without that column or blank after trimming are skipped.

Fallback:
    load_or_fallback() returns SAMPLE_REVIEWS when the dataset cannot be
    read or contains no usable review, so the analyzer always has input.
"""

import csv
import io
import logging
import random
from pathlib import Path
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)


SAMPLE_REVIEWS = [
    "This product is absolutely amazing! It exceeded all my expectations.",
    "Terrible quality, broke after just two days of use.",
    "It's okay for the price but nothing special.",
    "Excellent value, highly recommended to everyone.",
    "Very disappointed, doesn't work as advertised.",
    "Fantastic! The best purchase I've made this year.",
    "Poor customer service and product quality.",
    "Good product with some minor issues.",
    "Horrible experience, would never buy again.",
    "Perfect for my needs, works flawlessly.",
]


class ReviewSourceError(Exception):
    """Reviews could not be loaded or none are available."""
    pass


def load_reviews_from_tsv(content: str, text_column: str = "text") -> List[str]:
    """Parse TSV content and return the trimmed, non-empty review texts."""
    reader = csv.DictReader(io.StringIO(content), delimiter="\t")
    if reader.fieldnames is None or text_column not in reader.fieldnames:
        raise ReviewSourceError(
            f"Column '{text_column}' not found in TSV header: {reader.fieldnames}"
        )

    reviews = []
    for row in reader:
        value = row.get(text_column)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            reviews.append(text)
    return reviews


class ReviewSource:
    """Review dataset backed by a TSV file path or http(s) URL."""

    def __init__(self, location: str, text_column: str = "text", timeout: float = 30.0):
        self.location = location
        self.text_column = text_column
        self.timeout = timeout
        self.reviews: List[str] = []
        self.using_samples = False

    @property
    def is_remote(self) -> bool:
        return self.location.startswith(("http://", "https://"))

    def _read(self) -> str:
        if self.is_remote:
            try:
                response = requests.get(self.location, timeout=self.timeout)
            except requests.RequestException as e:
                raise ReviewSourceError(f"Failed to fetch {self.location}: {e}") from e
            if response.status_code != 200:
                raise ReviewSourceError(
                    f"HTTP {response.status_code}: {response.reason} for {self.location}"
                )
            return response.text

        path = Path(self.location)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise ReviewSourceError(f"Failed to read {path}: {e}") from e

    def load(self) -> List[str]:
        """
        Read and parse the dataset.

        Raises:
            ReviewSourceError: dataset unreadable or malformed
        """
        content = self._read()
        reviews = load_reviews_from_tsv(content, self.text_column)
        self.reviews = reviews
        self.using_samples = False
        logger.info(f"Loaded {len(reviews)} reviews from {self.location}")
        return reviews

    def load_or_fallback(self) -> List[str]:
        """Load the dataset, or fall back to the built-in sample reviews."""
        try:
            reviews = self.load()
        except ReviewSourceError as e:
            logger.warning(f"Failed to load reviews: {e}. Using sample reviews.")
            reviews = []

        if not reviews:
            logger.warning("No reviews available from %s, using sample reviews", self.location)
            self.reviews = list(SAMPLE_REVIEWS)
            self.using_samples = True
        return self.reviews

    def pick_random(self, rng: Optional[random.Random] = None) -> str:
        """Return one review at random (reviews must be loaded first)."""
        if not self.reviews:
            raise ReviewSourceError("No reviews available. Load the review source first.")
        chooser = rng or random
        return chooser.choice(self.reviews)
