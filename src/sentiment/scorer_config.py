"""
Lexical scorer weights.

Every numeric constant the scorer uses lives here, so the scoring logic
carries no magic numbers and a variant can be tried without touching it.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ScorerWeights:
    """
    Per-token contributions, post-token adjustments and confidence mapping.

    TOKEN CONTRIBUTIONS:
    - positive hit: +3, or -2 when negated
    - negative hit: -3, or +2 when negated
    - neutral hit: +0.5 to the neutral total, never negated or intensified
    - no hit: +0.1 to the neutral total
    Positive/negative contributions are doubled after an intensifier.

    POST-TOKEN ADJUSTMENTS (each applied at most once):
    - more than one '!': +2 to the leading polarity
    - at least one '?': +1 neutral
    - 'but' / 'however' / 'although' anywhere: +1 neutral
    """
    positive_hit: float = 3.0
    negated_positive_hit: float = -2.0
    negative_hit: float = -3.0
    negated_negative_hit: float = 2.0
    neutral_hit: float = 0.5
    no_hit_neutral: float = 0.1
    intensity_multiplier: float = 2.0

    neutral_baseline: float = 1.0

    exclamation_min_count: int = 2
    exclamation_bonus: float = 2.0
    question_bonus: float = 1.0
    contrast_bonus: float = 1.0
    contrast_markers: Tuple[str, ...] = ("but", "however", "although")

    # |positive - negative| below this margin forces NEUTRAL
    close_score_margin: float = 2.0

    neutral_confidence_base: float = 0.5
    polar_confidence_base: float = 0.6
    confidence_span: float = 0.3
    min_confidence: float = 0.5
    max_confidence: float = 0.95

    def __post_init__(self):
        if not 0.0 <= self.min_confidence <= self.max_confidence <= 1.0:
            raise ValueError("confidence clamp must satisfy 0 <= min <= max <= 1")
        if self.intensity_multiplier <= 0:
            raise ValueError("intensity_multiplier must be positive")


DEFAULT_WEIGHTS = ScorerWeights()
