"""
Sentiment Data Models
=====================

Value objects shared by the lexical scorer, the remote classifier and
the action resolver. All of them are immutable.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InvalidArgumentError(ValueError):
    """Input that is not a valid review text or classification."""
    pass


class SentimentLabel(str, Enum):
    """Discrete sentiment classes."""
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"

    @property
    def icon(self) -> str:
        """Font Awesome icon used by the review widget."""
        return _LABEL_ICONS[self]

    @property
    def css_state(self) -> str:
        """Lower-case state name used for styling (positive / negative / neutral)."""
        return self.value.lower()

    @classmethod
    def coerce(cls, value) -> "SentimentLabel":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidArgumentError(f"Unknown sentiment label: {value!r}")


_LABEL_ICONS = {
    SentimentLabel.POSITIVE: "fa-thumbs-up",
    SentimentLabel.NEGATIVE: "fa-thumbs-down",
    SentimentLabel.NEUTRAL: "fa-question-circle",
}


@dataclass(frozen=True)
class Classification:
    """
    Label + confidence produced by a classifier.

    confidence is always within [0, 1]. source records which backend
    produced the value ("lexical" or "remote") and is informational only.
    """
    label: SentimentLabel
    confidence: float
    source: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "label", SentimentLabel.coerce(self.label))

        conf = self.confidence
        if isinstance(conf, bool) or not isinstance(conf, (int, float)):
            raise InvalidArgumentError(f"confidence must be a number, got {type(conf).__name__}")
        if math.isnan(conf) or not 0.0 <= conf <= 1.0:
            raise InvalidArgumentError(f"confidence must be within [0, 1], got {conf}")
        object.__setattr__(self, "confidence", float(conf))

    @property
    def confidence_percent(self) -> str:
        """Confidence formatted the way the widget shows it, e.g. '87.5%'."""
        return f"{self.confidence * 100:.1f}%"

    def to_dict(self) -> dict:
        return {
            "label": self.label.value,
            "confidence": self.confidence,
            "source": self.source,
        }


NEUTRAL_DEFAULT = Classification(SentimentLabel.NEUTRAL, 0.5, source="lexical")
