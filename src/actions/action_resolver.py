"""
Action Resolver
===============

Maps a sentiment Classification to a business Decision through a
normalized-score decision table. Pure and total: every valid
Classification yields exactly one action.

Usage:
    resolver = ActionResolver()
    decision = resolver.resolve(Classification(SentimentLabel.NEGATIVE, 0.9))
    print(decision.action_code)   # ActionCode.OFFER_COUPON
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..sentiment.sentiment_models import (
    Classification,
    InvalidArgumentError,
    SentimentLabel,
)
from .action_config import (
    ACTION_TEMPLATES,
    DEFAULT_THRESHOLDS,
    ActionCode,
    ActionThresholds,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decision:
    """Business action chosen for one classification."""
    action_code: ActionCode
    message: str
    severity_color: str
    icon: str
    normalized_score: float

    def to_dict(self) -> dict:
        return {
            "action_code": self.action_code.value,
            "message": self.message,
            "severity_color": self.severity_color,
            "icon": self.icon,
            "normalized_score": self.normalized_score,
        }


def normalize_score(classification: Classification) -> float:
    """
    Collapse (label, confidence) into one [0, 1] outcome score.

    POSITIVE keeps its confidence, NEGATIVE is inverted, and NEUTRAL is
    always 0.5 whatever its confidence.
    """
    if classification.label == SentimentLabel.POSITIVE:
        value = classification.confidence
    elif classification.label == SentimentLabel.NEGATIVE:
        value = 1.0 - classification.confidence
    else:
        value = 0.5
    return value


class ActionResolver:
    """Decision table over the normalized score."""

    def __init__(self, thresholds: Optional[ActionThresholds] = None):
        self.thresholds = thresholds or DEFAULT_THRESHOLDS

    def select_action(self, normalized: float) -> ActionCode:
        if normalized <= self.thresholds.coupon_max:
            return ActionCode.OFFER_COUPON
        if normalized >= self.thresholds.referral_min:
            return ActionCode.ASK_REFERRAL
        return ActionCode.REQUEST_FEEDBACK

    def resolve(self, classification: Classification) -> Decision:
        if not isinstance(classification, Classification):
            raise InvalidArgumentError(
                f"Expected a Classification, got {type(classification).__name__}"
            )

        normalized = normalize_score(classification)
        action = self.select_action(normalized)
        template = ACTION_TEMPLATES[action]

        logger.debug(
            "Resolved %s/%.3f -> %.3f -> %s",
            classification.label.value, classification.confidence, normalized, action.value,
        )
        return Decision(
            action_code=action,
            message=template.message,
            severity_color=template.severity_color,
            icon=template.icon,
            normalized_score=normalized,
        )
