"""
Business action thresholds and display templates.

DECISION TABLE (normalized score, 1 = best outcome):
    score <= 0.4        -> OFFER_COUPON      (churn risk)
    0.4 < score < 0.7   -> REQUEST_FEEDBACK  (ambiguous)
    score >= 0.7        -> ASK_REFERRAL      (satisfied customer)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ActionCode(str, Enum):
    """Business responses selected by the resolver."""
    OFFER_COUPON = "OFFER_COUPON"
    REQUEST_FEEDBACK = "REQUEST_FEEDBACK"
    ASK_REFERRAL = "ASK_REFERRAL"


@dataclass(frozen=True)
class ActionThresholds:
    """Inclusive bounds of the outer branches of the decision table."""
    coupon_max: float = 0.4
    referral_min: float = 0.7

    def __post_init__(self):
        if not 0.0 <= self.coupon_max < self.referral_min <= 1.0:
            raise ValueError(
                "thresholds must satisfy 0 <= coupon_max < referral_min <= 1, "
                f"got coupon_max={self.coupon_max} referral_min={self.referral_min}"
            )


@dataclass(frozen=True)
class ActionTemplate:
    """Fixed presentation attached to an action code."""
    message: str
    severity_color: str
    icon: str


ACTION_TEMPLATES: Dict[ActionCode, ActionTemplate] = {
    ActionCode.OFFER_COUPON: ActionTemplate(
        message="We're sorry about your experience. Here is a 20% discount on your next order.",
        severity_color="#dc3545",
        icon="fa-ticket-alt",
    ),
    ActionCode.REQUEST_FEEDBACK: ActionTemplate(
        message="Thanks for your review! Tell us what would make it a five-star experience.",
        severity_color="#ffc107",
        icon="fa-comment-dots",
    ),
    ActionCode.ASK_REFERRAL: ActionTemplate(
        message="Glad you love it! Share your referral link and you both get a reward.",
        severity_color="#28a745",
        icon="fa-share-alt",
    ),
}

DEFAULT_THRESHOLDS = ActionThresholds()
