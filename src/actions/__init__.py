"""
Business Action Resolution
==========================

Turns a sentiment Classification into a customer-facing action.

Usage:
    from src.actions import ActionResolver

    decision = ActionResolver().resolve(classification)
    print(decision.action_code, decision.message)
"""

from .action_config import (
    ActionCode,
    ActionThresholds,
    ActionTemplate,
    ACTION_TEMPLATES,
    DEFAULT_THRESHOLDS,
)
from .action_resolver import ActionResolver, Decision, normalize_score

__all__ = [
    "ActionCode",
    "ActionThresholds",
    "ActionTemplate",
    "ACTION_TEMPLATES",
    "DEFAULT_THRESHOLDS",
    "ActionResolver",
    "Decision",
    "normalize_score",
]
