"""
API Models
==========

Pydantic models for API request/response serialization.
"""

from pydantic import BaseModel, Field, StrictStr
from typing import List, Optional

from ..orchestrator.analyzer import AnalysisResult
from ..sentiment.lexical_scorer import ScoreBreakdown


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    backend: str
    fallback_enabled: bool
    audit_enabled: bool
    reviews_loaded: int
    using_sample_reviews: bool
    version: str
    app_name: str
    environment: str


class AnalyzeRequest(BaseModel):
    """Review text to analyze."""
    text: StrictStr = Field(max_length=10_000)


class ClassificationModel(BaseModel):
    label: str
    confidence: float
    confidence_percent: str
    source: Optional[str] = None
    state: str
    icon: str


class DecisionModel(BaseModel):
    action_code: str
    message: str
    severity_color: str
    icon: str
    normalized_score: float


class AnalysisResponse(BaseModel):
    """Classification + decision for one review."""
    text: str
    classification: ClassificationModel
    decision: DecisionModel
    used_fallback: bool
    analyzed_at: str

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResponse":
        c = result.classification
        d = result.decision
        return cls(
            text=result.text,
            classification=ClassificationModel(
                label=c.label.value,
                confidence=c.confidence,
                confidence_percent=c.confidence_percent,
                source=c.source,
                state=c.label.css_state,
                icon=c.label.icon,
            ),
            decision=DecisionModel(
                action_code=d.action_code.value,
                message=d.message,
                severity_color=d.severity_color,
                icon=d.icon,
                normalized_score=d.normalized_score,
            ),
            used_fallback=result.used_fallback,
            analyzed_at=result.analyzed_at.isoformat(),
        )


class TokenHitModel(BaseModel):
    token: str
    kind: str
    contribution: float
    negated: bool
    intensified: bool


class ExplainResponse(BaseModel):
    """Lexical scorer trace."""
    label: str
    confidence: float
    positive_score: float
    negative_score: float
    neutral_score: float
    token_count: int
    hits: List[TokenHitModel]
    exclamation_bonus_applied: bool
    question_bonus_applied: bool
    contrast_bonus_applied: bool

    @classmethod
    def from_breakdown(cls, breakdown: ScoreBreakdown) -> "ExplainResponse":
        data = breakdown.to_dict()
        classification = data.pop("classification")
        return cls(
            label=classification["label"],
            confidence=classification["confidence"],
            **data,
        )
