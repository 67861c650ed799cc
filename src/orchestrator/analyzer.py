"""
Review Analyzer
===============

Runs one review through the full chain:

    text -> classifier -> Classification -> ActionResolver -> Decision -> audit sink

The classifier is either the lexical scorer or the Hugging Face client.
When the remote classifier fails and a fallback scorer is configured, the
lexical scorer answers instead and the result is flagged used_fallback.

Usage:
    analyzer = ReviewAnalyzer.from_settings()
    result = analyzer.analyze("Terrible quality, broke after two days.")
    print(result.decision.action_code)
"""

import logging
import random
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..actions.action_resolver import ActionResolver, Decision
from ..data.config import Settings, get_settings
from ..data.review_source import ReviewSource
from ..notifications.sheets_logger import AuditRecord, SheetsAuditLogger
from ..sentiment.lexical_scorer import LexicalSentimentScorer
from ..sentiment.lexicon import DEFAULT_LEXICON, Lexicon
from ..sentiment.remote_classifier import (
    HuggingFaceClassifier,
    InferenceAPIError,
)
from ..sentiment.sentiment_models import Classification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Classification and decision for one review."""
    text: str
    classification: Classification
    decision: Decision
    analyzed_at: datetime
    used_fallback: bool = False
    duration_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "classification": self.classification.to_dict(),
            "decision": self.decision.to_dict(),
            "analyzed_at": self.analyzed_at.isoformat(),
            "used_fallback": self.used_fallback,
            "duration_seconds": round(self.duration_seconds, 4),
        }


class ReviewAnalyzer:
    """Classifier + resolver + optional audit sink."""

    def __init__(
        self,
        classifier=None,
        resolver: Optional[ActionResolver] = None,
        audit_logger: Optional[SheetsAuditLogger] = None,
        fallback_scorer: Optional[LexicalSentimentScorer] = None,
    ):
        """
        Args:
            classifier: Object with classify(text) -> Classification
                (default: LexicalSentimentScorer)
            resolver: Action resolver (default thresholds if omitted)
            audit_logger: Optional audit sink
            fallback_scorer: Used when the classifier raises InferenceAPIError
        """
        self.classifier = classifier or LexicalSentimentScorer()
        self.resolver = resolver or ActionResolver()
        self.audit_logger = audit_logger
        self.fallback_scorer = fallback_scorer

    @property
    def backend_name(self) -> str:
        if isinstance(self.classifier, HuggingFaceClassifier):
            return "remote"
        return "lexical"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ReviewAnalyzer":
        """Wire the analyzer from environment configuration."""
        settings = settings or get_settings()

        lexicon: Lexicon = DEFAULT_LEXICON
        if settings.classifier.lexicon_path:
            lexicon = Lexicon.from_json(settings.classifier.lexicon_path)
        lexical = LexicalSentimentScorer(lexicon=lexicon)

        if settings.classifier.backend == "remote":
            hf = settings.huggingface
            classifier = HuggingFaceClassifier(
                api_token=hf.api_token,
                model_url=hf.model_url,
                timeout=hf.request_timeout,
            )
            fallback = lexical if settings.classifier.fallback_to_lexical else None
        else:
            classifier = lexical
            fallback = None

        audit = SheetsAuditLogger(
            webhook_url=settings.audit.webhook_url,
            enabled=settings.audit.enabled,
        )

        logger.info(
            "Analyzer configured: backend=%s fallback=%s audit=%s",
            settings.classifier.backend, fallback is not None, audit.is_configured(),
        )
        return cls(
            classifier=classifier,
            audit_logger=audit,
            fallback_scorer=fallback,
        )

    def _classify(self, text: str):
        try:
            return self.classifier.classify(text), False
        except InferenceAPIError as e:
            if self.fallback_scorer is None:
                raise
            logger.warning(f"Remote classification failed ({e}), using lexical fallback")
            return self.fallback_scorer.score(text), True

    def analyze(self, text: str) -> AnalysisResult:
        """
        Classify a review and resolve its business action.

        Raises:
            InvalidArgumentError: text is not a string
            InferenceAPIError: remote classifier failed and no fallback is set
        """
        start = time.monotonic()
        classification, used_fallback = self._classify(text)
        decision = self.resolver.resolve(classification)
        duration = time.monotonic() - start

        result = AnalysisResult(
            text=text,
            classification=classification,
            decision=decision,
            analyzed_at=datetime.now(timezone.utc),
            used_fallback=used_fallback,
            duration_seconds=duration,
        )

        logger.info(
            "Review analyzed: %s -> %s",
            classification.label.value, decision.action_code.value,
            extra={
                "label": classification.label.value,
                "confidence": classification.confidence,
                "action_code": decision.action_code.value,
                "source": classification.source,
                "duration": round(duration, 4),
            },
        )

        if self.audit_logger is not None:
            self.audit_logger.log(
                AuditRecord.build(text, classification, decision, timestamp=result.analyzed_at)
            )
        return result

    def analyze_random(
        self,
        source: ReviewSource,
        rng: Optional[random.Random] = None,
    ) -> AnalysisResult:
        """Pick a random review from the source and analyze it."""
        if not source.reviews:
            source.load_or_fallback()
        return self.analyze(source.pick_random(rng))
