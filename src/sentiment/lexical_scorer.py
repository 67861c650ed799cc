"""
Lexical Sentiment Scorer (Deterministic)
========================================

Turns raw review text into a (label, confidence) Classification using a
fixed lexicon plus negation / intensifier context. No model, no I/O:
the same text always produces the same result.

Usage:
    scorer = LexicalSentimentScorer()
    result = scorer.score("This product is absolutely amazing!")
    print(result.label, result.confidence)

    breakdown = scorer.explain("not good")
    print(breakdown.get_explanation())
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .lexicon import DEFAULT_LEXICON, Lexicon, clean_token
from .scorer_config import DEFAULT_WEIGHTS, ScorerWeights
from .sentiment_models import (
    Classification,
    InvalidArgumentError,
    NEUTRAL_DEFAULT,
    SentimentLabel,
)

logger = logging.getLogger(__name__)

SOURCE_NAME = "lexical"


@dataclass(frozen=True)
class TokenHit:
    """A token that matched the lexicon, with its signed contribution."""
    token: str
    kind: str           # positive / negative / neutral
    contribution: float
    negated: bool = False
    intensified: bool = False


@dataclass(frozen=True)
class ScoreBreakdown:
    """Full trace of one scoring call."""
    positive_score: float
    negative_score: float
    neutral_score: float
    token_count: int
    classification: Classification
    hits: Tuple[TokenHit, ...] = field(default_factory=tuple)
    exclamation_bonus_applied: bool = False
    question_bonus_applied: bool = False
    contrast_bonus_applied: bool = False

    def get_explanation(self) -> str:
        lines = [
            f"Label: {self.classification.label.value} "
            f"({self.classification.confidence_percent} confidence)",
            f"Scores: positive={self.positive_score:.2f} "
            f"negative={self.negative_score:.2f} neutral={self.neutral_score:.2f}",
            f"Tokens: {self.token_count}",
        ]
        for hit in self.hits:
            modifiers = []
            if hit.negated:
                modifiers.append("negated")
            if hit.intensified:
                modifiers.append("intensified")
            suffix = f" [{', '.join(modifiers)}]" if modifiers else ""
            lines.append(f"  {hit.token}: {hit.kind} {hit.contribution:+.1f}{suffix}")

        if self.exclamation_bonus_applied:
            lines.append("  exclamation bonus applied")
        if self.question_bonus_applied:
            lines.append("  question bonus applied")
        if self.contrast_bonus_applied:
            lines.append("  contrast bonus applied")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "classification": self.classification.to_dict(),
            "positive_score": self.positive_score,
            "negative_score": self.negative_score,
            "neutral_score": self.neutral_score,
            "token_count": self.token_count,
            "hits": [
                {
                    "token": h.token,
                    "kind": h.kind,
                    "contribution": h.contribution,
                    "negated": h.negated,
                    "intensified": h.intensified,
                }
                for h in self.hits
            ],
            "exclamation_bonus_applied": self.exclamation_bonus_applied,
            "question_bonus_applied": self.question_bonus_applied,
            "contrast_bonus_applied": self.contrast_bonus_applied,
        }


class LexicalSentimentScorer:
    """
    Keyword / negation / intensifier sentiment heuristic.

    The scorer holds only read-only configuration, so a single instance
    can be shared between threads.
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        weights: Optional[ScorerWeights] = None,
    ):
        self.lexicon = lexicon or DEFAULT_LEXICON
        self.weights = weights or DEFAULT_WEIGHTS

    def score(self, text: str) -> Classification:
        """Classify text. Empty or whitespace-only text is NEUTRAL / 0.5."""
        return self.explain(text).classification

    def classify(self, text: str) -> Classification:
        """Alias of score() so the scorer can stand in for a remote classifier."""
        return self.score(text)

    def explain(self, text: str) -> ScoreBreakdown:
        """Score text and return every intermediate total."""
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"Review text must be a string, got {type(text).__name__}"
            )

        w = self.weights
        if not text.strip():
            return ScoreBreakdown(
                positive_score=0.0,
                negative_score=0.0,
                neutral_score=w.neutral_baseline,
                token_count=0,
                classification=NEUTRAL_DEFAULT,
            )

        tokens = [clean_token(t) for t in text.lower().split()]

        positive = 0.0
        negative = 0.0
        neutral = w.neutral_baseline
        hits: List[TokenHit] = []

        for i, token in enumerate(tokens):
            prev = tokens[i - 1] if i > 0 else None
            hit = self._match_token(token, prev)

            if hit is None:
                neutral += w.no_hit_neutral
            elif hit.kind == "neutral":
                neutral += hit.contribution
                hits.append(hit)
            else:
                if hit.contribution > 0:
                    positive += hit.contribution
                elif hit.contribution < 0:
                    negative += abs(hit.contribution)
                else:
                    neutral += w.no_hit_neutral
                hits.append(hit)

        exclamation = text.count("!") >= w.exclamation_min_count
        if exclamation:
            # equal totals get no bonus
            if positive > negative:
                positive += w.exclamation_bonus
            if negative > positive:
                negative += w.exclamation_bonus

        question = "?" in text
        if question:
            neutral += w.question_bonus

        lowered = text.lower()
        contrast = any(marker in lowered for marker in w.contrast_markers)
        if contrast:
            neutral += w.contrast_bonus

        label = self._decide(positive, negative, neutral)
        confidence = self._confidence(label, positive, negative, neutral)

        breakdown = ScoreBreakdown(
            positive_score=positive,
            negative_score=negative,
            neutral_score=neutral,
            token_count=len(tokens),
            classification=Classification(label, confidence, source=SOURCE_NAME),
            hits=tuple(hits),
            exclamation_bonus_applied=exclamation and positive != negative,
            question_bonus_applied=question,
            contrast_bonus_applied=contrast,
        )
        logger.debug(
            "Scored %d tokens: pos=%.2f neg=%.2f neu=%.2f -> %s",
            len(tokens), positive, negative, neutral, label.value,
        )
        return breakdown

    def _match_token(self, token: str, prev: Optional[str]) -> Optional[TokenHit]:
        """Look the token up in positive, negative, then neutral order."""
        lex = self.lexicon
        w = self.weights

        negated = prev is not None and prev in lex.negation
        intensified = prev is not None and prev in lex.intensifier
        multiplier = w.intensity_multiplier if intensified else 1.0

        if token in lex.positive:
            base = w.negated_positive_hit if negated else w.positive_hit
            return TokenHit(token, "positive", base * multiplier, negated, intensified)
        if token in lex.negative:
            base = w.negated_negative_hit if negated else w.negative_hit
            return TokenHit(token, "negative", base * multiplier, negated, intensified)
        if token in lex.neutral:
            return TokenHit(token, "neutral", w.neutral_hit)
        return None

    def _decide(self, positive: float, negative: float, neutral: float) -> SentimentLabel:
        max_score = max(positive, negative, neutral)
        if max_score == neutral or abs(positive - negative) < self.weights.close_score_margin:
            return SentimentLabel.NEUTRAL
        if positive == max_score:
            return SentimentLabel.POSITIVE
        return SentimentLabel.NEGATIVE

    def _confidence(
        self,
        label: SentimentLabel,
        positive: float,
        negative: float,
        neutral: float,
    ) -> float:
        w = self.weights
        total = positive + negative + neutral
        if total == 0:
            total = 1.0

        if label == SentimentLabel.NEUTRAL:
            value = w.neutral_confidence_base + (neutral / total) * w.confidence_span
        elif label == SentimentLabel.POSITIVE:
            value = w.polar_confidence_base + (positive / total) * w.confidence_span
        else:
            value = w.polar_confidence_base + (negative / total) * w.confidence_span

        return max(w.min_confidence, min(w.max_confidence, value))
