"""
Review Sentiment Engine
=======================

Classification of review text into POSITIVE / NEGATIVE / NEUTRAL.

Modules:
    sentiment_models  - Value objects (SentimentLabel, Classification)
    lexicon           - Read-only word lists (DEFAULT_LEXICON)
    scorer_config     - Scorer weights (DEFAULT_WEIGHTS)
    lexical_scorer    - Deterministic keyword / negation / intensifier scorer
    remote_classifier - Hugging Face Inference API client
"""

from .sentiment_models import (
    Classification,
    InvalidArgumentError,
    SentimentLabel,
    NEUTRAL_DEFAULT,
)
from .lexicon import Lexicon, DEFAULT_LEXICON, clean_token
from .scorer_config import ScorerWeights, DEFAULT_WEIGHTS
from .lexical_scorer import LexicalSentimentScorer, ScoreBreakdown, TokenHit
from .remote_classifier import (
    HuggingFaceClassifier,
    InferenceAPIError,
    MalformedResponseError,
    parse_inference_response,
)

__all__ = [
    "Classification",
    "InvalidArgumentError",
    "SentimentLabel",
    "NEUTRAL_DEFAULT",
    "Lexicon",
    "DEFAULT_LEXICON",
    "clean_token",
    "ScorerWeights",
    "DEFAULT_WEIGHTS",
    "LexicalSentimentScorer",
    "ScoreBreakdown",
    "TokenHit",
    "HuggingFaceClassifier",
    "InferenceAPIError",
    "MalformedResponseError",
    "parse_inference_response",
]
