"""
Sentiment Lexicon
=================

Fixed word lists driving the lexical scorer. The default lexicon is built
once at import time and shared by every scorer instance; it is never
mutated afterwards.

Entries are stored in the same cleaned form the scorer looks up
(lower-case, non-word characters stripped), so "doesn't" is held as
"doesnt".

An alternative lexicon can be loaded from a JSON file with the keys
positive, negative, neutral, negation and intensifier:

    lexicon = Lexicon.from_json("lexicon.json")
"""

import json
import logging
import re
from dataclasses import dataclass, fields
from pathlib import Path
from collections.abc import Iterable
from typing import FrozenSet, Union

from .sentiment_models import InvalidArgumentError

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^\w]", re.UNICODE)


def clean_token(token: str) -> str:
    """Lower-case a token and strip every non-word character."""
    return _NON_WORD.sub("", token.lower())


def _word_set(words: Iterable[str]) -> FrozenSet[str]:
    cleaned = (clean_token(w) for w in words)
    return frozenset(w for w in cleaned if w)


@dataclass(frozen=True)
class Lexicon:
    """Five word sets used by the scorer. Disjoint by convention only."""
    positive: FrozenSet[str]
    negative: FrozenSet[str]
    neutral: FrozenSet[str]
    negation: FrozenSet[str]
    intensifier: FrozenSet[str]

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, str) or not isinstance(value, Iterable):
                raise InvalidArgumentError(f"Lexicon '{f.name}' must be a collection of words")
            object.__setattr__(self, f.name, _word_set(value))

        overlap = self.positive & self.negative
        if overlap:
            # positive wins on lookup, so these words never score negative
            logger.warning("Lexicon words in both positive and negative sets: %s", sorted(overlap))

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "Lexicon":
        """Load a lexicon from a JSON object with one word list per set."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Lexicon file {path} must contain a JSON object")

        kwargs = {}
        for f in fields(cls):
            words = data.get(f.name)
            if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                raise InvalidArgumentError(
                    f"Lexicon file {path}: '{f.name}' must be a list of strings"
                )
            kwargs[f.name] = words

        lexicon = cls(**kwargs)
        logger.info(
            "Loaded lexicon from %s: %d positive, %d negative, %d neutral",
            path, len(lexicon.positive), len(lexicon.negative), len(lexicon.neutral),
        )
        return lexicon


# =============================================================================
# DEFAULT LEXICON - product reviews (English)
# =============================================================================

POSITIVE_WORDS = [
    "good", "great", "excellent", "amazing", "awesome", "fantastic",
    "perfect", "perfectly", "love", "loved", "loves", "best", "wonderful",
    "recommend", "recommended", "happy", "satisfied", "nice", "outstanding",
    "superb", "brilliant", "flawless", "flawlessly", "exceeded", "impressive",
    "beautiful", "reliable", "comfortable", "sturdy", "easy", "worth",
    "pleased", "enjoy", "enjoyed", "incredible", "solid", "favorite",
]

NEGATIVE_WORDS = [
    "bad", "terrible", "awful", "horrible", "poor", "poorly", "worst", "hate",
    "hated", "disappointed", "disappointing", "disappointment", "broken",
    "broke", "useless", "waste", "cheap", "defective", "faulty", "flimsy",
    "refund", "returned", "annoying", "junk", "garbage", "unreliable",
    "uncomfortable", "failed", "fails", "problem", "problems", "issue",
    "issues", "rude", "slow", "overpriced", "mess",
]

NEUTRAL_WORDS = [
    "okay", "ok", "average", "fine", "decent", "acceptable", "ordinary",
    "standard", "expected", "normal", "moderate", "fair", "mediocre",
    "alright", "adequate",
]

NEGATION_WORDS = [
    "not", "no", "never", "don't", "doesn't", "didn't", "isn't", "wasn't",
    "aren't", "weren't", "won't", "wouldn't", "can't", "cannot", "couldn't",
    "shouldn't", "hardly", "barely", "neither", "nor", "without",
]

INTENSIFIER_WORDS = [
    "very", "really", "extremely", "absolutely", "totally", "completely",
    "highly", "incredibly", "super", "truly", "so", "utterly", "most",
    "exceptionally", "remarkably",
]

DEFAULT_LEXICON = Lexicon(
    positive=POSITIVE_WORDS,
    negative=NEGATIVE_WORDS,
    neutral=NEUTRAL_WORDS,
    negation=NEGATION_WORDS,
    intensifier=INTENSIFIER_WORDS,
)
