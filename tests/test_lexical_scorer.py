"""
Tests for the lexical sentiment scorer.

Covers:
- Token contributions: positive / negative / neutral hits, negation, intensifiers
- Post-token adjustments: '!!', '?', contrast markers
- Decision rule: neutral wins on close scores
- Confidence mapping and clamping
- Edge cases: empty text, non-string input, zero totals

Usage:
    pytest tests/test_lexical_scorer.py -v
"""

import json

import pytest

from src.sentiment.lexicon import DEFAULT_LEXICON, Lexicon, clean_token
from src.sentiment.lexical_scorer import LexicalSentimentScorer
from src.sentiment.scorer_config import ScorerWeights
from src.sentiment.sentiment_models import (
    NEUTRAL_DEFAULT,
    InvalidArgumentError,
    SentimentLabel,
)
from src.data.review_source import SAMPLE_REVIEWS


# ============================================================================
# SCENARIOS
# ============================================================================

class TestScenarios:
    """Reference sentences and their expected labels."""

    def setup_method(self):
        self.scorer = LexicalSentimentScorer()

    def test_intensified_positive(self):
        """'absolutely' doubles 'amazing'; a single '!' gives no bonus."""
        breakdown = self.scorer.explain("This product is absolutely amazing!")
        assert breakdown.classification.label == SentimentLabel.POSITIVE
        assert breakdown.positive_score == 6.0
        assert breakdown.negative_score == 0.0
        assert breakdown.exclamation_bonus_applied is False
        # 4 non-matching tokens at 0.1 each on top of the 1.0 baseline
        assert breakdown.neutral_score == pytest.approx(1.4)
        assert breakdown.classification.confidence == pytest.approx(0.6 + 6 / 7.4 * 0.3)

    def test_negation_flips_positive(self):
        """'not good' contributes -2 and is NEGATIVE."""
        breakdown = self.scorer.explain("not good")
        assert breakdown.classification.label == SentimentLabel.NEGATIVE
        assert breakdown.positive_score == 0.0
        assert breakdown.negative_score == 2.0
        assert breakdown.hits[0].negated is True

    def test_empty_text_is_neutral(self):
        result = self.scorer.score("")
        assert result.label == SentimentLabel.NEUTRAL
        assert result.confidence == 0.5
        assert result == NEUTRAL_DEFAULT

    def test_whitespace_only_is_neutral(self):
        result = self.scorer.score("   \n\t ")
        assert result.label == SentimentLabel.NEUTRAL
        assert result.confidence == 0.5

    def test_contrast_with_close_scores_is_neutral(self):
        """'good' and 'poor' cancel out and 'but' adds neutral weight."""
        breakdown = self.scorer.explain("It was good but the battery life is poor")
        assert breakdown.classification.label == SentimentLabel.NEUTRAL
        assert breakdown.positive_score == 3.0
        assert breakdown.negative_score == 3.0
        assert breakdown.contrast_bonus_applied is True

    @pytest.mark.parametrize("text,expected", [
        ("Terrible quality, broke after just two days of use.", SentimentLabel.NEGATIVE),
        ("Excellent value, highly recommended to everyone.", SentimentLabel.POSITIVE),
        ("Very disappointed, doesn't work as advertised.", SentimentLabel.NEGATIVE),
        ("Fantastic! The best purchase I've made this year.", SentimentLabel.POSITIVE),
        ("Poor customer service and product quality.", SentimentLabel.NEGATIVE),
        ("It's okay for the price but nothing special.", SentimentLabel.NEUTRAL),
        ("Good product with some minor issues.", SentimentLabel.NEUTRAL),
        ("Horrible experience, would never buy again.", SentimentLabel.NEGATIVE),
        ("Perfect for my needs, works flawlessly.", SentimentLabel.POSITIVE),
    ])
    def test_sample_reviews(self, text, expected):
        assert self.scorer.score(text).label == expected


# ============================================================================
# TOKEN CONTRIBUTIONS
# ============================================================================

class TestTokenContributions:

    def setup_method(self):
        self.scorer = LexicalSentimentScorer()

    def test_negated_negative_becomes_positive(self):
        """'not bad' contributes +2 to the positive total."""
        breakdown = self.scorer.explain("not bad")
        assert breakdown.positive_score == 2.0
        assert breakdown.negative_score == 0.0
        assert breakdown.classification.label == SentimentLabel.POSITIVE

    def test_intensified_negative(self):
        breakdown = self.scorer.explain("extremely disappointing")
        assert breakdown.negative_score == 6.0
        assert breakdown.hits[0].intensified is True
        assert breakdown.classification.label == SentimentLabel.NEGATIVE

    def test_contraction_negation(self):
        """Apostrophes are stripped before lookup, so "isn't" negates."""
        breakdown = self.scorer.explain("isn't good")
        assert breakdown.negative_score == 2.0
        assert breakdown.classification.label == SentimentLabel.NEGATIVE

    def test_punctuation_stripped_before_lookup(self):
        breakdown = self.scorer.explain("Excellent, value")
        assert breakdown.positive_score == 3.0

    def test_neutral_hit_adds_to_neutral_total(self):
        """A neutral word adds 0.5 to neutral and is never intensified."""
        breakdown = self.scorer.explain("very okay")
        # 'very' does not match (0.1), 'okay' is a neutral hit (0.5)
        assert breakdown.neutral_score == pytest.approx(1.6)
        assert breakdown.positive_score == 0.0
        assert breakdown.hits[0].intensified is False
        assert breakdown.classification.label == SentimentLabel.NEUTRAL

    def test_neutral_confidence(self):
        breakdown = self.scorer.explain("okay")
        assert breakdown.neutral_score == pytest.approx(1.5)
        # neutral / total = 1.0 -> 0.5 + 0.3
        assert breakdown.classification.confidence == pytest.approx(0.8)

    def test_neutral_hit_mixed_with_negation_and_contrast(self):
        """'okay' stays neutral alongside a negated positive and 'but'."""
        breakdown = self.scorer.explain("okay but not good")
        # baseline 1.0 + okay 0.5 + but 0.1 + not 0.1 + contrast 1.0
        assert breakdown.neutral_score == pytest.approx(2.7)
        assert breakdown.positive_score == 0.0
        assert breakdown.negative_score == 2.0
        assert [hit.kind for hit in breakdown.hits] == ["neutral", "positive"]
        assert breakdown.classification.label == SentimentLabel.NEUTRAL
        assert breakdown.classification.confidence == pytest.approx(0.5 + 2.7 / 4.7 * 0.3)

    def test_neutral_hits_never_feed_positive_total(self):
        """Three 'okay' hits leave 'terrible' a clear NEGATIVE."""
        breakdown = self.scorer.explain("okay okay okay terrible")
        assert breakdown.positive_score == 0.0
        assert breakdown.neutral_score == pytest.approx(2.5)
        assert breakdown.negative_score == 3.0
        assert breakdown.classification.label == SentimentLabel.NEGATIVE

    def test_neutral_hit_worth_half_not_tenth(self):
        """Four neutral hits (1.0 + 2.0) tie 'bad' and neutral wins."""
        breakdown = self.scorer.explain("fine fine fine fine bad")
        assert breakdown.neutral_score == pytest.approx(3.0)
        assert breakdown.negative_score == 3.0
        assert breakdown.classification.label == SentimentLabel.NEUTRAL

    def test_positive_lookup_wins_over_negative(self):
        lexicon = Lexicon(
            positive=["sick"], negative=["sick"], neutral=[], negation=[], intensifier=[],
        )
        scorer = LexicalSentimentScorer(lexicon=lexicon)
        assert scorer.explain("sick").positive_score == 3.0

    def test_only_previous_token_modifies(self):
        """Negation two tokens back has no effect."""
        breakdown = self.scorer.explain("not really good")
        # 'really' intensifies 'good'; 'not' is too far away
        assert breakdown.positive_score == 6.0
        assert breakdown.negative_score == 0.0


# ============================================================================
# POST-TOKEN ADJUSTMENTS
# ============================================================================

class TestAdjustments:

    def setup_method(self):
        self.scorer = LexicalSentimentScorer()

    def test_double_exclamation_boosts_leader(self):
        breakdown = self.scorer.explain("great!!")
        assert breakdown.positive_score == 5.0
        assert breakdown.exclamation_bonus_applied is True

    def test_double_exclamation_boosts_negative_leader(self):
        breakdown = self.scorer.explain("awful!!!")
        assert breakdown.negative_score == 5.0
        assert breakdown.positive_score == 0.0

    def test_exclamation_bonus_applied_once(self):
        breakdown = self.scorer.explain("great! great! great!")
        assert breakdown.positive_score == 11.0

    def test_single_exclamation_no_bonus(self):
        assert self.scorer.explain("great!").positive_score == 3.0

    def test_exclamation_tie_gets_no_bonus(self):
        breakdown = self.scorer.explain("good bad!!")
        assert breakdown.positive_score == 3.0
        assert breakdown.negative_score == 3.0
        assert breakdown.exclamation_bonus_applied is False

    def test_question_mark_adds_neutral(self):
        breakdown = self.scorer.explain("good?")
        assert breakdown.neutral_score == pytest.approx(2.0)
        assert breakdown.question_bonus_applied is True
        assert breakdown.classification.label == SentimentLabel.POSITIVE

    def test_question_bonus_applied_once(self):
        breakdown = self.scorer.explain("good??? really???")
        # baseline + 'really' no-hit + one question bonus
        assert breakdown.neutral_score == pytest.approx(2.1)

    @pytest.mark.parametrize("marker", ["but", "However", "ALTHOUGH"])
    def test_contrast_markers_case_insensitive(self, marker):
        breakdown = self.scorer.explain(f"{marker} fine")
        assert breakdown.contrast_bonus_applied is True

    def test_contrast_is_substring_match(self):
        """'button' contains 'but' and counts as a contrast marker."""
        breakdown = self.scorer.explain("the button works")
        assert breakdown.contrast_bonus_applied is True
        assert breakdown.neutral_score == pytest.approx(2.3)


# ============================================================================
# DECISION RULE & CONFIDENCE
# ============================================================================

class TestDecisionAndConfidence:

    def setup_method(self):
        self.scorer = LexicalSentimentScorer()

    def test_close_scores_force_neutral(self):
        """positive=3, negative=2: positive leads but the gap is below 2."""
        breakdown = self.scorer.explain("good not good")
        assert breakdown.positive_score == 3.0
        assert breakdown.negative_score == 2.0
        assert breakdown.classification.label == SentimentLabel.NEUTRAL

    def test_gap_of_exactly_two_is_not_close(self):
        breakdown = self.scorer.explain("not bad")
        assert breakdown.classification.label == SentimentLabel.POSITIVE

    def test_neutral_max_wins(self):
        assert self.scorer.score("the box arrived on tuesday").label == SentimentLabel.NEUTRAL

    def test_confidence_within_bounds(self):
        texts = SAMPLE_REVIEWS + [
            "", "?", "!!!", "amazing " * 50, "awful " * 50,
            "not not not", "but however although", "okay fine decent",
        ]
        for text in texts:
            confidence = self.scorer.score(text).confidence
            assert 0.5 <= confidence <= 0.95, text

    def test_confidence_clamped_to_max(self):
        weights = ScorerWeights(confidence_span=1.0)
        scorer = LexicalSentimentScorer(weights=weights)
        assert scorer.score("amazing").confidence == 0.95

    def test_zero_total_does_not_divide_by_zero(self):
        weights = ScorerWeights(neutral_baseline=0.0, no_hit_neutral=0.0)
        scorer = LexicalSentimentScorer(weights=weights)
        result = scorer.score("zzz")
        assert result.label == SentimentLabel.NEUTRAL
        assert result.confidence == 0.5

    def test_deterministic(self):
        text = "Very disappointed, doesn't work as advertised!!"
        assert self.scorer.score(text) == self.scorer.score(text)
        assert LexicalSentimentScorer().score(text) == self.scorer.score(text)

    def test_source_tag(self):
        assert self.scorer.score("good").source == "lexical"

    def test_classify_alias(self):
        assert self.scorer.classify("not good") == self.scorer.score("not good")


# ============================================================================
# INPUT VALIDATION
# ============================================================================

class TestInputValidation:

    @pytest.mark.parametrize("value", [None, 42, 3.5, b"good", ["good"]])
    def test_non_string_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            LexicalSentimentScorer().score(value)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            LexicalSentimentScorer().score(None)


# ============================================================================
# LEXICON
# ============================================================================

class TestLexicon:

    def test_clean_token(self):
        assert clean_token("Doesn't!") == "doesnt"
        assert clean_token("...") == ""

    def test_default_entries_are_cleaned(self):
        assert "doesnt" in DEFAULT_LEXICON.negation
        assert "doesn't" not in DEFAULT_LEXICON.negation

    def test_default_lexicon_is_immutable(self):
        assert isinstance(DEFAULT_LEXICON.positive, frozenset)
        with pytest.raises(AttributeError):
            DEFAULT_LEXICON.positive = frozenset()

    def test_custom_lexicon(self):
        lexicon = Lexicon(
            positive=["rad"], negative=["meh"], neutral=[], negation=["nah"], intensifier=["mega"],
        )
        scorer = LexicalSentimentScorer(lexicon=lexicon)
        assert scorer.score("mega rad").label == SentimentLabel.POSITIVE
        assert scorer.score("nah rad").label == SentimentLabel.NEGATIVE
        assert scorer.score("good").label == SentimentLabel.NEUTRAL

    def test_string_word_list_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Lexicon(positive="good", negative=[], neutral=[], negation=[], intensifier=[])

    def test_from_json(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps({
            "positive": ["Stellar"],
            "negative": ["dud"],
            "neutral": [],
            "negation": ["not"],
            "intensifier": ["so"],
        }))
        lexicon = Lexicon.from_json(path)
        assert lexicon.positive == frozenset({"stellar"})
        assert LexicalSentimentScorer(lexicon=lexicon).score("so stellar").label == SentimentLabel.POSITIVE

    def test_from_json_missing_key(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps({"positive": ["good"]}))
        with pytest.raises(InvalidArgumentError):
            Lexicon.from_json(path)

    def test_from_json_not_an_object(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text("[]")
        with pytest.raises(InvalidArgumentError):
            Lexicon.from_json(path)


class TestExplanation:

    def test_explanation_lists_hits(self):
        text = LexicalSentimentScorer().explain("not good!!").get_explanation()
        assert "Label: NEGATIVE" in text
        assert "good: positive -2.0 [negated]" in text
        assert "exclamation bonus applied" in text

    def test_to_dict(self):
        data = LexicalSentimentScorer().explain("absolutely amazing").to_dict()
        assert data["classification"]["label"] == "POSITIVE"
        assert data["hits"][0]["intensified"] is True
        assert data["token_count"] == 2
