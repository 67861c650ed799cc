"""
Sentiment API Routes
====================

POST /api/sentiment/analyze  - classify a review and resolve its action.
GET  /api/sentiment/random   - same, for a random review from the dataset.
POST /api/sentiment/explain  - lexical score breakdown of a review.
"""

import logging

from fastapi import APIRouter, HTTPException, Request

from ..data.review_source import ReviewSourceError
from ..sentiment.lexical_scorer import LexicalSentimentScorer
from ..sentiment.remote_classifier import InferenceAPIError
from ..sentiment.sentiment_models import InvalidArgumentError
from .models import AnalysisResponse, AnalyzeRequest, ExplainResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sentiment", tags=["Sentiment"])


def _analyze(request: Request, text: str) -> AnalysisResponse:
    analyzer = request.app.state.analyzer
    try:
        result = analyzer.analyze(text)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except InferenceAPIError as e:
        logger.error(f"Inference failed: {e}")
        raise HTTPException(status_code=502, detail=f"Analysis failed: {e.message}")
    return AnalysisResponse.from_result(result)


@router.post("/analyze", response_model=AnalysisResponse)
def analyze_review(request: Request, body: AnalyzeRequest):
    """Classify the given review text."""
    return _analyze(request, body.text)


@router.get("/random", response_model=AnalysisResponse)
def analyze_random_review(request: Request):
    """Classify a random review from the loaded dataset."""
    source = request.app.state.review_source
    try:
        text = source.pick_random()
    except ReviewSourceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return _analyze(request, text)


@router.post("/explain", response_model=ExplainResponse)
def explain_review(request: Request, body: AnalyzeRequest):
    """Return the lexical scorer's intermediate totals."""
    scorer: LexicalSentimentScorer = request.app.state.lexical_scorer
    return ExplainResponse.from_breakdown(scorer.explain(body.text))
