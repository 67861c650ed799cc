"""
Review Sentiment FastAPI Application
====================================

REST API around the review analyzer.

Endpoints:
    GET  /api/health              - Health check
    POST /api/sentiment/analyze   - Analyze a review
    GET  /api/sentiment/random    - Analyze a random dataset review
    POST /api/sentiment/explain   - Lexical score breakdown

Usage:
    uvicorn src.api.main:app --reload --port 8000

    Or with CLI:
    python -m src.api.main
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import os

from ..data.config import get_settings
from ..data.review_source import ReviewSource
from ..orchestrator.analyzer import ReviewAnalyzer
from ..orchestrator.logging_config import setup_logging_from_config
from ..sentiment.lexical_scorer import LexicalSentimentScorer
from .models import HealthResponse
from .sentiment_routes import router as sentiment_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the analyzer and load reviews once per process."""
    settings = get_settings()
    logger.info("Starting review sentiment API...")

    analyzer = ReviewAnalyzer.from_settings(settings)
    if isinstance(analyzer.classifier, LexicalSentimentScorer):
        lexical = analyzer.classifier
    else:
        lexical = analyzer.fallback_scorer or LexicalSentimentScorer()

    source = ReviewSource(settings.reviews.location, settings.reviews.text_column)
    source.load_or_fallback()

    app.state.settings = settings
    app.state.analyzer = analyzer
    app.state.lexical_scorer = lexical
    app.state.review_source = source

    logger.info("Services initialized")

    yield

    logger.info("Shutting down review sentiment API...")


app = FastAPI(
    title="Review Sentiment API",
    description="Review sentiment classification and business action resolution",
    version="1.0.0",
    lifespan=lifespan,
)

_default_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_extra_origins = os.getenv("CORS_ORIGINS", "")
if _extra_origins:
    _default_origins.extend([o.strip() for o in _extra_origins.split(",") if o.strip()])

app.add_middleware(
    CORSMiddleware,
    allow_origins=_default_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(sentiment_router)


@app.get("/api/health", response_model=HealthResponse)
def health_check(request: Request):
    """Report backend wiring and dataset state."""
    settings = request.app.state.settings
    analyzer: ReviewAnalyzer = request.app.state.analyzer
    source: ReviewSource = request.app.state.review_source

    return HealthResponse(
        status="healthy",
        backend=analyzer.backend_name,
        fallback_enabled=analyzer.fallback_scorer is not None,
        audit_enabled=bool(analyzer.audit_logger and analyzer.audit_logger.is_configured()),
        reviews_loaded=len(source.reviews),
        using_sample_reviews=source.using_samples,
        version=settings.app_version,
        app_name=settings.app_name,
        environment=settings.environment,
    )


if __name__ == "__main__":
    import uvicorn

    setup_logging_from_config(get_settings().logging)
    uvicorn.run(
        "src.api.main:app",
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "8000")),
    )
