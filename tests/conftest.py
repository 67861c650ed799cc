"""Shared fixtures: every test starts from a clean configuration environment."""

import pytest

from src.data.config import reset_settings

CONFIG_ENV_VARS = [
    "HF_API_TOKEN",
    "HF_MODEL_URL",
    "HF_REQUEST_TIMEOUT",
    "CLASSIFIER_BACKEND",
    "CLASSIFIER_FALLBACK_TO_LEXICAL",
    "LEXICON_PATH",
    "REVIEWS_SOURCE",
    "REVIEWS_TEXT_COLUMN",
    "AUDIT_WEBHOOK_URL",
    "ENABLE_AUDIT_LOG",
    "LOG_LEVEL",
    "LOG_FILE",
    "LOG_JSON",
    "ENVIRONMENT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def reviews_tsv(tmp_path):
    """Small TSV dataset with one blank row."""
    path = tmp_path / "reviews.tsv"
    path.write_text(
        "id\ttext\trating\n"
        "1\tExcellent value, highly recommended to everyone.\t5\n"
        "2\t   \t3\n"
        "3\tTerrible quality, broke after just two days of use.\t1\n"
        "4\tIt's okay for the price but nothing special.\t3\n",
        encoding="utf-8",
    )
    return path
