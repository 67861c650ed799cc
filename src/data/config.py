"""
Configuration Module
====================

Centralized configuration management using environment variables.
Supports both .env files and system environment variables.

Environment Variables:
    HF_API_TOKEN: Hugging Face access token (optional, anonymous if unset)
    HF_MODEL_URL: Inference endpoint (default: 3-class RoBERTa sentiment model)
    HF_REQUEST_TIMEOUT: Request timeout in seconds (default: 30)

    CLASSIFIER_BACKEND: "lexical" or "remote" (default: lexical)
    CLASSIFIER_FALLBACK_TO_LEXICAL: Use the lexical scorer when remote fails (default: true)
    LEXICON_PATH: Optional JSON lexicon replacing the built-in word lists

    REVIEWS_SOURCE: TSV file path or http(s) URL (default: reviews_test.tsv)
    REVIEWS_TEXT_COLUMN: Column holding the review text (default: text)

    AUDIT_WEBHOOK_URL: Spreadsheet webhook receiving audit records
    ENABLE_AUDIT_LOG: "true" to post audit records (default: false)

    LOG_LEVEL / LOG_FILE / LOG_JSON: Logging options
    ENVIRONMENT: development / production (default: development)
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from ..sentiment.remote_classifier import DEFAULT_MODEL_URL


# Load environment variables from .env file if present
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_env_float(key: str, default: float) -> float:
    """Get environment variable as float."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable '{key}' must be a float, got: {value}")


def get_env_bool(key: str, default: bool) -> bool:
    """Get environment variable as boolean."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


BACKENDS = ("lexical", "remote")


@dataclass
class HuggingFaceConfig:
    """Remote inference endpoint configuration."""

    api_token: Optional[str] = field(default_factory=lambda: get_env("HF_API_TOKEN") or None)
    model_url: str = field(default_factory=lambda: get_env("HF_MODEL_URL", DEFAULT_MODEL_URL))
    request_timeout: float = field(default_factory=lambda: get_env_float("HF_REQUEST_TIMEOUT", 30.0))

    def __post_init__(self):
        if not self.model_url:
            raise ValueError("HF_MODEL_URL cannot be empty")
        if self.request_timeout <= 0:
            raise ValueError("HF_REQUEST_TIMEOUT must be positive")


@dataclass
class ClassifierConfig:
    """Which classifier answers and what backs it up."""

    backend: str = field(default_factory=lambda: get_env("CLASSIFIER_BACKEND", "lexical").lower())
    fallback_to_lexical: bool = field(
        default_factory=lambda: get_env_bool("CLASSIFIER_FALLBACK_TO_LEXICAL", True)
    )
    lexicon_path: Optional[str] = field(default_factory=lambda: get_env("LEXICON_PATH") or None)

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ValueError(f"CLASSIFIER_BACKEND must be one of {BACKENDS}, got: {self.backend}")


@dataclass
class ReviewSourceConfig:
    """Where review texts come from."""

    location: str = field(default_factory=lambda: get_env("REVIEWS_SOURCE", "reviews_test.tsv"))
    text_column: str = field(default_factory=lambda: get_env("REVIEWS_TEXT_COLUMN", "text"))

    def __post_init__(self):
        if not self.text_column:
            raise ValueError("REVIEWS_TEXT_COLUMN cannot be empty")


@dataclass
class AuditConfig:
    """Spreadsheet audit sink."""

    webhook_url: Optional[str] = field(default_factory=lambda: get_env("AUDIT_WEBHOOK_URL") or None)
    enabled: bool = field(default_factory=lambda: get_env_bool("ENABLE_AUDIT_LOG", False))


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: get_env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: get_env("LOG_FILE"))

    # Structured logging
    json_logs: bool = field(default_factory=lambda: get_env_bool("LOG_JSON", False))


@dataclass
class Settings:
    """Main application settings container."""

    huggingface: HuggingFaceConfig = field(default_factory=HuggingFaceConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    reviews: ReviewSourceConfig = field(default_factory=ReviewSourceConfig)
    audit: AuditConfig = field(default_factory=AuditConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Application metadata
    app_name: str = "review-sentiment"
    app_version: str = "1.0.0"
    environment: str = field(default_factory=lambda: get_env("ENVIRONMENT", "development"))


def load_settings() -> Settings:
    """
    Load and validate all application settings.

    Raises:
        ValueError: If configuration is invalid
    """
    return Settings()


# Global settings instance (lazy-loaded, read-only once built)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
