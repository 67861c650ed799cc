"""
Hugging Face Inference Classifier
=================================

Sends a review to a hosted text-classification model and turns the
response into a Classification.

Configuration:
    HF_API_TOKEN: Hugging Face access token (from .env, optional)
    HF_MODEL_URL: Inference endpoint (default: 3-class RoBERTa sentiment model)

Response shape:
    The endpoint answers [[{"label": "positive", "score": 0.98}, ...]] for a
    single input; some deployments drop the outer list. Both shapes are
    validated once here and anything else raises MalformedResponseError.

Label mapping:
    POSITIVE with score > 0.5 -> POSITIVE
    NEGATIVE with score > 0.5 -> NEGATIVE
    anything else             -> NEUTRAL (score kept as confidence)
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, Field, ValidationError

from .sentiment_models import Classification, InvalidArgumentError, SentimentLabel

logger = logging.getLogger(__name__)

DEFAULT_MODEL_URL = (
    "https://router.huggingface.co/hf-inference/models/"
    "j-hartmann/sentiment-roberta-large-english-3-classes"
)

SOURCE_NAME = "remote"

# A polar label needs more than this score to be trusted
POLAR_SCORE_THRESHOLD = 0.5


class InferenceAPIError(Exception):
    """Inference endpoint returned an error or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class MalformedResponseError(InferenceAPIError):
    """Inference endpoint answered with an unexpected JSON shape."""
    pass


class InferencePrediction(BaseModel):
    """One label/score pair from the endpoint."""
    label: str = Field(min_length=1)
    score: float = Field(ge=0.0, le=1.0)


def _unwrap_predictions(payload: Any) -> List[Any]:
    if not isinstance(payload, list) or not payload:
        raise MalformedResponseError(f"Expected a non-empty list, got: {str(payload)[:200]}")

    first = payload[0]
    if isinstance(first, list):
        if not first:
            raise MalformedResponseError("Inner prediction list is empty")
        return first
    if isinstance(first, dict):
        return payload
    raise MalformedResponseError(f"Unexpected prediction entry: {str(first)[:200]}")


def parse_inference_response(payload: Any) -> Classification:
    """
    Validate an inference response and map it to a Classification.

    The highest-scoring prediction wins (the endpoint already sorts by
    score, so this is its first entry).

    Raises:
        MalformedResponseError: payload is not one of the accepted shapes
    """
    raw_predictions = _unwrap_predictions(payload)

    try:
        predictions = [InferencePrediction.model_validate(p) for p in raw_predictions]
    except ValidationError as e:
        raise MalformedResponseError(f"Invalid prediction in response: {e}") from e

    best = max(predictions, key=lambda p: p.score)
    label = best.label.strip().upper()

    if label == SentimentLabel.POSITIVE.value and best.score > POLAR_SCORE_THRESHOLD:
        sentiment = SentimentLabel.POSITIVE
    elif label == SentimentLabel.NEGATIVE.value and best.score > POLAR_SCORE_THRESHOLD:
        sentiment = SentimentLabel.NEGATIVE
    else:
        sentiment = SentimentLabel.NEUTRAL

    return Classification(sentiment, best.score, source=SOURCE_NAME)


def _error_message(response: requests.Response) -> str:
    message = f"API Error: {response.status_code} {response.reason or ''}".strip()
    try:
        data = response.json()
    except ValueError:
        return message

    error = data.get("error") if isinstance(data, dict) else None
    if not error:
        return message

    message = str(error)
    if "token" in message.lower():
        message += ". Please check your API token."
    elif "loading" in message.lower():
        message += ". The model is loading, please wait a moment and try again."
    return message


class HuggingFaceClassifier:
    """
    Remote sentiment classifier backed by the Hugging Face Inference API.

    The token is passed in explicitly; nothing is read from module state.
    """

    def __init__(
        self,
        api_token: Optional[str] = None,
        model_url: str = DEFAULT_MODEL_URL,
        timeout: float = 30.0,
    ):
        self.api_token = api_token or None
        self.model_url = model_url
        self.timeout = timeout
        self._requests_made = 0

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    def classify(self, text: str) -> Classification:
        """
        Classify one review.

        Raises:
            InvalidArgumentError: text is not a string
            InferenceAPIError: transport failure or non-2xx status
            MalformedResponseError: unexpected response body
        """
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"Review text must be a string, got {type(text).__name__}"
            )

        try:
            response = requests.post(
                self.model_url,
                headers=self._headers(),
                json={"inputs": text},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise InferenceAPIError(f"Inference request failed: {e}") from e
        finally:
            self._requests_made += 1

        if not response.ok:
            message = _error_message(response)
            logger.warning("Inference API error %s: %s", response.status_code, message)
            raise InferenceAPIError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError("Inference response is not JSON") from e

        classification = parse_inference_response(payload)
        logger.debug(
            "Remote classification: %s (%.3f)",
            classification.label.value, classification.confidence,
        )
        return classification

    def get_stats(self) -> Dict[str, Any]:
        return {
            "model_url": self.model_url,
            "authenticated": bool(self.api_token),
            "requests_made": self._requests_made,
        }
