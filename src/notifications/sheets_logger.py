"""
Spreadsheet Audit Logger
========================

Posts one audit record per analyzed review to a spreadsheet webhook
(for example a Google Apps Script web app appending rows to a sheet).

Configuration:
    AUDIT_WEBHOOK_URL: Webhook URL (from .env)
    ENABLE_AUDIT_LOG: "true" to enable audit logging (from .env)

The sink is optional: delivery failures are logged and reported through
the return value, never raised to the analyzer.
"""

import os
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import requests

from ..actions.action_resolver import Decision
from ..sentiment.sentiment_models import Classification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditRecord:
    """One analyzed review as written to the sheet."""
    timestamp: str
    review: str
    label: str
    confidence: float
    action_code: str
    source: Optional[str] = None

    @classmethod
    def build(
        cls,
        review: str,
        classification: Classification,
        decision: Decision,
        timestamp: Optional[datetime] = None,
    ) -> "AuditRecord":
        ts = timestamp or datetime.now(timezone.utc)
        return cls(
            timestamp=ts.isoformat(),
            review=review,
            label=classification.label.value,
            confidence=round(classification.confidence, 4),
            action_code=decision.action_code.value,
            source=classification.source,
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "ts_iso": self.timestamp,
            "review": self.review,
            "sentiment": self.label,
            "confidence": self.confidence,
            "action_taken": self.action_code,
            "classifier": self.source or "",
        }


class SheetsAuditLogger:
    """
    Sends audit records to a spreadsheet webhook.

    Stateless: each record is one JSON POST.
    """

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        enabled: Optional[bool] = None,
        timeout: float = 10.0,
    ):
        """
        Args:
            webhook_url: Webhook URL (default: from AUDIT_WEBHOOK_URL env var)
            enabled: Enable logging (default: from ENABLE_AUDIT_LOG env var)
        """
        self.webhook_url = webhook_url or os.getenv("AUDIT_WEBHOOK_URL", "")
        enabled_env = os.getenv("ENABLE_AUDIT_LOG", "false").lower()
        self.enabled = enabled if enabled is not None else (enabled_env == "true")
        self.timeout = timeout

        if self.enabled and not self.webhook_url:
            logger.warning("Audit logging enabled but AUDIT_WEBHOOK_URL not set")
            self.enabled = False

    def is_configured(self) -> bool:
        """Check if the sink is properly configured."""
        return bool(self.enabled and self.webhook_url)

    def log(self, record: AuditRecord) -> bool:
        """
        Post a record.

        Returns:
            True if the webhook accepted the record
        """
        if not self.is_configured():
            logger.debug("Audit logging disabled or not configured")
            return False

        try:
            response = requests.post(
                self.webhook_url,
                json=record.to_payload(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            logger.info(f"Audit record sent: {record.label} -> {record.action_code}")
            return True

        except requests.RequestException as e:
            logger.error(f"Failed to send audit record: {e}")
            return False
