"""
Logging setup for the review analyzer.

Every analysis is logged with the label, confidence, chosen action and
classifier source as record extras. In JSON mode those extras become keys
of the emitted line, so a log shipper can count actions without parsing
the message text. Console output goes to stderr so that `--json` CLI
output on stdout stays machine-readable.

Usage:
    from src.orchestrator.logging_config import setup_logging_from_config

    setup_logging_from_config(get_settings().logging, verbose=args.verbose)
"""

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from typing import Optional

from ..data.config import LoggingConfig

# Record extras emitted by ReviewAnalyzer.analyze()
EXTRA_FIELDS = ("label", "confidence", "action_code", "source", "duration")

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, analysis extras included when set."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
):
    """
    Replace the root handlers with a stderr handler and, when `log_file`
    is set, a size-rotated file handler sharing the same formatter.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    formatter = JSONFormatter() if json_output else logging.Formatter(TEXT_FORMAT)
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count,
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # requests logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    root.debug("Logging ready (level=%s, json=%s, file=%s)", level, json_output, log_file)


def setup_logging_from_config(config: LoggingConfig, verbose: bool = False):
    """Apply LOG_LEVEL / LOG_JSON / LOG_FILE; `verbose` forces DEBUG."""
    setup_logging(
        level="DEBUG" if verbose else config.level,
        json_output=config.json_logs,
        log_file=config.log_file,
    )
