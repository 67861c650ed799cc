"""
Orchestrator Module
===================

Wires classifier, action resolver and audit sink together.

Components:
    - ReviewAnalyzer: text -> Classification -> Decision (-> audit record)
    - setup_logging: console / JSON / rotating-file logging
    - CLI: Command-line interface

Usage:
    from src.orchestrator import ReviewAnalyzer

    analyzer = ReviewAnalyzer.from_settings()
    result = analyzer.analyze("Excellent value, highly recommended.")
"""

from .analyzer import AnalysisResult, ReviewAnalyzer
from .logging_config import JSONFormatter, setup_logging, setup_logging_from_config

__all__ = [
    "AnalysisResult",
    "ReviewAnalyzer",
    "JSONFormatter",
    "setup_logging",
    "setup_logging_from_config",
]
