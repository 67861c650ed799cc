"""
Review Sentiment CLI
====================

Command-line interface for the review analyzer.

Commands:
    analyze   - Analyze a review passed on the command line
    random    - Analyze a random review from the configured dataset
    batch     - Analyze every review in the dataset and summarize actions
    explain   - Show the lexical score breakdown for a review

Usage:
    python -m src.orchestrator.cli analyze "Not good at all"
    python -m src.orchestrator.cli random --json
    python -m src.orchestrator.cli batch --limit 100
    python -m src.orchestrator.cli explain "Very disappointed!!"
"""

import argparse
import json
import logging
import sys
from collections import Counter

from ..actions.action_config import ActionCode
from ..data.config import get_settings
from ..data.review_source import ReviewSource
from ..sentiment.lexical_scorer import LexicalSentimentScorer
from ..sentiment.lexicon import Lexicon
from .analyzer import AnalysisResult, ReviewAnalyzer
from .logging_config import setup_logging_from_config


def _print_result(result: AnalysisResult, as_json: bool):
    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    c = result.classification
    d = result.decision
    print("=" * 60)
    print(f"Review: {result.text}")
    print("-" * 60)
    print(f"Sentiment: {c.label.value} ({c.confidence_percent} confidence)")
    print(f"Action:    {d.action_code.value}")
    print(f"Message:   {d.message}")
    if result.used_fallback:
        print("Note:      remote classifier unavailable, lexical fallback used")
    print("=" * 60)


def _build_source(settings) -> ReviewSource:
    source = ReviewSource(settings.reviews.location, settings.reviews.text_column)
    source.load_or_fallback()
    return source


def cmd_analyze(args):
    """Analyze one review."""
    try:
        analyzer = ReviewAnalyzer.from_settings()
        result = analyzer.analyze(args.text)
        _print_result(result, args.json)
        return 0

    except Exception as e:
        print(f"ERROR: Analysis failed: {e}")
        logging.exception("Analysis failed")
        return 1


def cmd_random(args):
    """Analyze a random review from the dataset."""
    try:
        settings = get_settings()
        analyzer = ReviewAnalyzer.from_settings(settings)
        source = _build_source(settings)
        if source.using_samples and not args.json:
            print("Note: dataset unavailable, using sample reviews")
        result = analyzer.analyze_random(source)
        _print_result(result, args.json)
        return 0

    except Exception as e:
        print(f"ERROR: Analysis failed: {e}")
        logging.exception("Random analysis failed")
        return 1


def cmd_batch(args):
    """Analyze the whole dataset and count actions."""
    try:
        settings = get_settings()
        analyzer = ReviewAnalyzer.from_settings(settings)
        if args.no_audit:
            analyzer.audit_logger = None

        source = _build_source(settings)
        reviews = source.reviews[: args.limit] if args.limit else source.reviews

        actions = Counter()
        labels = Counter()
        fallbacks = 0
        for text in reviews:
            result = analyzer.analyze(text)
            actions[result.decision.action_code.value] += 1
            labels[result.classification.label.value] += 1
            fallbacks += int(result.used_fallback)

        summary = {
            "reviews": len(reviews),
            "source": "samples" if source.using_samples else source.location,
            "labels": dict(labels),
            "actions": {code.value: actions.get(code.value, 0) for code in ActionCode},
            "fallbacks": fallbacks,
        }

        if args.json:
            print(json.dumps(summary, indent=2))
            return 0

        print("=" * 60)
        print(f"BATCH ANALYSIS ({summary['reviews']} reviews from {summary['source']})")
        print("=" * 60)
        print("Labels:")
        for label, count in sorted(labels.items()):
            print(f"  {label:18} {count}")
        print("Actions:")
        for code, count in summary["actions"].items():
            print(f"  {code:18} {count}")
        if fallbacks:
            print(f"Lexical fallback used {fallbacks} times")
        return 0

    except Exception as e:
        print(f"ERROR: Batch analysis failed: {e}")
        logging.exception("Batch analysis failed")
        return 1


def cmd_explain(args):
    """Print the lexical scorer trace."""
    try:
        settings = get_settings()
        lexicon = None
        if settings.classifier.lexicon_path:
            lexicon = Lexicon.from_json(settings.classifier.lexicon_path)
        breakdown = LexicalSentimentScorer(lexicon=lexicon).explain(args.text)

        if args.json:
            print(json.dumps(breakdown.to_dict(), indent=2))
        else:
            print(breakdown.get_explanation())
        return 0

    except Exception as e:
        print(f"ERROR: Explain failed: {e}")
        return 1


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="review-sentiment",
        description="Review sentiment analyzer and action resolver",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a review text")
    analyze_parser.add_argument("text", help="Review text")
    analyze_parser.add_argument("--json", action="store_true", help="Output as JSON")

    random_parser = subparsers.add_parser("random", help="Analyze a random review from the dataset")
    random_parser.add_argument("--json", action="store_true", help="Output as JSON")

    batch_parser = subparsers.add_parser("batch", help="Analyze every review in the dataset")
    batch_parser.add_argument(
        "--limit",
        type=int,
        help="Limit number of reviews to analyze",
    )
    batch_parser.add_argument(
        "--no-audit",
        action="store_true",
        help="Do not post audit records for this run",
    )
    batch_parser.add_argument("--json", action="store_true", help="Output summary as JSON")

    explain_parser = subparsers.add_parser("explain", help="Show the lexical score breakdown")
    explain_parser.add_argument("text", help="Review text")
    explain_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    try:
        log_config = get_settings().logging
    except ValueError as e:
        print(f"ERROR: Invalid configuration: {e}")
        return 1

    setup_logging_from_config(log_config, verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "analyze": cmd_analyze,
        "random": cmd_random,
        "batch": cmd_batch,
        "explain": cmd_explain,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
