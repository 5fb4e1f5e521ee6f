"""Command-line interface for ReviewSense."""

import argparse
import json
import logging
import random
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants
from .core.normalizer import normalize
from .services.dataset_loader import DatasetLoader
from .services.review_analyzer import ReviewAnalyzer
from .ui.presenter import count_label, review_text, sentiment_view, status_chip
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _build_analyzer(args) -> ReviewAnalyzer:
    loader = DatasetLoader(source=args.dataset)
    rng = random.Random(args.seed) if getattr(args, "seed", None) is not None else None
    return ReviewAnalyzer(loader=loader, rng=rng)


def cmd_load(args) -> bool:
    """Load command."""
    analyzer = _build_analyzer(args)
    outcome = analyzer.reload()

    print(status_chip(outcome.status, outcome.status_text))
    print(count_label(analyzer.store.count))
    if outcome.error:
        print(f"Error: {outcome.error}")
        return False
    return True


def cmd_analyze(args) -> bool:
    """Analyze a random review from the dataset."""
    analyzer = _build_analyzer(args)

    ingestion = analyzer.reload()
    print(status_chip(ingestion.status, ingestion.status_text))
    print(count_label(analyzer.store.count))

    def show_review(review):
        print(f"\nReview:\n  {review_text(review)}")

    outcome = analyzer.analyze(token=args.token, on_review=show_review)

    if args.out:
        data = prepare_export(outcome, analyzer.loader.source, analyzer.store.count)
        export_to_json(data, args.out)
        print(f"Results exported to {args.out}")

    if outcome.error:
        print(f"\nError: {outcome.error}")
        return False

    view = sentiment_view(outcome.result)
    print(f"\nSentiment: {view.icon} {view.label}")
    print(f"  {view.score_text}")
    return True


def cmd_normalize(args) -> bool:
    """Normalize a saved classifier response."""
    try:
        if args.input_file == "-":
            raw = json.load(sys.stdin)
        else:
            with open(args.input_file, 'r', encoding='utf-8') as f:
                raw = json.load(f)
    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return False
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")
        return False

    result = normalize(raw)
    print(json.dumps(result.to_dict() if result else None, indent=2))
    return True


def cmd_ui(args) -> bool:
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return False

    print("Launching ReviewSense UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
        return False
    except KeyboardInterrupt:
        print("\nUI stopped by user")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ReviewSense - Random Review Sentiment Demo")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Load command
    load_parser = subparsers.add_parser('load', help='Load the reviews TSV and report its status')
    load_parser.add_argument('--dataset', help='Path or URL of the reviews TSV')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Classify a random review')
    analyze_parser.add_argument('--dataset', help='Path or URL of the reviews TSV')
    analyze_parser.add_argument('--token', help='Hugging Face token (defaults to HF_API_TOKEN)')
    analyze_parser.add_argument('--seed', type=int, help='Seed for the random review pick')
    analyze_parser.add_argument('--out', help='Output JSON file')

    # Normalize command
    normalize_parser = subparsers.add_parser('normalize', help='Normalize a saved API response')
    normalize_parser.add_argument('input_file', help="JSON file with the raw response, '-' for stdin")

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    commands = {
        'load': cmd_load,
        'analyze': cmd_analyze,
        'normalize': cmd_normalize,
        'ui': cmd_ui,
    }

    try:
        ok = commands[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)

    if not ok:
        sys.exit(1)
