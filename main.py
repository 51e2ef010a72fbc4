"""
ReviewCraft - Guest Review Generation Agent

CLI entry point for generating platform-ready hotel reviews.
"""

import argparse
import json
import logging
import sys

from src.agents.composition import FirstPhraseSelector, SeededPhraseSelector
from src.models.agent_config import AgentConfiguration
from src.models.review_request import ReviewRequest
from src.orchestrator import ReviewGenerationAgent
from src.utils.export import ReviewExporter
from src.utils.monitoring import EventMonitor
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ReviewCraft - Generate a guest review for a review platform",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single review
  python main.py --hotel "Grand Hotel" \\
                 --feature "excellent customer service" \\
                 --feature "clean rooms" \\
                 --staff Sarah --comments "Great experience overall" \\
                 --platform booking

  # Batch mode (CSV columns: features, staff, comments, platform)
  python main.py --hotel "Grand Hotel" --batch requests.csv --output output/
        """
    )

    parser.add_argument(
        "--hotel",
        default=settings.HOTEL_NAME,
        help=f"Hotel name (default: {settings.HOTEL_NAME})"
    )

    parser.add_argument(
        "--feature",
        action="append",
        default=[],
        dest="features",
        help="Stay highlight (repeatable, order is kept)"
    )

    parser.add_argument("--staff", default="", help="Staff member to thank")
    parser.add_argument("--comments", default="", help="Free-text guest comments")

    parser.add_argument(
        "--platform",
        default=settings.DEFAULT_PLATFORM,
        help=f"Target platform: {', '.join(settings.PLATFORM_LIMITS)} (default: {settings.DEFAULT_PLATFORM})"
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Vary staff and closing phrases reproducibly (default: first phrase)"
    )

    parser.add_argument("--batch", help="CSV file of review requests")

    parser.add_argument(
        "--output",
        default=str(settings.OUTPUT_ROOT),
        help=f"Output directory for batch mode (default: {settings.OUTPUT_ROOT})"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        config = AgentConfiguration(hotel_name=args.hotel)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    selector = SeededPhraseSelector(args.seed) if args.seed is not None else FirstPhraseSelector()
    monitor = EventMonitor()
    agent = ReviewGenerationAgent(config=config, monitor=monitor, selector=selector)

    if args.batch:
        exporter = ReviewExporter(args.output, monitor=monitor)
        try:
            requests = exporter.load_requests(args.batch)
            results = [agent.generate(request) for request in requests]
            output_path = exporter.save_results(requests, results)
        except Exception as e:
            logger.error(f"Batch generation failed: {e}", exc_info=True)
            return 1

        succeeded = sum(1 for r in results if r.success)
        print(f"Generated {succeeded}/{len(results)} reviews: {output_path}")
        return 0

    request = ReviewRequest(
        features=args.features,
        staff=args.staff,
        comments=args.comments,
        platform=args.platform
    )
    result = agent.generate(request)
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
