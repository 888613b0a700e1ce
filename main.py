"""
Storefront Review Panel

CLI entry point for rendering a product's review panel as text.
"""

import argparse
import logging
import os
import sys

from storefront.carousel import BrandCarousel
from storefront.panel import ReviewPanel
from storefront.render import render_carousel, render_panel
from storefront.samples import (
    SAMPLE_AVERAGE_RATING,
    SAMPLE_DISTRIBUTION,
    SAMPLE_TOTAL_REVIEWS,
    sample_brands,
    sample_reviews,
)
from storefront.stages.filtering import FilterKey
from storefront.stages.sorting import SortKey
from storefront.stages.summary import SUMMARY_POLICIES
from storefront.utils.storage import ReviewStore
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Storefront - Product Review Panel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render the sample reviews, most helpful first
  python main.py --sort helpful

  # Render a stored product's verified reviews
  python main.py --product sneaker-42 --filter verified

  # Derive the breakdown from the reviews and export CSV tables
  python main.py --reviews-file reviews.json --summary-policy derived \\
                 --export-dir output
        """
    )

    parser.add_argument(
        "--product",
        help="Product ID to load from <data-root>/reviews/<product>.json"
    )

    parser.add_argument(
        "--reviews-file",
        help="Path to a JSON list of reviews (overrides --product)"
    )

    parser.add_argument(
        "--data-root",
        default=str(settings.DATA_ROOT),
        help=f"Data directory (default: {settings.DATA_ROOT})"
    )

    parser.add_argument(
        "--sort",
        default=settings.DEFAULT_SORT_KEY,
        choices=[key.value for key in SortKey],
        help=f"Sort order (default: {settings.DEFAULT_SORT_KEY})"
    )

    parser.add_argument(
        "--filter",
        default=settings.DEFAULT_FILTER_KEY,
        choices=[key.value for key in FilterKey],
        help=f"Review filter (default: {settings.DEFAULT_FILTER_KEY})"
    )

    parser.add_argument(
        "--summary-policy",
        default=settings.SUMMARY_POLICY,
        choices=list(SUMMARY_POLICIES),
        help=f"Where the rating summary comes from (default: {settings.SUMMARY_POLICY})"
    )

    parser.add_argument(
        "--export-dir",
        help="Write visible reviews and rating breakdown as CSV to this directory"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def build_panel(args, store: ReviewStore) -> ReviewPanel:
    """Create the panel from stored reviews, or from the sample data."""
    reviews = None
    if args.reviews_file:
        reviews = store.load_reviews_file(args.reviews_file)
    elif args.product:
        reviews = store.load_reviews(args.product)

    if reviews is None:
        if args.reviews_file or args.product:
            raise FileNotFoundError("No reviews could be loaded for the requested product")
        return ReviewPanel(
            sample_reviews(),
            average_rating=SAMPLE_AVERAGE_RATING,
            total_reviews=SAMPLE_TOTAL_REVIEWS,
            distribution=SAMPLE_DISTRIBUTION,
            summary_policy=args.summary_policy
        )

    # Stored collections carry no precomputed aggregates
    return ReviewPanel(reviews, summary_policy=args.summary_policy)


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    print("=" * 60)
    print("Storefront - Product Review Panel")
    print("=" * 60)
    print(f"Source: {args.reviews_file or args.product or 'sample data'}")
    print(f"Sort: {args.sort}")
    print(f"Filter: {args.filter}")
    print(f"Summary: {args.summary_policy}")
    print("=" * 60)
    print()

    try:
        store = ReviewStore(args.data_root)
        panel = build_panel(args, store)
        panel.select_sort(args.sort)
        panel.select_filter(args.filter)

        view = panel.view()
        print(render_panel(view))
        print()
        print("Official Retailer")
        print(render_carousel(BrandCarousel(sample_brands())))

        if args.export_dir:
            name = args.product or "reviews"
            reviews_path = store.export_reviews_csv(
                view.reviews, os.path.join(args.export_dir, f"{name}_reviews.csv")
            )
            breakdown_path = store.export_breakdown_csv(
                view.summary, os.path.join(args.export_dir, f"{name}_breakdown.csv")
            )
            print()
            print(f"Reviews table: {reviews_path}")
            print(f"Breakdown table: {breakdown_path}")

        logger.info("Review panel rendered successfully")
        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("\n⚠️  Interrupted")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Rendering failed: {e}", exc_info=True)
        print(f"\n❌ Rendering failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
