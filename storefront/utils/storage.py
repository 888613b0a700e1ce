"""
Storage utility.

File I/O helpers for product review collections and CSV exports of the
panel view.
"""

import json
import os
import logging
from typing import Dict, List, Optional

import pandas as pd

from storefront.models.rating import RatingSummary
from storefront.models.review import Review

logger = logging.getLogger(__name__)

REVIEW_COLUMNS = [
    "review_id", "user_name", "rating", "title", "date",
    "verified", "helpful", "not_helpful", "size", "color",
]
BREAKDOWN_COLUMNS = ["stars", "count", "percentage"]


class ReviewStore:
    """
    Reads and writes review collections as JSON lists.

    Layout:
    - Reviews per product (data/reviews/<product_id>.json)
    """

    def __init__(self, data_root: str):
        """
        Initialize review store.

        Args:
            data_root: Root data directory (e.g., /path/to/data)
        """
        self.data_root = data_root
        self.reviews_dir = os.path.join(data_root, "reviews")

        os.makedirs(self.reviews_dir, exist_ok=True)

        logger.info(f"Initialized ReviewStore with data_root={data_root}")

    def _path_for(self, product_id: str) -> str:
        return os.path.join(self.reviews_dir, f"{product_id}.json")

    def save_reviews(self, product_id: str, reviews: List[Review]) -> None:
        """
        Save the review collection for a product.

        Args:
            product_id: Product identifier
            reviews: Reviews to persist
        """
        filepath = self._path_for(product_id)

        try:
            with open(filepath, 'w') as f:
                json.dump([review.to_dict() for review in reviews], f, indent=2)
            logger.info(f"Saved {len(reviews)} reviews to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save reviews for {product_id}: {e}")
            raise

    def load_reviews(self, product_id: str) -> Optional[List[Review]]:
        """
        Load the review collection for a product.

        Args:
            product_id: Product identifier

        Returns:
            List of reviews, or None if the file doesn't exist or can't be read.
            Individual invalid records are skipped.
        """
        return self.load_reviews_file(self._path_for(product_id))

    def load_reviews_file(self, filepath: str) -> Optional[List[Review]]:
        if not os.path.exists(filepath):
            logger.warning(f"No reviews found at {filepath}")
            return None

        try:
            with open(filepath, 'r') as f:
                records = json.load(f)
        except Exception as e:
            logger.error(f"Failed to load reviews from {filepath}: {e}")
            return None

        if not isinstance(records, list):
            logger.error(f"Expected a JSON list of reviews in {filepath}")
            return None

        reviews = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                logger.warning(f"Skipping invalid review #{index} in {filepath}: not a JSON object")
                continue

            try:
                reviews.append(Review.from_dict(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping invalid review #{index} in {filepath}: {e}")

        logger.debug(f"Loaded {len(reviews)} reviews from {filepath}")
        return reviews

    def export_reviews_csv(self, reviews: List[Review], output_path: str) -> str:
        """
        Write the reviews as a CSV table, in the given order.

        Returns:
            Path to the CSV file
        """
        rows = [{column: review.to_dict()[column] for column in REVIEW_COLUMNS} for review in reviews]
        df = pd.DataFrame(rows, columns=REVIEW_COLUMNS)
        return self._write_csv(df, output_path)

    def export_breakdown_csv(self, summary: RatingSummary, output_path: str) -> str:
        """Write the per-star breakdown as a CSV table, highest star first."""
        rows: List[Dict] = [entry.to_dict() for entry in summary.distribution]
        df = pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)
        return self._write_csv(df, output_path)

    def _write_csv(self, df: pd.DataFrame, output_path: str) -> str:
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        try:
            df.to_csv(output_path, index=False)
        except Exception as e:
            logger.error(f"Failed to write {output_path}: {e}")
            raise

        logger.info(f"Exported {len(df)} rows to {output_path}")
        return output_path


# Design Rationale and Trade-offs:
#
# 1. Why skip invalid records instead of failing the whole file?
#    - One bad review shouldn't hide the rest of the product's reviews
#    - Trade-off: Data loss is only visible in the logs
#
# 2. Why return None on read failures but raise on write failures?
#    - A missing collection is expected (product without reviews yet)
#    - A failed write would lose data silently
#
# 3. Why pandas for the CSV exports?
#    - DataFrame.to_csv handles quoting and column order
#    - Trade-off: Adds pandas dependency for a small table
