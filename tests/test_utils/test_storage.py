"""
Tests for ReviewStore persistence and CSV exports.
"""

import json
import os
import tempfile

import pandas as pd

from storefront.samples import SAMPLE_DISTRIBUTION, sample_reviews
from storefront.stages.summary import supplied_summary
from storefront.utils.storage import ReviewStore


def _write_records(tmpdir, product_id, records):
    with open(os.path.join(tmpdir, "reviews", f"{product_id}.json"), 'w') as f:
        json.dump(records, f)


def test_save_and_load_reviews():
    """Test that saved reviews load back unchanged."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = ReviewStore(tmpdir)
        reviews = sample_reviews()

        store.save_reviews("sneaker-42", reviews)
        loaded = store.load_reviews("sneaker-42")

        assert loaded == reviews
        assert os.path.exists(os.path.join(tmpdir, "reviews", "sneaker-42.json"))


def test_load_missing_product():
    """Test that a missing file returns None."""
    with tempfile.TemporaryDirectory() as tmpdir:
        assert ReviewStore(tmpdir).load_reviews("nothing") is None


def test_load_skips_invalid_records():
    """Test that a record with an invalid rating is skipped."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = ReviewStore(tmpdir)
        records = [r.to_dict() for r in sample_reviews()]
        records[1]["rating"] = 9
        _write_records(tmpdir, "p1", records)

        loaded = store.load_reviews("p1")

        assert [r.review_id for r in loaded] == ["1", "3"]


def test_load_skips_non_object_records():
    """Test that numbers and strings in the review list are skipped."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = ReviewStore(tmpdir)
        valid = sample_reviews()[0].to_dict()
        _write_records(tmpdir, "p1", [valid, 42, "junk", None])

        loaded = store.load_reviews("p1")

        assert [r.review_id for r in loaded] == ["1"]


def test_load_skips_record_without_identifier():
    """Test that a record with no review_id or id is skipped."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = ReviewStore(tmpdir)
        records = [r.to_dict() for r in sample_reviews()]
        del records[0]["review_id"]
        _write_records(tmpdir, "p1", records)

        loaded = store.load_reviews("p1")

        assert [r.review_id for r in loaded] == ["2", "3"]


def test_load_malformed_json():
    """Test that an unparseable file returns None."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = ReviewStore(tmpdir)
        with open(os.path.join(tmpdir, "reviews", "p1.json"), 'w') as f:
            f.write("not json{{")

        assert store.load_reviews("p1") is None


def test_export_csv_tables():
    """Test CSV export of the review table and the rating breakdown."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = ReviewStore(tmpdir)

        reviews_path = store.export_reviews_csv(
            sample_reviews(), os.path.join(tmpdir, "out", "reviews.csv")
        )
        breakdown_path = store.export_breakdown_csv(
            supplied_summary(4.2, 24, SAMPLE_DISTRIBUTION), os.path.join(tmpdir, "out", "breakdown.csv")
        )

        reviews_df = pd.read_csv(reviews_path)
        assert list(reviews_df["rating"]) == [5, 4, 3]
        assert "title" in reviews_df.columns

        breakdown_df = pd.read_csv(breakdown_path)
        assert list(breakdown_df["stars"]) == [5, 4, 3, 2, 1]
        assert list(breakdown_df["percentage"]) == [50, 33, 13, 4, 0]
