"""
Tests for the CLI entry point and text rendering.
"""

import os
import tempfile

import pytest

import main
from storefront.panel import ReviewPanel
from storefront.render import render_bar, render_panel, render_stars
from storefront.samples import SAMPLE_AVERAGE_RATING, SAMPLE_DISTRIBUTION, SAMPLE_TOTAL_REVIEWS, sample_reviews
from storefront.utils.storage import ReviewStore


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the CLI from attaching file handlers during tests."""
    monkeypatch.setattr(main, "setup_logging", lambda log_level="INFO": None)


def test_render_helpers():
    """Test star and bar rendering."""
    assert render_stars(3) == "★★★☆☆"
    assert render_bar(50, width=10) == "#####....."


def test_render_panel_sample():
    """Test the text panel for verified sample reviews."""
    panel = ReviewPanel(
        sample_reviews(),
        average_rating=SAMPLE_AVERAGE_RATING,
        total_reviews=SAMPLE_TOTAL_REVIEWS,
        distribution=SAMPLE_DISTRIBUTION
    )
    panel.select_filter("verified")

    text = render_panel(panel.view())

    assert "Based on 24 reviews" in text
    assert "Showing 2 reviews" in text
    assert "John Doe (Verified Purchase)" in text
    assert "Mike K." not in text


def test_main_sample_data(capsys):
    """Test the CLI on sample data, most helpful first."""
    with pytest.raises(SystemExit) as exc:
        main.main(["--sort", "helpful"])

    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "Official Retailer" in out
    assert out.index("John Doe") < out.index("Sarah M.") < out.index("Mike K.")


def test_main_exports_stored_product(capsys):
    """Test the CLI on a stored product with CSV export."""
    with tempfile.TemporaryDirectory() as tmpdir:
        ReviewStore(tmpdir).save_reviews("sneaker-42", sample_reviews())
        export_dir = os.path.join(tmpdir, "exports")

        with pytest.raises(SystemExit) as exc:
            main.main([
                "--product", "sneaker-42",
                "--data-root", tmpdir,
                "--export-dir", export_dir,
            ])

        assert exc.value.code == 0
        assert os.path.exists(os.path.join(export_dir, "sneaker-42_reviews.csv"))
        assert os.path.exists(os.path.join(export_dir, "sneaker-42_breakdown.csv"))
        assert "Based on 3 reviews" in capsys.readouterr().out


def test_main_missing_product_fails(capsys):
    """Test that an unknown product exits with code 1."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(SystemExit) as exc:
            main.main(["--product", "unknown", "--data-root", tmpdir])

    assert exc.value.code == 1
    assert "Rendering failed" in capsys.readouterr().out
