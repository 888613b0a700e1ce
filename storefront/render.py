"""
Plain-text rendering of the storefront widgets for the CLI.
"""

from typing import List

from storefront.carousel import BrandCarousel
from storefront.models.rating import RatingSummary
from storefront.models.review import Review
from storefront.panel import PanelView
import config.settings as settings

FILLED_STAR = "★"
EMPTY_STAR = "☆"


def render_stars(rating: int) -> str:
    filled = min(max(rating, 0), settings.MAX_RATING)
    return FILLED_STAR * filled + EMPTY_STAR * (settings.MAX_RATING - filled)


def render_bar(percentage: float, width: int = settings.BAR_WIDTH_CHARS) -> str:
    filled = int(round(width * min(max(percentage, 0), 100) / 100))
    return "#" * filled + "." * (width - filled)


def render_summary(summary: RatingSummary) -> List[str]:
    lines = [
        f"{summary.average_rating} {render_stars(summary.star_icons)}",
        f"Based on {summary.total_reviews} reviews",
        "",
        "Rating Breakdown",
    ]
    for entry in summary.distribution:
        lines.append(f"  {entry.stars}{FILLED_STAR} [{render_bar(entry.bar_width)}] {entry.count}")
    return lines


def render_review(review: Review) -> List[str]:
    header = review.user_name
    if review.verified:
        header += " (Verified Purchase)"

    lines = [
        f"{header} | {review.date} | {render_stars(review.rating)}",
        f"  {review.title}",
        f"  {review.content}",
    ]

    details = []
    if review.size:
        details.append(f"Size: {review.size}")
    if review.color:
        details.append(f"Color: {review.color}")
    if details:
        lines.append("  " + "  ".join(details))

    lines.append(f"  Helpful ({review.helpful})  Not Helpful ({review.not_helpful})")
    return lines


def render_panel(view: PanelView) -> str:
    lines = render_summary(view.summary)
    lines.append("")
    lines.append(f"Sort: {view.sort_key} | Filter: {view.filter_key} | Showing {len(view.reviews)} reviews")

    for review in view.reviews:
        lines.append("")
        lines.extend(render_review(review))

    return "\n".join(lines)


def render_carousel(carousel: BrandCarousel) -> str:
    return " | ".join(brand.name for brand in carousel.strip())
