"""
Sample storefront data.

Default reviews, aggregates and partner brands used when the host does not
supply its own (demo mode).
"""

from typing import List

from storefront.models.brand import Brand
from storefront.models.review import Review

SAMPLE_AVERAGE_RATING = 4.2
SAMPLE_TOTAL_REVIEWS = 24

SAMPLE_DISTRIBUTION = [
    {"stars": 5, "count": 12, "percentage": 50},
    {"stars": 4, "count": 8, "percentage": 33},
    {"stars": 3, "count": 3, "percentage": 13},
    {"stars": 2, "count": 1, "percentage": 4},
    {"stars": 1, "count": 0, "percentage": 0},
]

BRAND_NAMES = ["Nike", "Adidas", "Jordan", "Converse", "Vans", "New Balance", "Puma", "Reebok"]


def sample_reviews() -> List[Review]:
    return [
        Review(
            review_id="1",
            user_id="user1",
            user_name="John Doe",
            rating=5,
            title="Amazing quality and comfort!",
            content=(
                "These sneakers exceeded my expectations. The build quality is excellent "
                "and they are incredibly comfortable for all-day wear. Definitely worth the price!"
            ),
            date="2024-01-15",
            verified=True,
            helpful=12,
            not_helpful=1,
            size="9",
            color="Black/White",
        ),
        Review(
            review_id="2",
            user_id="user2",
            user_name="Sarah M.",
            rating=4,
            title="Great shoes, fast delivery",
            content=(
                "Love the style and fit. Delivery was super quick. Only minor issue is "
                "they run slightly small, so consider sizing up."
            ),
            date="2024-01-10",
            verified=True,
            helpful=8,
            not_helpful=0,
            size="8",
            color="White",
        ),
        Review(
            review_id="3",
            user_id="user3",
            user_name="Mike K.",
            rating=3,
            title="Good but not great",
            content=(
                "Decent quality for the price. The design is nice but I expected better "
                "materials. Still comfortable though."
            ),
            date="2024-01-05",
            verified=False,
            helpful=3,
            not_helpful=2,
            size="10",
            color="Black",
        ),
    ]


def sample_brands() -> List[Brand]:
    # Text glyph logos, first letter of the brand
    return [Brand(name=name, logo=name[0]) for name in BRAND_NAMES]
