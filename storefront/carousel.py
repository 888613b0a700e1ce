"""
Brand carousel.

Lays out the looping strip of partner brands shown on the home page.
"""

import logging
from typing import Iterable, List, Tuple

from storefront.models.brand import Brand

logger = logging.getLogger(__name__)


class BrandCarousel:
    """
    Horizontal brand strip that scrolls in a seamless loop.

    The strip is the brand list followed by one copy of itself, so the
    animation can wrap from the end of the first copy to the start.
    """

    def __init__(self, brands: Iterable[Brand]):
        self.brands = tuple(brands)
        logger.debug(f"Initialized BrandCarousel with {len(self.brands)} brands")

    def strip(self) -> List[Brand]:
        return list(self.brands) * 2

    def slots(self) -> List[Tuple[str, Brand]]:
        """Strip entries with a unique "<name>-<index>" key each."""
        return [(f"{brand.name}-{index}", brand) for index, brand in enumerate(self.strip())]
