"""
Tests for the brand carousel strip.
"""

from storefront.carousel import BrandCarousel
from storefront.models.brand import Brand
from storefront.samples import sample_brands


def test_strip_is_brands_twice():
    """Test that the strip is the brand list followed by one copy."""
    brands = sample_brands()
    carousel = BrandCarousel(brands)

    strip = carousel.strip()

    assert len(strip) == 2 * len(brands)
    assert strip[:len(brands)] == brands
    assert strip[len(brands):] == brands


def test_slot_keys_unique():
    """Test that every slot gets a unique name-index key."""
    slots = BrandCarousel([Brand("Nike"), Brand("Vans")]).slots()

    keys = [key for key, _ in slots]
    assert keys == ["Nike-0", "Vans-1", "Nike-2", "Vans-3"]
    assert len(set(keys)) == len(keys)


def test_empty_carousel():
    """Test that no brands gives an empty strip."""
    assert BrandCarousel([]).slots() == []
