"""
Brand data model.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Brand:
    """A partner brand shown in the carousel."""
    name: str
    logo: Optional[str] = None  # Opaque logo reference (icon name, URL or glyph)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Brand name cannot be empty")
