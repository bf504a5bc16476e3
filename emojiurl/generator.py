"""Random slug generation."""

import secrets
from typing import Optional, Sequence

from .catalog import EMOJI_CATALOG


class SlugGenerator:
    """Generate random emoji slugs."""
    
    def __init__(
        self,
        default_length: int = 5,
        catalog: Sequence[str] = EMOJI_CATALOG,
    ):
        """Initialize slug generator.
        
        Args:
            default_length: Number of glyphs in a generated slug
            catalog: Glyphs to draw from
        """
        if default_length < 1:
            raise ValueError("default_length must be at least 1")
        if not catalog:
            raise ValueError("catalog must not be empty")
        
        self.default_length = default_length
        self.catalog = tuple(catalog)
    
    def generate_candidate(self, length: Optional[int] = None) -> str:
        """Generate a random candidate slug.
        
        Each position is drawn independently, so glyphs may repeat.
        
        Args:
            length: Number of glyphs (uses default if not specified)
            
        Returns:
            Random emoji slug
        """
        length = length or self.default_length
        return "".join(secrets.choice(self.catalog) for _ in range(length))
    
    @property
    def keyspace_size(self) -> int:
        """Number of distinct slugs at the default length."""
        return len(self.catalog) ** self.default_length
