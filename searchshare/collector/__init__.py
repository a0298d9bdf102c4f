"""Provider response adapters."""

from .normalize import (
    extract_items,
    normalize_ranked_keyword_items,
    normalize_search_volume_items,
)

__all__ = [
    "extract_items",
    "normalize_ranked_keyword_items",
    "normalize_search_volume_items",
]
