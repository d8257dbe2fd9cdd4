"""
Marketplace search over the static supplier catalog.
"""
from typing import Any, Dict, List, Optional
from engine.schemas import MarketplaceListing, Platform
import config


class MarketplaceSearch:
    """
    In-memory supplier catalog with simple text search.

    Catalog entries come from config.MARKETPLACE_CATALOG.
    """

    def __init__(self, catalog: List[Dict[str, Any]] = None):
        source = catalog if catalog is not None else config.MARKETPLACE_CATALOG
        self.listings = [MarketplaceListing(**item) for item in source]

    def search(
        self,
        query: str = "",
        platform: Optional[Platform] = None,
        min_score: Optional[int] = None,
        limit: int = config.MARKETPLACE_DEFAULT_LIMIT
    ) -> List[MarketplaceListing]:
        """
        Find listings.

        Args:
            query: Case-insensitive text matched against name, category and note.
                Blank matches everything.
            platform: Only listings on this platform (optional)
            min_score: Only listings with trust score >= min_score (optional)
            limit: Maximum number of results

        Returns:
            Matching listings, highest trust score first, ties by name

        Example:
            >>> MarketplaceSearch().search("kitchen")[0].name
            'Yiwu Home Essentials'
        """
        needle = (query or "").strip().lower()

        results = []
        for listing in self.listings:
            if platform is not None and listing.platform != platform:
                continue
            if min_score is not None and listing.trust_score < min_score:
                continue
            if needle and not self._matches(listing, needle):
                continue
            results.append(listing)

        results.sort(key=lambda item: (-item.trust_score, item.name))
        return results[:max(limit, 0)]

    @staticmethod
    def _matches(listing: MarketplaceListing, needle: str) -> bool:
        haystack = (listing.name, listing.category, listing.note)
        return any(needle in field.lower() for field in haystack)


# Global instance
marketplace_search = MarketplaceSearch()
