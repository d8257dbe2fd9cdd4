"""
Platform detection from supplier URLs.

Lower-cased substring lookup against known marketplace domains.
"""
from typing import List, Tuple
from engine.schemas import Platform
import config


class PlatformDetector:
    """
    Classify a supplier URL by marketplace.

    Uses an ordered pattern table (config.PLATFORM_PATTERNS); the first
    substring found anywhere in the URL wins, otherwise OTHER.
    """

    def __init__(self, patterns: List[Tuple[str, str]] = None):
        self.patterns = patterns or config.PLATFORM_PATTERNS

    def detect(self, url: str) -> Platform:
        """
        Detect platform for URL.

        Args:
            url: Supplier or product URL (any case)

        Returns:
            Matching Platform, or Platform.OTHER
        """
        lowered = (url or "").lower()

        for pattern, platform in self.patterns:
            if pattern in lowered:
                return Platform(platform)

        return Platform.OTHER

    @staticmethod
    def display_name(platform: Platform) -> str:
        return config.PLATFORM_DISPLAY_NAMES.get(
            platform.value, config.PLATFORM_DISPLAY_NAMES["OTHER"]
        )


# Global instance
platform_detector = PlatformDetector()
