"""
ScanPipeline: Orchestrates platform detection, metrics lookup, scoring, and history.
"""
from typing import List
from engine.scoring.platform_detector import platform_detector
from engine.scoring.metrics_provider import metrics_provider
from engine.scoring.trust_score_engine import trust_score_engine
from engine.scoring.alternatives import build_alternatives
from engine.history.scan_history import scan_history
from engine.logging.event_logger import logger
from engine.schemas import HistoryEntry, PlatformInfo, Platform, ScanResponse
import config


class ScanPipeline:
    """
    End-to-end supplier scan.

    Flow:
    1. Detect platform from URL
    2. Fetch metrics for platform
    3. Compute trust score
    4. Build alternative suggestions
    5. Log scan event, then record history entry
    6. Return scan response
    """

    def __init__(
        self,
        detector=platform_detector,
        provider=metrics_provider,
        engine=trust_score_engine,
        history=scan_history,
        event_logger=logger
    ):
        self.detector = detector
        self.provider = provider
        self.engine = engine
        self.history = history
        self.logger = event_logger

    async def scan(self, url: str, user_id: str = "demo-user") -> ScanResponse:
        """
        Scan a supplier URL.

        Args:
            url: Supplier or product URL
            user_id: User identifier (for scan history)

        Returns:
            ScanResponse with platform, scoring and alternatives
        """
        platform = self.detector.detect(url)
        metrics = self.provider.get_metrics(platform)
        scoring = self.engine.score(metrics)
        alternatives = build_alternatives(platform)

        await self.logger.log_scan(
            url=url,
            platform=platform,
            scoring=scoring,
            user_id=user_id
        )

        self.history.add(
            user_id,
            HistoryEntry(
                url=url,
                platform=platform,
                overall=scoring.overall,
                risk_label=scoring.risk_label
            )
        )

        return ScanResponse(
            url=url,
            platform=platform,
            scoring=scoring,
            alternatives=alternatives
        )

    def known_platforms(self) -> List[PlatformInfo]:
        """All platforms with display names, OTHER last"""
        return [
            PlatformInfo(platform=platform, display_name=self.detector.display_name(platform))
            for platform in Platform
        ]

    async def initialize(self):
        """
        Log service start.

        Call this once at startup.
        """
        await self.logger.log_system_event(
            event_id=4001,
            message=config.EVENT_IDS[4001],
            details={
                "version": config.API_VERSION,
                "known_platforms": len(config.PLATFORM_PATTERNS),
                "history_limit": self.history.limit
            }
        )


# Global instance
scan_pipeline = ScanPipeline()
