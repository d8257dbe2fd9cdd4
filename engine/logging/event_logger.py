"""
JSONL event logger with Windows Event Viewer style Event IDs.

Async logging with a lock so concurrent requests never interleave lines.
"""
import asyncio
from pathlib import Path
from typing import Optional, List

from engine.schemas import Event, EventLevel, EventCategory, Platform, ScoringResult
import config


class EventLogger:
    """
    Async JSONL logger for SupplierScan events.

    Event ID ranges:
    - 1001 to 1999: Scan events
    - 2001 to 2999: History events
    - 3001 to 3999: Marketplace events
    - 4001 to 4999: System events

    All events written to logs/events.jsonl in append-only mode.
    """

    def __init__(self, log_path: Path = config.EVENT_LOG_FILE):
        self.log_path = log_path
        self.lock = asyncio.Lock()

    async def log_event(self, event: Event) -> None:
        """
        Append event to JSONL log file.

        Args:
            event: Event object to log
        """
        async with self.lock:
            # Directory may have been removed since startup
            self.log_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(event.to_jsonl() + "\n")

    async def log_scan(
        self,
        url: str,
        platform: Platform,
        scoring: ScoringResult,
        user_id: str = "system"
    ):
        """
        Log completed supplier scan.

        Event ID: 1001 (scanned) or 1002 (high-risk supplier)
        """
        if scoring.risk_label.value in config.HIGH_RISK_LABELS:
            event_id = 1002
            level = EventLevel.WARNING
            message = f"High-risk supplier scanned - {platform.value} rated {scoring.risk_label.value}"
        else:
            event_id = 1001
            level = EventLevel.INFORMATION
            message = f"Supplier scan completed - {platform.value} rated {scoring.risk_label.value}"

        event = Event(
            event_id=event_id,
            level=level,
            category=EventCategory.SCAN,
            message=message,
            user_id=user_id,
            details={
                "url": url[:200] + "..." if len(url) > 200 else url,
                "platform": platform.value,
                "scores": {
                    "overall": scoring.overall,
                    "shipping": scoring.shipping,
                    "quality": scoring.quality,
                    "communication": scoring.communication,
                    "stability": scoring.stability
                },
                "risk_label": scoring.risk_label.value,
                "warning_count": len(scoring.warnings)
            }
        )
        await self.log_event(event)

    async def log_scan_failure(self, url: str, error: str, user_id: str = "system"):
        """
        Log scan that raised.

        Event ID: 1003
        """
        event = Event(
            event_id=1003,
            level=EventLevel.ERROR,
            category=EventCategory.SCAN,
            message=config.EVENT_IDS[1003],
            user_id=user_id,
            details={"url": url, "error": error}
        )
        await self.log_event(event)

    async def log_history_cleared(self, user_id: str, removed: int):
        """
        Log history reset for user.

        Event ID: 2001
        """
        event = Event(
            event_id=2001,
            level=EventLevel.INFORMATION,
            category=EventCategory.HISTORY,
            message=f"Scan history cleared for {user_id}",
            user_id=user_id,
            details={"removed": removed}
        )
        await self.log_event(event)

    async def log_marketplace_search(
        self,
        query: str,
        result_count: int,
        platform: Optional[Platform] = None
    ):
        """
        Log marketplace search.

        Event ID: 3001
        """
        event = Event(
            event_id=3001,
            level=EventLevel.INFORMATION,
            category=EventCategory.MARKETPLACE,
            message=f"Marketplace search: '{query}' - {result_count} result(s)",
            details={
                "query": query,
                "platform": platform.value if platform else None,
                "result_count": result_count
            }
        )
        await self.log_event(event)

    async def log_system_event(
        self,
        event_id: int,
        message: str,
        details: Optional[dict] = None
    ):
        """
        Log system-level event.

        Event IDs:
        - 4001: Service started
        """
        event = Event(
            event_id=event_id,
            level=EventLevel.INFORMATION,
            category=EventCategory.SYSTEM,
            message=message,
            details=details or {}
        )
        await self.log_event(event)

    def read_events(self, limit: int = 100, level: Optional[EventLevel] = None) -> List[Event]:
        """
        Read recent events from log.

        Args:
            limit: Maximum number of events to return
            level: Filter by event level (optional)

        Returns:
            List of Event objects (most recent first)
        """
        if limit <= 0 or not self.log_path.exists():
            return []

        events = []
        with open(self.log_path, "r", encoding="utf-8") as f:
            lines = f.readlines()

        # Most recent events first
        for line in reversed(lines):
            if not line.strip():
                continue
            try:
                event = Event.model_validate_json(line)
            except ValueError:
                # Skip malformed lines
                continue
            if level is None or event.level == level:
                events.append(event)
                if len(events) >= limit:
                    break

        return events

    def get_event_count(self) -> int:
        """Get total number of events logged"""
        if not self.log_path.exists():
            return 0

        with open(self.log_path, "r", encoding="utf-8") as f:
            return sum(1 for line in f if line.strip())


# Global logger instance
logger = EventLogger()
