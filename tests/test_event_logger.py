"""
Unit tests for the JSONL event logger.
"""
import asyncio

from engine.schemas import EventLevel, EventCategory, Platform, SupplierMetrics
from engine.logging.event_logger import EventLogger
from engine.scoring.trust_score_engine import compute_trust_score


class TestEventLogger:
    """Test event writing and reading."""

    def test_scan_event(self, tmp_path):
        event_logger = EventLogger(log_path=tmp_path / "events.jsonl")
        scoring = compute_trust_score(SupplierMetrics(order_volume=500))

        asyncio.run(event_logger.log_scan(
            url="https://www.alibaba.com/x",
            platform=Platform.ALIBABA,
            scoring=scoring,
            user_id="alice"
        ))

        events = event_logger.read_events()
        assert len(events) == 1
        assert events[0].event_id == 1001
        assert events[0].category == EventCategory.SCAN
        assert events[0].user_id == "alice"
        assert events[0].details["scores"]["overall"] == scoring.overall

    def test_high_risk_scan_is_warning(self, tmp_path):
        event_logger = EventLogger(log_path=tmp_path / "events.jsonl")
        scoring = compute_trust_score(SupplierMetrics(
            avg_shipping_days_us=40, on_time_delivery_rate=0.2,
            defect_rate=0.5, response_time_hours=72
        ))

        asyncio.run(event_logger.log_scan(
            url="https://example.com", platform=Platform.OTHER, scoring=scoring
        ))

        event = event_logger.read_events()[0]
        assert event.event_id == 1002
        assert event.level == EventLevel.WARNING

    def test_most_recent_first_and_level_filter(self, tmp_path):
        event_logger = EventLogger(log_path=tmp_path / "events.jsonl")

        async def write():
            await event_logger.log_system_event(4001, "started")
            await event_logger.log_scan_failure("https://example.com", "boom")
            await event_logger.log_history_cleared("alice", 3)

        asyncio.run(write())

        assert [e.event_id for e in event_logger.read_events()] == [2001, 1003, 4001]
        assert [e.event_id for e in event_logger.read_events(limit=1)] == [2001]
        errors = event_logger.read_events(level=EventLevel.ERROR)
        assert [e.event_id for e in errors] == [1003]
        assert event_logger.get_event_count() == 3

    def test_skips_malformed_lines(self, tmp_path):
        log_path = tmp_path / "events.jsonl"
        event_logger = EventLogger(log_path=log_path)
        asyncio.run(event_logger.log_marketplace_search("gear", 2))

        with open(log_path, "a", encoding="utf-8") as f:
            f.write("not json\n\n")

        events = event_logger.read_events()
        assert [e.event_id for e in events] == [3001]
        assert events[0].details["result_count"] == 2

    def test_missing_log(self, tmp_path):
        event_logger = EventLogger(log_path=tmp_path / "nested" / "events.jsonl")
        assert event_logger.read_events() == []
        assert event_logger.get_event_count() == 0

    def test_recreates_directory(self, tmp_path):
        event_logger = EventLogger(log_path=tmp_path / "nested" / "events.jsonl")
        asyncio.run(event_logger.log_system_event(4001, "started"))
        assert event_logger.get_event_count() == 1

    def test_non_positive_limit_reads_nothing(self, tmp_path):
        event_logger = EventLogger(log_path=tmp_path / "events.jsonl")
        asyncio.run(event_logger.log_system_event(4001, "started"))

        assert event_logger.read_events(limit=0) == []
        assert event_logger.read_events(limit=-5) == []
        assert len(event_logger.read_events(limit=1)) == 1
