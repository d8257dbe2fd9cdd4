"""
Unit tests for platform detection, mock metrics, and alternatives.
"""
import pytest

from engine.schemas import Platform, SupplierMetrics
from engine.scoring.platform_detector import PlatformDetector, platform_detector
from engine.scoring.metrics_provider import MockMetricsProvider, metrics_provider
from engine.scoring.alternatives import build_alternatives


class TestPlatformDetector:
    """Test URL classification."""

    @pytest.mark.parametrize("url,platform", [
        ("https://www.aliexpress.com/item/1005001.html", Platform.ALIEXPRESS),
        ("HTTPS://WWW.ALIEXPRESS.US/item/1.html", Platform.ALIEXPRESS),
        ("https://example.com/?ref=AliExpress", Platform.ALIEXPRESS),
        ("https://www.alibaba.com/product-detail/x.html", Platform.ALIBABA),
        ("https://detail.1688.com/offer/123.html", Platform.CN_1688),
        ("https://cjdropshipping.com/product/abc", Platform.CJ_DROPSHIPPING),
        ("https://item.taobao.com/item.htm?id=1", Platform.TAOBAO),
        ("https://www.amazon.com/dp/B000", Platform.OTHER),
        ("", Platform.OTHER),
    ])
    def test_detect(self, url, platform):
        assert platform_detector.detect(url) == platform

    def test_first_pattern_wins(self):
        """aliexpress is checked before alibaba."""
        url = "https://s.click.aliexpress.com/redirect?from=alibaba"
        assert platform_detector.detect(url) == Platform.ALIEXPRESS

    def test_1688_needs_domain(self):
        """A bare number in a path is not the 1688 marketplace."""
        assert platform_detector.detect("https://shop.example.com/item/1688") == Platform.OTHER

    def test_custom_patterns(self):
        detector = PlatformDetector(patterns=[("temu", "OTHER"), ("taobao", "TAOBAO")])
        assert detector.detect("https://world.taobao.com") == Platform.TAOBAO

    def test_display_names(self):
        assert PlatformDetector.display_name(Platform.CJ_DROPSHIPPING) == "CJ Dropshipping"
        assert PlatformDetector.display_name(Platform.OTHER) == "Mixed"


class TestMetricsProvider:
    """Test placeholder metrics."""

    @pytest.mark.parametrize("platform,days", [
        (Platform.ALIEXPRESS, 12),
        (Platform.ALIBABA, 18),
        (Platform.CJ_DROPSHIPPING, 10),
        (Platform.CN_1688, 16),
        (Platform.TAOBAO, 16),
        (Platform.OTHER, 16),
    ])
    def test_shipping_days(self, platform, days):
        assert metrics_provider.get_metrics(platform).avg_shipping_days_us == days

    def test_shared_baseline(self):
        metrics = metrics_provider.get_metrics(Platform.OTHER)
        assert metrics.on_time_delivery_rate == 0.88
        assert metrics.refund_rate == 0.04
        assert metrics.dispute_rate == 0.02
        assert metrics.defect_rate == 0.03
        assert metrics.review_authenticity_score == 0.75
        assert metrics.response_time_hours == 8
        assert metrics.out_of_stock_frequency == 0.07
        assert metrics.price_volatility_score == 0.25
        assert metrics.trend_score == 0.1
        assert metrics.order_volume == 1200

    def test_partial_baseline(self):
        """A provider may leave metrics unknown."""
        provider = MockMetricsProvider(baseline={"order_volume": 5})
        metrics = provider.get_metrics(Platform.ALIBABA)
        assert metrics == SupplierMetrics(avg_shipping_days_us=18, order_volume=5)


class TestAlternatives:
    """Test mock alternative suppliers."""

    def test_two_suggestions(self):
        alternatives = build_alternatives(Platform.ALIEXPRESS)
        assert [a.name for a in alternatives] == [
            "AliExpress Supplier A",
            "AliExpress Supplier B",
        ]
        assert [a.trust_score for a in alternatives] == [90, 84]
        assert all(a.platform == Platform.ALIEXPRESS for a in alternatives)

    def test_other_platform_is_mixed(self):
        alternatives = build_alternatives(Platform.OTHER)
        assert alternatives[0].name == "Mixed Supplier A"
        assert alternatives[1].note == "Good performance with slightly slower shipping."

    def test_wire_format(self):
        data = build_alternatives(Platform.CN_1688)[0].model_dump(by_alias=True, mode="json")
        assert data == {
            "name": "1688 Supplier A",
            "platform": "1688",
            "trustScore": 90,
            "note": "High volume, stable shipping, low dispute rate.",
        }
