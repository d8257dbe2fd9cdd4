"""
Supplier metrics source.

Deterministic placeholder: metrics are derived from the platform label only.
A scraper or data API can replace it as long as it returns SupplierMetrics,
with any field left as None when unknown.
"""
from typing import Dict, Any
from engine.schemas import Platform, SupplierMetrics
import config


class MockMetricsProvider:
    """
    Fixed metric bag per platform.

    Only shipping days vary (config.PLATFORM_SHIPPING_DAYS); everything else
    comes from config.BASELINE_METRICS.
    """

    def __init__(
        self,
        baseline: Dict[str, Any] = None,
        shipping_days: Dict[str, float] = None,
        default_shipping_days: float = config.DEFAULT_SHIPPING_DAYS
    ):
        self.baseline = baseline or config.BASELINE_METRICS
        self.shipping_days = shipping_days or config.PLATFORM_SHIPPING_DAYS
        self.default_shipping_days = default_shipping_days

    def get_metrics(self, platform: Platform) -> SupplierMetrics:
        days = self.shipping_days.get(platform.value, self.default_shipping_days)
        return SupplierMetrics(avg_shipping_days_us=days, **self.baseline)


# Global instance
metrics_provider = MockMetricsProvider()
